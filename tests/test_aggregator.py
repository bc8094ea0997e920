"""Tests for sentiment aggregation."""

import pytest

from book_sentiment_analyzer.models.line import Token
from book_sentiment_analyzer.models.sentiment import (
    ChapterScore,
    Polarity,
    SentimentEntry,
    SentimentHit,
)
from book_sentiment_analyzer.sentiment.aggregator import (
    count_sentiment,
    count_words,
    most_negative_chapters,
    negative_ratios,
    score_chapters,
    score_sections,
    word_contributions,
)

POS = Polarity.POSITIVE
NEG = Polarity.NEGATIVE


def hit(word: str, polarity: Polarity, book: str = "Emma", chapter: int = 1, line: int = 1) -> SentimentHit:
    return SentimentHit(word=word, book=book, chapter=chapter, line=line, polarity=polarity)


class TestCountSentiment:
    """Test grouping hits into entries."""

    def test_counts_per_chapter_and_polarity(self):
        hits = [hit("sad", NEG, chapter=2), hit("happy", POS), hit("glad", POS), hit("angry", NEG, chapter=2)]
        entries = count_sentiment(hits)

        assert entries == [
            SentimentEntry(book="Emma", chapter=1, polarity=POS, count=2),
            SentimentEntry(book="Emma", chapter=2, polarity=NEG, count=2),
        ]

    def test_ordering(self):
        hits = [
            hit("sad", NEG, book="Persuasion", chapter=3),
            hit("good", POS, book="Emma", chapter=2),
            hit("bad", NEG, book="Persuasion", chapter=1),
            hit("fine", POS, book="Persuasion", chapter=1),
        ]
        keys = [(e.book, e.chapter, e.polarity) for e in count_sentiment(hits)]
        assert keys == [
            ("Persuasion", 1, POS),
            ("Persuasion", 1, NEG),
            ("Persuasion", 3, NEG),
            ("Emma", 2, POS),
        ]

    def test_empty(self):
        assert count_sentiment([]) == []


class TestScoreChapters:
    """Test net chapter scores."""

    def test_score_is_positive_minus_negative(self):
        entries = [
            SentimentEntry(book="Emma", chapter=1, polarity=POS, count=5),
            SentimentEntry(book="Emma", chapter=1, polarity=NEG, count=8),
        ]
        (score,) = score_chapters(entries)
        assert (score.positive, score.negative, score.score) == (5, 8, -3)

    def test_missing_polarity_is_zero(self):
        entries = [
            SentimentEntry(book="Emma", chapter=1, polarity=POS, count=4),
            SentimentEntry(book="Emma", chapter=2, polarity=NEG, count=2),
        ]
        scores = score_chapters(entries)
        assert [(s.chapter, s.positive, s.negative, s.score) for s in scores] == [
            (1, 4, 0, 4),
            (2, 0, 2, -2),
        ]

    def test_stable_order(self):
        entries = [
            SentimentEntry(book="B", chapter=2, polarity=POS, count=1),
            SentimentEntry(book="A", chapter=3, polarity=POS, count=1),
            SentimentEntry(book="B", chapter=1, polarity=NEG, count=1),
        ]
        assert [(s.book, s.chapter) for s in score_chapters(entries)] == [("B", 1), ("B", 2), ("A", 3)]

    def test_inconsistent_score_rejected(self):
        with pytest.raises(ValueError):
            ChapterScore(book="Emma", chapter=1, positive=1, negative=1, score=3)


class TestSections:
    """Test fixed-size line sections."""

    def test_sections_by_line(self):
        hits = [hit("good", POS, line=1), hit("bad", NEG, line=80), hit("bad", NEG, line=81)]
        scores = score_sections(hits, section_size=80)
        assert [(s.section, s.score) for s in scores] == [(0, 0), (1, -1)]

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            score_sections([], section_size=0)


class TestWordContributions:
    """Test the most common words per polarity."""

    def test_top_words(self):
        hits = [hit("happy", POS)] * 3 + [hit("good", POS)] * 3 + [hit("well", POS)] + [hit("poor", NEG)] * 2
        top = word_contributions(hits, top_n=2)

        assert [(w.word, w.count) for w in top[POS]] == [("good", 3), ("happy", 3)]
        assert [(w.word, w.count) for w in top[NEG]] == [("poor", 2)]

    def test_empty(self):
        assert word_contributions([]) == {POS: [], NEG: []}


class TestNegativeRatios:
    """Test the share of negative words per chapter."""

    def test_most_negative(self):
        tokens = [Token("w", "Emma", 1, 1)] * 10 + [Token("w", "Emma", 2, 2)] * 4 + [Token("w", "Emma", 0, 1)] * 2
        scores = [
            ChapterScore.from_counts(book="Emma", chapter=0, negative=2),
            ChapterScore.from_counts(book="Emma", chapter=1, positive=1, negative=2),
            ChapterScore.from_counts(book="Emma", chapter=2, negative=1),
        ]
        ratios = negative_ratios(scores, count_words(tokens))

        assert [r.ratio for r in ratios] == [1.0, 0.2, 0.25]
        (worst,) = most_negative_chapters(ratios)
        assert worst.chapter == 2
