"""
Sentiment Aggregation

Counts lexicon hits per chapter and reduces them to net scores, plus the
supporting views used in reports: fixed-size sections, top contributing
words and the share of negative words per chapter.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Iterable

from book_sentiment_analyzer.models.line import Token
from book_sentiment_analyzer.models.sentiment import (
    ChapterScore,
    Polarity,
    SectionScore,
    SentimentEntry,
    SentimentHit,
)


ChapterKey = tuple[str, int]


@dataclass
class WordCount:
    """How often a lexicon word occurred."""
    word: str
    polarity: Polarity
    count: int


@dataclass
class ChapterRatio:
    """Share of a chapter's words that are negative."""
    book: str
    chapter: int
    negative: int
    words: int

    @property
    def ratio(self) -> float:
        return self.negative / self.words if self.words else 0.0


def _book_order(keys: Iterable[tuple]) -> dict[str, int]:
    """Map each book to the order in which it was first seen."""
    order: dict[str, int] = {}
    for key in keys:
        order.setdefault(key[0], len(order))
    return order


def count_sentiment(hits: Iterable[SentimentHit]) -> list[SentimentEntry]:
    """
    Count hits per (book, chapter, polarity).

    Ordered by book (first seen), then chapter, positive before negative.
    """
    counts: Counter[tuple[str, int, Polarity]] = Counter(
        (hit.book, hit.chapter, hit.polarity) for hit in hits
    )
    books = _book_order(counts)
    polarity_rank = {Polarity.POSITIVE: 0, Polarity.NEGATIVE: 1}

    return [
        SentimentEntry(book=book, chapter=chapter, polarity=polarity, count=count)
        for (book, chapter, polarity), count in sorted(
            counts.items(),
            key=lambda item: (books[item[0][0]], item[0][1], polarity_rank[item[0][2]]),
        )
    ]


def score_chapters(entries: Iterable[SentimentEntry]) -> list[ChapterScore]:
    """
    Reduce polarity counts to one net score per (book, chapter).

    A chapter with only one polarity counts the other as 0.
    """
    totals: dict[ChapterKey, dict[Polarity, int]] = {}
    for entry in entries:
        by_polarity = totals.setdefault((entry.book, entry.chapter), {})
        by_polarity[entry.polarity] = by_polarity.get(entry.polarity, 0) + entry.count

    books = _book_order(totals)

    return [
        ChapterScore.from_counts(
            book=book,
            chapter=chapter,
            positive=counts.get(Polarity.POSITIVE, 0),
            negative=counts.get(Polarity.NEGATIVE, 0),
        )
        for (book, chapter), counts in sorted(totals.items(), key=lambda item: (books[item[0][0]], item[0][1]))
    ]


def score_sections(hits: Iterable[SentimentHit], section_size: int = 80) -> list[SectionScore]:
    """Net score over consecutive blocks of section_size lines within each book."""
    if section_size < 1:
        raise ValueError(f"section_size must be at least 1, got {section_size}")

    counts: Counter[tuple[str, int, Polarity]] = Counter(
        (hit.book, (hit.line - 1) // section_size, hit.polarity) for hit in hits
    )
    books = _book_order(counts)
    sections = sorted({(book, section) for book, section, _ in counts}, key=lambda k: (books[k[0]], k[1]))

    return [
        SectionScore.from_counts(
            book=book,
            section=section,
            positive=counts[(book, section, Polarity.POSITIVE)],
            negative=counts[(book, section, Polarity.NEGATIVE)],
        )
        for book, section in sections
    ]


def word_contributions(hits: Iterable[SentimentHit], top_n: int = 10) -> dict[Polarity, list[WordCount]]:
    """Most frequent lexicon words for each polarity."""
    counts: Counter[tuple[str, Polarity]] = Counter((hit.word, hit.polarity) for hit in hits)

    contributions: dict[Polarity, list[WordCount]] = {polarity: [] for polarity in Polarity}
    for (word, polarity), count in sorted(counts.items(), key=lambda item: (-item[1], item[0][0])):
        if len(contributions[polarity]) < top_n:
            contributions[polarity].append(WordCount(word=word, polarity=polarity, count=count))

    return contributions


def count_words(tokens: Iterable[Token]) -> dict[ChapterKey, int]:
    """Count all word tokens per (book, chapter)."""
    return dict(Counter((token.book, token.chapter) for token in tokens))


def negative_ratios(scores: Iterable[ChapterScore], word_counts: dict[ChapterKey, int]) -> list[ChapterRatio]:
    """Share of negative words for each scored chapter."""
    return [
        ChapterRatio(
            book=score.book,
            chapter=score.chapter,
            negative=score.negative,
            words=word_counts.get((score.book, score.chapter), 0),
        )
        for score in scores
    ]


def most_negative_chapters(ratios: Iterable[ChapterRatio]) -> list[ChapterRatio]:
    """The chapter with the highest negative ratio in each book (front matter excluded)."""
    best: dict[str, ChapterRatio] = {}
    for ratio in ratios:
        if ratio.chapter == 0:
            continue
        current = best.get(ratio.book)
        if current is None or ratio.ratio > current.ratio:
            best[ratio.book] = ratio
    return list(best.values())
