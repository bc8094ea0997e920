"""
Sentiment Pipeline

Main entry point for chapter sentiment analysis. Takes corpus lines through
segmentation, tokenization, stop-word removal and lexicon matching, and
aggregates the result into a SentimentReport.
"""

from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional

from book_sentiment_analyzer.config import Settings
from book_sentiment_analyzer.ingest.segmenter import segment_corpus
from book_sentiment_analyzer.models.line import ChapterLine, Line
from book_sentiment_analyzer.models.sentiment import (
    ChapterScore,
    Polarity,
    SectionScore,
    SentimentEntry,
    SentimentHit,
)
from .aggregator import (
    ChapterRatio,
    WordCount,
    count_sentiment,
    count_words,
    most_negative_chapters,
    negative_ratios,
    score_chapters,
    score_sections,
    word_contributions,
)
from .joiner import join_sentiment
from .lexicon import Lexicon, load_lexicon
from .stopwords import build_stop_words, load_stop_words
from .tokenizer import remove_stop_words, tokenize_lines


@dataclass
class PipelineProgress:
    """Progress tracking for a pipeline run."""
    phase: str
    current: int
    total: int
    message: str = ""


@dataclass
class SentimentReport:
    """Everything produced by one pipeline run."""

    chapter_lines: list[ChapterLine]
    hits: list[SentimentHit]
    entries: list[SentimentEntry]
    chapter_scores: list[ChapterScore]
    section_scores: list[SectionScore]
    top_words: dict[Polarity, list[WordCount]]
    ratios: list[ChapterRatio]
    section_size: int

    @property
    def books(self) -> list[str]:
        return list(dict.fromkeys(line.book for line in self.chapter_lines))

    @property
    def most_negative(self) -> list[ChapterRatio]:
        return most_negative_chapters(self.ratios)

    def chapter_count(self, book: str) -> int:
        """Number of detected chapter headings in a book."""
        return max((line.chapter for line in self.chapter_lines if line.book == book), default=0)

    def to_dict(self) -> dict:
        """Convert to a JSON-serialisable summary."""
        return {
            "books": [
                {"book": book, "lines": sum(1 for line in self.chapter_lines if line.book == book),
                 "chapters": self.chapter_count(book)}
                for book in self.books
            ],
            "chapter_scores": [score.model_dump(mode="json") for score in self.chapter_scores],
            "section_size": self.section_size,
            "section_scores": [score.model_dump(mode="json") for score in self.section_scores],
            "top_words": {
                polarity.value: [{"word": w.word, "count": w.count} for w in words]
                for polarity, words in self.top_words.items()
            },
            "most_negative_chapters": [
                {"book": r.book, "chapter": r.chapter, "negative": r.negative,
                 "words": r.words, "ratio": round(r.ratio, 4)}
                for r in self.most_negative
            ],
        }


class SentimentPipeline:
    """
    Scores the sentiment of each chapter in a corpus.

    Usage:
        pipeline = SentimentPipeline.from_settings()
        report = pipeline.run(load_corpus([Path("emma.txt")]))
        for score in report.chapter_scores:
            print(score.book, score.chapter, score.score)
    """

    def __init__(
        self,
        lexicon: Lexicon,
        stop_words: frozenset[str],
        section_size: int = 80,
        top_words: int = 10,
        max_workers: int = 1,
        progress_callback: Optional[Callable[[PipelineProgress], None]] = None,
    ):
        if not lexicon:
            raise ValueError("Sentiment lexicon is empty")
        if section_size < 1:
            raise ValueError(f"section_size must be at least 1, got {section_size}")

        self.lexicon = lexicon
        self.stop_words = frozenset(stop_words)
        self.section_size = section_size
        self.top_words = top_words
        self.max_workers = max_workers
        self.progress_callback = progress_callback

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        progress_callback: Optional[Callable[[PipelineProgress], None]] = None,
    ) -> "SentimentPipeline":
        """Build a pipeline, loading the lexicon and stop words named in settings."""
        if settings is None:
            from book_sentiment_analyzer.config import get_settings
            settings = get_settings()

        lexicon = load_lexicon(settings.lexicon_path)
        base = load_stop_words(settings.stop_words_path) if settings.stop_words_path else None
        stop_words = build_stop_words(base=base, extra=settings.extra_stop_words)

        return cls(
            lexicon=lexicon,
            stop_words=stop_words,
            section_size=settings.section_size,
            top_words=settings.top_words,
            max_workers=settings.max_workers,
            progress_callback=progress_callback,
        )

    def _report_progress(self, phase: str, current: int, total: int, message: str = ""):
        """Report progress via callback if set."""
        if self.progress_callback:
            self.progress_callback(PipelineProgress(phase, current, total, message))

    def run(self, lines: Iterable[Line]) -> SentimentReport:
        """Run the full pipeline over a corpus of lines."""
        total = 4

        self._report_progress("segmenting", 0, total, "Detecting chapters...")
        chapter_lines = segment_corpus(lines, max_workers=self.max_workers)

        self._report_progress("tokenizing", 1, total, "Tokenizing lines...")
        tokens = list(tokenize_lines(chapter_lines))
        word_counts = count_words(tokens)

        self._report_progress("matching", 2, total, "Matching sentiment lexicon...")
        hits = list(join_sentiment(remove_stop_words(tokens, self.stop_words), self.lexicon))

        self._report_progress("aggregating", 3, total, "Scoring chapters...")
        entries = count_sentiment(hits)
        chapter_scores = score_chapters(entries)

        report = SentimentReport(
            chapter_lines=chapter_lines,
            hits=hits,
            entries=entries,
            chapter_scores=chapter_scores,
            section_scores=score_sections(hits, self.section_size),
            top_words=word_contributions(hits, self.top_words),
            ratios=negative_ratios(chapter_scores, word_counts),
            section_size=self.section_size,
        )

        self._report_progress("done", total, total, f"Scored {len(chapter_scores)} chapters")
        return report
