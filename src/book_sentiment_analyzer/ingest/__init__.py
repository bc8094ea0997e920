"""Corpus loading and chapter segmentation."""

from book_sentiment_analyzer.ingest.loader import (
    load_book,
    book_lines,
    load_corpus,
    load_corpus_csv,
)
from book_sentiment_analyzer.ingest.segmenter import (
    is_chapter_heading,
    segment_book,
    segment_corpus,
    chapter_spans,
)

__all__ = [
    "load_book",
    "book_lines",
    "load_corpus",
    "load_corpus_csv",
    "is_chapter_heading",
    "segment_book",
    "segment_corpus",
    "chapter_spans",
]
