"""Assign chapter numbers to the lines of each book."""

import re
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable

from book_sentiment_analyzer.models.line import ChapterLine, Line


# "Chapter 1", "CHAPTER IV", "chapter xii." - anchored at line start so that
# narrative mentions ("In this chapter we...") never count as headings.
# The number must be digits or a well-formed Roman numeral ending at a word
# boundary, so "Chapter did not..." is prose.
CHAPTER_HEADING = re.compile(
    r"^chapter\s+"
    r"(?:\d+|(?=[ivxlcdm])m{0,4}(?:cm|cd|d?c{0,3})(?:xc|xl|l?x{0,3})(?:ix|iv|v?i{0,3}))"
    r"\b",
    re.IGNORECASE,
)


@dataclass
class ChapterSpan:
    """Summary of one detected chapter."""

    book: str
    chapter: int
    heading: str | None  # None for chapter 0 (front matter)
    first_line: int
    last_line: int
    line_count: int


def is_chapter_heading(text: str) -> bool:
    """Return True if the line announces the start of a chapter."""
    return CHAPTER_HEADING.match(text) is not None


def segment_book(lines: Iterable[Line]) -> list[ChapterLine]:
    """
    Label each line of a single book with its chapter number.

    Lines before the first heading are chapter 0; a heading line belongs to
    the chapter it introduces.
    """
    segmented: list[ChapterLine] = []
    book: str | None = None
    chapter = 0

    for line in lines:
        if book is None:
            book = line.book
        elif line.book != book:
            raise ValueError(
                f"segment_book got lines from more than one book: {book!r}, {line.book!r}"
            )

        if is_chapter_heading(line.text):
            chapter += 1

        segmented.append(
            ChapterLine(book=line.book, text=line.text, position=line.position, chapter=chapter)
        )

    return segmented


def group_by_book(lines: Iterable[Line]) -> dict[str, list[Line]]:
    """Group lines by book, keeping first-seen book order and line order."""
    books: dict[str, list[Line]] = {}
    for line in lines:
        books.setdefault(line.book, []).append(line)
    return books


def segment_corpus(lines: Iterable[Line], max_workers: int = 1) -> list[ChapterLine]:
    """
    Segment every book in a corpus independently.

    Books share no state, so with max_workers > 1 they are segmented in a
    thread pool; output is always in book order.
    """
    books = group_by_book(lines)

    if max_workers > 1 and len(books) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            results = list(pool.map(segment_book, books.values()))
    else:
        results = [segment_book(book_lines) for book_lines in books.values()]

    return [line for book in results for line in book]


def chapter_spans(chapter_lines: Iterable[ChapterLine]) -> list[ChapterSpan]:
    """Summarise segmented lines into one span per (book, chapter)."""
    spans: list[ChapterSpan] = []
    current: ChapterSpan | None = None

    for line in chapter_lines:
        if current is None or (current.book, current.chapter) != (line.book, line.chapter):
            current = ChapterSpan(
                book=line.book,
                chapter=line.chapter,
                heading=line.text.strip() if line.chapter > 0 else None,
                first_line=line.position,
                last_line=line.position,
                line_count=0,
            )
            spans.append(current)

        current.last_line = line.position
        current.line_count += 1

    return spans
