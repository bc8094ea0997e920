"""Word tokenization and stop-word filtering."""

import re
from typing import Iterable, Iterator

from book_sentiment_analyzer.models.line import ChapterLine, Token


# Runs of letters, allowing internal apostrophes ("don't", "o'clock").
# Digits and underscores (used for _emphasis_ in Gutenberg texts) split words.
WORD_PATTERN = re.compile(r"[^\W\d_]+(?:['’][^\W\d_]+)*")


def tokenize(text: str) -> Iterator[str]:
    """Yield lowercase word tokens from text."""
    for match in WORD_PATTERN.finditer(text):
        yield match.group(0).lower().replace("’", "'")


def tokenize_lines(lines: Iterable[ChapterLine]) -> Iterator[Token]:
    """Yield tokens for each line, carrying its book, chapter and position."""
    for line in lines:
        for word in tokenize(line.text):
            yield Token(word=word, book=line.book, chapter=line.chapter, line=line.position)


def remove_stop_words(tokens: Iterable[Token], stop_words: frozenset[str]) -> Iterator[Token]:
    """Drop tokens whose word is a stop word."""
    return (token for token in tokens if token.word not in stop_words)
