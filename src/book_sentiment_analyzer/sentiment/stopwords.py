"""Stop-word lists."""

from pathlib import Path
from typing import Iterable

from book_sentiment_analyzer.sentiment.lexicon import ReferenceDataError, read_word_list


# Forms of address that dominate dialogue in period novels without carrying sentiment
HONORIFICS = frozenset({"miss", "mrs", "mr", "mister", "sir"})


def default_stop_words() -> frozenset[str]:
    """spaCy's English stop-word list (no model download required)."""
    from spacy.lang.en.stop_words import STOP_WORDS

    return frozenset(word.lower() for word in STOP_WORDS)


def build_stop_words(
    base: Iterable[str] | None = None,
    extra: Iterable[str] = HONORIFICS,
) -> frozenset[str]:
    """Union of a base stop-word list and extra words, lowercased."""
    if base is None:
        base = default_stop_words()
    return frozenset(word.lower() for word in base) | frozenset(word.lower() for word in extra)


def load_stop_words(path: Path) -> frozenset[str]:
    """Load a stop-word list: one word per line, '#' or ';' comments."""
    words = read_word_list(path)
    if not words:
        raise ReferenceDataError(f"Stop-word list is empty: {path}")
    return frozenset(words)
