"""
Sentiment Lexicon

Word-to-polarity lexicons. Supported sources:
- CSV/TSV with `word` and `sentiment` columns (e.g. the tidytext "bing" export)
- JSON, either a {word: polarity} mapping or a list of {word, sentiment} records
- A directory with Hu & Liu's positive-words.txt and negative-words.txt
"""

import csv
import json
from pathlib import Path

from book_sentiment_analyzer.models.sentiment import Polarity


class ReferenceDataError(ValueError):
    """A lexicon or stop-word list is missing or malformed."""


Lexicon = dict[str, Polarity]


def parse_polarity(label: str, source: Path) -> Polarity:
    """Convert a polarity label to a Polarity."""
    try:
        return Polarity(label.strip().lower())
    except ValueError:
        raise ReferenceDataError(f"Unknown polarity {label!r} in {source}") from None


def read_word_list(path: Path) -> list[str]:
    """Read one lowercase word per line, skipping blanks and comment lines."""
    if not path.is_file():
        raise ReferenceDataError(f"Word list not found: {path}")

    # Hu & Liu lists are latin-1 encoded; custom lists are usually utf-8
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        text = path.read_text(encoding="latin-1")

    words = []
    for raw in text.splitlines():
        word = raw.strip()
        if word and not word.startswith((";", "#")):
            words.append(word.lower())
    return words


def load_lexicon(path: Path) -> Lexicon:
    """
    Load a sentiment lexicon from a file or directory.

    A word listed with both polarities keeps the first one seen.

    Raises:
        ReferenceDataError: if the source is missing, malformed or empty
    """
    path = Path(path)

    if path.is_dir():
        entries = _read_hu_liu(path)
    elif not path.exists():
        raise ReferenceDataError(f"Lexicon not found: {path}")
    elif path.suffix.lower() in (".csv", ".tsv"):
        entries = _read_delimited(path)
    elif path.suffix.lower() == ".json":
        entries = _read_json(path)
    else:
        raise ReferenceDataError(f"Unsupported lexicon format: {path.suffix}")

    lexicon: Lexicon = {}
    for word, polarity in entries:
        lexicon.setdefault(word.strip().lower(), polarity)

    lexicon.pop("", None)
    if not lexicon:
        raise ReferenceDataError(f"Lexicon is empty: {path}")

    return lexicon


def _read_delimited(path: Path) -> list[tuple[str, Polarity]]:
    delimiter = "\t" if path.suffix.lower() == ".tsv" else ","

    with open(path, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f, delimiter=delimiter)
        fields = reader.fieldnames or []
        if "word" not in fields or "sentiment" not in fields:
            raise ReferenceDataError(f"{path} needs 'word' and 'sentiment' columns, got {fields}")

        return [(row["word"] or "", parse_polarity(row["sentiment"] or "", path)) for row in reader]


def _read_json(path: Path) -> list[tuple[str, Polarity]]:
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ReferenceDataError(f"Invalid JSON in {path}: {e}") from e

    if isinstance(data, dict):
        return [(word, parse_polarity(str(label), path)) for word, label in data.items()]

    if isinstance(data, list):
        entries = []
        for record in data:
            if not isinstance(record, dict) or "word" not in record or "sentiment" not in record:
                raise ReferenceDataError(f"Expected {{word, sentiment}} records in {path}")
            entries.append((str(record["word"]), parse_polarity(str(record["sentiment"]), path)))
        return entries

    raise ReferenceDataError(f"Expected a mapping or list of records in {path}")


def _read_hu_liu(directory: Path) -> list[tuple[str, Polarity]]:
    entries = [(word, Polarity.POSITIVE) for word in read_word_list(directory / "positive-words.txt")]
    entries += [(word, Polarity.NEGATIVE) for word in read_word_list(directory / "negative-words.txt")]
    return entries


def lexicon_stats(lexicon: Lexicon) -> dict[str, int]:
    """Count lexicon words per polarity."""
    stats = {polarity.value: 0 for polarity in Polarity}
    for polarity in lexicon.values():
        stats[polarity.value] += 1
    stats["total"] = len(lexicon)
    return stats
