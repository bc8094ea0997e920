"""Load books from various formats into ordered lines."""

import csv
import re
from pathlib import Path

from bs4 import BeautifulSoup

from book_sentiment_analyzer.models.line import Line


GUTENBERG_START = re.compile(r"\*\*\*\s*START OF (THE|THIS) PROJECT GUTENBERG EBOOK[^\n]*", re.I)
GUTENBERG_END = re.compile(r"\*\*\*\s*END OF (THE|THIS) PROJECT GUTENBERG EBOOK", re.I)


def load_book(path: Path) -> str:
    """
    Load a book from file and return plain text.

    Supports:
    - .txt files (read directly)
    - .epub files (extract text from HTML)
    """
    suffix = path.suffix.lower()

    if suffix == ".txt":
        return load_txt(path)
    elif suffix == ".epub":
        return load_epub(path)
    else:
        raise ValueError(f"Unsupported file format: {suffix}")


def load_txt(path: Path) -> str:
    """Load a plain text file."""
    # Try common encodings
    for encoding in ["utf-8", "utf-8-sig", "latin-1", "cp1252"]:
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue

    raise ValueError(f"Could not decode {path} with any common encoding")


def load_epub(path: Path) -> str:
    """Load an EPUB file and extract text, one block element per line."""
    import ebooklib
    from ebooklib import epub

    book = epub.read_epub(str(path))
    texts: list[str] = []

    for item in book.get_items():
        if item.get_type() == ebooklib.ITEM_DOCUMENT:
            soup = BeautifulSoup(item.get_content(), "html.parser")

            for element in soup(["script", "style"]):
                element.decompose()

            text = soup.get_text(separator="\n")

            # Headings like "Chapter IV" must stay on a line of their own
            lines = [line.strip() for line in text.splitlines()]
            text = "\n".join(line for line in lines if line)

            if text:
                texts.append(text)

    return "\n\n".join(texts)


def strip_gutenberg(text: str) -> str:
    """Drop Project Gutenberg header and licence footer if both markers are present."""
    start = GUTENBERG_START.search(text)
    end = GUTENBERG_END.search(text)
    if start and end and start.end() < end.start():
        return text[start.end():end.start()].strip("\r\n")
    return text


def book_lines(text: str, book: str) -> list[Line]:
    """Split a book's text into lines with 1-based positions."""
    return [
        Line(book=book, text=text_line, position=position)
        for position, text_line in enumerate(text.splitlines(), start=1)
    ]


def title_from_path(path: Path) -> str:
    """Infer a book title from its filename."""
    return path.stem.replace("_", " ").replace("-", " ").title()


def load_corpus(
    paths: list[Path],
    titles: list[str] | None = None,
    strip_boilerplate: bool = True,
) -> list[Line]:
    """
    Load several books into one ordered corpus of lines.

    Each file is one book. Titles are inferred from filenames unless given.
    """
    if titles is not None and len(titles) != len(paths):
        raise ValueError(f"Got {len(titles)} titles for {len(paths)} files")

    corpus: list[Line] = []
    seen: set[str] = set()

    for i, path in enumerate(paths):
        title = titles[i] if titles else title_from_path(path)
        if title in seen:
            raise ValueError(f"Duplicate book title: {title}")
        seen.add(title)

        text = load_book(path)
        if strip_boilerplate:
            text = strip_gutenberg(text)

        corpus.extend(book_lines(text, title))

    return corpus


def load_corpus_csv(path: Path, text_column: str = "text", book_column: str = "book") -> list[Line]:
    """
    Load a tidy corpus export (one row per line, with text and book columns).

    Rows keep file order; positions are assigned per book.
    """
    positions: dict[str, int] = {}
    corpus: list[Line] = []

    with open(path, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        fields = reader.fieldnames or []
        missing = [c for c in (text_column, book_column) if c not in fields]
        if missing:
            raise ValueError(f"{path} is missing column(s): {', '.join(missing)}")

        for row in reader:
            book = row[book_column]
            positions[book] = positions.get(book, 0) + 1
            corpus.append(Line(book=book, text=row[text_column] or "", position=positions[book]))

    return corpus
