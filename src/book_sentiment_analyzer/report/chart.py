"""Bar charts of net sentiment, one panel per book."""

import math
from pathlib import Path
from typing import Sequence

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from book_sentiment_analyzer.models.sentiment import ChapterScore, SectionScore  # noqa: E402


POSITIVE_COLOR = "#4CAF50"
NEGATIVE_COLOR = "#E53935"


def _plot_faceted(
    rows: Sequence[tuple[str, int, int]],
    output_path: Path,
    xlabel: str,
    title: str,
    dpi: int,
    ncols: int,
) -> Path:
    """Draw (book, x, score) rows as bar charts faceted by book."""
    if not rows:
        raise ValueError("No scores to plot")

    books = list(dict.fromkeys(book for book, _, _ in rows))
    ncols = max(1, min(ncols, len(books)))
    nrows = math.ceil(len(books) / ncols)

    fig, axes = plt.subplots(
        nrows, ncols, figsize=(6 * ncols, 3.5 * nrows), squeeze=False, sharey=True
    )

    for ax, book in zip(axes.flat, books):
        xs = [x for b, x, _ in rows if b == book]
        scores = [score for b, _, score in rows if b == book]
        colors = [POSITIVE_COLOR if score >= 0 else NEGATIVE_COLOR for score in scores]

        ax.bar(xs, scores, color=colors, width=0.8)
        ax.axhline(0, color="#424242", linewidth=0.8)
        ax.set_title(book, fontsize=11)
        ax.set_xlabel(xlabel)
        ax.set_ylabel("Net sentiment")

    # Hide unused panels
    for ax in list(axes.flat)[len(books):]:
        ax.axis("off")

    fig.suptitle(title, fontsize=14)
    fig.tight_layout()

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_path, dpi=dpi, bbox_inches="tight")
    plt.close(fig)

    return output_path


def plot_chapter_scores(
    scores: Sequence[ChapterScore],
    output_path: Path,
    title: str | None = None,
    dpi: int = 150,
    ncols: int = 2,
) -> Path:
    """Save a bar chart of net sentiment per chapter, one panel per book."""
    return _plot_faceted(
        [(s.book, s.chapter, s.score) for s in scores],
        output_path,
        xlabel="Chapter",
        title=title or "Sentiment by chapter",
        dpi=dpi,
        ncols=ncols,
    )


def plot_section_scores(
    scores: Sequence[SectionScore],
    output_path: Path,
    title: str | None = None,
    dpi: int = 150,
    ncols: int = 2,
) -> Path:
    """Save a bar chart of net sentiment per section, one panel per book."""
    return _plot_faceted(
        [(s.book, s.section, s.score) for s in scores],
        output_path,
        xlabel="Section",
        title=title or "Sentiment through the narrative",
        dpi=dpi,
        ncols=ncols,
    )
