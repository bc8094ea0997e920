"""Command-line interface for Book Sentiment Analyzer."""

import json
from pathlib import Path
from typing import NoReturn

import click
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TaskProgressColumn
from rich.table import Table

from book_sentiment_analyzer import __version__

console = Console()


def fail(message: str) -> NoReturn:
    """Print an error and exit with status 1."""
    console.print(f"[red]Error:[/red] {message}")
    raise SystemExit(1)


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """Book Sentiment Analyzer - chart how sentiment moves through a novel."""
    pass


@main.command()
def status() -> None:
    """Check configuration and reference data."""
    from book_sentiment_analyzer.config import get_settings
    from book_sentiment_analyzer.sentiment import (
        ReferenceDataError,
        build_stop_words,
        lexicon_stats,
        load_lexicon,
        load_stop_words,
    )

    console.print("[bold]Book Sentiment Analyzer Status[/bold]\n")

    settings = get_settings()
    console.print(f"Data directory: {settings.data_dir}")
    console.print(f"Lexicon: {settings.lexicon_path}")

    try:
        stats = lexicon_stats(load_lexicon(settings.lexicon_path))
        console.print(
            f"[green]OK[/green] Lexicon loaded ({stats['positive']:,} positive, "
            f"{stats['negative']:,} negative)"
        )
    except ReferenceDataError as e:
        console.print(f"[red]X[/red] {e}")

    try:
        base = load_stop_words(settings.stop_words_path) if settings.stop_words_path else None
        stop_words = build_stop_words(base=base, extra=settings.extra_stop_words)
        source = settings.stop_words_path or "spaCy English"
        console.print(f"[green]OK[/green] Stop words loaded ({len(stop_words):,} from {source})")
    except ReferenceDataError as e:
        console.print(f"[red]X[/red] {e}")


@main.command()
@click.argument("path", type=click.Path(exists=True))
@click.option("--title", "-t", help="Book title (inferred from filename if not provided)")
def chapters(path: str, title: str | None) -> None:
    """Show the chapter headings detected in a book."""
    from book_sentiment_analyzer.ingest import chapter_spans, load_corpus, segment_book

    file_path = Path(path)

    try:
        lines = load_corpus([file_path], titles=[title] if title else None)
    except ValueError as e:
        fail(str(e))

    spans = chapter_spans(segment_book(lines))
    book_title = lines[0].book if lines else (title or file_path.stem)

    table = Table(title=f"Chapters in {book_title}")
    table.add_column("Chapter", style="cyan", justify="right")
    table.add_column("Heading")
    table.add_column("Lines", style="green", justify="right")
    table.add_column("Span", style="dim")

    for span in spans:
        table.add_row(
            str(span.chapter),
            span.heading or "[dim](front matter)[/dim]",
            f"{span.line_count:,}",
            f"{span.first_line}-{span.last_line}",
        )

    console.print(table)

    if all(span.chapter == 0 for span in spans):
        console.print("[yellow]No chapter headings detected; the whole book is chapter 0[/yellow]")


@main.command()
@click.argument("path", type=click.Path(exists=True))
def lexicon(path: str) -> None:
    """Show statistics for a sentiment lexicon."""
    from book_sentiment_analyzer.sentiment import lexicon_stats, load_lexicon

    try:
        stats = lexicon_stats(load_lexicon(Path(path)))
    except ValueError as e:
        fail(str(e))

    table = Table(title="Lexicon")
    table.add_column("Polarity", style="cyan")
    table.add_column("Words", style="green", justify="right")
    for key in ("positive", "negative", "total"):
        table.add_row(key, f"{stats[key]:,}")

    console.print(table)


@main.command()
@click.argument("paths", nargs=-1, type=click.Path(exists=True))
@click.option("--csv", "csv_path", type=click.Path(exists=True), help="Tidy corpus CSV with book and text columns")
@click.option("--lexicon", "-l", "lexicon_path", type=click.Path(), help="Sentiment lexicon (defaults to settings)")
@click.option("--stop-words", type=click.Path(), help="Stop-word list (defaults to spaCy English)")
@click.option("--by", type=click.Choice(["chapter", "section"]), default="chapter", help="Chart granularity")
@click.option("--section-size", type=int, help="Lines per section")
@click.option("--output", "-o", type=click.Path(), help="Output file for results (JSON)")
@click.option("--chart", "-c", type=click.Path(), help="Output file for the bar chart (PNG)")
def analyze(
    paths: tuple[str, ...],
    csv_path: str | None,
    lexicon_path: str | None,
    stop_words: str | None,
    by: str,
    section_size: int | None,
    output: str | None,
    chart: str | None,
) -> None:
    """Score the sentiment of each chapter in one or more books."""
    from book_sentiment_analyzer.config import get_settings
    from book_sentiment_analyzer.ingest import load_corpus, load_corpus_csv
    from book_sentiment_analyzer.sentiment import SentimentPipeline

    if not paths and not csv_path:
        fail("Give at least one book file or --csv")

    overrides = {}
    if lexicon_path:
        overrides["lexicon_path"] = Path(lexicon_path)
    if stop_words:
        overrides["stop_words_path"] = Path(stop_words)
    if section_size is not None:
        overrides["section_size"] = section_size
    settings = get_settings().model_copy(update=overrides)

    # Reference data first: no analysis without a lexicon
    try:
        with console.status("Loading lexicon and stop words..."):
            pipeline = SentimentPipeline.from_settings(settings)
    except ValueError as e:
        fail(str(e))

    console.print(f"[green]OK[/green] Lexicon: {len(pipeline.lexicon):,} words")
    console.print(f"[green]OK[/green] Stop words: {len(pipeline.stop_words):,} words")

    try:
        with console.status("Loading books..."):
            lines = load_corpus([Path(p) for p in paths]) if paths else []
            csv_lines = load_corpus_csv(Path(csv_path)) if csv_path else []
    except ValueError as e:
        fail(str(e))

    # A book split across sources would be scanned as one run of lines
    duplicates = {line.book for line in lines} & {line.book for line in csv_lines}
    if duplicates:
        fail(f"Book(s) given both as files and in --csv: {', '.join(sorted(duplicates))}")
    lines += csv_lines

    console.print(f"[green]OK[/green] Loaded {len(lines):,} lines\n")

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console,
    ) as progress:
        task = progress.add_task("Analyzing...", total=None)

        def update_progress(p) -> None:
            progress.update(task, completed=p.current, total=p.total, description=p.message)

        pipeline.progress_callback = update_progress
        report = pipeline.run(lines)

    console.print("\n[bold green]OK Analysis complete![/bold green]\n")

    for book in report.books:
        table = Table(title=f"{book} ({report.chapter_count(book)} chapters)")
        table.add_column("Chapter", style="cyan", justify="right")
        table.add_column("Positive", style="green", justify="right")
        table.add_column("Negative", style="red", justify="right")
        table.add_column("Score", justify="right")

        for score in report.chapter_scores:
            if score.book != book:
                continue
            style = "green" if score.score >= 0 else "red"
            table.add_row(
                str(score.chapter),
                f"{score.positive:,}",
                f"{score.negative:,}",
                f"[{style}]{score.score:+,}[/{style}]",
            )

        console.print(table)

    # Top words
    for polarity, words in report.top_words.items():
        if words:
            console.print(f"\n[bold]Top {polarity.value} words:[/bold]")
            for w in words:
                console.print(f"  {w.word}: {w.count:,}")

    if report.most_negative:
        console.print("\n[bold]Most negative chapters:[/bold]")
        for r in report.most_negative:
            console.print(f"  {r.book}, chapter {r.chapter}: {r.ratio:.2%} of {r.words:,} words")

    if output:
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w") as f:
            json.dump(report.to_dict(), f, indent=2)
        console.print(f"\n[green]OK[/green] Results saved to {output_path}")

    if chart:
        from book_sentiment_analyzer.report import plot_chapter_scores, plot_section_scores

        try:
            if by == "section":
                chart_path = plot_section_scores(
                    report.section_scores, Path(chart), dpi=settings.chart_dpi,
                    title=f"Sentiment per {report.section_size} lines",
                )
            else:
                chart_path = plot_chapter_scores(report.chapter_scores, Path(chart), dpi=settings.chart_dpi)
        except ValueError as e:
            fail(str(e))

        console.print(f"[green]OK[/green] Chart saved to {chart_path}")


if __name__ == "__main__":
    main()
