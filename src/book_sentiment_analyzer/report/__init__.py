"""Static charts of sentiment scores."""

from book_sentiment_analyzer.report.chart import plot_chapter_scores, plot_section_scores

__all__ = ["plot_chapter_scores", "plot_section_scores"]
