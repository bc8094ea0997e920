"""Tests for chart rendering."""

import pytest

from book_sentiment_analyzer.models.sentiment import ChapterScore, SectionScore
from book_sentiment_analyzer.report.chart import plot_chapter_scores, plot_section_scores


class TestCharts:
    """Charts are written to disk."""

    def test_chapter_chart(self, tmp_path):
        scores = [
            ChapterScore.from_counts(book="Emma", chapter=1, positive=3, negative=1),
            ChapterScore.from_counts(book="Emma", chapter=2, negative=4),
            ChapterScore.from_counts(book="Persuasion", chapter=1, positive=2),
            ChapterScore.from_counts(book="Mansfield Park", chapter=1, positive=1),
        ]
        path = plot_chapter_scores(scores, tmp_path / "charts" / "chapters.png")

        assert path.exists()
        assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"

    def test_section_chart(self, tmp_path):
        scores = [SectionScore.from_counts(book="Emma", section=0, positive=5, negative=2)]
        path = plot_section_scores(scores, tmp_path / "sections.png", dpi=50)
        assert path.exists()

    def test_empty_scores(self, tmp_path):
        with pytest.raises(ValueError):
            plot_chapter_scores([], tmp_path / "empty.png")
