"""Tests for the command-line interface."""

import json

import pytest
from click.testing import CliRunner

from book_sentiment_analyzer.cli import main
from book_sentiment_analyzer.config import get_settings


@pytest.fixture
def corpus(tmp_path, monkeypatch):
    """A small book, lexicon and stop-word list, wired up through settings."""
    book = tmp_path / "emma.txt"
    book.write_text("EMMA\n\nCHAPTER I\nshe was happy\n\nCHAPTER II\nshe was sad and angry\n")

    lexicon = tmp_path / "bing.csv"
    lexicon.write_text("word,sentiment\nhappy,positive\nsad,negative\nangry,negative\n")

    stop_words = tmp_path / "stop.txt"
    stop_words.write_text("she\nwas\nand\n")

    monkeypatch.setenv("BSA_LEXICON_PATH", str(lexicon))
    monkeypatch.setenv("BSA_STOP_WORDS_PATH", str(stop_words))
    get_settings.cache_clear()
    yield book
    get_settings.cache_clear()


class TestCLI:
    """Commands run end to end."""

    def test_chapters(self, corpus):
        result = CliRunner().invoke(main, ["chapters", str(corpus)])
        assert result.exit_code == 0
        assert "CHAPTER II" in result.output

    def test_analyze_writes_outputs(self, corpus, tmp_path):
        output = tmp_path / "out" / "emma.json"
        chart = tmp_path / "out" / "emma.png"

        result = CliRunner().invoke(main, ["analyze", str(corpus), "-o", str(output), "-c", str(chart)])
        assert result.exit_code == 0, result.output

        data = json.loads(output.read_text())
        assert [(s["chapter"], s["score"]) for s in data["chapter_scores"]] == [(1, 1), (2, -2)]
        assert chart.exists()

    def test_analyze_requires_input(self, corpus):
        result = CliRunner().invoke(main, ["analyze"])
        assert result.exit_code == 1

    def test_missing_lexicon_fails(self, corpus, tmp_path):
        result = CliRunner().invoke(main, ["analyze", str(corpus), "-l", str(tmp_path / "nope.csv")])
        assert result.exit_code == 1
        assert "Lexicon not found" in result.output

    def test_lexicon_stats(self, corpus, tmp_path):
        result = CliRunner().invoke(main, ["lexicon", str(tmp_path / "bing.csv")])
        assert result.exit_code == 0
        assert "negative" in result.output

    def test_status(self, corpus):
        result = CliRunner().invoke(main, ["status"])
        assert result.exit_code == 0
        assert "Lexicon loaded" in result.output

    def test_book_in_both_file_and_csv_rejected(self, corpus, tmp_path):
        csv_path = tmp_path / "austen.csv"
        csv_path.write_text("text,book\nCHAPTER I,Emma\nshe was happy,Emma\n")

        result = CliRunner().invoke(main, ["analyze", str(corpus), "--csv", str(csv_path)])
        assert result.exit_code == 1
        assert "Emma" in result.output

    def test_file_and_csv_books_combined(self, corpus, tmp_path):
        csv_path = tmp_path / "austen.csv"
        csv_path.write_text("text,book\nCHAPTER 1,Persuasion\nshe was sad,Persuasion\n")
        output = tmp_path / "combined.json"

        result = CliRunner().invoke(
            main, ["analyze", str(corpus), "--csv", str(csv_path), "-o", str(output)]
        )
        assert result.exit_code == 0, result.output

        data = json.loads(output.read_text())
        assert [(s["book"], s["chapter"], s["score"]) for s in data["chapter_scores"]] == [
            ("Emma", 1, 1),
            ("Emma", 2, -2),
            ("Persuasion", 1, -1),
        ]
