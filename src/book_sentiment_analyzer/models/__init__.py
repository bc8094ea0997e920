"""Data models for lines, tokens and sentiment scores."""

from book_sentiment_analyzer.models.line import Line, ChapterLine, Token
from book_sentiment_analyzer.models.sentiment import (
    Polarity,
    SentimentHit,
    SentimentEntry,
    ChapterScore,
    SectionScore,
)

__all__ = [
    "Line",
    "ChapterLine",
    "Token",
    "Polarity",
    "SentimentHit",
    "SentimentEntry",
    "ChapterScore",
    "SectionScore",
]
