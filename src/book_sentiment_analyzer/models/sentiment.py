"""Sentiment models: lexicon matches and aggregated scores."""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Polarity(str, Enum):
    """Polarity of a lexicon word."""

    POSITIVE = "positive"
    NEGATIVE = "negative"


@dataclass(frozen=True)
class SentimentHit:
    """A token that matched the sentiment lexicon."""

    word: str
    book: str
    chapter: int
    line: int
    polarity: Polarity


class SentimentEntry(BaseModel):
    """Count of tokens of one polarity in one chapter."""

    model_config = ConfigDict(frozen=True)

    book: str
    chapter: int = Field(ge=0)
    polarity: Polarity
    count: int = Field(ge=1)


class _NetScore(BaseModel):
    model_config = ConfigDict(frozen=True)

    book: str
    positive: int = Field(default=0, ge=0)
    negative: int = Field(default=0, ge=0)
    score: int

    @model_validator(mode="after")
    def check_score(self) -> "_NetScore":
        if self.score != self.positive - self.negative:
            raise ValueError(
                f"score {self.score} != positive {self.positive} - negative {self.negative}"
            )
        return self

    @classmethod
    def from_counts(cls, positive: int = 0, negative: int = 0, **kwargs):
        """Build a score from polarity counts."""
        return cls(positive=positive, negative=negative, score=positive - negative, **kwargs)


class ChapterScore(_NetScore):
    """Net sentiment (positive minus negative) for one chapter of one book."""

    chapter: int = Field(ge=0)


class SectionScore(_NetScore):
    """Net sentiment for a fixed-size block of lines."""

    section: int = Field(ge=0)
