"""Line and token models for source text."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


class Line(BaseModel):
    """One line of source text, positioned within its book."""

    model_config = ConfigDict(frozen=True)

    book: str
    text: str
    position: int = Field(ge=1)


class ChapterLine(Line):
    """A line with its chapter assignment (0 = before the first heading)."""

    chapter: int = Field(ge=0)


@dataclass(frozen=True)
class Token:
    """A lowercase word extracted from a line."""

    word: str
    book: str
    chapter: int
    line: int  # position of the source line
