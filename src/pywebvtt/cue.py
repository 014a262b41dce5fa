"""Value types describing a cue's timing-independent display data."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class TextUnitType(enum.StrEnum):
    PERCENT = "percent"
    LINES = "lines"
    PIXELS = "pixels"


@dataclass(frozen=True)
class TextUnit:
    """A numeric setting value tagged with its measurement kind."""

    type: TextUnitType
    value: float

    @classmethod
    def percent(cls, value: float) -> TextUnit:
        return cls(TextUnitType.PERCENT, value)

    @classmethod
    def lines(cls, value: float) -> TextUnit:
        return cls(TextUnitType.LINES, value)

    @classmethod
    def pixels(cls, value: float) -> TextUnit:
        return cls(TextUnitType.PIXELS, value)


class WritingDirection(enum.StrEnum):
    HORIZONTAL = "horizontal"
    VERTICAL_GROWING_LEFT = "vertical-growing-left"
    VERTICAL_GROWING_RIGHT = "vertical-growing-right"


class TextAlignment(enum.StrEnum):
    START = "start"
    END = "end"
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


@dataclass(frozen=True)
class CaptionSettings:
    """Placement and layout settings for a single cue.

    Unset optional fields, a horizontal writing direction and centered
    alignment are the WebVTT defaults and produce no output.
    """

    region: str = ""
    line: TextUnit | None = None
    position: TextUnit | None = None
    size: TextUnit | None = None
    writing_direction: WritingDirection = WritingDirection.HORIZONTAL
    text_alignment: TextAlignment = TextAlignment.CENTER


@dataclass(frozen=True)
class TextFragment:
    """Cue body text, carried through serialization untouched."""

    body: str
