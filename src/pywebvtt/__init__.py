"""pywebvtt - WebVTT timestamp conversion and cue settings serialization."""

from __future__ import annotations

try:
    from pywebvtt._version import __version__
except ModuleNotFoundError:  # editable install without VCS metadata
    __version__ = "0.0.0.dev0"

from pywebvtt._diagnostics import Reporter
from pywebvtt._errors import TimestampFormatError, UnsupportedUnitError, WebVTTError
from pywebvtt._settings import fragment_to_string, settings_to_string
from pywebvtt._timestamps import format_timestamp, parse_timestamp
from pywebvtt.cue import (
    CaptionSettings,
    TextAlignment,
    TextFragment,
    TextUnit,
    TextUnitType,
    WritingDirection,
)

__all__ = [
    "format_timestamp",
    "fragment_to_string",
    "parse_timestamp",
    "settings_to_string",
    "CaptionSettings",
    "Reporter",
    "TextAlignment",
    "TextFragment",
    "TextUnit",
    "TextUnitType",
    "WritingDirection",
    "TimestampFormatError",
    "UnsupportedUnitError",
    "WebVTTError",
]
