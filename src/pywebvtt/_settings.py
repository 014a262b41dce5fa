"""Serialization of cue settings to the WebVTT cue-settings list."""

from __future__ import annotations

from decimal import Decimal
from typing import assert_never

from pywebvtt._constants import (
    SETTING_ALIGN,
    SETTING_DIRECTION,
    SETTING_LINE,
    SETTING_POSITION,
    SETTING_REGION,
    SETTING_SIZE,
)
from pywebvtt._diagnostics import Reporter, resolve_reporter
from pywebvtt._errors import ERR_MSG_UNSUPPORTED_UNIT, UnsupportedUnitError
from pywebvtt.cue import (
    CaptionSettings,
    TextAlignment,
    TextFragment,
    TextUnit,
    TextUnitType,
    WritingDirection,
)


def format_number(value: float) -> str:
    """Render a float with the shortest digits that round-trip, never in exponent form.

    WebVTT numbers are positional decimals, so ``1e-05`` is written as
    ``0.00001``. Negative zero renders as ``0``.
    """
    value = float(value)
    if value == 0:
        return "0"
    text = format(Decimal(repr(value)), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


class _SettingsWriter:
    """Collects ``key:value`` pairs and reports settings that must be dropped."""

    def __init__(self, reporter: Reporter, strict: bool) -> None:
        self._reporter = reporter
        self._strict = strict
        self._parts: list[str] = []

    @property
    def result(self) -> str:
        return " ".join(self._parts)

    def write(self, key: str, value: str) -> None:
        self._parts.append(f"{key}:{value}")

    def drop(self, key: str, unit: TextUnit, reason: str) -> None:
        err = UnsupportedUnitError(
            ERR_MSG_UNSUPPORTED_UNIT,
            f"{key} setting with {unit.type} unit omitted: {reason}",
        )
        if self._strict:
            raise err
        self._reporter.info(err.internal())

    def write_line(self, line: TextUnit) -> None:
        match line.type:
            case TextUnitType.PERCENT:
                self.write(SETTING_LINE, f"{format_number(line.value)}%")
            case TextUnitType.LINES:
                self.write(SETTING_LINE, format_number(line.value))
            case TextUnitType.PIXELS:
                self.drop(SETTING_LINE, line, "WebVTT doesn't support pixel line settings")
            case _:
                assert_never(line.type)

    def write_percent_only(self, key: str, unit: TextUnit) -> None:
        match unit.type:
            case TextUnitType.PERCENT:
                self.write(key, f"{format_number(unit.value)}%")
            case TextUnitType.LINES | TextUnitType.PIXELS:
                self.drop(key, unit, f"WebVTT only supports percent {key} settings")
            case _:
                assert_never(unit.type)

    def write_direction(self, direction: WritingDirection) -> None:
        match direction:
            case WritingDirection.HORIZONTAL:
                pass
            case WritingDirection.VERTICAL_GROWING_LEFT:
                self.write(SETTING_DIRECTION, "rl")
            case WritingDirection.VERTICAL_GROWING_RIGHT:
                self.write(SETTING_DIRECTION, "lr")
            case _:
                assert_never(direction)

    def write_alignment(self, alignment: TextAlignment) -> None:
        match alignment:
            case TextAlignment.START:
                self.write(SETTING_ALIGN, "start")
            case TextAlignment.END:
                self.write(SETTING_ALIGN, "end")
            case TextAlignment.LEFT:
                self.write(SETTING_ALIGN, "left")
            case TextAlignment.RIGHT:
                self.write(SETTING_ALIGN, "right")
            case TextAlignment.CENTER:
                pass
            case _:
                assert_never(alignment)


def settings_to_string(
    settings: CaptionSettings,
    *,
    reporter: Reporter | None = None,
    strict: bool = False,
) -> str:
    """Render cue settings as a WebVTT cue-settings list.

    Settings are written in the order region, line, position, size,
    direction, align, separated by single spaces. Defaults are omitted,
    so default settings render as an empty string.

    Args:
        settings: The settings to render.
        reporter: Diagnostics sink. Defaults to the loguru logger.
        strict: If True, raise instead of dropping a setting whose unit
            WebVTT cannot express.

    Returns:
        The settings text, e.g. ``"region:r1 line:3 align:start"``.

    Raises:
        UnsupportedUnitError: Only when ``strict`` is True.
    """
    writer = _SettingsWriter(resolve_reporter(reporter), strict)

    if settings.region:
        writer.write(SETTING_REGION, settings.region)
    if settings.line is not None:
        writer.write_line(settings.line)
    if settings.position is not None:
        writer.write_percent_only(SETTING_POSITION, settings.position)
    if settings.size is not None:
        writer.write_percent_only(SETTING_SIZE, settings.size)
    writer.write_direction(settings.writing_direction)
    writer.write_alignment(settings.text_alignment)

    return writer.result


def fragment_to_string(fragment: TextFragment) -> str:
    """Return the cue body text as-is."""
    return fragment.body
