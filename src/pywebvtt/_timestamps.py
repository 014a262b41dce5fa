"""WebVTT timestamp parsing and formatting.

Timestamps have the form ``[HH:]MM:SS.mmm``. The hour group is optional on
input and always present on output; both forms round-trip to the same
millisecond count.
"""

from __future__ import annotations

from typing import NamedTuple

from lark import Lark, Transformer
from lark.exceptions import UnexpectedInput, VisitError

from pywebvtt._constants import (
    MAX_MILLISECONDS,
    MAX_MINUTES,
    MAX_SECONDS,
    MIN_TIMESTAMP_LENGTH,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
)
from pywebvtt._diagnostics import Reporter, resolve_reporter
from pywebvtt._errors import (
    ERR_MSG_MALFORMED_TIMESTAMP,
    ERR_MSG_TIMESTAMP_OUT_OF_RANGE,
    ERR_MSG_TIMESTAMP_TOO_SHORT,
    TimestampFormatError,
)

# Hours need at least two digits; everything else is fixed width.
TIMESTAMP_GRAMMAR = r"""
?start: long_form
      | short_form

long_form: hours ":" minutes ":" seconds "." millis
short_form: minutes ":" seconds "." millis

hours: DIGIT DIGIT+
minutes: DIGIT DIGIT
seconds: DIGIT DIGIT
millis: DIGIT DIGIT DIGIT

DIGIT: "0".."9"
"""

# After two digits and a colon, hours and minutes are indistinguishable
# to LALR (reduce/reduce conflict), so the grammar runs on Earley.
_parser = Lark(TIMESTAMP_GRAMMAR, parser="earley", lexer="basic")


class TimestampFields(NamedTuple):
    hours: int
    minutes: int
    seconds: int
    milliseconds: int


class _TimestampTransformer(Transformer):
    """Collapse the parse tree into a :class:`TimestampFields`."""

    def _number(self, digits):
        return int("".join(digits))

    hours = minutes = seconds = millis = _number

    def long_form(self, children):
        hours, minutes, seconds, millis = children
        return TimestampFields(hours, minutes, seconds, millis)

    def short_form(self, children):
        minutes, seconds, millis = children
        return TimestampFields(0, minutes, seconds, millis)


def split_timestamp(text: str) -> TimestampFields:
    """Split timestamp text into its numeric fields without range checks.

    Raises:
        TimestampFormatError: If the text is too short or does not match
            ``[HH:]MM:SS.mmm`` using ASCII digits only.
    """
    if len(text) < MIN_TIMESTAMP_LENGTH:
        raise TimestampFormatError(
            ERR_MSG_TIMESTAMP_TOO_SHORT,
            f"timestamp {text!r} is shorter than {MIN_TIMESTAMP_LENGTH} characters",
        )
    try:
        tree = _parser.parse(text)
    except UnexpectedInput as e:
        raise TimestampFormatError(
            ERR_MSG_MALFORMED_TIMESTAMP,
            f"timestamp {text!r} does not match [HH:]MM:SS.mmm",
            wrapped=e,
        ) from e
    try:
        return _TimestampTransformer().transform(tree)
    except VisitError as e:
        # int() refuses digit strings past sys.get_int_max_str_digits()
        raise TimestampFormatError(
            ERR_MSG_MALFORMED_TIMESTAMP,
            f"timestamp field '{e.rule}' is not a representable integer",
            wrapped=e,
        ) from e


def total_milliseconds(fields: TimestampFields) -> int:
    """Range-check fields and combine them into a millisecond count.

    Raises:
        TimestampFormatError: If minutes, seconds or milliseconds are out of range.
    """
    if (
        fields.minutes > MAX_MINUTES
        or fields.seconds > MAX_SECONDS
        or fields.milliseconds > MAX_MILLISECONDS
    ):
        raise TimestampFormatError(
            ERR_MSG_TIMESTAMP_OUT_OF_RANGE,
            f"hours={fields.hours} minutes={fields.minutes} "
            f"seconds={fields.seconds} ms={fields.milliseconds}",
        )
    return (
        MS_PER_HOUR * fields.hours
        + MS_PER_MINUTE * fields.minutes
        + MS_PER_SECOND * fields.seconds
        + fields.milliseconds
    )


def parse_timestamp(text: str, *, reporter: Reporter | None = None) -> int:
    """Convert a WebVTT timestamp to milliseconds.

    Args:
        text: Timestamp in ``HH:MM:SS.mmm`` or ``MM:SS.mmm`` form. The hour
            group takes two or more digits.
        reporter: Diagnostics sink. Defaults to the loguru logger.

    Returns:
        The timestamp as a millisecond count.

    Raises:
        TimestampFormatError: If the text is not a valid timestamp. A warning
            naming the text is reported before raising.
    """
    try:
        return total_milliseconds(split_timestamp(text))
    except TimestampFormatError as e:
        resolve_reporter(reporter).warning(
            f"Timestamp '{text}' is malformed: {e.internal()}"
        )
        raise


def format_timestamp(ms: int) -> str:
    """Convert milliseconds to a WebVTT timestamp.

    Hours are always present and padded to two digits; they grow wider
    for durations of 100 hours or more.

    Raises:
        ValueError: If ``ms`` is negative.
    """
    if ms < 0:
        raise ValueError(f"timestamp must be non-negative, got {ms}")
    remaining, only_ms = divmod(ms, MS_PER_SECOND)
    remaining, only_seconds = divmod(remaining, 60)
    only_hours, only_minutes = divmod(remaining, 60)
    return f"{only_hours:02d}:{only_minutes:02d}:{only_seconds:02d}.{only_ms:03d}"
