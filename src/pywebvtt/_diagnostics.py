"""Diagnostic reporting for malformed input and dropped settings."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from loguru import logger


@runtime_checkable
class Reporter(Protocol):
    """Minimal sink for conversion diagnostics.

    The loguru logger satisfies this protocol and is used when no
    reporter is given.
    """

    def warning(self, message: str) -> None: ...
    def info(self, message: str) -> None: ...


def resolve_reporter(reporter: Reporter | None) -> Reporter:
    if reporter is None:
        return logger
    return reporter
