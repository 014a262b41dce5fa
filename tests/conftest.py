"""Shared test fixtures."""

import pytest


class RecordingReporter:
    """Reporter that keeps diagnostics in memory, keyed by severity."""

    def __init__(self):
        self.warnings: list[str] = []
        self.infos: list[str] = []

    def warning(self, message: str) -> None:
        self.warnings.append(message)

    def info(self, message: str) -> None:
        self.infos.append(message)


@pytest.fixture
def reporter():
    return RecordingReporter()
