"""Exceptions raised at the edges of the summary pipeline."""

from __future__ import annotations

from pathlib import Path


class LogSummaryError(Exception):
    """Base class for log-summary failures."""


class UsageError(LogSummaryError):
    """Command-line arguments do not match an accepted invocation."""


class FileAccessError(LogSummaryError):
    """The input log file could not be opened for reading."""

    def __init__(self, path: str | Path, reason: str | None = None) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Could not open file: {self.path}")
