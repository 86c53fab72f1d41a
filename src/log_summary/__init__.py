"""Summarize plain-text log files by level and most frequent messages."""

from __future__ import annotations

from .core import (
    Level,
    RankedEntry,
    Stats,
    SummaryReport,
    aggregate_file,
    build_report,
    classify,
    extract_message,
    rank,
    render,
)
from .errors import FileAccessError, LogSummaryError, UsageError

__version__ = "0.1.0"

__all__ = [
    "FileAccessError",
    "Level",
    "LogSummaryError",
    "RankedEntry",
    "Stats",
    "SummaryReport",
    "UsageError",
    "aggregate_file",
    "build_report",
    "classify",
    "extract_message",
    "rank",
    "render",
]
