"""Parsing, aggregation, ranking and rendering of log summaries."""

from __future__ import annotations

from .aggregate import aggregate_file, aggregate_file_async, aiter_lines, ingest, iter_lines
from .config import DEFAULT_TOP_N, SummaryConfig, clamp_top_n
from .models import LEVEL_PRINT_ORDER, Level, RankedEntry, Stats, SummaryReport
from .parsing import classify, extract_message
from .ranking import rank
from .report import build_report, render

__all__ = [
    "DEFAULT_TOP_N",
    "LEVEL_PRINT_ORDER",
    "Level",
    "RankedEntry",
    "Stats",
    "SummaryConfig",
    "SummaryReport",
    "aggregate_file",
    "aggregate_file_async",
    "aiter_lines",
    "build_report",
    "clamp_top_n",
    "classify",
    "extract_message",
    "ingest",
    "iter_lines",
    "rank",
    "render",
]
