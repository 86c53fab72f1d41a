"""Core data models for log summaries."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Level(str, Enum):
    """Normalized severity levels recognized by the classifier."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"
    FATAL = "FATAL"
    UNKNOWN = "UNKNOWN"


# Order used when printing level counts.
LEVEL_PRINT_ORDER: tuple[Level, ...] = (
    Level.INFO,
    Level.WARN,
    Level.ERROR,
    Level.DEBUG,
    Level.TRACE,
    Level.FATAL,
    Level.UNKNOWN,
)


@dataclass(slots=True)
class Stats:
    """Running aggregate for a single pass over one log file."""

    total_lines: int = 0
    level_counts: Counter[Level] = field(default_factory=Counter)
    message_counts: Counter[str] = field(default_factory=Counter)


class RankedEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: str = Field(description="Trimmed message text (case-sensitive).")
    count: int = Field(ge=1, description="Number of lines carrying this message.")


class SummaryReport(BaseModel):
    """Serializable view of a finished run."""

    total_lines: int = Field(ge=0, description="Number of lines read.")
    level_counts: dict[str, int] = Field(
        default_factory=dict,
        description="Observed levels in print order; zero counts are omitted.",
    )
    top_messages: list[RankedEntry] = Field(default_factory=list)
