"""Text rendering of a finished summary."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .models import LEVEL_PRINT_ORDER, Level, RankedEntry, Stats, SummaryReport
from .ranking import rank

NO_MESSAGES = "(No messages found)"


def _level_name(level: Level | str) -> str:
    return level.value if isinstance(level, Level) else str(level)


def ordered_level_counts(level_counts: Mapping[Level | str, int]) -> list[tuple[str, int]]:
    """Level counts in print order, zero counts omitted.

    Canonical levels come first; any other key follows, sorted by name.
    """
    out: list[tuple[str, int]] = []
    for lvl in LEVEL_PRINT_ORDER:
        count = level_counts.get(lvl, 0)
        if count:
            out.append((lvl.value, count))

    canonical = {lvl.value for lvl in LEVEL_PRINT_ORDER}
    extras = sorted(
        name for name in (_level_name(k) for k in level_counts) if name not in canonical
    )
    for name in extras:
        count = level_counts.get(name, 0)
        if count:
            out.append((name, count))
    return out


def render(stats: Stats, ranked: Sequence[RankedEntry]) -> str:
    """Render stats and ranked messages into the fixed text layout."""
    lines = [
        "",
        "Summary",
        "-------",
        f"Total lines: {stats.total_lines}",
        "",
        "Log levels:",
    ]
    lines.extend(f"  {name}: {count}" for name, count in ordered_level_counts(stats.level_counts))

    lines.append("")
    lines.append("Top messages:")
    lines.extend(f"  {i}) {e.message} ({e.count})" for i, e in enumerate(ranked, start=1))
    if not ranked:
        lines.append(f"  {NO_MESSAGES}")

    lines.append("")
    return "\n".join(lines) + "\n"


def build_report(stats: Stats, top_n: int) -> SummaryReport:
    """Rank and package stats as a serializable model."""
    return SummaryReport(
        total_lines=stats.total_lines,
        level_counts=dict(ordered_level_counts(stats.level_counts)),
        top_messages=rank(stats.message_counts, top_n),
    )
