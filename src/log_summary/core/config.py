"""Run configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_TOP_N = 5


def clamp_top_n(top_n: int) -> int:
    """Top-N values below 1 are treated as 1."""
    return max(1, top_n)


@dataclass(frozen=True, slots=True)
class SummaryConfig:
    top_n: int = DEFAULT_TOP_N

    # Undecodable bytes round-trip as lone surrogates, so messages that differ
    # only in those bytes stay distinct.
    encoding: str = "utf-8"
    decode_errors: str = "surrogateescape"
