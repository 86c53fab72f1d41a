"""Deterministic top-N ranking of message counts."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from .models import RankedEntry

logger = logging.getLogger(__name__)


def _sort_key(item: tuple[str, int]) -> tuple[int, str]:
    # Count descending, then message ascending by code point. Messages are
    # unique keys, so no two items compare equal.
    message, count = item
    return -count, message


def rank(message_counts: Mapping[str, int], top_n: int) -> list[RankedEntry]:
    """Return the top_n most frequent messages, ties broken alphabetically."""
    if top_n < 1:
        raise ValueError("top_n must be >= 1")

    ordered = sorted(message_counts.items(), key=_sort_key)
    logger.debug("Ranked %d distinct messages, keeping %d", len(ordered), min(top_n, len(ordered)))
    return [RankedEntry(message=m, count=c) for m, c in ordered[:top_n]]
