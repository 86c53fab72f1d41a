"""Log reading and per-line aggregation.

This module is the integration point that reads a log file once, in order,
and folds every line into a Stats instance.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Iterator
from contextlib import asynccontextmanager, contextmanager
from pathlib import Path
from typing import IO

import aiofiles

from ..errors import FileAccessError
from .models import Stats
from .parsing import classify, extract_message

logger = logging.getLogger(__name__)


def ingest(stats: Stats, line: str) -> None:
    """Fold one raw line into the running stats."""
    stats.total_lines += 1
    stats.level_counts[classify(line)] += 1

    msg = extract_message(line)
    if msg:
        stats.message_counts[msg] += 1


def _strip_newline(line: str) -> str:
    # Only "\n" terminates a line; a trailing "\r" is left for trimming.
    return line.removesuffix("\n")


@contextmanager
def _open_text(path: Path, *, encoding: str, decode_errors: str) -> Iterator[IO[str]]:
    """Open a log file for text reading, mapping OS failures to FileAccessError."""
    try:
        f = path.open(encoding=encoding, errors=decode_errors, newline="\n")
    except OSError as e:
        raise FileAccessError(path, reason=e.strerror) from e
    with f:
        yield f


@asynccontextmanager
async def _open_text_async(path: Path, *, encoding: str, decode_errors: str):
    """Async counterpart of _open_text backed by aiofiles."""
    try:
        f = await aiofiles.open(path, encoding=encoding, errors=decode_errors, newline="\n")
    except OSError as e:
        raise FileAccessError(path, reason=e.strerror) from e
    try:
        yield f
    finally:
        await f.close()


def iter_lines(
    log_path: str | Path,
    *,
    encoding: str = "utf-8",
    decode_errors: str = "surrogateescape",
) -> Iterator[str]:
    """Yield the lines of a log file without their "\\n" terminators."""
    path = Path(log_path)
    with _open_text(path, encoding=encoding, decode_errors=decode_errors) as f:
        for line in f:
            yield _strip_newline(line)


def aggregate_file(
    log_path: str | Path,
    *,
    encoding: str = "utf-8",
    decode_errors: str = "surrogateescape",
) -> Stats:
    """Read a log file once and return its aggregated stats.

    Raises FileAccessError when the file cannot be opened; nothing is
    aggregated in that case.
    """
    path = Path(log_path)
    stats = Stats()
    with _open_text(path, encoding=encoding, decode_errors=decode_errors) as f:
        logger.debug("Reading %s", path)
        for line in f:
            ingest(stats, _strip_newline(line))

    logger.debug(
        "Read %d lines from %s (%d distinct messages)",
        stats.total_lines,
        path,
        len(stats.message_counts),
    )
    return stats


async def aiter_lines(
    log_path: str | Path,
    *,
    encoding: str = "utf-8",
    decode_errors: str = "surrogateescape",
) -> AsyncIterator[str]:
    """Async version of iter_lines."""
    path = Path(log_path)
    async with _open_text_async(path, encoding=encoding, decode_errors=decode_errors) as f:
        async for line in f:
            yield _strip_newline(line)


async def aggregate_file_async(
    log_path: str | Path,
    *,
    encoding: str = "utf-8",
    decode_errors: str = "surrogateescape",
) -> Stats:
    """Same as aggregate_file, reading through aiofiles."""
    path = Path(log_path)
    stats = Stats()
    async with _open_text_async(path, encoding=encoding, decode_errors=decode_errors) as f:
        logger.debug("Reading %s (async)", path)
        async for line in f:
            ingest(stats, _strip_newline(line))

    logger.debug("Read %d lines from %s", stats.total_lines, path)
    return stats
