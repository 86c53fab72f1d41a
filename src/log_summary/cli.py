"""Command-line entrypoint.

Accepted invocations:
    log-summary <log_file_path>
    log-summary <log_file_path> --top N

Exit codes: 0 success, 1 usage error, 2 file could not be opened.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from log_summary.core.aggregate import aggregate_file
from log_summary.core.config import DEFAULT_TOP_N, SummaryConfig, clamp_top_n
from log_summary.core.ranking import rank
from log_summary.core.report import render
from log_summary.errors import FileAccessError, UsageError

PROG = "log-summary"

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_FILE_ACCESS = 2

LOGGER = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of printing and exiting."""

    def error(self, message: str):  # type: ignore[override]
        raise UsageError(message)


def _configure_logging() -> None:
    """Send diagnostics to stderr; stdout is reserved for the report."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _write_report(text: str, *, encoding: str) -> None:
    """Write the report, restoring undecodable input bytes as they were read."""
    data = text.encode(encoding, errors="surrogateescape")
    sys.stdout.flush()
    sys.stdout.buffer.write(data)
    sys.stdout.buffer.flush()


def usage(prog: str = PROG) -> str:
    return (
        "Usage:\n"
        f"  {prog} <log_file_path> [--top N]\n"
        "\n"
        "Examples:\n"
        f"  {prog} sample_logs/sample.log\n"
        f"  {prog} sample_logs/sample.log --top 10\n"
    )


def build_parser() -> argparse.ArgumentParser:
    """Parser for the options that follow the log path."""
    p = _ArgumentParser(prog=PROG, add_help=False, allow_abbrev=False)
    p.add_argument("--top", type=int, default=DEFAULT_TOP_N)
    return p


def parse_args(argv: Sequence[str]) -> tuple[str, SummaryConfig]:
    """Validate argv (without the program name) into a log path and run config."""
    # Only "<file>" or "<file> --top N". The path is taken by position, so it
    # may itself start with "-".
    if len(argv) not in (1, 3):
        raise UsageError(f"expected 1 or 3 arguments, got {len(argv)}")
    if len(argv) == 3 and argv[1] != "--top":
        raise UsageError(f"unexpected argument {argv[1]!r}, expected --top")

    log_path, *options = argv
    args = build_parser().parse_args(options)
    return log_path, SummaryConfig(top_n=clamp_top_n(args.top))


def main(argv: Sequence[str] | None = None) -> int:
    _configure_logging()
    args = sys.argv[1:] if argv is None else argv

    try:
        log_path, config = parse_args(args)
    except UsageError as e:
        LOGGER.debug("Rejected arguments %r: %s", list(args), e)
        print(usage(), end="")
        return EXIT_USAGE

    try:
        stats = aggregate_file(
            log_path,
            encoding=config.encoding,
            decode_errors=config.decode_errors,
        )
    except FileAccessError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FILE_ACCESS

    report = render(stats, rank(stats.message_counts, config.top_n))
    _write_report(report, encoding=config.encoding)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
