"""Module entrypoint.

Allows:
    python -m log_summary <log_file_path> [--top N]
"""

from __future__ import annotations

from log_summary.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
