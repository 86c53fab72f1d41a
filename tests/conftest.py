from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

SAMPLE_LINES = [
    "2026-01-15 10:03:21 INFO  AuthService - User login ok",
    "2026-01-15 10:03:22 WARN  Billing     - Slow query detected",
    "2026-01-15 10:03:23 ERROR Billing     - ORA-12541: TNS no listener",
]

# 8 INFO, 4 WARN, 5 ERROR, 3 DEBUG.
BUSY_LINES = [
    "2026-01-15 10:00:01 INFO  AuthService - User login ok",
    "2026-01-15 10:00:02 INFO  AuthService - User login ok",
    "2026-01-15 10:00:03 INFO  AuthService - User login ok",
    "2026-01-15 10:00:04 DEBUG Cache       - Cache miss",
    "2026-01-15 10:00:05 DEBUG Cache       - Cache miss",
    "2026-01-15 10:00:06 DEBUG Cache       - Cache miss",
    "2026-01-15 10:00:07 ERROR Billing     - ORA-12541: TNS no listener",
    "2026-01-15 10:00:08 ERROR Billing     - ORA-12541: TNS no listener",
    "2026-01-15 10:00:09 ERROR Billing     - ORA-12541: TNS no listener",
    "2026-01-15 10:00:10 WARN  AuthService - Invalid token",
    "2026-01-15 10:00:11 WARN  AuthService - Invalid token",
    "2026-01-15 10:00:12 WARNING Network   - Packet loss detected",
    "2026-01-15 10:00:13 WARN  Network     - Packet loss detected",
    "2026-01-15 10:00:14 INFO  Scheduler   - Job started",
    "2026-01-15 10:00:15 INFO  Scheduler   - Job finished",
    "2026-01-15 10:00:16 INFO  Api         - Request served",
    "2026-01-15 10:00:17 INFO  Api         - Health check ok",
    "2026-01-15 10:00:18 INFO  Worker      - Queue drained",
    "2026-01-15 10:00:19 ERROR Worker      - Disk quota exceeded",
    "2026-01-15 10:00:20 ERROR Api         - Upstream timeout",
]


@pytest.fixture
def write_sample_log() -> Callable[[Path], None]:
    def _write(path: Path) -> None:
        path.write_text("\n".join(SAMPLE_LINES) + "\n", encoding="utf-8")

    return _write


@pytest.fixture
def write_busy_log() -> Callable[[Path], None]:
    def _write(path: Path) -> None:
        path.write_text("\n".join(BUSY_LINES) + "\n", encoding="utf-8")

    return _write


@pytest.fixture
def write_bytes() -> Callable[[Path, bytes], None]:
    def _write(path: Path, data: bytes) -> None:
        path.write_bytes(data)

    return _write
