"""Wall-clock helpers with millisecond resolution."""

from __future__ import annotations

import time


def now_ms() -> int:
    """Current wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def precise_sleep(milliseconds: float) -> None:
    """Sleep for the given time, waking often to avoid oversleeping."""
    deadline = time.monotonic() + milliseconds / 1000
    while (remaining := deadline - time.monotonic()) > 0:
        time.sleep(remaining / 2 if remaining > 0.000005 else remaining)