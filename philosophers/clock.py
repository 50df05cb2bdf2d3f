"""Millisecond clock and sleeping helpers."""

from __future__ import annotations

import time


def timestamp() -> int:
    """Return the current wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def time_since(start: int) -> int:
    """Return the milliseconds elapsed since ``start``."""
    return timestamp() - start


def sleep_ms(duration: int) -> None:
    """Sleep for ``duration`` milliseconds, split into four equal slices."""
    quarter_us = max(duration, 0) * 1000 // 4
    for _ in range(4):
        time.sleep(quarter_us / 1_000_000)


def bounded_wait(duration: int, time_to_die: int) -> bool:
    """Sleep for ``duration`` ms unless that outlasts ``time_to_die``.

    When it would, sleep just past ``time_to_die`` and return False;
    otherwise return True after the full sleep.
    """
    if duration > time_to_die:
        sleep_ms(time_to_die + 1)
        return False
    sleep_ms(duration)
    return True