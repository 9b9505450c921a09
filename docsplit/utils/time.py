"""Time utilities for measuring processing time."""

import time


def monotonic_ms() -> float:
    """Current monotonic clock reading in milliseconds. Only differences are meaningful."""
    return time.perf_counter() * 1000.0


def elapsed_ms(start_ms: float) -> int:
    """Whole milliseconds elapsed since a monotonic_ms() reading."""
    return int(round(monotonic_ms() - start_ms))
