"""Timing utilities for request and endpoint durations."""

import time


def elapsed_ms(start_time: float) -> float:
    """
    Milliseconds elapsed since ``start_time``.

    Args:
        start_time: Value previously returned by ``time.perf_counter()``

    Returns:
        Elapsed time in milliseconds
    """
    return (time.perf_counter() - start_time) * 1000
