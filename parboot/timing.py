# Elapsed time measurement

import time


def timed(fn, *args, **kwargs):
    """Call `fn` and return (result, elapsed milliseconds)."""
    start = time.perf_counter()
    result = fn(*args, **kwargs)
    return result, (time.perf_counter() - start) * 1000


class Stopwatch:
    """Context manager recording how long its block took, in ms."""

    def __init__(self):
        self.elapsed_ms = None
        self._start = None

    def __enter__(self):
        self._start = time.perf_counter()
        return self

    def __exit__(self, *exc):
        self.elapsed_ms = (time.perf_counter() - self._start) * 1000
        return False


def speedup(sequential_ms, parallel_ms):
    if parallel_ms <= 0:
        raise ValueError(f"parallel time must be positive, got {parallel_ms}")
    return sequential_ms / parallel_ms
