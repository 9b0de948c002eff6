"""
Apply-style parallel map.

`parallel_map` forks a pool of worker processes, splits the items into one
chunk per worker and returns the results in input order, like a plain `map`.
"""

import concurrent.futures
import math
import multiprocessing
import os


def available_workers():
    """Number of cores the pool can be spread over."""
    return os.cpu_count() or 1


def can_fork():
    return "fork" in multiprocessing.get_all_start_methods()


def _chunksize(n_items, workers):
    return max(1, math.ceil(n_items / workers))


def parallel_map(fn, items, workers=None, kind="process"):
    """Map `fn` over `items` on `workers` processes (or threads)."""
    items = list(items)
    if workers is None:
        workers = available_workers()
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")
    if kind not in ("process", "thread"):
        raise ValueError(f"unknown kind {kind!r}, expected 'process' or 'thread'")

    if workers == 1 or len(items) < 2:
        return [fn(item) for item in items]

    if kind == "thread":
        with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
            return list(executor.map(fn, items))

    # Without fork the platform default start method is used and `fn` must be importable
    context = multiprocessing.get_context("fork") if can_fork() else None
    with concurrent.futures.ProcessPoolExecutor(max_workers=workers, mp_context=context) as executor:
        return list(executor.map(fn, items, chunksize=_chunksize(len(items), workers)))
