"""
A loop construct dispatched through a registered backend.

Nothing runs in parallel until a backend is registered: `foreach` falls back
to sequential evaluation and warns about it. Registering a backend hands the
loop body to `joblib.Parallel` with the chosen worker count.
"""

import contextlib
import functools
import warnings

import numpy as np
from joblib import Parallel, delayed

from .pmap import available_workers

BACKENDS = ("loky", "multiprocessing", "threading")
SEQUENTIAL = "sequential"

_registered = None  # (name, workers) or None


def register_backend(workers=None, name="loky"):
    """Register a multi-worker backend for subsequent `foreach` calls."""
    global _registered
    if name not in BACKENDS:
        raise ValueError(f"unknown backend {name!r}, expected one of {', '.join(BACKENDS)}")
    if workers is None:
        workers = available_workers()
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")
    _registered = (name, workers)


def register_sequential():
    global _registered
    _registered = (SEQUENTIAL, 1)


def unregister():
    global _registered
    _registered = None


def backend_name():
    return _registered[0] if _registered else None


def worker_count():
    """Workers the next `foreach` will use."""
    return _registered[1] if _registered else 1


@contextlib.contextmanager
def using_backend(workers=None, name="loky"):
    """Register a backend for the duration of a block."""
    global _registered
    previous = _registered
    register_backend(workers, name)
    try:
        yield worker_count()
    finally:
        _registered = previous


def _combine(results, combine, init):
    if combine is None:
        return results
    if combine == "vector":
        return np.asarray(results, dtype=float)
    if combine == "sum":
        return sum(results)
    if isinstance(combine, str):
        raise ValueError(f"unknown combine {combine!r}, expected 'vector', 'sum' or a callable")

    if init is not None:
        return functools.reduce(combine, results, init)
    if not results:
        return None
    return functools.reduce(combine, results)


def foreach(items, fn, combine=None, init=None):
    """Evaluate `fn` on every item through the registered backend.

    `combine` is None (list), "vector", "sum" or a binary callable folded
    over the ordered results.
    """
    items = list(items)
    if _registered is None:
        warnings.warn(
            "no parallel backend registered: executing sequentially",
            RuntimeWarning,
            stacklevel=2,
        )
        results = [fn(item) for item in items]
    elif _registered[0] == SEQUENTIAL:
        results = [fn(item) for item in items]
    else:
        name, workers = _registered
        results = Parallel(n_jobs=workers, backend=name)(delayed(fn)(item) for item in items)

    return _combine(list(results), combine, init)
