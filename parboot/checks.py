"""
Answer checks for the exercises.

Each check runs the student's function on a small problem, compares it with
the reference answer and either prints a success line or raises
AssertionError with a hint.
"""

import numpy as np

from . import solutions
from .data import make_sample

CHECK_SIZE = 100
CHECK_RESAMPLES = 200
CHECK_SEED = 7
CHECK_WORKERS = 2


def _attempt(fn, *args):
    try:
        return fn(*args)
    except NotImplementedError:
        raise AssertionError(f"{fn.__name__} has not been attempted yet: fill in the blanks") from None


def _passed(name):
    print(f"✓ {name}: correct")
    return True


def _as_vector(answer, hint):
    """The answer as a 1-d float array, or AssertionError with `hint`."""
    try:
        vector = np.asarray(answer, dtype=float)
    except (TypeError, ValueError):
        raise AssertionError(f"{hint}, got {answer!r}") from None
    if vector.ndim != 1:
        raise AssertionError(f"{hint}, got {answer!r}")
    return vector


def check_interval(fn):
    values = make_sample(CHECK_SIZE, CHECK_SEED)
    expected = solutions.bootstrap_interval(values, CHECK_RESAMPLES, CHECK_SEED)
    answer = _attempt(fn, values, CHECK_RESAMPLES, CHECK_SEED)

    hint = "return a (lower, upper) pair of quantiles"
    interval = _as_vector(answer, hint)
    if interval.shape != (2,):
        raise AssertionError(f"{hint}, got {answer!r}")
    if not np.allclose(interval, expected):
        raise AssertionError(
            f"expected an interval close to ({expected[0]:.3f}, {expected[1]:.3f}), got {tuple(interval)}; "
            "did you pass the seed to resample and use the 2.5% and 97.5% quantiles?"
        )
    return _passed("check_interval")


def _check_medians(name, fn):
    values = make_sample(CHECK_SIZE, CHECK_SEED)
    expected = solutions.parallel_medians(values, CHECK_RESAMPLES, CHECK_SEED, 1)
    answer = _attempt(fn, values, CHECK_RESAMPLES, CHECK_SEED, CHECK_WORKERS)

    hint = f"expected a list or array with one median per resample ({len(expected)} values)"
    medians = _as_vector(answer, hint)
    if medians.shape != (len(expected),):
        raise AssertionError(f"{hint}, got {medians.size} values")
    if not np.allclose(medians, expected):
        raise AssertionError("medians differ from the reference: results must stay in resample order")
    return _passed(name)


def check_parallel_stats(fn):
    return _check_medians("check_parallel_stats", fn)


def check_foreach_stats(fn):
    return _check_medians("check_foreach_stats", fn)
