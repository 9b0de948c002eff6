"""
Bootstrap resampling.

The resamples are the independent tasks of the workshop: each one is handed
to a statistic, sequentially or on workers, and the results are collected
back into one vector.
"""

import numpy as np

from .settings import PROBS


def resample(values, n_resamples, seed=None):
    """Draw every resample up front so all evaluation modes see the same tasks."""
    values = np.asarray(values, dtype=float)
    if values.size == 0:
        raise ValueError("cannot resample an empty column")
    if n_resamples < 1:
        raise ValueError(f"n_resamples must be at least 1, got {n_resamples}")

    rng = np.random.default_rng(seed)
    return [rng.choice(values, size=values.size, replace=True) for _ in range(n_resamples)]


def median_of(sample):
    return float(np.median(sample))


def bootstrap(values, n_resamples, statistic=median_of, mapper=None, seed=None):
    """Apply `statistic` to each resample through `mapper(fn, items)`.

    `mapper` defaults to the builtin sequential map. The result has exactly
    one entry per resample, in resample order.
    """
    samples = resample(values, n_resamples, seed=seed)
    if mapper is None:
        stats = list(map(statistic, samples))
    else:
        stats = list(mapper(statistic, samples))
    return np.asarray(stats, dtype=float)


def percentile_interval(stats, probs=PROBS):
    """Lower and upper quantiles of the bootstrap distribution."""
    stats = np.asarray(stats, dtype=float)
    if stats.size == 0:
        raise ValueError("no bootstrap statistics to summarise")
    low, high = probs
    if not (0.0 <= low <= 1.0 and 0.0 <= high <= 1.0):
        raise ValueError(f"probabilities must lie in [0, 1], got {probs}")

    lower, upper = np.quantile(stats, [low, high])
    return float(lower), float(upper)
