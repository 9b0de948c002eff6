"""
Exercise 2: the parallel map.

Fill in `parallel_medians` so that it returns the median of every resample,
computed with `parallel_map` on `workers` workers.

Hint: `parallel_map(fn, items, workers=...)` behaves like `map`.
"""

from parboot.bootstrap import median_of, resample
from parboot.checks import check_parallel_stats
from parboot.pmap import parallel_map


def parallel_medians(values, n_resamples, seed, workers):
    samples = resample(values, n_resamples, seed=seed)
    # return parallel_map(___, ___, workers=___)
    raise NotImplementedError


if __name__ == "__main__":
    check_parallel_stats(parallel_medians)
