"""
Exercise 3: a loop with a registered backend.

Fill in `foreach_medians`: register a backend with `workers` workers, then
collect the median of every resample into a vector with `foreach`.

Hints: `loop.using_backend(workers)` registers a backend for a `with` block;
`combine="vector"` gives you a numeric vector.
"""

from parboot import loop
from parboot.bootstrap import median_of, resample
from parboot.checks import check_foreach_stats


def foreach_medians(values, n_resamples, seed, workers):
    samples = resample(values, n_resamples, seed=seed)
    # with loop.using_backend(___):
    #     return loop.foreach(___, ___, combine=___)
    raise NotImplementedError


if __name__ == "__main__":
    check_foreach_stats(foreach_medians)
