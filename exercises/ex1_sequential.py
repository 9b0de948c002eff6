"""
Exercise 1: a sequential bootstrap.

Fill in `bootstrap_interval` so that it
  1. draws `n_resamples` resamples of `values` with `resample`, passing `seed`,
  2. computes the median of every resample with `median_of`,
  3. returns the 2.5% and 97.5% quantiles with `percentile_interval`.

Run this file to check your answer.
"""

from parboot.bootstrap import median_of, percentile_interval, resample
from parboot.checks import check_interval


def bootstrap_interval(values, n_resamples, seed):
    samples = ...  # 1.
    stats = ...  # 2.
    # 3.
    raise NotImplementedError


if __name__ == "__main__":
    check_interval(bootstrap_interval)
