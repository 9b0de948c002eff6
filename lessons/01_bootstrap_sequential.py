"""
Bootstrapping a median, one resample at a time.

We have a column of waiting times and want to know how uncertain its median
is. The bootstrap answers that by drawing many resamples of the column with
replacement, computing the median of every resample, and reading the spread
of those medians off two quantiles.

Every resample is independent of every other one. That is what makes the
problem "embarrassingly parallel": nothing stops us from handing resamples to
different cores. In this lesson we do the simple thing first: `bootstrap` draws the
resamples and, unless told otherwise, evaluates them one after another with a
plain `map`. That gives us a baseline to beat.
"""

from parboot.bootstrap import bootstrap, median_of, percentile_interval
from parboot.data import make_sample
from parboot.settings import N_RESAMPLES, PROBS, SEED
from parboot.timing import timed


def main():
    waiting = make_sample()
    stats, elapsed = timed(bootstrap, waiting, N_RESAMPLES, statistic=median_of, seed=SEED)
    low, high = percentile_interval(stats, PROBS)

    print(f"Observations: {len(waiting)}")
    print(f"Resamples: {len(stats)}")
    print(f"Sample median: {median_of(waiting):.3f}")
    print(f"95% interval: [{low:.3f}, {high:.3f}]")
    print(f"Sequential: {elapsed:.2f}ms")
    print(f"Time: {elapsed:.2f}ms")


if __name__ == "__main__":
    main()
