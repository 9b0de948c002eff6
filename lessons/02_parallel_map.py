"""
The same bootstrap with a parallel map.

`parallel_map` looks like `map` but forks a pool of worker processes, splits
the resamples into one chunk per worker and glues the answers back together
in their original order. Since the order is preserved, the interval below is
identical to the sequential one: only the wall-clock time changes.

How many workers? `available_workers()` reports the cores on this machine.
Using more workers than cores only adds overhead.

Swapping evaluation strategies is a one-argument change: `bootstrap` takes a
`mapper`, and handing it `parallel_map` instead of the builtin `map` is all
it takes to spread the resamples over the workers.

A caveat: forking is a Unix feature. On Windows there is no `fork`, so the
pool starts fresh interpreters instead, which is slower to start and needs
the mapped function to be importable from a module (no lambdas).
"""

import functools

import numpy as np

from parboot.bootstrap import bootstrap, median_of, percentile_interval
from parboot.data import make_sample
from parboot.pmap import available_workers, can_fork, parallel_map
from parboot.settings import N_RESAMPLES, PROBS, SEED, WORKERS
from parboot.timing import speedup, timed


def main():
    waiting = make_sample()
    mapper = functools.partial(parallel_map, workers=WORKERS)

    print(f"Cores available: {available_workers()}")
    print(f"Workers used: {WORKERS}")
    print(f"Fork available: {can_fork()}")

    seq_stats, seq_time = timed(bootstrap, waiting, N_RESAMPLES, statistic=median_of, seed=SEED)
    par_stats, par_time = timed(bootstrap, waiting, N_RESAMPLES, statistic=median_of, mapper=mapper, seed=SEED)

    low, high = percentile_interval(par_stats, PROBS)
    print(f"95% interval: [{low:.3f}, {high:.3f}]")
    print(f"Same as sequential: {np.array_equal(seq_stats, par_stats)}")

    print(f"Sequential: {seq_time:.2f}ms")
    print(f"Parallel: {par_time:.2f}ms")
    print(f"Speedup: {speedup(seq_time, par_time):.2f}x")
    print(f"Time: {par_time:.2f}ms")


if __name__ == "__main__":
    main()
