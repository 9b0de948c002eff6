"""
A loop with a pluggable backend.

`foreach` is written like an ordinary loop: give it the items, the body and
how to combine the results (`combine="vector"` collects them into one numeric
vector). Where the iterations run is decided elsewhere, by whichever backend
has been registered.

Until a backend is registered, `foreach` runs sequentially and warns you
about it. `register_backend(workers)` swaps in a pool of workers without
touching the loop itself, and `worker_count()` tells you how many workers
the next loop will get.
"""

import warnings

from parboot import loop
from parboot.bootstrap import median_of, percentile_interval, resample
from parboot.data import make_sample
from parboot.settings import N_RESAMPLES, PROBS, SEED, WORKERS
from parboot.timing import speedup, timed


def main():
    waiting = make_sample()
    samples = resample(waiting, N_RESAMPLES, seed=SEED)

    loop.unregister()
    print(f"Workers before registering: {loop.worker_count()}")
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        seq_stats, seq_time = timed(loop.foreach, samples, median_of, combine="vector")
    for warning in caught:
        print(f"Warning: {warning.message}")

    loop.register_backend(WORKERS)
    print(f"Backend: {loop.backend_name()}")
    print(f"Workers after registering: {loop.worker_count()}")
    par_stats, par_time = timed(loop.foreach, samples, median_of, combine="vector")
    loop.unregister()

    low, high = percentile_interval(par_stats, PROBS)
    print(f"95% interval: [{low:.3f}, {high:.3f}]")
    print(f"Same as sequential: {bool((seq_stats == par_stats).all())}")

    print(f"Sequential: {seq_time:.2f}ms")
    print(f"Parallel: {par_time:.2f}ms")
    print(f"Speedup: {speedup(seq_time, par_time):.2f}x")
    print(f"Time: {par_time:.2f}ms")


if __name__ == "__main__":
    main()
