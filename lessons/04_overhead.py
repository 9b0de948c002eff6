"""
When parallel is slower.

Workers are not free. Starting processes, shipping the inputs to them and
shipping the results back all take time. When every task is tiny, that
overhead dominates and the parallel version loses to a plain loop.

Here each task is a small sum. Compare the timings with the bootstrap
lessons: parallelism pays off only when each task does enough work.
"""

from parboot.pmap import parallel_map
from parboot.settings import WORKERS
from parboot.timing import speedup, timed

TASKS = 200
WORKLOAD = 1000


def compute(n):
    total = 0
    for i in range(n):
        total += i
    return total


def main():
    workloads = [WORKLOAD] * TASKS

    seq_results, seq_time = timed(lambda: [compute(n) for n in workloads])
    par_results, par_time = timed(parallel_map, compute, workloads, workers=WORKERS)

    print(f"Tasks: {TASKS}")
    print(f"Same results: {seq_results == par_results}")
    print(f"Sequential: {seq_time:.2f}ms")
    print(f"Parallel: {par_time:.2f}ms")
    print(f"Speedup: {speedup(seq_time, par_time):.2f}x")
    print(f"Time: {par_time:.2f}ms")


if __name__ == "__main__":
    main()
