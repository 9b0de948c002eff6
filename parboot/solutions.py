# Reference answers for the exercises

from . import loop
from .bootstrap import median_of, percentile_interval, resample
from .pmap import parallel_map


def bootstrap_interval(values, n_resamples, seed):
    """Exercise 1: sequential bootstrap of the median, 95% interval."""
    samples = resample(values, n_resamples, seed=seed)
    stats = [median_of(sample) for sample in samples]
    return percentile_interval(stats, (0.025, 0.975))


def parallel_medians(values, n_resamples, seed, workers):
    """Exercise 2: medians of every resample through a parallel map."""
    samples = resample(values, n_resamples, seed=seed)
    return parallel_map(median_of, samples, workers=workers)


def foreach_medians(values, n_resamples, seed, workers):
    """Exercise 3: medians collected into a vector by a parallel loop."""
    samples = resample(values, n_resamples, seed=seed)
    with loop.using_backend(workers):
        return loop.foreach(samples, median_of, combine="vector")
