# Dataset used by the lessons

import csv

import numpy as np

from .settings import SAMPLE_SIZE, SEED


def make_sample(n=SAMPLE_SIZE, seed=SEED):
    """Reproducible right-skewed column of waiting times (minutes)."""
    rng = np.random.default_rng(seed)
    return rng.lognormal(mean=3.0, sigma=0.5, size=n)


def load_column(path, column):
    """Read one numeric column from a CSV file with a header row."""
    # Headers are matched verbatim, genfromtxt's names=True would rewrite them
    with open(path, newline="", encoding="utf-8") as f:
        header = next(csv.reader(f), [])
    header = [name.strip() for name in header]
    if column not in header:
        raise KeyError(column)

    values = np.genfromtxt(
        path, delimiter=",", skip_header=1, usecols=header.index(column), dtype=float, encoding="utf-8"
    )
    values = np.atleast_1d(values)
    values = values[~np.isnan(values)]
    if values.size == 0:
        raise ValueError(f"column {column!r} in {path} has no numeric values")
    return values
