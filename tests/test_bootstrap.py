"""
Tests for the dataset helpers and bootstrap resampling.
"""

import numpy as np
import pytest

from parboot.bootstrap import bootstrap, median_of, percentile_interval, resample
from parboot.data import load_column, make_sample


class TestData:
    """Tests for make_sample and load_column."""

    def test_make_sample_is_reproducible(self):
        assert np.array_equal(make_sample(50, seed=1), make_sample(50, seed=1))
        assert not np.array_equal(make_sample(50, seed=1), make_sample(50, seed=2))

    def test_make_sample_is_positive(self):
        values = make_sample(200)
        assert values.shape == (200,)
        assert (values > 0).all()

    def test_load_column_drops_missing(self, tmp_path):
        path = tmp_path / "waits.csv"
        path.write_text("id,wait\n1,3.5\n2,\n3,4.0\n", encoding="utf-8")

        values = load_column(path, "wait")

        assert list(values) == [3.5, 4.0]

    def test_load_column_keeps_header_verbatim(self, tmp_path):
        path = tmp_path / "waits.csv"
        path.write_text("id,wait time,wait-min\n1,3.5,2\n2,4.5,\n", encoding="utf-8")

        assert list(load_column(path, "wait time")) == [3.5, 4.5]
        assert list(load_column(path, "wait-min")) == [2.0]

    def test_load_column_single_row(self, tmp_path):
        path = tmp_path / "waits.csv"
        path.write_text("id,wait\n1,3.5\n", encoding="utf-8")

        assert list(load_column(path, "wait")) == [3.5]

    def test_load_column_unknown_column(self, tmp_path):
        path = tmp_path / "waits.csv"
        path.write_text("id,wait\n1,3.5\n", encoding="utf-8")

        with pytest.raises(KeyError):
            load_column(path, "duration")

    def test_load_column_without_values(self, tmp_path):
        path = tmp_path / "waits.csv"
        path.write_text("id,wait\n1,\n2,\n", encoding="utf-8")

        with pytest.raises(ValueError):
            load_column(path, "wait")


class TestResample:
    """Tests for resample."""

    def test_shape(self):
        samples = resample([1.0, 2.0, 3.0], 10, seed=0)
        assert len(samples) == 10
        assert all(len(s) == 3 for s in samples)

    def test_draws_only_from_values(self):
        samples = resample([1.0, 2.0, 3.0], 20, seed=0)
        assert set(np.concatenate(samples)) <= {1.0, 2.0, 3.0}

    def test_same_seed_same_tasks(self):
        a = resample(make_sample(30), 5, seed=3)
        b = resample(make_sample(30), 5, seed=3)
        assert all(np.array_equal(x, y) for x, y in zip(a, b))

    def test_empty_values_rejected(self):
        with pytest.raises(ValueError):
            resample([], 10)

    def test_zero_resamples_rejected(self):
        with pytest.raises(ValueError):
            resample([1.0], 0)


class TestBootstrap:
    """Tests for bootstrap and percentile_interval."""

    def test_one_stat_per_resample(self):
        stats = bootstrap(make_sample(40), 25, seed=1)
        assert stats.shape == (25,)

    def test_custom_mapper_gets_every_resample(self):
        calls = []

        def mapper(fn, items):
            calls.append(len(items))
            return [fn(item) for item in items]

        stats = bootstrap(make_sample(40), 12, mapper=mapper, seed=1)

        assert calls == [12]
        assert np.array_equal(stats, bootstrap(make_sample(40), 12, seed=1))

    def test_custom_statistic(self):
        stats = bootstrap([2.0, 2.0, 2.0], 5, statistic=np.mean, seed=0)
        assert list(stats) == [2.0] * 5

    def test_median_of(self):
        assert median_of([1.0, 5.0, 3.0]) == 3.0

    def test_interval_brackets_median(self):
        values = make_sample(300)
        low, high = percentile_interval(bootstrap(values, 500, seed=2))
        assert low < median_of(values) < high

    def test_interval_of_constant(self):
        assert percentile_interval([4.0] * 10) == (4.0, 4.0)

    def test_interval_rejects_empty(self):
        with pytest.raises(ValueError):
            percentile_interval([])

    def test_interval_rejects_bad_probs(self):
        with pytest.raises(ValueError):
            percentile_interval([1.0, 2.0], (0.025, 1.5))
