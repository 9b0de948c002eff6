"""
Tests for the exercise checks against the reference answers.
"""

import numpy as np
import pytest

from parboot import checks, solutions


def not_attempted(values, n_resamples, seed, workers=None):
    raise NotImplementedError


class TestChecks:

    def test_interval_solution_passes(self, capsys):
        assert checks.check_interval(solutions.bootstrap_interval) is True
        assert "check_interval: correct" in capsys.readouterr().out

    def test_parallel_solution_passes(self):
        assert checks.check_parallel_stats(solutions.parallel_medians) is True

    def test_foreach_solution_passes(self):
        assert checks.check_foreach_stats(solutions.foreach_medians) is True

    def test_not_attempted(self):
        with pytest.raises(AssertionError, match="not been attempted"):
            checks.check_interval(not_attempted)

    def test_wrong_interval(self):
        def too_wide(values, n_resamples, seed):
            return (0.0, 1000.0)

        with pytest.raises(AssertionError, match="expected an interval"):
            checks.check_interval(too_wide)

    def test_unordered_medians(self):
        def reversed_medians(values, n_resamples, seed, workers):
            return solutions.parallel_medians(values, n_resamples, seed, 1)[::-1]

        with pytest.raises(AssertionError, match="resample order"):
            checks.check_parallel_stats(reversed_medians)

    def test_wrong_length(self):
        def too_short(values, n_resamples, seed, workers):
            return [1.0]

        with pytest.raises(AssertionError, match="one median per resample"):
            checks.check_foreach_stats(too_short)

    def test_scalar_interval(self):
        def one_quantile(values, n_resamples, seed):
            return 3.0

        with pytest.raises(AssertionError, match=r"\(lower, upper\) pair"):
            checks.check_interval(one_quantile)

    def test_non_numeric_interval(self):
        def words(values, n_resamples, seed):
            return ("low", "high")

        with pytest.raises(AssertionError, match=r"\(lower, upper\) pair"):
            checks.check_interval(words)

    def test_missing_return(self):
        def forgot_return(values, n_resamples, seed):
            solutions.bootstrap_interval(values, n_resamples, seed)

        with pytest.raises(AssertionError, match=r"\(lower, upper\) pair"):
            checks.check_interval(forgot_return)

    def test_scalar_medians(self):
        def single_median(values, n_resamples, seed, workers):
            return 12.5

        with pytest.raises(AssertionError, match="one median per resample"):
            checks.check_parallel_stats(single_median)

    def test_generator_medians(self):
        def lazy_medians(values, n_resamples, seed, workers):
            return (m for m in solutions.parallel_medians(values, n_resamples, seed, 1))

        with pytest.raises(AssertionError, match="list or array"):
            checks.check_foreach_stats(lazy_medians)

    def test_array_answer_accepted(self):
        def as_array(values, n_resamples, seed, workers):
            return np.asarray(solutions.parallel_medians(values, n_resamples, seed, 1))

        assert checks.check_parallel_stats(as_array) is True
