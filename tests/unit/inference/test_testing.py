from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import dataclasses
import math

import numpy as np
import pytest
from scipy import stats

from sampling_dist.errors import InvalidParameterError
from sampling_dist.inference import TestResult, empirical_p_value, t_test, z_score, z_test
from sampling_dist.simulation import SamplingDistribution, simulate_sampling_distribution
from sampling_dist.types import Alternative

SAMPLE = np.array([24.1, 31.5, 19.8, 27.3, 35.0, 22.6, 29.9, 26.4, 33.2, 21.7])


def null_distribution(values) -> SamplingDistribution:
    return SamplingDistribution(
        values=np.asarray(values, dtype=np.float64),
        statistic="mean",
        sample_size=4,
        replace=True,
        entropy=0,
    )


class TestTestResult:
    def test_reject(self) -> None:
        result = TestResult(statistic=2.0, p_value=0.03, alternative=Alternative.TWO_SIDED)

        assert result.reject(0.05)
        assert not result.reject(0.01)

    def test_is_frozen(self) -> None:
        result = TestResult(statistic=0.0, p_value=1.0, alternative=Alternative.LESS)

        with pytest.raises(dataclasses.FrozenInstanceError):
            result.p_value = 0.0  # type: ignore[misc]

    @pytest.mark.parametrize("alpha", [0.0, 1.0, -0.1])
    def test_invalid_alpha(self, alpha) -> None:
        result = TestResult(statistic=0.0, p_value=0.5, alternative=Alternative.GREATER)

        with pytest.raises(InvalidParameterError, match="Significance level"):
            result.reject(alpha)


class TestZScore:
    def test_scalar(self) -> None:
        assert z_score(31.0, mu=25.0, sigma=3.0) == pytest.approx(2.0)

    def test_array(self) -> None:
        np.testing.assert_allclose(z_score(np.array([22.0, 28.0]), 25.0, 3.0), [-1.0, 1.0])

    def test_sigma_must_be_positive(self) -> None:
        with pytest.raises(InvalidParameterError, match="sigma must be positive"):
            z_score(1.0, 0.0, 0.0)


class TestZTest:
    @pytest.mark.parametrize(
        "alternative, tail",
        [
            ("two-sided", lambda z: 2 * stats.norm.sf(abs(z))),
            ("less", stats.norm.cdf),
            ("greater", stats.norm.sf),
        ],
    )
    def test_matches_normal_tails(self, alternative, tail) -> None:
        result = z_test(SAMPLE, population_mean=25.0, population_std=5.0, alternative=alternative)

        expected_z = (SAMPLE.mean() - 25.0) / (5.0 / math.sqrt(SAMPLE.size))
        assert result.statistic == pytest.approx(expected_z)
        assert result.p_value == pytest.approx(tail(expected_z), rel=1e-9)
        assert result.alternative == alternative

    def test_no_difference(self) -> None:
        result = z_test([1.0, 3.0], population_mean=2.0, population_std=1.0)

        assert result.statistic == 0.0
        assert result.p_value == pytest.approx(1.0)
        assert not result.reject()

    def test_std_must_be_positive(self) -> None:
        with pytest.raises(InvalidParameterError, match="must be positive"):
            z_test(SAMPLE, 25.0, 0.0)

    def test_empty_sample(self) -> None:
        with pytest.raises(InvalidParameterError, match="non-empty"):
            z_test([], 25.0, 1.0)

    @pytest.mark.parametrize("value", [math.nan, math.inf])
    def test_non_finite_sample(self, value) -> None:
        with pytest.raises(InvalidParameterError, match="Sample values must be finite"):
            z_test([24.0, value, 26.0], 25.0, 1.0)

    @pytest.mark.parametrize(
        ("mean", "std", "message"),
        [
            (math.nan, 1.0, "Population mean"),
            (25.0, math.nan, "Population standard deviation"),
            (25.0, math.inf, "Population standard deviation"),
        ],
    )
    def test_non_finite_population_parameters(self, mean, std, message) -> None:
        with pytest.raises(InvalidParameterError, match=message):
            z_test(SAMPLE, mean, std)

    def test_unknown_alternative(self) -> None:
        with pytest.raises(InvalidParameterError, match="Unknown alternative 'bigger'"):
            z_test(SAMPLE, 25.0, 1.0, alternative="bigger")


class TestTTest:
    @pytest.mark.parametrize("alternative", ["two-sided", "less", "greater"])
    def test_matches_scipy(self, alternative) -> None:
        result = t_test(SAMPLE, population_mean=25.0, alternative=alternative)
        reference = stats.ttest_1samp(SAMPLE, 25.0, alternative=alternative)

        assert result.statistic == pytest.approx(reference.statistic)
        assert result.p_value == pytest.approx(reference.pvalue, rel=1e-9)

    def test_needs_two_observations(self) -> None:
        with pytest.raises(InvalidParameterError, match="at least two observations"):
            t_test([5.0], 5.0)

    def test_zero_variance(self) -> None:
        with pytest.raises(InvalidParameterError, match="zero variance"):
            t_test([5.0, 5.0, 5.0], 4.0)

    def test_nan_in_sample(self) -> None:
        with pytest.raises(InvalidParameterError, match="Sample values must be finite"):
            t_test([1.0, 2.0, math.nan], 0.0)

    def test_non_finite_population_mean(self) -> None:
        with pytest.raises(InvalidParameterError, match="Population mean must be finite"):
            t_test(SAMPLE, math.inf)


class TestEmpiricalPValue:
    def test_one_sided_counts(self) -> None:
        null = null_distribution(np.arange(1, 10))

        greater = empirical_p_value(null, 8.0, alternative="greater")
        less = empirical_p_value(null, 2.0, alternative=Alternative.LESS)

        assert greater.p_value == pytest.approx(3 / 10)
        assert less.p_value == pytest.approx(3 / 10)
        assert greater.statistic == 8.0

    def test_two_sided_uses_distance_from_null_mean(self) -> None:
        null = null_distribution(np.arange(1, 10))

        result = empirical_p_value(null, 8.0)

        # |x - 5| >= 3 for 1, 2, 8, 9
        assert result.p_value == pytest.approx(5 / 10)

    def test_never_zero(self) -> None:
        null = null_distribution(np.zeros(99))

        assert empirical_p_value(null, 1.0, alternative="greater").p_value == pytest.approx(0.01)

    @pytest.mark.parametrize("alternative", ["two-sided", "less", "greater"])
    def test_nan_observed(self, alternative) -> None:
        null = null_distribution(np.arange(100.0))

        with pytest.raises(InvalidParameterError, match="Observed statistic must be finite"):
            empirical_p_value(null, math.nan, alternative=alternative)

    def test_simulated_null_rejects_shifted_mean(self, skewed_population) -> None:
        null = simulate_sampling_distribution(skewed_population, 40, 5000, seed=21)
        shift = 4 * null.standard_error

        far = empirical_p_value(null, skewed_population.mean + shift)
        typical = empirical_p_value(null, skewed_population.mean)

        assert far.reject(0.01)
        assert not typical.reject(0.05)
