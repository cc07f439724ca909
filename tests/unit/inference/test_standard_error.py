from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import pytest

from sampling_dist.errors import InvalidParameterError
from sampling_dist.inference import (
    expected_standard_error,
    finite_population_correction,
    standard_error,
)


class TestStandardError:
    def test_value(self) -> None:
        assert standard_error(10.0, 25) == pytest.approx(2.0)

    def test_zero_spread(self) -> None:
        assert standard_error(0.0, 3) == 0.0

    @pytest.mark.parametrize("std, n", [(-1.0, 4), (1.0, 0), (1.0, -2)])
    def test_invalid_arguments(self, std, n) -> None:
        with pytest.raises(InvalidParameterError):
            standard_error(std, n)


class TestFinitePopulationCorrection:
    def test_value(self) -> None:
        assert finite_population_correction(101, 51) == pytest.approx(math.sqrt(0.5))

    def test_single_draw_is_uncorrected(self) -> None:
        assert finite_population_correction(1000, 1) == pytest.approx(1.0)

    def test_census_has_no_spread(self) -> None:
        assert finite_population_correction(10, 10) == 0.0
        assert finite_population_correction(1, 1) == 0.0

    @pytest.mark.parametrize("n", [0, 11])
    def test_sample_size_out_of_range(self, n) -> None:
        with pytest.raises(InvalidParameterError, match=r"Sample size must be in \[1, 10\]"):
            finite_population_correction(10, n)


class TestExpectedStandardError:
    def test_with_replacement(self, small_population) -> None:
        expected = small_population.std / math.sqrt(4)

        assert expected_standard_error(small_population, 4, replace=True) == pytest.approx(
            expected
        )

    def test_without_replacement_applies_correction(self, small_population) -> None:
        expected = small_population.std / math.sqrt(4) * math.sqrt(6 / 9)

        assert expected_standard_error(small_population, 4) == pytest.approx(expected)

    def test_large_population_corrections_are_negligible(self, skewed_population) -> None:
        with_replacement = expected_standard_error(skewed_population, 40, replace=True)
        without_replacement = expected_standard_error(skewed_population, 40)

        assert without_replacement == pytest.approx(with_replacement, rel=1e-3)
