"""
Tests for parametrizations, constraints and the parametric family factory.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import dataclasses

import numpy as np
import pytest

from sampling_dist.families import (
    ParametricFamily,
    Parametrization,
    constraint,
    parametrization,
)
from sampling_dist.types import UnivariateContinuous


def _make_shift_family() -> ParametricFamily:
    """Point-mass-like toy family: ppf returns the location for every p."""

    def ppf(params, p):
        return np.full(np.shape(p), params.location, dtype=float)

    def mean(params, _):
        return params.location

    family = ParametricFamily(
        name="Shift",
        distr_type=UnivariateContinuous,
        distr_parametrizations=["location", "negated"],
        distr_characteristics={"ppf": ppf, "mean": mean},
    )

    @parametrization(family=family, name="location")
    class _Location(Parametrization):
        location: float

        @constraint(description="location >= 0")
        def check_non_negative(self) -> bool:
            return self.location >= 0

    @parametrization(family=family, name="negated")
    class _Negated(Parametrization):
        minus_location: float

        def transform_to_base_parametrization(self) -> Parametrization:
            return _Location(location=-self.minus_location)

    return family


class TestParametricFamily:
    def setup_method(self):
        self.family = _make_shift_family()

    def test_base_parametrization(self):
        assert self.family.base_parametrization_name == "location"
        assert set(self.family.parametrizations) == {"location", "negated"}

    def test_distribution_from_base(self):
        distr = self.family(location=2.0)

        assert distr.family_name == "Shift"
        assert distr.parametrization_name == "location"
        assert distr.parameters.parameters == {"location": 2.0}
        assert distr.distribution_type == UnivariateContinuous
        assert distr.support is None

    def test_non_base_parametrization_converted(self):
        distr = self.family(parametrization_name="negated", minus_location=-3.0)

        assert distr.parametrization_name == "negated"
        assert distr.calculate_characteristic("mean", None) == 3.0

    def test_constraint_violation(self):
        with pytest.raises(ValueError, match='Constraint "location >= 0" does not hold'):
            self.family(location=-1.0)

    def test_parametrization_is_frozen_dataclass(self):
        params = self.family.base(location=1.0)

        assert dataclasses.is_dataclass(params)
        with pytest.raises(dataclasses.FrozenInstanceError):
            params.location = 5.0  # type: ignore[misc]

    def test_unknown_parametrization(self):
        with pytest.raises(KeyError):
            self.family(parametrization_name="scale", scale=1.0)

    def test_undeclared_parametrization_rejected(self):
        with pytest.raises(ValueError, match="does not declare parametrization 'other'"):

            @parametrization(family=self.family, name="other")
            class _Other(Parametrization):
                x: float

    def test_duplicate_parametrization_rejected(self):
        with pytest.raises(ValueError, match="already registered"):

            @parametrization(family=self.family, name="location")
            class _Again(Parametrization):
                location: float

    def test_static_constraint_rejected(self):
        family = ParametricFamily(
            name="Static",
            distr_type=UnivariateContinuous,
            distr_parametrizations=["p"],
            distr_characteristics={},
        )

        with pytest.raises(TypeError, match="must be an instance method"):

            @parametrization(family=family, name="p")
            class _Static(Parametrization):
                x: float

                @staticmethod
                @constraint(description="always")
                def check() -> bool:
                    return True

    def test_analytical_computations_cached(self):
        distr = self.family(location=1.0)

        assert distr.analytical_computations is distr.analytical_computations

    def test_sampling_uses_ppf(self):
        distr = self.family(location=7.0)

        np.testing.assert_array_equal(distr.sample(4, rng=0).array, np.full((4, 1), 7.0))
