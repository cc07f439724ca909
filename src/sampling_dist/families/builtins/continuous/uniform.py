"""
Continuous uniform distribution family.

Registered under ``"ContinuousUniform"``; used for flat populations. The
base ``standard`` parametrization gives the interval ends, ``meanWidth``
its centre and length.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

import numpy as np

from sampling_dist.distributions.support import ContinuousSupport
from sampling_dist.families.builtins.continuous._common import as_probabilities
from sampling_dist.families.parametric_family import ParametricFamily
from sampling_dist.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from sampling_dist.families.registry import ParametricFamilyRegister
from sampling_dist.types import (
    CharacteristicName,
    FamilyName,
    NumericArray,
    UnivariateContinuous,
)

if TYPE_CHECKING:
    from typing import Any


def configure_uniform_family() -> None:
    """Register the ContinuousUniform family unless it is already registered."""
    if ParametricFamilyRegister.contains(FamilyName.CONTINUOUS_UNIFORM):
        return

    def _bounds(parameters: Parametrization) -> tuple[float, float]:
        params = cast(_Standard, parameters)
        return params.lower_bound, params.upper_bound

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        lower, upper = _bounds(parameters)
        x = np.asarray(x, dtype=np.float64)
        inside = (x >= lower) & (x <= upper)
        return cast(NumericArray, np.where(inside, 1.0 / (upper - lower), 0.0))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        lower, upper = _bounds(parameters)
        fraction = (np.asarray(x, dtype=np.float64) - lower) / (upper - lower)
        return cast(NumericArray, np.clip(fraction, 0.0, 1.0))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Quantiles ``lower + p * (upper - lower)``.

        Raises
        ------
        ValueError
            If a probability is outside [0, 1].
        """
        lower, upper = _bounds(parameters)
        return cast(NumericArray, lower + as_probabilities(p) * (upper - lower))

    def mean(parameters: Parametrization, _: Any) -> float:
        lower, upper = _bounds(parameters)
        return 0.5 * (lower + upper)

    def var(parameters: Parametrization, _: Any) -> float:
        lower, upper = _bounds(parameters)
        return (upper - lower) ** 2 / 12

    def skewness(_params: Parametrization, _: Any) -> float:
        return 0.0

    def support(parameters: Parametrization) -> ContinuousSupport:
        lower, upper = _bounds(parameters)
        return ContinuousSupport(left=lower, right=upper)

    uniform = ParametricFamily(
        name=FamilyName.CONTINUOUS_UNIFORM,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["standard", "meanWidth"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean,
            CharacteristicName.VAR: var,
            CharacteristicName.SKEW: skewness,
        },
        support_by_parametrization=support,
    )

    @parametrization(family=uniform, name="standard")
    class _Standard(Parametrization):
        lower_bound: float
        upper_bound: float

        @constraint(description="lower_bound < upper_bound")
        def check_bounds_ordered(self) -> bool:
            return self.lower_bound < self.upper_bound

    @parametrization(family=uniform, name="meanWidth")
    class _MeanWidth(Parametrization):
        mean: float
        width: float

        @constraint(description="width > 0")
        def check_width_positive(self) -> bool:
            return self.width > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            half = 0.5 * self.width
            return _Standard(lower_bound=self.mean - half, upper_bound=self.mean + half)

    ParametricFamilyRegister.register(uniform)
