"""
Normal distribution family.

Registered under ``"Normal"`` with two parametrizations:

- ``meanStd`` (base): mean ``mu`` and standard deviation ``sigma > 0``;
- ``meanPrec``: mean ``mu`` and precision ``tau = 1 / sigma**2 > 0``.

The family supplies the reference curve for a simulated sampling
distribution of the mean and the tail probabilities of the z-test.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import ndtr, ndtri

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

_LOG_SQRT_2PI = 0.5 * math.log(2 * math.pi)


def configure_normal_family() -> None:
    """Register the Normal family unless it is already registered."""
    if ParametricFamilyRegister.contains(FamilyName.NORMAL):
        return

    def _z(parameters: Parametrization, x: NumericArray) -> tuple[_MeanStd, NumericArray]:
        params = cast(_MeanStd, parameters)
        z = (np.asarray(x, dtype=np.float64) - params.mu) / params.sigma
        return params, cast(NumericArray, z)

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """Density ``exp(-z**2 / 2) / (sigma * sqrt(2 pi))`` with ``z = (x - mu) / sigma``."""
        params, z = _z(parameters, x)
        return cast(NumericArray, np.exp(-0.5 * z**2 - _LOG_SQRT_2PI) / params.sigma)

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        _, z = _z(parameters, x)
        return cast(NumericArray, ndtr(z))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Quantiles; ``p = 0`` and ``p = 1`` map to ``-inf`` and ``inf``.

        Raises
        ------
        ValueError
            If a probability is outside [0, 1].
        """
        params = cast(_MeanStd, parameters)
        return cast(NumericArray, params.mu + params.sigma * ndtri(as_probabilities(p)))

    def mean(parameters: Parametrization, _: Any) -> float:
        return cast(_MeanStd, parameters).mu

    def var(parameters: Parametrization, _: Any) -> float:
        return cast(_MeanStd, parameters).sigma ** 2

    def skewness(_params: Parametrization, _: Any) -> float:
        return 0.0

    def kurtosis(_params: Parametrization, _: Any, excess: bool = False) -> float:
        """Kurtosis, 3, or excess kurtosis, 0."""
        return 0.0 if excess else 3.0

    normal = ParametricFamily(
        name=FamilyName.NORMAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["meanStd", "meanPrec"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean,
            CharacteristicName.VAR: var,
            CharacteristicName.SKEW: skewness,
            CharacteristicName.KURT: kurtosis,
        },
        support_by_parametrization=lambda _params: ContinuousSupport(),
    )

    @parametrization(family=normal, name="meanStd")
    class _MeanStd(Parametrization):
        mu: float
        sigma: float

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> bool:
            return self.sigma > 0

    @parametrization(family=normal, name="meanPrec")
    class _MeanPrec(Parametrization):
        mu: float
        tau: float

        @constraint(description="tau > 0")
        def check_tau_positive(self) -> bool:
            return self.tau > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _MeanStd(mu=self.mu, sigma=1 / math.sqrt(self.tau))

    ParametricFamilyRegister.register(normal)
