"""
Beta distribution family implementation.

The family carries location and scale parameters so that a Beta(α, β) shape
can be stretched onto any bounded interval, e.g. Beta(1, 3) on [0, 100] for a
right-skewed population of scores.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import betainc, betaincinv, betaln, xlog1py, xlogy

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


def configure_beta_family() -> None:
    """
    Configure and register the Beta distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BETA):
        return

    BETA_DOC = """
    Beta distribution on [loc, loc + scale].

    Probability density function of the standardised variable
    z = (x - loc) / scale:
        f(z) = z^(α-1) (1-z)^(β-1) / B(α, β),  0 ≤ z ≤ 1

    With α < β the distribution is skewed to the right; Beta(1, 3) has
    mean 1/4 and standard deviation √3/20 on the unit interval.
    """

    def _standardize(parameters: _Shape, x: NumericArray) -> NumericArray:
        z = (np.asarray(x, dtype=np.float64) - parameters.loc) / parameters.scale
        return cast(NumericArray, z)

    def pdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Probability density function for beta distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - alpha: float (first shape parameter)
            - beta: float (second shape parameter)
            - loc: float (left end of the support)
            - scale: float (width of the support)
        x : NumericArray
            Points at which to evaluate the probability density function

        Returns
        -------
        NumericArray
            Probability density values at points x, zero outside the support
        """
        parameters = cast(_Shape, parameters)
        a, b = parameters.alpha, parameters.beta
        z = _standardize(parameters, x)

        inside = (z >= 0.0) & (z <= 1.0)
        zc = np.clip(z, 0.0, 1.0)
        with np.errstate(divide="ignore"):
            log_density = xlogy(a - 1, zc) + xlog1py(b - 1, -zc) - betaln(a, b)
        density = np.exp(log_density) / parameters.scale
        return cast(NumericArray, np.where(inside, density, 0.0))

    def cdf(parameters: Parametrization, x: NumericArray) -> NumericArray:
        """
        Cumulative distribution function for beta distribution.

        Returns
        -------
        NumericArray
            Probabilities P(X ≤ x), clipped to 0 left of the support and to
            1 right of it
        """
        parameters = cast(_Shape, parameters)
        z = np.clip(_standardize(parameters, x), 0.0, 1.0)
        return cast(NumericArray, betainc(parameters.alpha, parameters.beta, z))

    def ppf(parameters: Parametrization, p: NumericArray) -> NumericArray:
        """
        Quantiles ``loc + scale * I^-1(p; alpha, beta)``.

        Raises
        ------
        ValueError
            If a probability is outside [0, 1].
        """
        parameters = cast(_Shape, parameters)
        z = betaincinv(parameters.alpha, parameters.beta, as_probabilities(p))
        return cast(NumericArray, parameters.loc + parameters.scale * z)

    def mean_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Shape, parameters)
        a, b = parameters.alpha, parameters.beta
        return parameters.loc + parameters.scale * a / (a + b)

    def var_func(parameters: Parametrization, _: Any) -> float:
        parameters = cast(_Shape, parameters)
        a, b = parameters.alpha, parameters.beta
        return parameters.scale**2 * a * b / ((a + b) ** 2 * (a + b + 1))

    def skew_func(parameters: Parametrization, _: Any) -> float:
        """Skewness of beta distribution (invariant to loc and scale)."""
        parameters = cast(_Shape, parameters)
        a, b = parameters.alpha, parameters.beta
        return 2 * (b - a) * math.sqrt(a + b + 1) / ((a + b + 2) * math.sqrt(a * b))

    def _support(parameters: Parametrization) -> ContinuousSupport:
        parameters = cast(_Shape, parameters)
        return ContinuousSupport(
            left=parameters.loc,
            right=parameters.loc + parameters.scale,
            left_closed=True,
            right_closed=True,
        )

    Beta = ParametricFamily(
        name=FamilyName.BETA,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["shape", "meanConcentration"],
        distr_characteristics={
            CharacteristicName.PDF: pdf,
            CharacteristicName.CDF: cdf,
            CharacteristicName.PPF: ppf,
            CharacteristicName.MEAN: mean_func,
            CharacteristicName.VAR: var_func,
            CharacteristicName.SKEW: skew_func,
        },
        support_by_parametrization=_support,
    )
    Beta.__doc__ = BETA_DOC

    @parametrization(family=Beta, name="shape")
    class _Shape(Parametrization):
        """
        Shape parametrization of beta distribution.

        Parameters
        ----------
        alpha : float
            First shape parameter
        beta : float
            Second shape parameter
        loc : float
            Left end of the support
        scale : float
            Width of the support
        """

        alpha: float
        beta: float
        loc: float = 0.0
        scale: float = 1.0

        @constraint(description="alpha > 0")
        def check_alpha_positive(self) -> bool:
            return self.alpha > 0

        @constraint(description="beta > 0")
        def check_beta_positive(self) -> bool:
            return self.beta > 0

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

    @parametrization(family=Beta, name="meanConcentration")
    class _MeanConcentration(Parametrization):
        """
        Mean-concentration parametrization of beta distribution.

        ``alpha = mean * concentration`` and
        ``beta = (1 - mean) * concentration``, where ``mean`` is the mean of
        the standardised variable on [0, 1].
        """

        mean: float
        concentration: float
        loc: float = 0.0
        scale: float = 1.0

        @constraint(description="0 < mean < 1")
        def check_mean_in_unit_interval(self) -> bool:
            return 0 < self.mean < 1

        @constraint(description="concentration > 0")
        def check_concentration_positive(self) -> bool:
            return self.concentration > 0

        @constraint(description="scale > 0")
        def check_scale_positive(self) -> bool:
            return self.scale > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _Shape(
                alpha=self.mean * self.concentration,
                beta=(1 - self.mean) * self.concentration,
                loc=self.loc,
                scale=self.scale,
            )

    ParametricFamilyRegister.register(Beta)
