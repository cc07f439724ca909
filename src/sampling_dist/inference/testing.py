"""
Null-Hypothesis Significance Tests
==================================

One-sample tests of a population mean:

- :func:`z_test`: known population standard deviation, normal tails;
- :func:`t_test`: unknown standard deviation, Student-t tails;
- :func:`empirical_p_value`: tail share of a simulated null sampling
  distribution (Monte Carlo test).

Notes
-----
- ``alternative`` follows :class:`~sampling_dist.types.Alternative`:
  ``"two-sided"``, ``"less"`` or ``"greater"``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from scipy import stats

from sampling_dist.errors import InvalidParameterError
from sampling_dist.families.configuration import configure_families_register
from sampling_dist.types import Alternative, FamilyName

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sampling_dist.simulation.result import SamplingDistribution
    from sampling_dist.types import NumericArray


@dataclass(frozen=True, slots=True)
class TestResult:
    """
    Outcome of a significance test.

    Parameters
    ----------
    statistic : float
        Test statistic (z, t, or the observed value for Monte Carlo tests).
    p_value : float
        Probability, under the null hypothesis, of a result at least as
        extreme as the observed one.
    alternative : Alternative
        Alternative hypothesis the p-value refers to.
    """

    __test__ = False

    statistic: float
    p_value: float
    alternative: Alternative

    def reject(self, alpha: float = 0.05) -> bool:
        """Whether the null hypothesis is rejected at significance ``alpha``."""
        if not 0 < alpha < 1:
            raise InvalidParameterError(f"Significance level must be in (0, 1), got {alpha}.")
        return self.p_value < alpha


def _resolve_alternative(alternative: Alternative | str) -> Alternative:
    try:
        return Alternative(alternative)
    except ValueError:
        known = ", ".join(a.value for a in Alternative)
        raise InvalidParameterError(
            f"Unknown alternative '{alternative}' (known: {known})."
        ) from None


def _check_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise InvalidParameterError(f"{name} must be finite, got {value}.")


def _as_sample(sample: Iterable[float] | NumericArray) -> NumericArray:
    arr = np.asarray(sample, dtype=np.float64)
    if arr.ndim != 1 or arr.size == 0:
        raise InvalidParameterError("Sample must be a non-empty one-dimensional collection.")
    if not np.isfinite(arr).all():
        raise InvalidParameterError("Sample values must be finite.")
    return arr


def z_score(x: float | NumericArray, mu: float, sigma: float) -> float | NumericArray:
    """Standardised distance ``(x - mu) / sigma``."""
    if sigma <= 0:
        raise InvalidParameterError(f"sigma must be positive, got {sigma}.")
    z = (np.asarray(x, dtype=np.float64) - mu) / sigma
    return float(z) if np.ndim(z) == 0 else z


def z_test(
    sample: Iterable[float] | NumericArray,
    population_mean: float,
    population_std: float,
    alternative: Alternative | str = Alternative.TWO_SIDED,
) -> TestResult:
    """
    One-sample z-test of ``H0: mean == population_mean``.

    Parameters
    ----------
    sample : sequence of float
        Observed sample.
    population_mean : float
        Mean under the null hypothesis.
    population_std : float
        Known population standard deviation.
    alternative : Alternative or str, default "two-sided"
        Alternative hypothesis.

    Returns
    -------
    TestResult
        ``z = (x̄ - μ0) / (σ / sqrt(n))`` and its normal tail probability.
    """
    alt = _resolve_alternative(alternative)
    arr = _as_sample(sample)
    _check_finite("Population mean", population_mean)
    _check_finite("Population standard deviation", population_std)
    if population_std <= 0:
        raise InvalidParameterError(
            f"Population standard deviation must be positive, got {population_std}."
        )

    z = (float(arr.mean()) - population_mean) / (population_std / math.sqrt(arr.size))
    standard_normal = configure_families_register().get(FamilyName.NORMAL)(mu=0.0, sigma=1.0)
    cdf = standard_normal.query_method("cdf")

    if alt is Alternative.LESS:
        p_value = float(cdf(z))
    elif alt is Alternative.GREATER:
        p_value = float(cdf(-z))
    else:
        p_value = float(2 * cdf(-abs(z)))
    return TestResult(statistic=z, p_value=min(p_value, 1.0), alternative=alt)


def t_test(
    sample: Iterable[float] | NumericArray,
    population_mean: float,
    alternative: Alternative | str = Alternative.TWO_SIDED,
) -> TestResult:
    """
    One-sample Student t-test of ``H0: mean == population_mean``.

    Raises
    ------
    InvalidParameterError
        If the sample has fewer than two values, zero spread or non-finite
        values.
    """
    alt = _resolve_alternative(alternative)
    arr = _as_sample(sample)
    _check_finite("Population mean", population_mean)
    if arr.size < 2:
        raise InvalidParameterError("t-test needs at least two observations.")
    s = float(arr.std(ddof=1))
    if s == 0:
        raise InvalidParameterError("t-test is undefined for a sample with zero variance.")

    t = (float(arr.mean()) - population_mean) / (s / math.sqrt(arr.size))
    df = arr.size - 1
    if alt is Alternative.LESS:
        p_value = float(stats.t.cdf(t, df))
    elif alt is Alternative.GREATER:
        p_value = float(stats.t.sf(t, df))
    else:
        p_value = float(2 * stats.t.sf(abs(t), df))
    return TestResult(statistic=t, p_value=min(p_value, 1.0), alternative=alt)


def empirical_p_value(
    null_distribution: SamplingDistribution,
    observed: float,
    alternative: Alternative | str = Alternative.TWO_SIDED,
) -> TestResult:
    """
    Monte Carlo p-value of ``observed`` against a simulated null distribution.

    The estimate is ``(count + 1) / (T + 1)`` where ``count`` is the number of
    null statistics at least as extreme as ``observed``. Two-sided extremity
    is measured as distance from the null distribution's mean.

    Raises
    ------
    InvalidParameterError
        If ``observed`` is not finite.
    """
    alt = _resolve_alternative(alternative)
    _check_finite("Observed statistic", observed)
    values = null_distribution.values
    if alt is Alternative.LESS:
        count = int(np.count_nonzero(values <= observed))
    elif alt is Alternative.GREATER:
        count = int(np.count_nonzero(values >= observed))
    else:
        center = float(values.mean())
        count = int(np.count_nonzero(np.abs(values - center) >= abs(observed - center)))
    p_value = (count + 1) / (values.size + 1)
    return TestResult(statistic=float(observed), p_value=p_value, alternative=alt)
