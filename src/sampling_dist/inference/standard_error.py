"""
Standard errors.

Theoretical counterparts of the empirical spread of a simulated sampling
distribution of the mean.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING

from sampling_dist.errors import InvalidParameterError

if TYPE_CHECKING:
    from sampling_dist.population import Population


def standard_error(std: float, n: int) -> float:
    """
    Standard error ``std / sqrt(n)`` of the mean of ``n`` i.i.d. values.

    Raises
    ------
    InvalidParameterError
        If ``std`` is negative or ``n`` is not positive.
    """
    if std < 0:
        raise InvalidParameterError(f"Standard deviation must be non-negative, got {std}.")
    if n <= 0:
        raise InvalidParameterError(f"Sample size must be positive, got {n}.")
    return std / math.sqrt(n)


def finite_population_correction(population_size: int, sample_size: int) -> float:
    """
    Factor ``sqrt((N - n) / (N - 1))`` applied to the standard error when
    sampling ``n`` of ``N`` values without replacement.

    Raises
    ------
    InvalidParameterError
        If ``sample_size`` is not in ``[1, population_size]``.
    """
    if not 1 <= sample_size <= population_size:
        raise InvalidParameterError(
            f"Sample size must be in [1, {population_size}], got {sample_size}."
        )
    if population_size == 1:
        return 0.0
    return math.sqrt((population_size - sample_size) / (population_size - 1))


def expected_standard_error(
    population: Population, sample_size: int, replace: bool = False
) -> float:
    """
    Standard error of the sample mean for samples of ``sample_size`` drawn
    from ``population``.

    Uses the population standard deviation (``ddof=0``); the finite population
    correction applies when drawing without replacement.
    """
    se = standard_error(population.std, sample_size)
    if replace:
        return se
    return se * finite_population_correction(population.size, sample_size)
