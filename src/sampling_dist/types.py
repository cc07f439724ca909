"""
Core Type Definitions
=====================

Aliases and enumerations shared by populations, distribution families, the
sampling-distribution simulator and the inference helpers.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

import numpy as np
from numpy.typing import NDArray

type NumericArray = NDArray[np.floating[Any] | np.integer[Any]]
"""Array of population values, sample values or trial statistics."""

type GenericCharacteristicName = str
type ParametrizationName = str


class Kind(StrEnum):
    CONTINUOUS = "continuous"


class DistributionType:
    """Marker base for descriptions of a distribution's value space."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType(DistributionType):
    """
    Distribution over ``R^dimension``.

    Parameters
    ----------
    kind : Kind
        Nature of the values; only continuous families are built in.
    dimension : int
        Number of coordinates of one observation.
    """

    kind: Kind
    dimension: int


UnivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=1)
"""Value space of every built-in family and every population."""


class CharacteristicName(StrEnum):
    """Characteristics the built-in families compute in closed form."""

    PDF = "pdf"
    CDF = "cdf"
    PPF = "ppf"
    MEAN = "mean"
    VAR = "var"
    SKEW = "skewness"
    KURT = "kurtosis"


class FamilyName(StrEnum):
    NORMAL = "Normal"
    BETA = "Beta"
    CONTINUOUS_UNIFORM = "ContinuousUniform"


class StatisticName(StrEnum):
    """
    Names of the built-in trial statistics.

    Attributes
    ----------
    MEAN : str
        Arithmetic mean of the sample.
    MEDIAN : str
        Sample median.
    STD : str
        Sample standard deviation (``ddof=1``).
    VAR : str
        Sample variance (``ddof=1``).
    SUM : str
        Sum of the sample values.
    """

    MEAN = "mean"
    MEDIAN = "median"
    STD = "std"
    VAR = "var"
    SUM = "sum"


class Alternative(StrEnum):
    """Alternative hypothesis of a significance test."""

    TWO_SIDED = "two-sided"
    LESS = "less"
    GREATER = "greater"


__all__ = [
    "Kind",
    "DistributionType",
    "EuclideanDistributionType",
    "UnivariateContinuous",
    "GenericCharacteristicName",
    "ParametrizationName",
    "NumericArray",
    "CharacteristicName",
    "FamilyName",
    "StatisticName",
    "Alternative",
]
