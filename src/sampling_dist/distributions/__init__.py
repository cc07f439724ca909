"""
Distributions subpackage

Interfaces and default implementations for probability distributions used
to build populations and evaluate densities:

- analytical computations (:mod:`.computation`);
- distribution protocol (:mod:`.distribution`);
- sampling protocol and array-backed samples (:mod:`.sampling`);
- pluggable strategies (:mod:`.strategies`);
- continuous supports (:mod:`.support`).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
from .computation import AnalyticalComputation
from .distribution import Distribution
from .sampling import ArraySample, Sample
from .strategies import (
    ComputationStrategy,
    DefaultComputationStrategy,
    DefaultSamplingUnivariateStrategy,
    RandomSource,
    SamplingStrategy,
)
from .support import ContinuousSupport

__all__ = [
    # computation primitives
    "AnalyticalComputation",
    # distribution
    "Distribution",
    # sampling
    "Sample",
    "ArraySample",
    # strategies
    "ComputationStrategy",
    "DefaultComputationStrategy",
    "SamplingStrategy",
    "DefaultSamplingUnivariateStrategy",
    "RandomSource",
    # support
    "ContinuousSupport",
]
