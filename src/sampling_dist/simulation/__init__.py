"""
Simulation subpackage

Monte Carlo approximation of sampling distributions:

- run configuration (:mod:`.config`);
- random stream layout (:mod:`.seeding`);
- trial statistics (:mod:`.statistics`);
- the simulator (:mod:`.simulator`);
- the resulting sampling distribution (:mod:`.result`).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .config import (
    DEFAULT_BLOCK_SIZE,
    DEFAULT_N_TRIALS,
    DEFAULT_SAMPLE_SIZE,
    SimulationConfig,
)
from .result import SamplingDistribution
from .simulator import SamplingDistributionSimulator, simulate_sampling_distribution
from .statistics import BUILTIN_STATISTICS, Statistic, resolve_statistic

__all__ = [
    "DEFAULT_BLOCK_SIZE",
    "DEFAULT_N_TRIALS",
    "DEFAULT_SAMPLE_SIZE",
    "SimulationConfig",
    "SamplingDistribution",
    "SamplingDistributionSimulator",
    "simulate_sampling_distribution",
    "BUILTIN_STATISTICS",
    "Statistic",
    "resolve_statistic",
]
