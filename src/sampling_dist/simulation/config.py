"""
Simulation Configuration
========================

Explicit run configuration for the sampling-distribution simulator. Nothing
is read from process-wide state: the trial count, sample size, replacement
policy, seed and degree of parallelism all travel in one frozen object.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import dataclasses
import math
from dataclasses import dataclass
from numbers import Integral
from typing import TYPE_CHECKING

from sampling_dist.errors import InvalidParameterError

if TYPE_CHECKING:
    from typing import Any

DEFAULT_SAMPLE_SIZE = 40
DEFAULT_N_TRIALS = 100_000
DEFAULT_BLOCK_SIZE = 1_000


def _require_positive_int(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}.")
    if value <= 0:
        raise InvalidParameterError(f"{name} must be positive, got {value}.")


@dataclass(frozen=True, slots=True)
class SimulationConfig:
    """
    Configuration of a sampling-distribution run.

    Parameters
    ----------
    sample_size : int, default 40
        Number of values ``k`` drawn from the population in every trial.
    n_trials : int, default 100000
        Number of trials ``T``; the result holds exactly ``T`` statistics.
    replace : bool, default False
        Draw each sample with replacement. Without replacement a sample
        consists of ``k`` distinct population members.
    seed : int or None, default None
        Root seed. ``None`` draws fresh entropy from the operating system; the
        entropy actually used is reported on the result so the run can be
        repeated.
    n_workers : int, default 1
        Number of threads executing trial blocks. Results do not depend on it.
    block_size : int, default 1000
        Number of consecutive trials sharing one random stream. Part of the
        stream layout: changing it changes the draws for a given seed.

    Raises
    ------
    InvalidParameterError
        If any count is not a positive integer or the seed is negative.
    """

    sample_size: int = DEFAULT_SAMPLE_SIZE
    n_trials: int = DEFAULT_N_TRIALS
    replace: bool = False
    seed: int | None = None
    n_workers: int = 1
    block_size: int = DEFAULT_BLOCK_SIZE

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        _require_positive_int("sample_size", self.sample_size)
        _require_positive_int("n_trials", self.n_trials)
        _require_positive_int("n_workers", self.n_workers)
        _require_positive_int("block_size", self.block_size)
        if not isinstance(self.replace, bool):
            raise InvalidParameterError(f"replace must be a bool, got {self.replace!r}.")
        if self.seed is not None:
            if isinstance(self.seed, bool) or not isinstance(self.seed, Integral):
                raise InvalidParameterError(f"seed must be an integer or None, got {self.seed!r}.")
            if self.seed < 0:
                raise InvalidParameterError(f"seed must be non-negative, got {self.seed}.")

    @property
    def n_blocks(self) -> int:
        """Number of trial blocks (the last one may be shorter)."""
        return math.ceil(self.n_trials / self.block_size)

    def block_bounds(self, block: int) -> tuple[int, int]:
        """Half-open range ``[start, stop)`` of trial indices in ``block``."""
        start = block * self.block_size
        return start, min(start + self.block_size, self.n_trials)

    def with_options(self, **changes: Any) -> SimulationConfig:
        """Return a copy with ``changes`` applied (validated again)."""
        return dataclasses.replace(self, **changes)
