"""
Sampling Distribution
=====================

The outcome of a simulation run: one trial statistic per trial, kept in a
read-only array together with the parameters that produced it.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy import stats

from sampling_dist.errors import InvalidParameterError
from sampling_dist.families.configuration import configure_families_register
from sampling_dist.types import FamilyName, StatisticName

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any

    from sampling_dist.families.distribution import ParametricFamilyDistribution
    from sampling_dist.types import NumericArray


def _check_level(level: float) -> None:
    if not 0 < level < 1:
        raise InvalidParameterError(f"Confidence level must be in (0, 1), got {level}.")


@dataclass(frozen=True, slots=True)
class SamplingDistribution:
    """
    Empirical distribution of a trial statistic.

    Parameters
    ----------
    values : NumericArray
        One statistic per trial, in trial-index order (read-only).
    statistic : str
        Name of the statistic.
    sample_size : int
        Sample size ``k`` of every trial.
    replace : bool
        Whether samples were drawn with replacement.
    entropy : int
        Root entropy of the run; rerunning with ``seed=entropy`` and the same
        configuration reproduces ``values``.
    sample_stds : NumericArray or None
        Per-trial sample standard deviations (``ddof=1``) when recorded.
    """

    values: NumericArray
    statistic: str
    sample_size: int
    replace: bool
    entropy: int
    sample_stds: NumericArray | None = None

    def __post_init__(self) -> None:
        values = np.array(self.values, dtype=np.float64, copy=True)
        values.setflags(write=False)
        object.__setattr__(self, "values", values)
        if self.sample_stds is not None:
            stds = np.array(self.sample_stds, dtype=np.float64, copy=True)
            stds.setflags(write=False)
            object.__setattr__(self, "sample_stds", stds)

    def __len__(self) -> int:
        return int(self.values.size)

    def __iter__(self) -> Iterator[float]:
        return iter(self.values.tolist())

    @property
    def n_trials(self) -> int:
        return len(self)

    @property
    def mean(self) -> float:
        """Mean of the trial statistics."""
        return float(self.values.mean())

    @property
    def standard_error(self) -> float:
        """
        Standard deviation of the trial statistics (``ddof=1``).

        This is the empirical standard error of the statistic. ``nan`` for a
        single trial.
        """
        if self.n_trials < 2:
            return float("nan")
        return float(self.values.std(ddof=1))

    def quantile(self, q: float | NumericArray) -> float | NumericArray:
        """Empirical quantile(s) of the trial statistics."""
        result = np.quantile(self.values, q)
        return float(result) if np.ndim(result) == 0 else cast("NumericArray", result)

    def histogram(
        self, bins: int | NumericArray = 50, density: bool = False
    ) -> tuple[NumericArray, NumericArray]:
        """
        Histogram of the trial statistics.

        Returns
        -------
        counts : NumericArray
            Counts (or densities) per bin.
        edges : NumericArray
            Bin edges, one more than ``counts``.
        """
        counts, edges = np.histogram(self.values, bins=bins, density=density)
        return counts, edges

    def summary(self) -> dict[str, Any]:
        """Plain dictionary describing the run."""
        return {
            "statistic": str(self.statistic),
            "n_trials": self.n_trials,
            "sample_size": self.sample_size,
            "replace": self.replace,
            "entropy": self.entropy,
            "mean": self.mean,
            "standard_error": self.standard_error,
            "min": float(self.values.min()),
            "max": float(self.values.max()),
            "median": float(np.median(self.values)),
        }

    def normal_approximation(self) -> ParametricFamilyDistribution:
        """
        Normal distribution with the empirical mean and standard error.

        Raises
        ------
        ValueError
            If the standard error is not positive (e.g. a constant
            population or a single trial).
        """
        normal = configure_families_register().get(FamilyName.NORMAL)
        return normal(mu=self.mean, sigma=self.standard_error)

    def confidence_intervals(self, level: float = 0.95) -> NumericArray:
        """
        Per-trial Student-t confidence intervals for the population mean.

        Interval ``i`` is ``mean_i ± t · s_i / sqrt(k)`` with ``t`` the
        ``(1 + level) / 2`` quantile of Student's t with ``k - 1`` degrees of
        freedom.

        Returns
        -------
        NumericArray
            Array of shape ``(n_trials, 2)`` with lower and upper bounds.

        Raises
        ------
        InvalidParameterError
            If the run did not use the mean statistic with recorded sample
            standard deviations, if ``k < 2`` or ``level`` is outside (0, 1).
        """
        _check_level(level)
        if self.statistic != StatisticName.MEAN or self.sample_stds is None:
            raise InvalidParameterError(
                "Confidence intervals need the mean statistic with recorded sample stds."
            )
        if self.sample_size < 2:
            raise InvalidParameterError("Confidence intervals need sample_size >= 2.")

        t_crit = float(stats.t.ppf((1 + level) / 2, df=self.sample_size - 1))
        half_width = t_crit * self.sample_stds / np.sqrt(self.sample_size)
        bounds = np.column_stack((self.values - half_width, self.values + half_width))
        return cast("NumericArray", bounds)

    def coverage(self, true_value: float, level: float = 0.95) -> float:
        """Share of per-trial confidence intervals containing ``true_value``."""
        intervals = self.confidence_intervals(level)
        hits = (intervals[:, 0] <= true_value) & (true_value <= intervals[:, 1])
        return float(hits.mean())
