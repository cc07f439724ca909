"""
Trial Statistics
================

A trial statistic maps one sample to one number. Built-in statistics are
vectorised: applied to an ``(n, k)`` block of samples they reduce along the
last axis in a single call. Arbitrary user callables are accepted too and
are applied sample by sample.

Statistics must be pure: they see only the sample they are given.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING, cast

import numpy as np

from sampling_dist.errors import InvalidParameterError
from sampling_dist.types import NumericArray, StatisticName

if TYPE_CHECKING:
    from collections.abc import Callable

    type StatisticFunc = Callable[[NumericArray], float | NumericArray]
    type StatisticLike = StatisticName | str | Statistic | Callable[[NumericArray], float]


@dataclass(frozen=True, slots=True)
class Statistic:
    """
    Named trial statistic.

    Parameters
    ----------
    name : str
        Label reported on the resulting sampling distribution.
    func : Callable
        Maps a sample to a number. When ``vectorized`` is ``True`` it must
        also accept a 2D block and reduce along ``axis=-1``.
    vectorized : bool, default False
        Whether ``func`` reduces whole blocks at once.
    """

    name: str
    func: StatisticFunc
    vectorized: bool = False

    def __call__(self, sample: NumericArray) -> float:
        """Evaluate the statistic on one 1D sample."""
        return float(cast(float, self.func(sample)))

    def apply(self, block: NumericArray) -> NumericArray:
        """
        Evaluate the statistic on every row of an ``(n, k)`` block.

        Returns
        -------
        NumericArray
            Float array of length ``n``.

        Raises
        ------
        TypeError
            If the statistic does not produce one number per sample.
        """
        if self.vectorized:
            out = np.asarray(self.func(block), dtype=np.float64)
        else:
            out = np.fromiter(
                (self(row) for row in block), dtype=np.float64, count=block.shape[0]
            )
        if out.shape != (block.shape[0],):
            raise TypeError(
                f"Statistic '{self.name}' returned shape {out.shape} "
                f"for a block of {block.shape[0]} samples."
            )
        return cast(NumericArray, out)


MEAN = Statistic(StatisticName.MEAN, partial(np.mean, axis=-1), vectorized=True)
MEDIAN = Statistic(StatisticName.MEDIAN, partial(np.median, axis=-1), vectorized=True)
STD = Statistic(StatisticName.STD, partial(np.std, axis=-1, ddof=1), vectorized=True)
VAR = Statistic(StatisticName.VAR, partial(np.var, axis=-1, ddof=1), vectorized=True)
SUM = Statistic(StatisticName.SUM, partial(np.sum, axis=-1), vectorized=True)

BUILTIN_STATISTICS: dict[str, Statistic] = {
    s.name: s for s in (MEAN, MEDIAN, STD, VAR, SUM)
}


def resolve_statistic(statistic: StatisticLike) -> Statistic:
    """
    Turn a statistic specification into a :class:`Statistic`.

    Parameters
    ----------
    statistic : StatisticName, str, Statistic or callable
        Built-in name, ready statistic, or a pure callable mapping a 1D
        sample to a number.

    Raises
    ------
    InvalidParameterError
        If a name is not one of the built-in statistics.
    TypeError
        If ``statistic`` is neither a name nor callable.
    """
    if isinstance(statistic, Statistic):
        return statistic
    if isinstance(statistic, str):
        try:
            return BUILTIN_STATISTICS[StatisticName(statistic)]
        except ValueError:
            known = ", ".join(BUILTIN_STATISTICS)
            raise InvalidParameterError(
                f"Unknown statistic '{statistic}' (known: {known})."
            ) from None
    if callable(statistic):
        name = getattr(statistic, "__name__", type(statistic).__name__)
        return Statistic(name=name, func=statistic)
    raise TypeError(f"Statistic must be a name or a callable, got {type(statistic).__name__}.")
