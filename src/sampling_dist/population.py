"""
Populations
===========

A :class:`Population` is the fixed, finite collection of numeric values that
every trial of a sampling-distribution simulation draws from. It is created
once, frozen, and only read afterwards, so any number of trials may share it.

Populations are usually generated from a parametric family, e.g. the skewed
Beta(1, 3) population scaled to [0, 100] and rounded to integers:

    >>> from sampling_dist.population import beta_population
    >>> population = beta_population(size=100_000, seed=7)
    >>> round(population.mean)  # doctest: +SKIP
    25
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING

import numpy as np

from sampling_dist.distributions.sampling import ArraySample
from sampling_dist.errors import InvalidParameterError
from sampling_dist.families.configuration import configure_families_register
from sampling_dist.types import FamilyName

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from sampling_dist.distributions.distribution import Distribution
    from sampling_dist.distributions.strategies import RandomSource
    from sampling_dist.types import NumericArray

logger = logging.getLogger(__name__)


class Population:
    """
    Immutable finite population of numeric values.

    Parameters
    ----------
    values : Iterable of numbers or numpy.ndarray
        One-dimensional collection of finite values. The data are copied and
        the copy is made read-only.

    Raises
    ------
    InvalidParameterError
        If ``values`` is empty, not one-dimensional, not numeric or contains
        non-finite entries.

    Notes
    -----
    Order of the values carries no meaning; draws pick positions uniformly.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[float] | NumericArray) -> None:
        arr = np.array(values, copy=True)
        if arr.ndim != 1:
            raise InvalidParameterError(
                f"Population values must be one-dimensional, got shape {arr.shape}."
            )
        if arr.size == 0:
            raise InvalidParameterError("Population must not be empty.")
        if not np.issubdtype(arr.dtype, np.number) or np.issubdtype(arr.dtype, np.complexfloating):
            raise InvalidParameterError(f"Population values must be real numbers, got {arr.dtype}.")
        if not np.isfinite(arr).all():
            raise InvalidParameterError("Population values must be finite.")

        arr.setflags(write=False)
        self._values = arr

    @classmethod
    def from_sample(cls, sample: ArraySample, round_to_int: bool = False) -> Population:
        """Build a population from a univariate :class:`ArraySample`."""
        values = sample.flatten()
        if round_to_int:
            values = np.rint(values).astype(np.int64)
        return cls(values)

    @classmethod
    def from_distribution(
        cls,
        distr: Distribution,
        size: int,
        rng: RandomSource = None,
        round_to_int: bool = True,
    ) -> Population:
        """
        Draw a population of ``size`` values from a distribution.

        Parameters
        ----------
        distr : Distribution
            Univariate distribution to draw from.
        size : int
            Number of population members.
        rng : numpy.random.Generator, int or None
            Random source (or seed) for the draw.
        round_to_int : bool, default True
            Round the drawn values to the nearest integer.

        Raises
        ------
        InvalidParameterError
            If ``size`` is not a positive integer.
        """
        if isinstance(size, bool) or not isinstance(size, int | np.integer) or size <= 0:
            raise InvalidParameterError(
                f"Population size must be a positive integer, got {size!r}."
            )

        sample = distr.sample(int(size), rng=rng)
        if not isinstance(sample, ArraySample):
            sample = ArraySample(np.asarray(sample.array, dtype=np.float64))
        population = cls.from_sample(sample, round_to_int=round_to_int)
        logger.debug(
            "Drew population of %d values (mean=%.4f, std=%.4f)",
            population.size,
            population.mean,
            population.std,
        )
        return population

    @property
    def values(self) -> NumericArray:
        """Read-only view of the population values."""
        return self._values

    @property
    def size(self) -> int:
        return int(self._values.size)

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[float]:
        return iter(self._values.tolist())

    def __repr__(self) -> str:
        return f"Population(size={self.size}, mean={self.mean:.4g}, std={self.std:.4g})"

    @property
    def mean(self) -> float:
        """Population mean."""
        return float(self._values.mean())

    @property
    def variance(self) -> float:
        """Population variance (``ddof=0``)."""
        return float(self._values.var())

    @property
    def std(self) -> float:
        """Population standard deviation (``ddof=0``)."""
        return float(self._values.std())

    def draw(self, k: int, rng: np.random.Generator, replace: bool = False) -> NumericArray:
        """
        Draw one sample of ``k`` values.

        Parameters
        ----------
        k : int
            Sample size.
        rng : numpy.random.Generator
            Random source for this draw.
        replace : bool, default False
            Draw with replacement (i.i.d. positions) or without (``k`` distinct
            positions).

        Returns
        -------
        NumericArray
            1D array of ``k`` values.
        """
        return self.draw_many(1, k, rng, replace=replace)[0]

    def draw_many(
        self, n: int, k: int, rng: np.random.Generator, replace: bool = False
    ) -> NumericArray:
        """
        Draw ``n`` independent samples of ``k`` values each.

        Returns
        -------
        NumericArray
            Array of shape ``(n, k)``; row ``i`` is the ``i``-th sample.

        Raises
        ------
        InvalidParameterError
            If ``k`` is not positive, or exceeds the population size when
            drawing without replacement.
        """
        self.check_sample_size(k, replace)
        if n < 0:
            raise InvalidParameterError(f"Number of samples must be non-negative, got {n}.")

        if replace:
            positions = rng.integers(0, self.size, size=(n, k))
        else:
            positions = np.empty((n, k), dtype=np.intp)
            for row in range(n):
                positions[row] = rng.choice(self.size, size=k, replace=False)
        return self._values[positions]

    def check_sample_size(self, k: int, replace: bool) -> None:
        """
        Validate a sample size against this population.

        Raises
        ------
        InvalidParameterError
            If ``k <= 0`` or, without replacement, ``k > size``.
        """
        if k <= 0:
            raise InvalidParameterError(f"Sample size must be positive, got {k}.")
        if not replace and k > self.size:
            raise InvalidParameterError(
                f"Sample size {k} exceeds population size {self.size} "
                "when sampling without replacement."
            )


def beta_population(
    size: int = 100_000,
    alpha: float = 1.0,
    beta: float = 3.0,
    scale: float = 100.0,
    seed: RandomSource = None,
    round_to_int: bool = True,
) -> Population:
    """
    Skewed population drawn from Beta(``alpha``, ``beta``) on [0, ``scale``].

    The defaults give 100 000 integer scores between 0 and 100 with mean
    close to 25 and standard deviation close to 19.4.
    """
    family = configure_families_register().get(FamilyName.BETA)
    distr = family(alpha=alpha, beta=beta, loc=0.0, scale=scale)
    return Population.from_distribution(distr, size, rng=seed, round_to_int=round_to_int)
