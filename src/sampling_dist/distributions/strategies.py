"""
Computation and Sampling Strategies
===================================

This module defines the pluggable strategy interfaces and default implementations:

- :class:`ComputationStrategy`: resolves characteristic methods.
- :class:`DefaultComputationStrategy`: resolves analytical characteristics.
- :class:`SamplingStrategy`: draws samples from a distribution.
- :class:`DefaultSamplingUnivariateStrategy`: draws ``(n, 1)`` samples using
  ``ppf`` and i.i.d. uniform variates.

Notes
-----
- Strategies are stateless; the random source is supplied per call through
  the ``rng`` option so that no global generator is ever consulted.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, Protocol

import numpy as np

from sampling_dist.distributions.computation import AnalyticalComputation
from sampling_dist.types import GenericCharacteristicName

from .sampling import ArraySample, Sample

if TYPE_CHECKING:
    from .distribution import Distribution

type RandomSource = np.random.Generator | int | None
"""Anything accepted by :func:`numpy.random.default_rng`."""


class ComputationStrategy(Protocol):
    """Protocol for characteristic resolution strategies."""

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> AnalyticalComputation[Any, Any]: ...


class DefaultComputationStrategy:
    """
    Default characteristic resolver.

    Returns the analytical implementation the distribution provides for the
    requested characteristic.

    Raises
    ------
    RuntimeError
        If the distribution has no analytical implementation of the
        characteristic.
    """

    def query_method(
        self, state: GenericCharacteristicName, distr: "Distribution", **options: Any
    ) -> AnalyticalComputation[Any, Any]:
        """
        Resolve the analytical method for ``state``.

        Parameters
        ----------
        state : str
            Target characteristic name to resolve.
        distr : Distribution
            The distribution providing the analytical computations.
        **options
            Unused; accepted for protocol compatibility.

        Returns
        -------
        AnalyticalComputation
            Callable implementing ``state``.
        """
        computations = distr.analytical_computations
        if state not in computations:
            available = ", ".join(sorted(computations)) or "none"
            raise RuntimeError(
                f"Distribution provides no analytical '{state}' (available: {available})."
            )
        return computations[state]


class SamplingStrategy(Protocol):
    """Protocol for sampling strategies (return a :class:`Sample`)."""

    def sample(self, n: int, distr: "Distribution", **options: Any) -> Sample: ...


class DefaultSamplingUnivariateStrategy(SamplingStrategy):
    """
    Default univariate sampler using inverse transform sampling.

    The strategy resolves the distribution's ``ppf`` and applies it to i.i.d.
    uniforms ``U ~ U(0, 1)`` drawn from the ``rng`` option.

    Returns
    -------
    ArraySample
        A 2D sample of shape ``(n, 1)``.
    """

    def sample(
        self, n: int, distr: "Distribution", rng: RandomSource = None, **options: Any
    ) -> ArraySample:
        if n < 0:
            raise ValueError(f"Number of observations must be non-negative, got {n}.")
        ppf = distr.query_method("ppf", **options)
        generator = np.random.default_rng(rng)
        U = generator.random(n)
        vals = np.asarray(ppf(U), dtype=np.float64).reshape(n, 1)
        return ArraySample(vals)
