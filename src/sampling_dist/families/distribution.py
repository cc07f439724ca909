"""
Members of parametric families.

A :class:`ParametricFamilyDistribution` pairs validated parameter values
with the family that interprets them. The closed-form characteristics are
bound to the parameters on first use and cached; parameters never change
after construction.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from sampling_dist.distributions.distribution import Distribution
from sampling_dist.families.registry import ParametricFamilyRegister
from sampling_dist.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from sampling_dist.distributions.computation import AnalyticalComputation
    from sampling_dist.distributions.sampling import Sample
    from sampling_dist.distributions.strategies import ComputationStrategy, SamplingStrategy
    from sampling_dist.distributions.support import ContinuousSupport
    from sampling_dist.families.parametric_family import ParametricFamily
    from sampling_dist.families.parametrizations import Parametrization
    from sampling_dist.types import DistributionType, GenericCharacteristicName

    type Computations = dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]


@dataclass(slots=True)
class ParametricFamilyDistribution(Distribution):
    """
    Distribution from a parametric family with fixed parameters.

    Parameters
    ----------
    family_name : str
        Name of the owning family.
    _distribution_type : DistributionType
        Value space shared by the family.
    parameters : Parametrization
        Validated parameter values, in the parametrization the caller used.
    _support : ContinuousSupport or None
        Interval carrying the probability mass, if known.
    _family : ParametricFamily or None
        Owning family; looked up in the register by name when omitted.
    """

    family_name: str
    _distribution_type: DistributionType
    parameters: Parametrization
    _support: ContinuousSupport | None
    _family: ParametricFamily | None = field(default=None, repr=False, compare=False)
    _computations: Computations | None = field(default=None, repr=False, compare=False)

    @property
    def distribution_type(self) -> DistributionType:
        return self._distribution_type

    @property
    def family(self) -> ParametricFamily:
        if self._family is None:
            self._family = ParametricFamilyRegister.get(self.family_name)
        return self._family

    @property
    def parametrization_name(self) -> str:
        return self.parameters.name

    @property
    def analytical_computations(
        self,
    ) -> Mapping[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        if self._computations is None:
            self._computations = self.family._build_analytical_computations(self.parameters)
        return self._computations

    @property
    def sampling_strategy(self) -> SamplingStrategy:
        return self.family.sampling_strategy

    @property
    def computation_strategy(self) -> ComputationStrategy:
        return self.family.computation_strategy

    @property
    def support(self) -> ContinuousSupport | None:
        return self._support

    @property
    def mean(self) -> float:
        return float(self.calculate_characteristic(CharacteristicName.MEAN, None))

    @property
    def std(self) -> float:
        return math.sqrt(self.calculate_characteristic(CharacteristicName.VAR, None))

    def sample(self, n: int, **options: Any) -> Sample:
        """
        Draw ``n`` independent observations.

        Parameters
        ----------
        n : int
            Number of observations.
        **options
            Forwarded to the sampling strategy; pass the random source as
            ``rng`` (a generator, an integer seed or ``None``).

        Returns
        -------
        Sample
            Observations as an ``(n, 1)`` sample.
        """
        return self.sampling_strategy.sample(n, distr=self, **options)
