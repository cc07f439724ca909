"""
Parametric families.

A :class:`ParametricFamily` holds the closed-form characteristics of one
family of distributions, written once against its base parametrization, and
builds :class:`ParametricFamilyDistribution` objects for concrete parameter
values given in any registered parametrization.

Examples
--------
    >>> normal = ParametricFamilyRegister.get("Normal")
    >>> normal(mu=50.0, sigma=10.0).mean
    50.0
    >>> normal(parametrization_name="meanPrec", mu=0.0, tau=4.0).std
    0.5
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from functools import partial
from typing import TYPE_CHECKING

from sampling_dist.distributions.computation import AnalyticalComputation
from sampling_dist.distributions.strategies import (
    DefaultComputationStrategy,
    DefaultSamplingUnivariateStrategy,
)
from sampling_dist.families.distribution import ParametricFamilyDistribution

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence
    from typing import Any

    from sampling_dist.distributions.strategies import ComputationStrategy, SamplingStrategy
    from sampling_dist.distributions.support import ContinuousSupport
    from sampling_dist.families.parametrizations import Parametrization
    from sampling_dist.types import (
        DistributionType,
        GenericCharacteristicName,
        ParametrizationName,
    )

    type Characteristic = Callable[..., Any]
    type SupportResolver = Callable[[Parametrization], ContinuousSupport | None]


def _no_support(_params: Parametrization) -> None:
    return None


class ParametricFamily:
    """
    Family of distributions sharing formulas and parametrizations.

    Parameters
    ----------
    name : str
        Family name used as the register key, e.g. ``"Beta"``.
    distr_type : DistributionType
        Value space of every member.
    distr_parametrizations : sequence of str
        Parametrization names the family accepts; the first one is the base.
    distr_characteristics : mapping of str to callable
        ``func(base_parameters, data, **options)`` for every characteristic
        known in closed form.
    sampling_strategy : SamplingStrategy, optional
        Defaults to inverse transform sampling through ``ppf``.
    computation_strategy : ComputationStrategy, optional
        Defaults to looking up the analytical characteristics.
    support_by_parametrization : callable, optional
        Support of the member with the given base parameters; unknown
        (``None``) when omitted.

    Raises
    ------
    ValueError
        If no parametrization is declared.
    """

    def __init__(
        self,
        name: str,
        distr_type: DistributionType,
        distr_parametrizations: Sequence[ParametrizationName],
        distr_characteristics: Mapping[GenericCharacteristicName, Characteristic],
        sampling_strategy: SamplingStrategy | None = None,
        computation_strategy: ComputationStrategy | None = None,
        support_by_parametrization: SupportResolver | None = None,
    ):
        if not distr_parametrizations:
            raise ValueError(f"Family {name} needs at least one parametrization.")

        self.name = name
        self.distribution_type = distr_type
        self.parametrization_names = tuple(distr_parametrizations)
        self.base_parametrization_name = self.parametrization_names[0]
        self.distr_characteristics = dict(distr_characteristics)
        self.sampling_strategy = sampling_strategy or DefaultSamplingUnivariateStrategy()
        self.computation_strategy = computation_strategy or DefaultComputationStrategy()
        self._support_resolver = support_by_parametrization or _no_support
        self.parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

    def __repr__(self) -> str:
        return f"ParametricFamily({self.name!r}, parametrizations={list(self.parametrizations)})"

    @property
    def base(self) -> type[Parametrization]:
        """
        Class of the base parametrization.

        Raises
        ------
        ValueError
            If the base parametrization has not been registered yet.
        """
        base = self.parametrizations.get(self.base_parametrization_name)
        if base is None:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' is not registered."
            )
        return base

    def register_parametrization(
        self, name: ParametrizationName, parametrization_class: type[Parametrization]
    ) -> None:
        """
        Attach a parametrization class under ``name``.

        Raises
        ------
        ValueError
            If ``name`` was not declared by the family or is already taken.
        """
        if name not in self.parametrization_names:
            raise ValueError(f"Family {self.name} does not declare parametrization '{name}'.")
        if name in self.parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        self.parametrizations[name] = parametrization_class

    def to_base(self, parameters: Parametrization) -> Parametrization:
        if parameters.name == self.base_parametrization_name:
            return parameters
        return parameters.transform_to_base_parametrization()

    def _build_analytical_computations(
        self, parameters: Parametrization
    ) -> dict[GenericCharacteristicName, AnalyticalComputation[Any, Any]]:
        base_params = self.to_base(parameters)
        return {
            name: AnalyticalComputation(target=name, func=partial(func, base_params))
            for name, func in self.distr_characteristics.items()
        }

    def distribution(
        self, parametrization_name: ParametrizationName | None = None, **parameters_values: Any
    ) -> ParametricFamilyDistribution:
        """
        Member of the family with the given parameter values.

        Parameters
        ----------
        parametrization_name : str, optional
            Parametrization the values are given in; the base one by default.
        **parameters_values
            Field values of that parametrization.

        Raises
        ------
        KeyError
            If ``parametrization_name`` is not registered.
        ValueError
            If a constraint of the parametrization does not hold.
        """
        if parametrization_name is None:
            parametrization_class = self.base
        else:
            parametrization_class = self.parametrizations[parametrization_name]

        parameters = parametrization_class(**parameters_values)
        parameters.validate()
        return ParametricFamilyDistribution(
            family_name=self.name,
            _distribution_type=self.distribution_type,
            parameters=parameters,
            _support=self._support_resolver(self.to_base(parameters)),
            _family=self,
        )

    __call__ = distribution
