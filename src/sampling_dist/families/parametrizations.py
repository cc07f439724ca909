"""
Parameter sets of distribution families.

The same distribution can be described by different parameter sets: a
normal by mean and standard deviation or by mean and precision, a beta by
its shapes or by mean and concentration. Each set is a frozen dataclass
attached to its family with :func:`parametrization`. Its admissible values
are declared with :func:`constraint` methods and checked by
:meth:`Parametrization.validate` before any distribution is built.

Examples
--------
    >>> @parametrization(family=normal_family, name="meanPrec")
    ... class MeanPrec(Parametrization):
    ...     mu: float
    ...     tau: float
    ...
    ...     @constraint(description="tau > 0")
    ...     def check_tau_positive(self) -> bool:
    ...         return self.tau > 0
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import dataclass, fields, is_dataclass
from inspect import isfunction
from typing import TYPE_CHECKING

from sampling_dist.types import ParametrizationName

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from sampling_dist.families.parametric_family import ParametricFamily

    type ConstraintCheck = Callable[[Any], bool]

_CONSTRAINT_ATTR = "__constraint_description__"


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Named predicate over the values of one parametrization.

    Parameters
    ----------
    description : str
        Shown in the error when the predicate fails, e.g. ``"sigma > 0"``.
    check : Callable[[Parametrization], bool]
        The predicate itself.
    """

    description: str
    check: ConstraintCheck


class Parametrization(ABC):
    """
    Base class of all parameter sets.

    Subclasses declare the parameters as dataclass fields. Every
    parametrization except the family's base one overrides
    :meth:`transform_to_base_parametrization`.
    """

    # filled in by @parametrization
    __family__: ClassVar[ParametricFamily]
    __param_name__: ClassVar[ParametrizationName]
    _constraints: ClassVar[tuple[ParametrizationConstraint, ...]] = ()

    @property
    def name(self) -> ParametrizationName:
        return type(self).__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Field values keyed by field name, in declaration order."""
        return {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]

    @property
    def constraints(self) -> tuple[ParametrizationConstraint, ...]:
        return self._constraints

    def validate(self) -> None:
        """
        Check every declared constraint.

        Raises
        ------
        ValueError
            Naming the first constraint that does not hold.
        """
        failed = next((c for c in self._constraints if not c.check(self)), None)
        if failed is not None:
            raise ValueError(
                f'Constraint "{failed.description}" does not hold '
                f"for {self.name} parameters {self.parameters}"
            )

    def transform_to_base_parametrization(self) -> Parametrization:
        """Equivalent parameters in the family's base parametrization."""
        return self


def constraint(description: str) -> Callable[[ConstraintCheck], ConstraintCheck]:
    """
    Mark an instance method of a parametrization as a constraint.

    Parameters
    ----------
    description : str
        Human-readable condition, reported when the method returns ``False``.
    """

    def mark(func: ConstraintCheck) -> ConstraintCheck:
        setattr(func, _CONSTRAINT_ATTR, description)
        return func

    return mark


def _collect_constraints(cls: type) -> tuple[ParametrizationConstraint, ...]:
    collected = []
    for attr_name, attr in vars(cls).items():
        if isinstance(attr, staticmethod | classmethod):
            if hasattr(attr.__func__, _CONSTRAINT_ATTR):
                raise TypeError(f"@constraint '{attr_name}' must be an instance method")
            continue
        if isfunction(attr) and hasattr(attr, _CONSTRAINT_ATTR):
            collected.append(
                ParametrizationConstraint(description=getattr(attr, _CONSTRAINT_ATTR), check=attr)
            )
    return tuple(collected)


def parametrization(
    *, family: ParametricFamily, name: ParametrizationName
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Class decorator registering a parametrization on ``family``.

    The class becomes a frozen slotted dataclass (unless it already is a
    dataclass) and its constraints are collected once at decoration time.

    Raises
    ------
    ValueError
        If ``family`` does not declare ``name`` or already has it registered.
    TypeError
        If a constraint is a static or class method.
    """

    def register(cls: type[Parametrization]) -> type[Parametrization]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)
        cls._constraints = _collect_constraints(cls)
        cls.__family__ = family
        cls.__param_name__ = name
        family.register_parametrization(name, cls)
        return cls

    return register
