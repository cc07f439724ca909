"""
Process-wide register of parametric families, looked up by family name.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import ClassVar

    from sampling_dist.families.parametric_family import ParametricFamily


class ParametricFamilyRegister:
    """
    Singleton mapping family names to :class:`ParametricFamily` objects.

    The built-in families are added by
    :func:`~sampling_dist.families.configuration.configure_families_register`.
    """

    _instance: ClassVar[ParametricFamilyRegister | None] = None
    _families: dict[str, ParametricFamily]

    def __new__(cls) -> ParametricFamilyRegister:
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._families = {}
            cls._instance = instance
        return cls._instance

    @classmethod
    def get(cls, name: str) -> ParametricFamily:
        """
        Family registered under ``name``.

        Raises
        ------
        ValueError
            If there is none.
        """
        try:
            return cls()._families[name]
        except KeyError:
            raise ValueError(f"No family {name} found in register") from None

    @classmethod
    def contains(cls, name: str) -> bool:
        return name in cls()._families

    @classmethod
    def register(cls, family: ParametricFamily) -> None:
        """
        Add ``family`` under its name.

        Raises
        ------
        ValueError
            If the name is taken.
        """
        families = cls()._families
        if family.name in families:
            raise ValueError(f"Family {family.name} already found in register")
        families[family.name] = family

    @classmethod
    def names(cls) -> list[str]:
        return list(cls()._families)

    @classmethod
    def _reset(cls) -> None:
        cls._instance = None
