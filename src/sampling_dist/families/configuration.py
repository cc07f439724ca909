"""
Built-in family registration.

:func:`configure_families_register` registers the Normal, Beta and
ContinuousUniform families once per process and returns the register. Code
that needs a family calls it instead of touching the register directly, so
the families are available however the package was imported.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from sampling_dist.families.builtins import (
    configure_beta_family,
    configure_normal_family,
    configure_uniform_family,
)
from sampling_dist.families.registry import ParametricFamilyRegister

_BUILTIN_FAMILIES = (configure_normal_family, configure_beta_family, configure_uniform_family)


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """Register the built-in families (first call only) and return the register."""
    for configure in _BUILTIN_FAMILIES:
        configure()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """Forget every registered family; the next configuration starts afresh."""
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
