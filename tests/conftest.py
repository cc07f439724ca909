from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from collections.abc import Generator
from typing import Any

import pytest

from sampling_dist.families.configuration import reset_families_register
from sampling_dist.population import Population, beta_population

pytest.importorskip("scipy")


@pytest.fixture(autouse=True)
def _fresh_registries() -> Generator[None, Any, None]:
    reset_families_register()
    yield


@pytest.fixture(scope="session")
def skewed_population() -> Population:
    """Beta(1, 3) scores on [0, 100], 100 000 integers."""
    return beta_population(size=100_000, alpha=1.0, beta=3.0, scale=100.0, seed=20240601)


@pytest.fixture
def small_population() -> Population:
    return Population([1, 2, 3, 4, 5, 6, 7, 8, 9, 10])
