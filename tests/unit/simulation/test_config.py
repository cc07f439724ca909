from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import dataclasses

import numpy as np
import pytest

from sampling_dist.errors import InvalidParameterError
from sampling_dist.simulation import (
    DEFAULT_BLOCK_SIZE,
    DEFAULT_N_TRIALS,
    DEFAULT_SAMPLE_SIZE,
    SimulationConfig,
)


class TestSimulationConfig:
    def test_defaults(self) -> None:
        config = SimulationConfig()

        assert config.sample_size == DEFAULT_SAMPLE_SIZE == 40
        assert config.n_trials == DEFAULT_N_TRIALS == 100_000
        assert config.block_size == DEFAULT_BLOCK_SIZE
        assert config.replace is False
        assert config.seed is None
        assert config.n_workers == 1

    def test_is_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            SimulationConfig().n_trials = 5  # type: ignore[misc]

    @pytest.mark.parametrize(
        "field_name", ["sample_size", "n_trials", "n_workers", "block_size"]
    )
    @pytest.mark.parametrize("value", [0, -1])
    def test_non_positive_counts(self, field_name, value) -> None:
        with pytest.raises(InvalidParameterError, match=f"{field_name} must be positive"):
            SimulationConfig(**{field_name: value})

    @pytest.mark.parametrize("value", [2.0, "10", True, None])
    def test_non_integer_counts(self, value) -> None:
        with pytest.raises(InvalidParameterError, match="n_trials must be an integer"):
            SimulationConfig(n_trials=value)

    def test_numpy_integers_accepted(self) -> None:
        config = SimulationConfig(sample_size=np.int64(5), n_trials=np.int32(7))

        assert config.n_blocks == 1

    @pytest.mark.parametrize("seed", [-1, 1.5, False])
    def test_invalid_seed(self, seed) -> None:
        with pytest.raises(InvalidParameterError, match="seed"):
            SimulationConfig(seed=seed)

    def test_replace_must_be_bool(self) -> None:
        with pytest.raises(InvalidParameterError, match="replace must be a bool"):
            SimulationConfig(replace=1)  # type: ignore[arg-type]

    def test_block_layout(self) -> None:
        config = SimulationConfig(n_trials=2500, block_size=1000)

        assert config.n_blocks == 3
        assert [config.block_bounds(b) for b in range(3)] == [
            (0, 1000),
            (1000, 2000),
            (2000, 2500),
        ]

    def test_with_options_revalidates(self) -> None:
        config = SimulationConfig(seed=1)

        assert config.with_options(n_trials=10).n_trials == 10
        with pytest.raises(InvalidParameterError):
            config.with_options(sample_size=0)
