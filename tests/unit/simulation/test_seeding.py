from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from sampling_dist.errors import RandomSourceError
from sampling_dist.simulation import seeding


class TestSeeding:
    def test_configured_seed_is_the_entropy(self) -> None:
        assert seeding.resolve_entropy(1234) == 1234

    def test_fresh_entropy_differs_between_calls(self) -> None:
        assert seeding.resolve_entropy(None) != seeding.resolve_entropy(None)

    def test_unavailable_entropy_source(self, monkeypatch) -> None:
        class _Broken:
            def __init__(self, *args, **kwargs) -> None:
                raise OSError("no entropy")

        monkeypatch.setattr(seeding.np.random, "SeedSequence", _Broken)

        with pytest.raises(RandomSourceError, match="entropy source is unavailable"):
            seeding.resolve_entropy(None)

    def test_block_generators_are_deterministic(self) -> None:
        first = seeding.block_generator(99, 3).random(5)
        second = seeding.block_generator(99, 3).random(5)

        np.testing.assert_array_equal(first, second)

    def test_blocks_get_distinct_streams(self) -> None:
        streams = [seeding.block_generator(99, b).random(4) for b in range(5)]

        assert len({tuple(s) for s in streams}) == 5

    def test_streams_depend_on_entropy(self) -> None:
        assert not np.array_equal(
            seeding.block_generator(1, 0).random(4), seeding.block_generator(2, 0).random(4)
        )
