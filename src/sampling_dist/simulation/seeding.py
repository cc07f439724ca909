"""
Random stream layout.

Every run has one root entropy value. Trials are grouped into fixed blocks of
consecutive indices and block ``b`` draws from the generator seeded with
``SeedSequence(entropy, spawn_key=(b,))``. The streams are statistically
independent, and which stream a trial uses depends only on its index, so
the result of a run never depends on how blocks are scheduled.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np

from sampling_dist.errors import RandomSourceError


def resolve_entropy(seed: int | None) -> int:
    """
    Return the root entropy of a run.

    Parameters
    ----------
    seed : int or None
        Configured seed; ``None`` requests fresh OS entropy.

    Raises
    ------
    RandomSourceError
        If the operating system entropy source is unavailable.
    """
    if seed is not None:
        return int(seed)
    try:
        entropy = np.random.SeedSequence().entropy
    except OSError as exc:
        raise RandomSourceError("Operating system entropy source is unavailable.") from exc
    return int(entropy)  # type: ignore[arg-type]


def block_generator(entropy: int, block: int) -> np.random.Generator:
    """Independent generator for trial block ``block`` of a run."""
    return np.random.default_rng(np.random.SeedSequence(entropy, spawn_key=(block,)))
