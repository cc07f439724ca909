from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import cast

import numpy as np

from sampling_dist.types import NumericArray


def as_probabilities(p: NumericArray | float) -> NumericArray:
    """
    ``p`` as a float array, checked to lie in [0, 1].

    Raises
    ------
    ValueError
        If any probability is outside [0, 1] (NaN included).
    """
    arr = np.asarray(p, dtype=np.float64)
    if not np.all((arr >= 0.0) & (arr <= 1.0)):
        raise ValueError("Probability must be in [0, 1]")
    return cast(NumericArray, arr)
