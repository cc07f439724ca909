"""
Supports of univariate continuous distributions.

A support is an interval of the real line. Infinite endpoints are always
open, so the default support is the whole line.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, overload

import numpy as np

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from sampling_dist.types import NumericArray


@dataclass(frozen=True, slots=True)
class ContinuousSupport:
    """
    Interval ``left .. right`` on which a density is positive.

    Parameters
    ----------
    left, right : float
        Endpoints; ``-inf`` and ``inf`` by default.
    left_closed, right_closed : bool, default True
        Whether a finite endpoint belongs to the support.
    """

    left: float = -math.inf
    right: float = math.inf
    left_closed: bool = True
    right_closed: bool = True

    def __post_init__(self) -> None:
        if math.isinf(self.left):
            object.__setattr__(self, "left_closed", False)
        if math.isinf(self.right):
            object.__setattr__(self, "right_closed", False)

    @overload
    def contains(self, x: float) -> bool: ...
    @overload
    def contains(self, x: NumericArray) -> NDArray[np.bool_]: ...

    def contains(self, x: float | NumericArray) -> bool | NDArray[np.bool_]:
        """Elementwise membership test; scalars give a plain ``bool``."""
        arr = np.asarray(x, dtype=np.float64)
        above = arr >= self.left if self.left_closed else arr > self.left
        below = arr <= self.right if self.right_closed else arr < self.right
        inside = np.logical_and(above, below)
        return bool(inside) if inside.ndim == 0 else inside

    def __contains__(self, x: object) -> bool:
        return self.contains(float(x))  # type: ignore[arg-type]

    @property
    def is_empty(self) -> bool:
        """Whether no point belongs to the support."""
        if self.left != self.right:
            return self.left > self.right
        return not (self.left_closed and self.right_closed)
