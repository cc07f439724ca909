"""
Sample containers returned by sampling strategies.

Draws are stored as an ``(n, d)`` array: one row per observation. Every
built-in family is univariate, so ``d == 1`` and :meth:`ArraySample.flatten`
turns a draw into the flat value vector a population is built from.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Protocol

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any

    from numpy.typing import NDArray

    type FloatArray = NDArray[np.floating[Any]]


class Sample(Protocol):
    """Anything a sampling strategy may return."""

    def __len__(self) -> int: ...
    @property
    def array(self) -> FloatArray: ...
    @property
    def shape(self) -> tuple[int, ...]: ...


class ArraySample:
    """
    Draws held in a 2D float array.

    Parameters
    ----------
    data : numpy.ndarray
        Array of shape ``(n, d)``.

    Raises
    ------
    ValueError
        If ``data`` is not two-dimensional.
    """

    __slots__ = ("data", "dimension")

    def __init__(self, data: FloatArray) -> None:
        if np.ndim(data) != 2:
            raise ValueError(
                f"ArraySample expects a 2D array of shape (n, d), got {np.ndim(data)}D."
            )
        self.data = data
        self.dimension = int(data.shape[1])

    def __len__(self) -> int:
        return int(self.data.shape[0])

    def __iter__(self) -> Iterator[FloatArray]:
        return iter(self.data)

    @property
    def array(self) -> FloatArray:
        return self.data

    @property
    def shape(self) -> tuple[int, ...]:
        return tuple(int(s) for s in self.data.shape)

    def flatten(self) -> FloatArray:
        """
        Values of a univariate sample as a 1D array (a view, not a copy).

        Raises
        ------
        ValueError
            If the sample has more than one coordinate.
        """
        if self.dimension != 1:
            raise ValueError(f"Only univariate samples can be flattened, got d={self.dimension}.")
        return self.data[:, 0]
