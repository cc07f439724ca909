"""
Analytical Computations
=======================

Each characteristic a distribution knows in closed form (``pdf``, ``cdf``,
``ppf``, moments) is exposed as an :class:`AnalyticalComputation`, a named
callable already bound to the distribution's parameters.

Notes
-----
- Density, distribution and quantile functions accept arrays and keep their
  shape. Moments ignore the data argument.
- Extra keyword options go straight to the wrapped function (``excess`` for
  the kurtosis, for instance).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from mypy_extensions import KwArg

from sampling_dist.types import GenericCharacteristicName


@dataclass(frozen=True, slots=True)
class AnalyticalComputation[In, Out]:
    """
    Closed-form characteristic of one distribution.

    Parameters
    ----------
    target : str
        Characteristic it evaluates, e.g. ``"cdf"``.
    func : Callable[[In, KwArg(Any)], Out]
        Function of the data with the distribution parameters fixed.
    """

    target: GenericCharacteristicName
    func: Callable[[In, KwArg(Any)], Out]

    def __call__(self, data: In, **options: Any) -> Out:
        return self.func(data, **options)
