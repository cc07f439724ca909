"""
Error types raised by populations, the simulator and the inference helpers.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class InvalidParameterError(ValueError):
    """
    A parameter is outside its admissible range.

    Raised for non-positive sample sizes or trial counts, empty populations,
    samples larger than the population when drawing without replacement, and
    malformed test arguments.
    """


class RandomSourceError(RuntimeError):
    """The operating system entropy source could not seed a generator."""


__all__ = [
    "InvalidParameterError",
    "RandomSourceError",
]
