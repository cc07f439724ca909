"""
Inference subpackage

Standard errors and one-sample significance tests built on the families and
on simulated sampling distributions.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .standard_error import (
    expected_standard_error,
    finite_population_correction,
    standard_error,
)
from .testing import TestResult, empirical_p_value, t_test, z_score, z_test

__all__ = [
    "standard_error",
    "finite_population_correction",
    "expected_standard_error",
    "TestResult",
    "z_score",
    "z_test",
    "t_test",
    "empirical_p_value",
]
