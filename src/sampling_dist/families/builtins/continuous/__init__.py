"""
Built-in continuous distribution families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from sampling_dist.families.builtins.continuous.beta import configure_beta_family
from sampling_dist.families.builtins.continuous.normal import configure_normal_family
from sampling_dist.families.builtins.continuous.uniform import configure_uniform_family

__all__ = [
    "configure_normal_family",
    "configure_beta_family",
    "configure_uniform_family",
]
