"""
Built-in distribution families available by default.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from sampling_dist.families.builtins.continuous import (
    configure_beta_family,
    configure_normal_family,
    configure_uniform_family,
)

__all__ = [
    "configure_normal_family",
    "configure_beta_family",
    "configure_uniform_family",
]
