"""
sampling-dist
=============

Monte Carlo sampling distributions for teaching the central limit theorem
and null-hypothesis significance testing: parametric families to generate
populations and evaluate densities, an immutable population type, the
sampling-distribution simulator, and standard errors and one-sample tests.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from importlib.metadata import version

from .distributions import *
from .distributions import __all__ as _distr_all
from .errors import *
from .errors import __all__ as _errors_all
from .families import *
from .families import __all__ as _family_all
from .inference import *
from .inference import __all__ as _inference_all
from .logging_config import setup_logging
from .population import Population, beta_population
from .simulation import *
from .simulation import __all__ as _simulation_all
from .types import *
from .types import __all__ as _types_all

__version__ = version("sampling-dist")
__all__ = [
    "__version__",
    "Population",
    "beta_population",
    "setup_logging",
    *_distr_all,
    *_errors_all,
    *_family_all,
    *_inference_all,
    *_simulation_all,
    *_types_all,
]

del _distr_all
del _errors_all
del _family_all
del _inference_all
del _simulation_all
del _types_all
