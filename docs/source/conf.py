import os
import sys
from datetime import datetime

sys.path.insert(0, os.path.abspath("../../src"))

project = "sampling-dist"
copyright = f"{datetime.now().year}, Leonid Elkin, Mikhail Mikhailov"
author = "Leonid Elkin, Mikhail Mikhailov"
release = "0.1.0"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
    "sphinx.ext.intersphinx",
    "sphinx.ext.mathjax",
    "sphinx_rtd_theme",
    "sphinx_autodoc_typehints",
    "sphinx.ext.autosummary",
]
autosummary_generate = True
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

# -- Napoleon (NumPy style docstrings) --
napoleon_google_docstring = False
napoleon_numpy_docstring = True
napoleon_include_init_with_doc = True
napoleon_use_param = True
napoleon_use_rtype = True
napoleon_preprocess_types = True

# -- Autodocumentation settings --
autodoc_default_options = {
    "member-order": "bysource",
    "undoc-members": True,
    "exclude-members": "__weakref__",
    "show-inheritance": True,
}

autodoc_typehints = "description"
autodoc_typehints_format = "short"
autodoc_mock_imports = ["matplotlib"]

# -- Intersphinx --
intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "numpy": ("https://numpy.org/doc/stable/", None),
    "scipy": ("https://docs.scipy.org/doc/scipy/", None),
    "matplotlib": ("https://matplotlib.org/stable/", None),
}

# -- HTML --
html_theme = "sphinx_rtd_theme"
html_theme_options = {
    "collapse_navigation": False,
    "navigation_depth": 4,
}

# forward references
autodoc_type_aliases = {
    "In": "typing.Any",
    "Out": "typing.Any",
    "RandomSource": "sampling_dist.distributions.strategies.RandomSource",
    "StatisticLike": "sampling_dist.simulation.statistics.StatisticLike",
    "Population": "sampling_dist.population.Population",
    "SamplingDistribution": "sampling_dist.simulation.result.SamplingDistribution",
    "Parametrization": "sampling_dist.families.parametrizations.Parametrization",
    "ParametricFamily": "sampling_dist.families.parametric_family.ParametricFamily",
}

nitpicky = False
