"""
Figure helpers.

Thin matplotlib wrappers that turn a population or a simulated sampling
distribution into a histogram. Styling is left to the caller. Requires the
``plot`` extra (matplotlib).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

import matplotlib.pyplot as plt
import numpy as np

if TYPE_CHECKING:
    from matplotlib.axes import Axes

    from sampling_dist.population import Population
    from sampling_dist.simulation.result import SamplingDistribution


def plot_population(
    population: Population, ax: Axes | None = None, bins: int | None = None
) -> Axes:
    """
    Histogram of the population values.

    Integer-valued populations get one bin per integer unless ``bins`` is
    given.
    """
    if ax is None:
        _, ax = plt.subplots()

    values = population.values
    if bins is None:
        if np.issubdtype(values.dtype, np.integer):
            lo, hi = int(values.min()), int(values.max())
            bins = max(hi - lo + 1, 1)
        else:
            bins = 50
    ax.hist(values, bins=bins)
    ax.axvline(population.mean, linestyle="--")
    ax.set_xlabel("value")
    ax.set_ylabel("count")
    return ax


def plot_sampling_distribution(
    distribution: SamplingDistribution,
    ax: Axes | None = None,
    bins: int = 50,
    overlay_normal: bool = True,
) -> Axes:
    """
    Density histogram of the trial statistics.

    With ``overlay_normal`` the normal density with the empirical mean and
    standard error is drawn on top.
    """
    if ax is None:
        _, ax = plt.subplots()

    counts, edges = distribution.histogram(bins=bins, density=True)
    ax.stairs(counts, edges, fill=True)
    if overlay_normal:
        grid = np.linspace(edges[0], edges[-1], 400)
        density = distribution.normal_approximation().calculate_characteristic("pdf", grid)
        ax.plot(grid, density)
    ax.set_xlabel(f"sample {distribution.statistic} (k={distribution.sample_size})")
    ax.set_ylabel("density")
    return ax
