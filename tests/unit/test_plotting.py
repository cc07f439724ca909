from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import pytest

matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402

from sampling_dist.plotting import plot_population, plot_sampling_distribution  # noqa: E402
from sampling_dist.population import Population  # noqa: E402
from sampling_dist.simulation import simulate_sampling_distribution  # noqa: E402


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


class TestPlotPopulation:
    def test_integer_population_gets_one_bin_per_value(self, small_population) -> None:
        ax = plot_population(small_population)

        assert len(ax.patches) == 10
        assert ax.get_xlabel() == "value"
        assert ax.lines[0].get_xdata()[0] == pytest.approx(5.5)

    def test_float_population_and_given_axes(self) -> None:
        _, ax = plt.subplots()

        returned = plot_population(Population([0.1, 0.2, 0.7]), ax=ax, bins=5)

        assert returned is ax
        assert len(ax.patches) == 5


class TestPlotSamplingDistribution:
    def test_histogram_with_normal_overlay(self, skewed_population) -> None:
        result = simulate_sampling_distribution(skewed_population, 40, 2000, seed=1)

        ax = plot_sampling_distribution(result, bins=30)

        assert len(ax.lines) == 1
        assert ax.get_ylabel() == "density"
        assert ax.get_xlabel() == "sample mean (k=40)"

    def test_without_overlay(self, small_population) -> None:
        result = simulate_sampling_distribution(
            small_population, 3, 200, replace=True, seed=1
        )

        ax = plot_sampling_distribution(result, overlay_normal=False)

        assert not ax.lines
