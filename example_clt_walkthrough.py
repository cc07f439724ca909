#!/usr/bin/env python3
"""
Central limit theorem walkthrough.

This example shows how to:
1. Build a skewed population of test scores
2. Simulate the sampling distribution of the mean
3. Compare the empirical standard error with sigma / sqrt(k)
4. Test a hypothesis about the population mean
5. Optionally save figures (needs the ``plot`` extra)
"""

import logging
import sys
from pathlib import Path

import numpy as np

from sampling_dist import (
    expected_standard_error,
    setup_logging,
    simulate_sampling_distribution,
    t_test,
    z_test,
)
from sampling_dist.population import beta_population

SEED = 2024
SAMPLE_SIZE = 40
N_TRIALS = 100_000

logger = logging.getLogger("sampling_dist.example")


def example_population():
    """Skewed Beta(1, 3) scores on [0, 100]."""
    print("=" * 70)
    print("POPULATION")
    print("=" * 70)

    population = beta_population(seed=SEED)
    print(f"   {population!r}")
    return population


def example_sampling_distribution(population):
    """Means of 40-value samples are close to normal even for a skewed population."""
    print("\n" + "=" * 70)
    print(f"SAMPLING DISTRIBUTION OF THE MEAN (k={SAMPLE_SIZE}, T={N_TRIALS})")
    print("=" * 70)

    means = simulate_sampling_distribution(
        population,
        SAMPLE_SIZE,
        N_TRIALS,
        seed=SEED,
        n_workers=4,
        record_sample_std=True,
    )
    predicted = expected_standard_error(population, SAMPLE_SIZE)

    print(f"   mean of sample means:    {means.mean:.3f} (population {population.mean:.3f})")
    print(f"   empirical standard error: {means.standard_error:.3f}")
    print(f"   sigma / sqrt(k):          {predicted:.3f}")
    print(f"   95% interval coverage:    {means.coverage(population.mean):.3%}")
    return means


def example_tests(population):
    """Is a class averaging 29 points unusual for this population?"""
    print("\n" + "=" * 70)
    print("SIGNIFICANCE TESTS")
    print("=" * 70)

    rng = np.random.default_rng(SEED + 1)
    sample = population.draw(SAMPLE_SIZE, rng) + 4

    z = z_test(sample, population.mean, population.std)
    t = t_test(sample, population.mean)
    print(f"   z = {z.statistic:.3f}, p = {z.p_value:.4f}, reject at 5%: {z.reject()}")
    print(f"   t = {t.statistic:.3f}, p = {t.p_value:.4f}, reject at 5%: {t.reject()}")


def example_figures(population, means, out_dir):
    """Population histogram next to the sampling distribution."""
    try:
        import matplotlib

        matplotlib.use("Agg")
        import matplotlib.pyplot as plt

        from sampling_dist.plotting import plot_population, plot_sampling_distribution
    except ImportError:
        logger.warning("matplotlib is not installed; skipping figures")
        return

    fig, (left, right) = plt.subplots(1, 2, figsize=(11, 4))
    plot_population(population, ax=left)
    plot_sampling_distribution(means, ax=right)
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / "clt.png"
    fig.savefig(path, dpi=120)
    plt.close(fig)
    print(f"\n   figure saved to {path}")


def main():
    setup_logging(logging.INFO)

    population = example_population()
    means = example_sampling_distribution(population)
    example_tests(population)
    example_figures(population, means, Path("figures"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
