"""
Tests for Beta Distribution Family
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math

import numpy as np
import pytest
from scipy.stats import beta as beta_dist

from sampling_dist.families.configuration import configure_families_register
from sampling_dist.types import CharacteristicName, FamilyName

from .base import BaseDistributionTest


class TestBetaFamily(BaseDistributionTest):
    """Test suite for the location/scale Beta family."""

    def setup_method(self):
        registry = configure_families_register()
        self.beta_family = registry.get(FamilyName.BETA)
        self.scores = self.beta_family(alpha=1.0, beta=3.0, loc=0.0, scale=100.0)
        self.reference = beta_dist(1.0, 3.0, loc=0.0, scale=100.0)

    def test_family_properties(self):
        assert self.beta_family.base_parametrization_name == "shape"
        assert set(self.beta_family.parametrization_names) == {"shape", "meanConcentration"}

    def test_defaults_to_unit_interval(self):
        dist = self.beta_family(alpha=2.0, beta=5.0)

        assert dist.parameters.parameters == {"alpha": 2.0, "beta": 5.0, "loc": 0.0, "scale": 1.0}
        assert dist.support is not None
        assert (dist.support.left, dist.support.right) == (0.0, 1.0)

    @pytest.mark.parametrize(
        "params, message",
        [
            ({"alpha": 0.0, "beta": 1.0}, "alpha > 0"),
            ({"alpha": 1.0, "beta": -2.0}, "beta > 0"),
            ({"alpha": 1.0, "beta": 1.0, "scale": 0.0}, "scale > 0"),
        ],
    )
    def test_shape_constraints(self, params, message):
        with pytest.raises(ValueError, match=message):
            self.beta_family(**params)

    def test_mean_concentration_constraints(self):
        with pytest.raises(ValueError, match="0 < mean < 1"):
            self.beta_family(mean=1.0, concentration=4.0, parametrization_name="meanConcentration")

    def test_mean_concentration_conversion(self):
        dist = self.beta_family(
            mean=0.25,
            concentration=4.0,
            scale=100.0,
            parametrization_name="meanConcentration",
        )

        assert dist.parametrization_name == "meanConcentration"
        assert dist.mean == pytest.approx(25.0)
        assert dist.std == pytest.approx(self.reference.std())

    def test_moments_against_scipy(self):
        assert self.scores.mean == pytest.approx(25.0)
        assert self.scores.std == pytest.approx(100 * math.sqrt(3 / 80))
        assert self.scores.calculate_characteristic(
            CharacteristicName.VAR, None
        ) == pytest.approx(self.reference.var())
        assert self.scores.calculate_characteristic(
            CharacteristicName.SKEW, None
        ) == pytest.approx(float(self.reference.stats(moments="s")))

    def test_pdf_cdf_ppf_against_scipy(self):
        x = np.linspace(-10.0, 110.0, 61)
        p = np.linspace(0.0, 1.0, 21)

        self.assert_arrays_almost_equal(
            self.scores.calculate_characteristic("pdf", x), self.reference.pdf(x)
        )
        self.assert_arrays_almost_equal(
            self.scores.calculate_characteristic("cdf", x), self.reference.cdf(x)
        )
        self.assert_arrays_almost_equal(
            self.scores.calculate_characteristic("ppf", p), self.reference.ppf(p), precision=1e-8
        )

    def test_pdf_at_support_edges(self):
        pdf = self.scores.query_method("pdf")

        assert float(pdf(0.0)) == pytest.approx(0.03)
        assert float(pdf(100.0)) == pytest.approx(0.0)
        assert float(pdf(-1.0)) == 0.0

    def test_samples_within_support(self):
        sample = self.scores.sample(10_000, rng=11).array

        assert self.scores.support is not None
        assert self.scores.support.contains(sample).all()
        assert float(sample.mean()) == pytest.approx(25.0, abs=1.0)
