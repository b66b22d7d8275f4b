"""Tests for src.vineyard.quality."""

from dataclasses import replace

import pytest

from src.vineyard.models import MissingDataError
from src.vineyard.quality import (
    VineyardQualityCalculator,
    get_vineyard_grape_quality_factors,
    get_vineyard_quality_factors,
)


class TestPenalties:
    def test_density_penalty(self):
        assert VineyardQualityCalculator.density_penalty(0) == 1.0
        assert VineyardQualityCalculator.density_penalty(1500) == 1.0
        assert VineyardQualityCalculator.density_penalty(8250) == pytest.approx(0.75)
        assert VineyardQualityCalculator.density_penalty(15000) == pytest.approx(0.5)
        assert VineyardQualityCalculator.density_penalty(40000) == pytest.approx(0.5)

    def test_no_overgrowth_no_penalty(self):
        assert VineyardQualityCalculator.overgrowth_penalty({}) == 1.0
        assert VineyardQualityCalculator.overgrowth_penalty({"vegetation": 0}) == 1.0

    def test_overgrowth_years_weighted(self):
        years = VineyardQualityCalculator.overgrowth_years({"vegetation": 2, "uproot": 1})
        assert years == pytest.approx((2 * 1.0 + 1 * 1.2) / 4.1)

    def test_overgrowth_penalty_grows_with_neglect(self):
        mild = VineyardQualityCalculator.overgrowth_penalty({"vegetation": 1})
        severe = VineyardQualityCalculator.overgrowth_penalty({"vegetation": 10, "debris": 10})
        assert 1.0 > mild > severe >= 0.94


class TestQualityFactors:
    def setup_method(self):
        self.calculator = VineyardQualityCalculator()

    def test_missing_vineyard(self):
        with pytest.raises(MissingDataError):
            self.calculator.get_vineyard_quality_factors(None)

    def test_quality_score_formula(self, napa_vineyard):
        report = self.calculator.get_vineyard_quality_factors(napa_vineyard)
        # land 600k / 1M = 0.6, prestige 0.6
        assert report.quality_score == pytest.approx(0.6 * 0.6 + 0.6 * 0.4)
        assert report.grape_quality_score is None
        assert report.factors.density_penalty is None

    def test_grape_quality_includes_density(self, napa_vineyard):
        report = self.calculator.get_vineyard_grape_quality_factors(napa_vineyard)
        density = 1.0 - (5000 - 1500) / (15000 - 1500) * 0.5
        assert report.factors.density_penalty == pytest.approx(density)
        assert report.grape_quality_score == pytest.approx(0.6 * density)

    def test_bare_vineyard_scores_zero(self, bare_vineyard):
        assert self.calculator.get_vineyard_quality_factors(bare_vineyard).quality_score == 0.0

    def test_factors_are_normalized(self, napa_vineyard):
        factors = self.calculator.get_vineyard_grape_quality_factors(napa_vineyard).factors
        for value in (
            factors.land_value, factors.vineyard_prestige, factors.regional_prestige,
            factors.altitude_rating, factors.aspect_rating, factors.grape_suitability,
            factors.overgrowth_penalty, factors.density_penalty,
        ):
            assert 0.0 <= value <= 1.0
        assert factors.aspect_rating == 1.0
        assert factors.altitude_rating == pytest.approx(250 / 600)

    def test_monotone_in_land_value(self, napa_vineyard):
        scores = [
            self.calculator.get_vineyard_quality_factors(
                replace(napa_vineyard, land_value=value)
            ).quality_score
            for value in (0, 200_000, 400_000, 800_000, 1_200_000)
        ]
        assert scores == sorted(scores)

    def test_monotone_in_prestige(self, napa_vineyard):
        scores = [
            self.calculator.get_vineyard_quality_factors(
                replace(napa_vineyard, vineyard_prestige=value)
            ).quality_score
            for value in (0.0, 0.25, 0.5, 0.75, 1.0)
        ]
        assert scores == sorted(scores)

    def test_overgrowth_lowers_quality(self, napa_vineyard):
        neglected = replace(napa_vineyard, overgrowth={"vegetation": 3, "debris": 2})
        assert (
            self.calculator.get_vineyard_quality_factors(neglected).quality_score
            < self.calculator.get_vineyard_quality_factors(napa_vineyard).quality_score
        )

    def test_raw_values(self, napa_vineyard, bare_vineyard):
        raw = self.calculator.get_vineyard_quality_factors(napa_vineyard).raw_values
        assert raw["grape"] == "Chardonnay"
        assert raw["density"] == "5000 vines/ha"
        assert raw["overgrowth"] == "No overgrowth"
        assert raw["regional_prestige"] == 0.9

        bare = self.calculator.get_vineyard_quality_factors(bare_vineyard).raw_values
        assert bare["grape"] == "Not planted"
        assert bare["density"] == "Not planted"

    def test_module_functions(self, napa_vineyard):
        assert get_vineyard_quality_factors(napa_vineyard).quality_score == pytest.approx(
            self.calculator.get_vineyard_quality_factors(napa_vineyard).quality_score
        )
        assert get_vineyard_grape_quality_factors(napa_vineyard).grape_quality_score is not None
