"""Tests for src.vineyard.suitability."""

import pytest

from src.vineyard.config import GRAPE_SUITABILITY_WEIGHTS
from src.vineyard.models import MissingDataError
from src.vineyard.suitability import (
    _band_score,
    altitude_suitability,
    calculate_grape_suitability_metrics,
    grape_suitability_for,
    resolve_soils,
    soil_suitability,
    sun_exposure_index,
    sun_exposure_suitability,
)


class TestComponents:
    @pytest.mark.parametrize("value,expected", [
        (5, 1.0), (4, 1.0), (2, 0.5), (8, 0.5), (0, 0.0), (11, 0.0),
    ])
    def test_band_score(self, value, expected):
        assert _band_score(value, (4, 6), (0, 10)) == pytest.approx(expected)

    def test_altitude_suitability(self):
        assert altitude_suitability("Pinot Noir", 300) == 1.0
        assert altitude_suitability("Pinot Noir", 100) == 0.0

    def test_sun_exposure_index(self):
        # Mosel heat 0.32, South +0.08, bottom of the altitude range
        assert sun_exposure_index("Germany", "Mosel", 100, "South") == pytest.approx(0.40)

    def test_altitude_cools_the_site(self):
        low = sun_exposure_index("Germany", "Mosel", 100, "South")
        high = sun_exposure_index("Germany", "Mosel", 350, "South")
        assert high == pytest.approx(low - 0.15)

    def test_sun_exposure_suitability(self):
        assert sun_exposure_suitability("Pinot Noir", 0.4) == 1.0
        assert sun_exposure_suitability("Pinot Noir", 0.95) == 0.0

    def test_soil_suitability(self):
        assert soil_suitability("Chardonnay", ["Chalk", "Limestone"]) == 1.0
        assert soil_suitability("Chardonnay", ["Chalk", "Clay"]) == pytest.approx(0.75)
        assert soil_suitability("Chardonnay", ["Basalt"]) == 0.0

    def test_soil_suitability_neutral_without_data(self):
        assert soil_suitability("Chardonnay", []) == 0.5
        assert soil_suitability("Merlot", ["Clay"]) == 0.5

    def test_resolve_soils(self):
        assert resolve_soils("France", "Champagne") == ("Chalk", "Clay", "Limestone")
        assert resolve_soils("France", "Champagne", ["Clay", "Clay"]) == ("Clay",)


class TestGrapeSuitabilityMetrics:
    def test_components_and_overall(self):
        metrics = calculate_grape_suitability_metrics(
            "Pinot Noir", "Germany", "Mosel", 300, "South"
        )
        assert metrics.region == 1.0
        assert metrics.altitude == 1.0
        assert 0.0 < metrics.sun_exposure < 1.0
        # One preferred and one unlisted slate
        assert metrics.soil == pytest.approx(0.5)

        weights = GRAPE_SUITABILITY_WEIGHTS
        expected = (
            metrics.region * weights["region"]
            + metrics.altitude * weights["altitude"]
            + metrics.sun_exposure * weights["sun_exposure"]
            + metrics.soil * weights["soil"]
        )
        assert metrics.overall == pytest.approx(expected)

    def test_better_grape_scores_higher(self):
        pinot = calculate_grape_suitability_metrics("Pinot Noir", "Germany", "Mosel", 300, "South")
        primitivo = calculate_grape_suitability_metrics("Primitivo", "Germany", "Mosel", 300, "South")
        assert pinot.overall > primitivo.overall

    @pytest.mark.parametrize("grape,country,region,match", [
        ("Pinot Noir", "Atlantis", "Mosel", "country"),
        ("Pinot Noir", "France", "Loire", "region"),
        ("Merlot", "France", "Bordeaux", "grape"),
    ])
    def test_unknown_inputs_raise(self, grape, country, region, match):
        with pytest.raises(MissingDataError, match=match):
            calculate_grape_suitability_metrics(grape, country, region, 100, "South")

    def test_unplanted_vineyard_is_fully_suitable(self, bare_vineyard):
        assert grape_suitability_for(bare_vineyard) == 1.0

    def test_planted_vineyard(self, napa_vineyard):
        assert 0.0 < grape_suitability_for(napa_vineyard) <= 1.0
