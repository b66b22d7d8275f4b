"""Tests for src.rating.rating."""

import math

import pytest

from src.rating.config import (
    COLOR_CATEGORIES,
    GRAPE_QUALITY_CATEGORIES,
    WINE_BALANCE_CATEGORIES,
)
from src.rating.rating import (
    clamp01,
    color_category,
    credit_rating_category,
    distance_inside,
    distance_outside,
    grape_quality_category,
    rate_breakdown_field,
    rating_for_range,
    wine_balance_category,
)


class TestDistances:
    def test_clamp01(self):
        assert clamp01(-0.5) == 0.0
        assert clamp01(0.3) == 0.3
        assert clamp01(1.7) == 1.0

    def test_distance_inside_is_distance_to_midpoint(self):
        assert distance_inside(0.5, 0.4, 0.6) == pytest.approx(0.0)
        assert distance_inside(0.45, 0.4, 0.6) == pytest.approx(0.05)
        assert distance_inside(0.9, 0.4, 0.6) == pytest.approx(0.4)

    def test_distance_outside_zero_inside_range(self):
        assert distance_outside(0.4, 0.4, 0.6) == 0.0
        assert distance_outside(0.55, 0.4, 0.6) == 0.0

    def test_distance_outside_measures_nearest_edge(self):
        assert distance_outside(0.3, 0.4, 0.6) == pytest.approx(0.1)
        assert distance_outside(0.75, 0.4, 0.6) == pytest.approx(0.15)


class TestRatingForRange:
    def test_higher_better_is_linear(self):
        assert rating_for_range(75, 0, 100, "higher_better") == pytest.approx(0.75)

    def test_lower_better_is_inverse(self):
        assert rating_for_range(75, 0, 100, "lower_better") == pytest.approx(0.25)

    def test_values_outside_domain_are_clamped(self):
        assert rating_for_range(150, 0, 100, "higher_better") == 1.0
        assert rating_for_range(-10, 0, 100, "higher_better") == 0.0

    def test_degenerate_domain_is_neutral(self):
        assert rating_for_range(5, 10, 10, "higher_better") == 0.5
        assert rating_for_range(5, 10, 3, "balanced", 0.2, 0.4) == 0.5

    def test_balanced_inside_range_is_perfect(self):
        assert rating_for_range(0.5, 0, 1, "balanced", 0.4, 0.6) == 1.0

    def test_balanced_decays_outside_range(self):
        expected = math.exp(-(2.0 * 0.1) / 0.2)
        assert rating_for_range(0.7, 0, 1, "balanced", 0.4, 0.6) == pytest.approx(expected)
        assert rating_for_range(0.9, 0, 1, "balanced", 0.4, 0.6) < expected

    def test_balanced_requires_range(self):
        with pytest.raises(ValueError, match="range_min and range_max"):
            rating_for_range(0.5, 0, 1, "balanced")

    def test_unknown_strategy_raises(self):
        with pytest.raises(ValueError, match="Unknown strategy"):
            rating_for_range(0.5, 0, 1, "sideways")


class TestBreakdownRatings:
    def test_zero_distance_rates_perfect(self):
        assert rate_breakdown_field("total_distance", 0.0) == 1.0

    def test_distance_at_domain_max_rates_zero(self):
        assert rate_breakdown_field("penalty", 0.4) == pytest.approx(0.0)

    def test_unknown_field_raises(self):
        with pytest.raises(ValueError, match="Unknown breakdown field"):
            rate_breakdown_field("sparkle", 0.1)


class TestCategories:
    @pytest.mark.parametrize("labels,func", [
        (COLOR_CATEGORIES, color_category),
        (WINE_BALANCE_CATEGORIES, wine_balance_category),
        (GRAPE_QUALITY_CATEGORIES, grape_quality_category),
    ])
    def test_tiers_cover_the_unit_interval(self, labels, func):
        assert func(0.0) == labels[0]
        assert func(0.55) == labels[5]
        assert func(1.0) == labels[-1]
        assert func(2.0) == labels[-1]

    def test_credit_grades(self):
        assert credit_rating_category(0.99) == "AAA"
        assert credit_rating_category(0.95) == "AAA"
        assert credit_rating_category(0.52) == "BBB-"
        assert credit_rating_category(0.07) == "CC"
        assert credit_rating_category(0.0) == "C"
