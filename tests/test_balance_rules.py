"""Tests for src.balance.characteristics and the static rule tables."""

import pytest

from src.balance.characteristics import CHARACTERISTICS, Characteristic, WineCharacteristics
from src.balance.config import BASE_BALANCED_RANGES, DEFAULT_SYNERGY_CAP
from src.balance.models import InvalidRangeError, RuleKind, validate_ranges
from src.balance.rules import ALL_RULES, PENALTY_RULES, RANGE_SHIFTS, SYNERGY_RULES


class TestWineCharacteristics:
    def test_six_characteristics(self):
        assert [c.value for c in CHARACTERISTICS] == [
            "acidity", "aroma", "body", "spice", "sweetness", "tannins",
        ]

    def test_get_by_enum_or_name(self, centered_wine):
        assert centered_wine.get(Characteristic.BODY) == 0.6
        assert centered_wine.get("body") == 0.6

    def test_clamped(self):
        wine = WineCharacteristics(-0.2, 0.5, 1.4, 0.5, 0.5, 0.5)
        clamped = wine.clamped()
        assert clamped.acidity == 0.0
        assert clamped.body == 1.0
        assert wine.acidity == -0.2  # original untouched

    def test_with_value_returns_copy(self, centered_wine):
        changed = centered_wine.with_value(Characteristic.SPICE, 0.9)
        assert changed.spice == 0.9
        assert centered_wine.spice == 0.5

    def test_dict_round_trip(self, centered_wine):
        assert WineCharacteristics.from_dict(centered_wine.to_dict()) == centered_wine

    def test_from_dict_missing_keys(self):
        with pytest.raises(ValueError, match="Missing characteristics"):
            WineCharacteristics.from_dict({"acidity": 0.5, "aroma": 0.5})

    def test_from_dict_rejects_nan(self, centered_wine):
        data = {**centered_wine.to_dict(), "body": float("nan")}
        with pytest.raises(ValueError, match="Non-finite characteristic values.*body"):
            WineCharacteristics.from_dict(data)


class TestRuleTables:
    def test_rule_counts(self):
        assert len(PENALTY_RULES) == 15
        assert len(SYNERGY_RULES) == 7
        assert len(ALL_RULES) == 22

    def test_kinds_match_tables(self):
        assert all(r.kind == RuleKind.PENALTY for r in PENALTY_RULES)
        assert all(r.kind == RuleKind.SYNERGY for r in SYNERGY_RULES)

    def test_rule_names_unique(self):
        names = [r.name for r in ALL_RULES]
        assert len(names) == len(set(names))

    def test_synergy_caps_keep_distances_positive(self):
        assert all(0 < r.cap <= DEFAULT_SYNERGY_CAP for r in SYNERGY_RULES)

    def test_rules_have_sources_and_targets(self):
        for rule in ALL_RULES:
            assert rule.sources, rule.name
            assert rule.targets, rule.name
            assert rule.k > 0 and rule.p > 0

    def test_key_joins_sources(self):
        rule = next(r for r in SYNERGY_RULES if r.name == "Classic Balance")
        assert rule.key == "acidity+sweetness"

    def test_conditions(self):
        clash = next(r for r in PENALTY_RULES if r.name == "Clashing Sweetness")
        wine = WineCharacteristics(0.8, 0.5, 0.6, 0.5, 0.7, 0.5)
        assert clash.condition(wine)
        assert not clash.condition(wine.with_value(Characteristic.SWEETNESS, 0.5))

    def test_range_shifts_never_self_target(self):
        assert len(RANGE_SHIFTS) == 8
        assert all(s.source != s.target for s in RANGE_SHIFTS)


class TestValidateRanges:
    def test_base_ranges_are_valid(self):
        validate_ranges(BASE_BALANCED_RANGES)

    def test_missing_characteristic(self):
        ranges = dict(BASE_BALANCED_RANGES)
        del ranges["spice"]
        with pytest.raises(InvalidRangeError, match="spice"):
            validate_ranges(ranges)

    def test_inverted_range(self):
        ranges = {**BASE_BALANCED_RANGES, "body": (0.8, 0.4)}
        with pytest.raises(InvalidRangeError, match="Invalid range"):
            validate_ranges(ranges)

    def test_out_of_unit_interval(self):
        ranges = {**BASE_BALANCED_RANGES, "aroma": (0.3, 1.2)}
        with pytest.raises(InvalidRangeError):
            validate_ranges(ranges)

    def test_is_a_value_error(self):
        assert issubclass(InvalidRangeError, ValueError)
