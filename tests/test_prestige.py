"""Tests for src.vineyard.prestige."""

import math
from dataclasses import replace

import pytest

from src.vineyard.models import MissingDataError, PrestigeEvent, Vineyard
from src.vineyard.prestige import (
    bounded_vineyard_prestige_factor,
    prestige_events_for_vineyard,
    size_factor,
    total_current_prestige,
    vineyard_age_prestige_modifier,
)


# ── Helpers ───────────────────────────────────────────────────────────


def _event(source_id, amount=10.0, decay=0.9, timestamp=0, type_="vineyard_sale"):
    return PrestigeEvent(
        type=type_,
        amount=amount,
        original_amount=amount,
        decay_rate=decay,
        timestamp=timestamp,
        source_id=source_id,
    )


# ── Building blocks ───────────────────────────────────────────────────


class TestAgeAndSize:
    def test_age_curve_points(self):
        assert vineyard_age_prestige_modifier(0) == pytest.approx(0.01)
        assert vineyard_age_prestige_modifier(10) == pytest.approx(0.26)
        assert vineyard_age_prestige_modifier(100) == pytest.approx(0.95)

    def test_age_curve_interpolates(self):
        assert vineyard_age_prestige_modifier(5) == pytest.approx(0.10 + 2 / 7 * 0.16)

    def test_age_curve_flat_outside(self):
        assert vineyard_age_prestige_modifier(-3) == pytest.approx(0.01)
        assert vineyard_age_prestige_modifier(250) == pytest.approx(0.95)

    def test_size_factor_is_sqrt_up_to_soft_cap(self):
        assert size_factor(4) == pytest.approx(2.0)
        assert size_factor(5) == pytest.approx(math.sqrt(5))

    def test_size_factor_grows_slowly_beyond_soft_cap(self):
        assert math.sqrt(5) < size_factor(100) < math.sqrt(100)
        assert size_factor(100) < size_factor(400)


class TestPrestigeEvents:
    def test_current_amount_decays(self):
        event = _event("vy-1", amount=10.0, decay=0.9, timestamp=0)
        assert event.current_amount(0) == pytest.approx(10.0)
        assert event.current_amount(2) == pytest.approx(8.1)

    def test_future_timestamp_does_not_grow(self):
        assert _event("vy-1", timestamp=10).current_amount(5) == pytest.approx(10.0)

    def test_filtering_by_type_and_source(self):
        events = [
            _event("vy-1"),
            _event("vy-1-harvest-2024"),
            _event("vy-2"),
            _event("vy-1", type_="company_finance"),
        ]
        matched = prestige_events_for_vineyard("vy-1", events)
        assert len(matched) == 2

    def test_total_current_prestige(self):
        events = [_event("a", amount=10.0, decay=0.5), _event("b", amount=4.0, decay=1.0)]
        assert total_current_prestige(events, now_week=1) == pytest.approx(9.0)


# ── Bounded factor ────────────────────────────────────────────────────


class TestBoundedVineyardPrestigeFactor:
    def test_missing_vineyard(self):
        with pytest.raises(MissingDataError):
            bounded_vineyard_prestige_factor(None)

    def test_zero_hectares(self, bare_vineyard):
        with pytest.raises(MissingDataError, match="invalid hectares"):
            bounded_vineyard_prestige_factor(replace(bare_vineyard, hectares=0))

    def test_bare_vineyard_has_tiny_prestige(self, bare_vineyard):
        result = bounded_vineyard_prestige_factor(bare_vineyard)
        assert result.land_scaled == pytest.approx(0.0)
        assert 0.0 <= result.bounded_factor < 0.001

    def test_factor_is_bounded(self, napa_vineyard):
        giant = replace(napa_vineyard, grape=None, land_value=2_000_000, vine_age=200, hectares=5000)
        result = bounded_vineyard_prestige_factor(giant)
        assert result.bounded_factor == pytest.approx(0.99)

    def test_permanent_only_without_current_prestige(self, napa_vineyard):
        result = bounded_vineyard_prestige_factor(napa_vineyard)
        assert result.decaying_component == 0.0
        assert result.combined_raw == pytest.approx(result.permanent_raw)
        assert result.permanent_raw == pytest.approx(result.age_scaled + result.land_scaled)

    def test_decaying_prestige_above_permanent_floor(self, napa_vineyard):
        base = bounded_vineyard_prestige_factor(napa_vineyard)
        boosted = bounded_vineyard_prestige_factor(
            napa_vineyard, current_prestige=base.permanent_raw + 20
        )
        assert boosted.decaying_component == pytest.approx(20)
        assert boosted.bounded_factor > base.bounded_factor

    def test_current_prestige_below_floor_is_ignored(self, napa_vineyard):
        base = bounded_vineyard_prestige_factor(napa_vineyard)
        low = bounded_vineyard_prestige_factor(napa_vineyard, current_prestige=0.0)
        assert low.bounded_factor == pytest.approx(base.bounded_factor)

    def test_events_need_now_week(self, napa_vineyard):
        with pytest.raises(ValueError, match="now_week"):
            bounded_vineyard_prestige_factor(napa_vineyard, events=[_event("vy-1")])

    def test_events_are_decayed(self, napa_vineyard):
        events = [_event("vy-1", amount=1000.0, decay=0.5)]
        fresh = bounded_vineyard_prestige_factor(napa_vineyard, events=events, now_week=0)
        stale = bounded_vineyard_prestige_factor(napa_vineyard, events=events, now_week=20)
        assert fresh.bounded_factor > stale.bounded_factor

    def test_more_land_value_more_prestige(self, napa_vineyard):
        cheap = bounded_vineyard_prestige_factor(replace(napa_vineyard, land_value=100_000))
        dear = bounded_vineyard_prestige_factor(replace(napa_vineyard, land_value=900_000))
        assert dear.bounded_factor > cheap.bounded_factor

    def test_bigger_vineyard_more_prestige(self, napa_vineyard):
        small = bounded_vineyard_prestige_factor(replace(napa_vineyard, hectares=1))
        large = bounded_vineyard_prestige_factor(replace(napa_vineyard, hectares=20))
        assert large.bounded_factor > small.bounded_factor

    def test_older_vines_more_prestige(self, napa_vineyard):
        young = bounded_vineyard_prestige_factor(replace(napa_vineyard, vine_age=2))
        old = bounded_vineyard_prestige_factor(replace(napa_vineyard, vine_age=60))
        assert old.age_scaled > young.age_scaled
