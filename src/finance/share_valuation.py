"""Incremental share price model anchored on book value per share.

Every period the price moves by the sum of per-metric contributions, each
the gap between actual and expected improvement of a tracked metric. The
move is damped by an anchor factor that shrinks as the price drifts away
from the anchor (book value per share).
"""

import logging
import math
from typing import Dict, Optional

from src.finance.config import (
    DIVIDEND_GRACE_WEEKS,
    ECONOMY_EXPECTATION_MULTIPLIERS,
    EXPECTED_IMPROVEMENT_RATES,
    FIRST_YEAR_GRACE_WEEKS,
    INCREMENTAL_ANCHOR_CONFIG,
    INCREMENTAL_METRIC_CONFIG,
    MARKET_CAP_MODIFIER_CONFIG,
    MIN_SHARE_PRICE,
    PRESTIGE_SCALING,
    PROFITABILITY_METRICS,
    REVENUE_GROWTH_DENOMINATOR_OFFSET,
    REVENUE_GROWTH_FLOOR,
    SYMMETRIC_DOWNSIDE,
    TRACKED_METRICS,
    TREND_HISTORY_WEEKS,
    TREND_METRICS,
    ZERO_BASE_TREND_METRICS,
)
from src.finance.models import MetricContribution, SharePriceAdjustment, ShareValuationState
from src.rating.rating import clamp01

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# Building blocks
# ------------------------------------------------------------------

def anchor_factor(price: float, anchor: float) -> float:
    """Damping factor in (0, 1] for a price ``price`` around ``anchor``.

    Formula::

        deviation     = |price - anchor| / anchor
        anchor_factor = 1 / (1 + strength * deviation ** exponent)

    Returns 0 when either price is non-positive.
    """
    if price <= 0 or anchor <= 0:
        return 0.0
    deviation = abs(price - anchor) / anchor
    strength = INCREMENTAL_ANCHOR_CONFIG["strength"]
    exponent = INCREMENTAL_ANCHOR_CONFIG["exponent"]
    return 1.0 / (1.0 + strength * deviation ** exponent)


def economy_multiplier(economy_phase: str) -> float:
    if economy_phase not in ECONOMY_EXPECTATION_MULTIPLIERS:
        raise ValueError(f"Unknown economy phase: {economy_phase!r}")
    return ECONOMY_EXPECTATION_MULTIPLIERS[economy_phase]


def prestige_multiplier(prestige: float) -> float:
    """Expectation multiplier for a normalized 0-1 company prestige."""
    base = PRESTIGE_SCALING["base"]
    return base + clamp01(prestige) * (PRESTIGE_SCALING["max_multiplier"] - base)


def market_cap_requirement(market_cap: float) -> float:
    """Extra expected improvement (fraction per period) for large companies."""
    cfg = MARKET_CAP_MODIFIER_CONFIG
    if not cfg["enabled"] or market_cap <= cfg["base_market_cap"]:
        return 0.0
    ratio = market_cap / cfg["base_market_cap"]
    return min(cfg["base_rate"] * math.log10(ratio), cfg["max_rate"])


def improvement_percent(metric: str, current: float, previous: float) -> float:
    """Period-over-period improvement of *metric* in percent.

    Without a positive baseline a positive current value counts as a 100%
    improvement, except for ``ZERO_BASE_TREND_METRICS`` which count as 0.
    Revenue growth may be negative, so it only needs ``previous`` above
    ``REVENUE_GROWTH_FLOOR``.
    """
    if metric == "revenue_growth":
        if previous > REVENUE_GROWTH_FLOOR:
            denominator = abs(previous) + REVENUE_GROWTH_DENOMINATOR_OFFSET
            return (current - previous) / denominator * 100.0
        return 100.0 if current > REVENUE_GROWTH_FLOOR else 0.0
    if previous > 0:
        return (current - previous) / previous * 100.0
    if current <= 0 or metric in ZERO_BASE_TREND_METRICS:
        return 0.0
    return 100.0


def in_grace_period(metric: str, weeks_elapsed: int) -> bool:
    """True while *metric* is too young to move the share price."""
    if metric in PROFITABILITY_METRICS:
        return weeks_elapsed < FIRST_YEAR_GRACE_WEEKS
    if metric == "dividend_per_share":
        return weeks_elapsed < DIVIDEND_GRACE_WEEKS
    return weeks_elapsed < TREND_HISTORY_WEEKS


def delta_ratio(delta_percent: float, max_ratio: float, symmetric_downside: bool = SYMMETRIC_DOWNSIDE) -> float:
    """Convert a percent beat/miss into a ratio, capped at ``max_ratio``.

    With ``symmetric_downside`` the miss is floored at ``-max_ratio``;
    otherwise misses are unbounded.
    """
    ratio = min(delta_percent / 100.0, max_ratio)
    if symmetric_downside:
        ratio = max(ratio, -max_ratio)
    return ratio


# ------------------------------------------------------------------
# Public API
# ------------------------------------------------------------------

def expected_improvements(
    economy_phase: str,
    prestige: float = 0.0,
    market_cap: float = 0.0,
    growth_trend_multiplier: float = 1.0,
) -> Dict[str, float]:
    """Expected improvement of each tracked metric in percent."""
    multiplier = (
        economy_multiplier(economy_phase)
        * prestige_multiplier(prestige)
        * growth_trend_multiplier
    )
    requirement = market_cap_requirement(market_cap)
    return {
        metric: (EXPECTED_IMPROVEMENT_RATES[metric] * multiplier + requirement) * 100.0
        for metric in TRACKED_METRICS
    }


def next_share_price(
    state: ShareValuationState,
    actuals: Dict[str, float],
    previous: Dict[str, float],
    economy_phase: str,
    weeks_elapsed: int,
    prestige: float = 0.0,
    market_cap: float = 0.0,
    growth_trend_multiplier: Optional[float] = None,
    symmetric_downside: bool = SYMMETRIC_DOWNSIDE,
) -> SharePriceAdjustment:
    """Compute the next incremental share price.

    Args:
        state: Current price, anchor (book value per share) and the stored
            growth trend multiplier.
        actuals: Current value of each tracked metric. Missing metrics count
            as 0.
        previous: Value of each metric one period ago. A missing entry falls
            back to the current value, i.e. no improvement.
        economy_phase: One of ``ECONOMY_PHASES``.
        weeks_elapsed: Weeks since the company was founded. Profitability
            metrics sit out the first year, dividends the first
            ``DIVIDEND_GRACE_WEEKS`` and trend metrics until a year of
            history exists. A metric in its grace period contributes 0.
        prestige: Normalized 0-1 company prestige.
        market_cap: Current market capitalisation.
        growth_trend_multiplier: Overrides ``state.growth_trend_multiplier``.
        symmetric_downside: Clamp misses at ``-max_ratio`` as well.

    Returns:
        :class:`SharePriceAdjustment` with the new price and per-metric
        contributions.

    Raises:
        ValueError: If ``economy_phase`` is unknown.
    """
    trend = state.growth_trend_multiplier if growth_trend_multiplier is None else growth_trend_multiplier
    multiplier = economy_multiplier(economy_phase) * prestige_multiplier(prestige) * trend
    requirement = market_cap_requirement(market_cap)
    expected = expected_improvements(economy_phase, prestige, market_cap, trend)

    contributions = []
    for metric in TRACKED_METRICS:
        current = actuals.get(metric, 0.0)
        prior = previous.get(metric, current)
        grace = in_grace_period(metric, weeks_elapsed)
        if grace and metric in TREND_METRICS:
            actual_pct = 0.0
        else:
            actual_pct = improvement_percent(metric, current, prior)
        delta_pct = 0.0 if grace else actual_pct - expected[metric]
        cfg = INCREMENTAL_METRIC_CONFIG[metric]
        ratio = delta_ratio(delta_pct, cfg["max_ratio"], symmetric_downside)
        contributions.append(MetricContribution(
            metric=metric,
            actual_percent=actual_pct,
            expected_percent=expected[metric],
            delta_percent=delta_pct,
            delta_ratio=ratio,
            contribution=ratio * cfg["base_adjustment"],
            in_grace_period=grace,
        ))

    total = sum(c.contribution for c in contributions)
    factor = anchor_factor(state.current_price, state.anchor_price)
    adjustment = total * factor
    floor = state.anchor_price * INCREMENTAL_ANCHOR_CONFIG["min_price_ratio_to_anchor"]
    new_price = max(state.current_price + adjustment, floor, MIN_SHARE_PRICE)

    logger.debug(
        "Share price %.4f -> %.4f (contribution=%.4f anchor_factor=%.4f)",
        state.current_price, new_price, total, factor,
    )
    return SharePriceAdjustment(
        new_price=new_price,
        anchor_factor=factor,
        total_contribution=total,
        adjustment=adjustment,
        improvement_multiplier=multiplier,
        market_cap_requirement=requirement,
        metric_contributions=contributions,
    )
