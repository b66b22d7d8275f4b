"""Growth trend ratchet.

A company that keeps meeting expectations gets tougher expectations: the
growth trend multiplier feeds the expected improvement rates used by the
share valuation model.
"""

import logging
from typing import Dict, Iterable, Optional

from src.finance.config import (
    DIVIDEND_GRACE_WEEKS,
    EXPECTED_VALUE_BASELINES,
    FIRST_YEAR_GRACE_WEEKS,
    GROWTH_TREND_CONFIG,
    GROWTH_TREND_METRICS,
)
from src.finance.models import GrowthTrendResult

logger = logging.getLogger(__name__)


def performance_score(actual: float, expected: float) -> float:
    """Actual over expected; 1.0 means expectations were met exactly.

    When nothing positive was expected, any positive result scores 2.0 and
    anything else counts as on target.
    """
    if expected > 0:
        return max(0.0, actual / expected)
    return 2.0 if actual > 0 else 1.0


def average_performance(
    actuals: Dict[str, float],
    expected: Dict[str, float],
    weeks_elapsed: int,
) -> Optional[float]:
    """Mean performance score over the trend metrics present in *actuals*.

    The dividend metric only counts once the company has paid dividends for
    ``DIVIDEND_GRACE_WEEKS``. Returns None when no metric can be scored.
    """
    expected_values = {**EXPECTED_VALUE_BASELINES, **expected}
    scores = []
    for metric in GROWTH_TREND_METRICS:
        if metric not in actuals or metric not in expected_values:
            continue
        if metric == "dividend_per_share" and weeks_elapsed < DIVIDEND_GRACE_WEEKS:
            continue
        scores.append(performance_score(actuals[metric], expected_values[metric]))
    if not scores:
        return None
    return sum(scores) / len(scores)


def apply_growth_trend(multiplier: float, avg_performance: float) -> float:
    """Ratchet *multiplier* one step for the given average performance."""
    cfg = GROWTH_TREND_CONFIG
    step = cfg["adjustment_increment"]
    if avg_performance >= cfg["outperform_threshold"]:
        return min(1.0 + cfg["max_adjustment"], multiplier + step)
    if avg_performance < cfg["underperform_threshold"]:
        return max(1.0 - cfg["min_adjustment"], multiplier - step)
    return multiplier


def update_growth_trend(
    multiplier: float,
    actuals: Dict[str, float],
    expected: Dict[str, float],
    weeks_elapsed: int,
    history: Iterable[float] = (),
) -> GrowthTrendResult:
    """Run one period-end growth trend update.

    Args:
        multiplier: Stored growth trend multiplier.
        actuals: Rolling actual values of the trend metrics.
        expected: Expected values of the same metrics. Revenue growth and
            profit margin fall back to ``EXPECTED_VALUE_BASELINES``.
        weeks_elapsed: Weeks since the company was founded.
        history: Average performance of earlier periods, oldest first. The
            last ``periods_to_track - 1`` are averaged with this period.

    Returns:
        :class:`GrowthTrendResult`; ``adjusted`` is False during the grace
        year or when nothing could be scored.
    """
    if weeks_elapsed < FIRST_YEAR_GRACE_WEEKS:
        return GrowthTrendResult(multiplier, None, False, "grace period")

    current = average_performance(actuals, expected, weeks_elapsed)
    if current is None:
        return GrowthTrendResult(multiplier, None, False, "no metrics")

    window = GROWTH_TREND_CONFIG["periods_to_track"]
    recent = list(history)[-(window - 1):] if window > 1 else []
    avg = (sum(recent) + current) / (len(recent) + 1)

    new_multiplier = apply_growth_trend(multiplier, avg)
    if avg >= GROWTH_TREND_CONFIG["outperform_threshold"]:
        reason = "outperformed"
    elif avg < GROWTH_TREND_CONFIG["underperform_threshold"]:
        reason = "underperformed"
    else:
        reason = "on target"

    logger.info("Growth trend %.2f -> %.2f (avg performance %.3f)", multiplier, new_multiplier, avg)
    return GrowthTrendResult(new_multiplier, avg, new_multiplier != multiplier, reason)
