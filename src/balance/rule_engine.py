"""Generic interpreter for penalty and synergy rules.

Every rule is evaluated the same way, regardless of kind::

    avg_deviation = mean(|value - mid| / half_width)   over rule.sources
    raw_effect    = k * avg_deviation ** p
    capped_effect = min(cap, raw_effect)

Penalties compound multiplicatively on each target, ``multiplier *= 1 +
capped_effect``. Synergies do not stack: a target keeps the strongest
single synergy reduction, so the reduction stays below the largest synergy
cap and a distance can never turn negative.
"""

import logging
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from src.balance.characteristics import CHARACTERISTICS, Characteristic, WineCharacteristics
from src.balance.config import MIN_HALF_WIDTH
from src.balance.models import (
    BalanceRange,
    BalanceRule,
    RangeTable,
    RuleBreakdown,
    RuleEvaluation,
    RuleKind,
)
from src.balance.rules import ALL_RULES
from src.rating.rating import clamp01

logger = logging.getLogger(__name__)


def average_deviation(
    characteristics: WineCharacteristics,
    sources: Sequence[Characteristic],
    base_ranges: RangeTable,
) -> float:
    """Mean absolute deviation of *sources* from their range midpoints.

    Each deviation is expressed in half-widths, so a value on the edge of
    its range deviates by exactly 1.0.
    """
    if not sources:
        return 0.0
    total = 0.0
    for source in sources:
        range_min, range_max = base_ranges[source.value]
        midpoint = (range_min + range_max) / 2
        half_width = max(MIN_HALF_WIDTH, (range_max - range_min) / 2)
        total += abs((characteristics.get(source) - midpoint) / half_width)
    return total / len(sources)


def rule_effect(rule: BalanceRule, avg_deviation: float) -> Tuple[float, float]:
    """Return ``(raw_effect, capped_effect)`` for *rule* at *avg_deviation*."""
    if avg_deviation <= 0:
        return 0.0, 0.0
    raw = rule.k * avg_deviation ** rule.p
    return raw, min(rule.cap, raw)


def calculate_rules(
    characteristics: WineCharacteristics,
    base_ranges: RangeTable,
    rules: Sequence[BalanceRule] = ALL_RULES,
    dry_run: bool = False,
    want_breakdown: bool = False,
    scored_ranges: Optional[Mapping[Characteristic, BalanceRange]] = None,
) -> RuleEvaluation:
    """Evaluate *rules* against a characteristic vector.

    Args:
        characteristics: Clamped characteristic vector.
        base_ranges: Base ranges used to measure source deviation.
        rules: Rules to evaluate.
        dry_run: Report every rule, active or not, without accumulating any
            effect. All multipliers stay 1.0 and all reductions 0.0.
        want_breakdown: Collect a :class:`RuleBreakdown` per reported rule.
        scored_ranges: Ranges the distances are scored against; used to
            derive ``effective_ranges``. Defaults to *base_ranges*.

    Returns:
        :class:`RuleEvaluation` with per-characteristic penalty multipliers,
        synergy reductions and effective display ranges.
    """
    multipliers: Dict[Characteristic, float] = {c: 1.0 for c in CHARACTERISTICS}
    reductions: Dict[Characteristic, float] = {c: 0.0 for c in CHARACTERISTICS}
    breakdowns: List[RuleBreakdown] = []

    for rule in rules:
        active = bool(rule.condition(characteristics))
        if not active and not dry_run:
            continue

        avg_dev = average_deviation(characteristics, rule.sources, base_ranges)
        raw, capped = rule_effect(rule, avg_dev)

        if want_breakdown or dry_run:
            breakdowns.append(
                RuleBreakdown(
                    rule_name=rule.name,
                    kind=rule.kind,
                    key=rule.key,
                    sources=rule.sources,
                    targets=rule.targets,
                    active=active,
                    avg_deviation=avg_dev,
                    k=rule.k,
                    p=rule.p,
                    cap=rule.cap,
                    raw_effect=raw,
                    capped_effect=capped,
                    hits_cap=raw >= rule.cap,
                    percentage=capped * 100,
                )
            )

        if dry_run:
            continue

        for target in rule.targets:
            if rule.kind == RuleKind.PENALTY:
                multipliers[target] *= 1.0 + capped
            else:
                reductions[target] = max(reductions[target], capped)

        logger.debug(
            "%s rule %r active: avg_deviation=%.3f effect=%.3f (cap %.2f)",
            rule.kind.value, rule.name, avg_dev, capped, rule.cap,
        )

    ranges = scored_ranges
    if ranges is None:
        ranges = {c: tuple(base_ranges[c.value]) for c in CHARACTERISTICS}

    return RuleEvaluation(
        penalty_multipliers=multipliers,
        synergy_reductions=reductions,
        effective_ranges=_effective_ranges(ranges, multipliers, reductions),
        rule_breakdowns=breakdowns,
    )


def _effective_ranges(
    ranges: Mapping[Characteristic, BalanceRange],
    multipliers: Mapping[Characteristic, float],
    reductions: Mapping[Characteristic, float],
) -> Dict[Characteristic, BalanceRange]:
    """Rescale each range around its midpoint by the net rule effect.

    Penalties narrow the displayed range and synergies widen it.
    """
    effective: Dict[Characteristic, BalanceRange] = {}
    for c in CHARACTERISTICS:
        range_min, range_max = ranges[c]
        midpoint = (range_min + range_max) / 2
        scale = multipliers[c] * (1.0 - reductions[c])
        half_width = (range_max - range_min) / 2 / scale
        effective[c] = (clamp01(midpoint - half_width), clamp01(midpoint + half_width))
    return effective
