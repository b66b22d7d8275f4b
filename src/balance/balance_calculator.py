"""Wine balance scoring.

Combines the ideal ranges, the dynamic range shifts and the rule engine
into a single 0-1 balance score plus a per-characteristic breakdown. The
score and the breakdown are produced by the same code path, so what the
breakdown shows is always what the score used.
"""

import logging
from typing import Dict, Optional, Sequence

from src.balance.characteristics import CHARACTERISTICS, Characteristic, WineCharacteristics
from src.balance.config import BALANCE_SCORE_MULTIPLIER, BASE_BALANCED_RANGES
from src.balance.models import (
    BalanceResult,
    BalanceRule,
    CharacteristicBreakdown,
    RangeShift,
    RangeTable,
    validate_ranges,
    validate_rules,
)
from src.balance.range_adjuster import adjust_ranges
from src.balance.rule_engine import calculate_rules
from src.balance.rules import ALL_RULES, RANGE_SHIFTS
from src.rating.config import OUTSIDE_PENALTY_WEIGHT
from src.rating.rating import clamp01, distance_inside, distance_outside

logger = logging.getLogger(__name__)


class WineBalanceCalculator:
    """Score how close a characteristic vector sits to its ideal ranges.

    Holds only the static tables; every call takes a fresh characteristic
    vector and returns a fresh result.
    """

    def __init__(
        self,
        base_ranges: Optional[RangeTable] = None,
        range_shifts: Optional[Sequence[RangeShift]] = None,
        rules: Optional[Sequence[BalanceRule]] = None,
    ):
        self.base_ranges = dict(BASE_BALANCED_RANGES if base_ranges is None else base_ranges)
        validate_ranges(self.base_ranges)
        self.range_shifts = tuple(RANGE_SHIFTS if range_shifts is None else range_shifts)
        self.rules = tuple(ALL_RULES if rules is None else rules)
        validate_rules(self.rules)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def calculate(self, characteristics: WineCharacteristics) -> BalanceResult:
        """Full evaluation: score, adjusted ranges and all diagnostics.

        Formula::

            distance_inside  = |value - mid|
            penalty          = 2 * distance_outside
            final_distance   = (distance_inside + penalty)
                               * penalty_multiplier * (1 - synergy_reduction)
            score            = clamp(1 - 2 * mean(final_distance), 0, 1)
        """
        chars = characteristics.clamped()
        adjusted_ranges, applied_shifts = adjust_ranges(
            chars, self.base_ranges, self.range_shifts
        )
        evaluation = calculate_rules(
            chars,
            self.base_ranges,
            self.rules,
            want_breakdown=True,
            scored_ranges=adjusted_ranges,
        )

        breakdown: Dict[Characteristic, CharacteristicBreakdown] = {}
        for c in CHARACTERISTICS:
            value = chars.get(c)
            range_min, range_max = adjusted_ranges[c]
            inside = distance_inside(value, range_min, range_max)
            outside = distance_outside(value, range_min, range_max)
            penalty = OUTSIDE_PENALTY_WEIGHT * outside
            base_total = inside + penalty
            multiplier = evaluation.penalty_multipliers[c]
            reduction = evaluation.synergy_reductions[c]

            breakdown[c] = CharacteristicBreakdown(
                value=value,
                range=(range_min, range_max),
                distance_inside=inside,
                distance_outside=outside,
                penalty=penalty,
                base_total_distance=base_total,
                total_scaling_multiplier=multiplier,
                synergy_reduction=reduction,
                final_total_distance=base_total * multiplier * (1.0 - reduction),
            )

        avg_distance = sum(b.final_total_distance for b in breakdown.values()) / len(breakdown)
        score = clamp01(1.0 - BALANCE_SCORE_MULTIPLIER * avg_distance)

        logger.debug(
            "Balance score %.4f (avg distance %.4f, %d rules active, %d range shifts)",
            score, avg_distance, len(evaluation.rule_breakdowns), len(applied_shifts),
        )

        return BalanceResult(
            score=score,
            adjusted_ranges=adjusted_ranges,
            breakdown=breakdown,
            applied_shifts=applied_shifts,
            rule_breakdowns=evaluation.rule_breakdowns,
        )

    def calculate_wine_balance(self, characteristics: WineCharacteristics) -> BalanceResult:
        return self.calculate(characteristics)

    def calculate_characteristic_breakdown(
        self,
        characteristics: WineCharacteristics,
    ) -> Dict[Characteristic, CharacteristicBreakdown]:
        return self.calculate(characteristics).breakdown


def calculate_wine_balance(
    characteristics: WineCharacteristics,
    base_ranges: Optional[RangeTable] = None,
    range_adjustments: Optional[Sequence[RangeShift]] = None,
    rules: Optional[Sequence[BalanceRule]] = None,
) -> BalanceResult:
    """Score *characteristics* against the given (or default) tables."""
    calculator = WineBalanceCalculator(base_ranges, range_adjustments, rules)
    return calculator.calculate(characteristics)


def calculate_characteristic_breakdown(
    characteristics: WineCharacteristics,
    base_ranges: Optional[RangeTable] = None,
    range_adjustments: Optional[Sequence[RangeShift]] = None,
    rules: Optional[Sequence[BalanceRule]] = None,
) -> Dict[Characteristic, CharacteristicBreakdown]:
    calculator = WineBalanceCalculator(base_ranges, range_adjustments, rules)
    return calculator.calculate(characteristics).breakdown
