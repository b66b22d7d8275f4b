"""Dynamic shifting of ideal ranges based on the characteristic vector.

When a source characteristic sits above (or below) the midpoint of its base
range, the ranges of related characteristics move with it: a tannic wine
tolerates more body, an acidic wine tolerates less sweetness, and so on.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from src.balance.characteristics import CHARACTERISTICS, Characteristic, WineCharacteristics
from src.balance.config import (
    BASE_BALANCED_RANGES,
    DEVIATION_EPSILON,
    MIN_ADJUSTED_WIDTH,
    MIN_RANGE_SPAN,
)
from src.balance.models import AppliedRangeShift, BalanceRange, RangeShift, RangeTable
from src.balance.rules import RANGE_SHIFTS
from src.rating.rating import clamp01

logger = logging.getLogger(__name__)


def adjust_ranges(
    characteristics: WineCharacteristics,
    base_ranges: RangeTable = BASE_BALANCED_RANGES,
    shifts: Sequence[RangeShift] = RANGE_SHIFTS,
) -> Tuple[Dict[Characteristic, BalanceRange], List[AppliedRangeShift]]:
    """Shift ideal ranges according to how far each source leaves its midpoint.

    Formula::

        deviation = (value - mid) / (max - min)       # on the base range
        delta     = shift_per_unit * deviation * target_base_width

    ``delta`` moves both ends of the target's current range. Ranges are kept
    inside [0, 1] and never narrower than ``MIN_ADJUSTED_WIDTH``.

    Args:
        characteristics: Clamped characteristic vector.
        base_ranges: Base range per characteristic name.
        shifts: Declarative shift table.

    Returns:
        ``(adjusted_ranges, applied_shifts)`` tuple.
    """
    adjusted: Dict[Characteristic, BalanceRange] = {
        c: tuple(base_ranges[c.value]) for c in CHARACTERISTICS
    }
    applied: List[AppliedRangeShift] = []

    for source in CHARACTERISTICS:
        deviation = _source_deviation(characteristics.get(source), base_ranges[source.value])
        if abs(deviation) < DEVIATION_EPSILON:
            continue
        direction = "above" if deviation > 0 else "below"

        for shift in shifts:
            if shift.source != source:
                continue
            target_min, target_max = base_ranges[shift.target.value]
            delta = shift.shift_per_unit * deviation * (target_max - target_min)

            current_min, current_max = adjusted[shift.target]
            adjusted[shift.target] = _bounded_range(
                current_min + delta, current_max + delta, shift.clamp
            )
            applied.append(
                AppliedRangeShift(
                    name=shift.name,
                    source=source,
                    target=shift.target,
                    direction=direction,
                    deviation=deviation,
                    delta=delta,
                )
            )
            logger.debug(
                "Range shift %s: %s %s midpoint by %.3f, %s moved %.4f",
                shift.name, source.value, direction, deviation,
                shift.target.value, delta,
            )

    return adjusted, applied


def _source_deviation(value: float, base_range: BalanceRange) -> float:
    range_min, range_max = base_range
    midpoint = (range_min + range_max) / 2
    return (value - midpoint) / max(MIN_RANGE_SPAN, range_max - range_min)


def _bounded_range(
    range_min: float,
    range_max: float,
    limits: Optional[BalanceRange],
) -> BalanceRange:
    if limits is not None:
        low, high = limits
        range_min = min(max(range_min, low), high)
        range_max = min(max(range_max, low), high)

    range_min, range_max = clamp01(range_min), clamp01(range_max)

    if range_max - range_min < MIN_ADJUSTED_WIDTH:
        half = MIN_ADJUSTED_WIDTH / 2
        center = min(max((range_min + range_max) / 2, half), 1.0 - half)
        range_min, range_max = center - half, center + half

    return range_min, range_max
