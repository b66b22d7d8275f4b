"""Range ratings and tier labels for display.

Converts a raw value plus its reference domain into a 0-1 rating, and a
0-1 rating into a human-readable tier. The deviation helpers
:func:`distance_inside` and :func:`distance_outside` are shared with the
balance calculator so the colouring of a characteristic and the penalty it
receives always agree.
"""

import math
from typing import List, Optional

from src.rating.config import (
    BREAKDOWN_DISPLAY_DOMAINS,
    COLOR_CATEGORIES,
    CREDIT_RATING_GRADES,
    GRAPE_QUALITY_CATEGORIES,
    LOWEST_CREDIT_GRADE,
    MIN_BALANCED_WIDTH,
    OUTSIDE_PENALTY_WEIGHT,
    RATING_STRATEGIES,
    WINE_BALANCE_CATEGORIES,
)


def clamp01(value: float) -> float:
    """Clamp *value* to the closed interval [0, 1]."""
    return max(0.0, min(1.0, value))


# ------------------------------------------------------------------
# Deviation math
# ------------------------------------------------------------------

def distance_inside(value: float, range_min: float, range_max: float) -> float:
    """Absolute distance from *value* to the midpoint of the range.

    Non-zero even when the value sits inside the range.
    """
    return abs(value - (range_min + range_max) / 2)


def distance_outside(value: float, range_min: float, range_max: float) -> float:
    """Distance from *value* to the nearest range edge, 0 inside the range."""
    return max(0.0, range_min - value, value - range_max)


# ------------------------------------------------------------------
# Ratings
# ------------------------------------------------------------------

def rating_for_range(
    value: float,
    domain_min: float,
    domain_max: float,
    strategy: str,
    range_min: Optional[float] = None,
    range_max: Optional[float] = None,
) -> float:
    """Rate *value* on a 0-1 scale where higher is always better.

    Strategies:

    * ``higher_better`` - linear position within the domain.
    * ``lower_better`` - inverse linear position within the domain.
    * ``balanced`` - 1.0 inside ``[range_min, range_max]`` (given on the
      normalized 0-1 scale); outside it the rating decays as::

          rating = exp(-penalty / width)
          penalty = 2 * distance_outside

    Args:
        value: Raw value to rate.
        domain_min: Lower bound of the value's natural domain.
        domain_max: Upper bound of the value's natural domain.
        strategy: One of ``RATING_STRATEGIES``.
        range_min: Ideal-range minimum, required for ``balanced``.
        range_max: Ideal-range maximum, required for ``balanced``.

    Returns:
        Rating in [0, 1].
    """
    if strategy not in RATING_STRATEGIES:
        raise ValueError(
            f"Unknown strategy: {strategy!r}. "
            f"Must be one of {', '.join(RATING_STRATEGIES)}."
        )

    if domain_max <= domain_min:
        return 0.5

    normalized = clamp01((value - domain_min) / (domain_max - domain_min))

    if strategy == "higher_better":
        return normalized
    if strategy == "lower_better":
        return 1.0 - normalized

    if range_min is None or range_max is None:
        raise ValueError("range_min and range_max are required for the balanced strategy")

    outside = distance_outside(normalized, range_min, range_max)
    if outside == 0.0:
        return 1.0
    width = max(range_max - range_min, MIN_BALANCED_WIDTH)
    return clamp01(math.exp(-(OUTSIDE_PENALTY_WEIGHT * outside) / width))


def rate_breakdown_field(field: str, value: float) -> float:
    """Display rating of a balance breakdown value (smaller distances rate higher)."""
    if field not in BREAKDOWN_DISPLAY_DOMAINS:
        raise ValueError(f"Unknown breakdown field: {field!r}")
    domain_min, domain_max = BREAKDOWN_DISPLAY_DOMAINS[field]
    return rating_for_range(value, domain_min, domain_max, "lower_better")


# ------------------------------------------------------------------
# Tier labels
# ------------------------------------------------------------------

def _tier(value: float, labels: List[str]) -> str:
    index = int(clamp01(value) * len(labels))
    return labels[min(index, len(labels) - 1)]


def color_category(value: float) -> str:
    """Generic quality label for a 0-1 value (Awful ... Perfect)."""
    return _tier(value, COLOR_CATEGORIES)


def wine_balance_category(balance: float) -> str:
    return _tier(balance, WINE_BALANCE_CATEGORIES)


def grape_quality_category(quality: float) -> str:
    return _tier(quality, GRAPE_QUALITY_CATEGORIES)


def credit_rating_category(credit_rating: float) -> str:
    """Map a 0-1 credit rating onto AAA ... C grades."""
    for threshold, grade in CREDIT_RATING_GRADES:
        if credit_rating >= threshold:
            return grade
    return LOWEST_CREDIT_GRADE
