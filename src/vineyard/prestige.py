"""Bounded vineyard prestige factor.

Prestige has two parts:

* **Permanent** - earned by vine age and by land value scaled with size.
  It never decays.
* **Decaying** - event-driven prestige (sales, achievements, ...) that
  fades over time. Only the part of the currently recorded prestige that
  exceeds the permanent floor counts, so permanent contributions are never
  counted twice.

The combined raw prestige is mapped onto a factor that approaches but never
reaches 1.
"""

import logging
import math
from typing import Iterable, List, Optional

import numpy as np

from src.rating.rating import clamp01
from src.vineyard.config import (
    AGE_SUITABILITY_CEILING,
    PRESTIGE_FACTOR_CEILING,
    PRESTIGE_FACTOR_DIVISOR,
    SIZE_FACTOR_SOFT_CAP_HECTARES,
    VINE_AGE_PRESTIGE_CURVE,
    VINEYARD_EVENT_TYPES,
)
from src.vineyard.land_value import normalize_land_value
from src.vineyard.models import MissingDataError, PrestigeEvent, PrestigeFactorBreakdown, Vineyard
from src.vineyard.scaling import asymmetric_multiplier, squash_tail
from src.vineyard.suitability import grape_suitability_for

logger = logging.getLogger(__name__)

_AGE_POINTS = np.array([age for age, _ in VINE_AGE_PRESTIGE_CURVE], dtype=float)
_AGE_VALUES = np.array([value for _, value in VINE_AGE_PRESTIGE_CURVE], dtype=float)


def vineyard_age_prestige_modifier(vine_age: float) -> float:
    """Base prestige of vines aged *vine_age* years (flat beyond the last point)."""
    return float(np.interp(max(0.0, vine_age), _AGE_POINTS, _AGE_VALUES))


def size_factor(hectares: float) -> float:
    """``sqrt(ha)``, growing only logarithmically beyond ``sqrt(5)``."""
    root = math.sqrt(hectares)
    soft_cap = math.sqrt(SIZE_FACTOR_SOFT_CAP_HECTARES)
    if root <= soft_cap:
        return root
    return soft_cap + math.log1p(root - soft_cap)


# ------------------------------------------------------------------
# Prestige events
# ------------------------------------------------------------------

def prestige_events_for_vineyard(
    vineyard_id: str,
    events: Iterable[PrestigeEvent],
) -> List[PrestigeEvent]:
    """Vineyard-type events whose ``source_id`` belongs to *vineyard_id*."""
    return [
        e for e in events
        if e.type in VINEYARD_EVENT_TYPES and e.source_id.startswith(vineyard_id)
    ]


def total_current_prestige(events: Iterable[PrestigeEvent], now_week: int) -> float:
    return sum(e.current_amount(now_week) for e in events)


# ------------------------------------------------------------------
# Public API
# ------------------------------------------------------------------

def bounded_vineyard_prestige_factor(
    vineyard: Optional[Vineyard],
    current_prestige: Optional[float] = None,
    events: Optional[Iterable[PrestigeEvent]] = None,
    now_week: Optional[int] = None,
) -> PrestigeFactorBreakdown:
    """Combine permanent and decaying prestige into a bounded factor.

    Formula::

        age_scaled     = max(0, asym(min(0.98, age_base * suitability)) - 1)
        land_per_ha    = asym(squash(land_norm * suitability)) - 1
        land_scaled    = land_per_ha * size_factor(hectares)
        permanent_raw  = age_scaled + land_scaled
        decaying       = max(0, current_prestige - permanent_raw)
        bounded_factor = min((permanent_raw + decaying) / 500, 0.99)

    Args:
        vineyard: Vineyard snapshot. ``None`` is an error, not a zero score.
        current_prestige: Already-decayed prestige recorded for the vineyard.
        events: Prestige event log, used when *current_prestige* is not
            given. Events are matched by ``source_id`` prefix.
        now_week: Absolute week used to decay *events*.

    Returns:
        :class:`PrestigeFactorBreakdown` with every intermediate value.

    Raises:
        MissingDataError: If the vineyard is missing or has no area.
    """
    if vineyard is None:
        raise MissingDataError("Vineyard data is required for the prestige factor")
    if vineyard.hectares <= 0:
        raise MissingDataError(
            f"Vineyard {vineyard.id!r} has invalid hectares: {vineyard.hectares!r}"
        )

    suitability = grape_suitability_for(vineyard)

    age_base = vineyard_age_prestige_modifier(vineyard.vine_age)
    age_with_suitability = clamp01(age_base * suitability)
    age_scaled = max(0.0, asymmetric_multiplier(min(AGE_SUITABILITY_CEILING, age_with_suitability)) - 1.0)

    land_normalized = normalize_land_value(vineyard.land_value)
    land_with_suitability = clamp01(land_normalized * suitability)
    land_per_ha = asymmetric_multiplier(squash_tail(land_with_suitability)) - 1.0

    sqrt_hectares = math.sqrt(vineyard.hectares)
    size = size_factor(vineyard.hectares)
    land_scaled = land_per_ha * size
    permanent_raw = age_scaled + land_scaled

    if current_prestige is None and events is not None:
        if now_week is None:
            raise ValueError("now_week is required to decay prestige events")
        matched = prestige_events_for_vineyard(vineyard.id, events)
        current_prestige = total_current_prestige(matched, now_week)
        logger.debug(
            "Vineyard %s: %d prestige events, %.3f current prestige",
            vineyard.id, len(matched), current_prestige,
        )
    if current_prestige is None:
        current_prestige = permanent_raw

    decaying_component = max(0.0, current_prestige - permanent_raw)
    combined_raw = permanent_raw + decaying_component
    bounded_factor = max(0.0, min(combined_raw / PRESTIGE_FACTOR_DIVISOR, PRESTIGE_FACTOR_CEILING))

    return PrestigeFactorBreakdown(
        age_base=age_base,
        age_with_suitability=age_with_suitability,
        age_scaled=age_scaled,
        land_normalized=land_normalized,
        land_with_suitability=land_with_suitability,
        land_per_ha=land_per_ha,
        sqrt_hectares=sqrt_hectares,
        size_factor=size,
        land_scaled=land_scaled,
        permanent_raw=permanent_raw,
        decaying_component=decaying_component,
        combined_raw=combined_raw,
        bounded_factor=bounded_factor,
    )
