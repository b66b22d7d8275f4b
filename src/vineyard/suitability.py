"""How well a grape variety suits a vineyard's region, altitude, sun and soil."""

import logging
from typing import Optional, Sequence, Tuple

from src.rating.rating import clamp01
from src.vineyard.config import (
    ALTITUDE_HEAT_COOLING_FACTOR,
    ASPECT_SUN_EXPOSURE_OFFSETS,
    DEFAULT_REGION_HEAT,
    GRAPE_ALTITUDE_SUITABILITY,
    GRAPE_SOIL_PREFERENCES,
    GRAPE_SUITABILITY_WEIGHTS,
    GRAPE_SUN_PREFERENCES,
    NEUTRAL_SOIL_SUITABILITY,
    REGION_GRAPE_SUITABILITY,
    REGION_HEAT_PROFILE,
    REGION_SOIL_TYPES,
)
from src.vineyard.land_value import get_altitude_range, normalize_to_01
from src.vineyard.models import GrapeSuitabilityMetrics, MissingDataError, Vineyard

logger = logging.getLogger(__name__)


def calculate_grape_suitability_metrics(
    grape: str,
    country: str,
    region: str,
    altitude: float,
    aspect: str,
    soil: Optional[Sequence[str]] = None,
) -> GrapeSuitabilityMetrics:
    """Score *grape* against every growing condition of a site.

    Formula::

        overall = 0.4 * region + 0.2 * altitude + 0.2 * sun_exposure + 0.2 * soil

    Raises:
        MissingDataError: If the country, region or grape has no entry in
            the regional suitability table.
    """
    countries = REGION_GRAPE_SUITABILITY.get(country)
    if countries is None:
        raise MissingDataError(f"No suitability data for country {country!r}")
    regional = countries.get(region)
    if regional is None:
        raise MissingDataError(f"No suitability data for region {region!r} in {country!r}")
    if grape not in regional:
        raise MissingDataError(f"No suitability data for grape {grape!r} in {region!r}")

    region_value = regional[grape]
    altitude_value = altitude_suitability(grape, altitude)
    sun_value = sun_exposure_suitability(
        grape, sun_exposure_index(country, region, altitude, aspect)
    )
    soil_value = soil_suitability(grape, resolve_soils(country, region, soil))

    weights = GRAPE_SUITABILITY_WEIGHTS
    overall = (
        region_value * weights["region"]
        + altitude_value * weights["altitude"]
        + sun_value * weights["sun_exposure"]
        + soil_value * weights["soil"]
    ) / sum(weights.values())

    return GrapeSuitabilityMetrics(
        region=clamp01(region_value),
        altitude=clamp01(altitude_value),
        sun_exposure=clamp01(sun_value),
        soil=clamp01(soil_value),
        overall=clamp01(overall),
    )


def grape_suitability_for(vineyard: Vineyard) -> float:
    """Overall suitability of the planted grape; 1.0 when nothing is planted."""
    if not vineyard.grape:
        return 1.0
    return calculate_grape_suitability_metrics(
        vineyard.grape,
        vineyard.country,
        vineyard.region,
        vineyard.altitude,
        vineyard.aspect,
        vineyard.soil,
    ).overall


# ------------------------------------------------------------------
# Components
# ------------------------------------------------------------------

def _band_score(value: float, preferred: Tuple[float, float], tolerance: Tuple[float, float]) -> float:
    """1 inside *preferred*, 0 outside *tolerance*, linear in between."""
    preferred_min, preferred_max = preferred
    tolerance_min, tolerance_max = tolerance

    if value < tolerance_min or value > tolerance_max:
        return 0.0
    if preferred_min <= value <= preferred_max:
        return 1.0
    if value < preferred_min:
        span = preferred_min - tolerance_min
        return clamp01((value - tolerance_min) / span) if span > 0 else 0.0
    span = tolerance_max - preferred_max
    return clamp01((tolerance_max - value) / span) if span > 0 else 0.0


def altitude_suitability(grape: str, altitude: float) -> float:
    bands = GRAPE_ALTITUDE_SUITABILITY.get(grape)
    if bands is None:
        raise MissingDataError(f"No altitude preference for grape {grape!r}")
    return _band_score(altitude, bands["preferred"], bands["tolerance"])


def sun_exposure_index(country: str, region: str, altitude: float, aspect: str) -> float:
    """Regional heat, nudged by the slope's aspect and cooled by altitude."""
    base_heat = REGION_HEAT_PROFILE.get(country, {}).get(region, DEFAULT_REGION_HEAT)
    offset = ASPECT_SUN_EXPOSURE_OFFSETS.get(aspect, 0.0)
    cooling = normalize_to_01(altitude, *get_altitude_range(country, region)) * ALTITUDE_HEAT_COOLING_FACTOR
    return clamp01(base_heat + offset - cooling)


def sun_exposure_suitability(grape: str, exposure_index: float) -> float:
    preference = GRAPE_SUN_PREFERENCES.get(grape)
    if preference is None:
        raise MissingDataError(f"No sun preference for grape {grape!r}")
    optimal = (preference["optimal_min"], preference["optimal_max"])
    tolerance = (
        clamp01(preference["optimal_min"] - preference["tolerance"]),
        clamp01(preference["optimal_max"] + preference["tolerance"]),
    )
    return _band_score(exposure_index, optimal, tolerance)


def resolve_soils(country: str, region: str, soil: Optional[Sequence[str]] = None) -> Tuple[str, ...]:
    """The vineyard's own soils, or the region's typical soils when none given."""
    if soil:
        return tuple(dict.fromkeys(soil))
    return tuple(REGION_SOIL_TYPES.get(country, {}).get(region, ()))


def soil_suitability(grape: str, soils: Sequence[str]) -> float:
    """1 when every soil is preferred, else mean of preferred 1 / tolerated 0.5."""
    preferences = GRAPE_SOIL_PREFERENCES.get(grape)
    unique = list(dict.fromkeys(soils))
    if preferences is None or not unique:
        return NEUTRAL_SOIL_SUITABILITY

    preferred = set(preferences["preferred"])
    tolerated = set(preferences.get("tolerated", ()))
    if all(s in preferred for s in unique):
        return 1.0

    score = sum(1.0 if s in preferred else 0.5 if s in tolerated else 0.0 for s in unique)
    return clamp01(score / len(unique))
