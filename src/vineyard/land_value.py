"""Land value and the regional / terrain ratings derived from lookup tables."""

import logging
from typing import Tuple

from src.rating.rating import clamp01
from src.vineyard.config import (
    ASPECT_NORMALIZATION_BOUNDS,
    DEFAULT_ALTITUDE_RANGE,
    DEFAULT_ASPECT_RATING,
    DEFAULT_PRICE_RANGE,
    DEFAULT_RAW_REGION_PRESTIGE,
    MAX_LAND_VALUE_EXCLUDED_REGIONS,
    REGION_ALTITUDE_RANGES,
    REGION_ASPECT_RATINGS,
    REGION_PRESTIGE_BOUNDS,
    REGION_PRESTIGE_RANKINGS,
    REGION_PRICE_RANGES,
)

logger = logging.getLogger(__name__)


def normalize_to_01(value: float, minimum: float, maximum: float) -> float:
    """Linear position of *value* in ``[minimum, maximum]``, clamped.

    A degenerate range (``maximum <= minimum``) yields the neutral 0.5.
    """
    if maximum <= minimum:
        return 0.5
    return clamp01((value - minimum) / (maximum - minimum))


def get_max_land_value() -> float:
    """Highest regional land price, ignoring the outlier regions."""
    return float(max(
        price_max
        for country, regions in REGION_PRICE_RANGES.items()
        for region, (_, price_max) in regions.items()
        if (country, region) not in MAX_LAND_VALUE_EXCLUDED_REGIONS
    ))


def normalize_land_value(land_value: float) -> float:
    """``land_value / global_max``, clamped to [0, 1]."""
    return clamp01(land_value / get_max_land_value())


def get_regional_price_range(country: str, region: str) -> Tuple[float, float]:
    price_range = REGION_PRICE_RANGES.get(country, {}).get(region)
    if price_range is None:
        logger.warning(
            "No price range for %s/%s, using default %s", country, region, DEFAULT_PRICE_RANGE
        )
        return DEFAULT_PRICE_RANGE
    return price_range


def get_raw_regional_prestige(country: str, region: str) -> float:
    prestige = REGION_PRESTIGE_RANKINGS.get(country, {}).get(region)
    if prestige is None:
        logger.warning(
            "No prestige ranking for %s/%s, using %.2f",
            country, region, DEFAULT_RAW_REGION_PRESTIGE,
        )
        return DEFAULT_RAW_REGION_PRESTIGE
    return prestige


def get_regional_prestige(country: str, region: str) -> float:
    """Regional prestige rescaled from its table bounds onto [0, 1]."""
    return normalize_to_01(get_raw_regional_prestige(country, region), *REGION_PRESTIGE_BOUNDS)


def get_altitude_range(country: str, region: str) -> Tuple[float, float]:
    altitude_range = REGION_ALTITUDE_RANGES.get(country, {}).get(region)
    if altitude_range is None:
        logger.warning(
            "No altitude range for %s/%s, using default %s",
            country, region, DEFAULT_ALTITUDE_RANGE,
        )
        return DEFAULT_ALTITUDE_RANGE
    return altitude_range


def get_altitude_rating(country: str, region: str, altitude: float) -> float:
    return normalize_to_01(altitude, *get_altitude_range(country, region))


def get_aspect_rating(country: str, region: str, aspect: str) -> float:
    rating = REGION_ASPECT_RATINGS.get(country, {}).get(region, {}).get(aspect)
    if rating is None:
        logger.warning(
            "No aspect rating for %s/%s/%s, using %.2f",
            country, region, aspect, DEFAULT_ASPECT_RATING,
        )
        return DEFAULT_ASPECT_RATING
    return rating


def calculate_land_value(country: str, region: str, altitude: float, aspect: str) -> int:
    """Per-hectare land price from the region's price band and the terrain.

    Formula::

        rate  = (aspect_norm + altitude_norm) / 2
        value = round(base + rate * (max - base))
    """
    base_price, max_price = get_regional_price_range(country, region)
    aspect_norm = normalize_to_01(
        get_aspect_rating(country, region, aspect), *ASPECT_NORMALIZATION_BOUNDS
    )
    altitude_norm = get_altitude_rating(country, region, altitude)
    rate = (aspect_norm + altitude_norm) / 2
    return round(base_price + rate * (max_price - base_price))
