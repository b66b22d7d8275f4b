from src.rating.rating import (
    clamp01,
    color_category,
    credit_rating_category,
    distance_inside,
    distance_outside,
    grape_quality_category,
    rate_breakdown_field,
    rating_for_range,
    wine_balance_category,
)

__all__ = [
    "clamp01",
    "color_category",
    "credit_rating_category",
    "distance_inside",
    "distance_outside",
    "grape_quality_category",
    "rate_breakdown_field",
    "rating_for_range",
    "wine_balance_category",
]
