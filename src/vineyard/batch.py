"""Batch vineyard scoring over a pandas DataFrame."""

import logging
from typing import Any, Dict

import pandas as pd

from src.rating.rating import grape_quality_category
from src.vineyard.models import Vineyard
from src.vineyard.prestige import bounded_vineyard_prestige_factor
from src.vineyard.quality import VineyardQualityCalculator

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["id", "name", "country", "region", "altitude", "aspect", "hectares"]


def _is_blank(value: Any) -> bool:
    """True for an empty CSV cell (None, NaN or pd.NA)."""
    return value is None or (pd.api.types.is_scalar(value) and bool(pd.isna(value)))


def _row_to_vineyard(row: Dict[str, Any]) -> Vineyard:
    return Vineyard.from_dict({key: None if _is_blank(value) else value for key, value in row.items()})


def score_vineyard_frame(vineyards_df: pd.DataFrame) -> pd.DataFrame:
    """Add quality and prestige columns to *vineyards_df*.

    Args:
        vineyards_df: One row per vineyard with at least ``REQUIRED_COLUMNS``;
            optional columns map onto :class:`Vineyard` fields, plus
            ``overgrowth_<task>`` columns.

    Returns:
        Copy of *vineyards_df* with added columns ``quality_score``,
        ``grape_quality_score``, ``prestige_factor`` and
        ``grape_quality_category``.

    Raises:
        ValueError: If a required column is missing.
        MissingDataError: If a row cannot be scored.
    """
    missing = [col for col in REQUIRED_COLUMNS if col not in vineyards_df.columns]
    if missing:
        raise ValueError(f"Missing vineyard columns: {missing!r}")

    calculator = VineyardQualityCalculator()
    out = vineyards_df.copy()

    quality, grape_quality, prestige = [], [], []
    for row in out.to_dict("records"):
        vineyard = _row_to_vineyard(row)
        quality.append(calculator.get_vineyard_quality_factors(vineyard).quality_score)
        grape_quality.append(
            calculator.get_vineyard_grape_quality_factors(vineyard).grape_quality_score
        )
        prestige.append(bounded_vineyard_prestige_factor(vineyard).bounded_factor)

    out["quality_score"] = quality
    out["grape_quality_score"] = grape_quality
    out["prestige_factor"] = prestige
    out["grape_quality_category"] = out["grape_quality_score"].map(grape_quality_category)

    logger.info("Scored %d vineyards", len(out))
    return out
