"""Batch balance scoring over a pandas DataFrame."""

import logging
from typing import Optional

import pandas as pd

from src.balance.balance_calculator import WineBalanceCalculator
from src.balance.characteristics import CHARACTERISTICS, WineCharacteristics
from src.rating.rating import wine_balance_category

logger = logging.getLogger(__name__)

CHARACTERISTIC_COLUMNS = [c.value for c in CHARACTERISTICS]


def score_balance_frame(
    wines_df: pd.DataFrame,
    calculator: Optional[WineBalanceCalculator] = None,
) -> pd.DataFrame:
    """Add balance columns to *wines_df*.

    Args:
        wines_df: DataFrame with one column per characteristic
            (``acidity``, ``aroma``, ``body``, ``spice``, ``sweetness``,
            ``tannins``).
        calculator: Calculator to use; defaults to the standard tables.

    Returns:
        Copy of *wines_df* with added columns ``balance_score``,
        ``balance_category`` and ``final_distance_<characteristic>``.
    """
    missing = [col for col in CHARACTERISTIC_COLUMNS if col not in wines_df.columns]
    if missing:
        raise ValueError(f"Missing characteristic columns: {missing!r}")

    calculator = calculator or WineBalanceCalculator()
    out = wines_df.copy()

    results = [
        calculator.calculate(WineCharacteristics.from_dict(row))
        for row in out[CHARACTERISTIC_COLUMNS].to_dict("records")
    ]

    out["balance_score"] = [r.score for r in results]
    out["balance_category"] = out["balance_score"].map(wine_balance_category)
    for c in CHARACTERISTICS:
        out[f"final_distance_{c.value}"] = [
            r.breakdown[c].final_total_distance for r in results
        ]

    if not out.empty:
        logger.info(
            "Scored balance for %d wines (mean %.3f, range [%.3f, %.3f])",
            len(out), out["balance_score"].mean(),
            out["balance_score"].min(), out["balance_score"].max(),
        )
    return out
