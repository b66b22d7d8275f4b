"""Score a CSV of wines, and optionally a CSV of vineyards, to JSON.

Usage:
    python -m src.run_scoring wines.csv [vineyards.csv] [output.json]

Examples:
    python -m src.run_scoring data/wines.csv
    python -m src.run_scoring data/wines.csv data/vineyards.csv out/scores.json

Without an explicit output path the JSON is written next to the wines CSV as
``<wines>_scores.json``.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path

import pandas as pd

from src.balance.batch import CHARACTERISTIC_COLUMNS, score_balance_frame
from src.logging_config import setup_logging
from src.vineyard.batch import score_vineyard_frame

logger = logging.getLogger(__name__)


def _cell(row: pd.Series, column: str):
    """Value of *column* in *row*, or None when the column is absent or blank."""
    value = row.get(column)
    if value is None or pd.isna(value):
        return None
    return value


def _wine_to_dict(row: pd.Series) -> dict:
    wine_id = _cell(row, "id")
    return {
        "id": None if wine_id is None else str(wine_id),
        "name": _cell(row, "name"),
        "characteristics": {col: float(row[col]) for col in CHARACTERISTIC_COLUMNS},
        "balance_score": float(row["balance_score"]),
        "balance_category": row["balance_category"],
        "final_distances": {
            col: float(row[f"final_distance_{col}"]) for col in CHARACTERISTIC_COLUMNS
        },
    }


def _vineyard_to_dict(row: pd.Series) -> dict:
    return {
        "id": str(row["id"]),
        "name": row["name"],
        "region": f"{row['region']}, {row['country']}",
        "grape": _cell(row, "grape"),
        "quality_score": float(row["quality_score"]),
        "grape_quality_score": float(row["grape_quality_score"]),
        "grape_quality_category": row["grape_quality_category"],
        "prestige_factor": float(row["prestige_factor"]),
    }


def run_scoring(
    wines_csv: Path,
    vineyards_csv: Path | None = None,
    output_file: Path | None = None,
) -> Path:
    """Score the input CSVs and write one JSON document.

    Args:
        wines_csv: CSV with the six characteristic columns; ``id`` and
            ``name`` columns are carried through when present.
        vineyards_csv: Optional CSV of vineyards (see
            :func:`src.vineyard.batch.score_vineyard_frame`).
        output_file: Destination; defaults to ``<wines>_scores.json`` beside
            *wines_csv*.

    Returns:
        Path to the written JSON file.

    Raises:
        FileNotFoundError: If an input CSV doesn't exist.
        ValueError: If a CSV lacks required columns.
    """
    for path in (wines_csv, vineyards_csv):
        if path is not None and not path.is_file():
            raise FileNotFoundError(f"Input file not found: {path}")
    if output_file is None:
        output_file = wines_csv.with_name(f"{wines_csv.stem}_scores.json")

    logger.info("Scoring wines from %s", wines_csv)
    wines_df = score_balance_frame(pd.read_csv(wines_csv))
    wines = [_wine_to_dict(row) for _, row in wines_df.iterrows()]

    vineyards = []
    if vineyards_csv is not None:
        logger.info("Scoring vineyards from %s", vineyards_csv)
        vineyards_df = score_vineyard_frame(pd.read_csv(vineyards_csv))
        vineyards = [_vineyard_to_dict(row) for _, row in vineyards_df.iterrows()]

    output_data = {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "wines": wines,
        "vineyards": vineyards,
    }

    output_file.parent.mkdir(parents=True, exist_ok=True)
    with open(output_file, "w") as f:
        json.dump(output_data, f, indent=2)

    logger.info("Scoring complete! Output: %s (%d wines, %d vineyards)",
                output_file, len(wines), len(vineyards))
    return output_file


if __name__ == "__main__":
    setup_logging()

    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)

    wines_path = Path(sys.argv[1])
    vineyards_path = Path(sys.argv[2]) if len(sys.argv) > 2 else None
    output_path = Path(sys.argv[3]) if len(sys.argv) > 3 else None

    try:
        output = run_scoring(wines_path, vineyards_path, output_path)
        print(f"Scoring complete: {output}")
    except Exception as exc:
        logger.error("Scoring failed: %s", exc)
        sys.exit(1)
