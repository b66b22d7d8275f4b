"""Data models for vineyard scoring."""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Mapping, Optional, Tuple

from src.vineyard.config import OVERGROWTH_TASK_WEIGHTS


class MissingDataError(Exception):
    """Raised when vineyard data needed for a score is absent or unusable."""

    pass


@dataclass(frozen=True)
class Vineyard:
    """Snapshot of the vineyard attributes the scoring engine reads."""

    id: str
    name: str
    country: str
    region: str
    altitude: float  # metres
    aspect: str  # one of config.ASPECTS
    hectares: float
    density: float = 0.0  # vines per hectare, 0 = not planted
    land_value: float = 0.0  # EUR per hectare
    grape: Optional[str] = None
    vine_age: float = 0.0  # years
    vineyard_prestige: float = 0.0  # raw 0-1
    soil: Tuple[str, ...] = ()
    overgrowth: Dict[str, float] = field(default_factory=dict)  # task -> years

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Vineyard":
        """Build a vineyard from a flat mapping, e.g. a DataFrame row.

        ``soil`` may be a sequence or a ``;``-separated string, and
        overgrowth may be given as ``overgrowth_<task>`` columns.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in data.items() if k in known and v is not None}

        soil = kwargs.get("soil", ())
        if isinstance(soil, str):
            soil = [s.strip() for s in soil.split(";") if s.strip()]
        kwargs["soil"] = tuple(soil)

        overgrowth = dict(kwargs.get("overgrowth") or {})
        for task in OVERGROWTH_TASK_WEIGHTS:
            column = f"overgrowth_{task}"
            if data.get(column) is not None:
                overgrowth[task] = float(data[column])
        kwargs["overgrowth"] = overgrowth

        if kwargs.get("grape") == "":
            kwargs["grape"] = None
        kwargs["id"] = str(kwargs.get("id", ""))
        return cls(**kwargs)


@dataclass(frozen=True)
class PrestigeEvent:
    """One entry of a vineyard's append-only prestige log."""

    type: str
    amount: float
    original_amount: float
    decay_rate: float  # per week, 0 < rate <= 1
    timestamp: int  # absolute week the event was created
    source_id: str

    def current_amount(self, now_week: int) -> float:
        """Amount left after decay: ``original * decay_rate ** weeks_elapsed``."""
        periods = max(0, now_week - self.timestamp)
        return self.original_amount * self.decay_rate ** periods


@dataclass
class GrapeSuitabilityMetrics:
    region: float
    altitude: float
    sun_exposure: float
    soil: float
    overall: float


@dataclass
class QualityFactors:
    """Normalized quality inputs, each in [0, 1]."""

    land_value: float
    vineyard_prestige: float
    regional_prestige: float
    altitude_rating: float
    aspect_rating: float
    grape_suitability: float
    overgrowth_penalty: float
    density_penalty: Optional[float] = None


@dataclass
class VineyardQualityReport:
    factors: QualityFactors
    raw_values: Dict[str, Any]
    quality_score: Optional[float] = None
    grape_quality_score: Optional[float] = None


@dataclass
class PrestigeFactorBreakdown:
    """Every intermediate of the bounded vineyard prestige factor."""

    age_base: float
    age_with_suitability: float
    age_scaled: float
    land_normalized: float
    land_with_suitability: float
    land_per_ha: float
    sqrt_hectares: float
    size_factor: float
    land_scaled: float
    permanent_raw: float
    decaying_component: float
    combined_raw: float
    bounded_factor: float
