from src.vineyard.batch import score_vineyard_frame
from src.vineyard.land_value import calculate_land_value, get_max_land_value, normalize_to_01
from src.vineyard.models import (
    GrapeSuitabilityMetrics,
    MissingDataError,
    PrestigeEvent,
    PrestigeFactorBreakdown,
    QualityFactors,
    Vineyard,
    VineyardQualityReport,
)
from src.vineyard.prestige import (
    bounded_vineyard_prestige_factor,
    prestige_events_for_vineyard,
    total_current_prestige,
    vineyard_age_prestige_modifier,
)
from src.vineyard.quality import (
    VineyardQualityCalculator,
    get_vineyard_grape_quality_factors,
    get_vineyard_quality_factors,
)
from src.vineyard.scaling import asymmetric_multiplier, squash_tail
from src.vineyard.suitability import calculate_grape_suitability_metrics

__all__ = [
    "GrapeSuitabilityMetrics",
    "MissingDataError",
    "PrestigeEvent",
    "PrestigeFactorBreakdown",
    "QualityFactors",
    "Vineyard",
    "VineyardQualityCalculator",
    "VineyardQualityReport",
    "asymmetric_multiplier",
    "bounded_vineyard_prestige_factor",
    "calculate_grape_suitability_metrics",
    "calculate_land_value",
    "get_max_land_value",
    "get_vineyard_grape_quality_factors",
    "get_vineyard_quality_factors",
    "normalize_to_01",
    "prestige_events_for_vineyard",
    "score_vineyard_frame",
    "squash_tail",
    "total_current_prestige",
    "vineyard_age_prestige_modifier",
]
