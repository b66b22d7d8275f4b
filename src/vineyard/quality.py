"""Vineyard quality and grape-quality factor calculation.

Formula::

    quality_score       = clamp(land * 0.6 + prestige * 0.4) * overgrowth
    grape_quality_score = quality_score * density

``land`` is the land value as a fraction of the global maximum land price;
``prestige`` is the vineyard's raw 0-1 prestige.
"""

import logging
from typing import Any, Dict

from src.rating.rating import clamp01
from src.vineyard.config import (
    DENSITY_MAX,
    DENSITY_MIN_MULTIPLIER,
    DENSITY_OPTIMAL,
    OVERGROWTH_DECAY_BASE,
    OVERGROWTH_MAX_PENALTY,
    OVERGROWTH_MIN_MULTIPLIER,
    OVERGROWTH_TASK_WEIGHTS,
    QUALITY_WEIGHTS,
)
from src.vineyard.land_value import (
    get_altitude_rating,
    get_aspect_rating,
    get_raw_regional_prestige,
    get_regional_prestige,
    normalize_land_value,
)
from src.vineyard.models import MissingDataError, QualityFactors, Vineyard, VineyardQualityReport
from src.vineyard.suitability import grape_suitability_for

logger = logging.getLogger(__name__)


class VineyardQualityCalculator:
    """Derive normalized quality factors and scores from a vineyard snapshot.

    The calculator is stateless: the vineyard is passed to every call.
    """

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_vineyard_quality_factors(self, vineyard: Vineyard) -> VineyardQualityReport:
        """Quality factors and the land/prestige quality score."""
        factors = self._build_factors(vineyard, with_density=False)
        score = self._weighted_score(factors) * factors.overgrowth_penalty
        return VineyardQualityReport(
            factors=factors,
            raw_values=self._raw_values(vineyard),
            quality_score=score,
        )

    def get_vineyard_grape_quality_factors(self, vineyard: Vineyard) -> VineyardQualityReport:
        """Quality factors and the grape-quality score (adds the density penalty)."""
        factors = self._build_factors(vineyard, with_density=True)
        score = (
            self._weighted_score(factors)
            * factors.overgrowth_penalty
            * factors.density_penalty
        )
        logger.debug(
            "Vineyard %s grape quality %.4f (land=%.3f prestige=%.3f overgrowth=%.3f density=%.3f)",
            vineyard.id, score, factors.land_value, factors.vineyard_prestige,
            factors.overgrowth_penalty, factors.density_penalty,
        )
        return VineyardQualityReport(
            factors=factors,
            raw_values=self._raw_values(vineyard),
            grape_quality_score=score,
        )

    # ------------------------------------------------------------------
    # Penalties
    # ------------------------------------------------------------------

    @staticmethod
    def overgrowth_years(overgrowth: Dict[str, float]) -> float:
        """Weighted mean of the years each maintenance task has been neglected."""
        total_weight = sum(OVERGROWTH_TASK_WEIGHTS.values())
        weighted = sum(
            max(0.0, overgrowth.get(task, 0.0)) * weight
            for task, weight in OVERGROWTH_TASK_WEIGHTS.items()
        )
        return weighted / total_weight

    @classmethod
    def overgrowth_penalty(cls, overgrowth: Dict[str, float]) -> float:
        """Quality multiplier for neglect.

        Formula::

            penalty    = 0.06 * (1 - 0.7 ** years)
            multiplier = max(1 - penalty, 0.5)
        """
        years = cls.overgrowth_years(overgrowth)
        if years <= 0:
            return 1.0
        penalty = OVERGROWTH_MAX_PENALTY * (1.0 - OVERGROWTH_DECAY_BASE ** years)
        return max(1.0 - penalty, OVERGROWTH_MIN_MULTIPLIER)

    @staticmethod
    def density_penalty(density: float) -> float:
        """1.0 when unplanted or up to the optimal density, then linear down to 0.5."""
        if density <= DENSITY_OPTIMAL:
            return 1.0
        fraction = min(1.0, (density - DENSITY_OPTIMAL) / (DENSITY_MAX - DENSITY_OPTIMAL))
        return 1.0 - fraction * (1.0 - DENSITY_MIN_MULTIPLIER)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _build_factors(self, vineyard: Vineyard, with_density: bool) -> QualityFactors:
        if vineyard is None:
            raise MissingDataError("Vineyard data is required for quality factors")

        return QualityFactors(
            land_value=normalize_land_value(vineyard.land_value),
            vineyard_prestige=clamp01(vineyard.vineyard_prestige),
            regional_prestige=get_regional_prestige(vineyard.country, vineyard.region),
            altitude_rating=get_altitude_rating(vineyard.country, vineyard.region, vineyard.altitude),
            aspect_rating=get_aspect_rating(vineyard.country, vineyard.region, vineyard.aspect),
            grape_suitability=grape_suitability_for(vineyard),
            overgrowth_penalty=self.overgrowth_penalty(vineyard.overgrowth),
            density_penalty=self.density_penalty(vineyard.density) if with_density else None,
        )

    @staticmethod
    def _weighted_score(factors: QualityFactors) -> float:
        return clamp01(
            factors.land_value * QUALITY_WEIGHTS["land_value"]
            + factors.vineyard_prestige * QUALITY_WEIGHTS["vineyard_prestige"]
        )

    @staticmethod
    def _raw_values(vineyard: Vineyard) -> Dict[str, Any]:
        neglected = {task: years for task, years in vineyard.overgrowth.items() if years > 0}
        if neglected:
            overgrowth = ", ".join(
                f"{task.capitalize()}: {years:g}y" for task, years in neglected.items()
            )
        else:
            overgrowth = "No overgrowth"

        return {
            "land_value": vineyard.land_value,
            "vineyard_prestige": vineyard.vineyard_prestige,
            "regional_prestige": get_raw_regional_prestige(vineyard.country, vineyard.region),
            "altitude": f"{vineyard.altitude:g}m",
            "aspect": vineyard.aspect,
            "grape": vineyard.grape or "Not planted",
            "overgrowth": overgrowth,
            "density": f"{vineyard.density:g} vines/ha" if vineyard.density > 0 else "Not planted",
        }


_calculator = VineyardQualityCalculator()


def get_vineyard_quality_factors(vineyard: Vineyard) -> VineyardQualityReport:
    return _calculator.get_vineyard_quality_factors(vineyard)


def get_vineyard_grape_quality_factors(vineyard: Vineyard) -> VineyardQualityReport:
    return _calculator.get_vineyard_grape_quality_factors(vineyard)
