"""Staff wage model.

Formula::

    wage = round((500 + mean(skills) * 1000) * 1.3 ** n_specializations)

``mean(skills)`` averages the five staff skills (0-1 each).
"""

import logging
from typing import Dict, Iterable, List

from src.finance.config import (
    BASE_WEEKLY_WAGE,
    MAX_SPECIALIZATIONS,
    SKILL_WAGE_MULTIPLIER,
    SPECIALIZATION_WAGE_BONUS,
    STAFF_SKILLS,
    WAGE_NORMALIZATION_EXPONENT,
    WEEKS_PER_SEASON,
    WEEKS_PER_YEAR,
)
from src.finance.models import StaffMember, WageStatistics
from src.rating.rating import clamp01

logger = logging.getLogger(__name__)


def calculate_wage(skills: Dict[str, float], specializations: Iterable[str] = ()) -> int:
    """Weekly wage for a staff member.

    Raises:
        ValueError: If one of ``STAFF_SKILLS`` is missing from *skills*.
    """
    missing = [skill for skill in STAFF_SKILLS if skill not in skills]
    if missing:
        raise ValueError(f"Missing staff skills: {missing!r}")

    avg_skill = sum(skills[skill] for skill in STAFF_SKILLS) / len(STAFF_SKILLS)
    base = BASE_WEEKLY_WAGE + avg_skill * SKILL_WAGE_MULTIPLIER
    return round(base * SPECIALIZATION_WAGE_BONUS ** len(list(specializations)))


def max_wage() -> float:
    """Wage of a fully skilled staff member with every specialization."""
    return (BASE_WEEKLY_WAGE + SKILL_WAGE_MULTIPLIER) * SPECIALIZATION_WAGE_BONUS ** MAX_SPECIALIZATIONS


def normalize_wage(wage: float) -> float:
    """Map a wage onto 0-1, lifting the low end so small wages stay visible."""
    if wage <= 0:
        return 0.0
    return clamp01((wage / max_wage()) ** WAGE_NORMALIZATION_EXPONENT)


def _weekly_wage(member: StaffMember) -> int:
    if member.wage is not None:
        return member.wage
    return calculate_wage(member.skills, member.specializations)


def weekly_wage_total(staff: List[StaffMember]) -> int:
    return sum(_weekly_wage(member) for member in staff)


def seasonal_wage_total(staff: List[StaffMember]) -> int:
    return weekly_wage_total(staff) * WEEKS_PER_SEASON


def yearly_wage_total(staff: List[StaffMember]) -> int:
    return weekly_wage_total(staff) * WEEKS_PER_YEAR


def wage_statistics(staff: List[StaffMember]) -> WageStatistics:
    """Summary of the payroll; all zeros for an empty staff."""
    if not staff:
        return WageStatistics(0, 0, 0, 0, 0.0, 0, 0)

    wages = [_weekly_wage(member) for member in staff]
    weekly = sum(wages)
    stats = WageStatistics(
        staff_count=len(wages),
        weekly_total=weekly,
        seasonal_total=weekly * WEEKS_PER_SEASON,
        yearly_total=weekly * WEEKS_PER_YEAR,
        average_weekly=weekly / len(wages),
        min_weekly=min(wages),
        max_weekly=max(wages),
    )
    logger.debug("Payroll for %d staff: %d/week", stats.staff_count, weekly)
    return stats
