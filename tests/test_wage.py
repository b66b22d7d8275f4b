"""Tests for src.finance.wage."""

import pytest

from src.finance.models import StaffMember
from src.finance.wage import (
    calculate_wage,
    max_wage,
    normalize_wage,
    seasonal_wage_total,
    wage_statistics,
    weekly_wage_total,
    yearly_wage_total,
)


class TestCalculateWage:
    def test_average_staff_member(self, average_skills):
        assert calculate_wage(average_skills) == 1000

    def test_one_specialization(self, average_skills):
        assert calculate_wage(average_skills, ["field"]) == 1300

    def test_specializations_compound(self, average_skills):
        assert calculate_wage(average_skills, ["field", "winery"]) == 1690

    def test_skill_range(self):
        assert calculate_wage(dict.fromkeys(["field", "winery", "administration", "sales", "maintenance"], 0.0)) == 500
        assert calculate_wage(dict.fromkeys(["field", "winery", "administration", "sales", "maintenance"], 1.0)) == 1500

    def test_missing_skill(self, average_skills):
        skills = dict(average_skills)
        del skills["sales"]
        with pytest.raises(ValueError, match="Missing staff skills"):
            calculate_wage(skills)


class TestNormalizeWage:
    def test_max_wage(self):
        assert max_wage() == pytest.approx(1500 * 1.3 ** 5)

    def test_bounds(self):
        assert normalize_wage(0) == 0.0
        assert normalize_wage(max_wage()) == pytest.approx(1.0)
        assert normalize_wage(max_wage() * 2) == 1.0

    def test_lifts_low_wages(self):
        ratio = 1000 / max_wage()
        assert normalize_wage(1000) == pytest.approx(ratio ** 0.7)
        assert normalize_wage(1000) > ratio


class TestWageTotals:
    def test_totals(self, staff):
        assert weekly_wage_total(staff) == 2300
        assert seasonal_wage_total(staff) == 2300 * 12
        assert yearly_wage_total(staff) == 2300 * 48

    def test_fixed_wage_is_respected(self, average_skills):
        member = StaffMember(name="Cy", skills=average_skills, wage=2000)
        assert weekly_wage_total([member]) == 2000

    def test_statistics(self, staff):
        stats = wage_statistics(staff)
        assert stats.staff_count == 2
        assert stats.weekly_total == 2300
        assert stats.seasonal_total == 27600
        assert stats.yearly_total == 110400
        assert stats.average_weekly == pytest.approx(1150)
        assert stats.min_weekly == 1000
        assert stats.max_weekly == 1300

    def test_empty_staff(self):
        stats = wage_statistics([])
        assert stats.staff_count == 0
        assert stats.weekly_total == 0
        assert stats.average_weekly == 0.0
