"""Tests for the quarterly bonus schedule and goal rollups."""

from __future__ import annotations

from decimal import Decimal

import pytest

from cmadash.models.goals import QuarterGoal, StrategicPlanningGoal
from cmadash.services.bonus import (
    apply_rollups,
    case_count_bonus_rate,
    dpi_rate,
    fyc_bonus_rate,
    persistency_multiplier,
    project_income,
    qpb_rate,
    quarter_income,
    self_override_rate,
)

D = Decimal


def _goal(rank: str = "ADV", **kw) -> StrategicPlanningGoal:
    return StrategicPlanningGoal(
        user_id="u1", user_name="Jaycel Alcantara", user_rank=rank,
        agency_name="CEBU-MATUNOG AGENCY", persistency=D(85), **kw,
    )


# ---------- rate tables ----------

class TestRates:
    @pytest.mark.parametrize("fyc,rate", [
        (D(29999), D(0)),
        (D(30000), D("0.10")),
        (D(50000), D("0.15")),
        (D(120000), D("0.30")),
        (D(400000), D("0.40")),
    ])
    def test_fyc_bonus_tiers(self, fyc, rate):
        assert fyc_bonus_rate(fyc) == rate

    def test_new_advisor_floor(self):
        assert fyc_bonus_rate(D(20000), new_advisor=True) == D("0.10")
        assert fyc_bonus_rate(D(20000)) == 0

    @pytest.mark.parametrize("cases,rate", [(2, D(0)), (3, D("0.05")), (8, D("0.15")), (12, D("0.20"))])
    def test_case_count_tiers(self, cases, rate):
        assert case_count_bonus_rate(cases) == rate

    @pytest.mark.parametrize("persistency,mult", [
        (D(74), D(0)), (D(75), D("0.8")), (D("82.5"), D("1.0")), (D(95), D("1.1")),
    ])
    def test_persistency_multiplier(self, persistency, mult):
        assert persistency_multiplier(persistency) == mult

    def test_self_override(self):
        assert [self_override_rate(n) for n in range(4)] == [D(0), D("0.05"), D("0.075"), D("0.10")]

    def test_dpi_by_rank(self):
        assert dpi_rate("UM") == D("0.20")
        assert dpi_rate("ADD", new_recruit=True) == D("0.35")
        assert dpi_rate("ADV") == D("0.20")

    def test_qpb(self):
        assert qpb_rate(D(100000)) == D("0.15")
        assert qpb_rate(D(10000)) == 0


# ---------- income ----------

class TestQuarterIncome:
    def test_advisor(self):
        q = QuarterGoal(fyc=D(50000), cases=5)
        assert quarter_income(q, "ADV", D(85)) == D(62500)

    def test_low_persistency_pays_no_bonus(self):
        q = QuarterGoal(fyc=D(50000), cases=5)
        assert quarter_income(q, "ADV", D(70)) == D(50000)

    def test_case_bonus_needs_fyc_bonus(self):
        q = QuarterGoal(fyc=D(10000), cases=9)
        assert quarter_income(q, "ADV", D(85)) == D(10000)

    def test_new_advisor(self):
        q = QuarterGoal(fyc=D(25000), cases=3)
        assert quarter_income(q, "ADV", D(90), new_advisor=True) == D(29125)

    def test_leader_adds_overrides(self):
        q = QuarterGoal(fyc=D(30000), new_recruits=2, team_fyc=D(100000))
        assert quarter_income(q, "UM", D(85)) == D(70250)


class TestRollups:
    def test_advisor_rollups(self):
        goal = _goal(q1=QuarterGoal(base_manpower=1, fyc=D(50000), cases=5))
        apply_rollups(goal)
        assert goal.q1.fyp == D(200000)
        assert goal.annual_fyp == D(200000)
        assert goal.annual_fyc == D(50000)
        assert goal.annual_manpower == 1
        assert goal.annual_income == D(62500)
        assert goal.avg_monthly_income == D(62500) / 12

    def test_december_fyc_is_not_income(self):
        goal = _goal(rank="UM", dec_fyc=D(50000))
        apply_rollups(goal)
        assert project_income(goal) == D(0)
        assert goal.annual_income == D(0)
        assert goal.avg_monthly_income == D(0)

    def test_team_fyc_counts_toward_fyp(self):
        goal = _goal(rank="SUM", q2=QuarterGoal(fyc=D(1000), team_fyc=D(3000)))
        apply_rollups(goal)
        assert goal.q2.fyp == D(16000)
        assert goal.annual_fyc == D(4000)
