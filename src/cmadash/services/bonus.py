"""Quarterly bonus schedule and annual income projection for planning goals."""

from __future__ import annotations

from decimal import Decimal

from cmadash.models.goals import QuarterGoal, StrategicPlanningGoal

LEADER_RANKS = frozenset({"ADD", "SUM", "UM", "AUM"})
MONTHS_PER_YEAR = 12

_ZERO = Decimal("0")

# (threshold, rate) pairs, highest threshold first.
FYC_BONUS_TIERS: list[tuple[Decimal, Decimal]] = [
    (Decimal("350000"), Decimal("0.40")),
    (Decimal("200000"), Decimal("0.35")),
    (Decimal("120000"), Decimal("0.30")),
    (Decimal("80000"), Decimal("0.20")),
    (Decimal("50000"), Decimal("0.15")),
    (Decimal("30000"), Decimal("0.10")),
]
NEW_ADVISOR_FYC_FLOOR = (Decimal("20000"), Decimal("0.10"))

CASE_COUNT_TIERS: list[tuple[int, Decimal]] = [
    (9, Decimal("0.20")),
    (7, Decimal("0.15")),
    (5, Decimal("0.10")),
    (3, Decimal("0.05")),
]

PERSISTENCY_TIERS: list[tuple[Decimal, Decimal]] = [
    (Decimal("90"), Decimal("1.1")),
    (Decimal("82.5"), Decimal("1.0")),
    (Decimal("75"), Decimal("0.8")),
]

QPB_TIERS: list[tuple[Decimal, Decimal]] = [
    (Decimal("350000"), Decimal("0.30")),
    (Decimal("200000"), Decimal("0.25")),
    (Decimal("150000"), Decimal("0.20")),
    (Decimal("80000"), Decimal("0.15")),
    (Decimal("50000"), Decimal("0.125")),
    (Decimal("30000"), Decimal("0.10")),
]

# rank -> (tenured, new recruit)
DPI_RATES: dict[str, tuple[Decimal, Decimal]] = {
    "ADD": (Decimal("0.25"), Decimal("0.35")),
    "SUM": (Decimal("0.225"), Decimal("0.325")),
    "UM": (Decimal("0.20"), Decimal("0.30")),
    "AUM": (Decimal("0.18"), Decimal("0.28")),
}
DEFAULT_DPI_RATE = Decimal("0.20")


def _tier(value, tiers) -> Decimal:
    for threshold, rate in tiers:
        if value >= threshold:
            return rate
    return _ZERO


def fyc_bonus_rate(quarter_fyc: Decimal, new_advisor: bool = False) -> Decimal:
    rate = _tier(quarter_fyc, FYC_BONUS_TIERS)
    if rate == 0 and new_advisor and quarter_fyc >= NEW_ADVISOR_FYC_FLOOR[0]:
        return NEW_ADVISOR_FYC_FLOOR[1]
    return rate


def case_count_bonus_rate(cases: int) -> Decimal:
    return _tier(cases, CASE_COUNT_TIERS)


def persistency_multiplier(persistency: Decimal) -> Decimal:
    """Below 75% persistency no bonus is paid."""
    return _tier(persistency, PERSISTENCY_TIERS)


def self_override_rate(active_recruits: int) -> Decimal:
    if active_recruits >= 3:
        return Decimal("0.10")
    if active_recruits == 2:
        return Decimal("0.075")
    if active_recruits == 1:
        return Decimal("0.05")
    return _ZERO


def dpi_rate(rank: str, new_recruit: bool = False) -> Decimal:
    rates = DPI_RATES.get(rank)
    if rates is None:
        return DEFAULT_DPI_RATE
    return rates[1] if new_recruit else rates[0]


def qpb_rate(team_quarter_fyc: Decimal) -> Decimal:
    return _tier(team_quarter_fyc, QPB_TIERS)


def quarter_income(quarter: QuarterGoal, rank: str, persistency: Decimal,
                   new_advisor: bool = False) -> Decimal:
    """Personal FYC plus bonuses for one quarter.

    The case bonus only applies once the FYC bonus qualifies. Leader ranks
    add a self-override on personal FYC and the direct override
    ``(DPI + QPB) x multiplier`` on team FYC; team FYC is assumed tenured.
    """
    mult = persistency_multiplier(persistency)
    fyc = quarter.fyc
    fyc_rate = fyc_bonus_rate(fyc, new_advisor)
    case_rate = case_count_bonus_rate(quarter.cases) if fyc_rate > 0 else _ZERO
    income = fyc + fyc * fyc_rate * mult + fyc * case_rate * mult

    if rank in LEADER_RANKS:
        income += fyc * self_override_rate(quarter.new_recruits) * mult
        team = quarter.team_fyc
        income += (team * dpi_rate(rank) + team * qpb_rate(team)) * mult
    return income


def project_income(goal: StrategicPlanningGoal) -> Decimal:
    """Annual income: the sum of the four quarterly incomes. December FYC is not income."""
    return sum(
        (quarter_income(q, goal.user_rank, goal.persistency, goal.new_advisor) for q in goal.quarters),
        _ZERO,
    )


def apply_rollups(goal: StrategicPlanningGoal) -> StrategicPlanningGoal:
    """Fill quarter FYP and the annual rollup fields in place."""
    rate = goal.commission_rate
    for q in goal.quarters:
        q.fyp = (q.fyc + q.team_fyc) / rate if rate > 0 else _ZERO
    goal.annual_manpower = sum(q.base_manpower + q.new_recruits for q in goal.quarters)
    goal.annual_fyp = sum((q.fyp for q in goal.quarters), _ZERO)
    goal.annual_fyc = sum((q.fyc + q.team_fyc for q in goal.quarters), _ZERO)
    goal.annual_income = project_income(goal)
    goal.avg_monthly_income = goal.annual_income / MONTHS_PER_YEAR
    return goal
