"""Unit comparison: agent target totals vs. leader forecasts."""

from __future__ import annotations

from decimal import Decimal

from cmadash.models.comparison import ComparisonData, ComparisonStatus, ComparisonSummary
from cmadash.models.dashboard import Agent, DashboardDocument, Leader

TOLERANCE = Decimal("0.05")
ALIGNMENT_CAP = Decimal("200")
_ZERO = Decimal("0")


def classify_status(variance: Decimal, leader_forecast: Decimal) -> ComparisonStatus:
    """Under/over when the variance leaves the +/-5% band around the forecast.

    With a zero forecast both thresholds are zero, so any non-zero variance
    is classified by its sign.
    """
    if variance < -TOLERANCE * leader_forecast:
        return ComparisonStatus.UNDER
    if variance > TOLERANCE * leader_forecast:
        return ComparisonStatus.OVER
    return ComparisonStatus.ALIGNED


def alignment_percentage(agents_total: Decimal, leader_forecast: Decimal) -> Decimal:
    if leader_forecast <= 0:
        return _ZERO
    return min(agents_total / leader_forecast * 100, ALIGNMENT_CAP)


def compute_unit_comparisons(leaders: list[Leader], agents: list[Agent]) -> list[ComparisonData]:
    """One row per distinct leader name seen among leaders or agents' ``um_name``.

    Agents join their unit by exact ``um_name`` string. Units without a
    leader record compare against a zero forecast.
    """
    groups: dict[str, tuple[Leader | None, list[Agent]]] = {}
    for leader in leaders:
        members = groups.get(leader.name, (None, []))[1]
        groups[leader.name] = (leader, members)
    for agent in agents:
        groups.setdefault(agent.um_name, (None, []))[1].append(agent)

    rows: list[ComparisonData] = []
    for unit, (leader, members) in groups.items():
        agents_total = sum((a.anp_target for a in members), _ZERO)
        forecast = leader.anp_forecast_total if leader is not None else _ZERO
        variance = agents_total - forecast
        rows.append(ComparisonData(
            unit=unit,
            agents_anp_total=agents_total,
            um_anp_forecast=forecast,
            variance=variance,
            adjusted_anp_target=leader.anp_target if leader is not None else _ZERO,
            adjusted_recruits_target=leader.recruits_target if leader is not None else 0,
            agent_count=len(members),
            alignment_percentage=alignment_percentage(agents_total, forecast),
            status=classify_status(variance, forecast),
        ))
    return sorted(rows, key=lambda r: r.unit)


def compute_comparison_summary(document: DashboardDocument) -> ComparisonSummary:
    """Agency totals, summed over leaders and agents directly.

    An admin-set agency target wins over the sum of leader targets when it
    is non-zero.
    """
    total_agents = sum((a.anp_target for a in document.agents), _ZERO)
    total_um = sum((l.anp_forecast_total for l in document.leaders), _ZERO)
    adjusted_anp = document.agency_anp_target or sum(
        (l.anp_target for l in document.leaders), _ZERO
    )
    adjusted_recruits = document.agency_recruits_target or sum(
        l.recruits_target for l in document.leaders
    )
    return ComparisonSummary(
        total_agents_anp=total_agents,
        total_um_anp=total_um,
        total_variance=total_agents - total_um,
        total_adjusted_anp=adjusted_anp,
        total_adjusted_recruits=adjusted_recruits,
    )


def find_orphan_units(leaders: list[Leader], agents: list[Agent]) -> list[str]:
    """Agent ``um_name`` values that match no leader record, sorted."""
    leader_names = {l.name for l in leaders}
    return sorted({a.um_name for a in agents if a.um_name not in leader_names})
