"""Agency summary totals computed from synced leader and agent rows."""

from __future__ import annotations

import logging
from decimal import Decimal

from cmadash.models.dashboard import FYC_RATE, Agent, Leader
from cmadash.models.summary import AgencySummary

logger = logging.getLogger(__name__)

_ZERO = Decimal("0")


def calculate_agency_summary(
    leaders: list[Leader], agents: list[Agent], agency_name: str = "",
) -> AgencySummary:
    """Sum the Leaders sheet into MTD/YTD agency totals.

    Cases fall back to recruits for a leader reporting no cases. When the
    Leaders sheet carries no FYP at all, FYP comes from the agents and FYC
    is derived at the standard commission rate. Persistency is not in the
    sheets and stays zero.
    """
    anp_mtd = sum((l.anp_actual for l in leaders), _ZERO)
    cases_mtd = sum(l.cases_actual or l.recruits_actual for l in leaders)
    fyp_mtd = sum((l.fyp_actual for l in leaders), _ZERO)
    fyc_mtd = sum((l.fyc_actual for l in leaders), _ZERO)

    if fyp_mtd == 0 and agents:
        agents_fyp = sum((a.fyp_actual for a in agents), _ZERO)
        if agents_fyp > 0:
            fyp_mtd = agents_fyp
            fyc_mtd = agents_fyp * FYC_RATE
            logger.info("FYP/FYC taken from %d agents: FYP=%s FYC=%s", len(agents), fyp_mtd, fyc_mtd)

    if fyp_mtd == 0:
        logger.warning("Agency FYP is 0; check the FYP column of the Leaders sheet")
    if cases_mtd == 0:
        logger.warning("Agency cases is 0; check the case count column of the Leaders sheet")

    producing = sum(1 for l in leaders if l.anp_actual > 0)
    manpower = len(leaders)

    return AgencySummary(
        agency_name=agency_name,
        total_anp_mtd=anp_mtd,
        total_fyp_mtd=fyp_mtd,
        total_fyc_mtd=fyc_mtd,
        total_cases_mtd=cases_mtd,
        producing_advisors_mtd=producing,
        total_manpower_mtd=manpower,
        total_producing_advisors_mtd=producing,
        total_anp_ytd=sum((l.anp_ytd_actual for l in leaders), _ZERO),
        total_fyp_ytd=sum((l.fyp_ytd_actual for l in leaders), _ZERO),
        total_fyc_ytd=sum((l.fyc_ytd_actual for l in leaders), _ZERO),
        # No YTD columns for these; mirror MTD.
        total_cases_ytd=cases_mtd,
        producing_advisors_ytd=producing,
        total_manpower_ytd=manpower,
        total_producing_advisors_ytd=producing,
    )
