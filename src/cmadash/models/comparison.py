"""Derived unit comparison records (never persisted)."""

from __future__ import annotations

from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel


class ComparisonStatus(StrEnum):
    ALIGNED = "aligned"
    UNDER = "under"
    OVER = "over"


class ComparisonData(BaseModel):
    """Agent-target total vs. leader forecast for one unit."""

    unit: str
    agents_anp_total: Decimal = Decimal("0")
    um_anp_forecast: Decimal = Decimal("0")
    variance: Decimal = Decimal("0")
    adjusted_anp_target: Decimal = Decimal("0")
    adjusted_recruits_target: int = 0
    agent_count: int = 0
    alignment_percentage: Decimal = Decimal("0")
    status: ComparisonStatus = ComparisonStatus.ALIGNED


class ComparisonSummary(BaseModel):
    """Agency-wide totals, summed independently of the per-unit rows."""

    total_agents_anp: Decimal = Decimal("0")
    total_um_anp: Decimal = Decimal("0")
    total_variance: Decimal = Decimal("0")
    total_adjusted_anp: Decimal = Decimal("0")
    total_adjusted_recruits: int = 0
