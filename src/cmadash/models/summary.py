"""Agency summary model with per-field override tracking."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class OverrideState(StrEnum):
    COMPUTED = "computed"
    OVERRIDDEN = "overridden"
    STALE = "stale"  # overridden, and a later sync computed a different value


# Numeric fields an admin may override from the dashboard cards.
METRIC_FIELDS: tuple[str, ...] = (
    "total_anp_mtd",
    "total_fyp_mtd",
    "total_fyc_mtd",
    "total_cases_mtd",
    "producing_advisors_mtd",
    "total_manpower_mtd",
    "total_producing_advisors_mtd",
    "persistency_mtd",
    "total_anp_ytd",
    "total_fyp_ytd",
    "total_fyc_ytd",
    "total_cases_ytd",
    "producing_advisors_ytd",
    "total_manpower_ytd",
    "total_producing_advisors_ytd",
    "persistency_ytd",
)


class AgencySummary(BaseModel):
    """The ``agency-summary`` document: MTD/YTD agency totals."""

    agency_name: str = ""

    # --- MTD ---
    total_anp_mtd: Decimal = Decimal("0")
    total_fyp_mtd: Decimal = Decimal("0")
    total_fyc_mtd: Decimal = Decimal("0")
    total_cases_mtd: int = 0
    producing_advisors_mtd: int = 0
    total_manpower_mtd: int = 0
    total_producing_advisors_mtd: int = 0
    persistency_mtd: Decimal = Decimal("0")

    # --- YTD ---
    total_anp_ytd: Decimal = Decimal("0")
    total_fyp_ytd: Decimal = Decimal("0")
    total_fyc_ytd: Decimal = Decimal("0")
    total_cases_ytd: int = 0
    producing_advisors_ytd: int = 0
    total_manpower_ytd: int = 0
    total_producing_advisors_ytd: int = 0
    persistency_ytd: Decimal = Decimal("0")

    # Fields absent from ``overrides`` are COMPUTED.
    overrides: dict[str, OverrideState] = Field(default_factory=dict)
    # Computed values a sync produced but did not apply, keyed by field.
    shadowed_values: dict[str, Decimal] = Field(default_factory=dict)

    def override_state(self, metric: str) -> OverrideState:
        return self.overrides.get(metric, OverrideState.COMPUTED)

    def is_overridden(self, metric: str) -> bool:
        return self.override_state(metric) != OverrideState.COMPUTED

    def apply_override(self, metric: str, value: Any) -> None:
        """Admin edit: set the value and mark the field overridden."""
        if metric not in METRIC_FIELDS:
            raise ValueError(f"Unknown agency metric: {metric!r}")
        try:
            number = Decimal(str(value))
        except InvalidOperation as exc:
            raise ValueError(f"Not a number for {metric}: {value!r}") from exc
        if not number.is_finite():
            raise ValueError(f"Not a number for {metric}: {value!r}")
        if isinstance(getattr(self, metric), int):
            if number != number.to_integral_value():
                raise ValueError(f"{metric} must be a whole number, got {value!r}")
            number = int(number)
        setattr(self, metric, number)
        self.overrides[metric] = OverrideState.OVERRIDDEN
        self.shadowed_values.pop(metric, None)

    def merged_with(self, computed: AgencySummary) -> AgencySummary:
        """Merge freshly computed totals into this (persisted) summary.

        Computed fields take the new value. Overridden and stale fields keep
        their current value; when the computed value differs it is recorded
        in ``shadowed_values`` and the field becomes STALE.
        """
        merged = computed.model_copy(deep=True)
        merged.agency_name = computed.agency_name or self.agency_name
        merged.overrides = {}
        merged.shadowed_values = {}
        for metric, state in self.overrides.items():
            if state == OverrideState.COMPUTED:
                continue
            current = getattr(self, metric)
            fresh = getattr(computed, metric)
            setattr(merged, metric, current)
            if fresh != current:
                merged.overrides[metric] = OverrideState.STALE
                merged.shadowed_values[metric] = Decimal(fresh)
            else:
                merged.overrides[metric] = OverrideState.OVERRIDDEN
        return merged
