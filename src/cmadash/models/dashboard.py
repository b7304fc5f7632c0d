"""Leader, agent and dashboard document models.

The dashboard document is persisted whole: every edit loads it, mutates one
record, and saves it back.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

# Agent targets derive from the commission target with fixed multipliers.
FYC_RATE = Decimal("0.25")  # FYP target = FYC target / 25%
ANP_MULTIPLIER = Decimal("1.10")  # ANP target = FYP target * 110%


class Leader(BaseModel):
    """Unit leader row from the Leaders sheet plus admin-entered targets."""

    id: str
    name: str
    unit: str = ""

    # --- Actuals (current period) ---
    anp_actual: Decimal = Decimal("0")
    recruits_actual: int = 0
    cases_actual: int = 0
    fyp_actual: Decimal = Decimal("0")
    fyc_actual: Decimal = Decimal("0")
    anp_ytd_actual: Decimal = Decimal("0")
    fyp_ytd_actual: Decimal = Decimal("0")
    fyc_ytd_actual: Decimal = Decimal("0")

    # --- Targets (admin) ---
    anp_target: Decimal = Decimal("0")
    recruits_target: int = 0

    # --- Forecasts (leader) ---
    anp_nov_forecast: Decimal = Decimal("0")
    anp_dec_forecast: Decimal = Decimal("0")
    rec_nov_forecast: int = 0
    rec_dec_forecast: int = 0

    @property
    def anp_forecast_total(self) -> Decimal:
        """Nov + Dec ANP forecast."""
        return self.anp_nov_forecast + self.anp_dec_forecast


class Agent(BaseModel):
    """Agent row from the Agents sheet plus targets and forecasts.

    ``um_name`` is the owning leader's name as free text; it is not validated
    against the leaders collection.
    """

    id: str
    name: str
    um_name: str = "Unknown"
    unit: str = ""

    anp_actual: Decimal = Decimal("0")
    fyp_actual: Decimal = Decimal("0")
    cases_actual: int = 0

    fyc_target: Decimal = Decimal("0")
    fyp_target: Decimal = Decimal("0")  # derived from fyc_target
    anp_target: Decimal = Decimal("0")  # derived from fyc_target
    recruits_target: int = 0

    fyc_nov_forecast: Decimal = Decimal("0")
    fyc_dec_forecast: Decimal = Decimal("0")
    rec_nov_forecast: int = 0
    rec_dec_forecast: int = 0

    def set_fyc_target(self, fyc_target: Decimal | int | str) -> None:
        """Set the commission target and recompute FYP and ANP targets together."""
        fyc = Decimal(str(fyc_target))
        fyp = fyc / FYC_RATE
        self.fyc_target = fyc
        self.fyp_target = fyp
        self.anp_target = fyp * ANP_MULTIPLIER


class DashboardDocument(BaseModel):
    """The single ``dashboard`` document: all leaders, all agents, agency targets."""

    leaders: list[Leader] = Field(default_factory=list)
    agents: list[Agent] = Field(default_factory=list)
    agency_anp_target: Decimal = Decimal("0")
    agency_recruits_target: int = 0

    def find_leader(self, leader_id: str) -> Leader | None:
        return next((l for l in self.leaders if l.id == leader_id), None)

    def find_leader_by_name(self, name: str) -> Leader | None:
        return next((l for l in self.leaders if l.name == name), None)

    def find_agent(self, agent_id: str) -> Agent | None:
        return next((a for a in self.agents if a.id == agent_id), None)
