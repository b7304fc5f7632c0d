"""Strategic planning goal models."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class QuarterGoal(BaseModel):
    """Targets for one quarter of the planning year."""

    base_manpower: int = 0
    new_recruits: int = 0
    fyp: Decimal = Decimal("0")
    fyc: Decimal = Decimal("0")
    cases: int = 0
    team_fyc: Decimal = Decimal("0")  # leader ranks only


class StrategicPlanningGoal(BaseModel):
    """One submission of a user's planning goals.

    Submissions accumulate; the user's current goal is the latest one.
    """

    goal_id: Optional[str] = None
    user_id: str
    user_name: str
    user_rank: str
    unit_manager: str = ""
    agency_name: str
    submitted_at: datetime = Field(default_factory=_utcnow)

    # December sprint targets
    dec_fyp: Decimal = Decimal("0")
    dec_fyc: Decimal = Decimal("0")
    dec_cases: int = 0

    q1: QuarterGoal = Field(default_factory=QuarterGoal)
    q2: QuarterGoal = Field(default_factory=QuarterGoal)
    q3: QuarterGoal = Field(default_factory=QuarterGoal)
    q4: QuarterGoal = Field(default_factory=QuarterGoal)

    persistency: Decimal = Decimal("0")  # percent, e.g. 82.5
    commission_rate: Decimal = Decimal("0.25")
    new_advisor: bool = False  # 1st or 2nd year advisor

    # Rollups, filled in by the bonus calculator on save
    annual_manpower: int = 0
    annual_fyp: Decimal = Decimal("0")
    annual_fyc: Decimal = Decimal("0")
    annual_income: Decimal = Decimal("0")
    avg_monthly_income: Decimal = Decimal("0")

    @property
    def quarters(self) -> list[QuarterGoal]:
        return [self.q1, self.q2, self.q3, self.q4]

    @property
    def unit_name(self) -> str:
        return f"{self.unit_manager} - {self.agency_name}"

    def make_goal_id(self) -> str:
        millis = int(self.submitted_at.timestamp() * 1000)
        return f"{self.user_id}_{self.agency_name}_{millis}"
