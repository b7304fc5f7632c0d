"""Unit comparison endpoints."""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from cmadash.actions.comparison import ComparisonActions
from cmadash.api.deps import comparison_actions
from cmadash.models.results import ActionResult

router = APIRouter(tags=["comparison"])

Comparison = Annotated[ComparisonActions, Depends(comparison_actions)]


class AdjustedTargets(BaseModel):
    adjusted_anp: Decimal
    adjusted_recruits: int


@router.get("/units")
def get_comparison_data(actions: Comparison) -> ActionResult:
    return actions.get_comparison_data()


@router.get("/summary")
def get_comparison_summary(actions: Comparison) -> ActionResult:
    return actions.get_comparison_summary()


@router.put("/units/{unit_name}")
def update_unit_adjusted_target(unit_name: str, body: AdjustedTargets, actions: Comparison) -> ActionResult:
    return actions.update_unit_adjusted_target(unit_name, body.adjusted_anp, body.adjusted_recruits)


@router.put("/agency")
def update_agency_adjusted_targets(body: AdjustedTargets, actions: Comparison) -> ActionResult:
    return actions.update_agency_adjusted_targets(body.adjusted_anp, body.adjusted_recruits)
