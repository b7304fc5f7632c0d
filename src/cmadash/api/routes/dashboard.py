"""Leader, agent and agency-summary endpoints."""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from cmadash.actions.agents import AgentActions
from cmadash.actions.leaders import LeaderActions
from cmadash.actions.summary import SummaryActions
from cmadash.api.deps import agent_actions, leader_actions, summary_actions
from cmadash.models.results import ActionResult

router = APIRouter(tags=["dashboard"])

Leaders = Annotated[LeaderActions, Depends(leader_actions)]
Agents = Annotated[AgentActions, Depends(agent_actions)]
Summary = Annotated[SummaryActions, Depends(summary_actions)]


class LeaderTargets(BaseModel):
    anp_target: Decimal
    recruits_target: int


class LeaderForecasts(BaseModel):
    anp_nov_forecast: Decimal = Decimal("0")
    anp_dec_forecast: Decimal = Decimal("0")
    rec_nov_forecast: int = 0
    rec_dec_forecast: int = 0


class AgentFycTarget(BaseModel):
    fyc_target: Decimal


class AgentRecruitsTarget(BaseModel):
    recruits_target: int


class AgentForecasts(BaseModel):
    fyc_nov_forecast: Decimal = Decimal("0")
    fyc_dec_forecast: Decimal = Decimal("0")
    rec_nov_forecast: int = 0
    rec_dec_forecast: int = 0


class MetricValue(BaseModel):
    value: Decimal


@router.get("/leaders")
def get_leaders(actions: Leaders) -> ActionResult:
    return actions.get_leaders()


@router.put("/leaders/{leader_id}/targets")
def update_leader_targets(leader_id: str, body: LeaderTargets, actions: Leaders) -> ActionResult:
    return actions.update_leader_targets(leader_id, body.anp_target, body.recruits_target)


@router.put("/leaders/{leader_id}/forecasts")
def update_leader_forecasts(leader_id: str, body: LeaderForecasts, actions: Leaders) -> ActionResult:
    return actions.update_leader_forecasts(leader_id, **body.model_dump())


@router.get("/agents")
def get_agents(actions: Agents) -> ActionResult:
    return actions.get_agents()


@router.put("/agents/{agent_id}/fyc-target")
def update_agent_fyc_target(agent_id: str, body: AgentFycTarget, actions: Agents) -> ActionResult:
    return actions.update_agent_fyc_target(agent_id, body.fyc_target)


@router.put("/agents/{agent_id}/recruits-target")
def update_agent_recruits_target(agent_id: str, body: AgentRecruitsTarget, actions: Agents) -> ActionResult:
    return actions.update_agent_recruits_target(agent_id, body.recruits_target)


@router.put("/agents/{agent_id}/forecasts")
def update_agent_forecasts(agent_id: str, body: AgentForecasts, actions: Agents) -> ActionResult:
    return actions.update_agent_forecasts(agent_id, **body.model_dump())


@router.get("/summary")
def get_agency_summary(actions: Summary, use_cache: bool = True) -> ActionResult:
    return actions.load_agency_summary(use_cache=use_cache)


@router.put("/summary/{metric}")
def update_agency_metric(metric: str, body: MetricValue, actions: Summary) -> ActionResult:
    return actions.update_agency_metric(metric, body.value)
