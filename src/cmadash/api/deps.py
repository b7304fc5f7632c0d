"""Request-scoped construction of action groups from app state."""

from __future__ import annotations

from typing import TypeVar

from fastapi import Request

from cmadash.actions.agencies import AgencyActions
from cmadash.actions.agents import AgentActions
from cmadash.actions.base import BaseActions
from cmadash.actions.comparison import ComparisonActions
from cmadash.actions.goals import GoalActions
from cmadash.actions.hierarchy import HierarchyActions
from cmadash.actions.leaders import LeaderActions
from cmadash.actions.sheets import SheetActions
from cmadash.actions.summary import SummaryActions
from cmadash.actions.users import UserActions

A = TypeVar("A", bound=BaseActions)


def _build(request: Request, cls: type[A]) -> A:
    state = request.app.state
    return cls(settings=state.settings, gateway=state.gateway, fetcher=state.fetcher)


def leader_actions(request: Request) -> LeaderActions:
    return _build(request, LeaderActions)


def agent_actions(request: Request) -> AgentActions:
    return _build(request, AgentActions)


def comparison_actions(request: Request) -> ComparisonActions:
    return _build(request, ComparisonActions)


def summary_actions(request: Request) -> SummaryActions:
    return _build(request, SummaryActions)


def sheet_actions(request: Request) -> SheetActions:
    return _build(request, SheetActions)


def hierarchy_actions(request: Request) -> HierarchyActions:
    return _build(request, HierarchyActions)


def goal_actions(request: Request) -> GoalActions:
    return _build(request, GoalActions)


def agency_actions(request: Request) -> AgencyActions:
    return _build(request, AgencyActions)


def user_actions(request: Request) -> UserActions:
    return _build(request, UserActions)
