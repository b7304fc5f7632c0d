"""Strategic planning goal endpoints."""

from __future__ import annotations

from typing import Annotated, Optional

from fastapi import APIRouter, Depends

from cmadash.actions.goals import GoalActions
from cmadash.api.deps import goal_actions
from cmadash.models.goals import StrategicPlanningGoal
from cmadash.models.results import ActionResult, BatchResult

router = APIRouter(tags=["goals"])

Goals = Annotated[GoalActions, Depends(goal_actions)]


@router.post("")
def save_goal(goal: StrategicPlanningGoal, actions: Goals) -> ActionResult:
    return actions.save_goal(goal)


@router.get("")
def get_all_goals(actions: Goals) -> ActionResult:
    return actions.get_all_goals()


@router.get("/agency/{agency_name}")
def get_agency_goals(agency_name: str, actions: Goals) -> ActionResult:
    return actions.get_agency_goals(agency_name)


@router.get("/agency/{agency_name}/user/{user_id}")
def get_user_goal(agency_name: str, user_id: str, actions: Goals) -> ActionResult:
    return actions.get_user_goal(user_id, agency_name)


@router.delete("")
def delete_all_goals(actions: Goals) -> BatchResult:
    return actions.delete_all_goals()


@router.delete("/user/{user_id}")
def delete_user_goals(user_id: str, actions: Goals, agency_name: Optional[str] = None) -> BatchResult:
    return actions.delete_user_goals(user_id, agency_name)
