"""Strategic planning goal submission and reporting."""

from __future__ import annotations

import logging
from typing import Optional

from cmadash.actions.base import BaseActions, action
from cmadash.core.exceptions import CmaDashError
from cmadash.models.goals import StrategicPlanningGoal
from cmadash.models.results import ActionResult, BatchResult
from cmadash.services.bonus import apply_rollups

logger = logging.getLogger(__name__)


class GoalActions(BaseActions):

    @action()
    def save_goal(self, goal: StrategicPlanningGoal) -> ActionResult:
        """Store a new submission with its rollups; earlier submissions are kept."""
        apply_rollups(goal)
        goal_id = self._gateway.save_goal(goal)
        return ActionResult.ok(goal_id)

    @action()
    def get_user_goal(self, user_id: str, agency_name: str) -> ActionResult:
        """The user's most recent submission for the agency, or None."""
        goals = self._gateway.list_agency_goals(agency_name)
        return ActionResult.ok(next((g for g in goals if g.user_id == user_id), None))

    @action()
    def get_agency_goals(self, agency_name: str) -> ActionResult:
        return ActionResult.ok(self._gateway.list_agency_goals(agency_name))

    @action()
    def get_all_goals(self) -> ActionResult:
        return ActionResult.ok(self._gateway.list_all_goals())

    def _delete(self, goals: list[StrategicPlanningGoal]) -> BatchResult:
        result = BatchResult()
        for goal in goals:
            try:
                self._gateway.delete_goal(goal)
                result.saved += 1
            except CmaDashError as exc:
                result.errors.append(f"Failed to delete goal {goal.goal_id}: {exc}")
        logger.info("Deleted %d/%d goals", result.saved, len(goals))
        return result

    @action(BatchResult)
    def delete_all_goals(self) -> BatchResult:
        return self._delete(self._gateway.list_all_goals())

    @action(BatchResult)
    def delete_user_goals(self, user_id: str, agency_name: Optional[str] = None) -> BatchResult:
        """Delete every submission by ``user_id``, optionally within one agency."""
        goals = (self._gateway.list_agency_goals(agency_name) if agency_name
                 else self._gateway.list_all_goals())
        return self._delete([g for g in goals if g.user_id == user_id])
