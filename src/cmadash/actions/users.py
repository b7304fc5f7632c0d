"""User profile lookup and upsert."""

from __future__ import annotations

from datetime import datetime, timezone

from cmadash.actions.base import BaseActions, action
from cmadash.core.exceptions import NotFoundError
from cmadash.models.results import ActionResult
from cmadash.models.users import UserProfile


class UserActions(BaseActions):

    @action()
    def get_user(self, uid: str) -> ActionResult:
        user = self._gateway.get_user(uid)
        if user is None:
            raise NotFoundError("User", uid)
        return ActionResult.ok(user)

    @action()
    def save_user(self, user: UserProfile) -> ActionResult:
        user.updated_at = datetime.now(timezone.utc)
        self._gateway.save_user(user)
        return ActionResult.ok(user)
