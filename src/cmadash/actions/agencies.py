"""Admin-managed agency list."""

from __future__ import annotations

import logging

from cmadash.actions.base import BaseActions, action
from cmadash.models.results import ActionResult

logger = logging.getLogger(__name__)


class AgencyActions(BaseActions):

    def _current(self) -> list[str]:
        stored = self._gateway.load_agencies()
        return stored if stored else list(self._settings.default_agencies)

    @action()
    def get_agencies(self) -> ActionResult:
        """The stored agency list, falling back to the configured defaults."""
        return ActionResult.ok(self._current())

    @action()
    def add_agency(self, agency_name: str) -> ActionResult:
        name = (agency_name or "").strip()
        if not name:
            return ActionResult.fail("Agency name is required")
        agencies = self._current()
        if name in agencies:
            return ActionResult.fail("Agency already exists")
        agencies = sorted([*agencies, name])
        self._gateway.save_agencies(agencies)
        logger.info("Added agency %r", name)
        return ActionResult.ok(agencies)

    @action()
    def remove_agency(self, agency_name: str) -> ActionResult:
        agencies = self._current()
        if agency_name not in agencies:
            return ActionResult.fail("Agency not found")
        agencies = [a for a in agencies if a != agency_name]
        self._gateway.save_agencies(agencies)
        logger.info("Removed agency %r", agency_name)
        return ActionResult.ok(agencies)

    @action()
    def rename_agency(self, old_name: str, new_name: str) -> ActionResult:
        """Rename in the list only; hierarchy and goals keep the old name."""
        name = (new_name or "").strip()
        if not name:
            return ActionResult.fail("New agency name is required")
        agencies = self._current()
        if old_name not in agencies:
            return ActionResult.fail("Agency not found")
        if name in agencies and name != old_name:
            return ActionResult.fail("New agency name already exists")
        agencies = sorted(name if a == old_name else a for a in agencies)
        self._gateway.save_agencies(agencies)
        return ActionResult.ok(agencies)
