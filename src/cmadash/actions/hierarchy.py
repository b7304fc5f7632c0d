"""Organizational hierarchy import, seeding and lookup."""

from __future__ import annotations

import logging

from cmadash.actions.base import BaseActions, action
from cmadash.core.exceptions import CmaDashError
from cmadash.models.hierarchy import HierarchyEntry, HierarchyRow, Rank
from cmadash.models.hierarchy_seed import HARDCODED_HIERARCHY
from cmadash.models.results import ActionResult, BatchResult
from cmadash.services.hierarchy import parse_hierarchy_csv, resolve_hierarchy

logger = logging.getLogger(__name__)


class HierarchyActions(BaseActions):

    def _batch_save(self, entries: list[HierarchyEntry]) -> BatchResult:
        """Best effort: every entry is attempted, failures are collected."""
        result = BatchResult()
        for entry in entries:
            try:
                self._gateway.save_hierarchy_entry(entry)
                result.saved += 1
            except CmaDashError as exc:
                result.errors.append(f"Error processing {entry.name}: {exc}")
        logger.info("Saved %d/%d hierarchy entries", result.saved, len(entries))
        return result

    @action()
    def parse_import(self, text: str) -> ActionResult:
        if not text.strip():
            return ActionResult.fail("Please paste CSV data")
        return ActionResult.ok(parse_hierarchy_csv(text))

    @action(BatchResult)
    def import_hierarchy(self, agency_name: str, rows: list[HierarchyRow]) -> BatchResult:
        """Replace an agency's hierarchy with the one inferred from ``rows``."""
        if not agency_name:
            return BatchResult(success=False, error="Please select an agency")
        if not rows:
            return BatchResult(success=False, error="No data to import. Please parse the CSV first.")

        self._clear(agency_name)
        return self._batch_save(resolve_hierarchy(rows, agency_name))

    @action(BatchResult)
    def initialize_hardcoded_hierarchy(self) -> BatchResult:
        return self._batch_save([e.model_copy() for e in HARDCODED_HIERARCHY])

    @action()
    def get_hierarchy(self, agency_name: str) -> ActionResult:
        return ActionResult.ok(self._gateway.list_hierarchy(agency_name))

    @action()
    def get_units(self, agency_name: str) -> ActionResult:
        """Everyone with reports, plus ADDs and SUMs who head a unit themselves."""
        entries = self._gateway.list_hierarchy(agency_name)
        units = {e.unit_manager for e in entries if e.unit_manager}
        units.update(e.name for e in entries if e.rank in (Rank.ADD, Rank.SUM))
        return ActionResult.ok(sorted(units))

    @action()
    def get_people_in_unit(self, unit_manager: str, agency_name: str) -> ActionResult:
        entries = self._gateway.list_hierarchy(agency_name)
        return ActionResult.ok([e for e in entries if e.unit_manager == unit_manager])

    @action()
    def clear_hierarchy_for_agency(self, agency_name: str) -> ActionResult:
        return ActionResult.ok(self._clear(agency_name))

    def _clear(self, agency_name: str) -> int:
        entries = self._gateway.list_hierarchy(agency_name)
        for entry in entries:
            self._gateway.delete_hierarchy_entry(entry)
        logger.info("Cleared %d hierarchy entries for %s", len(entries), agency_name)
        return len(entries)
