"""Unit comparison views and adjusted-target editing."""

from __future__ import annotations

from decimal import Decimal

from cmadash.actions.base import BaseActions, action
from cmadash.core.exceptions import NotFoundError
from cmadash.models.comparison import ComparisonSummary
from cmadash.models.results import ActionResult
from cmadash.services.comparison import compute_comparison_summary, compute_unit_comparisons


class ComparisonActions(BaseActions):

    @action()
    def get_comparison_data(self) -> ActionResult:
        doc = self._gateway.load_dashboard()
        if doc is None:
            return ActionResult.ok([])
        return ActionResult.ok(compute_unit_comparisons(doc.leaders, doc.agents))

    @action()
    def get_comparison_summary(self) -> ActionResult:
        doc = self._gateway.load_dashboard()
        if doc is None:
            return ActionResult.ok(ComparisonSummary())
        return ActionResult.ok(compute_comparison_summary(doc))

    @action()
    def update_unit_adjusted_target(self, unit_name: str, adjusted_anp: Decimal | int | str,
                                    adjusted_recruits: int) -> ActionResult:
        """Adjusted unit targets live on the leader record named ``unit_name``."""
        doc = self._require_dashboard()
        leader = doc.find_leader_by_name(unit_name)
        if leader is None:
            raise NotFoundError("Unit Manager")
        leader.anp_target = Decimal(str(adjusted_anp))
        leader.recruits_target = int(adjusted_recruits)
        self._gateway.save_dashboard(doc)
        return ActionResult.ok()

    @action()
    def update_agency_adjusted_targets(self, adjusted_anp: Decimal | int | str,
                                       adjusted_recruits: int) -> ActionResult:
        doc = self._require_dashboard()
        doc.agency_anp_target = Decimal(str(adjusted_anp))
        doc.agency_recruits_target = int(adjusted_recruits)
        self._gateway.save_dashboard(doc)
        return ActionResult.ok()
