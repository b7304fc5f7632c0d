"""Agency summary reads, admin overrides and override-preserving saves."""

from __future__ import annotations

import logging
from decimal import Decimal

from cmadash.actions.base import BaseActions, action
from cmadash.models.results import ActionResult
from cmadash.models.summary import AgencySummary

logger = logging.getLogger(__name__)


class SummaryActions(BaseActions):

    @action()
    def load_agency_summary(self, use_cache: bool = True) -> ActionResult:
        summary = self._gateway.load_agency_summary(use_cache=use_cache)
        if summary is None:
            logger.warning("Agency summary document does not exist")
        elif summary.total_anp_mtd == 0 and summary.total_fyp_mtd == 0 and summary.total_cases_mtd == 0:
            logger.warning("Agency summary loaded but ANP, FYP and cases are all zero")
        return ActionResult.ok(summary)

    @action()
    def update_agency_metric(self, metric: str, value: Decimal | int | str) -> ActionResult:
        """Admin edit of one metric; the field becomes (or stays) overridden."""
        summary = self._gateway.load_agency_summary() or AgencySummary()
        summary.apply_override(metric, value)
        self._gateway.save_agency_summary(summary)
        return ActionResult.ok(summary)

    @action()
    def save_agency_summary(self, computed: AgencySummary) -> ActionResult:
        """Save freshly computed totals without clobbering overridden fields."""
        current = self._gateway.load_agency_summary(use_cache=False)
        merged = current.merged_with(computed) if current is not None else computed
        self._gateway.save_agency_summary(merged)
        return ActionResult.ok(merged)
