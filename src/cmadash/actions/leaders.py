"""Leader target and forecast editing."""

from __future__ import annotations

import logging
from decimal import Decimal

from cmadash.actions.base import BaseActions, action
from cmadash.core.exceptions import NotFoundError
from cmadash.models.results import ActionResult

logger = logging.getLogger(__name__)


class LeaderActions(BaseActions):

    @action()
    def get_leaders(self) -> ActionResult:
        doc = self._gateway.load_dashboard(use_cache=False)
        return ActionResult.ok(doc.leaders if doc else [])

    @action()
    def update_leader_targets(self, leader_id: str, anp_target: Decimal | int | str,
                              recruits_target: int) -> ActionResult:
        doc = self._require_dashboard()
        leader = doc.find_leader(leader_id)
        if leader is None:
            raise NotFoundError("Leader")
        leader.anp_target = Decimal(str(anp_target))
        leader.recruits_target = int(recruits_target)
        self._gateway.save_dashboard(doc)
        return ActionResult.ok()

    @action()
    def update_leader_forecasts(
        self,
        leader_id: str,
        anp_nov_forecast: Decimal | int | str,
        anp_dec_forecast: Decimal | int | str,
        rec_nov_forecast: int,
        rec_dec_forecast: int,
    ) -> ActionResult:
        doc = self._require_dashboard()
        leader = doc.find_leader(leader_id)
        if leader is None:
            raise NotFoundError("Leader")
        leader.anp_nov_forecast = Decimal(str(anp_nov_forecast))
        leader.anp_dec_forecast = Decimal(str(anp_dec_forecast))
        leader.rec_nov_forecast = int(rec_nov_forecast)
        leader.rec_dec_forecast = int(rec_dec_forecast)
        self._gateway.save_dashboard(doc)
        logger.info("Updated forecasts for leader %s", leader_id)
        return ActionResult.ok()
