"""Agent target and forecast editing."""

from __future__ import annotations

from decimal import Decimal

from cmadash.actions.base import BaseActions, action
from cmadash.core.exceptions import NotFoundError
from cmadash.models.dashboard import Agent, DashboardDocument
from cmadash.models.results import ActionResult


def _find(doc: DashboardDocument, agent_id: str) -> Agent:
    agent = doc.find_agent(agent_id)
    if agent is None:
        raise NotFoundError("Agent")
    return agent


class AgentActions(BaseActions):

    @action()
    def get_agents(self) -> ActionResult:
        """All agents, ordered by owning leader then name."""
        doc = self._gateway.load_dashboard(use_cache=False)
        agents = doc.agents if doc else []
        return ActionResult.ok(sorted(agents, key=lambda a: (a.um_name, a.name)))

    @action()
    def update_agent_fyc_target(self, agent_id: str, fyc_target: Decimal | int | str) -> ActionResult:
        doc = self._require_dashboard()
        _find(doc, agent_id).set_fyc_target(fyc_target)
        self._gateway.save_dashboard(doc)
        return ActionResult.ok()

    @action()
    def update_agent_recruits_target(self, agent_id: str, recruits_target: int) -> ActionResult:
        doc = self._require_dashboard()
        _find(doc, agent_id).recruits_target = int(recruits_target)
        self._gateway.save_dashboard(doc)
        return ActionResult.ok()

    @action()
    def update_agent_forecasts(
        self,
        agent_id: str,
        fyc_nov_forecast: Decimal | int | str,
        fyc_dec_forecast: Decimal | int | str,
        rec_nov_forecast: int,
        rec_dec_forecast: int,
    ) -> ActionResult:
        doc = self._require_dashboard()
        agent = _find(doc, agent_id)
        agent.fyc_nov_forecast = Decimal(str(fyc_nov_forecast))
        agent.fyc_dec_forecast = Decimal(str(fyc_dec_forecast))
        agent.rec_nov_forecast = int(rec_nov_forecast)
        agent.rec_dec_forecast = int(rec_dec_forecast)
        self._gateway.save_dashboard(doc)
        return ActionResult.ok()
