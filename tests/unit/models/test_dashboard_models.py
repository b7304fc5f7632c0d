"""Tests for dashboard document models."""

from __future__ import annotations

from decimal import Decimal

import pytest

from cmadash.models.dashboard import Agent, DashboardDocument, Leader


class TestAgentTargets:
    @pytest.mark.parametrize("fyc,fyp,anp", [
        (100000, 400000, 440000),
        (0, 0, 0),
        ("2500.50", "10002", "11002.2"),
    ])
    def test_fyc_target_derives_fyp_and_anp(self, fyc, fyp, anp):
        agent = Agent(id="a", name="A")
        agent.set_fyc_target(fyc)
        assert agent.fyc_target == Decimal(str(fyc))
        assert agent.fyp_target == Decimal(str(fyp))
        assert agent.anp_target == Decimal(str(anp))

    def test_every_update_recomputes(self):
        agent = Agent(id="a", name="A")
        agent.set_fyc_target(100000)
        agent.set_fyc_target(50000)
        assert agent.fyp_target == 200000
        assert agent.anp_target == 220000

    def test_um_name_defaults_to_unknown(self):
        assert Agent(id="a", name="A").um_name == "Unknown"


class TestDashboardDocument:
    def test_lookups(self):
        doc = DashboardDocument(
            leaders=[Leader(id="um-a", name="UM A")],
            agents=[Agent(id="ag-1", name="AG 1", um_name="UM A")],
        )
        assert doc.find_leader("um-a").name == "UM A"
        assert doc.find_leader_by_name("UM A").id == "um-a"
        assert doc.find_agent("ag-1").name == "AG 1"
        assert doc.find_leader("missing") is None
        assert doc.find_agent("missing") is None

    def test_forecast_total(self):
        leader = Leader(id="x", name="X", anp_nov_forecast=Decimal(100000), anp_dec_forecast=Decimal(50000))
        assert leader.anp_forecast_total == 150000

    def test_json_round_trip_keeps_decimals(self):
        doc = DashboardDocument(leaders=[Leader(id="x", name="X", anp_actual=Decimal("120000.50"))])
        again = DashboardDocument.model_validate_json(doc.model_dump_json())
        assert again.leaders[0].anp_actual == Decimal("120000.50")
