"""Integration tests for the persistence gateway against LocalStack."""

from __future__ import annotations

from decimal import Decimal

from cmadash.models.dashboard import DashboardDocument, Leader
from tests.integration.conftest import skip_no_localstack


@skip_no_localstack
class TestDynamoDBIntegration:
    def test_hierarchy_from_seed(self, gateway):
        entries = gateway.list_hierarchy("CEBU-MATUNOG AGENCY")
        assert len(entries) == 147
        assert entries[0].rank == "ADD"

    def test_agencies_from_seed(self, gateway):
        assert "CE VISAYAS 1 DIRECT" in gateway.load_agencies()

    def test_dashboard_round_trip(self, gateway):
        gateway.save_dashboard(DashboardDocument(
            leaders=[Leader(id="um-a", name="UM A", anp_actual=Decimal("1.25"))],
        ))
        loaded = gateway.load_dashboard(use_cache=False)
        assert loaded.leaders[0].anp_actual == Decimal("1.25")
