"""Tests for hierarchy import, seeding and lookup actions."""

from __future__ import annotations

import pytest

from cmadash.actions.hierarchy import HierarchyActions
from cmadash.core.exceptions import StoreUnavailableError
from cmadash.models.hierarchy import HierarchyEntry, HierarchyRow, Rank

AGENCY = "CE VISAYAS 1 DIRECT"

IMPORT_CSV = (
    "LEADER_UM_NAME,SUP_NAME,AGENT_NAME\n"
    "I/GONZALES/ANALYN/D@,I/AGUA/MARIBEL/B@,I/GONZALES/ANALYN/D@\n"
    "I/GONZALES/ANALYN/D@,I/GONZALES/ANALYN/D@,I/PALMA/MARY/D@\n"
    "I/AGUA/MARIBEL/B@,I/AGUA/MARIBEL/B@,I/ARIAS/JESSICA/D@\n"
)


@pytest.fixture
def actions(deps):
    return HierarchyActions(**deps)


class TestImport:
    def test_parse_import(self, actions):
        result = actions.parse_import(IMPORT_CSV)
        assert result.success
        assert len(result.data.rows) == 3
        assert result.data.rows[1].agent == "MARY D. PALMA"

    def test_parse_import_empty(self, actions):
        result = actions.parse_import("   ")
        assert not result.success
        assert result.error == "Please paste CSV data"

    def test_parse_import_without_header(self, actions):
        result = actions.parse_import("a,b,c\n")
        assert not result.success
        assert "header row" in result.error

    def test_import_resolves_and_saves(self, actions, gateway):
        rows = actions.parse_import(IMPORT_CSV).data.rows
        result = actions.import_hierarchy(AGENCY, rows)
        assert result.success
        assert result.saved == 4
        assert result.errors == []

        entries = {e.name: e for e in gateway.list_hierarchy(AGENCY)}
        assert entries["MARIBEL B. AGUA"].rank == Rank.SUM
        assert entries["ANALYN D. GONZALES"].rank == Rank.UM
        assert entries["ANALYN D. GONZALES"].unit_manager == "MARIBEL B. AGUA"
        assert entries["MARY D. PALMA"].unit_manager == "ANALYN D. GONZALES"
        assert entries["JESSICA D. ARIAS"].unit_manager == "MARIBEL B. AGUA"

    def test_import_replaces_previous_agency_entries(self, actions, gateway):
        gateway.save_hierarchy_entry(HierarchyEntry(
            name="OLD PERSON", display_name="OLD PERSON", rank=Rank.ADV, agency_name=AGENCY,
        ))
        rows = actions.parse_import(IMPORT_CSV).data.rows
        actions.import_hierarchy(AGENCY, rows)
        assert "OLD PERSON" not in {e.name for e in gateway.list_hierarchy(AGENCY)}

    def test_reimport_is_stable(self, actions, gateway):
        rows = actions.parse_import(IMPORT_CSV).data.rows
        actions.import_hierarchy(AGENCY, rows)
        first = [e.model_dump() for e in gateway.list_hierarchy(AGENCY)]
        actions.import_hierarchy(AGENCY, rows)
        assert [e.model_dump() for e in gateway.list_hierarchy(AGENCY)] == first

    def test_import_requires_agency(self, actions):
        result = actions.import_hierarchy("", [HierarchyRow(leader="A", supervisor="B", agent="C")])
        assert not result.success
        assert result.error == "Please select an agency"

    def test_import_requires_rows(self, actions):
        result = actions.import_hierarchy(AGENCY, [])
        assert not result.success
        assert result.error == "No data to import. Please parse the CSV first."

    def test_per_entry_failures_collected(self, actions, gateway, monkeypatch):
        original = gateway.save_hierarchy_entry

        def flaky(entry):
            if entry.name == "MARY D. PALMA":
                raise StoreUnavailableError("throttled")
            return original(entry)

        monkeypatch.setattr(gateway, "save_hierarchy_entry", flaky)
        rows = actions.parse_import(IMPORT_CSV).data.rows
        result = actions.import_hierarchy(AGENCY, rows)
        assert result.success
        assert result.saved == 3
        assert result.errors == ["Error processing MARY D. PALMA: throttled"]


class TestHardcodedHierarchy:
    def test_initialize(self, actions, gateway):
        result = actions.initialize_hardcoded_hierarchy()
        assert result.success
        assert result.saved == 183
        assert len(gateway.list_hierarchy(AGENCY)) == 16

    def test_units(self, actions):
        actions.initialize_hardcoded_hierarchy()
        assert actions.get_units(AGENCY).data == ["ANALYN D. GONZALES", "MARIBEL B. AGUA"]
        units = actions.get_units("CEBU-MATUNOG AGENCY").data
        assert len(units) == 19
        assert units[:3] == ["ARCHIE S. BIGNO", "EVELYN C. MONDERO", "HAYDEE I. JALDON"]
        assert {"HERMELYN V. SIMENE", "MA EMELYN D. TAN", "NILO B. MATUNOG"} <= set(units)

    def test_people_in_unit(self, actions):
        actions.initialize_hardcoded_hierarchy()
        people = actions.get_people_in_unit("ANALYN D. GONZALES", AGENCY).data
        assert len(people) == 7
        assert all(p.rank == Rank.ADV for p in people)

    def test_get_hierarchy_and_clear(self, actions):
        actions.initialize_hardcoded_hierarchy()
        assert len(actions.get_hierarchy("CEBU-EZ MATUNOG AGENCY").data) == 20
        result = actions.clear_hierarchy_for_agency("CEBU-EZ MATUNOG AGENCY")
        assert result.data == 20
        assert actions.get_hierarchy("CEBU-EZ MATUNOG AGENCY").data == []
        assert len(actions.get_hierarchy(AGENCY).data) == 16
