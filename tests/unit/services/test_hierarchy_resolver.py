"""Tests for hierarchy CSV parsing and rank/manager inference."""

from __future__ import annotations

import pytest

from cmadash.core.exceptions import HierarchyParseError
from cmadash.models.hierarchy import HierarchyRow, Rank
from cmadash.services.hierarchy import (
    collect_evidence,
    infer_rank,
    parse_hierarchy_csv,
    resolve_hierarchy,
)

AGENCY = "CEBU-EZ MATUNOG AGENCY"


def _row(leader: str, supervisor: str, agent: str) -> HierarchyRow:
    return HierarchyRow(leader=leader, supervisor=supervisor, agent=agent)


# SUM BOSS supervises two unit managers; each UM supervises agents.
ROWS = [
    _row("UM ONE", "SUM BOSS", "UM ONE"),
    _row("UM TWO", "SUM BOSS", "UM TWO"),
    _row("UM ONE", "UM ONE", "AGENT A"),
    _row("UM ONE", "UM ONE", "AGENT B"),
    _row("UM TWO", "UM TWO", "AGENT C"),
]


def _by_name(entries):
    return {e.name: e for e in entries}


# ---------- CSV parsing ----------

class TestParseHierarchyCsv:
    def test_parses_rows_and_converts_names(self):
        text = (
            "LEADER_UM_NAME,SUP_NAME,AGENT_NAME\n"
            "I/GONZALES/ANALYN/D@,I/AGUA/MARIBEL/B@,I/ALCANTARA/JAYCEL/@\n"
        )
        parsed = parse_hierarchy_csv(text)
        assert parsed.errors == []
        assert parsed.rows == [
            _row("ANALYN D. GONZALES", "MARIBEL B. AGUA", "JAYCEL ALCANTARA"),
        ]

    def test_header_found_below_title_rows(self):
        text = (
            "Hierarchy export\n"
            ",,\n"
            "UM_NAME,SUPERVISOR,AGENT\n"
            "A,B,C\n"
        )
        parsed = parse_hierarchy_csv(text)
        assert parsed.rows == [_row("A", "B", "C")]

    def test_short_and_blank_rows_reported_per_row(self):
        text = (
            "LEADER_UM_NAME,SUP_NAME,AGENT_NAME\n"
            "A,B\n"
            "A,,C\n"
            "A,B,C\n"
        )
        parsed = parse_hierarchy_csv(text)
        assert len(parsed.rows) == 1
        assert len(parsed.errors) == 2
        assert parsed.errors[0].startswith("Row 2:")
        assert parsed.errors[1].startswith("Row 3:")

    def test_missing_header_raises(self):
        with pytest.raises(HierarchyParseError):
            parse_hierarchy_csv("a,b,c\n1,2,3\n")

    def test_missing_column_raises(self):
        with pytest.raises(HierarchyParseError):
            parse_hierarchy_csv("LEADER_UM_NAME,OTHER\nA,B\n")


# ---------- evidence and ranks ----------

class TestEvidence:
    def test_supervisor_with_leaders_under_is_flagged(self):
        evidence = collect_evidence(ROWS)
        assert evidence["SUM BOSS"].has_leaders_under is True
        assert evidence["UM ONE"].has_leaders_under is False

    def test_agents_recorded_under_supervisor_once(self):
        rows = ROWS + [_row("UM ONE", "UM ONE", "agent  a")]
        evidence = collect_evidence(rows)
        assert evidence["UM ONE"].agents == ["AGENT A", "AGENT B"]

    def test_rank_precedence(self):
        evidence = collect_evidence(ROWS)
        assert infer_rank(evidence["SUM BOSS"]) == Rank.SUM
        assert infer_rank(evidence["UM ONE"]) == Rank.UM
        assert infer_rank(evidence["AGENT A"]) == Rank.ADV


# ---------- resolution ----------

class TestResolveHierarchy:
    def test_one_entry_per_unique_name(self):
        entries = resolve_hierarchy(ROWS, AGENCY)
        assert sorted(e.name for e in entries) == [
            "AGENT A", "AGENT B", "AGENT C", "SUM BOSS", "UM ONE", "UM TWO",
        ]
        assert all(e.agency_name == AGENCY for e in entries)

    def test_ranks_and_managers(self):
        entries = _by_name(resolve_hierarchy(ROWS, AGENCY))
        assert entries["SUM BOSS"].rank == Rank.SUM
        assert entries["SUM BOSS"].unit_manager is None
        assert entries["UM ONE"].rank == Rank.UM
        assert entries["UM ONE"].unit_manager == "SUM BOSS"
        assert entries["AGENT A"].rank == Rank.ADV
        assert entries["AGENT A"].unit_manager == "UM ONE"
        assert entries["AGENT C"].unit_manager == "UM TWO"

    def test_leader_only_name_is_um(self):
        entries = _by_name(resolve_hierarchy([_row("LONE UM", "BOSS", "AGENT X")], AGENCY))
        assert entries["LONE UM"].rank == Rank.UM
        assert entries["LONE UM"].unit_manager == "BOSS"
        assert entries["BOSS"].rank == Rank.SUM
        assert entries["AGENT X"].unit_manager == "BOSS"

    def test_sum_manager_from_first_row_naming_them(self):
        rows = [
            _row("UM ONE", "SUM BOSS", "AGENT A"),
            _row("SUM BOSS", "TOP", "SUM BOSS"),
        ]
        entries = _by_name(resolve_hierarchy(rows, AGENCY))
        assert entries["SUM BOSS"].rank == Rank.SUM
        assert entries["SUM BOSS"].unit_manager == "TOP"

    def test_sum_first_row_self_supervised_has_no_manager(self):
        rows = [
            _row("S", "S", "X"),
            _row("U", "S", "Y"),
            _row("S", "TOP", "S"),
        ]
        entries = _by_name(resolve_hierarchy(rows, AGENCY))
        assert entries["S"].rank == Rank.SUM
        assert entries["S"].unit_manager is None

    def test_um_manager_is_first_leader_row_even_if_self(self):
        rows = [
            _row("U", "U", "A"),
            _row("U", "BOSS", "U"),
        ]
        entries = _by_name(resolve_hierarchy(rows, AGENCY))
        assert entries["U"].rank == Rank.UM
        assert entries["U"].unit_manager == "U"

    def test_display_name_prefers_agent_column_occurrence(self):
        rows = [
            _row("Um One", "BOSS", "um one"),
            _row("UM ONE", "UM ONE", "AGENT A"),
        ]
        entries = resolve_hierarchy(rows, AGENCY)
        names = [e.name for e in entries]
        assert "um one" in names
        assert "Um One" not in names

    def test_idempotent(self):
        first = resolve_hierarchy(ROWS, AGENCY)
        second = resolve_hierarchy(ROWS, AGENCY)
        assert [e.model_dump() for e in first] == [e.model_dump() for e in second]

    def test_doc_id_is_deterministic(self):
        entries = _by_name(resolve_hierarchy(ROWS, AGENCY))
        assert entries["UM ONE"].doc_id == "UM_ONE_CEBU-EZ_MATUNOG_AGENCY"
