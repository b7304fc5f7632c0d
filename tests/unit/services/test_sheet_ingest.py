"""Tests for leader/agent sheet ingestion."""

from __future__ import annotations

from decimal import Decimal

import pytest

from cmadash.services.sheets import (
    DEFAULT_LEADER_ANP_TARGET,
    DEFAULT_LEADER_RECRUITS_TARGET,
    find_header_row,
    ingest_agents,
    ingest_leaders,
    is_published_csv_url,
    parse_csv,
    parse_count,
    parse_number,
)
from cmadash.services.column_matcher import LEADER_RULES

LEADERS_CSV = (
    "CEBU-EZ MATUNOG AGENCY,,,,\n"
    "Report as of Oct,,,,\n"
    "LEADER_UM_NAME,ANP_MTD,CASECNT_MTD,FYPI_MTD,FYC_MTD\n"
    'ANALYN D. GONZALES,"120,000.50",4,"80,000",20000\n'
    "MARIBEL B. AGUA,0,0,0,0\n"
    "LEADER_UM_NAME,ANP_MTD,CASECNT_MTD,FYPI_MTD,FYC_MTD\n"
    ",,,,\n"
    'TOTAL,"120,000.50",4,"80,000",20000\n'
)

AGENTS_CSV = (
    "AGENT_NAME,UM_NAME,ANP_MTD,FYP_MTD,CASECNT_MTD\n"
    "JAYCEL ALCANTARA,ANALYN D. GONZALES,50000,40000,2\n"
    "NO MANAGER,,100,100,1\n"
    "Grand Total,,50100,40100,3\n"
)


# ---------- helpers ----------

class TestParseNumber:
    @pytest.mark.parametrize("raw,expected", [
        ("3,430,346.20", Decimal("3430346.20")),
        ("₱1,000", Decimal("1000")),
        ("PHP 2,500", Decimal("2500")),
        ("85%", Decimal("85")),
        ("$12", Decimal("12")),
        ("(500)", Decimal("-500")),
        ("", Decimal("0")),
        ("n/a", Decimal("0")),
        ("NaN", Decimal("0")),
    ])
    def test_cleans_and_parses(self, raw, expected):
        assert parse_number(raw) == expected

    def test_count_truncates(self):
        assert parse_count("4.7") == 4


def test_parse_csv_drops_blank_rows_and_trims():
    assert parse_csv(" a , b \n,,\n\nc,d\n") == [["a", "b"], ["c", "d"]]


@pytest.mark.parametrize("url,ok", [
    ("https://docs.google.com/spreadsheets/d/abc/export?format=csv&gid=0", True),
    ("https://docs.google.com/spreadsheets/d/abc/pub?output=csv", True),
    ("https://docs.google.com/spreadsheets/d/abc/gviz/tq?tqx=out:csv&gid=0", True),
    ("https://docs.google.com/spreadsheets/d/abc/edit#gid=0", False),
    ("https://example.com/data.csv", False),
])
def test_is_published_csv_url(url, ok):
    assert is_published_csv_url(url) is ok


def test_find_header_row_skips_title_rows():
    header = find_header_row(parse_csv(LEADERS_CSV), LEADER_RULES)
    assert header is not None
    assert header.index == 2
    assert header.columns["name"] == 0


# ---------- leaders ----------

class TestIngestLeaders:
    def test_parses_leader_rows(self):
        result = ingest_leaders(LEADERS_CSV)
        assert [l.name for l in result.leaders] == ["ANALYN D. GONZALES", "MARIBEL B. AGUA"]
        first = result.leaders[0]
        assert first.id == "analyn-d.-gonzales"
        assert first.anp_actual == Decimal("120000.50")
        assert first.cases_actual == 4
        assert first.fyp_actual == Decimal("80000")
        assert first.fyc_actual == Decimal("20000")
        assert first.unit == "Unknown Unit"

    def test_applies_default_targets(self):
        leader = ingest_leaders(LEADERS_CSV).leaders[0]
        assert leader.anp_target == DEFAULT_LEADER_ANP_TARGET
        assert leader.recruits_target == DEFAULT_LEADER_RECRUITS_TARGET

    def test_agency_name_from_title_row(self):
        assert ingest_leaders(LEADERS_CSV).agency_name == "CEBU-EZ MATUNOG AGENCY"

    def test_agency_name_column_wins(self):
        text = "UM_NAME,AGENCY_NAME,ANP\nA B,CEBU-MATUNOG AGENCY,10\n"
        assert ingest_leaders(text).agency_name == "CEBU-MATUNOG AGENCY"

    def test_no_name_column_yields_zero_leaders(self):
        result = ingest_leaders("FOO,BAR\n1,2\n")
        assert result.leaders == []
        assert result.headers == ["FOO", "BAR"]


# ---------- agents ----------

class TestIngestAgents:
    def test_parses_agent_rows(self):
        result = ingest_agents(AGENTS_CSV)
        assert [a.name for a in result.agents] == ["JAYCEL ALCANTARA", "NO MANAGER"]
        agent = result.agents[0]
        assert agent.um_name == "ANALYN D. GONZALES"
        assert agent.anp_actual == 50000
        assert agent.fyp_actual == 40000
        assert agent.cases_actual == 2

    def test_missing_um_name_defaults_to_unknown(self):
        assert ingest_agents(AGENTS_CSV).agents[1].um_name == "Unknown"

    def test_no_name_column_yields_zero_agents(self):
        assert ingest_agents("ANP,FYP\n1,2\n").agents == []
