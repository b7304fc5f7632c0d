"""Turn published sheet CSV exports into leader and agent records."""

from __future__ import annotations

import csv
import io
import logging
import re
from decimal import Decimal, InvalidOperation

from pydantic import BaseModel, Field

from cmadash.core.types import Row
from cmadash.models.dashboard import Agent, Leader
from cmadash.services.column_matcher import AGENT_RULES, LEADER_RULES, FieldRule, compact, match_headers

logger = logging.getLogger(__name__)

HEADER_SCAN_ROWS = 10
NAME_FIELD = "name"

# Sync resets leader targets to these until an admin edits them.
DEFAULT_LEADER_ANP_TARGET = Decimal("1200000")
DEFAULT_LEADER_RECRUITS_TARGET = 3

_NUMBER_JUNK_RE = re.compile(r"[,\s%$₱]|PHP", re.IGNORECASE)
_TOTAL_PREFIXES = ("TOTAL", "GRAND TOTAL", "SUBTOTAL", "SUMMARY")
_WS_RE = re.compile(r"\s+")

_GOOGLE_SHEETS_HOST = "docs.google.com/spreadsheets"
_CSV_MARKERS = ("output=csv", "format=csv", "gviz/tq?tqx=out:csv")


class HeaderMatch(BaseModel):
    index: int
    headers: list[str]
    columns: dict[str, int]


class LeaderIngest(BaseModel):
    leaders: list[Leader] = Field(default_factory=list)
    headers: list[str] = Field(default_factory=list)
    agency_name: str = ""


class AgentIngest(BaseModel):
    agents: list[Agent] = Field(default_factory=list)
    headers: list[str] = Field(default_factory=list)


def is_published_csv_url(url: str) -> bool:
    """Accept only published Google Sheets CSV export URLs."""
    return _GOOGLE_SHEETS_HOST in url and any(m in url for m in _CSV_MARKERS)


def parse_csv(text: str) -> list[Row]:
    """Split CSV text into trimmed rows, dropping rows with no content."""
    rows: list[Row] = []
    for raw in csv.reader(io.StringIO(text)):
        row = [cell.strip() for cell in raw]
        if any(row):
            rows.append(row)
    return rows


def parse_number(value: str) -> Decimal:
    """``"3,430,346.20"`` / ``"₱1,000"`` / ``"85%"`` / ``"(500)"`` -> Decimal.

    Blank or unparseable cells read as zero.
    """
    if not value:
        return Decimal("0")
    cleaned = _NUMBER_JUNK_RE.sub("", value)
    negative = cleaned.startswith("(") and cleaned.endswith(")")
    if negative:
        cleaned = cleaned[1:-1]
    try:
        number = Decimal(cleaned)
    except InvalidOperation:
        return Decimal("0")
    if not number.is_finite():
        return Decimal("0")
    return -number if negative else number


def parse_count(value: str) -> int:
    return int(parse_number(value))


def find_header_row(rows: list[Row], rules: list[FieldRule]) -> HeaderMatch | None:
    """Pick the header among the first rows.

    Only rows where the name field matches are eligible; among those the row
    matching the most fields wins, earliest on ties.
    """
    best: HeaderMatch | None = None
    for idx, row in enumerate(rows[:HEADER_SCAN_ROWS]):
        columns = match_headers(row, rules)
        if NAME_FIELD not in columns:
            continue
        if best is None or len(columns) > len(best.columns):
            best = HeaderMatch(index=idx, headers=row, columns=columns)
    return best


def _cell(row: Row, columns: dict[str, int], field: str) -> str:
    idx = columns.get(field)
    if idx is None or idx >= len(row):
        return ""
    return row[idx]


def _record_id(name: str) -> str:
    return _WS_RE.sub("-", name.strip().lower())


def _is_skippable(name: str, header: HeaderMatch) -> bool:
    """Blank names, repeated header rows and total/summary rows."""
    if not name:
        return True
    if compact(name) == compact(header.headers[header.columns[NAME_FIELD]]):
        return True
    upper = name.upper()
    return any(upper == p or upper.startswith(p + " ") or upper.startswith(p + ":") for p in _TOTAL_PREFIXES)


def _title_agency(rows: list[Row], header_index: int) -> str:
    for row in rows[:header_index]:
        first = row[0] if row else ""
        if first and parse_number(first) == 0 and not first.isdigit():
            return first
    return ""


def ingest_leaders(text: str) -> LeaderIngest:
    """Parse the Leaders sheet. No recognizable name column -> zero leaders."""
    rows = parse_csv(text)
    header = find_header_row(rows, LEADER_RULES)
    if header is None:
        logger.warning("Leaders sheet: no name column in the first %d rows", HEADER_SCAN_ROWS)
        return LeaderIngest(headers=rows[0] if rows else [])

    cols = header.columns
    result = LeaderIngest(headers=header.headers)
    for row in rows[header.index + 1:]:
        name = _cell(row, cols, NAME_FIELD)
        if _is_skippable(name, header):
            continue
        if not result.agency_name:
            result.agency_name = _cell(row, cols, "agency_name")
        result.leaders.append(Leader(
            id=_record_id(name),
            name=name,
            unit=_cell(row, cols, "unit") or "Unknown Unit",
            anp_actual=parse_number(_cell(row, cols, "anp_actual")),
            recruits_actual=parse_count(_cell(row, cols, "recruits_actual")),
            cases_actual=parse_count(_cell(row, cols, "cases_actual")),
            fyp_actual=parse_number(_cell(row, cols, "fyp_actual")),
            fyc_actual=parse_number(_cell(row, cols, "fyc_actual")),
            anp_ytd_actual=parse_number(_cell(row, cols, "anp_ytd_actual")),
            fyp_ytd_actual=parse_number(_cell(row, cols, "fyp_ytd_actual")),
            fyc_ytd_actual=parse_number(_cell(row, cols, "fyc_ytd_actual")),
            anp_target=DEFAULT_LEADER_ANP_TARGET,
            recruits_target=DEFAULT_LEADER_RECRUITS_TARGET,
        ))

    if not result.agency_name:
        result.agency_name = _title_agency(rows, header.index)
    logger.info("Leaders sheet: %d leaders, agency=%r", len(result.leaders), result.agency_name)
    return result


def ingest_agents(text: str) -> AgentIngest:
    """Parse the Agents sheet. No recognizable name column -> zero agents."""
    rows = parse_csv(text)
    header = find_header_row(rows, AGENT_RULES)
    if header is None:
        logger.warning("Agents sheet: no name column in the first %d rows", HEADER_SCAN_ROWS)
        return AgentIngest(headers=rows[0] if rows else [])

    cols = header.columns
    result = AgentIngest(headers=header.headers)
    for row in rows[header.index + 1:]:
        name = _cell(row, cols, NAME_FIELD)
        if _is_skippable(name, header):
            continue
        result.agents.append(Agent(
            id=_record_id(name),
            name=name,
            um_name=_cell(row, cols, "um_name") or "Unknown",
            unit=_cell(row, cols, "unit") or "Unknown Unit",
            anp_actual=parse_number(_cell(row, cols, "anp_actual")),
            fyp_actual=parse_number(_cell(row, cols, "fyp_actual")),
            cases_actual=parse_count(_cell(row, cols, "cases_actual")),
        ))
    logger.info("Agents sheet: %d agents", len(result.agents))
    return result
