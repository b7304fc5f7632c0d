"""Organizational hierarchy inference from (leader, supervisor, agent) rows.

Each import row names a unit leader, the person the row reports to, and an
agent. The same person shows up in different columns across rows depending
on their role in that row; ranks and managers are inferred from where a name
appears.
"""

from __future__ import annotations

import csv
import io
import logging
from typing import Iterable

from pydantic import BaseModel, Field

from cmadash.core.exceptions import HierarchyParseError
from cmadash.models.hierarchy import HierarchyEntry, HierarchyRow, ParsedImport, Rank
from cmadash.services.names import normalize, to_display

logger = logging.getLogger(__name__)

HEADER_SCAN_LINES = 10
_HEADER_MARKERS = ("LEADER_UM_NAME", "UM_NAME", "SUP_NAME", "AGENT_NAME")


# ---------------------------------------------------------------------------
# Import payload parsing
# ---------------------------------------------------------------------------

def _find_column(headers: list[str], *fragments: str) -> int:
    for idx, header in enumerate(headers):
        if any(f in header for f in fragments):
            return idx
    return -1


def parse_hierarchy_csv(text: str) -> ParsedImport:
    """Parse pasted CSV into hierarchy rows.

    Raises:
        HierarchyParseError: No header row or a required column is missing.
            Individual bad rows are reported in ``ParsedImport.errors``.
    """
    lines = [row for row in csv.reader(io.StringIO(text.strip())) if any(c.strip() for c in row)]

    header_idx = -1
    for idx, row in enumerate(lines[:HEADER_SCAN_LINES]):
        joined = ",".join(row).upper()
        if any(marker in joined for marker in _HEADER_MARKERS):
            header_idx = idx
            break
    if header_idx == -1:
        raise HierarchyParseError(
            "Could not find header row with LEADER_UM_NAME, SUP_NAME, or AGENT_NAME"
        )

    headers = [h.strip().upper() for h in lines[header_idx]]
    leader_col = _find_column(headers, "LEADER_UM", "UM_NAME")
    sup_col = _find_column(headers, "SUP_NAME", "SUPERVISOR")
    agent_col = _find_column(headers, "AGENT_NAME", "AGENT")
    if -1 in (leader_col, sup_col, agent_col):
        raise HierarchyParseError("Missing required columns: LEADER_UM_NAME, SUP_NAME, AGENT_NAME")

    parsed = ParsedImport()
    width = max(leader_col, sup_col, agent_col)
    for line_no, row in enumerate(lines[header_idx + 1:], start=header_idx + 2):
        values = [v.strip() for v in row]
        if len(values) <= width:
            parsed.errors.append(f"Row {line_no}: expected at least {width + 1} columns, got {len(values)}")
            continue
        leader, sup, agent = values[leader_col], values[sup_col], values[agent_col]
        if not (leader and sup and agent):
            parsed.errors.append(f"Row {line_no}: leader, supervisor and agent names are required")
            continue
        parsed.rows.append(HierarchyRow(
            leader=to_display(leader), supervisor=to_display(sup), agent=to_display(agent),
        ))
    return parsed


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------

class RoleEvidence(BaseModel):
    """What the rows say about one person."""

    is_leader: bool = False
    is_supervisor: bool = False
    has_leaders_under: bool = False
    agents: list[str] = Field(default_factory=list)


class _KeyedRow(BaseModel):
    leader: str
    supervisor: str
    agent: str
    source: HierarchyRow


def collect_evidence(rows: Iterable[HierarchyRow]) -> dict[str, RoleEvidence]:
    """Build the normalized-name -> role evidence map, in first-seen order."""
    keyed = [_key(r) for r in rows]
    evidence: dict[str, RoleEvidence] = {}

    for row in keyed:
        evidence.setdefault(row.leader, RoleEvidence()).is_leader = True
        evidence.setdefault(row.supervisor, RoleEvidence()).is_supervisor = True
        evidence.setdefault(row.agent, RoleEvidence())
        sup_agents = evidence[row.supervisor].agents
        if row.agent not in sup_agents:
            sup_agents.append(row.agent)

    for name, info in evidence.items():
        if info.is_supervisor:
            info.has_leaders_under = any(
                row.supervisor == name and row.leader != name and evidence[row.leader].is_leader
                for row in keyed
            )
    return evidence


def infer_rank(info: RoleEvidence) -> Rank:
    if info.is_supervisor:
        return Rank.SUM if info.has_leaders_under else Rank.UM
    if info.is_leader:
        return Rank.UM
    return Rank.ADV


def _key(row: HierarchyRow) -> _KeyedRow:
    return _KeyedRow(
        leader=normalize(row.leader),
        supervisor=normalize(row.supervisor),
        agent=normalize(row.agent),
        source=row,
    )


def _display_name(name: str, keyed: list[_KeyedRow]) -> str:
    for row in keyed:
        if row.agent == name:
            return row.source.agent
        if row.leader == name:
            return row.source.leader
        if row.supervisor == name:
            return row.source.supervisor
    return " ".join(part.capitalize() for part in name.split())


def _manager(name: str, rank: Rank, keyed: list[_KeyedRow]) -> str | None:
    """Supervisor column of the first row that places ``name``.

    Only that first row counts. A SUM whose first row names themself as
    supervisor has no manager.
    """
    if rank in (Rank.ADV, Rank.AUM):
        row = next((r for r in keyed if r.agent == name), None)
    elif rank == Rank.UM:
        row = next((r for r in keyed if r.leader == name), None)
    elif rank == Rank.SUM:
        row = next((r for r in keyed if r.agent == name or r.leader == name), None)
        if row is not None and row.supervisor == name:
            return None
    else:
        return None
    return row.source.supervisor if row is not None else None


def resolve_hierarchy(rows: list[HierarchyRow], agency_name: str) -> list[HierarchyEntry]:
    """One entry per unique normalized name, with inferred rank and manager.

    Pure over ``rows``: running it twice on the same input gives the same
    result.
    """
    keyed = [_key(r) for r in rows]
    evidence = collect_evidence(rows)

    entries: list[HierarchyEntry] = []
    for name, info in evidence.items():
        rank = infer_rank(info)
        display = _display_name(name, keyed)
        entries.append(HierarchyEntry(
            name=display,
            display_name=display,
            rank=rank,
            unit_manager=_manager(name, rank, keyed),
            agency_name=agency_name,
        ))

    logger.info("Resolved %d hierarchy entries from %d rows for %s",
                len(entries), len(rows), agency_name)
    return entries
