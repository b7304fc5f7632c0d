"""Organizational hierarchy models."""

from __future__ import annotations

import re
from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, Field


class Rank(StrEnum):
    ADV = "ADV"  # advisor
    AUM = "AUM"  # associate unit manager
    UM = "UM"  # unit manager
    SUM = "SUM"  # senior unit manager
    ADD = "ADD"  # agency district director


_WS_RE = re.compile(r"\s+")


def hierarchy_doc_id(name: str, agency_name: str) -> str:
    """Deterministic id: re-importing a person overwrites instead of duplicating."""
    return f"{_WS_RE.sub('_', name.upper())}_{_WS_RE.sub('_', agency_name.upper())}"


class HierarchyEntry(BaseModel):
    """One person in an agency's organizational tree."""

    name: str
    display_name: str
    rank: Rank
    unit_manager: Optional[str] = None  # display name of the manager
    agency_name: str
    code: Optional[str] = None

    @property
    def doc_id(self) -> str:
        return hierarchy_doc_id(self.name, self.agency_name)


class HierarchyRow(BaseModel):
    """One (leader, supervisor, agent) row of an import, names in display form."""

    leader: str
    supervisor: str
    agent: str


class ParsedImport(BaseModel):
    """Rows accepted from an import payload plus per-row problems."""

    rows: list[HierarchyRow] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)
