"""Published spreadsheet source configuration."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import Optional

from pydantic import BaseModel


class SheetType(StrEnum):
    AGENCY = "agency"
    LEADERS = "leaders"
    AGENTS = "agents"


class SheetConfig(BaseModel):
    id: str
    type: SheetType
    name: str
    csv_url: str
    is_active: bool = True
    last_updated: Optional[datetime] = None


class SheetConfigs(BaseModel):
    """The ``sheets-config`` document: at most one source per sheet type."""

    agency: Optional[SheetConfig] = None
    leaders: Optional[SheetConfig] = None
    agents: Optional[SheetConfig] = None

    def get(self, sheet_type: SheetType) -> SheetConfig | None:
        return getattr(self, sheet_type.value)

    def set(self, sheet_type: SheetType, config: SheetConfig | None) -> None:
        setattr(self, sheet_type.value, config)
