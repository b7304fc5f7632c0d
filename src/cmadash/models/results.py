"""Result envelopes returned by every action."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field


class ActionResult(BaseModel):
    """``{success, error}`` shape; ``data`` carries the payload on reads."""

    success: bool = True
    error: Optional[str] = None
    data: Any = None

    @classmethod
    def ok(cls, data: Any = None) -> ActionResult:
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> ActionResult:
        return cls(success=False, error=error)


class BatchResult(BaseModel):
    """Best-effort batch write: committed count plus per-item errors."""

    success: bool = True
    error: Optional[str] = None
    saved: int = 0
    errors: list[str] = Field(default_factory=list)


class SyncStats(BaseModel):
    leaders_count: int = 0
    agents_count: int = 0
    agency_summary: bool = False


class SyncResult(BaseModel):
    success: bool = True
    error: Optional[str] = None
    stats: Optional[SyncStats] = None
    warnings: list[str] = Field(default_factory=list)
    leader_headers: list[str] = Field(default_factory=list)
