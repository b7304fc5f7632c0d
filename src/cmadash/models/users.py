"""User profile model."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import StrEnum
from typing import Optional

from pydantic import BaseModel, Field


class UserRole(StrEnum):
    ADMIN = "admin"
    LEADER = "leader"
    ADVISOR = "advisor"


class UserProfile(BaseModel):
    """Profile keyed by the external identity provider's uid."""

    uid: str
    email: str
    code: Optional[str] = None
    name: str
    role: UserRole = UserRole.ADVISOR
    rank: str = "ADV"  # ADMIN, ADD, SUM, UM, AUM, ADV
    unit_manager: Optional[str] = None
    agency_name: str = ""
    is_active: bool = True
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
