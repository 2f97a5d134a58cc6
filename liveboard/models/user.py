"""
User model — credentials, profile and account lifecycle.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

VALID_ROLES = ("admin", "hr", "manager", "editor", "viewer", "security")
VALID_STATUSES = ("active", "inactive", "pending", "rejected")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class User:
    id: str
    username: str
    email: str
    hashed_password: str
    first_name: str = ""
    last_name: str = ""
    role: str = "viewer"  # admin | hr | manager | editor | viewer | security
    status: str = "active"  # active | inactive | pending | rejected
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime | None = None
    last_login: datetime | None = None

    # Approval trail
    approved_at: datetime | None = None
    approved_by: str | None = None
    rejected_at: datetime | None = None
    rejected_by: str | None = None
    rejection_reason: str | None = None

    def touch(self) -> None:
        self.updated_at = _utcnow()
