"""Pydantic schemas for authentication and User CRUD."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from liveboard.models.user import VALID_ROLES, VALID_STATUSES, User
from liveboard.schemas.common import CamelModel


def _check_role(v: str | None) -> str | None:
    if v is not None and v not in VALID_ROLES:
        raise ValueError(f"Role must be one of: {', '.join(VALID_ROLES)}")
    return v


def _check_status(v: str | None) -> str | None:
    if v is not None and v not in VALID_STATUSES:
        raise ValueError(f"Status must be one of: {', '.join(VALID_STATUSES)}")
    return v


# ── Auth ────────────────────────────────────────────────────────────
class LoginRequest(CamelModel):
    email_or_username: str | None = None
    username: str | None = None
    password: str | None = None

    @property
    def identifier(self) -> str | None:
        return self.email_or_username or self.username


class RegisterRequest(CamelModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    role: str = "viewer"

    @field_validator("role")
    @classmethod
    def _validate_role(cls, v: str) -> str:
        return _check_role(v)  # type: ignore[return-value]


# ── Users ───────────────────────────────────────────────────────────
class UserRead(CamelModel):
    """Public view of a user — never carries the password hash."""

    id: str
    username: str
    email: str
    first_name: str
    last_name: str
    role: str
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
    last_login: datetime | None = None
    approved_at: datetime | None = None
    approved_by: str | None = None
    rejected_at: datetime | None = None
    rejected_by: str | None = None
    rejection_reason: str | None = None

    @classmethod
    def from_user(cls, user: User) -> UserRead:
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            role=user.role,
            status=user.status,
            created_at=user.created_at,
            updated_at=user.updated_at,
            last_login=user.last_login,
            approved_at=user.approved_at,
            approved_by=user.approved_by,
            rejected_at=user.rejected_at,
            rejected_by=user.rejected_by,
            rejection_reason=user.rejection_reason,
        )


class UserCreate(CamelModel):
    username: str = Field(min_length=1)
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)
    first_name: str | None = None
    last_name: str | None = None
    role: str = "viewer"
    status: str = "active"

    @field_validator("role")
    @classmethod
    def _validate_role(cls, v: str) -> str:
        return _check_role(v)  # type: ignore[return-value]

    @field_validator("status")
    @classmethod
    def _validate_status(cls, v: str) -> str:
        return _check_status(v)  # type: ignore[return-value]


class UserUpdate(CamelModel):
    username: str | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    role: str | None = None

    @field_validator("role")
    @classmethod
    def _validate_role(cls, v: str | None) -> str | None:
        return _check_role(v)


class StatusUpdate(BaseModel):
    status: str


class RejectRequest(BaseModel):
    reason: str | None = None


# ── Responses ───────────────────────────────────────────────────────
class AuthResponse(BaseModel):
    token: str
    user: UserRead


class RegisterResponse(AuthResponse):
    message: str


class MeResponse(BaseModel):
    user: UserRead


class UserMutationResponse(BaseModel):
    message: str
    user: UserRead
