"""Pydantic schemas for JWT tokens."""

from __future__ import annotations

from pydantic import BaseModel


class TokenClaims(BaseModel):
    """Identity + role snapshot carried by an access token."""

    id: str
    username: str
    email: str | None = None
    role: str
    iat: int | None = None
    exp: int | None = None


class RefreshResponse(BaseModel):
    token: str
