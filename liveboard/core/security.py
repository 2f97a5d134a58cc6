"""
JWT token creation / verification and password hashing (bcrypt).
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING

from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import ValidationError as PydanticValidationError

from liveboard.core.config import settings
from liveboard.core.exceptions import AuthenticationError
from liveboard.schemas.token import TokenClaims

if TYPE_CHECKING:
    from liveboard.models.user import User

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)

_ALGORITHM = settings.ALGORITHM
_SECRET = settings.JWT_SECRET


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# ── Passwords ───────────────────────────────────────────────────────
def verify_password(plain: str, hashed: str) -> bool:
    try:
        return pwd_context.verify(plain, hashed)
    except ValueError:
        # Unrecognised / malformed digest
        return False


def get_password_hash(plain: str) -> str:
    return pwd_context.hash(plain)


# ── JWT tokens ──────────────────────────────────────────────────────
def create_access_token(user: User, expires_delta: timedelta | None = None) -> str:
    """Sign the identity + role snapshot of *user*.

    The role is frozen at issuance; only a fresh token (login or
    ``/auth/refresh``) picks up later role changes.
    """
    issued_at = _utcnow()
    expire = issued_at + (
        expires_delta or timedelta(hours=settings.ACCESS_TOKEN_EXPIRE_HOURS)
    )
    claims = {
        "sub": user.id,
        "id": user.id,
        "username": user.username,
        "email": user.email,
        "role": user.role,
        "type": "access",
        "iat": issued_at,
        "exp": expire,
    }
    return jwt.encode(claims, _SECRET, algorithm=_ALGORITHM)


def decode_access_token(token: str) -> TokenClaims:
    """Return the claims of a valid access token.

    Malformed, expired, wrongly-signed and wrong-type tokens all raise the
    same :class:`AuthenticationError` so callers cannot tell them apart.
    """
    try:
        payload = jwt.decode(token, _SECRET, algorithms=[_ALGORITHM])
    except JWTError:
        raise AuthenticationError("Invalid or expired token") from None

    if payload.get("type") != "access":
        raise AuthenticationError("Invalid or expired token")
    try:
        return TokenClaims.model_validate(payload)
    except PydanticValidationError:
        raise AuthenticationError("Invalid or expired token") from None
