"""
Auth service — login, registration, session refresh and user lifecycle.

All credential checks funnel through here; the HTTP layer only maps the
results onto responses.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from starlette.concurrency import run_in_threadpool

from liveboard.core.config import settings
from liveboard.core.exceptions import (AuthenticationError, ConflictError,
                                       NotFoundError, ValidationError)
from liveboard.core.security import (create_access_token, get_password_hash,
                                     verify_password)
from liveboard.db.store import Store, new_id
from liveboard.models.user import VALID_STATUSES, User
from liveboard.schemas.token import TokenClaims
from liveboard.schemas.user import RegisterRequest, UserCreate, UserUpdate

logger = logging.getLogger(__name__)

_INVALID_CREDENTIALS = "Invalid credentials"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuthService:
    def __init__(self, store: Store) -> None:
        self.users = store.users

    # ── Lookups ─────────────────────────────────────────────────────
    def _find_by_identifier(self, identifier: str) -> User | None:
        for user in self.users:
            if user.username == identifier or user.email == identifier:
                return user
        return None

    def _ensure_unique(
        self, username: str | None, email: str | None, exclude_id: str | None = None
    ) -> bool:
        for user in self.users:
            if user.id == exclude_id:
                continue
            if (username is not None and user.username == username) or (
                email is not None and user.email == email
            ):
                return False
        return True

    def get_user(self, user_id: str) -> User:
        user = self.users.get(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def list_users(self) -> list[User]:
        return self.users.list()

    # ── Session ─────────────────────────────────────────────────────
    async def login(self, identifier: str | None, password: str | None) -> tuple[str, User]:
        if not identifier or not password:
            raise ValidationError(
                "Validation failed",
                errors=[
                    {
                        "field": "emailOrUsername",
                        "message": "Username and password are required",
                    }
                ],
            )

        user = self._find_by_identifier(identifier)
        if user is None:
            logger.info("Login failed for %r", identifier)
            raise AuthenticationError(_INVALID_CREDENTIALS)

        if not await run_in_threadpool(verify_password, password, user.hashed_password):
            logger.info("Login failed for %r", identifier)
            raise AuthenticationError(_INVALID_CREDENTIALS)

        user.last_login = _utcnow()
        logger.info("User %s logged in", user.username)
        return create_access_token(user), user

    async def register(self, body: RegisterRequest) -> tuple[str, User]:
        """Self-service sign-up. The new account is signed in immediately."""
        email = body.email or f"{body.username}@example.com"
        if not self._ensure_unique(body.username, email):
            raise ConflictError("User already exists")

        hashed = await run_in_threadpool(get_password_hash, body.password)
        # Re-check after the hash yielded the loop
        if not self._ensure_unique(body.username, email):
            raise ConflictError("User already exists")

        user = User(
            id=new_id(),
            username=body.username,
            email=email,
            hashed_password=hashed,
            first_name=body.first_name or body.username,
            last_name=body.last_name or "",
            role=body.role,
        )
        self.users.put(user.id, user)
        logger.info("Registered user %s (role=%s)", user.username, user.role)
        return create_access_token(user), user

    def me(self, claims: TokenClaims) -> User:
        return self.get_user(claims.id)

    def logout(self, claims: TokenClaims) -> None:
        # Stateless tokens: the client discards its copy.
        logger.info("User %s logged out", claims.username)

    def refresh(self, claims: TokenClaims) -> str:
        """Issue a fresh token from the *live* record (picks up role changes)."""
        return create_access_token(self.get_user(claims.id))

    # ── User lifecycle ──────────────────────────────────────────────
    async def create_user(self, body: UserCreate, actor: TokenClaims) -> User:
        if not self._ensure_unique(body.username, body.email):
            raise ConflictError("User already exists")

        hashed = await run_in_threadpool(get_password_hash, body.password)
        if not self._ensure_unique(body.username, body.email):
            raise ConflictError("User already exists")

        user = User(
            id=new_id(),
            username=body.username,
            email=body.email,
            hashed_password=hashed,
            first_name=body.first_name or body.username,
            last_name=body.last_name or "",
            role=body.role,
            status=body.status,
        )
        self.users.put(user.id, user)
        logger.info("User %s created by %s", user.username, actor.username)
        return user

    def update_user(self, user_id: str, body: UserUpdate, actor: TokenClaims) -> User:
        user = self.get_user(user_id)
        if not self._ensure_unique(body.username, body.email, exclude_id=user_id):
            raise ConflictError("Username or email already exists")

        for field, value in body.model_dump(exclude_unset=True).items():
            if value:
                setattr(user, field, value)
        user.touch()
        logger.info("User %s updated by %s", user.username, actor.username)
        return user

    def set_status(self, user_id: str, status: str, actor: TokenClaims) -> User:
        user = self.get_user(user_id)
        if status not in VALID_STATUSES:
            raise ValidationError("Invalid status")
        user.status = status
        user.touch()
        logger.info("User %s status -> %s (by %s)", user.username, status, actor.username)
        return user

    def approve(self, user_id: str, actor: TokenClaims) -> User:
        user = self.get_user(user_id)
        user.status = "active"
        user.approved_at = _utcnow()
        user.approved_by = actor.id
        user.touch()
        logger.info("User %s approved by %s", user.username, actor.username)
        return user

    def reject(self, user_id: str, reason: str | None, actor: TokenClaims) -> User:
        user = self.get_user(user_id)
        user.status = "rejected"
        user.rejected_at = _utcnow()
        user.rejected_by = actor.id
        user.rejection_reason = reason
        user.touch()
        logger.info("User %s rejected by %s", user.username, actor.username)
        return user

    def delete_user(self, user_id: str, actor: TokenClaims) -> None:
        if user_id == actor.id:
            raise ValidationError("Cannot delete your own account")
        user = self.get_user(user_id)
        self.users.delete(user_id)
        logger.info("User %s deleted by %s", user.username, actor.username)

    # ── Bootstrap ───────────────────────────────────────────────────
    def ensure_admin(self) -> User:
        """Seed the default admin account unless one with that username exists."""
        existing = self._find_by_identifier(settings.FIRST_ADMIN_USERNAME)
        if existing is not None:
            return existing
        admin = User(
            id="admin-001",
            username=settings.FIRST_ADMIN_USERNAME,
            email=settings.FIRST_ADMIN_EMAIL,
            hashed_password=get_password_hash(settings.FIRST_ADMIN_PASSWORD),
            first_name="System",
            last_name="Administrator",
            role="admin",
        )
        self.users.put(admin.id, admin)
        logger.info(
            "Default admin created: %s (password: <redacted>)",
            settings.FIRST_ADMIN_USERNAME,
        )
        return admin
