"""
FastAPI dependencies — route guard, role gate and service wiring.
"""

from __future__ import annotations

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from liveboard.core.config import settings
from liveboard.core.exceptions import AuthenticationError, AuthorizationError
from liveboard.core.security import decode_access_token
from liveboard.db.store import Store, get_store
from liveboard.schemas.token import TokenClaims
from liveboard.services.auth import AuthService

# auto_error=False so a missing header gets our own 401 message
bearer_scheme = HTTPBearer(auto_error=False)


def get_auth_service(store: Store = Depends(get_store)) -> AuthService:
    return AuthService(store)


# ── Auth dependencies ───────────────────────────────────────────────
async def get_token_claims(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> TokenClaims:
    """Require ``Authorization: Bearer <token>`` and return its claims.

    Confirms identity only. The claims are also left on
    ``request.state.user`` for anything downstream of the handler.
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Access token required")

    claims = decode_access_token(credentials.credentials)
    request.state.user = claims
    return claims


async def require_admin(
    claims: TokenClaims = Depends(get_token_claims),
    service: AuthService = Depends(get_auth_service),
) -> TokenClaims:
    """Gate user-management writes on the *live* admin role.

    Only enforced when ``ENFORCE_ADMIN_USER_MANAGEMENT`` is on; otherwise
    any authenticated caller passes.
    """
    if not settings.ENFORCE_ADMIN_USER_MANAGEMENT:
        return claims

    user = service.users.get(claims.id)
    if user is None:
        raise AuthenticationError("Invalid or expired token")
    if user.role != "admin":
        raise AuthorizationError("Admin privileges required")
    return claims
