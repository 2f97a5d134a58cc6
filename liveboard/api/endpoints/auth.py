"""
Auth endpoints — login, self-service registration, session refresh.
"""

from fastapi import APIRouter, Depends, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from liveboard.api.deps import get_auth_service, get_token_claims
from liveboard.core.config import settings
from liveboard.schemas.common import MessageResponse
from liveboard.schemas.token import RefreshResponse, TokenClaims
from liveboard.schemas.user import (AuthResponse, LoginRequest, MeResponse,
                                    RegisterRequest, RegisterResponse,
                                    UserRead)
from liveboard.services.auth import AuthService

# Keyed by client IP
limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=AuthResponse)
@limiter.limit(settings.LOGIN_RATE_LIMIT)
async def login(
    request: Request,
    body: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    """Authenticate with username or email + password."""
    token, user = await service.login(body.identifier, body.password)
    return AuthResponse(token=token, user=UserRead.from_user(user))


@router.post("/register", response_model=RegisterResponse, status_code=201)
async def register(
    body: RegisterRequest,
    service: AuthService = Depends(get_auth_service),
) -> RegisterResponse:
    """Create an account and sign it in straight away."""
    token, user = await service.register(body)
    return RegisterResponse(
        message="User created successfully",
        token=token,
        user=UserRead.from_user(user),
    )


@router.get("/me", response_model=MeResponse)
async def read_current_user(
    claims: TokenClaims = Depends(get_token_claims),
    service: AuthService = Depends(get_auth_service),
) -> MeResponse:
    """Return the *live* profile behind the token (may differ from its claims)."""
    return MeResponse(user=UserRead.from_user(service.me(claims)))


@router.post("/logout", response_model=MessageResponse)
async def logout(
    claims: TokenClaims = Depends(get_token_claims),
    service: AuthService = Depends(get_auth_service),
) -> MessageResponse:
    service.logout(claims)
    return MessageResponse(message="Logged out successfully")


@router.post("/refresh", response_model=RefreshResponse)
async def refresh(
    claims: TokenClaims = Depends(get_token_claims),
    service: AuthService = Depends(get_auth_service),
) -> RefreshResponse:
    """Re-issue a token from the current user record."""
    return RefreshResponse(token=service.refresh(claims))
