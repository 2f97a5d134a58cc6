"""
User management endpoints — list, create, edit, status, approve/reject, delete.

Reads need any authenticated user. Writes go through ``require_admin``,
which only checks the role when ENFORCE_ADMIN_USER_MANAGEMENT is on.
"""

from fastapi import APIRouter, Depends

from liveboard.api.deps import get_auth_service, get_token_claims, require_admin
from liveboard.schemas.common import MessageResponse
from liveboard.schemas.token import TokenClaims
from liveboard.schemas.user import (RejectRequest, StatusUpdate, UserCreate,
                                    UserMutationResponse, UserRead, UserUpdate)
from liveboard.services.auth import AuthService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserRead])
async def list_users(
    _claims: TokenClaims = Depends(get_token_claims),
    service: AuthService = Depends(get_auth_service),
) -> list[UserRead]:
    return [UserRead.from_user(u) for u in service.list_users()]


@router.get("/{user_id}", response_model=UserRead)
async def get_user(
    user_id: str,
    _claims: TokenClaims = Depends(get_token_claims),
    service: AuthService = Depends(get_auth_service),
) -> UserRead:
    return UserRead.from_user(service.get_user(user_id))


@router.post("", response_model=UserMutationResponse, status_code=201)
async def create_user(
    body: UserCreate,
    claims: TokenClaims = Depends(require_admin),
    service: AuthService = Depends(get_auth_service),
) -> UserMutationResponse:
    user = await service.create_user(body, claims)
    return UserMutationResponse(message="User created successfully", user=UserRead.from_user(user))


@router.put("/{user_id}", response_model=UserMutationResponse)
async def update_user(
    user_id: str,
    body: UserUpdate,
    claims: TokenClaims = Depends(require_admin),
    service: AuthService = Depends(get_auth_service),
) -> UserMutationResponse:
    user = service.update_user(user_id, body, claims)
    return UserMutationResponse(message="User updated successfully", user=UserRead.from_user(user))


@router.patch("/{user_id}/status", response_model=UserMutationResponse)
async def update_user_status(
    user_id: str,
    body: StatusUpdate,
    claims: TokenClaims = Depends(require_admin),
    service: AuthService = Depends(get_auth_service),
) -> UserMutationResponse:
    user = service.set_status(user_id, body.status, claims)
    return UserMutationResponse(
        message="User status updated successfully", user=UserRead.from_user(user)
    )


@router.post("/{user_id}/approve", response_model=UserMutationResponse)
async def approve_user(
    user_id: str,
    claims: TokenClaims = Depends(require_admin),
    service: AuthService = Depends(get_auth_service),
) -> UserMutationResponse:
    user = service.approve(user_id, claims)
    return UserMutationResponse(message="User approved successfully", user=UserRead.from_user(user))


@router.post("/{user_id}/reject", response_model=UserMutationResponse)
async def reject_user(
    user_id: str,
    body: RejectRequest | None = None,
    claims: TokenClaims = Depends(require_admin),
    service: AuthService = Depends(get_auth_service),
) -> UserMutationResponse:
    reason = body.reason if body else None
    user = service.reject(user_id, reason, claims)
    return UserMutationResponse(message="User rejected successfully", user=UserRead.from_user(user))


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(
    user_id: str,
    claims: TokenClaims = Depends(require_admin),
    service: AuthService = Depends(get_auth_service),
) -> MessageResponse:
    """Hard-delete a user. Deleting your own account is refused."""
    service.delete_user(user_id, claims)
    return MessageResponse(message="User deleted successfully")
