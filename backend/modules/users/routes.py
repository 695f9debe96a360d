"""
User API endpoints.

Profile lookup and update for the logged-in user, plus Admin-only listing
and deletion.
"""

from typing import Any

from fastapi import APIRouter, Depends, Query

from api.middleware.auth import get_current_principal
from api.dependencies import get_user_service
from shared.models import Principal
from modules.auth.models import AuthResponse, MessageResponse

from .models import UpdateUserRequest, UserListResponse
from .service import UserService

router = APIRouter()


@router.get("/me")
async def get_me(
    principal: Principal = Depends(get_current_principal),
) -> dict[str, Any]:
    """Get the authenticated user."""
    return principal.to_user()


@router.put("/{user_id}", response_model=AuthResponse, response_model_exclude_none=True)
async def update_user(
    user_id: int,
    request: UpdateUserRequest,
    principal: Principal = Depends(get_current_principal),
    service: UserService = Depends(get_user_service),
) -> AuthResponse:
    """
    Update a user's name, email or password.

    Allowed for the user themself and for Admins.
    """
    return await service.update_user(principal, user_id, request)


@router.get("", response_model=UserListResponse, response_model_exclude_none=True)
async def list_users(
    page: int = Query(default=0, ge=0, description="Page number (0-indexed)"),
    limit: int = Query(default=10, ge=1, le=100, description="Users per page"),
    name: str = Query(default="*", description="Name filter, '*' is a wildcard"),
    principal: Principal = Depends(get_current_principal),
    service: UserService = Depends(get_user_service),
) -> UserListResponse:
    """List users. Admin only."""
    return await service.list_users(principal, page, limit, name)


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(
    user_id: int,
    principal: Principal = Depends(get_current_principal),
    service: UserService = Depends(get_user_service),
) -> MessageResponse:
    """Delete a user. Admin only."""
    await service.delete_user(principal, user_id)
    return MessageResponse(message="user deleted")
