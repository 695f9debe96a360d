"""
Authentication API endpoints.

Register, login and logout. Register and login both answer with the user
and a freshly activated token.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_bearer_token, get_current_principal
from api.dependencies import get_auth_service
from shared.models import Principal

from .interfaces import IAuthService
from .models import AuthResponse, LoginRequest, MessageResponse, RegisterRequest

router = APIRouter()


@router.post("", response_model=AuthResponse, response_model_exclude_none=True)
async def register(
    request: RegisterRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """Register a new Diner and log them in."""
    return await service.register(request.name, request.email, request.password)


@router.put("", response_model=AuthResponse, response_model_exclude_none=True)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """Log in an existing user."""
    return await service.login(request.email, request.password)


@router.delete("", response_model=MessageResponse)
async def logout(
    principal: Principal = Depends(get_current_principal),
    token: str = Depends(get_bearer_token),
    service: IAuthService = Depends(get_auth_service),
) -> MessageResponse:
    """Revoke the token the request was made with."""
    await service.logout(token)
    return MessageResponse(message="logout successful")
