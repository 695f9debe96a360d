"""
Franchise API endpoints.

Franchise listing is public; everything else needs a logged-in user,
except franchise deletion, which is currently open to any caller.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.middleware.auth import get_current_principal, get_optional_principal
from api.dependencies import get_franchise_service
from shared.models import Principal
from modules.auth.models import MessageResponse

from .models import (
    CreateFranchiseRequest,
    CreateStoreRequest,
    Franchise,
    FranchiseListResponse,
    Store,
)
from .service import FranchiseService

router = APIRouter()


@router.get("", response_model=FranchiseListResponse, response_model_exclude_none=True)
async def list_franchises(
    page: int = Query(default=0, ge=0, description="Page number (0-indexed)"),
    limit: int = Query(default=10, ge=1, le=100, description="Franchises per page"),
    name: str = Query(default="*", description="Name filter, '*' is a wildcard"),
    principal: Optional[Principal] = Depends(get_optional_principal),
    service: FranchiseService = Depends(get_franchise_service),
) -> FranchiseListResponse:
    """
    List franchises.

    Admins also see each franchise's admins and store revenue.
    """
    return await service.list_franchises(principal, page, limit, name)


@router.get("/{user_id}", response_model=list[Franchise], response_model_exclude_none=True)
async def get_user_franchises(
    user_id: int,
    principal: Principal = Depends(get_current_principal),
    service: FranchiseService = Depends(get_franchise_service),
) -> list[Franchise]:
    """
    List the franchises a user administers.

    Empty unless the caller is that user or an Admin.
    """
    return await service.get_user_franchises(principal, user_id)


@router.post("", response_model=Franchise, response_model_exclude_none=True)
async def create_franchise(
    request: CreateFranchiseRequest,
    principal: Principal = Depends(get_current_principal),
    service: FranchiseService = Depends(get_franchise_service),
) -> Franchise:
    """Create a franchise. Admin only."""
    return await service.create_franchise(principal, request)


@router.delete("/{franchise_id}", response_model=MessageResponse)
async def delete_franchise(
    franchise_id: int,
    service: FranchiseService = Depends(get_franchise_service),
) -> MessageResponse:
    """
    Delete a franchise with its stores.

    TODO: require Admin here; until then any caller can delete a franchise.
    """
    await service.delete_franchise(franchise_id)
    return MessageResponse(message="franchise deleted")


@router.post("/{franchise_id}/store", response_model=Store, response_model_exclude_none=True)
async def create_store(
    franchise_id: int,
    request: CreateStoreRequest,
    principal: Principal = Depends(get_current_principal),
    service: FranchiseService = Depends(get_franchise_service),
) -> Store:
    """Add a store to a franchise. Franchise admins and Admins only."""
    return await service.create_store(principal, franchise_id, request)


@router.delete("/{franchise_id}/store/{store_id}", response_model=MessageResponse)
async def delete_store(
    franchise_id: int,
    store_id: int,
    principal: Principal = Depends(get_current_principal),
    service: FranchiseService = Depends(get_franchise_service),
) -> MessageResponse:
    """Remove a store from a franchise. Franchise admins and Admins only."""
    await service.delete_store(principal, franchise_id, store_id)
    return MessageResponse(message="store deleted")
