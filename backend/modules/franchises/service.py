"""
Franchise service implementation.

Applies the permission policy to franchise and store operations. On store
routes an unknown franchise is denied like any other franchise the caller
may not manage.
"""

import logging
from typing import Optional

from shared.models import Principal
from modules.auth.exceptions import PermissionDeniedError
from modules.auth.policy import is_admin, is_franchise_admin_or_admin, is_self_or_admin

from .exceptions import MissingNameError
from .models import (
    CreateFranchiseRequest,
    CreateStoreRequest,
    Franchise,
    FranchiseListResponse,
    Store,
)
from .repository import FranchiseRepository

logger = logging.getLogger(__name__)


class FranchiseService:
    """Franchise and store operations."""

    def __init__(self, repository: FranchiseRepository):
        self._repository = repository

    async def list_franchises(
        self,
        principal: Optional[Principal],
        page: int = 0,
        limit: int = 10,
        name_filter: str = "*",
    ) -> FranchiseListResponse:
        """
        List franchises. Anyone may call this.

        Admins get each franchise's admins and per-store revenue; everyone
        else gets store ids and names only.
        """
        detailed = principal is not None and is_admin(principal)
        franchises, more = await self._repository.get_franchises(
            page, limit, name_filter, detailed=detailed
        )
        return FranchiseListResponse(franchises=franchises, more=more)

    async def get_user_franchises(self, principal: Principal, user_id: int) -> list[Franchise]:
        """The franchises user_id administers, or [] for anyone but them or an Admin."""
        if not is_self_or_admin(principal, user_id):
            return []
        return await self._repository.get_user_franchises(user_id)

    async def create_franchise(
        self,
        principal: Principal,
        request: CreateFranchiseRequest,
    ) -> Franchise:
        """
        Create a franchise (Admin only).

        Raises:
            PermissionDeniedError: If the principal is not an Admin
            MissingNameError: If no name is given
            UnknownFranchiseAdminError: If an admin email is unknown
            DuplicateFranchiseError: If the name is taken
        """
        if not is_admin(principal):
            raise PermissionDeniedError("unable to create a franchise", user_id=principal.id)
        if not request.name:
            raise MissingNameError("franchise")

        franchise = await self._repository.create_franchise(
            request.name,
            [admin.email for admin in request.admins],
        )
        logger.info("Franchise %s created by %s", franchise.id, principal.id)
        return franchise

    async def delete_franchise(self, franchise_id: int) -> None:
        """
        Delete a franchise with its stores and admin roles.

        No permission check is made here; the route is open.

        Raises:
            FranchiseDeleteError: If the delete fails and is rolled back
        """
        await self._repository.delete_franchise(franchise_id)
        logger.info("Franchise %s deleted", franchise_id)

    async def create_store(
        self,
        principal: Principal,
        franchise_id: int,
        request: CreateStoreRequest,
    ) -> Store:
        """
        Add a store (franchise admin or Admin).

        Raises:
            PermissionDeniedError: If the franchise is unknown or the principal
                may not manage it
            MissingNameError: If no name is given
        """
        if not await self._may_manage(principal, franchise_id):
            raise PermissionDeniedError("unable to create a store", user_id=principal.id)
        if not request.name:
            raise MissingNameError("store")

        store = await self._repository.create_store(franchise_id, request.name)
        logger.info("Store %s added to franchise %s by %s", store.id, franchise_id, principal.id)
        return store

    async def delete_store(self, principal: Principal, franchise_id: int, store_id: int) -> None:
        """
        Remove a store (franchise admin or Admin).

        Raises:
            PermissionDeniedError: If the franchise is unknown or the principal
                may not manage it
        """
        if not await self._may_manage(principal, franchise_id):
            raise PermissionDeniedError("unable to delete a store", user_id=principal.id)

        await self._repository.delete_store(franchise_id, store_id)
        logger.info("Store %s removed from franchise %s by %s", store_id, franchise_id, principal.id)

    async def _may_manage(self, principal: Principal, franchise_id: int) -> bool:
        franchise = await self._repository.get_franchise(franchise_id)
        return franchise is not None and is_franchise_admin_or_admin(principal, franchise)
