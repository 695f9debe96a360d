"""
Franchise repository for database access.

Encapsulates all queries and data mapping for franchise-related tables:
- franchise
- store
- user_role (franchisee rows, objectId = franchise id)

Store revenue is the sum of the prices of every item ordered at the store.
"""

import logging
from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from shared.database import Database
from shared.models import Role
from shared.repository import BaseRepository, like_pattern

from .exceptions import (
    DuplicateFranchiseError,
    FranchiseDeleteError,
    UnknownFranchiseAdminError,
)
from .models import Franchise, FranchiseAdmin, Store

logger = logging.getLogger(__name__)


class FranchiseRepository(BaseRepository[Franchise]):
    """
    Repository for franchise and store data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying permissions.
    """

    def __init__(self, db: Database) -> None:
        super().__init__(db)

    # -------------------------------------------------------------------------
    # Franchises
    # -------------------------------------------------------------------------

    async def get_franchises(
        self,
        page: int = 0,
        limit: int = 10,
        name_filter: str = "*",
        detailed: bool = False,
    ) -> tuple[list[Franchise], bool]:
        """
        List franchises whose name matches a '*' wildcard filter.

        Args:
            page: Page number (0-indexed)
            limit: Franchises per page
            name_filter: Name filter, '*' matches any run of characters
            detailed: Include admins and per-store revenue

        Returns:
            (franchises on this page, whether more pages follow)
        """
        rows = await self._db.execute(
            "SELECT id, name FROM franchise WHERE name LIKE :name "
            "ORDER BY id LIMIT :limit OFFSET :offset",
            {"name": like_pattern(name_filter), "limit": limit + 1, "offset": page * limit},
        )
        more = len(rows) > limit

        franchises = []
        for row in rows[:limit]:
            if detailed:
                franchises.append(await self._map_to_franchise(row))
            else:
                stores = await self._db.execute(
                    "SELECT id, name FROM store WHERE franchise_id = :id ORDER BY id",
                    {"id": row["id"]},
                )
                franchises.append(Franchise(
                    id=row["id"],
                    name=row["name"],
                    stores=[Store(id=s["id"], name=s["name"]) for s in stores],
                ))
        return franchises, more

    async def get_user_franchises(self, user_id: int) -> list[Franchise]:
        """Franchises the user administers, with admins and revenue."""
        rows = await self._db.execute(
            "SELECT f.id, f.name FROM franchise f "
            "JOIN user_role ur ON ur.object_id = f.id "
            "WHERE ur.user_id = :user_id AND ur.role = :role "
            "ORDER BY f.id",
            {"user_id": user_id, "role": Role.FRANCHISEE.value},
        )
        return [await self._map_to_franchise(row) for row in rows]

    async def get_franchise(self, franchise_id: int) -> Optional[Franchise]:
        """Get a franchise with admins and revenue, or None if not found."""
        rows = await self._db.execute(
            "SELECT id, name FROM franchise WHERE id = :id",
            {"id": franchise_id},
        )
        if not rows:
            return None
        return await self._map_to_franchise(rows[0])

    async def create_franchise(self, name: str, admin_emails: Sequence[str]) -> Franchise:
        """
        Create a franchise and make each listed user one of its admins.

        Raises:
            UnknownFranchiseAdminError: If an admin email is unknown
            DuplicateFranchiseError: If the name is taken
        """
        try:
            async with self._db.transaction() as tx:
                admins = []
                for email in admin_emails:
                    users = await tx.execute(
                        "SELECT id, name, email FROM users WHERE email = :email",
                        {"email": email},
                    )
                    if not users:
                        raise UnknownFranchiseAdminError(email)
                    admins.append(FranchiseAdmin(**users[0]))

                taken = await tx.execute("SELECT id FROM franchise WHERE name = :name", {"name": name})
                if taken:
                    raise DuplicateFranchiseError(name)

                rows = await tx.execute(
                    "INSERT INTO franchise (name) VALUES (:name) RETURNING id",
                    {"name": name},
                )
                franchise_id = rows[0]["id"]

                for admin in admins:
                    await tx.execute(
                        "INSERT INTO user_role (user_id, role, object_id) "
                        "VALUES (:user_id, :role, :object_id)",
                        {"user_id": admin.id, "role": Role.FRANCHISEE.value, "object_id": franchise_id},
                    )
        except IntegrityError as e:
            raise DuplicateFranchiseError(name) from e

        return Franchise(id=franchise_id, name=name, admins=admins, stores=[])

    async def delete_franchise(self, franchise_id: int) -> None:
        """
        Delete a franchise with its stores and admin roles, all or nothing.

        Raises:
            FranchiseDeleteError: If any statement fails (everything is rolled back)
        """
        try:
            async with self._db.transaction() as tx:
                await tx.execute(
                    "DELETE FROM store WHERE franchise_id = :id",
                    {"id": franchise_id},
                )
                await tx.execute(
                    "DELETE FROM user_role WHERE role = :role AND object_id = :id",
                    {"role": Role.FRANCHISEE.value, "id": franchise_id},
                )
                await tx.execute(
                    "DELETE FROM franchise WHERE id = :id",
                    {"id": franchise_id},
                )
        except SQLAlchemyError as e:
            logger.error("Rolled back delete of franchise %s: %s", franchise_id, e.__class__.__name__)
            raise FranchiseDeleteError(franchise_id) from e

    # -------------------------------------------------------------------------
    # Stores
    # -------------------------------------------------------------------------

    async def create_store(self, franchise_id: int, name: str) -> Store:
        """Add a store to a franchise."""
        rows = await self._db.execute(
            "INSERT INTO store (franchise_id, name) VALUES (:franchise_id, :name) RETURNING id",
            {"franchise_id": franchise_id, "name": name},
        )
        return Store(id=rows[0]["id"], franchise_id=franchise_id, name=name)

    async def delete_store(self, franchise_id: int, store_id: int) -> None:
        """Remove a store. Deleting a store that isn't there is a no-op."""
        await self._db.execute(
            "DELETE FROM store WHERE franchise_id = :franchise_id AND id = :id",
            {"franchise_id": franchise_id, "id": store_id},
        )

    # -------------------------------------------------------------------------
    # Mapping helpers
    # -------------------------------------------------------------------------

    async def _map_to_franchise(self, row) -> Franchise:
        admins = await self._db.execute(
            "SELECT u.id, u.name, u.email FROM user_role ur "
            "JOIN users u ON u.id = ur.user_id "
            "WHERE ur.role = :role AND ur.object_id = :id "
            "ORDER BY u.id",
            {"role": Role.FRANCHISEE.value, "id": row["id"]},
        )
        stores = await self._db.execute(
            "SELECT s.id, s.name, COALESCE(SUM(oi.price), 0) AS total_revenue "
            "FROM store s "
            "LEFT JOIN diner_order o ON o.store_id = s.id "
            "LEFT JOIN order_item oi ON oi.order_id = o.id "
            "WHERE s.franchise_id = :id "
            "GROUP BY s.id, s.name "
            "ORDER BY s.id",
            {"id": row["id"]},
        )
        return Franchise(
            id=row["id"],
            name=row["name"],
            admins=[FranchiseAdmin(**admin) for admin in admins],
            stores=[
                Store(id=s["id"], name=s["name"], total_revenue=float(s["total_revenue"]))
                for s in stores
            ],
        )
