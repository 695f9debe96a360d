"""
Order repository for database access.

Encapsulates all queries and data mapping for order-related tables:
- menu
- diner_order
- order_item
"""

from datetime import datetime, timezone
from typing import Iterable

from shared.database import Database
from shared.repository import BaseRepository, get_offset

from .exceptions import UnknownMenuItemError
from .models import MenuItem, Order, OrderItem, OrderRequest


class OrderRepository(BaseRepository[Order]):
    """
    Repository for menu and order data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying permissions.
    """

    def __init__(self, db: Database) -> None:
        super().__init__(db)

    # -------------------------------------------------------------------------
    # Menu
    # -------------------------------------------------------------------------

    async def get_menu(self) -> list[MenuItem]:
        """Get every menu item in insertion order."""
        rows = await self._db.execute(
            "SELECT id, title, description, image, price FROM menu ORDER BY id"
        )
        return [MenuItem(**row) for row in rows]

    async def add_menu_item(
        self,
        title: str,
        price: float,
        description: str = "",
        image: str = "",
    ) -> MenuItem:
        """Add an item to the menu."""
        rows = await self._db.execute(
            "INSERT INTO menu (title, description, image, price) "
            "VALUES (:title, :description, :image, :price) RETURNING id",
            {"title": title, "description": description, "image": image, "price": price},
        )
        return MenuItem(
            id=rows[0]["id"],
            title=title,
            description=description,
            image=image,
            price=price,
        )

    # -------------------------------------------------------------------------
    # Orders
    # -------------------------------------------------------------------------

    async def get_orders(self, diner_id: int, page: int = 1, per_page: int = 10) -> list[Order]:
        """
        Get one page of a diner's orders, oldest first.

        Args:
            diner_id: The ordering user
            page: Page number (1-indexed)
            per_page: Orders per page
        """
        rows = await self._db.execute(
            "SELECT id, franchise_id, store_id, ordered_at FROM diner_order "
            "WHERE diner_id = :diner_id ORDER BY id LIMIT :limit OFFSET :offset",
            {"diner_id": diner_id, "limit": per_page, "offset": get_offset(page, per_page)},
        )

        orders = []
        for row in rows:
            items = await self._db.execute(
                "SELECT id, menu_id, description, price FROM order_item "
                "WHERE order_id = :order_id ORDER BY id",
                {"order_id": row["id"]},
            )
            orders.append(Order(
                id=row["id"],
                franchise_id=row["franchise_id"],
                store_id=row["store_id"],
                date=row["ordered_at"],
                items=[self._map_to_item(item) for item in items],
            ))
        return orders

    async def add_diner_order(self, diner_id: int, request: OrderRequest) -> Order:
        """
        Store an order and its items in one transaction.

        Raises:
            UnknownMenuItemError: If any item references a missing menu id
        """
        ordered_at = datetime.now(timezone.utc).isoformat(timespec="seconds")

        async with self._db.transaction() as tx:
            known = await tx.execute("SELECT id FROM menu")
            self._check_menu_ids((row["id"] for row in known), request.items)

            rows = await tx.execute(
                "INSERT INTO diner_order (diner_id, franchise_id, store_id, ordered_at) "
                "VALUES (:diner_id, :franchise_id, :store_id, :ordered_at) RETURNING id",
                {
                    "diner_id": diner_id,
                    "franchise_id": request.franchise_id,
                    "store_id": request.store_id,
                    "ordered_at": ordered_at,
                },
            )
            order_id = rows[0]["id"]

            items = []
            for item in request.items:
                item_rows = await tx.execute(
                    "INSERT INTO order_item (order_id, menu_id, description, price) "
                    "VALUES (:order_id, :menu_id, :description, :price) RETURNING id",
                    {
                        "order_id": order_id,
                        "menu_id": item.menu_id,
                        "description": item.description,
                        "price": item.price,
                    },
                )
                items.append(item.model_copy(update={"id": item_rows[0]["id"]}))

        return Order(
            id=order_id,
            franchise_id=request.franchise_id,
            store_id=request.store_id,
            date=ordered_at,
            items=items,
        )

    # -------------------------------------------------------------------------
    # Mapping helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _check_menu_ids(known_ids: Iterable[int], items: list[OrderItem]) -> None:
        known = set(known_ids)
        for item in items:
            if item.menu_id not in known:
                raise UnknownMenuItemError(item.menu_id)

    @staticmethod
    def _map_to_item(row) -> OrderItem:
        return OrderItem(
            id=row["id"],
            menu_id=row["menu_id"],
            description=row["description"],
            price=row["price"],
        )
