"""
Order service implementation.

Menu administration plus order placement. An order is stored before it
is sent to the factory, so a factory failure leaves the order on record.
"""

import logging

from shared.models import Principal
from modules.auth.exceptions import PermissionDeniedError
from modules.auth.policy import is_admin

from .exceptions import InvalidMenuItemError
from .interfaces import IFactoryClient
from .models import MenuItem, MenuItemCreate, OrderPage, OrderRequest, OrderResponse
from .repository import OrderRepository

logger = logging.getLogger(__name__)


class OrderService:
    """Menu and order operations."""

    def __init__(
        self,
        repository: OrderRepository,
        factory: IFactoryClient,
        per_page: int = 10,
    ):
        self._repository = repository
        self._factory = factory
        self._per_page = per_page

    async def get_menu(self) -> list[MenuItem]:
        return await self._repository.get_menu()

    async def add_menu_item(self, principal: Principal, request: MenuItemCreate) -> list[MenuItem]:
        """
        Add a menu item (Admin only) and return the whole menu.

        Raises:
            PermissionDeniedError: If the principal is not an Admin
            InvalidMenuItemError: If title or price is missing
        """
        if not is_admin(principal):
            raise PermissionDeniedError("unable to add menu item", user_id=principal.id)
        if not request.title or request.price is None:
            raise InvalidMenuItemError()

        item = await self._repository.add_menu_item(
            request.title,
            request.price,
            description=request.description,
            image=request.image,
        )
        logger.info("Menu item %s added by %s", item.id, principal.id)
        return await self._repository.get_menu()

    async def get_orders(self, principal: Principal, page: int = 1) -> OrderPage:
        """Get one page (1-indexed) of the principal's orders."""
        orders = await self._repository.get_orders(principal.id, page, self._per_page)
        return OrderPage(diner_id=principal.id, orders=orders, page=page)

    async def create_order(self, principal: Principal, request: OrderRequest) -> OrderResponse:
        """
        Store an order and send it to the factory.

        Raises:
            UnknownMenuItemError: If an item references a missing menu id
            FactoryError: If the factory rejects the order or can't be reached
        """
        order = await self._repository.add_diner_order(principal.id, request)
        diner = {"id": principal.id, "name": principal.name, "email": principal.email}

        receipt = await self._factory.submit_order(diner, order.model_dump(by_alias=True))
        logger.info("Order %s fulfilled for diner %s", order.id, principal.id)
        return OrderResponse(
            order=order,
            follow_link_to_end_chaos=receipt.report_url,
            report_url=receipt.report_url,
            jwt=receipt.jwt,
        )
