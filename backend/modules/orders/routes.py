"""
Order API endpoints.

The menu is public; ordering and order history need a logged-in user.
"""

from fastapi import APIRouter, Depends, Query

from api.middleware.auth import get_current_principal
from api.dependencies import get_order_service
from shared.models import Principal

from .models import MenuItem, MenuItemCreate, OrderPage, OrderRequest, OrderResponse
from .service import OrderService

router = APIRouter()


@router.get("/menu", response_model=list[MenuItem])
async def get_menu(
    service: OrderService = Depends(get_order_service),
) -> list[MenuItem]:
    """Get the pizza menu."""
    return await service.get_menu()


@router.put("/menu", response_model=list[MenuItem])
async def add_menu_item(
    request: MenuItemCreate,
    principal: Principal = Depends(get_current_principal),
    service: OrderService = Depends(get_order_service),
) -> list[MenuItem]:
    """Add an item to the menu. Admin only."""
    return await service.add_menu_item(principal, request)


@router.get("", response_model=OrderPage)
async def get_orders(
    page: int = Query(default=1, ge=1, description="Page number (1-indexed)"),
    principal: Principal = Depends(get_current_principal),
    service: OrderService = Depends(get_order_service),
) -> OrderPage:
    """Get the authenticated diner's orders."""
    return await service.get_orders(principal, page)


@router.post("", response_model=OrderResponse)
async def create_order(
    request: OrderRequest,
    principal: Principal = Depends(get_current_principal),
    service: OrderService = Depends(get_order_service),
) -> OrderResponse:
    """
    Place an order.

    The order is stored, then forwarded to the pizza factory. The response
    carries the factory's report link and signed order token.
    """
    return await service.create_order(principal, request)
