"""
Orders module.

Handles the menu, diner orders and fulfillment through the pizza factory.

Public API:
- IFactoryClient: Interface for the factory
- MenuItem, Order, OrderRequest, OrderResponse, OrderPage: Data models
- UnknownMenuItemError, FactoryError: Exceptions
"""

from .interfaces import IFactoryClient
from .models import (
    MenuItem,
    MenuItemCreate,
    OrderItem,
    OrderRequest,
    Order,
    OrderPage,
    OrderResponse,
    FactoryReceipt,
)
from .exceptions import UnknownMenuItemError, InvalidMenuItemError, FactoryError

__all__ = [
    # Interfaces
    "IFactoryClient",
    # Models
    "MenuItem",
    "MenuItemCreate",
    "OrderItem",
    "OrderRequest",
    "Order",
    "OrderPage",
    "OrderResponse",
    "FactoryReceipt",
    # Exceptions
    "UnknownMenuItemError",
    "InvalidMenuItemError",
    "FactoryError",
]
