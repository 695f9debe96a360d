"""
Orders module data models.

Menu items, diner orders and the bodies of the /api/order endpoints.
Wire names are camelCase (franchiseId, menuId, ...); Python attributes
are snake_case.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class MenuItem(BaseModel):
    """A pizza on the menu."""

    id: int
    title: str
    description: str = ""
    image: str = ""
    price: float


class MenuItemCreate(BaseModel):
    """
    New menu item.

    Fields are optional so the Admin check runs before field validation.
    """

    title: Optional[str] = None
    description: str = ""
    image: str = ""
    price: Optional[float] = Field(default=None, ge=0)


class OrderItem(BaseModel):
    """One line of an order."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = None
    menu_id: int = Field(..., alias="menuId")
    description: str
    price: float


class OrderRequest(BaseModel):
    """Body of POST /api/order."""

    model_config = ConfigDict(populate_by_name=True)

    franchise_id: int = Field(..., alias="franchiseId")
    store_id: int = Field(..., alias="storeId")
    items: list[OrderItem] = Field(default_factory=list)


class Order(BaseModel):
    """A stored diner order."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    franchise_id: int = Field(..., alias="franchiseId")
    store_id: int = Field(..., alias="storeId")
    date: str
    items: list[OrderItem] = Field(default_factory=list)


class OrderPage(BaseModel):
    """One page of a diner's order history."""

    model_config = ConfigDict(populate_by_name=True)

    diner_id: int = Field(..., alias="dinerId")
    orders: list[Order]
    page: int


class FactoryReceipt(BaseModel):
    """What the factory hands back for a fulfilled order."""

    model_config = ConfigDict(populate_by_name=True)

    report_url: Optional[str] = Field(default=None, alias="reportUrl")
    jwt: Optional[str] = None


class OrderResponse(BaseModel):
    """Body returned after a successful order."""

    model_config = ConfigDict(populate_by_name=True)

    order: Order
    follow_link_to_end_chaos: Optional[str] = Field(default=None, alias="followLinkToEndChaos")
    report_url: Optional[str] = Field(default=None, alias="reportUrl")
    jwt: Optional[str] = None
