"""
Franchises module data models.

A franchise owns its stores; its admins are users holding a franchisee
role whose objectId is the franchise id.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class FranchiseAdmin(BaseModel):
    """A user who administers a franchise."""

    id: int
    name: str
    email: str


class Store(BaseModel):
    """
    A store of a franchise.

    total_revenue is only filled in for views that show revenue
    (Admins and franchise admins).
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int
    franchise_id: Optional[int] = Field(default=None, alias="franchiseId")
    name: str
    total_revenue: Optional[float] = Field(default=None, alias="totalRevenue")


class Franchise(BaseModel):
    """A franchise with its stores. admins is None in the public view."""

    id: int
    name: str
    admins: Optional[list[FranchiseAdmin]] = None
    stores: list[Store] = Field(default_factory=list)


class AdminRef(BaseModel):
    """Reference to a would-be franchise admin, by email."""

    email: str
    id: Optional[int] = None
    name: Optional[str] = None


class CreateFranchiseRequest(BaseModel):
    """
    Body of POST /api/franchise.

    name is optional here so the Admin check runs before field validation.
    """

    name: Optional[str] = None
    admins: list[AdminRef] = Field(default_factory=list)


class CreateStoreRequest(BaseModel):
    """Body of POST /api/franchise/:franchiseId/store."""

    name: Optional[str] = None


class FranchiseListResponse(BaseModel):
    """One page of franchises."""

    franchises: list[Franchise]
    more: bool
