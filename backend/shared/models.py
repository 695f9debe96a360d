"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Roles a user can hold. Values are the wire/storage representation."""

    DINER = "diner"
    FRANCHISEE = "franchisee"
    ADMIN = "admin"


class RoleAssignment(BaseModel):
    """
    A single role held by a user.

    Franchisee assignments carry the id of the franchise they administer
    in object_id (serialized as objectId).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    role: Role
    object_id: Optional[int] = Field(default=None, alias="objectId")


class Principal(BaseModel):
    """
    The authenticated identity behind a request.

    Built fresh for every request from verified token claims and made
    available to route handlers via dependency injection. Never persisted
    and never mutated.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int = Field(..., description="User ID")
    name: str = Field(default="", description="Display name")
    email: str = Field(default="", description="Email address")
    roles: tuple[RoleAssignment, ...] = Field(default=(), description="Role assignments")

    def has_role(self, role: Role) -> bool:
        """Return True if any of the principal's assignments is for role."""
        return any(assignment.role == role for assignment in self.roles)

    @classmethod
    def from_claims(cls, claims: dict[str, Any]) -> "Principal":
        """Build a principal from decoded token claims."""
        return cls.model_validate(claims)

    def to_user(self) -> dict[str, Any]:
        """Outward-facing user object for this principal."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "roles": [r.model_dump(by_alias=True, exclude_none=True) for r in self.roles],
        }
