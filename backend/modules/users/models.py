"""
Users module data models.

Outward-facing user objects never carry the password hash.
"""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field

from shared.models import RoleAssignment


class User(BaseModel):
    """A registered user as returned by the API and embedded in tokens."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., description="User ID")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address")
    roles: list[RoleAssignment] = Field(default_factory=list, description="Role assignments")

    def to_claims(self) -> dict[str, Any]:
        """Claims to sign into a session token."""
        return self.model_dump(by_alias=True, exclude_none=True)


class UpdateUserRequest(BaseModel):
    """Profile update. Omitted fields are left unchanged."""

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


class UserListResponse(BaseModel):
    """One page of users."""

    users: list[User]
    more: bool
