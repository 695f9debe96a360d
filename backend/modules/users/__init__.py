"""
Users module.

Handles user persistence, profile updates and the /api/user endpoints.

Public API:
- User: Outward-facing user model
- UpdateUserRequest, UserListResponse: Request/response models
- UnknownUserError, EmailInUseError: Exceptions
"""

from .models import User, UpdateUserRequest, UserListResponse
from .exceptions import UnknownUserError, EmailInUseError

__all__ = [
    "User",
    "UpdateUserRequest",
    "UserListResponse",
    "UnknownUserError",
    "EmailInUseError",
]
