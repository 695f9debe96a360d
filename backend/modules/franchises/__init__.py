"""
Franchises module.

Handles franchises, their stores and their admins.

Public API:
- Franchise, Store, FranchiseAdmin: Data models
- CreateFranchiseRequest, CreateStoreRequest, FranchiseListResponse: Request/response models
- Franchise exceptions: UnknownFranchiseAdminError, FranchiseDeleteError, etc.
"""

from .models import (
    Franchise,
    FranchiseAdmin,
    Store,
    AdminRef,
    CreateFranchiseRequest,
    CreateStoreRequest,
    FranchiseListResponse,
)
from .exceptions import (
    UnknownFranchiseAdminError,
    DuplicateFranchiseError,
    MissingNameError,
    FranchiseDeleteError,
)

__all__ = [
    # Models
    "Franchise",
    "FranchiseAdmin",
    "Store",
    "AdminRef",
    "CreateFranchiseRequest",
    "CreateStoreRequest",
    "FranchiseListResponse",
    # Exceptions
    "UnknownFranchiseAdminError",
    "DuplicateFranchiseError",
    "MissingNameError",
    "FranchiseDeleteError",
]
