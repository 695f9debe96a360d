"""
Authentication module.

Handles session tokens, the active-session store, password hashing,
the permission policy and the /api/auth endpoints.

Public API:
- ITokenService, ICredentialStore, IAuthService: Interfaces
- RegisterRequest, LoginRequest, AuthResponse: Request/response models
- Auth exceptions: InvalidTokenError, MissingTokenError, etc.
"""

from .interfaces import IAuthService, ICredentialStore, ITokenService
from .models import RegisterRequest, LoginRequest, AuthResponse, MessageResponse
from .exceptions import (
    InvalidTokenError,
    MissingTokenError,
    MissingFieldsError,
    PermissionDeniedError,
)

__all__ = [
    # Interfaces
    "IAuthService",
    "ICredentialStore",
    "ITokenService",
    # Models
    "RegisterRequest",
    "LoginRequest",
    "AuthResponse",
    "MessageResponse",
    # Exceptions
    "InvalidTokenError",
    "MissingTokenError",
    "MissingFieldsError",
    "PermissionDeniedError",
]
