"""
Shared infrastructure for the pizza service backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Async relational store and schema
- exceptions: Base exception classes and the error-kind taxonomy
- models: Principal and role types

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import Database, Transaction
from .exceptions import (
    ErrorKind,
    STATUS_BY_KIND,
    PizzaError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    InternalError,
    ExternalServiceError,
)
from .models import Principal, Role, RoleAssignment

__all__ = [
    "Settings",
    "get_settings",
    "Database",
    "Transaction",
    "ErrorKind",
    "STATUS_BY_KIND",
    "PizzaError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "InternalError",
    "ExternalServiceError",
    "Principal",
    "Role",
    "RoleAssignment",
]
