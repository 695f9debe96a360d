"""
Base exception classes for the pizza service backend.

Each module should define its own exceptions that inherit from these bases.
Every exception carries an ErrorKind; the API boundary maps the kind to an
HTTP status code with STATUS_BY_KIND, so services never deal in status codes.
"""

from enum import Enum
from typing import Optional, Any


class ErrorKind(str, Enum):
    """Category of a service failure."""

    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.BAD_REQUEST: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INTERNAL: 500,
}


class PizzaError(Exception):
    """
    Base exception for all pizza service errors.

    All custom exceptions should inherit from this class.
    """

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    @property
    def status_code(self) -> int:
        """HTTP status for this error's kind."""
        return STATUS_BY_KIND[self.kind]

    def to_response(self) -> dict[str, Any]:
        """Body returned to the client. Details stay server-side."""
        return {"message": self.message}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for logs."""
        return {
            "error": self.code,
            "kind": self.kind.value,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(PizzaError):
    """Input validation failed."""

    kind = ErrorKind.BAD_REQUEST


class AuthenticationError(PizzaError):
    """Authentication failed (invalid or missing credentials)."""

    kind = ErrorKind.UNAUTHORIZED


class AuthorizationError(PizzaError):
    """Authorization failed (insufficient permissions)."""

    kind = ErrorKind.FORBIDDEN


class NotFoundError(PizzaError):
    """Resource not found."""

    kind = ErrorKind.NOT_FOUND


class InternalError(PizzaError):
    """Storage or other internal failure. The message never carries driver detail."""

    kind = ErrorKind.INTERNAL


class ExternalServiceError(PizzaError):
    """Error communicating with an external service."""

    kind = ErrorKind.INTERNAL

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
