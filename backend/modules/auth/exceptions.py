"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import AuthenticationError, AuthorizationError, ValidationError


class InvalidTokenError(AuthenticationError):
    """Raised when a token is malformed or its signature doesn't verify."""

    def __init__(self, message: str = "invalid token"):
        super().__init__(message, code="INVALID_TOKEN")


class MissingTokenError(AuthenticationError):
    """Raised when a protected route is called without an active session."""

    def __init__(self, message: str = "unauthorized"):
        super().__init__(message, code="UNAUTHORIZED")


class MissingFieldsError(ValidationError):
    """Raised when registration is missing name, email or password."""

    def __init__(self):
        super().__init__(
            "name, email, and password are required",
            code="MISSING_FIELDS",
        )


class PermissionDeniedError(AuthorizationError):
    """
    Raised when the principal lacks the relationship a route requires.

    The message names the attempted action (e.g. "unable to create a store").
    """

    def __init__(self, message: str, user_id: int | None = None):
        super().__init__(
            message,
            code="FORBIDDEN",
            details={"user_id": user_id},
        )
