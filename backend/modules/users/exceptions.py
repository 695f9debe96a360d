"""
Users module exceptions.
"""

from shared.exceptions import NotFoundError, ValidationError


class UnknownUserError(NotFoundError):
    """
    Raised when a user lookup fails.

    Login uses this for both an unknown email and a wrong password so the
    response doesn't reveal which one was wrong.
    """

    def __init__(self):
        super().__init__("unknown user", code="UNKNOWN_USER")


class EmailInUseError(ValidationError):
    """Raised when registering or updating to an email that another user has."""

    def __init__(self, email: str):
        super().__init__(
            "email already in use",
            code="EMAIL_IN_USE",
            details={"email": email},
        )
