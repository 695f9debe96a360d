"""
Franchises module exceptions.
"""

from shared.exceptions import InternalError, NotFoundError, ValidationError


class UnknownFranchiseAdminError(NotFoundError):
    """Raised when a new franchise names an admin email nobody has."""

    def __init__(self, email: str):
        super().__init__(
            f"unknown user for franchise admin {email} provided",
            code="UNKNOWN_FRANCHISE_ADMIN",
        )


class DuplicateFranchiseError(ValidationError):
    """Raised when a franchise name is already taken."""

    def __init__(self, name: str):
        super().__init__(
            "franchise already exists",
            code="DUPLICATE_FRANCHISE",
            details={"name": name},
        )


class MissingNameError(ValidationError):
    """Raised when a franchise or store is created without a name."""

    def __init__(self, what: str):
        super().__init__(f"{what} name is required", code="MISSING_NAME")


class FranchiseDeleteError(InternalError):
    """Raised when deleting a franchise fails and is rolled back."""

    def __init__(self, franchise_id: int):
        super().__init__(
            "unable to delete franchise",
            code="FRANCHISE_DELETE_FAILED",
            details={"franchise_id": franchise_id},
        )
