"""
Orders module exceptions.
"""

from typing import Any, Optional

from shared.exceptions import ExternalServiceError, NotFoundError, ValidationError

FACTORY_DEFAULT_MESSAGE = "Failed to fulfill order at factory"


class UnknownMenuItemError(NotFoundError):
    """Raised when an order references a menu item that doesn't exist."""

    def __init__(self, menu_id: int):
        super().__init__(
            f"unknown menu item {menu_id}",
            code="UNKNOWN_MENU_ITEM",
            details={"menu_id": menu_id},
        )
        self.menu_id = menu_id


class InvalidMenuItemError(ValidationError):
    """Raised when a new menu item lacks a title or price."""

    def __init__(self):
        super().__init__("title and price are required", code="INVALID_MENU_ITEM")


class FactoryError(ExternalServiceError):
    """
    Raised when the pizza factory rejects an order or can't be reached.

    The client still gets the factory's report link when one was returned.
    """

    def __init__(
        self,
        message: Optional[str] = None,
        report_url: Optional[str] = None,
        status: Optional[int] = None,
    ):
        super().__init__(
            message or FACTORY_DEFAULT_MESSAGE,
            service="factory",
            code="FACTORY_ERROR",
            details={"status": status},
        )
        self.report_url = report_url

    def to_response(self) -> dict[str, Any]:
        body = super().to_response()
        body["followLinkToEndChaos"] = self.report_url
        return body
