"""
Orders module interfaces.
"""

from typing import Any, Protocol, runtime_checkable

from .models import FactoryReceipt


@runtime_checkable
class IFactoryClient(Protocol):
    """The external service that actually makes the pizzas."""

    async def submit_order(self, diner: dict[str, Any], order: dict[str, Any]) -> FactoryReceipt:
        """
        Hand an order to the factory.

        Args:
            diner: {id, name, email} of the ordering user
            order: The stored order in wire format

        Returns:
            The factory's receipt (report link and signed order token)

        Raises:
            FactoryError: If the factory answers non-2xx or can't be reached
        """
        ...
