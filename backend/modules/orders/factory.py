"""
HTTP client for the pizza factory.

The factory is opaque: we POST {diner, order} and get back a report link
and a signed order token, or an error body with a message.
"""

import logging
from typing import Any, Optional

import httpx

from .exceptions import FactoryError
from .interfaces import IFactoryClient
from .models import FactoryReceipt

logger = logging.getLogger(__name__)


class FactoryClient(IFactoryClient):
    """
    Async factory client.

    A transport can be injected (httpx.MockTransport in tests) to stand in
    for the real factory.
    """

    def __init__(
        self,
        url: str,
        api_key: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._url = url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout
        self._transport = transport

    async def submit_order(self, diner: dict[str, Any], order: dict[str, Any]) -> FactoryReceipt:
        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self._timeout) as client:
                response = await client.post(
                    f"{self._url}/api/order",
                    json={"diner": diner, "order": order},
                    headers={
                        "Authorization": f"Bearer {self._api_key}",
                        "Content-Type": "application/json",
                    },
                )
        except httpx.HTTPError as e:
            logger.warning("Factory unreachable: %s", e.__class__.__name__)
            raise FactoryError() from e

        body = self._json_body(response)
        if not response.is_success:
            logger.warning("Factory rejected order %s with status %s", order.get("id"), response.status_code)
            raise FactoryError(
                body.get("message"),
                report_url=body.get("reportUrl"),
                status=response.status_code,
            )

        return FactoryReceipt.model_validate(body)

    @staticmethod
    def _json_body(response: httpx.Response) -> dict[str, Any]:
        try:
            data = response.json()
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}
