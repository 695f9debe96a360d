import json

import httpx
import pytest

from modules.orders.exceptions import FACTORY_DEFAULT_MESSAGE, FactoryError
from modules.orders.factory import FactoryClient
from modules.orders.interfaces import IFactoryClient


DINER = {"id": 1, "name": "pizza diner", "email": "d@jwt.com"}
ORDER = {"id": 5, "franchiseId": 1, "storeId": 1, "date": "2024-01-01T00:00:00+00:00", "items": []}


def make_client(handler) -> FactoryClient:
    return FactoryClient(
        "http://factory.test/",
        "factory-key",
        timeout=5.0,
        transport=httpx.MockTransport(handler),
    )


class TestFactoryClient:
    def test_implements_interface(self):
        assert isinstance(make_client(lambda request: httpx.Response(200)), IFactoryClient)

    @pytest.mark.asyncio
    async def test_submit_order(self):
        """Should POST {diner, order} with the API key and parse the receipt."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"reportUrl": "http://factory.test/report/5", "jwt": "signed"})

        receipt = await make_client(handler).submit_order(DINER, ORDER)

        assert receipt.report_url == "http://factory.test/report/5"
        assert receipt.jwt == "signed"
        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == "http://factory.test/api/order"
        assert request.headers["Authorization"] == "Bearer factory-key"
        assert json.loads(request.content) == {"diner": DINER, "order": ORDER}

    @pytest.mark.asyncio
    async def test_rejection_carries_factory_message(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, json={"message": "oven on fire", "reportUrl": "http://factory.test/r"})

        with pytest.raises(FactoryError) as exc_info:
            await make_client(handler).submit_order(DINER, ORDER)

        error = exc_info.value
        assert error.message == "oven on fire"
        assert error.status_code == 500
        assert error.to_response() == {
            "message": "oven on fire",
            "followLinkToEndChaos": "http://factory.test/r",
        }

    @pytest.mark.asyncio
    async def test_rejection_without_body_uses_default_message(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503, text="unavailable")

        with pytest.raises(FactoryError) as exc_info:
            await make_client(handler).submit_order(DINER, ORDER)
        assert exc_info.value.message == FACTORY_DEFAULT_MESSAGE
        assert exc_info.value.report_url is None

    @pytest.mark.asyncio
    async def test_transport_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(FactoryError) as exc_info:
            await make_client(handler).submit_order(DINER, ORDER)
        assert exc_info.value.message == FACTORY_DEFAULT_MESSAGE
        assert exc_info.value.service == "factory"
