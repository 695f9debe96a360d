import pytest

from modules.orders.exceptions import UnknownMenuItemError
from modules.orders.models import OrderItem, OrderRequest
from modules.orders.repository import OrderRepository


class TestOrderRepository:
    @pytest.fixture
    def repo(self, database):
        return OrderRepository(database)

    @pytest.mark.asyncio
    async def test_menu(self, repo):
        assert await repo.get_menu() == []
        veggie = await repo.add_menu_item("Veggie", 0.0038, description="A garden of delight", image="pizza1.png")
        pepperoni = await repo.add_menu_item("Pepperoni", 0.0042)

        menu = await repo.get_menu()
        assert [item.id for item in menu] == [veggie.id, pepperoni.id]
        assert menu[0].description == "A garden of delight"
        assert menu[1].image == ""

    @pytest.mark.asyncio
    async def test_add_and_get_orders(self, repo):
        veggie = await repo.add_menu_item("Veggie", 0.05)
        request = OrderRequest(
            franchise_id=1,
            store_id=2,
            items=[OrderItem(menu_id=veggie.id, description="Veggie", price=0.05)],
        )

        order = await repo.add_diner_order(7, request)
        assert order.items[0].id is not None
        assert order.date

        orders = await repo.get_orders(7)
        assert orders == [order]
        assert await repo.get_orders(8) == []

    @pytest.mark.asyncio
    async def test_orders_are_paged(self, repo):
        for _ in range(3):
            await repo.add_diner_order(7, OrderRequest(franchise_id=1, store_id=1, items=[]))

        assert len(await repo.get_orders(7, page=1, per_page=2)) == 2
        assert len(await repo.get_orders(7, page=2, per_page=2)) == 1

    @pytest.mark.asyncio
    async def test_unknown_menu_item_stores_nothing(self, repo, database):
        request = OrderRequest(
            franchise_id=1,
            store_id=1,
            items=[OrderItem(menu_id=42, description="Ghost", price=1.0)],
        )
        with pytest.raises(UnknownMenuItemError) as exc_info:
            await repo.add_diner_order(7, request)
        assert exc_info.value.message == "unknown menu item 42"
        assert await database.execute("SELECT id FROM diner_order") == []
