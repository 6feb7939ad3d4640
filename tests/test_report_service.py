import pytest

from storefront.services.inventory_service import InventoryService
from storefront.services.report_service import ReportService


@pytest.mark.asyncio
async def test_recent_orders_newest_first(seeded):
    inventory = InventoryService(seeded, enforce_stock=False)
    for units in range(1, 7):
        await inventory.place_order(1, 1, "Apple", units)
    await inventory.place_order(4, 1, "Apple", 9)

    result = await ReportService(seeded).recent_orders(1)

    assert len(result.columns) == 4
    assert [row[2] for row in result.rows] == ["6", "5", "4", "3", "2"]


@pytest.mark.asyncio
async def test_recent_orders_limit_is_configurable(seeded):
    inventory = InventoryService(seeded)
    for _ in range(3):
        await inventory.place_order(1, 1, "Banana", 1)

    result = await ReportService(seeded, recent_limit=2).recent_orders(1)
    assert len(result.rows) == 2


@pytest.mark.asyncio
async def test_recent_updates_of_manager(seeded):
    inventory = InventoryService(seeded)
    await inventory.update_product(2, 1, "Apple", units=1)
    await inventory.update_product(2, 2, "Apple", price=3.0)
    await inventory.update_product(5, 3, "Milk", units=2)

    result = await ReportService(seeded).recent_updates(2)

    assert [(row[1], row[2]) for row in result.rows] == [("2", "Apple"), ("1", "Apple")]


@pytest.mark.asyncio
async def test_popular_products(seeded):
    inventory = InventoryService(seeded)
    await inventory.place_order(1, 1, "Banana", 1)
    for _ in range(3):
        await inventory.place_order(1, 1, "Apple", 1)
    await inventory.place_order(1, 2, "Apple", 1)

    result = await ReportService(seeded).popular_products(1)

    assert result.rows == [["Apple", "3"], ["Banana", "1"]]


@pytest.mark.asyncio
async def test_popular_customers_have_names(seeded):
    inventory = InventoryService(seeded)
    await inventory.place_order(4, 1, "Apple", 1)
    await inventory.place_order(1, 1, "Apple", 1)
    await inventory.place_order(1, 1, "Banana", 1)

    result = await ReportService(seeded).popular_customers(1)

    assert result.rows == [["1", "alice", "2"], ["4", "bob", "1"]]


@pytest.mark.asyncio
async def test_store_orders_join_customer_names(seeded):
    inventory = InventoryService(seeded)
    await inventory.place_order(1, 1, "Apple", 1)
    await inventory.place_order(4, 2, "Apple", 1)

    result = await ReportService(seeded).store_orders(1)

    assert len(result.rows) == 1
    order_number, name, store_id, product_name, order_time = result.rows[0]
    assert (order_number, name, store_id, product_name) == ("1", "alice", "1", "Apple")
    assert order_time is not None
