import logging

from storefront.core.exceptions import StorefrontError
from storefront.core.gateway import DataGateway
from storefront.core.states import AuthSession, Role
from storefront.services.inventory_service import InventoryService
from storefront.services.report_service import ReportService
from storefront.services.store_service import StoreService
from storefront.utils.console import Console, print_table
from storefront.utils.permissions import require_role
from storefront.utils.validators import prompt_price, prompt_stock_level, prompt_units

logger = logging.getLogger(__name__)


async def choose_managed_store(
    console: Console, state: AuthSession, gateway: DataGateway
) -> int:
    """
    Shows the manager's stores and asks which one to work with.

    Raises:
        StoreNotFoundError: If the entered store is not run by this manager
    """
    store_service = StoreService(gateway)
    store_ids = await store_service.get_manager_store_ids(state.user_id)
    print_table(console, await store_service.describe(store_ids))

    store_id = console.prompt_int("\tEnter Store ID")
    await store_service.ensure_managed_by(store_id, state.user_id)
    return store_id


async def cmd_update_product(console: Console, state: AuthSession, gateway: DataGateway):
    """Change stock and/or price of a product in one of the manager's stores"""
    if not require_role(state, Role.MANAGER, console):
        return

    try:
        inventory = InventoryService(gateway)
        store_id = await choose_managed_store(console, state, gateway)
        print_table(console, await inventory.list_products(store_id))
        product_name = console.prompt("\tEnter Product Name")

        units = None
        if console.confirm("\tUpdate number of units?"):
            units = prompt_stock_level(console, "\tEnter new number of units")

        price = None
        if console.confirm("\tUpdate price per unit?"):
            price = prompt_price(console, "\tEnter new price per unit")

        changed = await inventory.update_product(
            state.user_id, store_id, product_name, units=units, price=price
        )
    except StorefrontError as e:
        logger.error("Product update by manager %s failed: %s", state.user_id, e)
        console.error(str(e))
        return

    if not changed:
        console.echo("Nothing to update.")
        return
    if units is not None:
        console.echo(f"Updated {product_name} to {units} number of units.")
    if price is not None:
        console.echo(f"Updated {product_name} to ${price:.2f} per unit.")


async def cmd_view_recent_updates(
    console: Console, state: AuthSession, gateway: DataGateway
):
    if not require_role(state, Role.MANAGER, console):
        return

    try:
        print_table(console, await ReportService(gateway).recent_updates(state.user_id))
    except StorefrontError as e:
        logger.error("Listing product updates failed: %s", e)
        console.error(str(e))


async def cmd_view_popular_products(
    console: Console, state: AuthSession, gateway: DataGateway
):
    if not require_role(state, Role.MANAGER, console):
        return

    try:
        store_id = await choose_managed_store(console, state, gateway)
        print_table(console, await ReportService(gateway).popular_products(store_id))
    except StorefrontError as e:
        logger.error("Listing popular products failed: %s", e)
        console.error(str(e))


async def cmd_view_popular_customers(
    console: Console, state: AuthSession, gateway: DataGateway
):
    if not require_role(state, Role.MANAGER, console):
        return

    try:
        store_id = await choose_managed_store(console, state, gateway)
        print_table(console, await ReportService(gateway).popular_customers(store_id))
    except StorefrontError as e:
        logger.error("Listing popular customers failed: %s", e)
        console.error(str(e))


async def cmd_place_supply_request(
    console: Console, state: AuthSession, gateway: DataGateway
):
    """Request units of a product from a warehouse"""
    if not require_role(state, Role.MANAGER, console):
        return

    try:
        inventory = InventoryService(gateway)
        store_id = await choose_managed_store(console, state, gateway)
        print_table(console, await inventory.list_product_names(store_id))
        product_name = console.prompt("\tEnter Product Name")

        print_table(console, await inventory.list_warehouses())
        warehouse_id = console.prompt_int("\tEnter Warehouse ID")
        units = prompt_units(console, "\tEnter number of units needed")

        await inventory.request_supply(
            state.user_id, warehouse_id, store_id, product_name, units
        )
    except StorefrontError as e:
        logger.error("Supply request by manager %s failed: %s", state.user_id, e)
        console.error(str(e))
        return

    console.echo(f"\t{units} units of {product_name} have been requested.")


async def cmd_view_all_orders(console: Console, state: AuthSession, gateway: DataGateway):
    if not require_role(state, Role.MANAGER, console):
        return

    try:
        store_id = await choose_managed_store(console, state, gateway)
        print_table(console, await ReportService(gateway).store_orders(store_id))
    except StorefrontError as e:
        logger.error("Listing orders failed: %s", e)
        console.error(str(e))
