import logging

from storefront.core.exceptions import StoreNotFoundError, StorefrontError
from storefront.core.gateway import DataGateway
from storefront.core.states import AuthSession
from storefront.services.inventory_service import InventoryService
from storefront.services.report_service import ReportService
from storefront.services.store_service import StoreService
from storefront.utils.console import Console, print_table
from storefront.utils.validators import prompt_units

logger = logging.getLogger(__name__)


async def cmd_view_stores(console: Console, state: AuthSession, gateway: DataGateway):
    """Stores within the configured radius of the user"""
    try:
        store_service = StoreService(gateway)
        store_ids = await store_service.get_nearby_store_ids_for_user(state.user_id)
        print_table(console, await store_service.describe(store_ids))
    except StorefrontError as e:
        logger.error("Listing nearby stores failed: %s", e)
        console.error(str(e))


async def cmd_view_products(console: Console, state: AuthSession, gateway: DataGateway):
    store_id = console.prompt_int("\tEnter Store ID")
    try:
        print_table(console, await InventoryService(gateway).list_products(store_id))
    except StorefrontError as e:
        logger.error("Listing products of store %s failed: %s", store_id, e)
        console.error(str(e))


async def cmd_place_order(console: Console, state: AuthSession, gateway: DataGateway):
    """Order units of a product from one of the nearby stores"""
    try:
        store_service = StoreService(gateway)
        inventory = InventoryService(gateway)

        store_ids = await store_service.get_nearby_store_ids_for_user(state.user_id)
        print_table(console, await store_service.describe(store_ids))
        if not store_ids:
            console.echo("There are no stores near you.")
            return

        store_id = console.prompt_int("\tEnter Store ID")
        if store_id not in store_ids:
            raise StoreNotFoundError(store_id)

        print_table(console, await inventory.list_product_names(store_id))
        product_name = console.prompt("\tEnter Product Name")
        units = prompt_units(console, "\tEnter number of units to order")

        order_number = await inventory.place_order(
            state.user_id, store_id, product_name, units
        )
    except StorefrontError as e:
        logger.error("Order by user %s failed: %s", state.user_id, e)
        console.error(str(e))
        return

    console.echo(f"\t{units} units of {product_name} have been ordered.")
    if order_number > 0:
        console.echo(f"\tOrder number: {order_number}")


async def cmd_view_recent_orders(
    console: Console, state: AuthSession, gateway: DataGateway
):
    try:
        print_table(console, await ReportService(gateway).recent_orders(state.user_id))
    except StorefrontError as e:
        logger.error("Listing recent orders failed: %s", e)
        console.error(str(e))
