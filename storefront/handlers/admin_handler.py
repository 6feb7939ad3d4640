import logging

from storefront.core.exceptions import StorefrontError
from storefront.core.gateway import DataGateway
from storefront.core.states import AuthSession, Role
from storefront.services.inventory_service import InventoryService
from storefront.services.user_service import UserService
from storefront.utils.console import Console, print_table
from storefront.utils.menu import ADMIN_MENU_TEXT, UNRECOGNIZED_TEXT, read_choice
from storefront.utils.permissions import require_role
from storefront.utils.validators import prompt_price, prompt_role, prompt_stock_level

logger = logging.getLogger(__name__)

RETURN_CHOICE = 20


async def cmd_view_users(console: Console, state: AuthSession, gateway: DataGateway):
    if not require_role(state, Role.ADMIN, console):
        return

    try:
        print_table(console, await UserService(gateway).list_users())
    except StorefrontError as e:
        logger.error("Listing users failed: %s", e)
        console.error(str(e))


async def cmd_view_products(console: Console, state: AuthSession, gateway: DataGateway):
    if not require_role(state, Role.ADMIN, console):
        return

    try:
        print_table(console, await InventoryService(gateway).list_all_products())
    except StorefrontError as e:
        logger.error("Listing products failed: %s", e)
        console.error(str(e))


async def cmd_update_user(console: Console, state: AuthSession, gateway: DataGateway):
    """Overwrite all fields of an existing user"""
    if not require_role(state, Role.ADMIN, console):
        return

    user_service = UserService(gateway)
    user_id = console.prompt_int("\tEnter User ID of User you would like to update")
    try:
        if not await user_service.exists(user_id):
            console.echo("A User with that User ID does not exist")
            return

        name = console.prompt("\tEnter User name")
        password = console.prompt("\tEnter User password")
        latitude = console.prompt_float("\tEnter User latitude")
        longitude = console.prompt_float("\tEnter User longitude")
        role = prompt_role(console, "\tEnter User type")

        await user_service.update_user(user_id, name, password, latitude, longitude, role)
    except StorefrontError as e:
        logger.error("Admin update of user %s failed: %s", user_id, e)
        console.error(str(e))
        return

    console.echo(f"User {user_id} updated.")


async def cmd_update_product(console: Console, state: AuthSession, gateway: DataGateway):
    """Overwrite stock and price of a product in any store"""
    if not require_role(state, Role.ADMIN, console):
        return

    inventory = InventoryService(gateway)
    store_id = console.prompt_int(
        "\tEnter store ID of the product you would like to update"
    )
    product_name = console.prompt(
        "\tEnter the name of the product you would like to update"
    )
    try:
        if not await inventory.product_exists(store_id, product_name):
            console.echo(
                "A product with that store ID and product name does not exist"
            )
            return

        units = prompt_stock_level(console, "\tEnter number of units")
        price = prompt_price(console, "\tEnter price per unit")

        await inventory.overwrite_product(store_id, product_name, units, price)
    except StorefrontError as e:
        logger.error("Admin update of %s in store %s failed: %s", product_name, store_id, e)
        console.error(str(e))
        return

    console.echo(f"Product {product_name} in store {store_id} updated.")


ADMIN_COMMANDS = {
    1: cmd_view_users,
    2: cmd_view_products,
    3: cmd_update_user,
    4: cmd_update_product,
}


async def cmd_admin_tools(console: Console, state: AuthSession, gateway: DataGateway):
    """Admin submenu; loops until the admin returns to the main menu."""
    if not require_role(state, Role.ADMIN, console):
        return

    while True:
        console.echo(ADMIN_MENU_TEXT)
        choice = read_choice(console)
        if choice == RETURN_CHOICE:
            return

        handler = ADMIN_COMMANDS.get(choice)
        if handler is None:
            console.echo(UNRECOGNIZED_TEXT)
            continue
        await handler(console, state, gateway)
