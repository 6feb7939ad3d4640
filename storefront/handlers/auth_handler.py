import logging

from storefront.core.exceptions import StorefrontError
from storefront.core.gateway import DataGateway
from storefront.core.states import AuthSession
from storefront.services.user_service import UserService
from storefront.utils.console import Console

logger = logging.getLogger(__name__)


async def cmd_create_user(console: Console, state: AuthSession, gateway: DataGateway):
    """Register a new customer account."""
    name = console.prompt("\tEnter name")
    password = console.prompt("\tEnter password")
    latitude = console.prompt_float("\tEnter latitude")
    longitude = console.prompt_float("\tEnter longitude")

    try:
        user_id = await UserService(gateway).create_account(
            name, password, latitude, longitude
        )
    except StorefrontError as e:
        logger.error("Account creation for %s failed: %s", name, e)
        console.error(str(e))
        return

    console.echo("User successfully created!")
    if user_id > 0:
        console.echo(f"Your user ID is {user_id}")


async def cmd_log_in(console: Console, state: AuthSession, gateway: DataGateway) -> bool:
    name = console.prompt("\tEnter name")
    password = console.prompt("\tEnter password")

    try:
        authorised = await UserService(gateway).authenticate(name, password, state)
    except StorefrontError as e:
        logger.error("Log-in for %s failed: %s", name, e)
        console.error(str(e))
        return False

    if not authorised:
        console.echo("Invalid name or password.")
        return False

    console.echo(f"Welcome {name}")
    console.echo(state.role)
    return True


async def cmd_log_out(console: Console, state: AuthSession, gateway: DataGateway):
    logger.info("User %s logged out", state.user_id)
    state.clear()
    console.echo("Logged out.")
