import logging
from typing import Optional

from storefront.core.gateway import DataGateway
from storefront.core.states import AuthSession
from storefront.handlers.admin_handler import cmd_admin_tools
from storefront.handlers.auth_handler import cmd_create_user, cmd_log_in, cmd_log_out
from storefront.handlers.customer_handler import (
    cmd_place_order,
    cmd_view_products,
    cmd_view_recent_orders,
    cmd_view_stores,
)
from storefront.handlers.manager_handler import (
    cmd_place_supply_request,
    cmd_update_product,
    cmd_view_all_orders,
    cmd_view_popular_customers,
    cmd_view_popular_products,
    cmd_view_recent_updates,
)
from storefront.utils.console import Console
from storefront.utils.menu import (
    MAIN_MENU_TEXT,
    UNRECOGNIZED_TEXT,
    get_menu_text,
    read_choice,
)

logger = logging.getLogger(__name__)

CREATE_USER_CHOICE = 1
LOG_IN_CHOICE = 2
EXIT_CHOICE = 9
LOG_OUT_CHOICE = 20

# Codes are the same for every role; each manager/admin handler checks the role itself
USER_COMMANDS = {
    1: cmd_view_stores,
    2: cmd_view_products,
    3: cmd_place_order,
    4: cmd_view_recent_orders,
    5: cmd_update_product,
    6: cmd_view_recent_updates,
    7: cmd_view_popular_products,
    8: cmd_view_popular_customers,
    9: cmd_place_supply_request,
    10: cmd_view_all_orders,
    11: cmd_admin_tools,
}


async def run_user_menu(console: Console, state: AuthSession, gateway: DataGateway):
    """Menu shown after log-in; returns when the user logs out."""
    while True:
        console.echo(get_menu_text(state.role))
        choice = read_choice(console)
        if choice == LOG_OUT_CHOICE:
            await cmd_log_out(console, state, gateway)
            return

        handler = USER_COMMANDS.get(choice)
        if handler is None:
            console.echo(UNRECOGNIZED_TEXT)
            continue
        await handler(console, state, gateway)


async def run_main_menu(
    console: Console, gateway: DataGateway, state: Optional[AuthSession] = None
) -> AuthSession:
    """
    Top-level loop: create accounts, log in, exit.

    Returns:
        AuthSession: The (cleared) session once the user chooses to exit
    """
    state = state or AuthSession()
    while True:
        console.echo(MAIN_MENU_TEXT)
        choice = read_choice(console)
        if choice == EXIT_CHOICE:
            return state
        if choice == CREATE_USER_CHOICE:
            await cmd_create_user(console, state, gateway)
        elif choice == LOG_IN_CHOICE:
            if await cmd_log_in(console, state, gateway):
                await run_user_menu(console, state, gateway)
        else:
            console.echo(UNRECOGNIZED_TEXT)
