from typing import Optional

from storefront.core.config import NEARBY_RADIUS
from storefront.core.states import Role
from storefront.utils.console import Console

GREETING_TEXT = """

*******************************************************
              User Interface
*******************************************************
"""

MAIN_MENU_TEXT = """MAIN MENU
---------
1. Create user
2. Log in
9. < EXIT"""

CUSTOMER_MENU_TEXT = f"""MAIN MENU
---------
1. View Stores within {NEARBY_RADIUS:g} miles
2. View Product List
3. Place a Order
4. View 5 recent orders"""

MANAGER_MENU_TEXT = """5. Update Product
6. View 5 recent Product Updates Info
7. View 5 Popular Items
8. View 5 Popular Customers
9. Place Product Supply Request to Warehouse
10. View All Orders for Store"""

ADMIN_ENTRY_TEXT = "11. View and Edit User and Product Info"

LOGOUT_TEXT = """.........................
20. Log out"""

ADMIN_MENU_TEXT = """ADMIN TOOLS
---------
1. View all Users
2. View all Products
3. Update User Info
4. Update Product Info
.........................
20. Return to main menu"""

UNRECOGNIZED_TEXT = "Unrecognized choice!"


def get_menu_text(role: Optional[str] = None) -> str:
    """Returns the user menu for a role; manager and admin entries are hidden from others."""
    parts = [CUSTOMER_MENU_TEXT]
    if role == Role.MANAGER:
        parts.append(MANAGER_MENU_TEXT)
    elif role == Role.ADMIN:
        parts.append(ADMIN_ENTRY_TEXT)
    parts.append(LOGOUT_TEXT)
    return "\n".join(parts)


def read_choice(console: Console) -> int:
    return console.prompt_int("Please make your choice")
