import logging
import math

from storefront.core.states import Role
from storefront.utils.console import Console, INVALID_INPUT_TEXT

logger = logging.getLogger(__name__)


def validate_units(value: int) -> int:
    """
    Checks a unit count typed at the console.

    Args:
        value: Number of units

    Returns:
        int: The same value

    Raises:
        ValueError: If the value is not a positive number
    """
    if value <= 0:
        raise ValueError("Number of units must be greater than zero")
    return value


def validate_price(value: float) -> float:
    if not math.isfinite(value):
        raise ValueError("Price per unit must be a finite number")
    if value < 0:
        raise ValueError("Price per unit cannot be negative")
    return round(value, 2)


def validate_role(value: str) -> str:
    role = value.strip().lower()
    if role not in Role.ALL:
        raise ValueError(f"Role must be one of: {', '.join(Role.ALL)}")
    return role


def prompt_units(console: Console, text: str) -> int:
    """Ask for a positive unit count, reprompting on bad input."""
    while True:
        try:
            return validate_units(console.prompt_int(text))
        except ValueError as e:
            console.echo(f"{INVALID_INPUT_TEXT} {e}")


def prompt_stock_level(console: Console, text: str) -> int:
    while True:
        value = console.prompt_int(text)
        if value >= 0:
            return value
        console.echo(f"{INVALID_INPUT_TEXT} Number of units cannot be negative")


def prompt_price(console: Console, text: str) -> float:
    while True:
        try:
            return validate_price(console.prompt_float(text))
        except ValueError as e:
            console.echo(f"{INVALID_INPUT_TEXT} {e}")


def prompt_role(console: Console, text: str) -> str:
    while True:
        try:
            return validate_role(console.prompt(text))
        except ValueError as e:
            logger.debug("Rejected role input: %s", e)
            console.echo(f"{INVALID_INPUT_TEXT} {e}")
