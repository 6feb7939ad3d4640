import logging

from storefront.core.exceptions import PermissionDeniedError
from storefront.core.states import AuthSession, Role
from storefront.utils.console import Console

logger = logging.getLogger(__name__)

DENIED_TEXT = {
    Role.MANAGER: "Only Managers can use this function",
    Role.ADMIN: "Only Admins can use this function",
}


def check_role(state: AuthSession, role: str) -> None:
    """
    Raises:
        PermissionDeniedError: If the logged-in user does not have the role
    """
    if not state.has_role(role):
        raise PermissionDeniedError(
            DENIED_TEXT.get(role, "You do not have access to this function")
        )


def require_role(state: AuthSession, role: str, console: Console) -> bool:
    """
    Checks that the logged-in user has the given role.

    Prints the permission-denied message when the check fails, so handlers
    only need to return.
    """
    try:
        check_role(state, role)
    except PermissionDeniedError as e:
        logger.info("User %s (%s) denied %s operation", state.user_id, state.role, role)
        console.echo(str(e))
        return False
    return True
