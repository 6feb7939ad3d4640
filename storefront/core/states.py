from dataclasses import dataclass
from typing import Optional


class Role:
    CUSTOMER = "customer"
    MANAGER = "manager"
    ADMIN = "admin"

    ALL = (CUSTOMER, MANAGER, ADMIN)


@dataclass
class AuthSession:
    """Identity of the user logged in at the console, if any."""

    user_id: Optional[int] = None
    name: Optional[str] = None
    role: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    def has_role(self, role: str) -> bool:
        return self.is_authenticated and self.role == role

    def log_in(self, user_id: int, name: str, role: str) -> None:
        self.user_id = user_id
        self.name = name
        self.role = role

    def clear(self) -> None:
        self.user_id = None
        self.name = None
        self.role = None
