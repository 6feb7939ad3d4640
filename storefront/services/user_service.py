import logging
from typing import Optional, Tuple

from storefront.core.gateway import DataGateway, QueryResult
from storefront.core.states import AuthSession, Role
from storefront.models.user import User
from storefront.repositories.user_repository import UserRepository
from storefront.utils.credentials import CredentialChecker, default_credentials

logger = logging.getLogger(__name__)


class UserService:
    def __init__(
        self, gateway: DataGateway, credentials: Optional[CredentialChecker] = None
    ):
        self.repo = UserRepository(gateway)
        self.gateway = gateway
        self.credentials = credentials or default_credentials

    async def create_account(
        self, name: str, password: str, latitude: float, longitude: float
    ) -> int:
        """
        Registers a new customer.

        Returns:
            int: Id of the new user, or -1 if the database cannot report it
        """
        await self.repo.create(
            name,
            self.credentials.encode(password),
            latitude,
            longitude,
            Role.CUSTOMER,
        )
        return await self.gateway.current_sequence_value(User.SEQUENCE)

    async def authenticate(self, name: str, password: str, state: AuthSession) -> bool:
        """
        Checks name and password and fills the session on success.

        When several users share the same name and password the one with the
        lowest id is chosen. The session is left untouched on failure.
        """
        for user_id, stored, role in await self.repo.get_credentials_by_name(name):
            if self.credentials.verify(password, stored):
                state.log_in(int(user_id), name, (role or "").strip().lower())
                logger.info("User %s logged in as %s", name, state.role)
                return True
        logger.info("Failed log-in attempt for %s", name)
        return False

    async def get_location(self, user_id: int) -> Optional[Tuple[float, float]]:
        return await self.repo.get_location(user_id)

    async def exists(self, user_id: int) -> bool:
        return await self.repo.exists(user_id)

    async def list_users(self) -> QueryResult:
        return await self.repo.get_all()

    async def update_user(
        self,
        user_id: int,
        name: str,
        password: str,
        latitude: float,
        longitude: float,
        role: str,
    ) -> None:
        """Overwrite every editable field of a user."""
        await self.repo.overwrite(
            user_id,
            name,
            self.credentials.encode(password),
            latitude,
            longitude,
            role,
        )
        logger.info("User %s updated (role %s)", user_id, role)
