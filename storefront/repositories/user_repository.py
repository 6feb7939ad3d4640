import logging
from typing import List, Optional, Tuple

from sqlalchemy import insert, select, update

from storefront.core.gateway import DataGateway, QueryResult, Row
from storefront.models.user import User

logger = logging.getLogger(__name__)


class UserRepository:
    def __init__(self, gateway: DataGateway):
        self.gateway = gateway

    async def create(
        self,
        name: str,
        password: str,
        latitude: float,
        longitude: float,
        role: str,
    ) -> None:
        await self.gateway.execute_write(
            insert(User).values(
                name=name,
                password=password,
                latitude=latitude,
                longitude=longitude,
                role=role,
            )
        )
        logger.info("Created user %s (%s)", name, role)

    async def get_credentials_by_name(self, name: str) -> List[Row]:
        """Rows of (user_id, password, role) for every user with this name, lowest id first."""
        return await self.gateway.execute_query_rows(
            select(User.user_id, User.password, User.role)
            .where(User.name == name)
            .order_by(User.user_id)
        )

    async def get_location(self, user_id: int) -> Optional[Tuple[float, float]]:
        rows = await self.gateway.execute_query_rows(
            select(User.latitude, User.longitude).where(User.user_id == user_id)
        )
        if not rows:
            return None
        return float(rows[0][0]), float(rows[0][1])

    async def exists(self, user_id: int) -> bool:
        count = await self.gateway.execute_query_count(
            select(User.user_id).where(User.user_id == user_id)
        )
        return count > 0

    async def get_all(self) -> QueryResult:
        return await self.gateway.execute_query_table(
            select(User.__table__).order_by(User.user_id)
        )

    async def overwrite(
        self,
        user_id: int,
        name: str,
        password: str,
        latitude: float,
        longitude: float,
        role: str,
    ) -> None:
        await self.gateway.execute_write(
            update(User)
            .where(User.user_id == user_id)
            .values(
                name=name,
                password=password,
                latitude=latitude,
                longitude=longitude,
                role=role,
            )
        )
