import logging
from typing import Iterable, List

from storefront.core.config import NEARBY_RADIUS
from storefront.core.exceptions import NotFoundError, StoreNotFoundError
from storefront.core.gateway import DataGateway, QueryResult
from storefront.repositories.store_repository import StoreRepository
from storefront.repositories.user_repository import UserRepository
from storefront.utils.geo import within_radius

logger = logging.getLogger(__name__)


class StoreService:
    def __init__(self, gateway: DataGateway, radius: float = NEARBY_RADIUS):
        self.repo = StoreRepository(gateway)
        self.users = UserRepository(gateway)
        self.radius = radius

    async def get_nearby_store_ids(self, latitude: float, longitude: float) -> List[int]:
        """Ids of all stores within the radius of the given point, boundary included."""
        return [
            store_id
            for store_id, store_lat, store_lon in await self.repo.get_all_locations()
            if within_radius(latitude, longitude, store_lat, store_lon, self.radius)
        ]

    async def get_nearby_store_ids_for_user(self, user_id: int) -> List[int]:
        location = await self.users.get_location(user_id)
        if location is None:
            raise NotFoundError(f"User {user_id} does not exist")
        return await self.get_nearby_store_ids(*location)

    async def describe(self, store_ids: Iterable[int]) -> QueryResult:
        return await self.repo.describe(store_ids)

    async def get_manager_store_ids(self, manager_id: int) -> List[int]:
        return await self.repo.get_ids_by_manager(manager_id)

    async def ensure_managed_by(self, store_id: int, manager_id: int) -> None:
        """
        Checks that the store is run by the manager.

        Raises:
            StoreNotFoundError: If the manager does not run this store
        """
        if store_id not in await self.repo.get_ids_by_manager(manager_id):
            logger.warning("Manager %s tried to use store %s", manager_id, store_id)
            raise StoreNotFoundError(store_id)
