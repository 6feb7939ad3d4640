from typing import Iterable, List, Tuple

from sqlalchemy import select

from storefront.core.gateway import DataGateway, QueryResult
from storefront.models.store import Store


class StoreRepository:
    def __init__(self, gateway: DataGateway):
        self.gateway = gateway

    async def get_all_locations(self) -> List[Tuple[int, float, float]]:
        """(store_id, latitude, longitude) of every store."""
        rows = await self.gateway.execute_query_rows(
            select(Store.store_id, Store.latitude, Store.longitude).order_by(
                Store.store_id
            )
        )
        return [
            (int(store_id), float(latitude), float(longitude))
            for store_id, latitude, longitude in rows
            if latitude is not None and longitude is not None
        ]

    async def describe(self, store_ids: Iterable[int]) -> QueryResult:
        return await self.gateway.execute_query_table(
            select(Store.store_id, Store.latitude, Store.longitude)
            .where(Store.store_id.in_(list(store_ids)))
            .order_by(Store.store_id)
        )

    async def get_ids_by_manager(self, manager_id: int) -> List[int]:
        rows = await self.gateway.execute_query_rows(
            select(Store.store_id)
            .where(Store.manager_id == manager_id)
            .order_by(Store.store_id)
        )
        return [int(row[0]) for row in rows]
