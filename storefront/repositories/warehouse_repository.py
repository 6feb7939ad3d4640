from sqlalchemy import select

from storefront.core.gateway import DataGateway, QueryResult
from storefront.models.warehouse import Warehouse


class WarehouseRepository:
    def __init__(self, gateway: DataGateway):
        self.gateway = gateway

    async def get_all(self) -> QueryResult:
        return await self.gateway.execute_query_table(
            select(Warehouse.warehouse_id).order_by(Warehouse.warehouse_id)
        )

    async def exists(self, warehouse_id: int) -> bool:
        count = await self.gateway.execute_query_count(
            select(Warehouse.warehouse_id).where(Warehouse.warehouse_id == warehouse_id)
        )
        return count > 0
