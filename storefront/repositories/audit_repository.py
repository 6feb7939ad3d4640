from sqlalchemy import func, insert, select

from storefront.core.gateway import DataGateway, QueryResult
from storefront.models.product_update import ProductUpdate
from storefront.models.supply_request import ProductSupplyRequest


class ProductUpdateRepository:
    def __init__(self, gateway: DataGateway):
        self.gateway = gateway

    async def create(self, manager_id: int, store_id: int, product_name: str) -> None:
        await self.gateway.execute_write(
            insert(ProductUpdate).values(
                manager_id=manager_id,
                store_id=store_id,
                product_name=product_name,
                updated_on=func.now(),
            )
        )

    async def get_recent_by_manager(self, manager_id: int, limit: int) -> QueryResult:
        return await self.gateway.execute_query_table(
            select(
                ProductUpdate.update_number,
                ProductUpdate.store_id,
                ProductUpdate.product_name,
                ProductUpdate.updated_on,
            )
            .where(ProductUpdate.manager_id == manager_id)
            .order_by(ProductUpdate.updated_on.desc(), ProductUpdate.update_number.desc())
            .limit(limit)
        )


class SupplyRequestRepository:
    def __init__(self, gateway: DataGateway):
        self.gateway = gateway

    async def create(
        self,
        manager_id: int,
        warehouse_id: int,
        store_id: int,
        product_name: str,
        units: int,
    ) -> None:
        await self.gateway.execute_write(
            insert(ProductSupplyRequest).values(
                manager_id=manager_id,
                warehouse_id=warehouse_id,
                store_id=store_id,
                product_name=product_name,
                units_requested=units,
            )
        )
