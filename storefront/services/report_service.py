from storefront.core.config import POPULAR_LIMIT, RECENT_LIMIT
from storefront.core.gateway import DataGateway, QueryResult
from storefront.repositories.audit_repository import ProductUpdateRepository
from storefront.repositories.order_repository import OrderRepository


class ReportService:
    """Read-only views over orders and product updates."""

    def __init__(
        self,
        gateway: DataGateway,
        recent_limit: int = RECENT_LIMIT,
        popular_limit: int = POPULAR_LIMIT,
    ):
        self.orders = OrderRepository(gateway)
        self.updates = ProductUpdateRepository(gateway)
        self.recent_limit = recent_limit
        self.popular_limit = popular_limit

    async def recent_orders(self, customer_id: int) -> QueryResult:
        return await self.orders.get_recent_by_customer(customer_id, self.recent_limit)

    async def recent_updates(self, manager_id: int) -> QueryResult:
        return await self.updates.get_recent_by_manager(manager_id, self.recent_limit)

    async def popular_products(self, store_id: int) -> QueryResult:
        return await self.orders.get_popular_products(store_id, self.popular_limit)

    async def popular_customers(self, store_id: int) -> QueryResult:
        return await self.orders.get_popular_customers(store_id, self.popular_limit)

    async def store_orders(self, store_id: int) -> QueryResult:
        return await self.orders.get_by_store(store_id)
