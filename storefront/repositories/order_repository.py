from sqlalchemy import func, insert, select

from storefront.core.gateway import DataGateway, QueryResult
from storefront.models.order import Order
from storefront.models.user import User


class OrderRepository:
    def __init__(self, gateway: DataGateway):
        self.gateway = gateway

    async def create(
        self, customer_id: int, store_id: int, product_name: str, units: int
    ) -> None:
        await self.gateway.execute_write(
            insert(Order).values(
                customer_id=customer_id,
                store_id=store_id,
                product_name=product_name,
                units_ordered=units,
                order_time=func.now(),
            )
        )

    async def get_recent_by_customer(self, customer_id: int, limit: int) -> QueryResult:
        return await self.gateway.execute_query_table(
            select(
                Order.store_id, Order.product_name, Order.units_ordered, Order.order_time
            )
            .where(Order.customer_id == customer_id)
            .order_by(Order.order_time.desc(), Order.order_number.desc())
            .limit(limit)
        )

    async def get_popular_products(self, store_id: int, limit: int) -> QueryResult:
        order_count = func.count().label("ordercount")
        return await self.gateway.execute_query_table(
            select(Order.product_name, order_count)
            .where(Order.store_id == store_id)
            .group_by(Order.product_name)
            .order_by(order_count.desc(), Order.product_name)
            .limit(limit)
        )

    async def get_popular_customers(self, store_id: int, limit: int) -> QueryResult:
        order_count = func.count().label("ordercount")
        return await self.gateway.execute_query_table(
            select(Order.customer_id, User.name, order_count)
            .join(User, User.user_id == Order.customer_id)
            .where(Order.store_id == store_id)
            .group_by(Order.customer_id, User.name)
            .order_by(order_count.desc(), Order.customer_id)
            .limit(limit)
        )

    async def get_by_store(self, store_id: int) -> QueryResult:
        return await self.gateway.execute_query_table(
            select(
                Order.order_number,
                User.name,
                Order.store_id,
                Order.product_name,
                Order.order_time,
            )
            .join(User, User.user_id == Order.customer_id)
            .where(Order.store_id == store_id)
            .order_by(Order.order_number)
        )
