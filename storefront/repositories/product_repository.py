from typing import Optional

from sqlalchemy import select, update

from storefront.core.gateway import DataGateway, QueryResult
from storefront.models.product import Product


def _product_key(store_id: int, product_name: str):
    return (Product.store_id == store_id, Product.product_name == product_name)


class ProductRepository:
    def __init__(self, gateway: DataGateway):
        self.gateway = gateway

    async def get_by_store(self, store_id: int) -> QueryResult:
        return await self.gateway.execute_query_table(
            select(Product.product_name, Product.number_of_units, Product.price_per_unit)
            .where(Product.store_id == store_id)
            .order_by(Product.product_name)
        )

    async def get_names_by_store(self, store_id: int) -> QueryResult:
        return await self.gateway.execute_query_table(
            select(Product.product_name)
            .where(Product.store_id == store_id)
            .order_by(Product.product_name)
        )

    async def get_all(self) -> QueryResult:
        return await self.gateway.execute_query_table(
            select(Product.__table__).order_by(Product.store_id, Product.product_name)
        )

    async def get_units(self, store_id: int, product_name: str) -> Optional[int]:
        """Current stock of a product, or None if the store does not carry it."""
        rows = await self.gateway.execute_query_rows(
            select(Product.number_of_units).where(*_product_key(store_id, product_name))
        )
        if not rows:
            return None
        return int(rows[0][0])

    async def exists(self, store_id: int, product_name: str) -> bool:
        count = await self.gateway.execute_query_count(
            select(Product.product_name).where(*_product_key(store_id, product_name))
        )
        return count > 0

    async def adjust_units(self, store_id: int, product_name: str, delta: int) -> None:
        await self.gateway.execute_write(
            update(Product)
            .where(*_product_key(store_id, product_name))
            .values(number_of_units=Product.number_of_units + delta)
        )

    async def set_units(self, store_id: int, product_name: str, units: int) -> None:
        await self.gateway.execute_write(
            update(Product)
            .where(*_product_key(store_id, product_name))
            .values(number_of_units=units)
        )

    async def set_price(self, store_id: int, product_name: str, price: float) -> None:
        await self.gateway.execute_write(
            update(Product)
            .where(*_product_key(store_id, product_name))
            .values(price_per_unit=price)
        )
