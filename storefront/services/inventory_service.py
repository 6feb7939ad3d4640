import logging
from typing import Optional

from storefront.core.config import ENFORCE_STOCK_LEVELS
from storefront.core.exceptions import (
    InsufficientStockError,
    ProductNotFoundError,
    WarehouseNotFoundError,
)
from storefront.core.gateway import DataGateway, QueryResult
from storefront.models.order import Order
from storefront.models.supply_request import ProductSupplyRequest
from storefront.repositories.audit_repository import (
    ProductUpdateRepository,
    SupplyRequestRepository,
)
from storefront.repositories.order_repository import OrderRepository
from storefront.repositories.product_repository import ProductRepository
from storefront.repositories.warehouse_repository import WarehouseRepository

logger = logging.getLogger(__name__)


class InventoryService:
    """
    Stock-changing operations.

    Each operation that touches stock runs inside one unit of work together
    with the row that records it (an order, a product update or a supply
    request), so either both are stored or neither is.
    """

    def __init__(self, gateway: DataGateway, enforce_stock: bool = ENFORCE_STOCK_LEVELS):
        self.gateway = gateway
        self.products = ProductRepository(gateway)
        self.orders = OrderRepository(gateway)
        self.updates = ProductUpdateRepository(gateway)
        self.supply_requests = SupplyRequestRepository(gateway)
        self.warehouses = WarehouseRepository(gateway)
        self.enforce_stock = enforce_stock

    async def list_products(self, store_id: int) -> QueryResult:
        return await self.products.get_by_store(store_id)

    async def list_product_names(self, store_id: int) -> QueryResult:
        return await self.products.get_names_by_store(store_id)

    async def list_all_products(self) -> QueryResult:
        return await self.products.get_all()

    async def list_warehouses(self) -> QueryResult:
        return await self.warehouses.get_all()

    async def product_exists(self, store_id: int, product_name: str) -> bool:
        return await self.products.exists(store_id, product_name)

    async def _get_units(self, store_id: int, product_name: str) -> int:
        units = await self.products.get_units(store_id, product_name)
        if units is None:
            raise ProductNotFoundError(store_id, product_name)
        return units

    async def place_order(
        self, customer_id: int, store_id: int, product_name: str, units: int
    ) -> int:
        """
        Takes units out of stock and records the order.

        Args:
            customer_id: Ordering user
            store_id: Store the product is bought from
            product_name: Product name within that store
            units: Number of units ordered

        Returns:
            int: The new order number, or -1 if the database cannot report it

        Raises:
            ProductNotFoundError: If the store does not carry the product
            InsufficientStockError: If stock checks are on and stock is too low
        """
        async with self.gateway.unit_of_work():
            available = await self._get_units(store_id, product_name)
            if self.enforce_stock and units > available:
                raise InsufficientStockError(product_name, available, units)
            await self.products.adjust_units(store_id, product_name, -units)
            await self.orders.create(customer_id, store_id, product_name, units)

        order_number = await self.gateway.current_sequence_value(Order.SEQUENCE)
        logger.info(
            "Order %s: customer %s bought %s x %s in store %s",
            order_number,
            customer_id,
            units,
            product_name,
            store_id,
        )
        return order_number

    async def update_product(
        self,
        manager_id: int,
        store_id: int,
        product_name: str,
        units: Optional[int] = None,
        price: Optional[float] = None,
    ) -> bool:
        """
        Changes stock and/or price of a product and logs one product update.

        Returns:
            bool: True if anything changed, False if both values were None
        """
        if units is None and price is None:
            return False

        async with self.gateway.unit_of_work():
            await self._get_units(store_id, product_name)
            if units is not None:
                await self.products.set_units(store_id, product_name, units)
            if price is not None:
                await self.products.set_price(store_id, product_name, price)
            await self.updates.create(manager_id, store_id, product_name)

        logger.info(
            "Manager %s updated %s in store %s (units=%s, price=%s)",
            manager_id,
            product_name,
            store_id,
            units,
            price,
        )
        return True

    async def request_supply(
        self,
        manager_id: int,
        warehouse_id: int,
        store_id: int,
        product_name: str,
        units: int,
    ) -> int:
        """Adds requested units to stock and records the supply request."""
        async with self.gateway.unit_of_work():
            if not await self.warehouses.exists(warehouse_id):
                raise WarehouseNotFoundError(warehouse_id)
            await self._get_units(store_id, product_name)
            await self.products.adjust_units(store_id, product_name, units)
            await self.supply_requests.create(
                manager_id, warehouse_id, store_id, product_name, units
            )

        request_number = await self.gateway.current_sequence_value(
            ProductSupplyRequest.SEQUENCE
        )
        logger.info(
            "Supply request %s: %s x %s from warehouse %s to store %s",
            request_number,
            units,
            product_name,
            warehouse_id,
            store_id,
        )
        return request_number

    async def overwrite_product(
        self, store_id: int, product_name: str, units: int, price: float
    ) -> None:
        """Set stock and price of a product, as done from the admin tools."""
        async with self.gateway.unit_of_work():
            await self._get_units(store_id, product_name)
            await self.products.set_units(store_id, product_name, units)
            await self.products.set_price(store_id, product_name, price)
        logger.info("Product %s in store %s overwritten", product_name, store_id)
