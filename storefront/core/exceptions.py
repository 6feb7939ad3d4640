"""
Exceptions raised by the storefront services and the data gateway.

Handlers catch ``StorefrontError`` at the operation boundary and print the
message to the error stream; nothing here is meant to escape to the menu loop.
"""


class StorefrontError(Exception):
    """Base class for every error the console reports to the user."""


class DatabaseError(StorefrontError):
    """A statement failed at the driver level."""


class PermissionDeniedError(StorefrontError):
    """The logged-in user does not have the role an operation requires."""


class NotFoundError(StorefrontError):
    pass


class StoreNotFoundError(NotFoundError):
    def __init__(self, store_id: int):
        super().__init__(f"Store {store_id} is not available")
        self.store_id = store_id


class ProductNotFoundError(NotFoundError):
    def __init__(self, store_id: int, product_name: str):
        super().__init__(
            f"Product '{product_name}' does not exist in store {store_id}"
        )
        self.store_id = store_id
        self.product_name = product_name


class WarehouseNotFoundError(NotFoundError):
    def __init__(self, warehouse_id: int):
        super().__init__(f"Warehouse {warehouse_id} does not exist")
        self.warehouse_id = warehouse_id


class InsufficientStockError(StorefrontError):
    def __init__(self, product_name: str, available: int, requested: int):
        super().__init__(
            f"Only {available} units of {product_name} are in stock, "
            f"{requested} requested"
        )
        self.product_name = product_name
        self.available = available
        self.requested = requested
