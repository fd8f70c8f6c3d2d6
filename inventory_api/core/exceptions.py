"""
Typed errors raised by the inventory core.

Every error carries a machine-readable ``code`` so the HTTP layer can map it
without parsing messages:

    InventoryError
    +-- NotFoundError           NOT_FOUND
    +-- InsufficientStockError  INSUFFICIENT_STOCK
    +-- ValidationError         VALIDATION_ERROR
    +-- ConsistencyError        CONSISTENCY_FAILURE
"""


class InventoryError(Exception):
    code: str = "INVENTORY_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(InventoryError):
    """A referenced product or transaction record does not exist."""

    code = "NOT_FOUND"

    def __init__(self, resource: str, identifier):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found")


class InsufficientStockError(InventoryError):
    """Applying the delta would leave the product with negative stock."""

    code = "INSUFFICIENT_STOCK"

    def __init__(self, product_id: int, available: int, requested_delta: int):
        self.product_id = product_id
        self.available = available
        self.requested_delta = requested_delta
        super().__init__(
            f"Insufficient stock available: product {product_id} has "
            f"{available} units, adjustment of {requested_delta} rejected"
        )


class ValidationError(InventoryError):
    code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)


class ConsistencyError(InventoryError):
    """The record write and the stock adjustment could not both complete."""

    code = "CONSISTENCY_FAILURE"
