# inventory_api/services/ledger.py

import logging

from sqlalchemy.orm import Session

from inventory_api.core.exceptions import (
    InsufficientStockError,
    NotFoundError,
    ValidationError,
)
from inventory_api.models.products import Product

logger = logging.getLogger(__name__)

# Product.stock is a 32-bit Integer column
MAX_STOCK = 2_147_483_647


class InventoryLedger:
    """Owns every write to ``Product.stock``.

    Adjustments are flushed into the caller's open database transaction and
    never committed here, so a stock change always lands together with the
    record change that caused it.
    """

    def __init__(self, db: Session):
        self.db = db

    def adjust_stock(self, product_id: int, delta: int) -> int:
        product = (
            self.db.query(Product)
            .filter(Product.id == product_id)
            .with_for_update()
            .populate_existing()
            .first()
        )

        if product is None:
            raise NotFoundError("Product", product_id)

        new_stock = product.stock + delta

        if new_stock < 0:
            logger.warning(
                "Stock adjustment rejected: product=%s stock=%s delta=%s",
                product_id, product.stock, delta,
            )
            raise InsufficientStockError(product_id, product.stock, delta)

        if new_stock > MAX_STOCK:
            raise ValidationError(
                f"Stock of product {product_id} would exceed {MAX_STOCK}",
                field="stock",
            )

        if delta == 0:
            return product.stock

        product.stock = new_stock
        self.db.flush()

        logger.info(
            "Stock adjusted: product=%s delta=%+d stock=%s",
            product_id, delta, new_stock,
        )

        return new_stock
