"""InventoryLedger: the only writer of Product.stock."""

import pytest

from inventory_api.core.exceptions import InsufficientStockError, NotFoundError, ValidationError
from inventory_api.services.ledger import MAX_STOCK, InventoryLedger


class TestAdjustStock:

    def test_positive_delta_increases_stock(self, db, make_product, stock_of):
        product = make_product(stock=10)

        new_stock = InventoryLedger(db).adjust_stock(product.id, 5)
        db.commit()

        assert new_stock == 15
        assert stock_of(product.id) == 15

    def test_negative_delta_decreases_stock(self, db, make_product, stock_of):
        product = make_product(stock=10)

        assert InventoryLedger(db).adjust_stock(product.id, -4) == 6
        db.commit()

        assert stock_of(product.id) == 6

    def test_stock_may_reach_exactly_zero(self, db, make_product):
        product = make_product(stock=3)

        assert InventoryLedger(db).adjust_stock(product.id, -3) == 0

    def test_below_zero_is_rejected_and_stock_unchanged(self, db, make_product, stock_of):
        product = make_product(stock=2)

        with pytest.raises(InsufficientStockError) as exc_info:
            InventoryLedger(db).adjust_stock(product.id, -3)
        db.rollback()

        assert exc_info.value.code == "INSUFFICIENT_STOCK"
        assert exc_info.value.available == 2
        assert exc_info.value.requested_delta == -3
        assert stock_of(product.id) == 2

    def test_unknown_product_raises_not_found(self, db):
        with pytest.raises(NotFoundError) as exc_info:
            InventoryLedger(db).adjust_stock(9999, 1)

        assert exc_info.value.resource == "Product"
        assert exc_info.value.identifier == 9999

    def test_zero_delta_returns_current_stock(self, db, make_product, stock_of):
        product = make_product(stock=7)

        assert InventoryLedger(db).adjust_stock(product.id, 0) == 7
        assert stock_of(product.id) == 7

    def test_only_stock_is_touched(self, db, make_product):
        product = make_product(stock=1, name="Hammer", sku="HAM-1")

        InventoryLedger(db).adjust_stock(product.id, 4)
        db.commit()
        db.refresh(product)

        assert product.stock == 5
        assert product.name == "Hammer"
        assert product.sku == "HAM-1"

    def test_adjustment_is_not_committed_by_the_ledger(self, db, make_product, stock_of):
        product = make_product(stock=10)

        InventoryLedger(db).adjust_stock(product.id, 5)
        db.rollback()

        assert stock_of(product.id) == 10

    def test_stock_ceiling_is_rejected_and_stock_unchanged(self, db, make_product, stock_of):
        product = make_product(stock=MAX_STOCK - 1)

        with pytest.raises(ValidationError) as exc_info:
            InventoryLedger(db).adjust_stock(product.id, 2)
        db.rollback()

        assert exc_info.value.field == "stock"
        assert stock_of(product.id) == MAX_STOCK - 1
