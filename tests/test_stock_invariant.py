"""
Property test: for any sequence of create/update/delete operations,

    stock == initial_stock + sum(purchase quantities) - sum(sale quantities)

over the records that currently exist, and stock never goes negative.
"""

from decimal import Decimal

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from inventory_api.core.exceptions import InsufficientStockError
from inventory_api.models.purchases import Purchase
from inventory_api.models.sales import Sale
from inventory_api.schemas.purchase import PurchaseCreate, PurchaseUpdate
from inventory_api.schemas.sale import SaleCreate, SaleUpdate
from inventory_api.services.transactions import TransactionCoordinator, TransactionKind

quantities = st.integers(min_value=1, max_value=15)

operations = st.lists(
    st.one_of(
        st.tuples(st.just("create"), st.sampled_from(list(TransactionKind)), quantities),
        st.tuples(st.just("update"), st.integers(min_value=0, max_value=20), quantities),
        st.tuples(st.just("delete"), st.integers(min_value=0, max_value=20)),
    ),
    min_size=1,
    max_size=25,
)


def _expected_stock(db, product_id, initial_stock):
    purchased = sum(
        q for (q,) in db.query(Purchase.quantity).filter(Purchase.product_id == product_id)
    )
    sold = sum(q for (q,) in db.query(Sale.quantity).filter(Sale.product_id == product_id))
    return initial_stock + purchased - sold


@settings(
    max_examples=40,
    deadline=None,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
@given(initial_stock=st.integers(min_value=0, max_value=20), ops=operations)
def test_stock_matches_existing_records(db, make_product, stock_of, initial_stock, ops):
    product = make_product(stock=initial_stock)
    coordinator = TransactionCoordinator(db)
    live = []

    for op in ops:
        try:
            if op[0] == "create":
                _, kind, quantity = op
                payload_cls = PurchaseCreate if kind is TransactionKind.PURCHASE else SaleCreate
                record = coordinator.create(
                    kind,
                    payload_cls(product_id=product.id, quantity=quantity, price=Decimal("1.50")),
                )
                live.append((kind, record.id))

            elif op[0] == "update" and live:
                _, index, quantity = op
                kind, record_id = live[index % len(live)]
                payload_cls = PurchaseUpdate if kind is TransactionKind.PURCHASE else SaleUpdate
                coordinator.update(kind, record_id, payload_cls(quantity=quantity))

            elif op[0] == "delete" and live:
                kind, record_id = live.pop(op[1] % len(live))
                try:
                    coordinator.delete(kind, record_id)
                except InsufficientStockError:
                    live.append((kind, record_id))
                    raise

        except InsufficientStockError:
            pass

        stock = stock_of(product.id)
        assert stock >= 0
        assert stock == _expected_stock(db, product.id, initial_stock)


@pytest.mark.parametrize("initial_stock", [0, 7])
def test_rejected_operations_leave_no_trace(db, make_product, stock_of, initial_stock):
    product = make_product(stock=initial_stock)
    coordinator = TransactionCoordinator(db)

    with pytest.raises(InsufficientStockError):
        coordinator.create(
            TransactionKind.SALE,
            SaleCreate(product_id=product.id, quantity=initial_stock + 1, price=Decimal("1")),
        )

    assert stock_of(product.id) == initial_stock
    assert _expected_stock(db, product.id, initial_stock) == initial_stock
