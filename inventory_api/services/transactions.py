# inventory_api/services/transactions.py

import logging
from contextlib import contextmanager
from enum import Enum

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from inventory_api.core.exceptions import (
    ConsistencyError,
    InsufficientStockError,
    InventoryError,
    NotFoundError,
    ValidationError,
)
from inventory_api.core.locks import ProductLockRegistry, product_locks
from inventory_api.models.products import Product
from inventory_api.models.purchases import Purchase
from inventory_api.models.sales import Sale
from inventory_api.models.sellers import Seller
from inventory_api.services.factories import compute_total, generate_bill_no
from inventory_api.services.ledger import InventoryLedger

logger = logging.getLogger(__name__)

# Fields a full-record update may not clear
NON_NULLABLE_FIELDS = {"product_id", "product_name", "quantity", "price", "bill_no"}


class TransactionKind(str, Enum):
    PURCHASE = "purchase"
    SALE = "sale"

    @property
    def model(self):
        return Purchase if self is TransactionKind.PURCHASE else Sale

    @property
    def sign(self) -> int:
        # Purchases add stock, sales remove it
        return 1 if self is TransactionKind.PURCHASE else -1

    @property
    def label(self) -> str:
        return self.value.capitalize()


class TransactionCoordinator:
    """Keeps purchase/sale records and product stock in step.

    Every create, update and delete runs as one unit of work: the product's
    lock is held, the record write and the ledger adjustment share a single
    database transaction, and either both are committed or neither is.
    """

    def __init__(self, db: Session, locks: ProductLockRegistry = product_locks):
        self.db = db
        self.locks = locks
        self.ledger = InventoryLedger(db)

    @contextmanager
    def unit_of_work(self, product_id: int):
        with self.locks.hold(product_id):
            try:
                yield
                self.db.commit()
            except InventoryError:
                self.db.rollback()
                raise
            except SQLAlchemyError as exc:
                self.db.rollback()
                logger.exception("Unit of work for product %s rolled back", product_id)
                raise ConsistencyError(
                    "Transaction record and stock adjustment could not both be saved"
                ) from exc
            except Exception:
                self.db.rollback()
                raise

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get(self, kind: TransactionKind, transaction_id: int):
        record = (
            self.db.query(kind.model)
            .filter(kind.model.id == transaction_id)
            .populate_existing()
            .first()
        )

        if record is None:
            raise NotFoundError(kind.label, transaction_id)

        return record

    def _get_product(self, product_id: int) -> Product:
        product = (
            self.db.query(Product)
            .filter(Product.id == product_id)
            .populate_existing()
            .first()
        )

        if product is None:
            raise NotFoundError("Product", product_id)

        return product

    def _check_seller(self, seller_id):
        if seller_id is None:
            return

        if not self.db.query(Seller.id).filter(Seller.id == seller_id).first():
            raise NotFoundError("Seller", seller_id)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def create(self, kind: TransactionKind, payload: BaseModel):
        data = payload.model_dump()
        product_id = data["product_id"]
        quantity = data["quantity"]

        with self.unit_of_work(product_id):
            product = self._get_product(product_id)

            if kind is TransactionKind.SALE:
                if product.stock < quantity:
                    raise InsufficientStockError(product.id, product.stock, -quantity)
                self._check_seller(data.get("seller_id"))
                if not data.get("bill_no"):
                    data["bill_no"] = generate_bill_no()

            data["total"] = compute_total(quantity, data["price"], data.get("total"))
            if not data.get("product_name"):
                data["product_name"] = product.name

            record = kind.model(**data)
            self.db.add(record)
            self.db.flush()

            self.ledger.adjust_stock(product_id, kind.sign * quantity)

        self.db.refresh(record)
        logger.info("%s %s created for product %s", kind.label, record.id, product_id)
        return record

    def update(self, kind: TransactionKind, transaction_id: int, payload: BaseModel):
        changes = payload.model_dump(exclude_unset=True)

        for field in NON_NULLABLE_FIELDS & changes.keys():
            if changes[field] is None:
                raise ValidationError(f"{field} cannot be null", field=field)

        product_id = self.get(kind, transaction_id).product_id

        if changes.pop("product_id", product_id) != product_id:
            raise ValidationError(
                "product_id of an existing transaction cannot be changed",
                field="product_id",
            )

        with self.unit_of_work(product_id):
            # Re-read under the product lock
            record = self.get(kind, transaction_id)

            if kind is TransactionKind.SALE:
                self._check_seller(changes.get("seller_id"))

            new_quantity = changes.get("quantity", record.quantity)
            new_price = changes.get("price", record.price)
            changes["total"] = compute_total(new_quantity, new_price, changes.get("total"))

            delta = kind.sign * (new_quantity - record.quantity)
            if delta:
                self.ledger.adjust_stock(product_id, delta)

            for field, value in changes.items():
                setattr(record, field, value)

            self.db.flush()

        self.db.refresh(record)
        logger.info("%s %s updated", kind.label, transaction_id)
        return record

    def delete(self, kind: TransactionKind, transaction_id: int) -> None:
        product_id = self.get(kind, transaction_id).product_id

        with self.unit_of_work(product_id):
            record = self.get(kind, transaction_id)

            self.ledger.adjust_stock(product_id, -kind.sign * record.quantity)

            self.db.delete(record)
            self.db.flush()

        logger.info("%s %s deleted", kind.label, transaction_id)

    def adjust_stock(self, product_id: int, delta: int) -> int:
        """Administrative correction outside any purchase or sale."""
        with self.unit_of_work(product_id):
            new_stock = self.ledger.adjust_stock(product_id, delta)

        return new_stock
