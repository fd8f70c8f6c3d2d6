# inventory_api/models/purchases.py

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from inventory_api.database import Base


class Purchase(Base):
    __tablename__ = "purchases"

    id = Column(Integer, primary_key=True, index=True)

    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
    product_name = Column(String, nullable=False)

    supplier_id = Column(String, nullable=True)
    supplier_name = Column(String(100), nullable=True)

    quantity = Column(Integer, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    total = Column(Numeric(12, 2), nullable=False)

    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        index=True,
    )
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    product = relationship("Product")

    __table_args__ = (
        CheckConstraint("quantity >= 1", name="ck_purchase_quantity_positive"),
        CheckConstraint("price >= 0", name="ck_purchase_price_non_negative"),
        CheckConstraint("total >= 0", name="ck_purchase_total_non_negative"),
    )
