# inventory_api/models/products.py

from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, Index, Integer, Numeric, String
from sqlalchemy.sql import func

from inventory_api.database import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    description = Column(String(500), nullable=True)
    category = Column(String, nullable=False)
    brand = Column(String, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)

    # Written only by the inventory ledger once the product exists
    stock = Column(Integer, nullable=False, default=0)

    sku = Column(String, nullable=False, unique=True, index=True)
    code = Column(String, nullable=False, unique=True)
    is_active = Column(Boolean, nullable=False, default=True)

    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_products_category_brand", "category", "brand"),
        CheckConstraint("price >= 0", name="ck_product_price_non_negative"),
        CheckConstraint("stock >= 0", name="ck_product_stock_non_negative"),
    )
