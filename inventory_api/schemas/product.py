# schemas/product.py

from decimal import Decimal
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import List


class ProductCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = Field(None, max_length=500)
    category: str = Field(..., min_length=1)
    brand: str = Field(..., min_length=1)

    price: Decimal = Field(
        ...,
        ge=0,
        lt=100_000_000,
        description="Price cannot be negative"
    )

    # Opening balance; later changes go through purchases, sales or adjustments
    stock: int = Field(0, ge=0, description="Stock must be a non-negative integer")

    sku: str = Field(..., min_length=1)
    is_active: bool = True


class ProductUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = Field(None, max_length=500)
    category: str | None = Field(None, min_length=1)
    brand: str | None = Field(None, min_length=1)
    price: Decimal | None = Field(None, ge=0, lt=100_000_000)
    sku: str | None = Field(None, min_length=1)
    is_active: bool | None = None

    model_config = ConfigDict(extra="forbid")


class ProductResponse(BaseModel):
    id: int
    name: str
    description: str | None
    category: str
    brand: str
    price: Decimal
    stock: int
    sku: str
    code: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class LowStockResponse(BaseModel):
    threshold: int
    count: int
    products: List[ProductResponse]
