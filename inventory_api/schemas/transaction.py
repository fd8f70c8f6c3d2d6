# schemas/transaction.py

from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from decimal import Decimal

# Column limits: Integer quantity, Numeric(10, 2) price, Numeric(12, 2) total
MAX_QUANTITY = 2_147_483_647


class TransactionCreate(BaseModel):
    product_id: int
    product_name: str | None = Field(None, min_length=1)
    quantity: int = Field(
        ...,
        ge=1,
        le=MAX_QUANTITY,
        description="Quantity must be at least 1",
    )
    price: Decimal = Field(
        ...,
        ge=0,
        max_digits=10,
        decimal_places=2,
        description="Unit price cannot be negative",
    )
    total: Decimal | None = Field(
        None,
        ge=0,
        max_digits=12,
        decimal_places=2,
        description="Defaults to quantity * price when omitted",
    )


class TransactionUpdate(BaseModel):
    product_id: int | None = None
    product_name: str | None = Field(None, min_length=1)
    quantity: int | None = Field(None, ge=1, le=MAX_QUANTITY)
    price: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)
    total: Decimal | None = Field(None, ge=0, max_digits=12, decimal_places=2)


class TransactionResponse(BaseModel):
    id: int
    product_id: int
    product_name: str
    quantity: int
    price: Decimal
    total: Decimal
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class TransactionSummary(BaseModel):
    count: int
    total_amount: Decimal
    average_value: Decimal
    total_quantity: int
