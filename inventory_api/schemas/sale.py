# schemas/sale.py

from pydantic import BaseModel, Field
from decimal import Decimal
from typing import List

from inventory_api.schemas.transaction import (
    TransactionCreate,
    TransactionResponse,
    TransactionSummary,
    TransactionUpdate,
)


class SaleCreate(TransactionCreate):
    bill_no: str | None = Field(None, min_length=1)
    seller_id: int | None = None
    seller_name: str | None = None


class SaleUpdate(TransactionUpdate):
    bill_no: str | None = Field(None, min_length=1)
    seller_id: int | None = None
    seller_name: str | None = None


class SaleResponse(TransactionResponse):
    bill_no: str
    seller_id: int | None
    seller_name: str | None


class ProductRevenue(BaseModel):
    product_id: int
    product_name: str
    total_quantity: int
    total_revenue: Decimal


class SaleAnalyticsResponse(BaseModel):
    summary: TransactionSummary
    top_products: List[ProductRevenue]
