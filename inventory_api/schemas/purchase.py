# schemas/purchase.py

from pydantic import BaseModel, Field
from decimal import Decimal
from typing import List

from inventory_api.schemas.transaction import (
    TransactionCreate,
    TransactionResponse,
    TransactionSummary,
    TransactionUpdate,
)


class PurchaseCreate(TransactionCreate):
    supplier_id: str | None = None
    supplier_name: str | None = Field(None, max_length=100)


class PurchaseUpdate(TransactionUpdate):
    supplier_id: str | None = None
    supplier_name: str | None = Field(None, max_length=100)


class PurchaseResponse(TransactionResponse):
    supplier_id: str | None
    supplier_name: str | None


class SupplierTotal(BaseModel):
    supplier_name: str | None
    total_purchases: int
    total_expenses: Decimal


class PurchaseAnalyticsResponse(BaseModel):
    summary: TransactionSummary
    top_suppliers: List[SupplierTotal]
