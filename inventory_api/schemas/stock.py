# schemas/stock.py

from pydantic import BaseModel, Field

from inventory_api.schemas.transaction import MAX_QUANTITY


class StockAdjustment(BaseModel):
    delta: int = Field(
        ...,
        ge=-MAX_QUANTITY,
        le=MAX_QUANTITY,
        description="Signed change applied to the product's stock",
    )
    reason: str | None = Field(None, max_length=200)


class StockLevelResponse(BaseModel):
    product_id: int
    stock: int
