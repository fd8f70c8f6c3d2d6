# inventory_api/routers/inventory.py

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from inventory_api.database import get_db
from inventory_api.core.auth import get_products_access
from inventory_api.schemas.stock import StockAdjustment, StockLevelResponse
from inventory_api.services.transactions import TransactionCoordinator

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/inventory",
    tags=["Inventory"],
)


@router.post("/{product_id}/adjust", response_model=StockLevelResponse)
def adjust_stock(
    product_id: int,
    adjustment: StockAdjustment,
    db: Session = Depends(get_db),
    access: dict = Depends(get_products_access),
):
    new_stock = TransactionCoordinator(db).adjust_stock(product_id, adjustment.delta)

    logger.info(
        "Manual stock correction by %s on product %s: %+d (%s)",
        access.get("sub"), product_id, adjustment.delta, adjustment.reason or "no reason given",
    )

    return {"product_id": product_id, "stock": new_stock}
