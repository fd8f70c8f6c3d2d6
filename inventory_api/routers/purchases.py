# inventory_api/routers/purchases.py

from datetime import date
from decimal import Decimal

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy import func
from sqlalchemy.orm import Session

from inventory_api.database import get_db
from inventory_api.core.filters import date_range_filters, search_filter
from inventory_api.core.rate_limiter import limiter
from inventory_api.models.purchases import Purchase
from inventory_api.schemas.purchase import (
    PurchaseAnalyticsResponse,
    PurchaseCreate,
    PurchaseResponse,
    PurchaseUpdate,
)
from inventory_api.services.transactions import TransactionCoordinator, TransactionKind

router = APIRouter(prefix="/purchases", tags=["Purchases"])


# =========================================================
# LIST PURCHASES
# =========================================================
@router.get("", response_model=list[PurchaseResponse])
def list_purchases(
    db: Session = Depends(get_db),
    search: str | None = Query(None),
    start_date: date | None = Query(None),
    end_date: date | None = Query(None),
    limit: int = Query(10, ge=1, le=100),
    offset: int = Query(0, ge=0),
):
    query = db.query(Purchase).filter(
        *date_range_filters(Purchase.created_at, start_date, end_date)
    )

    clause = search_filter(search, Purchase.product_name, Purchase.supplier_name)
    if clause is not None:
        query = query.filter(clause)

    return (
        query
        .order_by(Purchase.created_at.desc(), Purchase.id.desc())
        .limit(limit)
        .offset(offset)
        .all()
    )


# =========================================================
# PURCHASE ANALYTICS
# =========================================================
@router.get("/analytics", response_model=PurchaseAnalyticsResponse)
def purchase_analytics(
    db: Session = Depends(get_db),
    start_date: date | None = Query(None),
    end_date: date | None = Query(None),
):
    filters = date_range_filters(Purchase.created_at, start_date, end_date)

    count, total_expenses, average_value, total_quantity = (
        db.query(
            func.count(Purchase.id),
            func.coalesce(func.sum(Purchase.total), 0),
            func.coalesce(func.avg(Purchase.total), 0),
            func.coalesce(func.sum(Purchase.quantity), 0),
        )
        .filter(*filters)
        .one()
    )

    expenses = func.coalesce(func.sum(Purchase.total), 0)
    top_suppliers = (
        db.query(
            Purchase.supplier_name,
            func.count(Purchase.id),
            expenses,
        )
        .filter(*filters)
        .group_by(Purchase.supplier_name)
        .order_by(expenses.desc())
        .limit(10)
        .all()
    )

    return {
        "summary": {
            "count": count,
            "total_amount": Decimal(total_expenses),
            "average_value": Decimal(average_value).quantize(Decimal("0.01")),
            "total_quantity": int(total_quantity),
        },
        "top_suppliers": [
            {
                "supplier_name": supplier_name,
                "total_purchases": purchases,
                "total_expenses": Decimal(supplier_expenses),
            }
            for supplier_name, purchases, supplier_expenses in top_suppliers
        ],
    }


# =========================================================
# GET SINGLE PURCHASE
# =========================================================
@router.get("/{purchase_id}", response_model=PurchaseResponse)
def get_purchase(
    purchase_id: int,
    db: Session = Depends(get_db),
):
    return TransactionCoordinator(db).get(TransactionKind.PURCHASE, purchase_id)


# =========================================================
# CREATE PURCHASE (stock += quantity)
# =========================================================
@router.post("", response_model=PurchaseResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit("30/minute")
def create_purchase(
    request: Request,
    purchase_data: PurchaseCreate,
    db: Session = Depends(get_db),
):
    return TransactionCoordinator(db).create(TransactionKind.PURCHASE, purchase_data)


# =========================================================
# UPDATE PURCHASE (stock += new - old)
# =========================================================
@router.put("/{purchase_id}", response_model=PurchaseResponse)
def update_purchase(
    purchase_id: int,
    purchase_data: PurchaseUpdate,
    db: Session = Depends(get_db),
):
    return TransactionCoordinator(db).update(
        TransactionKind.PURCHASE, purchase_id, purchase_data
    )


# =========================================================
# DELETE PURCHASE (stock -= quantity)
# =========================================================
@router.delete("/{purchase_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_purchase(
    purchase_id: int,
    db: Session = Depends(get_db),
):
    TransactionCoordinator(db).delete(TransactionKind.PURCHASE, purchase_id)
    return None
