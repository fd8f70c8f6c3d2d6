# =========================================================
# SALES ROUTER
#
# Every write goes through the TransactionCoordinator:
# - create:  stock -= quantity (rejected when stock is short)
# - update:  stock -= (new quantity - old quantity)
# - delete:  stock += quantity
# =========================================================

from datetime import date
from decimal import Decimal

from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy import func
from sqlalchemy.orm import Session

from inventory_api.database import get_db
from inventory_api.core.filters import date_range_filters, search_filter
from inventory_api.core.rate_limiter import limiter
from inventory_api.models.sales import Sale
from inventory_api.schemas.sale import (
    SaleAnalyticsResponse,
    SaleCreate,
    SaleResponse,
    SaleUpdate,
)
from inventory_api.services.transactions import TransactionCoordinator, TransactionKind

router = APIRouter(prefix="/sales", tags=["Sales"])


# =========================================================
# LIST SALES
# =========================================================
@router.get("", response_model=list[SaleResponse])
def list_sales(
    db: Session = Depends(get_db),
    search: str | None = Query(None),
    start_date: date | None = Query(None),
    end_date: date | None = Query(None),
    limit: int = Query(10, ge=1, le=100),
    offset: int = Query(0, ge=0),
):
    query = db.query(Sale).filter(
        *date_range_filters(Sale.created_at, start_date, end_date)
    )

    clause = search_filter(search, Sale.product_name, Sale.seller_name)
    if clause is not None:
        query = query.filter(clause)

    return (
        query
        .order_by(Sale.created_at.desc(), Sale.id.desc())
        .limit(limit)
        .offset(offset)
        .all()
    )


# =========================================================
# SALES ANALYTICS
# =========================================================
@router.get("/analytics", response_model=SaleAnalyticsResponse)
def sales_analytics(
    db: Session = Depends(get_db),
    start_date: date | None = Query(None),
    end_date: date | None = Query(None),
):
    filters = date_range_filters(Sale.created_at, start_date, end_date)

    count, total_revenue, average_value, total_quantity = (
        db.query(
            func.count(Sale.id),
            func.coalesce(func.sum(Sale.total), 0),
            func.coalesce(func.avg(Sale.total), 0),
            func.coalesce(func.sum(Sale.quantity), 0),
        )
        .filter(*filters)
        .one()
    )

    revenue = func.coalesce(func.sum(Sale.total), 0)
    top_products = (
        db.query(
            Sale.product_id,
            func.max(Sale.product_name),
            func.coalesce(func.sum(Sale.quantity), 0),
            revenue,
        )
        .filter(*filters)
        .group_by(Sale.product_id)
        .order_by(revenue.desc())
        .limit(10)
        .all()
    )

    return {
        "summary": {
            "count": count,
            "total_amount": Decimal(total_revenue),
            "average_value": Decimal(average_value).quantize(Decimal("0.01")),
            "total_quantity": int(total_quantity),
        },
        "top_products": [
            {
                "product_id": product_id,
                "product_name": product_name,
                "total_quantity": int(quantity),
                "total_revenue": Decimal(product_revenue),
            }
            for product_id, product_name, quantity, product_revenue in top_products
        ],
    }


# =========================================================
# GET SINGLE SALE
# =========================================================
@router.get("/{sale_id}", response_model=SaleResponse)
def get_sale(
    sale_id: int,
    db: Session = Depends(get_db),
):
    return TransactionCoordinator(db).get(TransactionKind.SALE, sale_id)


# =========================================================
# CREATE SALE
# =========================================================
@router.post("", response_model=SaleResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit("30/minute")
def create_sale(
    request: Request,
    sale_data: SaleCreate,
    db: Session = Depends(get_db),
):
    return TransactionCoordinator(db).create(TransactionKind.SALE, sale_data)


# =========================================================
# UPDATE SALE
# =========================================================
@router.put("/{sale_id}", response_model=SaleResponse)
def update_sale(
    sale_id: int,
    sale_data: SaleUpdate,
    db: Session = Depends(get_db),
):
    return TransactionCoordinator(db).update(TransactionKind.SALE, sale_id, sale_data)


# =========================================================
# DELETE SALE
# =========================================================
@router.delete("/{sale_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_sale(
    sale_id: int,
    db: Session = Depends(get_db),
):
    TransactionCoordinator(db).delete(TransactionKind.SALE, sale_id)
    return None
