# =========================================================
# DASHBOARD ROUTER
#
# Totals across all records plus a six-month series of
# sales and purchase amounts for charts.
# =========================================================

from datetime import date, datetime, timezone
from decimal import Decimal

from fastapi import APIRouter, Depends
from sqlalchemy import extract, func
from sqlalchemy.orm import Session

from inventory_api.database import get_db
from inventory_api.models.products import Product
from inventory_api.models.purchases import Purchase
from inventory_api.models.sales import Sale
from inventory_api.models.sellers import Seller
from inventory_api.schemas.dashboard import DashboardStatsResponse

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])

MONTH_NAMES = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
               "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


# =========================================================
# HELPER: FIRST DAY OF THE LAST N MONTHS (OLDEST FIRST)
# =========================================================
def _recent_months(today: date, count: int = 6) -> list[date]:
    months = []
    year, month = today.year, today.month

    for _ in range(count):
        months.append(date(year, month, 1))
        month -= 1
        if month == 0:
            month = 12
            year -= 1

    return list(reversed(months))


# =========================================================
# HELPER: MONTHLY TOTALS FOR ONE MODEL
# =========================================================
def _monthly_totals(db: Session, model, since: date) -> dict:
    year = extract("year", model.created_at)
    month = extract("month", model.created_at)

    rows = (
        db.query(year, month, func.coalesce(func.sum(model.total), 0))
        .filter(model.created_at >= datetime.combine(since, datetime.min.time()))
        .group_by(year, month)
        .all()
    )

    return {(int(y), int(m)): Decimal(total) for y, m, total in rows}


@router.get("", response_model=DashboardStatsResponse)
def get_dashboard_stats(db: Session = Depends(get_db)):
    total_products = db.query(func.count(Product.id)).scalar()
    total_sellers = db.query(func.count(Seller.id)).scalar()
    total_sales = db.query(func.count(Sale.id)).scalar()
    total_purchases = db.query(func.count(Purchase.id)).scalar()

    total_revenue = Decimal(
        db.query(func.coalesce(func.sum(Sale.total), 0)).scalar() or 0
    )
    total_expenses = Decimal(
        db.query(func.coalesce(func.sum(Purchase.total), 0)).scalar() or 0
    )

    months = _recent_months(datetime.now(timezone.utc).date())
    monthly_sales = _monthly_totals(db, Sale, months[0])
    monthly_purchases = _monthly_totals(db, Purchase, months[0])

    monthly_data = [
        {
            "month": MONTH_NAMES[start.month - 1],
            "sales": monthly_sales.get((start.year, start.month), Decimal("0")),
            "purchases": monthly_purchases.get((start.year, start.month), Decimal("0")),
        }
        for start in months
    ]

    return {
        "total_products": total_products,
        "total_sellers": total_sellers,
        "total_sales": total_sales,
        "total_purchases": total_purchases,
        "total_revenue": total_revenue,
        "total_expenses": total_expenses,
        "total_profit": total_revenue - total_expenses,
        "monthly_data": monthly_data,
    }
