# schemas/dashboard.py

from pydantic import BaseModel
from decimal import Decimal
from typing import List


class MonthlyTotals(BaseModel):
    month: str
    sales: Decimal
    purchases: Decimal


class DashboardStatsResponse(BaseModel):
    total_products: int
    total_sellers: int
    total_sales: int
    total_purchases: int
    total_revenue: Decimal
    total_expenses: Decimal
    total_profit: Decimal
    monthly_data: List[MonthlyTotals]
