# backend/routers/visuals.py

from typing import List, Optional

from fastapi import APIRouter

from models.visuals_models import CategoryCount, PriceRangeCount
from routers.common import load_transactions, require_month
from services.visuals_engine import build_category_histogram, build_price_histogram

router = APIRouter(tags=["Visuals"])


@router.get("/bar-chart", response_model=List[PriceRangeCount])
async def bar_chart(month: Optional[str] = None):
    """
    Chart-ready price range counts. Always five entries.
    """
    month_num = require_month(month)
    transactions = await load_transactions("Error fetching bar chart data")
    return build_price_histogram(transactions, month_num)


@router.get("/pie-chart", response_model=List[CategoryCount])
async def pie_chart(month: Optional[str] = None):
    month_num = require_month(month)
    transactions = await load_transactions("Error fetching pie chart data")
    return build_category_histogram(transactions, month_num)
