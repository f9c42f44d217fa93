# backend/routers/stats.py

from typing import Optional

from fastapi import APIRouter

from models.stats_models import MonthlyStats
from routers.common import load_transactions, require_month
from services.stats_engine import compute_monthly_stats

router = APIRouter(tags=["Stats"])


@router.get("/statistics", response_model=MonthlyStats)
async def statistics(month: Optional[str] = None):
    """
    Total sale amount plus sold / not sold counts for a month (any year).
    """
    month_num = require_month(month)
    transactions = await load_transactions("Error fetching statistics")
    return compute_monthly_stats(transactions, month_num)
