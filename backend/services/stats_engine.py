# backend/services/stats_engine.py

from typing import Sequence

import pandas as pd

from models.stats_models import MonthlyStats
from models.transaction_models import Transaction
from services.transaction_filters import filter_by_month

FRAME_COLUMNS = ["title", "description", "price", "category", "sold"]


def to_frame(transactions: Sequence[Transaction]) -> pd.DataFrame:
    """
    Build a DataFrame with fixed columns, so an empty month still has them.
    """
    rows = [{col: getattr(t, col) for col in FRAME_COLUMNS} for t in transactions]
    df = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    df["price"] = pd.to_numeric(df["price"], errors="coerce").astype(float)
    df["sold"] = df["sold"].astype(bool)
    return df


def compute_monthly_stats(transactions: Sequence[Transaction], month: int) -> MonthlyStats:
    df = to_frame(filter_by_month(transactions, month))

    sold = int(df["sold"].sum())

    return MonthlyStats(
        totalAmount=float(df["price"].sum()),  # NaN prices are skipped
        totalSoldItems=sold,
        totalNotSoldItems=len(df) - sold,
    )
