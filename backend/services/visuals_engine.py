# backend/services/visuals_engine.py

from typing import List, Sequence

import numpy as np
import pandas as pd

from models.transaction_models import Transaction
from models.visuals_models import CategoryCount, PriceRangeCount
from services.stats_engine import to_frame
from services.transaction_filters import filter_by_month

# Upper edges are inclusive: (-inf, 50], (50, 100], ... (500, inf)
PRICE_BINS = [-np.inf, 50, 100, 200, 500, np.inf]
PRICE_LABELS = ["0-50", "51-100", "101-200", "201-500", "500+"]


def build_price_histogram(transactions: Sequence[Transaction], month: int) -> List[PriceRangeCount]:
    """
    Bar chart data: how many of the month's sales fall in each price range.
    All five ranges are always returned, in order. Rows without a price
    are left out.
    """
    df = to_frame(filter_by_month(transactions, month))

    buckets = pd.cut(df["price"], bins=PRICE_BINS, labels=PRICE_LABELS, right=True)
    counts = buckets.value_counts(sort=False)

    return [PriceRangeCount(range=label, count=int(counts.get(label, 0))) for label in PRICE_LABELS]


def build_category_histogram(transactions: Sequence[Transaction], month: int) -> List[CategoryCount]:
    """
    Pie chart data: sales per category, in the order categories first appear.
    """
    df = to_frame(filter_by_month(transactions, month))

    categorized = df[df["category"].fillna("").astype(str) != ""]
    if categorized.empty:
        return []

    counts = categorized.groupby("category", sort=False).size()
    return [CategoryCount(category=str(cat), count=int(n)) for cat, n in counts.items()]
