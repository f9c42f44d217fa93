# backend/routers/transactions.py

from typing import Optional

from fastapi import APIRouter

from models.transaction_models import TransactionPage
from routers.common import load_transactions
from services.transaction_filters import filter_transactions, optional_month, paginate

router = APIRouter(tags=["Transactions"])


@router.get("/transactions", response_model=TransactionPage)
async def list_transactions(
    page: Optional[str] = None,
    perPage: Optional[str] = None,
    search: Optional[str] = None,
    month: Optional[str] = None,
):
    """
    Paginated transactions, optionally narrowed to a month and/or a
    title/description search. A bad month is ignored here.
    """
    transactions = await load_transactions("Error fetching transactions")
    filtered = filter_transactions(transactions, month=optional_month(month), search=search)
    return paginate(filtered, page=page, per_page=perPage)
