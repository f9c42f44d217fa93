# backend/routers/common.py

from typing import List, Optional

from fastapi import HTTPException

from models.transaction_models import Transaction
from services import transaction_source
from services.transaction_filters import InvalidMonthError, parse_month
from services.transaction_source import TransactionSourceError
from utils.logger import get_logger

logger = get_logger(__name__)


def require_month(raw: Optional[str]) -> int:
    try:
        return parse_month(raw)
    except InvalidMonthError as e:
        raise HTTPException(status_code=400, detail=str(e))


async def load_transactions(context: str) -> List[Transaction]:
    """
    Fetch the source data, turning an upstream failure into a 500 whose
    message names the endpoint that was being served.
    """
    try:
        return await transaction_source.fetch_transactions()
    except TransactionSourceError as e:
        logger.error("%s: %s", context, e)
        raise HTTPException(status_code=500, detail={"message": context, "error": str(e)})
