# backend/services/transaction_filters.py

import math
import re
from typing import Any, List, Optional, Sequence

from models.transaction_models import Transaction, TransactionPage

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 10

MONTH_PATTERN = re.compile(r"\s*[+-]?(\d+(\.\d*)?|\.\d+)\s*")


class InvalidMonthError(ValueError):
    pass


def parse_month(raw: Any) -> int:
    """
    Month parsing for the statistics endpoints.
    Accepts a plain decimal number in 1..12 and truncates it, so "11.0"
    and "1.5" mean 11 and 1. Anything else raises InvalidMonthError.
    """
    if raw is None:
        raise InvalidMonthError("Invalid month provided")
    if not MONTH_PATTERN.fullmatch(str(raw)):
        raise InvalidMonthError("Invalid month provided")
    value = float(raw)
    if value < 1 or value > 12:
        raise InvalidMonthError("Invalid month provided")
    return int(value)


def optional_month(raw: Any) -> Optional[int]:
    # Listing endpoint: a bad month just means "don't filter"
    try:
        return parse_month(raw)
    except InvalidMonthError:
        return None


def _int_or_default(raw: Any, default: int) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError):
        return default


def matches_month(transaction: Transaction, month: int) -> bool:
    if transaction.dateOfSale is None:
        return False
    return transaction.dateOfSale.month == month


def matches_search(transaction: Transaction, search: str) -> bool:
    needle = search.lower()
    title = (transaction.title or "").lower()
    description = (transaction.description or "").lower()
    return needle in title or needle in description


def filter_by_month(transactions: Sequence[Transaction], month: int) -> List[Transaction]:
    return [t for t in transactions if matches_month(t, month)]


def filter_transactions(
    transactions: Sequence[Transaction],
    month: Optional[int] = None,
    search: Optional[str] = None,
) -> List[Transaction]:
    """
    Apply the optional month and search predicates (ANDed), keeping order.
    An empty search string is the same as no search.
    """
    result = list(transactions)
    if month is not None:
        result = filter_by_month(result, month)
    if search:
        result = [t for t in result if matches_search(t, search)]
    return result


def paginate(transactions: Sequence[Transaction], page: Any = None, per_page: Any = None) -> TransactionPage:
    page = _int_or_default(page, DEFAULT_PAGE)
    per_page = _int_or_default(per_page, DEFAULT_PER_PAGE)
    if per_page < 1:
        per_page = DEFAULT_PER_PAGE

    total_count = len(transactions)
    total_pages = math.ceil(total_count / per_page)

    if page < 1:
        window: Sequence[Transaction] = []
    else:
        window = transactions[(page - 1) * per_page:page * per_page]

    return TransactionPage(
        transactions=[t.to_payload() for t in window],
        totalCount=total_count,
        totalPages=total_pages,
        currentPage=page,
    )
