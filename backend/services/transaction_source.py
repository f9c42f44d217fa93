# backend/services/transaction_source.py

from typing import List, Optional

import httpx
from pydantic import ValidationError

from config import settings
from models.transaction_models import Transaction
from utils.logger import get_logger

logger = get_logger(__name__)


class TransactionSourceError(Exception):
    pass


async def fetch_transactions(client: Optional[httpx.AsyncClient] = None) -> List[Transaction]:
    """
    Fetch the full product transaction dataset from the remote source.
    Nothing is cached: every call goes back over the network.
    """
    url = settings.source_url

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=settings.source_timeout) as owned:
                resp = await owned.get(url)
        else:
            resp = await client.get(url)
    except httpx.HTTPError as e:
        raise TransactionSourceError(f"Failed to fetch {url}: {e}") from e

    if resp.status_code != 200:
        raise TransactionSourceError(f"Failed to fetch {url} (status {resp.status_code})")

    try:
        payload = resp.json()
    except ValueError as e:
        raise TransactionSourceError(f"Source returned invalid JSON: {e}") from e

    if not isinstance(payload, list):
        raise TransactionSourceError("Source did not return a list of transactions")

    try:
        transactions = [Transaction.from_source(item) for item in payload]
    except ValidationError as e:
        raise TransactionSourceError(f"Malformed transaction in source data: {e}") from e

    logger.debug("Fetched %d transactions from %s", len(transactions), url)
    return transactions
