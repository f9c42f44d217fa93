import asyncio

import httpx
import pytest

from config import settings
from services.transaction_source import TransactionSourceError, fetch_transactions

SOURCE_URL = "https://example.com/product_transaction.json"


@pytest.fixture(autouse=True)
def source_url(monkeypatch):
    monkeypatch.setattr(settings, "source_url", SOURCE_URL)


def _fetch_with(handler):
    async def run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            return await fetch_transactions(client)

    return asyncio.run(run())


def test_fetch_parses_records(raw_transactions):
    seen = []

    def handler(request):
        seen.append(str(request.url))
        return httpx.Response(200, json=raw_transactions)

    result = _fetch_with(handler)

    assert seen == [SOURCE_URL]
    assert len(result) == 6
    assert result[0].title == "Fjallraven Backpack"
    assert result[0].dateOfSale.month == 11
    assert result[2].price == 6950


def test_fetch_is_not_cached(raw_transactions):
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json=raw_transactions)

    _fetch_with(handler)
    _fetch_with(handler)
    assert len(calls) == 2


def test_fetch_bad_status():
    with pytest.raises(TransactionSourceError, match="status 503"):
        _fetch_with(lambda request: httpx.Response(503))


def test_fetch_not_a_list():
    with pytest.raises(TransactionSourceError):
        _fetch_with(lambda request: httpx.Response(200, json={"transactions": []}))


def test_fetch_invalid_json():
    with pytest.raises(TransactionSourceError):
        _fetch_with(lambda request: httpx.Response(200, content=b"<html>nope</html>"))


def test_fetch_network_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(TransactionSourceError, match="connection refused"):
        _fetch_with(handler)


def test_fetch_malformed_record():
    with pytest.raises(TransactionSourceError):
        _fetch_with(lambda request: httpx.Response(200, json=[{"title": "x", "dateOfSale": "not a date"}]))


def test_fetch_keeps_source_rows_for_listing():
    row = {"id": 7, "title": "Lamp", "price": 20, "sold": None, "dateOfSale": "2021-09-01T00:00:00.000Z"}

    result = _fetch_with(lambda request: httpx.Response(200, json=[row]))

    assert result[0].to_payload() == row
    assert result[0].dateOfSale.month == 9
