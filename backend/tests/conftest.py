import sys
from pathlib import Path

BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(BACKEND_DIR))

import pytest

from models.transaction_models import Transaction

RAW_TRANSACTIONS = [
    {
        "id": 1,
        "title": "Fjallraven Backpack",
        "description": "Your perfect pack for everyday use",
        "price": 329.85,
        "category": "men's clothing",
        "image": "https://example.com/1.jpg",
        "sold": False,
        "dateOfSale": "2021-11-27T20:29:54+05:30",
    },
    {
        "id": 2,
        "title": "Mens Casual T-Shirt",
        "description": "Slim fitting style, contrast raglan sleeve",
        "price": 44.6,
        "category": "men's clothing",
        "sold": False,
        "dateOfSale": "2021-10-27T20:29:54+05:30",
    },
    {
        "id": 3,
        "title": "Solid Gold Bracelet",
        "description": "From our Legends Collection",
        "price": 6950,
        "category": "jewelery",
        "sold": True,
        "dateOfSale": "2022-11-04T20:29:54+05:30",
    },
    {
        "id": 4,
        "title": "WD 2TB Elements Hard Drive",
        "description": "USB 3.0 and USB 2.0 compatibility",
        "price": 64,
        "category": "electronics",
        "sold": True,
        "dateOfSale": "2022-03-27T20:29:54+05:30",
    },
    {
        "id": 5,
        "title": "SanDisk SSD",
        "description": "Easy upgrade for faster boot up",
        "price": 109,
        "category": "electronics",
        "sold": False,
        "dateOfSale": "2021-11-12T20:29:54+05:30",
    },
    {
        "id": 6,
        "title": "Rain Jacket",
        "description": "Lightweight, perfect for backpack trips",
        "price": 39.99,
        "category": "",
        "sold": True,
        "dateOfSale": "2022-11-01T08:00:00+00:00",
    },
]


@pytest.fixture
def raw_transactions():
    return [dict(r) for r in RAW_TRANSACTIONS]


@pytest.fixture
def transactions(raw_transactions):
    return [Transaction.from_source(r) for r in raw_transactions]


def make_transactions(prices, month=6):
    return [
        Transaction(title=f"Item {i}", price=p, dateOfSale=f"2022-{month:02d}-15T10:00:00Z")
        for i, p in enumerate(prices)
    ]
