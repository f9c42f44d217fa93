# backend/services/seed_generator.py

import random
from datetime import datetime
from typing import List, Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from models.db_models import TransactionRecord
from utils.data_store import open_session
from utils.logger import get_logger

logger = get_logger(__name__)

SEED_COUNT = 50
SEED_YEAR = 2024
SEED_CATEGORIES = ["Electronics", "Clothing", "Food", "Books"]


class SeedError(Exception):
    pass


def generate_mock_transactions(count: int = SEED_COUNT, rng: Optional[random.Random] = None) -> List[TransactionRecord]:
    rng = rng or random.Random()
    records = []

    for _ in range(count):
        month = rng.randint(1, 12)
        day = rng.randint(1, 28)
        records.append(TransactionRecord(
            title=f"Product {rng.randint(0, 99)}",
            description=f"Description for product {rng.randint(0, 99)}",
            price=rng.randint(1, 500),
            category=rng.choice(SEED_CATEGORIES),
            date_of_sale=datetime(SEED_YEAR, month, day),
            sold=rng.random() < 0.5,
        ))

    return records


def seed_database(engine: Engine, rng: Optional[random.Random] = None) -> int:
    """
    Insert one batch of mock transactions in a single commit.
    Returns the number of rows written.
    """
    records = generate_mock_transactions(rng=rng)

    session = open_session(engine)
    try:
        session.add_all(records)
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.error("Error seeding database: %s", e)
        raise SeedError(str(e)) from e
    finally:
        session.close()

    logger.info("Seeded %d mock transactions", len(records))
    return len(records)
