# backend/models/db_models.py

from sqlalchemy import Boolean, Column, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class TransactionRecord(Base):
    """Seeded transaction row. Written by /seed, never read by the API."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    price = Column(Float, nullable=False)
    category = Column(String(64), index=True)
    date_of_sale = Column(DateTime, nullable=False)
    sold = Column(Boolean, nullable=False, default=False)
