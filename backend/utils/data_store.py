# backend/utils/data_store.py

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from models.db_models import Base


def init_engine(url: str) -> Engine:
    """
    Build the process-wide engine and make sure the tables exist.
    Called once at startup; the seed endpoint is the only consumer.
    """
    kwargs = {}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        # In-memory SQLite lives per connection, so share one
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool

    engine = create_engine(url, **kwargs)
    Base.metadata.create_all(engine)
    return engine


def open_session(engine: Engine) -> Session:
    return Session(engine, expire_on_commit=False)
