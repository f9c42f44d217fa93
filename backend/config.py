# backend/config.py

import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

load_dotenv()

DEFAULT_SOURCE_URL = "https://s3.amazonaws.com/roxiler.com/product_transaction.json"


def _origins_from_env() -> List[str]:
    return [o.strip() for o in os.getenv("CORS_ALLOWED_ORIGINS", "*").split(",") if o.strip()]


@dataclass
class Settings:
    """Runtime settings, read from the environment (and an optional .env)."""

    source_url: str = field(default_factory=lambda: os.getenv("TRANSACTIONS_SOURCE_URL", DEFAULT_SOURCE_URL))
    source_timeout: float = field(default_factory=lambda: float(os.getenv("SOURCE_TIMEOUT_SECONDS", "10")))
    database_url: str = field(default_factory=lambda: os.getenv("DATABASE_URL", "sqlite:///./transactions.db"))
    api_prefix: str = field(default_factory=lambda: os.getenv("API_PREFIX", "").rstrip("/"))
    allowed_origins: List[str] = field(default_factory=_origins_from_env)
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "5000")))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))


settings = Settings()
