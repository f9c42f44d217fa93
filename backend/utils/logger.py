# backend/utils/logger.py

import logging
import sys

ROOT_LOGGER_NAME = "transactions_api"

_configured = False


def _configure(level: str) -> None:
    global _configured

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Return a child of the app logger, configuring the stdout handler once.
    """
    if not _configured:
        from config import settings
        _configure(settings.log_level)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
