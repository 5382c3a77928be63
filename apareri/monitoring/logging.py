"""Logging setup for the studio API and scripts."""

from __future__ import annotations

import logging

from apareri.config.settings import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# storage drivers log every statement at INFO
QUIET_LOGGERS = ("aiosqlite", "sqlalchemy.engine")


def configure_logging(level: str | None = None) -> int:
    """Apply ``level`` (or LOG_LEVEL) to the root logger and return the numeric level."""

    name = (level or get_settings().log_level).upper()
    numeric = getattr(logging, name, logging.INFO)
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    logging.getLogger().setLevel(numeric)
    for quiet in QUIET_LOGGERS:
        logging.getLogger(quiet).setLevel(max(numeric, logging.WARNING))
    return numeric
