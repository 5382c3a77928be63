"""Selects the board storage backend from settings."""

from __future__ import annotations

import logging
from pathlib import Path

from apareri.config.settings import Settings
from apareri.storage.backend import JsonFileStorage, KeyValueStorage, MemoryStorage

logger = logging.getLogger(__name__)


async def build_storage(settings: Settings) -> KeyValueStorage:
    """Return the configured storage, creating SQL tables when needed."""

    backend = settings.board_backend
    if backend == "sql":
        from apareri.db.session import create_engine_for, create_session_factory, init_db
        from apareri.storage.sql import SqlKeyValueStorage

        engine = create_engine_for(settings.database_url)
        await init_db(engine)
        return SqlKeyValueStorage(create_session_factory(engine))
    if backend == "memory":
        return MemoryStorage()
    if backend != "json":
        logger.warning("Unknown BOARD_BACKEND %r, falling back to json files.", backend)
    return JsonFileStorage(Path(settings.board_storage_root))
