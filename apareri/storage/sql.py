"""Key-value storage on top of the async SQLAlchemy session."""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from apareri.db.models import StoredValue
from apareri.storage.backend import StorageUnavailableError


class SqlKeyValueStorage:
    """Reads and writes rows of the ``stored_values`` table."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def get(self, key: str) -> str | None:
        try:
            async with self._session_factory() as session:
                row = await session.get(StoredValue, key)
                return row.value if row else None
        except SQLAlchemyError as exc:
            raise StorageUnavailableError(f"Cannot read {key!r}: {exc}") from exc

    async def set(self, key: str, value: str) -> None:
        try:
            async with self._session_factory() as session:
                row = await session.get(StoredValue, key)
                if row is None:
                    session.add(StoredValue(key=key, value=value))
                else:
                    row.value = value
                await session.commit()
        except SQLAlchemyError as exc:
            raise StorageUnavailableError(f"Cannot write {key!r}: {exc}") from exc
