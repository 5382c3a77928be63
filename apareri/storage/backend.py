"""Key-value storage ports backing the studio board."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Protocol


class StorageUnavailableError(RuntimeError):
    """Raised when durable storage cannot be read or written."""


class KeyValueStorage(Protocol):
    """Minimal durable storage: one string value per key."""

    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...


class MemoryStorage:
    """Process-local storage; nothing survives a restart."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._values.get(key)

    async def set(self, key: str, value: str) -> None:
        self._values[key] = value


class JsonFileStorage:
    """Stores each key as a separate UTF-8 file under ``root``."""

    def __init__(self, root: Path) -> None:
        self._root = root
        self._locks: dict[str, asyncio.Lock] = {}

    def _path(self, key: str) -> Path:
        return self._root / f"{key}.json"

    def _lock_for(self, key: str) -> asyncio.Lock:
        if key not in self._locks:
            self._locks[key] = asyncio.Lock()
        return self._locks[key]

    async def get(self, key: str) -> str | None:
        path = self._path(key)
        async with self._lock_for(key):
            if not path.exists():
                return None
            try:
                return await asyncio.to_thread(path.read_text, encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                raise StorageUnavailableError(f"Cannot read {path}: {exc}") from exc

    async def set(self, key: str, value: str) -> None:
        path = self._path(key)
        async with self._lock_for(key):
            try:
                await asyncio.to_thread(self._write_file, path, value)
            except OSError as exc:
                raise StorageUnavailableError(f"Cannot write {path}: {exc}") from exc

    @staticmethod
    def _write_file(path: Path, body: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(body, encoding="utf-8")
