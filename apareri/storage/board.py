"""Persisted, capacity-bounded board of pinned looks.

The board lives under a single storage key as a JSON array of
``{base, mode, length, slit, accent, ts}`` objects, newest first. Storage is the
source of truth across sessions; within a session the in-memory tuple is
authoritative, so failed writes are logged and otherwise ignored.
"""

from __future__ import annotations

import asyncio
import json
import logging
import time
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Sequence

from pydantic import BaseModel, ConfigDict, ValidationError

from apareri.catalog.products import BOARD_PRODUCTS, BoardProduct, resolve_board_title
from apareri.metrics.prometheus_exporter import (
    board_persist_failures_total,
    board_pins_total,
    board_size,
)
from apareri.storage.backend import KeyValueStorage, StorageUnavailableError

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "apareri_board_v1"
DEFAULT_CAPACITY = 20
SUMMARY_FALLBACK_TITLE = "Item"


class LookMode(str, Enum):
    DRESS = "dress"
    SKIRT = "skirt"


class LookLength(str, Enum):
    MAXI = "maxi"
    MIDI = "midi"
    KNEE = "knee"
    MINI = "mini"


class SlitDepth(str, Enum):
    NONE = "none"
    LOW = "low"
    MID = "mid"
    HIGH = "high"


class Accent(str, Enum):
    EMERALD = "emerald"
    PASTEL = "pastel"
    MONO = "mono"


class BoardEntry(BaseModel):
    """A pinned look. Immutable; identified only by its position on the board."""

    model_config = ConfigDict(frozen=True)

    base: str
    mode: LookMode
    length: LookLength
    slit: SlitDepth
    accent: Accent
    ts: int

    @classmethod
    def create(
        cls,
        *,
        base: str,
        mode: LookMode | str,
        length: LookLength | str,
        slit: SlitDepth | str,
        accent: Accent | str,
    ) -> "BoardEntry":
        """Build an entry stamped with the current wall-clock time in milliseconds."""

        return cls(
            base=base,
            mode=mode,
            length=length,
            slit=slit,
            accent=accent,
            ts=int(time.time() * 1000),
        )

    @property
    def created_at(self) -> datetime:
        return datetime.fromtimestamp(self.ts / 1000, tz=timezone.utc)

    @property
    def variant(self) -> str:
        return f"{self.mode.value}/{self.length.value}/{self.slit.value}/{self.accent.value}"


BoardState = tuple[BoardEntry, ...]


def parse_board(raw: str | None, capacity: int = DEFAULT_CAPACITY) -> BoardState:
    """Decode stored board JSON; anything unreadable becomes an empty board."""

    if not raw:
        return ()
    try:
        payload: Any = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning("Stored board is not valid JSON, starting empty.")
        return ()
    if not isinstance(payload, list):
        logger.warning("Stored board is %s, not an array; starting empty.", type(payload).__name__)
        return ()

    entries: list[BoardEntry] = []
    for index, item in enumerate(payload):
        try:
            entries.append(BoardEntry.model_validate(item))
        except ValidationError as exc:
            logger.warning("Dropping malformed board entry #%s: %s", index, exc.errors()[:1])
    return tuple(entries[:capacity])


def dump_board(entries: Sequence[BoardEntry]) -> str:
    return json.dumps([entry.model_dump(mode="json") for entry in entries], ensure_ascii=False)


class BoardStore:
    """Newest-first board of at most ``capacity`` looks, persisted after every change."""

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        key: str = DEFAULT_STORAGE_KEY,
        capacity: int = DEFAULT_CAPACITY,
        catalog: Sequence[BoardProduct] = BOARD_PRODUCTS,
    ) -> None:
        self._storage = storage
        self._key = key
        self._capacity = capacity
        self._catalog = catalog
        self._entries: BoardState = ()
        self._lock = asyncio.Lock()

    @property
    def entries(self) -> BoardState:
        return self._entries

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return len(self._entries)

    async def load(self) -> BoardState:
        """Replace the in-memory board with what storage holds."""

        async with self._lock:
            try:
                raw = await self._storage.get(self._key)
            except StorageUnavailableError as exc:
                logger.warning("Board storage unavailable, starting empty: %s", exc)
                raw = None
            self._entries = parse_board(raw, self._capacity)
            board_size.set(len(self._entries))
            return self._entries

    async def pin(self, entry: BoardEntry) -> BoardState:
        """Prepend ``entry``; the oldest looks past capacity fall off the end."""

        async with self._lock:
            self._entries = (entry, *self._entries)[: self._capacity]
            board_pins_total.inc()
            await self._persist()
            return self._entries

    async def remove(self, position: int) -> BoardState:
        async with self._lock:
            if not 0 <= position < len(self._entries):
                logger.debug("Ignoring removal at out-of-range position %s", position)
                return self._entries
            self._entries = self._entries[:position] + self._entries[position + 1 :]
            await self._persist()
            return self._entries

    async def clear(self) -> BoardState:
        async with self._lock:
            self._entries = ()
            await self._persist()
            return self._entries

    def title_for(self, entry: BoardEntry, fallback: str = SUMMARY_FALLBACK_TITLE) -> str:
        return resolve_board_title(entry.base, fallback, self._catalog)

    def summarize(self, limit: int) -> list[str]:
        """Describe the newest ``limit`` looks, one line each."""

        return [
            f"{self.title_for(entry)} — {entry.variant}"
            for entry in self._entries[: max(0, limit)]
        ]

    async def _persist(self) -> None:
        board_size.set(len(self._entries))
        try:
            await self._storage.set(self._key, dump_board(self._entries))
        except StorageUnavailableError as exc:
            board_persist_failures_total.inc()
            logger.warning("Board kept in memory only, persist failed: %s", exc)
