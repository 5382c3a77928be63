"""Tests for the persisted studio board and its storage backends."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import pytest_mock

from apareri.db.session import create_engine_for, create_session_factory, init_db
from apareri.storage.backend import JsonFileStorage, MemoryStorage, StorageUnavailableError
from apareri.storage.board import BoardEntry, BoardStore, LookMode
from apareri.storage.sql import SqlKeyValueStorage

KEY = "apareri_board_v1"


def make_entry(ts: int, base: str = "dress", mode: str = "dress") -> BoardEntry:
    return BoardEntry(base=base, mode=mode, length="midi", slit="low", accent="emerald", ts=ts)


@pytest.mark.asyncio
async def test_load_missing_key_is_empty(tmp_path: Path) -> None:
    store = BoardStore(JsonFileStorage(tmp_path))

    assert await store.load() == ()


@pytest.mark.asyncio
async def test_pin_survives_reload(tmp_path: Path) -> None:
    storage = JsonFileStorage(tmp_path)
    store = BoardStore(storage)
    await store.load()
    entry = make_entry(1)

    await store.pin(entry)
    reloaded = await BoardStore(storage).load()

    assert reloaded[0] == entry
    assert (tmp_path / f"{KEY}.json").exists()


@pytest.mark.asyncio
async def test_persisted_format_uses_short_field_names(tmp_path: Path) -> None:
    store = BoardStore(JsonFileStorage(tmp_path))
    await store.pin(make_entry(1700000000000, base="knit", mode="skirt"))

    payload = json.loads((tmp_path / f"{KEY}.json").read_text(encoding="utf-8"))

    assert payload == [
        {
            "base": "knit",
            "mode": "skirt",
            "length": "midi",
            "slit": "low",
            "accent": "emerald",
            "ts": 1700000000000,
        },
    ]


@pytest.mark.asyncio
async def test_capacity_evicts_oldest() -> None:
    storage = MemoryStorage()
    store = BoardStore(storage)

    for ts in range(25):
        await store.pin(make_entry(ts))

    assert len(store) == 20
    assert [entry.ts for entry in store.entries] == list(range(24, 4, -1))
    reloaded = await BoardStore(storage).load()
    assert len(reloaded) == 20


@pytest.mark.asyncio
async def test_remove_by_position_and_out_of_range_noop() -> None:
    store = BoardStore(MemoryStorage())
    for ts in range(3):
        await store.pin(make_entry(ts))

    state = await store.remove(1)
    assert [entry.ts for entry in state] == [2, 0]

    assert await store.remove(5) == state
    assert await store.remove(-1) == state


@pytest.mark.asyncio
async def test_clear_persists_empty_board() -> None:
    storage = MemoryStorage()
    store = BoardStore(storage)
    await store.pin(make_entry(1))

    await store.clear()

    assert await storage.get(KEY) == "[]"
    assert await BoardStore(storage).load() == ()


@pytest.mark.asyncio
@pytest.mark.parametrize("raw", ["{not json", '{"base": "dress"}', '"text"', "42", "null", ""])
async def test_corrupt_storage_reads_as_empty(raw: str) -> None:
    store = BoardStore(MemoryStorage({KEY: raw}))

    assert await store.load() == ()


@pytest.mark.asyncio
async def test_malformed_items_are_dropped() -> None:
    good = make_entry(5).model_dump(mode="json")
    raw = json.dumps([good, {"base": "dress", "mode": "cape"}, "junk"])

    entries = await BoardStore(MemoryStorage({KEY: raw})).load()

    assert entries == (make_entry(5),)


@pytest.mark.asyncio
async def test_oversized_stored_board_is_truncated() -> None:
    raw = json.dumps([make_entry(ts).model_dump(mode="json") for ts in range(30)])

    entries = await BoardStore(MemoryStorage({KEY: raw})).load()

    assert len(entries) == 20


@pytest.mark.asyncio
async def test_persist_failure_keeps_memory_state(mocker: pytest_mock.MockerFixture) -> None:
    storage = MemoryStorage()
    mocker.patch.object(storage, "set", side_effect=StorageUnavailableError("quota exceeded"))
    store = BoardStore(storage)

    state = await store.pin(make_entry(1))

    assert state == (make_entry(1),)
    assert await storage.get(KEY) is None


@pytest.mark.asyncio
async def test_read_failure_reads_as_empty(mocker: pytest_mock.MockerFixture) -> None:
    storage = MemoryStorage({KEY: "[]"})
    mocker.patch.object(storage, "get", side_effect=StorageUnavailableError("denied"))

    assert await BoardStore(storage).load() == ()


@pytest.mark.asyncio
async def test_summarize_resolves_titles() -> None:
    store = BoardStore(MemoryStorage())
    await store.pin(make_entry(1, base="mystery"))
    await store.pin(make_entry(2, base="knit", mode="skirt"))

    assert store.summarize(10) == [
        "Reversible Knit — skirt/midi/low/emerald",
        "Item — dress/midi/low/emerald",
    ]
    assert store.summarize(1) == ["Reversible Knit — skirt/midi/low/emerald"]
    assert store.summarize(0) == []


def test_entry_create_stamps_time() -> None:
    entry = BoardEntry.create(base="dress", mode="skirt", length="mini", slit="high", accent="mono")

    assert entry.mode is LookMode.SKIRT
    assert entry.ts > 0
    assert entry.created_at.year >= 2024


@pytest.mark.asyncio
async def test_sql_storage_round_trip(tmp_path: Path) -> None:
    engine = create_engine_for(f"sqlite+aiosqlite:///{tmp_path / 'db' / 'board.db'}")
    await init_db(engine)
    storage = SqlKeyValueStorage(create_session_factory(engine))
    try:
        store = BoardStore(storage)
        await store.load()
        await store.pin(make_entry(1))
        await store.pin(make_entry(2))

        reloaded = await BoardStore(storage).load()

        assert [entry.ts for entry in reloaded] == [2, 1]
        assert await storage.get("missing") is None
    finally:
        await engine.dispose()
