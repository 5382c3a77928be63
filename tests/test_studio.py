"""Tests for the studio service wiring."""

from __future__ import annotations

import random

import pytest
import pytest_mock

from apareri.services.notices import ClipboardError, EventBuffer, MemoryClipboard, Notice
from apareri.services.studio import StudioService
from apareri.storage.backend import MemoryStorage
from apareri.storage.board import BoardEntry, BoardStore, LookLength, LookMode


def make_studio(
    *,
    clipboard: MemoryClipboard | None = None,
    cooldown: float = 60.0,
    reduced_motion: bool = False,
) -> tuple[StudioService, EventBuffer, MemoryClipboard]:
    events = EventBuffer()
    clipboard = clipboard or MemoryClipboard()
    studio = StudioService(
        BoardStore(MemoryStorage()),
        events,
        events,
        clipboard,
        cooldown=cooldown,
        reduced_motion=reduced_motion,
        rng=random.Random(3),
    )
    return studio, events, clipboard


def make_entry(ts: int) -> BoardEntry:
    return BoardEntry(base="jewelry", mode="dress", length="maxi", slit="none", accent="mono", ts=ts)


@pytest.mark.asyncio
async def test_start_does_not_celebrate() -> None:
    studio, events, _ = make_studio()

    await studio.start()

    assert studio.capsule.touched is False
    assert studio.capsule_result().combos == 72
    assert events.celebrations == []


@pytest.mark.asyncio
async def test_capsule_updates_celebrate_once_per_window() -> None:
    studio, events, _ = make_studio()
    await studio.start()

    first = studio.update_capsule(tops="10", bottoms=10, layers=2, include_layers="yes", goal=100)
    studio.update_capsule(tops=11, bottoms=10, layers=2, include_layers="yes", goal=100)

    assert first.combos == 200
    assert first.tier == "ICONIC"
    assert len(events.celebrations) == 1
    assert events.celebrations[0].anchor == "capsule"


@pytest.mark.asyncio
async def test_reduced_motion_uses_formatted_count() -> None:
    studio, events, _ = make_studio(reduced_motion=True)

    studio.update_capsule(tops=30, bottoms=30, layers=20, include_layers=True, goal=1000)

    assert events.celebrations[0].text == "18,000 🎉"


@pytest.mark.asyncio
async def test_rejected_toggle_sends_notice() -> None:
    studio, events, _ = make_studio()
    for category in ("dress", "set", "skirt"):
        assert studio.toggle_category(category) is True
    events.drain()

    accepted = studio.toggle_category("scarf")

    assert accepted is False
    assert events.notices == [Notice("Select at least one", "Keep one mode enabled to calculate.")]
    assert events.celebrations == []
    assert studio.multiwear_result().total_ways == 2


@pytest.mark.asyncio
async def test_configure_multiwear_clamps_values() -> None:
    studio, _, _ = make_studio()

    result = studio.configure_multiwear(product_key="modular-dress", slit_setting="0", goal=2000)

    assert result.slit_setting == 1
    assert studio.multiwear.selection.goal == 1000
    assert result.goal_progress_label == "1%"


@pytest.mark.asyncio
async def test_copy_capsule_writes_clipboard_and_celebrates() -> None:
    studio, events, clipboard = make_studio()
    await studio.start()
    studio.update_capsule(tops=6, bottoms=4, layers=3, include_layers="yes", goal=60)

    assert await studio.copy_capsule() is True

    assert clipboard.text == "APARERI Capsule Score: 72 looks (tops:6, bottoms:4, layers:3)."
    assert events.notices == [Notice("Copied", "Your capsule score was copied to clipboard.")]
    assert len(events.celebrations) == 2


@pytest.mark.asyncio
async def test_copy_failure_sends_notice_and_keeps_state() -> None:
    studio, events, clipboard = make_studio(clipboard=MemoryClipboard(denied=True))
    await studio.start()
    await studio.pin(make_entry(1))
    events.drain()

    assert await studio.copy_board() is False

    assert clipboard.text is None
    assert events.notices == [Notice("Copy failed", "Your browser blocked clipboard access.")]
    assert events.celebrations == []
    assert len(studio.board) == 1


@pytest.mark.asyncio
async def test_copy_multiwear_failure_from_clipboard(mocker: pytest_mock.MockerFixture) -> None:
    studio, events, clipboard = make_studio()
    mocker.patch.object(clipboard, "write_text", side_effect=ClipboardError("blocked"))

    assert await studio.copy_multiwear() is False
    assert events.notices[-1].title == "Copy failed"


@pytest.mark.asyncio
async def test_pin_celebrates_and_board_text() -> None:
    studio, events, clipboard = make_studio()
    await studio.start()

    await studio.pin(make_entry(1))
    await studio.pin(make_entry(2))
    await studio.copy_board()

    assert len(events.celebrations) == 1
    assert events.celebrations[0].anchor == "board"
    assert clipboard.text == (
        "APARERI board (top 2):\n"
        "1. Modular Jewelry — dress/maxi/none/mono\n"
        "2. Modular Jewelry — dress/maxi/none/mono"
    )
    assert studio.board_cards()[0]["title"] == "Modular Jewelry"


@pytest.mark.asyncio
async def test_clear_and_remove() -> None:
    studio, events, _ = make_studio()
    await studio.pin(make_entry(1))
    await studio.pin(make_entry(2))

    assert [entry.ts for entry in await studio.remove(0)] == [1]
    assert await studio.clear() == ()
    assert events.notices[-1] == Notice("Cleared", "Your board was cleared.")
    assert studio.board_text() == "APARERI board is empty."


def test_randomize_look_sends_notice() -> None:
    studio, events, _ = make_studio()

    suggestion = studio.randomize_look()

    assert isinstance(suggestion.mode, LookMode)
    assert isinstance(suggestion.length, LookLength)
    assert events.notices[0].title == "Randomized"
