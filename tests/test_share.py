"""Tests for clipboard summary formats."""

from __future__ import annotations

from apareri.calculators.capsule import CapsuleConfig, CapsuleEngine
from apareri.calculators.multiwear import MultiwearEngine
from apareri.services.share import (
    board_card,
    board_share_text,
    capsule_share_text,
    multiwear_share_text,
)
from apareri.storage.board import BoardEntry


def test_capsule_share_with_layers() -> None:
    result = CapsuleEngine().evaluate(CapsuleConfig())

    assert capsule_share_text(result) == "APARERI Capsule Score: 72 looks (tops:6, bottoms:4, layers:3)."


def test_capsule_share_without_layers() -> None:
    result = CapsuleEngine().evaluate(CapsuleConfig(tops=2, bottoms=3, layers=5, include_layers=False))

    assert capsule_share_text(result) == "APARERI Capsule Score: 6 looks (tops:2, bottoms:3)."


def test_multiwear_share_block() -> None:
    result = MultiwearEngine().current()

    assert multiwear_share_text(result) == "\n".join(
        [
            "APARERI Modular Dress — Hera 001: 14 core ways.",
            "Dress: Maxi dress, Midi dress, Knee-length dress, Mini dress",
            "Skirt+top: Maxi skirt + top, Midi skirt + top, Knee-length skirt + top, Mini skirt + top",
            "Skirt-only: Maxi skirt, Midi skirt, Knee-length skirt, Mini skirt",
            "Scarf: Scarf (neck), Scarf (waist)",
            "Detail: slit settings=4 → no-slit versions=12, slit versions=36.",
        ],
    )


def test_multiwear_share_uses_placeholder_for_disabled() -> None:
    engine = MultiwearEngine()
    engine.toggle("dress")
    engine.toggle("set")
    engine.set_slit(2)

    lines = multiwear_share_text(engine.current()).splitlines()

    assert lines[0] == "APARERI Modular Dress — Hera 001: 6 core ways."
    assert lines[1] == "Dress: —"
    assert lines[2] == "Skirt+top: —"
    assert lines[5] == "Detail: slit settings=2 → no-slit versions=4, slit versions=4."


def test_board_share_empty() -> None:
    assert board_share_text([]) == "APARERI board is empty."


def test_board_share_caps_at_ten() -> None:
    summary = [f"Look {index} — dress/maxi/none/mono" for index in range(12)]

    text = board_share_text(summary)
    lines = text.splitlines()

    assert lines[0] == "APARERI board (top 10):"
    assert lines[1] == "1. Look 0 — dress/maxi/none/mono"
    assert lines[-1] == "10. Look 9 — dress/maxi/none/mono"
    assert len(lines) == 11


def test_board_card_label_and_tint() -> None:
    entry = BoardEntry(base="dress", mode="skirt", length="knee", slit="mid", accent="pastel", ts=1)

    assert board_card("Modular Dress", entry) == {
        "title": "Modular Dress",
        "label": "skirt • knee • mid",
        "tint": "rgba(215,203,255,0.12)",
    }
