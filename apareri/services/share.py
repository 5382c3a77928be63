"""Plain-text summaries copied to the clipboard."""

from __future__ import annotations

from typing import Sequence

from apareri.calculators.capsule import CapsuleResult
from apareri.calculators.multiwear import MultiwearResult
from apareri.catalog.products import Category
from apareri.storage.board import BoardEntry

BRAND = "APARERI"
BOARD_SUMMARY_LIMIT = 10
EMPTY_PLACEHOLDER = "—"

CATEGORY_LABELS = {
    Category.DRESS: "Dress",
    Category.SET: "Skirt+top",
    Category.SKIRT: "Skirt-only",
    Category.SCARF: "Scarf",
}

ACCENT_TINTS = {
    "emerald": "rgba(11,107,79,0.14)",
    "pastel": "rgba(215,203,255,0.12)",
    "mono": "rgba(255,255,255,0.10)",
}


def capsule_share_text(result: CapsuleResult) -> str:
    config = result.config
    layers = f", layers:{config.layers}" if config.include_layers else ""
    return (
        f"{BRAND} Capsule Score: {result.combos} looks "
        f"(tops:{config.tops}, bottoms:{config.bottoms}{layers})."
    )


def multiwear_share_text(result: MultiwearResult) -> str:
    lines = [f"{BRAND} {result.product.label}: {result.total_ways} core ways."]
    for category in Category:
        names = ", ".join(result.active[category]) or EMPTY_PLACEHOLDER
        lines.append(f"{CATEGORY_LABELS[category]}: {names}")
    lines.append(
        f"Detail: slit settings={result.slit_setting} → "
        f"no-slit versions={result.no_slit_variants}, slit versions={result.slit_variants}.",
    )
    return "\n".join(lines)


def board_share_text(summary: Sequence[str]) -> str:
    """Number the summary lines produced by ``BoardStore.summarize``."""

    if not summary:
        return f"{BRAND} board is empty."
    shown = list(summary)[:BOARD_SUMMARY_LIMIT]
    body = "\n".join(f"{index}. {line}" for index, line in enumerate(shown, start=1))
    return f"{BRAND} board (top {len(shown)}):\n{body}"


def board_card(title: str, entry: BoardEntry) -> dict[str, str]:
    """Data needed to render one board thumbnail."""

    return {
        "title": title,
        "label": f"{entry.mode.value} • {entry.length.value} • {entry.slit.value}",
        "tint": ACCENT_TINTS[entry.accent.value],
    }
