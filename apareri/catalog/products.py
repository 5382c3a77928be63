"""Product catalog used by the multiwear calculator and the studio board.

Both catalogs are immutable reference data keyed by product slug. Lookups never
fail: a multiwear miss falls back to the modular dress, a board miss falls back
to a generic title chosen by the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Sequence

logger = logging.getLogger(__name__)


class Category(str, Enum):
    """Silhouette groups a multiwear piece can be styled into."""

    DRESS = "dress"
    SET = "set"
    SKIRT = "skirt"
    SCARF = "scarf"


@dataclass(frozen=True, slots=True)
class MultiwearProduct:
    """A modular garment and the named silhouettes it converts into."""

    key: str
    label: str
    silhouettes: Mapping[Category, Sequence[str]]
    default_slit_setting: int = 4

    def silhouettes_for(self, category: Category) -> tuple[str, ...]:
        return tuple(self.silhouettes.get(category, ()))


@dataclass(frozen=True, slots=True)
class BoardProduct:
    """Collection entry a pinned look can be based on."""

    key: str
    title: str
    badge: str = ""
    tags: tuple[str, ...] = field(default_factory=tuple)


DEFAULT_MULTIWEAR_KEY = "modular-dress"

MULTIWEAR_PRODUCTS: Mapping[str, MultiwearProduct] = MappingProxyType(
    {
        DEFAULT_MULTIWEAR_KEY: MultiwearProduct(
            key=DEFAULT_MULTIWEAR_KEY,
            label="Modular Dress — Hera 001",
            silhouettes=MappingProxyType(
                {
                    Category.DRESS: (
                        "Maxi dress",
                        "Midi dress",
                        "Knee-length dress",
                        "Mini dress",
                    ),
                    Category.SET: (
                        "Maxi skirt + top",
                        "Midi skirt + top",
                        "Knee-length skirt + top",
                        "Mini skirt + top",
                    ),
                    Category.SKIRT: (
                        "Maxi skirt",
                        "Midi skirt",
                        "Knee-length skirt",
                        "Mini skirt",
                    ),
                    Category.SCARF: (
                        "Scarf (neck)",
                        "Scarf (waist)",
                    ),
                },
            ),
            default_slit_setting=4,
        ),
    },
)

BOARD_PRODUCTS: tuple[BoardProduct, ...] = (
    BoardProduct(
        key="dress",
        title="Modular Dress",
        badge="Hera 001",
        tags=("Maxi → mini", "Dress ↔ skirt", "Adjustable slit"),
    ),
    BoardProduct(
        key="jewelry",
        title="Modular Jewelry",
        badge="System",
        tags=("Adjustable sizing", "Swap elements"),
    ),
    BoardProduct(
        key="knit",
        title="Reversible Knit",
        badge="Two faces",
        tags=("Double-sided", "Repair-first"),
    ),
)


def get_multiwear_product(key: str | None) -> MultiwearProduct:
    """Return the product for ``key`` or the modular dress when it is unknown."""

    product = MULTIWEAR_PRODUCTS.get(key or "")
    if product is None:
        logger.debug("Unknown multiwear product %r, using %s", key, DEFAULT_MULTIWEAR_KEY)
        return MULTIWEAR_PRODUCTS[DEFAULT_MULTIWEAR_KEY]
    return product


def resolve_board_title(
    key: str,
    fallback: str,
    catalog: Sequence[BoardProduct] = BOARD_PRODUCTS,
) -> str:
    for product in catalog:
        if product.key == key:
            return product.title
    return fallback
