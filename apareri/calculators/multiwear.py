"""Multiwear calculator: silhouette-based "ways to wear" for one modular piece."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Iterable, Mapping

from apareri.calculators.clamp import clamp_int
from apareri.calculators.progress import goal_progress
from apareri.calculators.tiers import MULTIWEAR_TIERS
from apareri.catalog.products import (
    DEFAULT_MULTIWEAR_KEY,
    Category,
    MultiwearProduct,
    get_multiwear_product,
)
from apareri.metrics.prometheus_exporter import calculator_evaluations_total

logger = logging.getLogger(__name__)

SLIT_MIN = 1
SLIT_MAX = 12
GOAL_RANGE = (1, 1000, 14)

# scarves have no slit dimension
GARMENT_CATEGORIES = (Category.DRESS, Category.SET, Category.SKIRT)


class EmptySelectionError(ValueError):
    """Raised when a selection is built without any enabled category."""


class CategoryToggleRejected(RuntimeError):
    """Raised when a toggle would leave no category enabled."""

    title = "Select at least one"
    body = "Keep one mode enabled to calculate."

    def __init__(self, category: Category) -> None:
        super().__init__(f"{self.title}: {self.body}")
        self.category = category


def _known_category(value: Category | str) -> Category | None:
    try:
        return Category(value)
    except ValueError:
        logger.debug("Ignoring unknown multiwear category %r", value)
        return None


@dataclass(frozen=True, slots=True)
class MultiwearSelection:
    """User choices for the multiwear calculator."""

    product_key: str = DEFAULT_MULTIWEAR_KEY
    slit_setting: int = 4
    goal: int = 14
    enabled_categories: frozenset[Category] = field(default_factory=lambda: frozenset(Category))

    def __post_init__(self) -> None:
        enabled = frozenset(Category(value) for value in self.enabled_categories)
        if not enabled:
            raise EmptySelectionError("At least one multiwear category must stay enabled.")
        object.__setattr__(self, "enabled_categories", enabled)

    @classmethod
    def from_raw(
        cls,
        *,
        product_key: str | None = None,
        slit_setting: Any = None,
        goal: Any = None,
        enabled_categories: Iterable[Category | str] | None = None,
    ) -> "MultiwearSelection":
        """Clamp raw form values against the resolved product.

        Unknown category keys are skipped, like unknown toggles.
        """

        product = get_multiwear_product(product_key)
        if enabled_categories is None:
            enabled = frozenset(Category)
        else:
            enabled = frozenset(
                category
                for category in map(_known_category, enabled_categories)
                if category is not None
            )
        return cls(
            product_key=product.key,
            slit_setting=clamp_int(slit_setting, SLIT_MIN, SLIT_MAX, product.default_slit_setting),
            goal=clamp_int(goal, *GOAL_RANGE),
            enabled_categories=enabled,
        )

    def is_enabled(self, category: Category) -> bool:
        return category in self.enabled_categories


@dataclass(frozen=True, slots=True)
class MultiwearResult:
    """Headline count, tier and slit breakdown for one product and selection."""

    product: MultiwearProduct
    active: Mapping[Category, tuple[str, ...]]
    counts: Mapping[Category, int]
    total_ways: int
    tier: str
    slit_setting: int
    garment_silhouettes: int
    no_slit_variants: int
    slit_variants: int
    progress_pct: float
    goal_progress_label: str


class MultiwearEngine:
    """Holds the current multiwear selection and evaluates it on demand."""

    def __init__(self, selection: MultiwearSelection | None = None) -> None:
        self.selection = selection or MultiwearSelection()
        self.touched = False

    @property
    def product(self) -> MultiwearProduct:
        return get_multiwear_product(self.selection.product_key)

    def evaluate(self, product: MultiwearProduct, selection: MultiwearSelection) -> MultiwearResult:
        """Count active silhouettes and derive the slit detail for ``selection``."""

        active = {
            category: product.silhouettes_for(category) if selection.is_enabled(category) else ()
            for category in Category
        }
        counts = {category: len(names) for category, names in active.items()}
        total_ways = sum(counts.values())

        slit_setting = clamp_int(selection.slit_setting, SLIT_MIN, SLIT_MAX, product.default_slit_setting)
        garment_silhouettes = sum(counts[category] for category in GARMENT_CATEGORIES)
        progress = goal_progress(total_ways, selection.goal)

        calculator_evaluations_total.labels(engine="multiwear").inc()
        return MultiwearResult(
            product=product,
            active=active,
            counts=counts,
            total_ways=total_ways,
            tier=MULTIWEAR_TIERS.label(total_ways),
            slit_setting=slit_setting,
            garment_silhouettes=garment_silhouettes,
            no_slit_variants=garment_silhouettes,
            slit_variants=garment_silhouettes * max(0, slit_setting - 1),
            progress_pct=progress.percent,
            goal_progress_label=progress.label,
        )

    def current(self) -> MultiwearResult:
        return self.evaluate(self.product, self.selection)

    def toggle(self, category: Category | str) -> MultiwearSelection:
        """Flip one category on or off.

        Disabling the last enabled category raises :class:`CategoryToggleRejected`
        and leaves the selection untouched. Unknown keys are ignored.
        """

        key = _known_category(category)
        if key is None:
            return self.selection

        enabled = set(self.selection.enabled_categories)
        if key in enabled:
            enabled.discard(key)
        else:
            enabled.add(key)
        if not enabled:
            raise CategoryToggleRejected(key)

        self.selection = replace(self.selection, enabled_categories=frozenset(enabled))
        self.touched = True
        return self.selection

    def select_product(self, product_key: str | None) -> MultiwearSelection:
        product = get_multiwear_product(product_key)
        self.selection = replace(self.selection, product_key=product.key)
        self.touched = True
        return self.selection

    def set_slit(self, raw: Any) -> MultiwearSelection:
        slit = clamp_int(raw, SLIT_MIN, SLIT_MAX, self.product.default_slit_setting)
        self.selection = replace(self.selection, slit_setting=slit)
        self.touched = True
        return self.selection

    def set_goal(self, raw: Any) -> MultiwearSelection:
        self.selection = replace(self.selection, goal=clamp_int(raw, *GOAL_RANGE))
        self.touched = True
        return self.selection
