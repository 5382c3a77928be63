"""Capsule wardrobe calculator: how many outfits a set of basics yields."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from apareri.calculators.clamp import clamp_int
from apareri.calculators.progress import goal_progress
from apareri.calculators.tiers import CAPSULE_TIERS
from apareri.config.settings import TRUTHY_VALUES
from apareri.metrics.prometheus_exporter import calculator_evaluations_total

logger = logging.getLogger(__name__)

TOPS_RANGE = (1, 30, 1)
BOTTOMS_RANGE = (1, 30, 1)
LAYERS_RANGE = (0, 20, 0)
GOAL_RANGE = (10, 1000, 60)

# hero panel reference capsule: 6 tops, 4 bottoms, 3 layers
BENCHMARK_OUTFITS = 6 * 4 * 3


def _include_flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value or "yes").strip().lower() in TRUTHY_VALUES


@dataclass(frozen=True, slots=True)
class CapsuleConfig:
    """Counts of capsule pieces, already clamped to legal ranges."""

    tops: int = 6
    bottoms: int = 4
    layers: int = 3
    include_layers: bool = True
    goal: int = 60

    @classmethod
    def from_raw(
        cls,
        *,
        tops: Any = None,
        bottoms: Any = None,
        layers: Any = None,
        include_layers: Any = None,
        goal: Any = None,
    ) -> "CapsuleConfig":
        """Build a config from untrusted form values; never raises."""

        return cls(
            tops=clamp_int(tops, *TOPS_RANGE),
            bottoms=clamp_int(bottoms, *BOTTOMS_RANGE),
            layers=clamp_int(layers, *LAYERS_RANGE),
            include_layers=_include_flag(include_layers),
            goal=clamp_int(goal, *GOAL_RANGE),
        )

    @property
    def layer_factor(self) -> int:
        return max(self.layers, 1) if self.include_layers else 1


@dataclass(frozen=True, slots=True)
class CapsuleResult:
    """Derived capsule figures shown on the result card."""

    config: CapsuleConfig
    combos: int
    items_used: int
    tier: str
    progress_pct: float
    goal_progress_label: str


class CapsuleEngine:
    """Evaluates capsule configs and tracks whether the user has interacted yet."""

    def __init__(self) -> None:
        self.touched = False
        self.last_result: CapsuleResult | None = None

    def evaluate(self, config: CapsuleConfig, *, user_driven: bool = True) -> CapsuleResult:
        """Compute combos, items used, tier and goal progress for ``config``."""

        if user_driven:
            self.touched = True

        combos = config.tops * config.bottoms * config.layer_factor
        items_used = config.tops + config.bottoms + (config.layers if config.include_layers else 0)
        progress = goal_progress(combos, config.goal)

        result = CapsuleResult(
            config=config,
            combos=combos,
            items_used=items_used,
            tier=CAPSULE_TIERS.label(combos),
            progress_pct=progress.percent,
            goal_progress_label=progress.label,
        )
        calculator_evaluations_total.labels(engine="capsule").inc()
        logger.debug("Capsule evaluated: %s -> %s combos (%s)", config, combos, result.tier)
        self.last_result = result
        return result
