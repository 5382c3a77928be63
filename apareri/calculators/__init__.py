"""Styling calculators: capsule combinations and multiwear silhouettes."""

from .capsule import BENCHMARK_OUTFITS, CapsuleConfig, CapsuleEngine, CapsuleResult
from .clamp import clamp_int
from .multiwear import (
    Category,
    CategoryToggleRejected,
    EmptySelectionError,
    MultiwearEngine,
    MultiwearResult,
    MultiwearSelection,
)
from .tiers import CAPSULE_TIERS, MULTIWEAR_TIERS, TierScale

__all__ = [
    "BENCHMARK_OUTFITS",
    "CAPSULE_TIERS",
    "CapsuleConfig",
    "CapsuleEngine",
    "CapsuleResult",
    "Category",
    "CategoryToggleRejected",
    "EmptySelectionError",
    "MULTIWEAR_TIERS",
    "MultiwearEngine",
    "MultiwearResult",
    "MultiwearSelection",
    "TierScale",
    "clamp_int",
]
