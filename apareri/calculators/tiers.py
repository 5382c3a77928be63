"""Qualitative tier labels derived from calculator scores."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True, slots=True)
class TierScale:
    """Step function mapping a score to a label.

    Thresholds are inclusive lower bounds checked from the highest down; the first
    match wins and anything below the lowest threshold gets ``floor``.
    """

    steps: Sequence[tuple[int, str]]
    floor: str = "BASELINE"

    def __post_init__(self) -> None:
        ordered = tuple(sorted(self.steps, key=lambda step: step[0], reverse=True))
        object.__setattr__(self, "steps", ordered)

    def label(self, score: float) -> str:
        for threshold, name in self.steps:
            if score >= threshold:
                return name
        return self.floor

    def labels(self) -> list[str]:
        """Return labels from lowest to highest."""

        return [self.floor, *(name for _, name in reversed(self.steps))]


CAPSULE_TIERS = TierScale(
    steps=(
        (200, "ICONIC"),
        (100, "SIGNATURE"),
        (60, "CURATED"),
        (30, "STARTER"),
    ),
)

MULTIWEAR_TIERS = TierScale(
    steps=(
        (14, "ICONIC"),
        (12, "ELITE"),
        (10, "CURATED"),
        (8, "STRONG"),
        (6, "STARTER"),
    ),
)
