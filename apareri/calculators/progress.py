"""Goal progress shared by both calculators."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

ONE_PLACE = Decimal("0.1")
WHOLE = Decimal("1")


@dataclass(frozen=True, slots=True)
class GoalProgress:
    """Share of the goal reached, capped at 100."""

    percent: float
    label: str


def goal_progress(score: int, goal: int) -> GoalProgress:
    """Percent of ``goal`` reached; halves round up, as the progress bar shows them."""

    raw = Decimal(min(100.0, 100.0 * score / goal) if goal > 0 else 100.0)
    percent = raw.quantize(ONE_PLACE, rounding=ROUND_HALF_UP)
    whole = raw.quantize(WHOLE, rounding=ROUND_HALF_UP)
    return GoalProgress(percent=float(percent), label=f"{whole}%")
