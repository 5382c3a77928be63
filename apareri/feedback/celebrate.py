"""Emoji confetti bursts anchored to result cards."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Protocol

from apareri.feedback.throttle import FeedbackThrottle
from apareri.metrics.prometheus_exporter import celebrations_total

logger = logging.getLogger(__name__)

EMOJIS = ("🎉", "✨", "💚", "🖤", "🧵", "🪡")
PIECES = 16
CLEAR_AFTER_MS = 1400
TEXT_FLASH_MS = 450


@dataclass(frozen=True, slots=True)
class ConfettiPiece:
    """One emoji particle; offsets in px, timings in ms."""

    emoji: str
    dx: float
    dy: float
    rotation: int
    duration_ms: int
    delay_ms: int


@dataclass(frozen=True, slots=True)
class CelebrationEvent:
    """What the presentation layer should play for one celebration."""

    anchor: str
    pieces: tuple[ConfettiPiece, ...] = ()
    text: str | None = None
    visible_ms: int = CLEAR_AFTER_MS


class CelebrationSink(Protocol):
    def emit(self, event: CelebrationEvent) -> None: ...


class Celebrator:
    """Fires celebration events for a single UI anchor."""

    def __init__(
        self,
        anchor: str,
        sink: CelebrationSink,
        *,
        anchor_text: str = "",
        reduced_motion: bool = False,
        throttle: FeedbackThrottle | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.anchor = anchor
        self.anchor_text = anchor_text
        self._sink = sink
        self._reduced_motion = reduced_motion
        self._throttle = throttle or FeedbackThrottle()
        self._rng = rng or random.Random()

    def celebrate(self, *, throttled: bool = True) -> CelebrationEvent | None:
        """Emit one event unless the cooldown window swallows it."""

        if throttled and not self._throttle.try_fire(self.anchor):
            logger.debug("Celebration on %s dropped by cooldown", self.anchor)
            return None

        if self._reduced_motion:
            event = CelebrationEvent(
                anchor=self.anchor,
                text=f"{self.anchor_text} 🎉".strip(),
                visible_ms=TEXT_FLASH_MS,
            )
        else:
            event = CelebrationEvent(anchor=self.anchor, pieces=self._burst())

        celebrations_total.labels(anchor=self.anchor).inc()
        self._sink.emit(event)
        return event

    def _burst(self) -> tuple[ConfettiPiece, ...]:
        rng = self._rng
        return tuple(
            ConfettiPiece(
                emoji=rng.choice(EMOJIS),
                dx=round(rng.random() * 220 - 110, 1),
                dy=round(-(rng.random() * 160 + 80), 1),
                rotation=round(rng.random() * 360 - 180),
                duration_ms=round(rng.random() * 450 + 780),
                delay_ms=round(rng.random() * 120),
            )
            for _ in range(PIECES)
        )
