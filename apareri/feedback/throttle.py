"""Cooldown window between celebratory events."""

from __future__ import annotations

import time
from typing import Callable

DEFAULT_COOLDOWN = 0.42


class FeedbackThrottle:
    """Lets one event through per source per cooldown window; the rest are dropped."""

    def __init__(
        self,
        cooldown: float = DEFAULT_COOLDOWN,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._cooldown = cooldown
        self._clock = clock
        self._last_fired: dict[str, float] = {}

    def try_fire(self, source_id: str) -> bool:
        """Return ``True`` if the caller should emit exactly one event now."""

        now = self._clock()
        last = self._last_fired.get(source_id)
        if last is not None and now - last < self._cooldown:
            return False
        self._last_fired[source_id] = now
        return True
