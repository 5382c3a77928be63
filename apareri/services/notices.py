"""User-facing notices, the clipboard port and an in-memory event buffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from apareri.feedback.celebrate import CelebrationEvent


@dataclass(frozen=True, slots=True)
class Notice:
    """Short toast shown to the user."""

    title: str
    body: str


class NotificationSink(Protocol):
    def notify(self, notice: Notice) -> None: ...


class ClipboardError(RuntimeError):
    """Raised when the environment refuses a clipboard write."""


class Clipboard(Protocol):
    async def write_text(self, text: str) -> None: ...


class MemoryClipboard:
    """Keeps the last copied text; can be switched to refuse writes."""

    def __init__(self, *, denied: bool = False) -> None:
        self.denied = denied
        self.text: str | None = None

    async def write_text(self, text: str) -> None:
        if self.denied:
            raise ClipboardError("Clipboard access denied.")
        self.text = text


class EventBuffer:
    """Collects notices and celebration events until the presentation layer drains them."""

    def __init__(self) -> None:
        self.notices: list[Notice] = []
        self.celebrations: list[CelebrationEvent] = []

    def notify(self, notice: Notice) -> None:
        self.notices.append(notice)

    def emit(self, event: CelebrationEvent) -> None:
        self.celebrations.append(event)

    def drain(self) -> tuple[list[Notice], list[CelebrationEvent]]:
        notices, celebrations = self.notices, self.celebrations
        self.notices, self.celebrations = [], []
        return notices, celebrations
