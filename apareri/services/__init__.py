"""Studio orchestration: engines, board, notices and clipboard."""

from .notices import Clipboard, ClipboardError, EventBuffer, MemoryClipboard, Notice, NotificationSink
from .studio import StudioService

__all__ = [
    "Clipboard",
    "ClipboardError",
    "EventBuffer",
    "MemoryClipboard",
    "Notice",
    "NotificationSink",
    "StudioService",
]
