"""Rate-limited celebratory feedback."""

from .celebrate import CelebrationEvent, CelebrationSink, Celebrator, ConfettiPiece
from .throttle import FeedbackThrottle

__all__ = [
    "CelebrationEvent",
    "CelebrationSink",
    "Celebrator",
    "ConfettiPiece",
    "FeedbackThrottle",
]
