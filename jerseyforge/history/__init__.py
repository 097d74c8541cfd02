"""history — recent-colours palette and timed undo."""

from jerseyforge.history.palette import RecentColors
from jerseyforge.history.undo import (
    Clock,
    DeletedText,
    ExpiringSlot,
    ManualClock,
    MonotonicClock,
    TextDeletionHistory,
)

__all__ = [
    "Clock",
    "DeletedText",
    "ExpiringSlot",
    "ManualClock",
    "MonotonicClock",
    "RecentColors",
    "TextDeletionHistory",
]
