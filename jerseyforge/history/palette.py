"""
Recent-colours palette: a bounded, duplicate-free, most-recent-first list.
"""

from __future__ import annotations

from collections.abc import Iterable


class RecentColors:
    """
    Most-recently-used colour list.

    ``record`` moves a colour to the front (never growing the list for a
    colour already present) and truncates to ``capacity``.  ``add`` is the
    manual swatch pick: it appends at the end if absent and ignores the pick
    otherwise, bypassing recency order.
    """

    def __init__(self, seed: Iterable[str] = (), capacity: int = 7) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self.capacity = capacity
        self._colors: list[str] = []
        for color in seed:
            if color not in self._colors:
                self._colors.append(color)
        del self._colors[capacity:]

    @property
    def colors(self) -> tuple[str, ...]:
        return tuple(self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    def __contains__(self, color: object) -> bool:
        return color in self._colors

    def record(self, color: str) -> None:
        self._colors = [color, *(c for c in self._colors if c != color)][: self.capacity]

    def add(self, color: str) -> bool:
        """Append *color* if absent and there is room.  Returns True if added."""
        if color in self._colors or len(self._colors) >= self.capacity:
            return False
        self._colors.append(color)
        return True

    def remove(self, color: str) -> bool:
        if color not in self._colors:
            return False
        self._colors.remove(color)
        return True

    def remove_at(self, index: int) -> str | None:
        if not 0 <= index < len(self._colors):
            return None
        return self._colors.pop(index)
