"""
Timed single-slot undo for deleted text elements.

Instead of a wall-clock timer callback, the slot stores its payload together
with an expiry instant read from an injected Clock.  The host decides how
time advances (monotonic time in production, ManualClock in tests) and may
call ``tick()`` from its own timer or message loop to drop an expired entry
eagerly; ``take()`` never returns an expired payload either way.

Only the most recent deletion is recoverable: arming the slot again replaces
(and thereby cancels) whatever was pending.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar, runtime_checkable

from jerseyforge.schemas.design import DesignState, TextElement

logger = logging.getLogger(__name__)

T = TypeVar("T")


@runtime_checkable
class Clock(Protocol):
    """Source of the current time in milliseconds."""

    def now_ms(self) -> float: ...


class MonotonicClock:
    def now_ms(self) -> float:
        return time.monotonic() * 1000.0


class ManualClock:
    """Clock advanced explicitly by the caller."""

    def __init__(self, start_ms: float = 0.0) -> None:
        self._now = start_ms

    def now_ms(self) -> float:
        return self._now

    def advance(self, ms: float) -> None:
        self._now += ms


@dataclass(frozen=True)
class _Token(Generic[T]):
    payload: T
    expires_at: float


class ExpiringSlot(Generic[T]):
    """A single optional value that lapses ``window_ms`` after it is armed."""

    def __init__(self, window_ms: float, clock: Clock | None = None) -> None:
        self.window_ms = window_ms
        self.clock: Clock = clock or MonotonicClock()
        self._token: _Token[T] | None = None

    def arm(self, payload: T) -> None:
        if self._token is not None:
            logger.debug("Replacing pending undo entry")
        self._token = _Token(payload, self.clock.now_ms() + self.window_ms)

    def tick(self) -> bool:
        """Clear the slot if it has expired.  Returns True if it was cleared."""
        if self._token is not None and self.clock.now_ms() >= self._token.expires_at:
            logger.debug("Undo entry expired")
            self._token = None
            return True
        return False

    def peek(self) -> T | None:
        self.tick()
        return self._token.payload if self._token else None

    def take(self) -> T | None:
        """Return and clear the live payload, or None if empty or expired."""
        payload = self.peek()
        self._token = None
        return payload

    def clear(self) -> None:
        self._token = None

    @property
    def pending(self) -> bool:
        return self.peek() is not None


@dataclass(frozen=True)
class DeletedText:
    element: TextElement
    index: int


class TextDeletionHistory:
    """Deletes text elements and restores the most recent one within the undo window."""

    def __init__(self, window_ms: float, clock: Clock | None = None) -> None:
        self._slot: ExpiringSlot[DeletedText] = ExpiringSlot(window_ms, clock)

    @property
    def pending(self) -> DeletedText | None:
        return self._slot.peek()

    def tick(self) -> bool:
        return self._slot.tick()

    def clear(self) -> None:
        """Forget any pending deletion (the design it came from was replaced)."""
        self._slot.clear()

    def delete(self, design: DesignState, element_id: str) -> bool:
        """
        Remove *element_id* from *design* and make it recoverable.

        Locked (reserved) elements and unknown ids are left alone and return
        False.
        """
        index = next(
            (i for i, t in enumerate(design.text_elements) if t.id == element_id), None
        )
        if index is None:
            logger.debug("Ignoring delete of missing text element %r", element_id)
            return False
        element = design.text_elements[index]
        if element.is_locked:
            logger.debug("Refusing to delete locked text element %r", element_id)
            return False

        del design.text_elements[index]
        self._slot.arm(DeletedText(element, index))
        return True

    def undo(self, design: DesignState) -> bool:
        """Reinsert the pending deletion at its original index.  False if none."""
        deleted = self._slot.take()
        if deleted is None:
            return False
        design.text_elements.insert(deleted.index, deleted.element)
        return True
