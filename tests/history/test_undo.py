"""Tests for history.undo — expiring slot and text deletion with a timed undo."""

from __future__ import annotations

import pytest

from jerseyforge.config.settings import get_settings
from jerseyforge.history.undo import (
    Clock,
    ExpiringSlot,
    ManualClock,
    MonotonicClock,
    TextDeletionHistory,
)
from jerseyforge.schemas.design import DesignState, GarmentType, ViewSide
from jerseyforge.styling.text import add_text

WINDOW = 3000


@pytest.fixture
def design() -> DesignState:
    settings = get_settings()
    design = DesignState(
        sport="testball",
        cut="std",
        garment_type=GarmentType.JERSEY,
        template="plain",
        text_elements=settings.default_text_elements(),
    )
    add_text(design, ViewSide.FRONT, settings)
    add_text(design, ViewSide.BACK, settings)
    return design


@pytest.fixture
def history(clock) -> TextDeletionHistory:
    return TextDeletionHistory(WINDOW, clock)


def _free_ids(design: DesignState) -> list[str]:
    return [t.id for t in design.text_elements if not t.is_locked]


# ── Clocks and slot ────────────────────────────────────────────────────────────


class TestExpiringSlot:
    def test_clocks_satisfy_protocol(self):
        assert isinstance(ManualClock(), Clock)
        assert isinstance(MonotonicClock(), Clock)

    def test_payload_available_inside_window(self, clock):
        slot: ExpiringSlot[str] = ExpiringSlot(WINDOW, clock)
        slot.arm("x")
        clock.advance(WINDOW - 1)
        assert slot.peek() == "x"

    def test_payload_expires_at_window(self, clock):
        slot: ExpiringSlot[str] = ExpiringSlot(WINDOW, clock)
        slot.arm("x")
        clock.advance(WINDOW)
        assert slot.tick() is True
        assert slot.take() is None

    def test_take_clears(self, clock):
        slot: ExpiringSlot[str] = ExpiringSlot(WINDOW, clock)
        slot.arm("x")
        assert slot.take() == "x"
        assert slot.pending is False

    def test_rearm_restarts_window(self, clock):
        slot: ExpiringSlot[str] = ExpiringSlot(WINDOW, clock)
        slot.arm("a")
        clock.advance(2000)
        slot.arm("b")
        clock.advance(2000)
        assert slot.peek() == "b"


# ── TextDeletionHistory ────────────────────────────────────────────────────────


class TestTextDeletion:
    def test_delete_then_undo_restores_position(self, design, history):
        before = list(design.text_elements)
        target = _free_ids(design)[0]
        assert history.delete(design, target)
        assert design.find_text(target) is None
        assert history.undo(design)
        assert design.text_elements == before

    def test_undo_after_window_does_nothing(self, design, history, clock):
        target = _free_ids(design)[0]
        history.delete(design, target)
        clock.advance(WINDOW)
        assert history.undo(design) is False
        assert design.find_text(target) is None

    def test_tick_clears_expired_entry(self, design, history, clock):
        history.delete(design, _free_ids(design)[0])
        clock.advance(WINDOW + 1)
        assert history.tick()
        assert history.pending is None

    def test_second_delete_replaces_first(self, design, history):
        first, second = _free_ids(design)
        history.delete(design, first)
        history.delete(design, second)
        assert history.undo(design)
        assert design.find_text(second) is not None
        assert design.find_text(first) is None
        assert history.undo(design) is False

    def test_locked_element_is_not_deleted(self, design, history):
        assert history.delete(design, "frontTeam") is False
        assert design.find_text("frontTeam") is not None
        assert history.pending is None

    def test_missing_element_is_not_deleted(self, design, history):
        assert history.delete(design, "text-nope") is False

    def test_clear_forgets_pending(self, design, history):
        history.delete(design, _free_ids(design)[0])
        history.clear()
        assert history.undo(design) is False

    def test_pending_reports_element_and_index(self, design, history):
        target = _free_ids(design)[1]
        history.delete(design, target)
        assert history.pending.element.id == target
        assert history.pending.index == 5
