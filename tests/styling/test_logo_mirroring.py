"""
Tests for styling.logos — placement, clamped edits and live mirroring.

For every source/mirror pair after any edit sequence:
    mirror.x == canvas_width - source.x, mirror.y == source.y,
    mirror.size == source.size, mirror.rotation == -source.rotation
"""

from __future__ import annotations

from dataclasses import replace

import pytest

from jerseyforge.config.settings import get_settings
from jerseyforge.schemas.design import DesignState, GarmentType, Position, ViewSide
from jerseyforge.styling.logos import (
    LOGO_ID_PREFIX,
    MirrorIndex,
    add_logo,
    is_logo_id,
    remove_logo,
    toggle_mirror,
    update_logo,
    update_logo_position,
)

WIDTH = 400.0


@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture
def design() -> DesignState:
    return DesignState(sport="testball", cut="std", garment_type=GarmentType.JERSEY, template="plain")


def _assert_mirrors_consistent(design: DesignState) -> None:
    for mirror in design.logos:
        if mirror.mirrored_from is None:
            continue
        source = design.find_logo(mirror.mirrored_from)
        assert source is not None
        assert mirror.position == Position(WIDTH - source.position.x, source.position.y)
        assert mirror.size == source.size
        assert mirror.rotation == -source.rotation


# ── Placement ──────────────────────────────────────────────────────────────────


class TestAddAndRemove:
    def test_add_uses_defaults(self, design, settings):
        logo = add_logo(design, "data:image/png;base64,AAAA", ViewSide.FRONT, settings)
        assert is_logo_id(logo.id)
        assert logo.id.startswith(LOGO_ID_PREFIX)
        assert logo.position == Position(200, 100)
        assert logo.size == 40.0
        assert logo.rotation == 0.0
        assert logo.mirrored_from is None

    def test_remove_missing_returns_false(self, design):
        assert remove_logo(design, "logo-nope") is False

    def test_remove_source_removes_mirror(self, design, settings):
        logo = add_logo(design, "u", ViewSide.FRONT, settings)
        toggle_mirror(design, logo.id, WIDTH)
        other = add_logo(design, "v", ViewSide.BACK, settings)
        assert remove_logo(design, logo.id)
        assert design.logos == [other]

    def test_remove_mirror_keeps_source(self, design, settings):
        logo = add_logo(design, "u", ViewSide.FRONT, settings)
        mirror = toggle_mirror(design, logo.id, WIDTH)
        remove_logo(design, mirror.id)
        assert [lg.id for lg in design.logos] == [logo.id]


# ── Mirroring ──────────────────────────────────────────────────────────────────


class TestToggleMirror:
    def test_creates_reflected_mirror(self, design, settings):
        logo = add_logo(design, "u", ViewSide.FRONT, settings)
        update_logo_position(design, logo.id, Position(120, 90), WIDTH)
        update_logo(design, logo.id, "rotation", 30, settings.limits, WIDTH)
        mirror = toggle_mirror(design, logo.id, WIDTH)
        assert mirror.mirrored_from == logo.id
        assert mirror.position == Position(280, 90)
        assert mirror.rotation == -30.0
        assert mirror.url == "u"
        assert mirror.view is ViewSide.FRONT

    def test_toggle_twice_removes_mirror(self, design, settings):
        logo = add_logo(design, "u", ViewSide.FRONT, settings)
        toggle_mirror(design, logo.id, WIDTH)
        assert toggle_mirror(design, logo.id, WIDTH) is None
        assert len(design.logos) == 1

    def test_at_most_one_mirror_per_source(self, design, settings):
        logo = add_logo(design, "u", ViewSide.FRONT, settings)
        for _ in range(5):
            toggle_mirror(design, logo.id, WIDTH)
        assert len(MirrorIndex(design.logos)) <= 1

    def test_toggle_missing_logo(self, design):
        assert toggle_mirror(design, "logo-nope", WIDTH) is None
        assert design.logos == []

    def test_mirror_index_rejects_two_mirrors(self, design, settings):
        logo = add_logo(design, "u", ViewSide.FRONT, settings)
        mirror = toggle_mirror(design, logo.id, WIDTH)
        design.logos.append(replace(mirror, id="logo-dup"))
        with pytest.raises(ValueError, match="more than one mirror"):
            MirrorIndex(design.logos)


class TestEditsPropagate:
    def test_edit_sequence_keeps_symmetry(self, design, settings):
        logo = add_logo(design, "u", ViewSide.FRONT, settings)
        toggle_mirror(design, logo.id, WIDTH)
        update_logo(design, logo.id, "size", 75, settings.limits, WIDTH)
        _assert_mirrors_consistent(design)
        update_logo_position(design, logo.id, {"x": 60, "y": 140}, WIDTH)
        _assert_mirrors_consistent(design)
        update_logo(design, logo.id, "rotation", -45, settings.limits, WIDTH)
        _assert_mirrors_consistent(design)

    def test_repeated_edit_is_idempotent(self, design, settings):
        logo = add_logo(design, "u", ViewSide.FRONT, settings)
        toggle_mirror(design, logo.id, WIDTH)
        update_logo(design, logo.id, "size", 60, settings.limits, WIDTH)
        once = list(design.logos)
        update_logo(design, logo.id, "size", 60, settings.limits, WIDTH)
        assert design.logos == once

    def test_values_are_clamped(self, design, settings):
        logo = add_logo(design, "u", ViewSide.FRONT, settings)
        update_logo(design, logo.id, "size", 500, settings.limits, WIDTH)
        update_logo(design, logo.id, "rotation", -270, settings.limits, WIDTH)
        updated = design.find_logo(logo.id)
        assert updated.size == 120.0
        assert updated.rotation == -180.0

    def test_unknown_field_rejected(self, design, settings):
        logo = add_logo(design, "u", ViewSide.FRONT, settings)
        with pytest.raises(ValueError, match="Unknown logo field"):
            update_logo(design, logo.id, "url", 1, settings.limits, WIDTH)

    def test_missing_logo_is_ignored(self, design, settings):
        assert update_logo(design, "logo-nope", "size", 50, settings.limits, WIDTH) is False
        assert update_logo_position(design, "logo-nope", Position(1, 1), WIDTH) is False

    def test_unmirrored_logo_edit_touches_only_itself(self, design, settings):
        a = add_logo(design, "a", ViewSide.FRONT, settings)
        b = add_logo(design, "b", ViewSide.FRONT, settings)
        update_logo(design, a.id, "size", 90, settings.limits, WIDTH)
        assert design.find_logo(b.id) == b


class TestMirrorIsNotMirrored:
    def test_toggle_on_mirror_is_ignored(self, design, settings):
        logo = add_logo(design, "u", ViewSide.FRONT, settings)
        mirror = toggle_mirror(design, logo.id, WIDTH)
        assert toggle_mirror(design, mirror.id, WIDTH) is None
        assert [lg.id for lg in design.logos] == [logo.id, mirror.id]

    def test_symmetry_holds_after_toggling_the_mirror(self, design, settings):
        logo = add_logo(design, "u", ViewSide.FRONT, settings)
        mirror = toggle_mirror(design, logo.id, WIDTH)
        toggle_mirror(design, mirror.id, WIDTH)
        update_logo_position(design, logo.id, {"x": 50, "y": 60}, WIDTH)
        _assert_mirrors_consistent(design)
        assert design.find_logo(mirror.id).position == Position(350, 60)


class TestEditsOnMirror:
    def test_dragging_mirror_moves_source(self, design, settings):
        logo = add_logo(design, "u", ViewSide.FRONT, settings)
        mirror = toggle_mirror(design, logo.id, WIDTH)
        assert update_logo_position(design, mirror.id, {"x": 10, "y": 10}, WIDTH)
        assert design.find_logo(mirror.id).position == Position(10, 10)
        assert design.find_logo(logo.id).position == Position(390, 10)
        _assert_mirrors_consistent(design)

    def test_rotating_mirror_negates_onto_source(self, design, settings):
        logo = add_logo(design, "u", ViewSide.FRONT, settings)
        mirror = toggle_mirror(design, logo.id, WIDTH)
        update_logo(design, mirror.id, "rotation", 30, settings.limits, WIDTH)
        assert design.find_logo(mirror.id).rotation == 30.0
        assert design.find_logo(logo.id).rotation == -30.0

    def test_resizing_mirror_resizes_source(self, design, settings):
        logo = add_logo(design, "u", ViewSide.FRONT, settings)
        mirror = toggle_mirror(design, logo.id, WIDTH)
        update_logo(design, mirror.id, "size", 80, settings.limits, WIDTH)
        assert design.find_logo(logo.id).size == 80.0
        _assert_mirrors_consistent(design)
