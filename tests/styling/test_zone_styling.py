"""Tests for styling.zones — partial zone updates and palette-driven colouring."""

from __future__ import annotations

import pytest

from jerseyforge.history.palette import RecentColors
from jerseyforge.schemas.design import (
    NEUTRAL_ZONE_STYLE,
    DesignState,
    GarmentType,
    PatternMode,
    PatternType,
    ZoneStyle,
)
from jerseyforge.styling.zones import ColorTarget, apply_color, merge_zone_colors, update_zone


@pytest.fixture
def design() -> DesignState:
    return DesignState(
        sport="testball",
        cut="std",
        garment_type=GarmentType.JERSEY,
        template="plain",
        zones={"body": ZoneStyle(color="#ff0000"), "trim": ZoneStyle(color="#00ff00")},
    )


class TestUpdateZone:
    def test_partial_update_keeps_other_fields(self, design):
        update_zone(design, "body", {"pattern": "stripes"})
        assert design.zones["body"] == ZoneStyle(color="#ff0000", pattern=PatternType.STRIPES)

    def test_missing_zone_starts_from_neutral(self, design):
        style = update_zone(design, "chevron", {"color": "#123456"})
        assert style.pattern is PatternType.NONE
        assert style.pattern_color == NEUTRAL_ZONE_STYLE.pattern_color
        assert design.zones["chevron"].color == "#123456"

    def test_mode_switch(self, design):
        update_zone(design, "body", {"pattern_mode": PatternMode.CUSTOM, "pattern_color": "#00ffff"})
        assert design.zones["body"].pattern_mode is PatternMode.CUSTOM
        assert design.zones["body"].pattern_color == "#00ffff"

    def test_unknown_field_rejected(self, design):
        with pytest.raises(ValueError, match="Unknown zone style field"):
            update_zone(design, "body", {"gradient": "#000000"})
        assert design.zones["body"].color == "#ff0000"

    def test_other_zones_untouched(self, design):
        update_zone(design, "body", {"color": "#000000"})
        assert design.zones["trim"].color == "#00ff00"


class TestApplyColor:
    def test_base_colour_recorded_and_written(self, design):
        palette = RecentColors(["#ffffff"], capacity=7)
        apply_color(design, palette, "body", "#112233")
        assert design.zones["body"].color == "#112233"
        assert palette.colors[0] == "#112233"

    def test_pattern_target(self, design):
        palette = RecentColors(capacity=7)
        apply_color(design, palette, "trim", "#abcdef", ColorTarget.PATTERN)
        assert design.zones["trim"].pattern_color == "#abcdef"
        assert design.zones["trim"].color == "#00ff00"

    def test_applying_to_empty_palette_and_again(self, design):
        palette = RecentColors(capacity=7)
        apply_color(design, palette, "body", "#112233")
        assert palette.colors == ("#112233",)
        apply_color(design, palette, "trim", "#112233")
        assert palette.colors == ("#112233",)


class TestMergeZoneColors:
    def test_merges_several_zones(self, design):
        merge_zone_colors(design, {"body": {"color": "#111111"}, "sides": {"color": "#222222"}})
        assert design.zones["body"].color == "#111111"
        assert design.zones["sides"].color == "#222222"
