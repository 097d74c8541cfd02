"""Tests for zones.resolver — ordered zone list, fallback and traversal."""

from __future__ import annotations

from jerseyforge.schemas.catalog import Layer, Template
from jerseyforge.zones.resolver import (
    ZoneRef,
    coerce_active_zone,
    next_zone,
    resolve_zones,
    zone_ids,
)


def _template(*layer_ids: str) -> Template:
    return Template(
        id="t",
        label="T",
        layers=tuple(Layer(id=lid, label=lid.title(), paths={}) for lid in layer_ids),
    )


# ── resolve_zones ──────────────────────────────────────────────────────────────


class TestResolveZones:
    def test_single_layer_sits_between_body_and_trim(self):
        assert zone_ids(resolve_zones(_template("chevron"))) == ("body", "chevron", "trim")

    def test_layer_order_is_preserved(self):
        zones = resolve_zones(_template("sides", "shoulders", "chevron"))
        assert zone_ids(zones) == ("body", "sides", "shoulders", "chevron", "trim")

    def test_zero_layers_still_yields_body_and_trim(self):
        assert resolve_zones(_template()) == (
            ZoneRef("body", "Main Body"),
            ZoneRef("trim", "Trim"),
        )

    def test_labels_come_from_layers(self):
        zones = resolve_zones(_template("chevron"))
        assert zones[1] == ZoneRef("chevron", "Chevron")

    def test_duplicates_are_removed(self):
        zones = resolve_zones(_template("chevron", "chevron", "trim"))
        assert zone_ids(zones) == ("body", "chevron", "trim")


# ── coerce_active_zone ─────────────────────────────────────────────────────────


class TestCoerceActiveZone:
    def test_present_zone_is_kept(self):
        zones = resolve_zones(_template("chevron"))
        assert coerce_active_zone("chevron", zones) == "chevron"

    def test_absent_zone_falls_back_to_first(self):
        zones = resolve_zones(_template())
        assert coerce_active_zone("chevron", zones) == "body"

    def test_none_falls_back_to_first(self):
        assert coerce_active_zone(None, resolve_zones(_template())) == "body"


# ── next_zone ──────────────────────────────────────────────────────────────────


class TestNextZone:
    def test_advances_in_order(self):
        zones = resolve_zones(_template("chevron"))
        assert next_zone("body", zones) == "chevron"
        assert next_zone("chevron", zones) == "trim"

    def test_last_zone_has_no_next(self):
        assert next_zone("trim", resolve_zones(_template())) is None

    def test_unknown_zone_has_no_next(self):
        assert next_zone("missing", resolve_zones(_template())) is None
