"""
Zone styling: merge partial style edits into a design's zone map.
"""

from __future__ import annotations

from dataclasses import fields
from enum import Enum
from typing import Any

from jerseyforge.history.palette import RecentColors
from jerseyforge.schemas.design import NEUTRAL_ZONE_STYLE, DesignState, ZoneStyle

ZONE_FIELDS: frozenset[str] = frozenset(f.name for f in fields(ZoneStyle))


class ColorTarget(str, Enum):
    """Which colour of a zone a palette pick is applied to."""

    BASE = "base"
    PATTERN = "pattern"


def update_zone(design: DesignState, zone_id: str, updates: dict[str, Any]) -> ZoneStyle:
    """
    Merge *updates* into *zone_id*'s style and return the new style.

    A zone without an entry starts from the neutral style (white, no
    pattern, black ghost pattern colour).

    Raises
    ------
    ValueError
        If *updates* names a field ZoneStyle does not have, or an enum field
        has an unknown value.
    """
    unknown = set(updates) - ZONE_FIELDS
    if unknown:
        raise ValueError(f"Unknown zone style field(s): {sorted(unknown)}")
    base = design.zones.get(zone_id, NEUTRAL_ZONE_STYLE)
    style = base.merged(updates)
    design.zones[zone_id] = style
    return style


def apply_color(
    design: DesignState,
    palette: RecentColors,
    zone_id: str,
    color: str,
    target: ColorTarget = ColorTarget.BASE,
) -> ZoneStyle:
    """Record *color* as most recently used, then write it to *zone_id*."""
    palette.record(color)
    field_name = "color" if ColorTarget(target) == ColorTarget.BASE else "pattern_color"
    return update_zone(design, zone_id, {field_name: color})


def merge_zone_colors(design: DesignState, colors: dict[str, dict[str, Any]]) -> None:
    """Merge several partial zone styles at once (used when applying variations)."""
    for zone_id, updates in colors.items():
        update_zone(design, zone_id, updates)
