"""
Zone resolver: which colourable regions exist for a template, and in what order.

Every cut always carries a ``body`` silhouette and ``trim`` hardware; a
template contributes one zone per layer in between.  The resolved order is
load-bearing: it is both the display order and the traversal order the
wizard follows in the Colors step.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from jerseyforge.schemas.catalog import Template

logger = logging.getLogger(__name__)

BODY_ZONE = "body"
TRIM_ZONE = "trim"
RESERVED_ZONE_IDS: frozenset[str] = frozenset({BODY_ZONE, TRIM_ZONE})


class ZoneRef(NamedTuple):
    id: str
    label: str


def resolve_zones(template: Template) -> tuple[ZoneRef, ...]:
    """
    Return ``body``, then each layer of *template* in order, then ``trim``.

    Layer ids repeated within the template, or colliding with a reserved
    zone, appear only once (first occurrence wins).  A template with no
    layers resolves to ``(body, trim)``.
    """
    zones = [ZoneRef(BODY_ZONE, "Main Body")]
    zones.extend(ZoneRef(layer.id, layer.label) for layer in template.layers)
    zones.append(ZoneRef(TRIM_ZONE, "Trim"))

    seen: set[str] = set()
    unique: list[ZoneRef] = []
    for zone in zones:
        if zone.id in seen:
            continue
        seen.add(zone.id)
        unique.append(zone)
    return tuple(unique)


def zone_ids(zones: tuple[ZoneRef, ...]) -> tuple[str, ...]:
    return tuple(z.id for z in zones)


def coerce_active_zone(zone_id: str | None, zones: tuple[ZoneRef, ...]) -> str:
    """Return *zone_id* if it is in *zones*, else the first zone's id."""
    if zone_id is not None and any(z.id == zone_id for z in zones):
        return zone_id
    fallback = zones[0].id
    logger.debug("Zone %r not in resolved list; falling back to %r", zone_id, fallback)
    return fallback


def next_zone(zone_id: str, zones: tuple[ZoneRef, ...]) -> str | None:
    """Return the zone after *zone_id*, or None if it is last or not present."""
    ids = zone_ids(zones)
    if zone_id not in ids:
        return None
    index = ids.index(zone_id)
    return ids[index + 1] if index < len(ids) - 1 else None
