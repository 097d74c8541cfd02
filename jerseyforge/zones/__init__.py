"""zones — resolve the ordered zone list for a template."""

from jerseyforge.zones.resolver import (
    BODY_ZONE,
    RESERVED_ZONE_IDS,
    TRIM_ZONE,
    ZoneRef,
    coerce_active_zone,
    next_zone,
    resolve_zones,
    zone_ids,
)

__all__ = [
    "BODY_ZONE",
    "RESERVED_ZONE_IDS",
    "TRIM_ZONE",
    "ZoneRef",
    "coerce_active_zone",
    "next_zone",
    "resolve_zones",
    "zone_ids",
]
