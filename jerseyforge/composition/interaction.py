"""
Classification of ids reported back by the rendering surface.

The surface reports selections and drag results by id only.  Logo ids carry
a reserved prefix; text ids are looked up in the design; anything else is a
zone if it is resolved for the active template or has a stored style.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from jerseyforge.schemas.design import DesignState
from jerseyforge.styling.logos import is_logo_id
from jerseyforge.zones.resolver import ZoneRef


class ElementKind(str, Enum):
    ZONE = "zone"
    TEXT = "text"
    LOGO = "logo"
    UNKNOWN = "unknown"


def classify_id(design: DesignState, zones: Iterable[ZoneRef], item_id: str) -> ElementKind:
    if is_logo_id(item_id):
        return ElementKind.LOGO if design.find_logo(item_id) else ElementKind.UNKNOWN
    if design.find_text(item_id) is not None:
        return ElementKind.TEXT
    if item_id in design.zones or any(z.id == item_id for z in zones):
        return ElementKind.ZONE
    return ElementKind.UNKNOWN
