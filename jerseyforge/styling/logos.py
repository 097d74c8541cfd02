"""
Logo placement and live mirroring.

A mirror is an ordinary LogoPlacement whose ``mirrored_from`` names its
source.  The relation is 1:1 and acyclic: a source has at most one mirror.
The mirror is always derived from its source:

    mirror.position.x = canvas_width - source.position.x
    mirror.position.y = source.position.y
    mirror.rotation   = -source.rotation
    mirror.size       = source.size

Every edit to a source's size, rotation or position re-derives its mirror,
so repeated identical edits are idempotent.  Edits aimed at a mirror are
reflected onto its source first.  A mirror cannot itself be mirrored.
Removing a source removes its mirror too.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable, Mapping
from dataclasses import replace
from typing import Any

from jerseyforge.config.settings import ConfiguratorSettings, Limits
from jerseyforge.schemas.design import DesignState, LogoPlacement, Position, ViewSide

logger = logging.getLogger(__name__)

LOGO_ID_PREFIX = "logo-"

LOGO_FIELDS: frozenset[str] = frozenset({"size", "rotation"})


def new_logo_id() -> str:
    return f"{LOGO_ID_PREFIX}{uuid.uuid4().hex[:12]}"


def is_logo_id(item_id: str) -> bool:
    return item_id.startswith(LOGO_ID_PREFIX)


class MirrorIndex:
    """Lookup from source logo id to the id of its mirror."""

    def __init__(self, logos: Iterable[LogoPlacement]) -> None:
        self._mirror_of: dict[str, str] = {}
        for logo in logos:
            if logo.mirrored_from is None:
                continue
            if logo.mirrored_from in self._mirror_of:
                raise ValueError(
                    f"Logo {logo.mirrored_from!r} has more than one mirror: "
                    f"{self._mirror_of[logo.mirrored_from]!r} and {logo.id!r}"
                )
            self._mirror_of[logo.mirrored_from] = logo.id

    def mirror_of(self, source_id: str) -> str | None:
        return self._mirror_of.get(source_id)

    def __len__(self) -> int:
        return len(self._mirror_of)


def reflect(source: LogoPlacement, mirror: LogoPlacement, canvas_width: float) -> LogoPlacement:
    """Return *mirror* re-derived from *source*."""
    return replace(
        mirror,
        position=Position(canvas_width - source.position.x, source.position.y),
        size=source.size,
        rotation=-source.rotation,
        view=source.view,
    )


def _sync_mirror(design: DesignState, source: LogoPlacement, canvas_width: float) -> None:
    mirror_id = MirrorIndex(design.logos).mirror_of(source.id)
    if mirror_id is None:
        return
    design.logos = [
        reflect(source, lg, canvas_width) if lg.id == mirror_id else lg for lg in design.logos
    ]


def _replace_logo(design: DesignState, updated: LogoPlacement) -> None:
    design.logos = [updated if lg.id == updated.id else lg for lg in design.logos]


def _source_of(design: DesignState, logo: LogoPlacement) -> LogoPlacement | None:
    if logo.mirrored_from is None:
        return None
    return design.find_logo(logo.mirrored_from)


# ── Operations ─────────────────────────────────────────────────────────────────


def add_logo(
    design: DesignState,
    url: str,
    view: ViewSide,
    settings: ConfiguratorSettings,
) -> LogoPlacement:
    """Append a new logo at the configured default placement and return it."""
    logo = LogoPlacement(
        id=new_logo_id(),
        url=url,
        position=settings.new_logo_position,
        size=settings.new_logo_size,
        rotation=0.0,
        view=ViewSide(view),
    )
    design.logos.append(logo)
    return logo


def remove_logo(design: DesignState, logo_id: str) -> bool:
    """Remove *logo_id* and any logo mirroring it.  Returns False if absent."""
    if design.find_logo(logo_id) is None:
        return False
    design.logos = [
        lg for lg in design.logos if lg.id != logo_id and lg.mirrored_from != logo_id
    ]
    return True


def toggle_mirror(
    design: DesignState, logo_id: str, canvas_width: float
) -> LogoPlacement | None:
    """
    Remove *logo_id*'s mirror if it has one, otherwise create it.

    Returns the created mirror, or None when a mirror was removed, when
    *logo_id* does not exist or is itself a mirror.
    """
    source = design.find_logo(logo_id)
    if source is None:
        logger.debug("Ignoring mirror toggle on missing logo %r", logo_id)
        return None
    if source.mirrored_from is not None:
        logger.debug("Ignoring mirror toggle on mirror %r", logo_id)
        return None

    existing = MirrorIndex(design.logos).mirror_of(logo_id)
    if existing is not None:
        design.logos = [lg for lg in design.logos if lg.id != existing]
        return None

    mirror = reflect(
        source,
        replace(source, id=new_logo_id(), mirrored_from=logo_id),
        canvas_width,
    )
    design.logos.append(mirror)
    return mirror


def update_logo(
    design: DesignState,
    logo_id: str,
    field: str,
    value: float,
    limits: Limits,
    canvas_width: float,
) -> bool:
    """
    Set ``size`` or ``rotation`` on *logo_id* and re-derive its mirror.

    An edit on a mirror is reflected onto its source, which then re-derives
    the mirror.  Returns False when the logo does not exist.

    Raises
    ------
    ValueError
        If *field* is not ``size`` or ``rotation``.
    """
    if field not in LOGO_FIELDS:
        raise ValueError(f"Unknown logo field: {field!r}")
    logo = design.find_logo(logo_id)
    if logo is None:
        logger.debug("Ignoring %s edit on missing logo %r", field, logo_id)
        return False
    source = _source_of(design, logo)
    if source is not None:
        logo = source
        if field == "rotation":
            value = -float(value)

    clamp = limits.logo_size if field == "size" else limits.logo_rotation
    updated = replace(logo, **{field: clamp.clamp(float(value))})
    _replace_logo(design, updated)
    _sync_mirror(design, updated, canvas_width)
    return True


def update_logo_position(
    design: DesignState,
    logo_id: str,
    position: Position | Mapping[str, Any],
    canvas_width: float,
) -> bool:
    """
    Move *logo_id* to *position* and reflect its mirror.  False if absent.

    Dragging a mirror moves its source to the reflected position instead.
    """
    logo = design.find_logo(logo_id)
    if logo is None:
        logger.debug("Ignoring move of missing logo %r", logo_id)
        return False
    if not isinstance(position, Position):
        position = Position(float(position["x"]), float(position["y"]))
    source = _source_of(design, logo)
    if source is not None:
        logo = source
        position = Position(canvas_width - position.x, position.y)

    updated = replace(logo, position=position)
    _replace_logo(design, updated)
    _sync_mirror(design, updated, canvas_width)
    return True
