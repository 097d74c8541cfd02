"""
Design-state schema — the canonical model of the garment being configured.

Everything the configurator renders or edits is derived from a single
DesignState.  Leaf values (Position, ZoneStyle, TextElement, LogoPlacement)
are frozen and replaced on edit; DesignState itself is mutable and owned by
exactly one session at a time.

Key types:
  ZoneStyle      — fill colour and optional pattern overlay for one zone
  TextElement    — one piece of lettering (team name, number, free text)
  LogoPlacement  — one uploaded image, optionally a live mirror of another
  DesignState    — complete design: setup selections + zones + text + logos
  RosterEntry    — per-recipient values for dynamic text elements
  CartItem       — committed, immutable snapshot handed to the cart
"""

from __future__ import annotations

import copy
from dataclasses import asdict, dataclass, field, replace
from enum import Enum
from typing import Any

# ── Enums ──────────────────────────────────────────────────────────────────────


class GarmentType(str, Enum):
    JERSEY = "jersey"
    SHORTS = "shorts"


class ViewSide(str, Enum):
    """Viewpoint requested from the composition adapter."""

    FRONT = "front"
    BACK = "back"
    BOTH = "both"  # front and back side by side


class PatternType(str, Enum):
    NONE = "none"
    STRIPES = "stripes"
    DOTS = "dots"
    MESH = "mesh"
    CAMO = "camo"
    GEOMETRIC = "geometric"


class PatternMode(str, Enum):
    """
    How a zone's pattern overlay is tinted.

    GHOST  — neutral multiply tint derived from the base colour
    CUSTOM — drawn in ZoneStyle.pattern_color
    """

    GHOST = "ghost"
    CUSTOM = "custom"


# ── Leaf values ────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Position:
    """A point in the 400×500 design space."""

    x: float
    y: float


@dataclass(frozen=True)
class ZoneStyle:
    color: str = "#ffffff"
    pattern: PatternType = PatternType.NONE
    pattern_color: str = "#000000"
    pattern_mode: PatternMode = PatternMode.GHOST

    def merged(self, updates: dict[str, Any]) -> ZoneStyle:
        """Return a copy with *updates* applied; string enum values are coerced."""
        coerced = dict(updates)
        if "pattern" in coerced:
            coerced["pattern"] = PatternType(coerced["pattern"])
        if "pattern_mode" in coerced:
            coerced["pattern_mode"] = PatternMode(coerced["pattern_mode"])
        return replace(self, **coerced)


# Style used when a zone is edited before it has any entry of its own.
NEUTRAL_ZONE_STYLE = ZoneStyle()


@dataclass(frozen=True)
class TextElement:
    """
    One text element on the garment.

    Attributes:
        id: Stable identifier.  The four reserved ids (``frontTeam``,
            ``frontNumber``, ``backName``, ``backNumber``) are locked; free-form
            additions get a generated ``text-…`` id.
        outline_width: Stroke width, 0–10 in steps of 0.5.
        size: Font size in design-space units, 10–200.
        rotation: Degrees, 0–360, about ``position``.
        is_locked: Locked elements cannot be deleted.
        is_dynamic: Varies per roster entry (player name/number) rather than
            being static team branding.
    """

    id: str
    text: str
    font: str
    color: str
    outline: str
    outline_width: float
    position: Position
    size: float
    rotation: float
    view: ViewSide
    is_locked: bool = False
    is_dynamic: bool = False


@dataclass(frozen=True)
class LogoPlacement:
    """
    One image placed on the garment.  Logos are square (``size`` is both
    width and height) and rotate about their centre ``position``.

    ``mirrored_from`` is the id of the logo this one reflects, or None.
    """

    id: str
    url: str
    position: Position
    size: float
    rotation: float
    view: ViewSide
    mirrored_from: str | None = None


# ── Design state ───────────────────────────────────────────────────────────────


@dataclass
class DesignState:
    """
    The live, mutable design.

    ``zones`` always holds at least ``body`` and ``trim``.  Entries for zones
    that the active template no longer produces are kept, not pruned.
    """

    sport: str
    cut: str
    garment_type: GarmentType
    template: str
    zones: dict[str, ZoneStyle] = field(default_factory=dict)
    text_elements: list[TextElement] = field(default_factory=list)
    logos: list[LogoPlacement] = field(default_factory=list)

    def snapshot(self) -> DesignState:
        """Return a deep copy that shares nothing mutable with this state."""
        return copy.deepcopy(self)

    def find_text(self, element_id: str) -> TextElement | None:
        return next((t for t in self.text_elements if t.id == element_id), None)

    def find_logo(self, logo_id: str) -> LogoPlacement | None:
        return next((lg for lg in self.logos if lg.id == logo_id), None)

    def to_dict(self) -> dict[str, Any]:
        """Plain nested data (enum members as their string values)."""
        return _plain(asdict(self))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DesignState:
        return cls(
            sport=data["sport"],
            cut=data["cut"],
            garment_type=GarmentType(data.get("garment_type", GarmentType.JERSEY.value)),
            template=data["template"],
            zones={
                zone_id: NEUTRAL_ZONE_STYLE.merged(style)
                for zone_id, style in data.get("zones", {}).items()
            },
            text_elements=[text_element_from_dict(t) for t in data.get("text_elements", [])],
            logos=[logo_from_dict(lg) for lg in data.get("logos", [])],
        )


def text_element_from_dict(data: dict[str, Any]) -> TextElement:
    return TextElement(
        id=data["id"],
        text=data["text"],
        font=data["font"],
        color=data["color"],
        outline=data["outline"],
        outline_width=float(data["outline_width"]),
        position=Position(**data["position"]),
        size=float(data["size"]),
        rotation=float(data.get("rotation", 0)),
        view=ViewSide(data["view"]),
        is_locked=bool(data.get("is_locked", False)),
        is_dynamic=bool(data.get("is_dynamic", False)),
    )


def logo_from_dict(data: dict[str, Any]) -> LogoPlacement:
    return LogoPlacement(
        id=data["id"],
        url=data["url"],
        position=Position(**data["position"]),
        size=float(data["size"]),
        rotation=float(data.get("rotation", 0)),
        view=ViewSide(data["view"]),
        mirrored_from=data.get("mirrored_from"),
    )


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


# ── Roster and cart ────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class RosterEntry:
    """
    One recipient of a team order.

    ``dynamic_values`` maps a text element id (e.g. ``"backNumber"``) to the
    text printed for this recipient.
    """

    size: str
    quantity: int
    dynamic_values: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class CartItem:
    """A committed design.  ``design`` is a deep snapshot and is never edited."""

    id: str
    design: DesignState
    quantity: int
    price: float
    timestamp: int  # epoch milliseconds
    roster: tuple[RosterEntry, ...] | None = None


def personalize(design: DesignState, entry: RosterEntry) -> DesignState:
    """
    Return a copy of *design* with dynamic text replaced by *entry*'s values.

    Only elements flagged ``is_dynamic`` whose id appears in
    ``entry.dynamic_values`` change; static branding is left as-is.
    """
    personalized = design.snapshot()
    personalized.text_elements = [
        replace(t, text=entry.dynamic_values[t.id])
        if t.is_dynamic and t.id in entry.dynamic_values
        else t
        for t in personalized.text_elements
    ]
    return personalized
