"""
Composition adapter: DesignState + view side → ordered draw list.

The draw list is the whole contract with the vector surface.  For each side
drawn, primitives are emitted in paint order:

  1. base silhouette from the cut (zone ``body``), plus its pattern overlay
  2. each template layer's paths (zone = layer id), plus pattern overlays
  3. trim hardware from the cut (zone ``trim``), plus its pattern overlay
  4. text elements whose view matches the side (jerseys only)
  5. logos whose view matches the side (jerseys only)

``ViewSide.BOTH`` draws the front at x-offset 0 and the back at x-offset
``canvas_width`` inside a double-width view box.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from jerseyforge.schemas.catalog import SportDefinition
from jerseyforge.schemas.design import (
    DesignState,
    GarmentType,
    PatternMode,
    PatternType,
    Position,
    ViewSide,
    ZoneStyle,
)
from jerseyforge.zones.resolver import BODY_ZONE, TRIM_ZONE

FALLBACK_FILL = "#ffffff"
GHOST_PATTERN_COLOR = "#000000"
GHOST_PATTERN_OPACITY = 0.2


class PathRole(str, Enum):
    BASE = "base"
    ZONE = "zone"
    TRIM = "trim"


class BlendMode(str, Enum):
    NORMAL = "normal"
    MULTIPLY = "multiply"


@dataclass(frozen=True)
class ResolvedPattern:
    """Concrete paint for a zone's pattern overlay."""

    pattern: PatternType
    color: str
    opacity: float
    blend: BlendMode


@dataclass(frozen=True)
class PathPrimitive:
    role: PathRole
    zone_id: str
    path: str
    fill: str
    x_offset: float = 0.0


@dataclass(frozen=True)
class PatternPrimitive:
    zone_id: str
    path: str
    pattern: PatternType
    color: str
    opacity: float
    blend: BlendMode
    x_offset: float = 0.0

    @property
    def pattern_key(self) -> str:
        """Identifier for the pattern definition (one per pattern type and zone)."""
        return f"pattern-{self.pattern.value}-{self.zone_id}"


@dataclass(frozen=True)
class TextPrimitive:
    element_id: str
    text: str
    font: str
    font_weight: int
    color: str
    outline: str
    outline_width: float
    position: Position
    size: float
    rotation: float
    letter_spacing: float
    x_offset: float = 0.0


@dataclass(frozen=True)
class LogoPrimitive:
    """A square image; ``origin`` is its top-left corner, rotation is about ``center``."""

    logo_id: str
    url: str
    origin: Position
    center: Position
    size: float
    rotation: float
    x_offset: float = 0.0


Primitive = Union[PathPrimitive, PatternPrimitive, TextPrimitive, LogoPrimitive]


@dataclass(frozen=True)
class DrawList:
    view: ViewSide
    width: float
    height: float
    primitives: tuple[Primitive, ...]

    @property
    def view_box(self) -> tuple[float, float, float, float]:
        return (0.0, 0.0, self.width, self.height)

    def of_type(self, kind: type) -> list[Primitive]:
        return [p for p in self.primitives if isinstance(p, kind)]


# ── Resolution helpers ─────────────────────────────────────────────────────────


def resolve_pattern(style: ZoneStyle) -> ResolvedPattern | None:
    """
    Paint for *style*'s pattern overlay, or None when it has no pattern.

    Ghost mode multiplies a translucent black over the base colour so the
    pattern reads as a darker shade of it; custom mode paints
    ``pattern_color`` opaquely.
    """
    if style.pattern == PatternType.NONE:
        return None
    if style.pattern_mode == PatternMode.GHOST:
        return ResolvedPattern(
            style.pattern, GHOST_PATTERN_COLOR, GHOST_PATTERN_OPACITY, BlendMode.MULTIPLY
        )
    return ResolvedPattern(style.pattern, style.pattern_color, 1.0, BlendMode.NORMAL)


def font_weight(font: str) -> int:
    return 400 if font == "Anton" else 700


def _zone_primitives(
    design: DesignState, role: PathRole, zone_id: str, paths: tuple[str, ...], x_offset: float
) -> list[Primitive]:
    style = design.zones.get(zone_id)
    fill = style.color if style else FALLBACK_FILL
    pattern = resolve_pattern(style) if style else None
    out: list[Primitive] = []
    for path in paths:
        out.append(PathPrimitive(role, zone_id, path, fill, x_offset))
        if pattern is not None:
            out.append(
                PatternPrimitive(
                    zone_id,
                    path,
                    pattern.pattern,
                    pattern.color,
                    pattern.opacity,
                    pattern.blend,
                    x_offset,
                )
            )
    return out


def _compose_side(
    design: DesignState, sport: SportDefinition, side: ViewSide, x_offset: float
) -> list[Primitive]:
    garment = design.garment_type
    cut = sport.resolve_cut(design.cut)
    outline = cut.outline(garment) if cut else None
    template = sport.resolve_template(design.template)

    primitives: list[Primitive] = []
    if outline is not None:
        primitives += _zone_primitives(
            design, PathRole.BASE, BODY_ZONE, outline.shape.for_side(side), x_offset
        )
    for layer in template.layers:
        primitives += _zone_primitives(
            design, PathRole.ZONE, layer.id, layer.paths_for(garment, side), x_offset
        )
    if outline is not None:
        primitives += _zone_primitives(
            design, PathRole.TRIM, TRIM_ZONE, outline.trim.for_side(side), x_offset
        )

    if garment != GarmentType.JERSEY:
        return primitives

    for el in design.text_elements:
        if el.view != side:
            continue
        primitives.append(
            TextPrimitive(
                element_id=el.id,
                text=el.text,
                font=el.font,
                font_weight=font_weight(el.font),
                color=el.color,
                outline=el.outline,
                outline_width=el.outline_width,
                position=el.position,
                size=el.size,
                rotation=el.rotation,
                letter_spacing=2.0 if el.id == "frontTeam" else 0.0,
                x_offset=x_offset,
            )
        )
    for logo in design.logos:
        if logo.view != side:
            continue
        half = logo.size / 2
        primitives.append(
            LogoPrimitive(
                logo_id=logo.id,
                url=logo.url,
                origin=Position(logo.position.x - half, logo.position.y - half),
                center=logo.position,
                size=logo.size,
                rotation=logo.rotation,
                x_offset=x_offset,
            )
        )
    return primitives


def compose(
    design: DesignState,
    sport: SportDefinition,
    view: ViewSide,
    canvas_width: float = 400.0,
    canvas_height: float = 500.0,
) -> DrawList:
    """Build the ordered draw list for *design* seen from *view*."""
    view = ViewSide(view)
    if view == ViewSide.BOTH:
        primitives = _compose_side(design, sport, ViewSide.FRONT, 0.0)
        primitives += _compose_side(design, sport, ViewSide.BACK, canvas_width)
        return DrawList(view, canvas_width * 2, canvas_height, tuple(primitives))
    return DrawList(
        view, canvas_width, canvas_height, tuple(_compose_side(design, sport, view, 0.0))
    )
