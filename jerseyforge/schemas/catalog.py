"""
Template catalog schema — read-only garment geometry, per sport.

A sport offers body *cuts* (the silhouette and its trim hardware) and design
*templates* (ordered layers drawn on top of the cut).  All paths are SVG path
data in the 400×500 design space.  Nothing here is mutated after load.

Absent geometry is represented by an empty tuple (layers) or an empty string
(cut shape/trim) and simply is not drawn.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from jerseyforge.schemas.design import GarmentType, ViewSide


@dataclass(frozen=True)
class SidePaths:
    """Front and back path data for one garment type."""

    front: tuple[str, ...] = ()
    back: tuple[str, ...] = ()

    def for_side(self, side: ViewSide) -> tuple[str, ...]:
        return self.front if side == ViewSide.FRONT else self.back


@dataclass(frozen=True)
class GarmentOutline:
    """Silhouette (``shape``) and trim hardware (``trim``) for one garment type."""

    shape: SidePaths = field(default_factory=SidePaths)
    trim: SidePaths = field(default_factory=SidePaths)


@dataclass(frozen=True)
class Cut:
    """A body cut (e.g. ``mens``, ``womens``) with outlines per garment type."""

    slug: str
    outlines: dict[GarmentType, GarmentOutline]

    def outline(self, garment_type: GarmentType) -> GarmentOutline | None:
        return self.outlines.get(garment_type)


@dataclass(frozen=True)
class Layer:
    """One template-authored colourable region; becomes a zone with the same id."""

    id: str
    label: str
    paths: dict[GarmentType, SidePaths]

    def paths_for(self, garment_type: GarmentType, side: ViewSide) -> tuple[str, ...]:
        side_paths = self.paths.get(garment_type)
        return side_paths.for_side(side) if side_paths else ()


@dataclass(frozen=True)
class Template:
    id: str
    label: str
    layers: tuple[Layer, ...] = ()


@dataclass(frozen=True)
class SportDefinition:
    """
    Cuts and templates available for one sport.

    ``templates`` is ordered; the first template is the fallback whenever a
    design references one that no longer exists.
    """

    id: str
    label: str
    cuts: dict[str, Cut]
    templates: tuple[Template, ...]

    def has_template(self, template_id: str) -> bool:
        return any(t.id == template_id for t in self.templates)

    def resolve_template(self, template_id: str) -> Template:
        """Return the template with *template_id*, or the first template."""
        return next((t for t in self.templates if t.id == template_id), self.templates[0])

    def resolve_cut(self, slug: str) -> Cut | None:
        """Return the cut with *slug*, or the first cut (None if the sport has none)."""
        if slug in self.cuts:
            return self.cuts[slug]
        return next(iter(self.cuts.values()), None)
