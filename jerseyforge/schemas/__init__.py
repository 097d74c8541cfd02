"""schemas — design-state and catalog data model."""

from jerseyforge.schemas.catalog import (
    Cut,
    GarmentOutline,
    Layer,
    SidePaths,
    SportDefinition,
    Template,
)
from jerseyforge.schemas.design import (
    NEUTRAL_ZONE_STYLE,
    CartItem,
    DesignState,
    GarmentType,
    LogoPlacement,
    PatternMode,
    PatternType,
    Position,
    RosterEntry,
    TextElement,
    ViewSide,
    ZoneStyle,
    personalize,
)

__all__ = [
    "NEUTRAL_ZONE_STYLE",
    "CartItem",
    "Cut",
    "DesignState",
    "GarmentOutline",
    "GarmentType",
    "Layer",
    "LogoPlacement",
    "PatternMode",
    "PatternType",
    "Position",
    "RosterEntry",
    "SidePaths",
    "SportDefinition",
    "Template",
    "TextElement",
    "ViewSide",
    "ZoneStyle",
    "personalize",
]
