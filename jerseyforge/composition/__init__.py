"""composition — draw-list contract with the vector surface."""

from jerseyforge.composition.draw_list import (
    BlendMode,
    DrawList,
    LogoPrimitive,
    PathPrimitive,
    PathRole,
    PatternPrimitive,
    ResolvedPattern,
    TextPrimitive,
    compose,
    resolve_pattern,
)
from jerseyforge.composition.interaction import ElementKind, classify_id

__all__ = [
    "BlendMode",
    "DrawList",
    "ElementKind",
    "LogoPrimitive",
    "PathPrimitive",
    "PathRole",
    "PatternPrimitive",
    "ResolvedPattern",
    "TextPrimitive",
    "classify_id",
    "compose",
    "resolve_pattern",
]
