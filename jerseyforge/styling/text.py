"""
Text element editing with linked typography groups.

Text elements can belong to a named group (e.g. ``numbers`` links the front
and back numbers).  The typographic fields in GROUPED_FIELDS are shared
across a group: editing one member writes every member.  Content and
placement fields always stay per-element.

TextGroupIndex holds the group table in both directions so the group of an
element is a dict lookup; rebuild it whenever the table changes.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable, Mapping
from dataclasses import replace
from typing import Any

from jerseyforge.config.settings import ConfiguratorSettings, Limits
from jerseyforge.schemas.design import DesignState, Position, TextElement, ViewSide

logger = logging.getLogger(__name__)

TEXT_ID_PREFIX = "text-"

GROUPED_FIELDS: frozenset[str] = frozenset({"font", "color", "outline", "outline_width"})
INDIVIDUAL_FIELDS: frozenset[str] = frozenset(
    {"text", "size", "position", "rotation", "is_dynamic", "view"}
)
EDITABLE_FIELDS = GROUPED_FIELDS | INDIVIDUAL_FIELDS


class TextGroupIndex:
    """
    Bidirectional index over a ``group name -> member ids`` table.

    An element belongs to at most one group.  Member ids need not currently
    exist in any design; absent members are simply never matched.
    """

    def __init__(self, groups: Mapping[str, Iterable[str]]) -> None:
        self._members: dict[str, tuple[str, ...]] = {}
        self._group_of: dict[str, str] = {}
        for name, members in groups.items():
            members = tuple(members)
            for member in members:
                if member in self._group_of:
                    raise ValueError(
                        f"Text element {member!r} is in both "
                        f"{self._group_of[member]!r} and {name!r}"
                    )
                self._group_of[member] = name
            self._members[name] = members

    @property
    def groups(self) -> dict[str, tuple[str, ...]]:
        return dict(self._members)

    def group_of(self, element_id: str) -> str | None:
        return self._group_of.get(element_id)

    def members(self, group: str) -> tuple[str, ...]:
        return self._members.get(group, ())

    def linked_ids(self, element_id: str) -> tuple[str, ...]:
        """Ids sharing typography with *element_id* (itself included)."""
        group = self._group_of.get(element_id)
        return self._members[group] if group else (element_id,)

    def partition(
        self, elements: Iterable[TextElement]
    ) -> tuple[dict[str, list[TextElement]], list[TextElement]]:
        """Split *elements* into per-group lists and an ungrouped list, keeping order."""
        grouped: dict[str, list[TextElement]] = {}
        ungrouped: list[TextElement] = []
        for element in elements:
            group = self._group_of.get(element.id)
            if group:
                grouped.setdefault(group, []).append(element)
            else:
                ungrouped.append(element)
        return grouped, ungrouped


def _coerce(field: str, value: Any, limits: Limits) -> Any:
    if field == "position":
        if isinstance(value, Position):
            return value
        if isinstance(value, Mapping):
            return Position(float(value["x"]), float(value["y"]))
        x, y = value
        return Position(float(x), float(y))
    if field == "size":
        return limits.text_size.clamp(float(value))
    if field == "outline_width":
        return limits.snap_outline(float(value))
    if field == "rotation":
        return limits.text_rotation.clamp(float(value))
    if field == "view":
        return ViewSide(value)
    if field == "is_dynamic":
        return bool(value)
    return value


def update_text(
    design: DesignState,
    groups: TextGroupIndex,
    element_id: str,
    field: str,
    value: Any,
    limits: Limits,
) -> bool:
    """
    Set *field* on *element_id*, fanning grouped typography out to its group.

    Returns False (and changes nothing) when *element_id* is not in the
    design, e.g. after it was deleted.

    Raises
    ------
    ValueError
        If *field* is not an editable text field.
    """
    if field not in EDITABLE_FIELDS:
        raise ValueError(f"Unknown text field: {field!r}")
    if design.find_text(element_id) is None:
        logger.debug("Ignoring %s edit on missing text element %r", field, element_id)
        return False

    value = _coerce(field, value, limits)
    targets = set(groups.linked_ids(element_id)) if field in GROUPED_FIELDS else {element_id}
    design.text_elements = [
        replace(t, **{field: value}) if t.id in targets else t for t in design.text_elements
    ]
    return True


def add_text(
    design: DesignState,
    view: ViewSide,
    settings: ConfiguratorSettings,
) -> TextElement:
    """Append a free-form (unlocked, static) text element to *view* and return it."""
    style = settings.text_style
    element = TextElement(
        id=f"{TEXT_ID_PREFIX}{uuid.uuid4().hex[:12]}",
        text=str(settings.new_text["text"]),
        font=style["font"],
        color=style["color"],
        outline=style["outline"],
        outline_width=float(style["outline_width"]),
        position=Position(**settings.new_text["position"]),
        size=float(settings.new_text["size"]),
        rotation=0.0,
        view=ViewSide(view),
        is_locked=False,
        is_dynamic=False,
    )
    design.text_elements.append(element)
    return element
