"""styling — zone, text-group and logo-mirror edits on a DesignState."""

from jerseyforge.styling.logos import (
    LOGO_ID_PREFIX,
    MirrorIndex,
    add_logo,
    is_logo_id,
    remove_logo,
    toggle_mirror,
    update_logo,
    update_logo_position,
)
from jerseyforge.styling.text import (
    GROUPED_FIELDS,
    TextGroupIndex,
    add_text,
    update_text,
)
from jerseyforge.styling.zones import ColorTarget, apply_color, merge_zone_colors, update_zone

__all__ = [
    "GROUPED_FIELDS",
    "LOGO_ID_PREFIX",
    "ColorTarget",
    "MirrorIndex",
    "TextGroupIndex",
    "add_logo",
    "add_text",
    "apply_color",
    "is_logo_id",
    "merge_zone_colors",
    "remove_logo",
    "toggle_mirror",
    "update_logo",
    "update_logo_position",
    "update_text",
]
