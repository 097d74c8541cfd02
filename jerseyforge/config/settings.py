"""
Configurator settings: defaults, slider limits and tunables loaded from YAML.

The packaged ``data/defaults.yaml`` is loaded once at import time; call
get_settings() for the singleton or load_settings(path) for a custom file.
Every invalid value found is reported together in one ValueError.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, NamedTuple, cast

import yaml

from jerseyforge.schemas.design import (
    NEUTRAL_ZONE_STYLE,
    GarmentType,
    Position,
    TextElement,
    ViewSide,
    ZoneStyle,
)
from jerseyforge.zones.resolver import RESERVED_ZONE_IDS

logger = logging.getLogger(__name__)

_DEFAULTS_PATH = Path(__file__).parent / "data" / "defaults.yaml"


class Range(NamedTuple):
    """Inclusive slider range."""

    low: float
    high: float

    def clamp(self, value: float) -> float:
        return max(self.low, min(self.high, value))


class Swatch(NamedTuple):
    name: str
    hex: str


class FontOption(NamedTuple):
    name: str
    value: str


@dataclass(frozen=True)
class Limits:
    text_size: Range
    outline_width: Range
    outline_step: float
    text_rotation: Range
    logo_size: Range
    logo_rotation: Range

    def snap_outline(self, value: float) -> float:
        """Clamp *value* to the outline range and snap it to the slider step."""
        snapped = round(value / self.outline_step) * self.outline_step
        return self.outline_width.clamp(snapped)


@dataclass(frozen=True)
class ConfiguratorSettings:
    """
    Immutable configurator defaults.

    Attributes:
        canvas_width / canvas_height: Design-space size; mirrors reflect
            about ``canvas_width / 2``.
        default_design: Setup selections for a fresh design
            (sport, cut, garment_type, template).
        default_zones: Zone styles applied to a fresh design.
        default_text: Raw reserved text element entries (see
            :meth:`default_text_elements`).
        text_style: Typography shared by default and new text elements.
        text_groups: ``group name -> member element ids``.
        player_elements: Element ids shown in the identity panel's player
            section; every other element belongs to the team section.
        palette_capacity / palette_seed: Recent-colours list bounds and the
            colours it starts with.
        undo_window_ms: How long a deleted text element stays recoverable.
    """

    canvas_width: float
    canvas_height: float
    default_design: MappingProxyType[str, str]
    default_zones: MappingProxyType[str, ZoneStyle]
    default_text: tuple[dict[str, Any], ...]
    text_style: MappingProxyType[str, Any]
    new_text: MappingProxyType[str, Any]
    text_groups: MappingProxyType[str, tuple[str, ...]]
    player_elements: frozenset[str]
    new_logo_position: Position
    new_logo_size: float
    limits: Limits
    palette_capacity: int
    palette_seed: tuple[str, ...]
    undo_window_ms: int
    variation_count: int
    commit_price: float
    commit_quantity: int
    fonts: tuple[FontOption, ...]
    swatches: tuple[Swatch, ...]

    @property
    def reserved_text_ids(self) -> frozenset[str]:
        return frozenset(entry["id"] for entry in self.default_text)

    @property
    def garment_type(self) -> GarmentType:
        return GarmentType(self.default_design["garment_type"])

    def fresh_zones(self) -> dict[str, ZoneStyle]:
        return dict(self.default_zones)

    def default_text_elements(self) -> list[TextElement]:
        """Return new reserved text elements (locked) in configured order."""
        return [
            TextElement(
                id=entry["id"],
                text=str(entry["text"]),
                font=self.text_style["font"],
                color=self.text_style["color"],
                outline=self.text_style["outline"],
                outline_width=float(self.text_style["outline_width"]),
                position=Position(**entry["position"]),
                size=float(entry["size"]),
                rotation=float(entry.get("rotation", 0)),
                view=ViewSide(entry["view"]),
                is_locked=True,
                is_dynamic=bool(entry.get("is_dynamic", False)),
            )
            for entry in self.default_text
        ]


# ── Loading ────────────────────────────────────────────────────────────────────


def _load_yaml(path: Path) -> dict[str, Any]:
    try:
        with open(path) as f:
            return cast(dict[str, Any], yaml.safe_load(f))
    except FileNotFoundError:
        raise FileNotFoundError(f"Settings file not found: {path}") from None
    except yaml.YAMLError as exc:
        raise ValueError(f"Failed to parse settings file {path}: {exc}") from exc


def load_settings(path: Path = _DEFAULTS_PATH) -> ConfiguratorSettings:
    """Load and validate settings from *path*.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    ValueError
        If the file cannot be parsed or any value is invalid.
    """
    data = _load_yaml(path)
    try:
        settings = _build(data)
    except (KeyError, TypeError) as exc:
        raise ValueError(f"Malformed settings file {path}: missing or invalid {exc}") from exc

    errors = _validate(settings)
    if errors:
        raise ValueError(
            f"Settings validation failed for {path}:\n" + "\n".join(f"  • {e}" for e in errors)
        )
    logger.info("Loaded configurator settings from %s", path)
    return settings


def _range(pair: list[float]) -> Range:
    low, high = pair
    return Range(float(low), float(high))


def _build(data: dict[str, Any]) -> ConfiguratorSettings:
    limits = data["limits"]
    return ConfiguratorSettings(
        canvas_width=float(data["canvas"]["width"]),
        canvas_height=float(data["canvas"]["height"]),
        default_design=MappingProxyType(dict(data["default_design"])),
        default_zones=MappingProxyType(
            {zone_id: NEUTRAL_ZONE_STYLE.merged(style) for zone_id, style in data["default_zones"].items()}
        ),
        default_text=tuple(data["default_text_elements"]),
        text_style=MappingProxyType(dict(data["text_style"])),
        new_text=MappingProxyType(dict(data["new_text"])),
        text_groups=MappingProxyType(
            {name: tuple(members) for name, members in (data.get("text_groups") or {}).items()}
        ),
        player_elements=frozenset(data.get("player_elements") or ()),
        new_logo_position=Position(**data["new_logo"]["position"]),
        new_logo_size=float(data["new_logo"]["size"]),
        limits=Limits(
            text_size=_range(limits["text_size"]),
            outline_width=_range(limits["outline_width"]),
            outline_step=float(limits["outline_step"]),
            text_rotation=_range(limits["text_rotation"]),
            logo_size=_range(limits["logo_size"]),
            logo_rotation=_range(limits["logo_rotation"]),
        ),
        palette_capacity=int(data["palette"]["capacity"]),
        palette_seed=tuple(data["palette"]["seed"]),
        undo_window_ms=int(data["undo"]["window_ms"]),
        variation_count=int(data["variations"]["count"]),
        commit_price=float(data["commit"]["price"]),
        commit_quantity=int(data["commit"]["quantity"]),
        fonts=tuple(FontOption(**f) for f in data["fonts"]),
        swatches=tuple(Swatch(**s) for s in data["swatches"]),
    )


def _validate(settings: ConfiguratorSettings) -> list[str]:
    errors: list[str] = []
    missing_zones = RESERVED_ZONE_IDS - set(settings.default_zones)
    if missing_zones:
        errors.append(f"default_zones: missing required zone(s) {sorted(missing_zones)}")
    if settings.palette_capacity < 1:
        errors.append(f"palette.capacity must be >= 1, got {settings.palette_capacity}")
    if len(settings.palette_seed) > settings.palette_capacity:
        errors.append("palette.seed has more colours than palette.capacity")
    if len(set(settings.palette_seed)) != len(settings.palette_seed):
        errors.append("palette.seed contains duplicate colours")
    if settings.undo_window_ms <= 0:
        errors.append(f"undo.window_ms must be > 0, got {settings.undo_window_ms}")
    if settings.variation_count < 1:
        errors.append(f"variations.count must be >= 1, got {settings.variation_count}")
    if settings.limits.outline_step <= 0:
        errors.append("limits.outline_step must be > 0")
    for name in ("text_size", "outline_width", "text_rotation", "logo_size", "logo_rotation"):
        rng: Range = getattr(settings.limits, name)
        if rng.low > rng.high:
            errors.append(f"limits.{name}: low {rng.low} exceeds high {rng.high}")
    if not settings.swatches:
        errors.append("swatches: at least one swatch is required")

    seen: dict[str, str] = {}
    for group, members in settings.text_groups.items():
        for member in members:
            if member in seen:
                errors.append(
                    f"text_groups: {member!r} is in both {seen[member]!r} and {group!r}"
                )
            seen[member] = group
    return errors


# ── Module-level singleton ─────────────────────────────────────────────────────

_settings: ConfiguratorSettings = load_settings()


def get_settings() -> ConfiguratorSettings:
    """Return the module-level settings singleton."""
    return _settings
