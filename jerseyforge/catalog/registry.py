"""
Template catalog registry: loads every sport definition from YAML at startup,
validates cross-references, and exposes a read-only query API.

One YAML file per sport lives in ``data/``.  Hosts that already hold a
resolved catalog in memory (e.g. fetched from a database by a loader
collaborator) pass it to CatalogRegistry.from_mapping() instead; both paths
go through the same normalization and validation.

──────────────────────────────────────────────────────────────────────────────
Sport file shape
──────────────────────────────────────────────────────────────────────────────
    id: basketball
    label: Basketball
    cuts:
      mens:
        jersey:
          shape: {front: "M…", back: "M…"}
          trim:  {front: "M…", back: "M…"}
        shorts: {...}
    templates:
      - id: pinstripe
        label: Retro Pinstripe
        layers:
          - id: stripes
            label: Pinstripes
            paths:
              jersey: {front: "M…" | ["M…", …], back: …}
              shorts: {...}

A garment type or side may be omitted; an omitted or empty path is not drawn.
──────────────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, cast

import yaml

from jerseyforge.schemas.catalog import (
    Cut,
    GarmentOutline,
    Layer,
    SidePaths,
    SportDefinition,
    Template,
)
from jerseyforge.schemas.design import GarmentType
from jerseyforge.zones.resolver import RESERVED_ZONE_IDS

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"

DEFAULT_SPORT = "basketball"


class CatalogError(ValueError):
    """Raised when catalog data is structurally invalid."""


class CatalogRegistry:
    """
    Read-only registry of sport definitions keyed by sport id.

    ``sports`` is wrapped in MappingProxyType after loading and is immutable
    for the lifetime of the registry instance.

    Instantiate directly to use a custom data directory (e.g. in tests);
    otherwise use get_catalog() for the module singleton.
    """

    def __init__(self, data_dir: Path = _DATA_DIR) -> None:
        self._data_dir = data_dir
        raw = [self._load_yaml(path) for path in sorted(data_dir.glob("*.yaml"))]
        self.sports: MappingProxyType[str, SportDefinition] = self._build(raw)
        logger.info("Loaded %d sport definition(s) from %s", len(self.sports), data_dir)

    @classmethod
    def from_mapping(cls, catalog: dict[str, dict[str, Any]]) -> CatalogRegistry:
        """Build a registry from an in-memory ``{sport_id: sport_data}`` mapping."""
        registry = cls.__new__(cls)
        registry._data_dir = None
        registry.sports = registry._build(
            [{"id": sport_id, **data} for sport_id, data in catalog.items()]
        )
        return registry

    # ── Loading ────────────────────────────────────────────────────────────────

    def _load_yaml(self, path: Path) -> dict[str, Any]:
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Catalog data file not found: {path}") from None
        except yaml.YAMLError as exc:
            raise CatalogError(f"Failed to parse catalog data file {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise CatalogError(
                f"Catalog data file {path} must contain a mapping, got {type(data).__name__}"
            )
        return cast(dict[str, Any], data)

    def _build(self, raw_sports: list[dict[str, Any]]) -> MappingProxyType[str, SportDefinition]:
        errors: list[str] = []
        result: dict[str, SportDefinition] = {}
        for data in raw_sports:
            try:
                sport = _parse_sport(data)
            except (KeyError, TypeError, ValueError) as exc:
                errors.append(f"sport {data.get('id', '?')!r}: malformed entry ({exc!r})")
                continue
            if sport.id in result:
                errors.append(f"sport {sport.id!r}: defined more than once")
            result[sport.id] = sport
            _check_sport(sport, errors)
        if errors:
            raise CatalogError(
                "Template catalog validation failed:\n" + "\n".join(f"  • {e}" for e in errors)
            )
        return MappingProxyType(result)

    # ── Query API ──────────────────────────────────────────────────────────────

    def get_sport(self, sport_id: str) -> SportDefinition:
        """Return the sport definition for *sport_id*.

        Raises
        ------
        KeyError
            If *sport_id* is not in the catalog.
        """
        try:
            return self.sports[sport_id]
        except KeyError:
            raise KeyError(f"Unknown sport: {sport_id!r}") from None

    def resolve_sport(self, sport_id: str) -> SportDefinition:
        """Return *sport_id*'s definition, falling back to the default sport, then the first."""
        if sport_id in self.sports:
            return self.sports[sport_id]
        logger.debug("Sport %r not in catalog; falling back", sport_id)
        if DEFAULT_SPORT in self.sports:
            return self.sports[DEFAULT_SPORT]
        return next(iter(self.sports.values()))

    def list_sports(self) -> list[str]:
        """Return sport ids in load order."""
        return list(self.sports.keys())


# ── Normalization ──────────────────────────────────────────────────────────────


def _side_paths(data: dict[str, Any] | None) -> SidePaths:
    data = data or {}
    return SidePaths(front=_path_tuple(data.get("front")), back=_path_tuple(data.get("back")))


def _path_tuple(value: str | list[str] | None) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        value = [value]
    return tuple(p.strip() for p in value if p and p.strip())


def _parse_sport(data: dict[str, Any]) -> SportDefinition:
    cuts: dict[str, Cut] = {}
    for slug, cut_data in (data.get("cuts") or {}).items():
        outlines = {
            GarmentType(garment): GarmentOutline(
                shape=_side_paths(outline.get("shape")),
                trim=_side_paths(outline.get("trim")),
            )
            for garment, outline in (cut_data or {}).items()
        }
        cuts[slug] = Cut(slug=slug, outlines=outlines)

    templates = tuple(
        Template(
            id=t["id"],
            label=t.get("label", t["id"]),
            layers=tuple(
                Layer(
                    id=layer["id"],
                    label=layer.get("label", layer["id"]),
                    paths={
                        GarmentType(garment): _side_paths(sides)
                        for garment, sides in (layer.get("paths") or {}).items()
                    },
                )
                for layer in t.get("layers") or []
            ),
        )
        for t in data.get("templates") or []
    )

    return SportDefinition(
        id=data["id"],
        label=data.get("label", data["id"]),
        cuts=cuts,
        templates=templates,
    )


def _check_sport(sport: SportDefinition, errors: list[str]) -> None:
    """Append every structural problem in *sport* to *errors*."""
    prefix = f"sport {sport.id!r}"
    if not sport.templates:
        errors.append(f"{prefix}: defines no templates")
    seen_templates: set[str] = set()
    for template in sport.templates:
        if template.id in seen_templates:
            errors.append(f"{prefix}: template {template.id!r} defined more than once")
        seen_templates.add(template.id)
        seen_layers: set[str] = set()
        for layer in template.layers:
            if layer.id in RESERVED_ZONE_IDS:
                errors.append(
                    f"{prefix}: template {template.id!r} layer {layer.id!r} uses a reserved zone id"
                )
            if layer.id in seen_layers:
                errors.append(
                    f"{prefix}: template {template.id!r} layer {layer.id!r} defined more than once"
                )
            seen_layers.add(layer.id)


# ── Module-level singleton ─────────────────────────────────────────────────────
#
# Loaded eagerly at import time.  The registry is read-only after
# construction.

_catalog: CatalogRegistry = CatalogRegistry()


def get_catalog() -> CatalogRegistry:
    """Return the module-level catalog singleton."""
    return _catalog
