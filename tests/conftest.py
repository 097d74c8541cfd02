"""Shared fixtures: a small in-memory catalog, a manual clock, and a session."""

from __future__ import annotations

import pytest

from jerseyforge.catalog.registry import CatalogRegistry
from jerseyforge.configurator.session import ConfiguratorSession
from jerseyforge.history.undo import ManualClock

SMALL_CATALOG = {
    "testball": {
        "label": "Test Ball",
        "cuts": {
            "std": {
                "jersey": {
                    "shape": {"front": "M0 0 L400 0 L400 500 Z", "back": "M0 0 L400 500 Z"},
                    "trim": {"front": "M10 10 Z", "back": "M11 11 Z"},
                },
                "shorts": {
                    "shape": {"front": "M20 20 Z", "back": "M21 21 Z"},
                    "trim": {"front": "M30 30 Z"},
                },
            },
            "slim": {
                "jersey": {
                    "shape": {"front": "M5 5 Z", "back": "M6 6 Z"},
                    "trim": {"front": "M7 7 Z", "back": "M8 8 Z"},
                },
            },
        },
        "templates": [
            {"id": "plain", "label": "Plain", "layers": []},
            {
                "id": "chevron",
                "label": "Chevron",
                "layers": [
                    {
                        "id": "chevron",
                        "label": "Chevron",
                        "paths": {"jersey": {"front": "M100 100 Z", "back": "M101 101 Z"}},
                    }
                ],
            },
            {
                "id": "panels",
                "label": "Panels",
                "layers": [
                    {
                        "id": "sides",
                        "label": "Side Panels",
                        "paths": {"jersey": {"front": ["M1 2 Z", "M3 4 Z"], "back": "M5 6 Z"}},
                    },
                    {
                        "id": "shoulders",
                        "label": "Shoulders",
                        "paths": {"jersey": {"front": "M7 8 Z", "back": ""}},
                    },
                ],
            },
        ],
    },
    "otherball": {
        "label": "Other Ball",
        "cuts": {"std": {"jersey": {"shape": {"front": "M0 0 Z", "back": "M0 0 Z"}}}},
        "templates": [{"id": "solo", "label": "Solo", "layers": []}],
    },
}


@pytest.fixture
def catalog() -> CatalogRegistry:
    return CatalogRegistry.from_mapping(SMALL_CATALOG)


@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def session(catalog, clock) -> ConfiguratorSession:
    return ConfiguratorSession(catalog=catalog, clock=clock, seed=42)
