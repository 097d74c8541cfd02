"""catalog — read-only template catalog keyed by sport."""

from jerseyforge.catalog.registry import (
    DEFAULT_SPORT,
    CatalogError,
    CatalogRegistry,
    get_catalog,
)

__all__ = ["DEFAULT_SPORT", "CatalogError", "CatalogRegistry", "get_catalog"]
