"""config — configurator defaults and limits."""

from jerseyforge.config.settings import (
    ConfiguratorSettings,
    FontOption,
    Limits,
    Range,
    Swatch,
    get_settings,
    load_settings,
)

__all__ = [
    "ConfiguratorSettings",
    "FontOption",
    "Limits",
    "Range",
    "Swatch",
    "get_settings",
    "load_settings",
]
