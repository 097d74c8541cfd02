"""configurator — the design state store and cart commit boundary."""

from jerseyforge.configurator.commit import (
    CommitAction,
    default_design,
    make_cart_item,
    reset_content,
)
from jerseyforge.configurator.session import CommitResult, ConfiguratorSession

__all__ = [
    "CommitAction",
    "CommitResult",
    "ConfiguratorSession",
    "default_design",
    "make_cart_item",
    "reset_content",
]
