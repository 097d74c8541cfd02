"""
Design defaults and the cart commit boundary.
"""

from __future__ import annotations

import time
import uuid
from collections.abc import Iterable
from enum import Enum

from jerseyforge.config.settings import ConfiguratorSettings
from jerseyforge.schemas.design import CartItem, DesignState, GarmentType, RosterEntry


class CommitAction(str, Enum):
    """What the user chose after confirming "add to bag"."""

    ADD_ANOTHER = "add_another"  # commit, then start a fresh design
    CHECKOUT = "checkout"


def default_design(settings: ConfiguratorSettings) -> DesignState:
    """Return a fresh design built from *settings*' defaults."""
    defaults = settings.default_design
    return DesignState(
        sport=defaults["sport"],
        cut=defaults["cut"],
        garment_type=GarmentType(defaults["garment_type"]),
        template=defaults["template"],
        zones=settings.fresh_zones(),
        text_elements=settings.default_text_elements(),
        logos=[],
    )


def reset_content(design: DesignState, settings: ConfiguratorSettings) -> None:
    """Restore zones, text and logos to defaults, keeping setup selections."""
    design.zones = settings.fresh_zones()
    design.text_elements = settings.default_text_elements()
    design.logos = []


def new_cart_id() -> str:
    return uuid.uuid4().hex[:9]


def make_cart_item(
    design: DesignState,
    item_id: str | None = None,
    quantity: int = 1,
    price: float = 65.0,
    roster: Iterable[RosterEntry] | None = None,
    now_ms: int | None = None,
) -> CartItem:
    """
    Snapshot *design* into a CartItem.

    A new id is generated unless *item_id* is given (updating an existing
    cart entry).  The snapshot shares no mutable state with *design*.
    """
    return CartItem(
        id=item_id or new_cart_id(),
        design=design.snapshot(),
        quantity=quantity,
        price=price,
        timestamp=now_ms if now_ms is not None else int(time.time() * 1000),
        roster=tuple(roster) if roster is not None else None,
    )
