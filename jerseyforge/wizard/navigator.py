"""
Wizard navigator — the four authoring steps and their transitions.

    SETUP (1) → DESIGN (2) → COLORS (3) → IDENTITY (4)

COLORS walks the resolved zone list before it lets ``next()`` leave the
step.  IDENTITY is unreachable for shorts, which carry no lettering.
Committing to the cart is the terminal action from the last reachable step,
not a step of its own.

Canvas clicks are a side channel: selecting a zone jumps to COLORS with that
zone active; selecting text or a logo jumps to IDENTITY and picks the team or
player section.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, IntEnum

from jerseyforge.schemas.design import GarmentType
from jerseyforge.zones.resolver import ZoneRef, coerce_active_zone, next_zone


class WizardStep(IntEnum):
    SETUP = 1
    DESIGN = 2
    COLORS = 3
    IDENTITY = 4

    @property
    def label(self) -> str:
        return self.name.capitalize()


class IdentitySection(str, Enum):
    """Sub-tab of the IDENTITY step."""

    STYLE = "style"
    TEAM = "team"
    PLAYER = "player"


class WizardNavigator:
    """
    Step and active-zone state for one configurator session.

    Call :meth:`sync_zones` whenever the resolved zone list changes (template
    switch) so the active zone falls back to the first zone if it vanished.
    """

    def __init__(
        self,
        zones: Iterable[ZoneRef],
        garment_type: GarmentType = GarmentType.JERSEY,
        player_elements: Iterable[str] = (),
    ) -> None:
        self.step = WizardStep.SETUP
        self.zones: tuple[ZoneRef, ...] = tuple(zones)
        self.active_zone_id = self.zones[0].id
        self.identity_section = IdentitySection.TEAM
        self.garment_type = GarmentType(garment_type)
        self.player_elements = frozenset(player_elements)

    # ── Derived state ──────────────────────────────────────────────────────────

    @property
    def max_step(self) -> WizardStep:
        if self.garment_type == GarmentType.SHORTS:
            return WizardStep.COLORS
        return WizardStep.IDENTITY

    @property
    def is_last_step(self) -> bool:
        """True when the next forward action is a commit rather than a step."""
        return self.step >= self.max_step and not self._has_next_zone()

    @property
    def next_label(self) -> str:
        return "Next Zone" if self._has_next_zone() else "Next Step"

    @property
    def steps(self) -> tuple[WizardStep, ...]:
        return tuple(s for s in WizardStep if s <= self.max_step)

    def _has_next_zone(self) -> bool:
        return (
            self.step == WizardStep.COLORS
            and next_zone(self.active_zone_id, self.zones) is not None
        )

    # ── Synchronization ────────────────────────────────────────────────────────

    def sync_zones(self, zones: Iterable[ZoneRef]) -> str:
        """Replace the zone list and return the (possibly fallen back) active zone."""
        self.zones = tuple(zones)
        self.active_zone_id = coerce_active_zone(self.active_zone_id, self.zones)
        return self.active_zone_id

    def set_garment_type(self, garment_type: GarmentType) -> None:
        self.garment_type = GarmentType(garment_type)
        if self.step > self.max_step:
            self.step = self.max_step

    def set_active_zone(self, zone_id: str) -> str:
        self.active_zone_id = coerce_active_zone(zone_id, self.zones)
        return self.active_zone_id

    # ── Transitions ────────────────────────────────────────────────────────────

    def next(self) -> bool:
        """
        Advance one zone (inside COLORS) or one step.

        Returns False when already on the last reachable step with nothing
        left to advance through.
        """
        if self.step == WizardStep.COLORS:
            following = next_zone(self.active_zone_id, self.zones)
            if following is not None:
                self.active_zone_id = following
                return True
        if self.step < self.max_step:
            self.step = WizardStep(self.step + 1)
            return True
        return False

    def back(self) -> bool:
        if self.step == WizardStep.SETUP:
            return False
        self.step = WizardStep(self.step - 1)
        return True

    def go_to(self, step: int) -> WizardStep:
        """Jump directly to *step* (tab click), clamped to the reachable range."""
        self.step = WizardStep(max(WizardStep.SETUP, min(int(step), self.max_step)))
        return self.step

    def reset(self) -> None:
        self.step = WizardStep.SETUP
        self.active_zone_id = self.zones[0].id
        self.identity_section = IdentitySection.TEAM

    # ── Canvas side channel ────────────────────────────────────────────────────

    def select_zone(self, zone_id: str) -> str:
        self.step = WizardStep.COLORS
        return self.set_active_zone(zone_id)

    def select_text(self, element_id: str) -> IdentitySection:
        self.step = min(WizardStep.IDENTITY, self.max_step)
        self.identity_section = (
            IdentitySection.PLAYER
            if element_id in self.player_elements
            else IdentitySection.TEAM
        )
        return self.identity_section

    def select_logo(self, logo_id: str) -> IdentitySection:
        self.step = min(WizardStep.IDENTITY, self.max_step)
        self.identity_section = IdentitySection.TEAM
        return self.identity_section
