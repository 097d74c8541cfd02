"""
ConfiguratorSession — the live design plus every piece of state derived from it.

One session owns exactly one DesignState and is driven synchronously by UI
events.  It wires the components together:

  catalog + template  → resolve_zones()        → wizard.sync_zones()
  zone / colour edits → styling.zones          (+ RecentColors)
  text edits          → styling.text           (TextGroupIndex fan-out)
  text deletion       → TextDeletionHistory    (timed single-slot undo)
  logo edits          → styling.logos          (mirror re-derivation)
  variations          → VariationGenerator     → apply_variation()
  canvas events       → classify_id()          → wizard side channel / edits
  draw_list()         → composition.compose()
  commit()            → make_cart_item()

Recoverable problems (stale ids, empty undo, stale variation template) are
no-ops reported through boolean or None return values, never exceptions.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from jerseyforge.catalog.registry import CatalogRegistry, get_catalog
from jerseyforge.composition.draw_list import DrawList, compose
from jerseyforge.composition.interaction import ElementKind, classify_id
from jerseyforge.config.settings import ConfiguratorSettings, get_settings
from jerseyforge.configurator.commit import (
    CommitAction,
    default_design,
    make_cart_item,
    reset_content,
)
from jerseyforge.history.palette import RecentColors
from jerseyforge.history.undo import Clock, DeletedText, TextDeletionHistory
from jerseyforge.schemas.catalog import SportDefinition, Template
from jerseyforge.schemas.design import (
    CartItem,
    DesignState,
    GarmentType,
    LogoPlacement,
    Position,
    RosterEntry,
    TextElement,
    ViewSide,
    ZoneStyle,
)
from jerseyforge.styling import logos as logo_ops
from jerseyforge.styling import text as text_ops
from jerseyforge.styling.text import TextGroupIndex
from jerseyforge.styling.zones import ColorTarget, apply_color, update_zone
from jerseyforge.variations.generator import (
    VariationGenerator,
    VariationProposal,
    apply_variation,
)
from jerseyforge.wizard.navigator import IdentitySection, WizardNavigator, WizardStep
from jerseyforge.zones.resolver import ZoneRef, resolve_zones

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommitResult:
    """Outcome of :meth:`ConfiguratorSession.commit`.

    Attributes:
        item: The cart item produced (new or updated).
        is_update: True when an existing cart entry was being edited.
        action: The action the user chose.
    """

    item: CartItem
    is_update: bool
    action: CommitAction


class ConfiguratorSession:
    """
    Design State Store for one configurator instance.

    Parameters
    ----------
    catalog:
        Read-only template catalog; defaults to the packaged catalog.
    settings:
        Configurator defaults; defaults to the packaged settings.
    clock:
        Time source for the undo window; defaults to monotonic time.
    seed:
        Initial variation seed.
    """

    def __init__(
        self,
        catalog: CatalogRegistry | None = None,
        settings: ConfiguratorSettings | None = None,
        clock: Clock | None = None,
        seed: int = 0,
    ) -> None:
        self.catalog = catalog or get_catalog()
        self.settings = settings or get_settings()
        self.design: DesignState = default_design(self.settings)
        self.palette = RecentColors(self.settings.palette_seed, self.settings.palette_capacity)
        self.deletions = TextDeletionHistory(self.settings.undo_window_ms, clock)
        self.text_groups = TextGroupIndex(self.settings.text_groups)
        self.variations = VariationGenerator([s.hex for s in self.settings.swatches], seed)
        self.view = ViewSide.FRONT
        self.selected_id: str | None = None
        self.editing_item_id: str | None = None

        self._normalize_setup()
        self.wizard = WizardNavigator(
            self.zones, self.design.garment_type, self.settings.player_elements
        )

    # ── Derived state ──────────────────────────────────────────────────────────

    @property
    def sport(self) -> SportDefinition:
        return self.catalog.resolve_sport(self.design.sport)

    @property
    def template(self) -> Template:
        return self.sport.resolve_template(self.design.template)

    @property
    def zones(self) -> tuple[ZoneRef, ...]:
        return resolve_zones(self.template)

    @property
    def active_zone_id(self) -> str:
        return self.wizard.active_zone_id

    @property
    def canvas_width(self) -> float:
        return self.settings.canvas_width

    def _normalize_setup(self) -> None:
        """Point sport, cut and template at entries that exist in the catalog."""
        sport = self.sport
        self.design.sport = sport.id
        cut = sport.resolve_cut(self.design.cut)
        if cut is not None:
            self.design.cut = cut.slug
        if not sport.has_template(self.design.template):
            self.design.template = sport.templates[0].id

    def _sync_zones(self) -> None:
        self.wizard.sync_zones(self.zones)

    # ── Setup step ─────────────────────────────────────────────────────────────

    def select_sport(self, sport_id: str) -> bool:
        if sport_id not in self.catalog.sports:
            logger.debug("Ignoring unknown sport %r", sport_id)
            return False
        self.design.sport = sport_id
        self._normalize_setup()
        self._sync_zones()
        return True

    def select_cut(self, slug: str) -> bool:
        if slug not in self.sport.cuts:
            return False
        self.design.cut = slug
        return True

    def select_garment_type(self, garment_type: GarmentType) -> None:
        self.design.garment_type = GarmentType(garment_type)
        self.wizard.set_garment_type(self.design.garment_type)

    def select_template(self, template_id: str) -> bool:
        if not self.sport.has_template(template_id):
            logger.debug("Ignoring unknown template %r", template_id)
            return False
        self.design.template = template_id
        self._sync_zones()
        return True

    def set_view(self, view: ViewSide) -> None:
        self.view = ViewSide(view)

    # ── Zones and palette ──────────────────────────────────────────────────────

    def set_active_zone(self, zone_id: str) -> str:
        return self.wizard.set_active_zone(zone_id)

    def update_zone(self, zone_id: str, **updates: Any) -> ZoneStyle:
        return update_zone(self.design, zone_id, updates)

    def apply_color(
        self, color: str, target: ColorTarget = ColorTarget.BASE, zone_id: str | None = None
    ) -> ZoneStyle:
        """Apply *color* to the active zone (or *zone_id*) and record it as recent."""
        return apply_color(
            self.design, self.palette, zone_id or self.active_zone_id, color, target
        )

    def add_palette_color(self, color: str) -> bool:
        return self.palette.add(color)

    def remove_palette_color(self, color: str) -> bool:
        return self.palette.remove(color)

    # ── Text ───────────────────────────────────────────────────────────────────

    def set_text_groups(self, groups: Mapping[str, Iterable[str]]) -> None:
        self.text_groups = TextGroupIndex(groups)

    def update_text(self, element_id: str, field: str, value: Any) -> bool:
        return text_ops.update_text(
            self.design, self.text_groups, element_id, field, value, self.settings.limits
        )

    def add_text(self, view: ViewSide) -> TextElement:
        return text_ops.add_text(self.design, view, self.settings)

    def delete_text(self, element_id: str) -> bool:
        deleted = self.deletions.delete(self.design, element_id)
        if deleted and self.selected_id == element_id:
            self.selected_id = None
        return deleted

    def undo_delete(self) -> bool:
        return self.deletions.undo(self.design)

    @property
    def pending_undo(self) -> DeletedText | None:
        return self.deletions.pending

    # ── Logos ──────────────────────────────────────────────────────────────────

    def add_logo(self, url: str, view: ViewSide) -> LogoPlacement:
        return logo_ops.add_logo(self.design, url, view, self.settings)

    def logo_upload_callback(self, view: ViewSide) -> Callable[[str], LogoPlacement]:
        """
        Return the completion callback for an asynchronous image read.

        Each completion appends its own logo, so racing uploads all land.
        """

        def on_loaded(url: str) -> LogoPlacement:
            return self.add_logo(url, view)

        return on_loaded

    def remove_logo(self, logo_id: str) -> bool:
        removed = logo_ops.remove_logo(self.design, logo_id)
        if removed and self.selected_id is not None and logo_ops.is_logo_id(self.selected_id):
            if self.design.find_logo(self.selected_id) is None:
                self.selected_id = None
        return removed

    def toggle_mirror(self, logo_id: str) -> LogoPlacement | None:
        return logo_ops.toggle_mirror(self.design, logo_id, self.canvas_width)

    def update_logo(self, logo_id: str, field: str, value: float) -> bool:
        return logo_ops.update_logo(
            self.design, logo_id, field, value, self.settings.limits, self.canvas_width
        )

    def update_logo_position(self, logo_id: str, position: Position | Mapping[str, Any]) -> bool:
        return logo_ops.update_logo_position(self.design, logo_id, position, self.canvas_width)

    # ── Variations ─────────────────────────────────────────────────────────────

    def generate_variations(self, count: int | None = None) -> list[VariationProposal]:
        return self.variations.generate(
            self.sport,
            self.palette.colors,
            self.design.template,
            count if count is not None else self.settings.variation_count,
        )

    def reshuffle_variations(self) -> list[VariationProposal]:
        self.variations.reshuffle()
        return self.generate_variations()

    def apply_variation(self, proposal: VariationProposal) -> bool:
        switched = apply_variation(self.design, proposal, self.sport)
        self._sync_zones()
        return switched

    # ── Wizard ─────────────────────────────────────────────────────────────────

    @property
    def step(self) -> WizardStep:
        return self.wizard.step

    def next(self) -> bool:
        return self.wizard.next()

    def back(self) -> bool:
        return self.wizard.back()

    def go_to(self, step: int) -> WizardStep:
        return self.wizard.go_to(step)

    # ── Canvas interaction ─────────────────────────────────────────────────────

    def on_select(self, item_id: str) -> ElementKind:
        """Route a canvas click: select the item and move the wizard to its step."""
        kind = classify_id(self.design, self.zones, item_id)
        if kind == ElementKind.UNKNOWN:
            logger.debug("Ignoring selection of unknown id %r", item_id)
            return kind

        if kind == ElementKind.ZONE:
            # Stale zone keys select the fallback zone.
            self.selected_id = self.wizard.select_zone(item_id)
        elif kind == ElementKind.TEXT:
            self.selected_id = item_id
            self.wizard.select_text(item_id)
        else:
            self.selected_id = item_id
            self.wizard.select_logo(item_id)
        return kind

    def clear_selection(self) -> None:
        self.selected_id = None

    @property
    def identity_section(self) -> IdentitySection:
        return self.wizard.identity_section

    def on_position_change(self, item_id: str, position: Position | Mapping[str, Any]) -> bool:
        """Route a finished drag to the logo or text positioning logic."""
        kind = classify_id(self.design, self.zones, item_id)
        if kind == ElementKind.LOGO:
            return self.update_logo_position(item_id, position)
        if kind == ElementKind.TEXT:
            return self.update_text(item_id, "position", position)
        logger.debug("Ignoring drag of non-draggable id %r", item_id)
        return False

    # ── Composition ────────────────────────────────────────────────────────────

    def draw_list(self, view: ViewSide | None = None) -> DrawList:
        return compose(
            self.design,
            self.sport,
            view or self.view,
            self.settings.canvas_width,
            self.settings.canvas_height,
        )

    # ── Cart boundary ──────────────────────────────────────────────────────────

    def load_cart_item(self, item: CartItem) -> None:
        """Replace the live design with a copy of *item*'s and edit it in place of *item*."""
        self.design = item.design.snapshot()
        self.editing_item_id = item.id
        self.selected_id = None
        self.deletions.clear()
        self._normalize_setup()
        self.wizard.set_garment_type(self.design.garment_type)
        self._sync_zones()

    def commit(
        self,
        action: CommitAction = CommitAction.CHECKOUT,
        roster: Iterable[RosterEntry] | None = None,
    ) -> CommitResult:
        """
        Snapshot the design into a cart item.

        When editing an existing entry the item reuses its id.  A new item
        committed with ADD_ANOTHER resets zones, text and logos to defaults
        (setup selections are kept) and returns the wizard to SETUP.
        """
        action = CommitAction(action)
        is_update = self.editing_item_id is not None
        item = make_cart_item(
            self.design,
            item_id=self.editing_item_id,
            quantity=self.settings.commit_quantity,
            price=self.settings.commit_price,
            roster=roster,
        )
        logger.info("Committed cart item %s (update=%s)", item.id, is_update)

        if is_update:
            self.editing_item_id = None
        elif action == CommitAction.ADD_ANOTHER:
            reset_content(self.design, self.settings)
            self.selected_id = None
            self.deletions.clear()
            self.wizard.reset()
        return CommitResult(item=item, is_update=is_update, action=action)
