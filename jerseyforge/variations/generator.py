"""
Variation generator: random recolour / re-template proposals.

Generation is a pure function of (seed, palette, templates): the same
inputs always produce the same proposals.  "Reshuffle" is therefore just
advancing the seed.  Proposals are never applied implicitly; apply_variation
merges one into a design on request.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from jerseyforge.schemas.catalog import SportDefinition
from jerseyforge.schemas.design import DesignState
from jerseyforge.styling.zones import merge_zone_colors
from jerseyforge.zones.resolver import BODY_ZONE, TRIM_ZONE

logger = logging.getLogger(__name__)

# Secondary panels that take either the base or the trim colour.
ACCENT_ZONES: tuple[str, ...] = ("sides", "shoulders")


@dataclass(frozen=True)
class VariationProposal:
    """A candidate design change: a template id and partial zone styles."""

    template: str
    zones: dict[str, dict[str, Any]] = field(default_factory=dict)


class VariationGenerator:
    """
    Seeded proposal generator.

    Colours come from *palette* when it is non-empty, otherwise from
    *fallback_colors* (the full swatch catalog).
    """

    def __init__(self, fallback_colors: Sequence[str], seed: int = 0) -> None:
        if not fallback_colors:
            raise ValueError("fallback_colors must not be empty")
        self.fallback_colors = tuple(fallback_colors)
        self.seed = seed

    def reshuffle(self) -> int:
        """Advance the seed so the next generate() call yields new proposals."""
        self.seed += 1
        return self.seed

    def generate(
        self,
        sport: SportDefinition,
        palette: Sequence[str],
        current_template: str,
        count: int = 6,
    ) -> list[VariationProposal]:
        rng = random.Random(self.seed)
        colors = tuple(palette) or self.fallback_colors
        template_ids = [t.id for t in sport.templates]

        proposals: list[VariationProposal] = []
        for _ in range(count):
            base = rng.choice(colors)
            trim = rng.choice(colors)
            template = rng.choice(template_ids) if template_ids else current_template
            zones = {
                BODY_ZONE: {"color": base},
                TRIM_ZONE: {"color": trim},
            }
            for zone_id in ACCENT_ZONES:
                zones[zone_id] = {"color": base if rng.random() > 0.5 else trim}
            proposals.append(VariationProposal(template=template, zones=zones))
        return proposals


def apply_variation(
    design: DesignState, proposal: VariationProposal, sport: SportDefinition
) -> bool:
    """
    Merge *proposal*'s zone colours into *design* and switch its template.

    A template the sport no longer offers is skipped (the current template
    is kept) while the colours are still applied.  Returns True if the
    template was switched.
    """
    merge_zone_colors(design, proposal.zones)
    if not sport.has_template(proposal.template):
        logger.debug(
            "Variation template %r not in sport %r; keeping %r",
            proposal.template,
            sport.id,
            design.template,
        )
        return False
    design.template = proposal.template
    return True
