"""variations — seeded recolour/re-template proposals."""

from jerseyforge.variations.generator import (
    ACCENT_ZONES,
    VariationGenerator,
    VariationProposal,
    apply_variation,
)

__all__ = ["ACCENT_ZONES", "VariationGenerator", "VariationProposal", "apply_variation"]
