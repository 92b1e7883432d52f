"""Free space color scale."""

from __future__ import annotations

import math
from enum import Enum


class FreeSpaceTier(Enum):
    """Severity tiers, valued by their hex swatch."""

    NONE = "#5C5C5C"
    LIMITED = "#7F0304"
    MEDIUM = "#1DAA8C"
    HIGHEST = "#006A39"

    @property
    def hex(self) -> str:
        return self.value


def color_for_percentage(percentage: float) -> FreeSpaceTier:
    """Return the tier for an occupancy ratio between 0 and 1.

    The ratio is scaled to a whole percent with ``floor``. Exactly 100 percent
    falls through to ``NONE`` just like zero and out-of-range input.
    """
    scaled = percentage * 100
    if not math.isfinite(scaled):
        return FreeSpaceTier.NONE
    normalized = math.floor(scaled)
    if 85 <= normalized <= 99:
        return FreeSpaceTier.LIMITED
    if 40 <= normalized <= 84:
        return FreeSpaceTier.MEDIUM
    if 1 <= normalized <= 39:
        return FreeSpaceTier.HIGHEST
    return FreeSpaceTier.NONE
