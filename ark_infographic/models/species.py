"""Species-level data consumed by the stat formula and the card renderer.

``SpeciesStats`` carries the raw per-level coefficients read from the game's
values file. ``SpeciesInfo`` carries presentation data: which stats and color
regions the species actually uses, and optional custom names for them.
"""

from dataclasses import dataclass, field
from typing import Mapping, NamedTuple, Optional, Sequence

from pyrsistent import pvector

from ark_infographic.stats.constants import COLOR_REGION_COUNT, STATS_COUNT


class StatRaw(NamedTuple):
    """Raw coefficients of one stat slot, in values-file order."""

    base: float
    inc_per_wild: float
    inc_per_dom: float
    add_when_tamed: float
    mult_affinity: float


@dataclass(frozen=True)
class SpeciesStats:
    """Raw stat data of a species.

    Attributes:
        full_stats_raw: 12 entries; ``None`` marks a stat the species does not use.
        tamed_base_health_multiplier: Extra multiplier applied to health only.
        stat_imprint_multipliers: Per-stat weight of the imprinting bonus.
        increase_stat_as_percentage: Per-stat flag selecting the multiplicative
            (``True``) or additive (``False``) level formula. ``None`` means
            every stat is multiplicative.
    """

    full_stats_raw: Sequence[Optional[StatRaw]]
    tamed_base_health_multiplier: float = 1.0
    stat_imprint_multipliers: Sequence[float] = field(
        default_factory=lambda: pvector([0.0] * STATS_COUNT)
    )
    increase_stat_as_percentage: Optional[Sequence[bool]] = None


@dataclass(frozen=True)
class SpeciesInfo:
    """Presentation data of a species.

    Attributes:
        used_stats: 12 flags; unused stats get no row on the card.
        enabled_color_regions: 6 flags; disabled regions get no swatch.
        color_region_names: 6 optional region names shown next to swatches.
        stat_names: Optional mapping of stat index (as string) to a custom
            string key, e.g. ``{"8": "Charge Regeneration"}``.
    """

    used_stats: Sequence[bool] = field(
        default_factory=lambda: pvector([True] * STATS_COUNT)
    )
    enabled_color_regions: Sequence[bool] = field(
        default_factory=lambda: pvector([True] * COLOR_REGION_COUNT)
    )
    color_region_names: Sequence[Optional[str]] = field(
        default_factory=lambda: pvector([None] * COLOR_REGION_COUNT)
    )
    stat_names: Optional[Mapping[str, str]] = None
