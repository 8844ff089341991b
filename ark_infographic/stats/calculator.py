"""Stat value formula.

Converts a species' raw per-level coefficients plus a creature's levels into
the stat values shown in game. Two values are produced per stat:

* *breeding*: dom levels ignored, i.e. what offspring can inherit.
* *current*: dom levels applied.

Results are rounded to the stat's in-game precision and the rounded value is
the value returned, not only a display format.
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence

from pyrsistent import pvector
from pyrsistent.typing import PVector

from ark_infographic.models.species import SpeciesStats, StatRaw
from ark_infographic.stats.constants import STATS_COUNT, Stat, precision


@dataclass(frozen=True)
class StatComputeResult:
    """Computed values, 12 entries each.

    Attributes:
        values_breeding: Values with dom levels forced to 0.
        values_current: Values with dom levels applied.
    """

    values_breeding: PVector[float]
    values_current: PVector[float]


def round_half_away_from_zero(value: float, digits: int) -> float:
    """Round ``value`` to ``digits`` decimals, ties going away from zero."""
    factor = 10**digits
    return math.copysign(math.floor(abs(value) * factor + 0.5), value) / factor


def _level_at(levels: Optional[Sequence[int]], stat_index: int) -> int:
    if levels is None or stat_index >= len(levels):
        return 0
    return levels[stat_index] or 0


def dom_multiplier(
    raw: StatRaw, is_tamed: bool, taming_effectiveness: float
) -> float:
    """Taming effectiveness multiplier.

    A negative affinity is a flat penalty and does not scale with taming
    effectiveness.
    """
    if not is_tamed or taming_effectiveness < 0:
        return 1.0
    if raw.mult_affinity >= 0:
        return 1 + raw.mult_affinity * taming_effectiveness
    return 1 + raw.mult_affinity


def calculate_value(
    species_stats: SpeciesStats,
    raw: StatRaw,
    stat_index: int,
    level_wild: int,
    level_mutated: int,
    level_dom: int,
    is_tamed: bool,
    taming_effectiveness: float,
    imprinting_bonus: float,
) -> float:
    # Mutated levels are wild-tier increases and use the wild increment.
    wild_increase = level_wild * raw.inc_per_wild + level_mutated * raw.inc_per_wild
    dom_increase = level_dom * raw.inc_per_dom

    tbhm = (
        species_stats.tamed_base_health_multiplier
        if stat_index == Stat.HEALTH
        else 1
    )
    imprinting_multiplier = (
        1 + species_stats.stat_imprint_multipliers[stat_index] * imprinting_bonus
        if imprinting_bonus > 0
        else 1
    )
    add = raw.add_when_tamed if is_tamed else 0
    dom_mult = dom_multiplier(raw, is_tamed, taming_effectiveness)

    if uses_percentage_increase(species_stats, stat_index):
        result = (
            (raw.base * (1 + wild_increase) * tbhm * imprinting_multiplier + add)
            * dom_mult
            * (1 + dom_increase)
        )
    else:
        result = (
            (raw.base + wild_increase) * tbhm * imprinting_multiplier + add
        ) * dom_mult + dom_increase

    if result <= 0:
        return 0.0
    return round_half_away_from_zero(result, precision(stat_index))


def uses_percentage_increase(species_stats: SpeciesStats, stat_index: int) -> bool:
    flags = species_stats.increase_stat_as_percentage
    if flags is None or stat_index >= len(flags) or flags[stat_index] is None:
        return True
    return bool(flags[stat_index])


def compute_stat_values(
    species_stats: SpeciesStats,
    levels_wild: Sequence[int],
    levels_dom: Sequence[int],
    levels_mutated: Optional[Sequence[int]],
    is_tamed: bool,
    taming_effectiveness: float,
    imprinting_bonus: float,
) -> StatComputeResult:
    """Compute breeding and current values for all 12 stats.

    Args:
        species_stats: Raw species coefficients.
        levels_wild: Wild levels per stat.
        levels_dom: Dom levels per stat.
        levels_mutated: Mutated levels per stat, ``None`` for all zero.
        is_tamed: Whether tamed-only bonuses apply.
        taming_effectiveness: 0-1, negative when unknown.
        imprinting_bonus: 0-1.

    Returns:
        StatComputeResult: Stats without raw coefficients stay at 0.
    """
    values_breeding: List[float] = [0.0] * STATS_COUNT
    values_current: List[float] = [0.0] * STATS_COUNT

    for stat_index in range(STATS_COUNT):
        raw = species_stats.full_stats_raw[stat_index]
        if raw is None:
            continue

        level_wild = _level_at(levels_wild, stat_index)
        level_dom = _level_at(levels_dom, stat_index)
        level_mutated = _level_at(levels_mutated, stat_index)

        values_breeding[stat_index] = calculate_value(
            species_stats,
            raw,
            stat_index,
            level_wild,
            level_mutated,
            0,
            is_tamed,
            taming_effectiveness,
            imprinting_bonus,
        )
        values_current[stat_index] = calculate_value(
            species_stats,
            raw,
            stat_index,
            level_wild,
            level_mutated,
            level_dom,
            is_tamed,
            taming_effectiveness,
            imprinting_bonus,
        )

    return StatComputeResult(
        values_breeding=pvector(values_breeding),
        values_current=pvector(values_current),
    )
