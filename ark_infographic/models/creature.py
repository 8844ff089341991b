"""Creature snapshot rendered on the card."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional, Sequence

from pyrsistent import pvector

from ark_infographic.stats.constants import COLOR_REGION_COUNT, STATS_COUNT


class Sex(IntEnum):
    UNKNOWN = 0
    MALE = 1
    FEMALE = 2


def _zeros(n: int) -> Sequence[int]:
    return pvector([0] * n)


@dataclass(frozen=True)
class Creature:
    """Read-only creature data.

    Level arrays have 12 entries indexed by :class:`~ark_infographic.stats.constants.Stat`.
    A negative wild level means the level was never recorded and is drawn as
    ``?``. ``values_breeding`` / ``values_current`` are normally produced by
    :func:`ark_infographic.stats.calculator.compute_stat_values`.

    Attributes:
        species_name: Species display name.
        creature_name: Individual name.
        sex: Creature sex.
        is_neutered: Neutered or spayed.
        is_mutagen_applied: Mutagen was used on the creature.
        is_bred: Hatched or born rather than tamed.
        levels_wild: Wild levels per stat.
        levels_dom: Domesticated levels per stat.
        levels_mutated: Mutated levels per stat, ``None`` when unknown.
        values_breeding: Stat values with dom levels ignored.
        values_current: Stat values with dom levels applied.
        colors: Color id per color region.
        taming_effectiveness: 0-1, negative when unknown.
        imprinting_bonus: 0-1.
        mutations: Mutation counter.
        generation: Breeding generation.
        level: Current total level.
        level_hatched: Level at taming or hatching.
    """

    species_name: str
    creature_name: str = ""
    sex: Sex = Sex.UNKNOWN
    is_neutered: bool = False
    is_mutagen_applied: bool = False
    is_bred: bool = False
    levels_wild: Sequence[int] = field(default_factory=lambda: _zeros(STATS_COUNT))
    levels_dom: Sequence[int] = field(default_factory=lambda: _zeros(STATS_COUNT))
    levels_mutated: Optional[Sequence[int]] = None
    values_breeding: Sequence[float] = field(
        default_factory=lambda: _zeros(STATS_COUNT)
    )
    values_current: Sequence[float] = field(
        default_factory=lambda: _zeros(STATS_COUNT)
    )
    colors: Sequence[int] = field(default_factory=lambda: _zeros(COLOR_REGION_COUNT))
    taming_effectiveness: float = -1.0
    imprinting_bonus: float = 0.0
    mutations: int = 0
    generation: int = 0
    level: int = 1
    level_hatched: int = 1
