"""Stat slot indices and display rules.

Every species exposes the same twelve stat slots in a fixed order. The last
four slots are multipliers shown as percentages; their values carry three
decimal digits of precision instead of one.

``DISPLAY_ORDER`` lists the slots in the order rows are drawn on the
infographic. Torpidity is placed last and skipped by the row renderer, but is
still computed because its wild level drives the level column width.
"""

from enum import IntEnum
from typing import Tuple


STATS_COUNT = 12
COLOR_REGION_COUNT = 6


class Stat(IntEnum):
    """Stat slot indices."""

    HEALTH = 0
    STAMINA = 1
    TORPIDITY = 2
    OXYGEN = 3
    FOOD = 4
    WATER = 5
    TEMPERATURE = 6
    WEIGHT = 7
    MELEE_DAMAGE_MULTIPLIER = 8
    SPEED_MULTIPLIER = 9
    TEMPERATURE_FORTITUDE = 10
    CRAFTING_SPEED_MULTIPLIER = 11


DISPLAY_ORDER: Tuple[Stat, ...] = (
    Stat.HEALTH,
    Stat.STAMINA,
    Stat.OXYGEN,
    Stat.FOOD,
    Stat.WATER,
    Stat.TEMPERATURE,
    Stat.WEIGHT,
    Stat.MELEE_DAMAGE_MULTIPLIER,
    Stat.SPEED_MULTIPLIER,
    Stat.TEMPERATURE_FORTITUDE,
    Stat.CRAFTING_SPEED_MULTIPLIER,
    Stat.TORPIDITY,
)

PERCENTAGE_STATS = frozenset(
    [
        Stat.MELEE_DAMAGE_MULTIPLIER,
        Stat.SPEED_MULTIPLIER,
        Stat.TEMPERATURE_FORTITUDE,
        Stat.CRAFTING_SPEED_MULTIPLIER,
    ]
)


def is_percentage(stat_index: int) -> bool:
    """Return True for the multiplier stats (indices 8-11)."""
    return stat_index in PERCENTAGE_STATS


def precision(stat_index: int) -> int:
    """Decimal digits kept for a stat value: 3 for percentage stats, else 1."""
    return 3 if is_percentage(stat_index) else 1
