"""Small drawing helpers shared by the card renderer."""

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Mapping, Optional

from ark_infographic.models.creature import Sex
from ark_infographic.types import BLACK, WHITE, Color, StringLookup

STAT_NAME_KEYS = (
    "Health",
    "Stamina",
    "Torpidity",
    "Oxygen",
    "Food",
    "Water",
    "Temperature",
    "Weight",
    "Damage",
    "Speed",
    "Fortitude",
    "Crafting Speed",
)

ABBREVIATION_SUFFIX = "_Abb"


def fore_color(back_color: Color) -> Color:
    """Black or white, whichever contrasts with ``back_color``."""
    luminance = back_color.r * 0.3 + back_color.g * 0.59 + back_color.b * 0.11
    return WHITE if luminance < 110 else BLACK


def sex_symbol(sex: Sex) -> str:
    if sex == Sex.MALE:
        return "♂"
    if sex == Sex.FEMALE:
        return "♀"
    return "?"


def color_from_percent(percent: float, light: float = 0, blue: bool = False) -> Color:
    """Map 0-100 onto a red (0) to green (100) gradient.

    Args:
        percent: Position on the gradient.
        light: -1..1; positive values lighten towards white, negative darken.
        blue: Swap the red and blue channels.
    """
    g = math.trunc(percent * 5.1)
    r = 511 - g
    b = 0
    r = max(0, min(255, r))
    g = max(0, min(255, g))

    if light != 0:
        light = max(-1, min(1, light))
        if light > 0:
            r = math.trunc((255 - r) * light + r)
            g = math.trunc((255 - g) * light + g)
            b = math.trunc((255 - b) * light + b)
        else:
            light += 1
            r = math.trunc(r * light)
            g = math.trunc(g * light)

    if blue:
        return Color(b, g, r)
    return Color(r, g, b)


def stat_name(
    stat_index: int,
    abbreviation: bool,
    custom_stat_names: Optional[Mapping[str, str]],
    get_string: StringLookup,
) -> str:
    """Localized stat name or abbreviation, honoring species overrides."""
    if stat_index < 0 or stat_index >= len(STAT_NAME_KEYS):
        return ""

    key = STAT_NAME_KEYS[stat_index]
    if custom_stat_names is not None:
        key = custom_stat_names.get(str(int(stat_index)), key)
    return get_string(key + ABBREVIATION_SUFFIX if abbreviation else key)


def to_fixed(value: float, digits: int) -> str:
    """Fixed-point text with ties rounded up on the exact binary value.

    ``format(value, ".1f")`` rounds ties to even; this keeps the rounding
    used by the values shown in game.
    """
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
