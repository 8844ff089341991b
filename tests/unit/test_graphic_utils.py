# tests/unit/test_graphic_utils.py

import pytest
from pyrsistent import pmap

from ark_infographic.models import ArkColor, Sex, linear_to_srgb_component
from ark_infographic.rendering.graphic_utils import (
    color_from_percent,
    fore_color,
    sex_symbol,
    stat_name,
    to_fixed,
)
from ark_infographic.stats.constants import Stat
from ark_infographic.strings import default_get_string, string_lookup
from ark_infographic.types import BLACK, WHITE, Color


@pytest.mark.parametrize(
    "percent, light, blue, expected",
    [
        (0, 0, False, Color(255, 0, 0)),
        # 100 * 5.1 is 509.99999999999994 in floating point and truncates to 509
        (100, 0, False, Color(2, 255, 0)),
        (0, -0.5, False, Color(127, 0, 0)),
        (0, 0, True, Color(0, 0, 255)),
        (0, 1, False, WHITE),
        (0, 3, False, WHITE),
        (100, -1, False, Color(0, 0, 0)),
    ],
)
def test_color_from_percent(
    percent: float, light: float, blue: bool, expected: Color
) -> None:
    assert color_from_percent(percent, light, blue) == expected


def test_color_from_percent_clamps_out_of_range() -> None:
    assert color_from_percent(-20) == Color(255, 0, 0)
    assert color_from_percent(250) == Color(0, 255, 0)


def test_fore_color_contrasts_background() -> None:
    assert fore_color(BLACK) == WHITE
    assert fore_color(WHITE) == BLACK
    # luminance 60 + 59 = 119
    assert fore_color(Color(200, 100, 0)) == BLACK
    assert fore_color(Color(0, 0, 255)) == WHITE


def test_sex_symbol() -> None:
    assert sex_symbol(Sex.MALE) == "♂"
    assert sex_symbol(Sex.FEMALE) == "♀"
    assert sex_symbol(Sex.UNKNOWN) == "?"


def test_stat_name_defaults() -> None:
    assert stat_name(Stat.HEALTH, True, None, default_get_string) == "HP"
    assert stat_name(Stat.HEALTH, False, None, default_get_string) == "Health"
    assert stat_name(Stat.CRAFTING_SPEED_MULTIPLIER, True, None, default_get_string) == "Cr"


def test_stat_name_species_override() -> None:
    custom = {"8": "Charge"}
    lookup = string_lookup(pmap({"Charge_Abb": "Ch"}))
    assert stat_name(Stat.MELEE_DAMAGE_MULTIPLIER, True, custom, lookup) == "Ch"
    assert stat_name(Stat.MELEE_DAMAGE_MULTIPLIER, False, custom, lookup) == "Charge"
    # other stats keep their default key
    assert stat_name(Stat.HEALTH, True, custom, lookup) == "HP"


def test_stat_name_out_of_range_is_empty() -> None:
    assert stat_name(12, True, None, default_get_string) == ""
    assert stat_name(-1, False, None, default_get_string) == ""


@pytest.mark.parametrize(
    "value, digits, expected",
    [
        (0.25, 1, "0.3"),
        (2, 1, "2.0"),
        (125.0, 1, "125.0"),
        (1.005, 2, "1.00"),
        (0.0, 1, "0.0"),
        (1234.56, 1, "1234.6"),
    ],
)
def test_to_fixed(value: float, digits: int, expected: str) -> None:
    assert to_fixed(value, digits) == expected


@pytest.mark.parametrize(
    "linear, expected",
    [
        (1.0, 255),
        (0.0, 0),
        (-0.3, 0),
        (2.0, 255),
        (0.5, 186),
    ],
)
def test_linear_to_srgb_component(linear: float, expected: int) -> None:
    assert linear_to_srgb_component(linear) == expected


def test_ark_color_to_color() -> None:
    color = ArkColor(id=12, name="Dino Dark Red", linear_rgba=(0.5, 0.0, 1.0, 1.0))
    assert color.to_color() == Color(186, 0, 255)
    assert not color.is_dye
