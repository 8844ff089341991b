# tests/unit/test_stat_calculator.py

from typing import Dict, Optional

import pytest

from ark_infographic.models import StatRaw
from ark_infographic.stats.calculator import (
    compute_stat_values,
    round_half_away_from_zero,
)
from ark_infographic.stats.constants import STATS_COUNT, Stat, precision
from tests.test_utils import levels, make_species_stats


def compute_one(
    stat: int,
    raw: StatRaw,
    *,
    wild: int = 0,
    dom: int = 0,
    mutated: Optional[int] = None,
    is_tamed: bool = False,
    te: float = -1.0,
    imprinting: float = 0.0,
    **species_kwargs: object,
) -> tuple[float, float]:
    species = make_species_stats({stat: raw}, **species_kwargs)  # type: ignore[arg-type]
    result = compute_stat_values(
        species,
        levels({stat: wild}),
        levels({stat: dom}),
        levels({stat: mutated}) if mutated is not None else None,
        is_tamed,
        te,
        imprinting,
    )
    return result.values_breeding[stat], result.values_current[stat]


@pytest.mark.parametrize(
    "stat, raw, kwargs, expected_breeding, expected_current",
    [
        # wild levels scale the base value
        (Stat.STAMINA, StatRaw(100, 0.1, 0.05, 0, 0), {"wild": 10}, 200.0, 200.0),
        # dom levels only affect the current value
        (
            Stat.STAMINA,
            StatRaw(100, 0.1, 0.05, 0, 0),
            {"wild": 10, "dom": 4, "is_tamed": True, "te": 1.0},
            200.0,
            240.0,
        ),
        # add when tamed
        (Stat.FOOD, StatRaw(100, 0, 0, 50, 0), {}, 100.0, 100.0),
        (Stat.FOOD, StatRaw(100, 0, 0, 50, 0), {"is_tamed": True}, 150.0, 150.0),
        # positive affinity scales with taming effectiveness
        (
            Stat.WEIGHT,
            StatRaw(100, 0, 0, 0, 0.5),
            {"is_tamed": True, "te": 0.8},
            140.0,
            140.0,
        ),
        # unknown taming effectiveness disables the affinity multiplier
        (
            Stat.WEIGHT,
            StatRaw(100, 0, 0, 0, 0.5),
            {"is_tamed": True, "te": -1.0},
            100.0,
            100.0,
        ),
        # mutated levels count like wild levels
        (
            Stat.STAMINA,
            StatRaw(100, 0.1, 0, 0, 0),
            {"wild": 5, "mutated": 5},
            200.0,
            200.0,
        ),
        # results at or below zero clamp to zero
        (Stat.OXYGEN, StatRaw(-10, 0, 0, 0, 0), {}, 0.0, 0.0),
        # tie rounds away from zero at one decimal
        (Stat.HEALTH, StatRaw(1.25, 0, 0, 0, 0), {}, 1.3, 1.3),
        # percentage stats keep three decimals
        (
            Stat.SPEED_MULTIPLIER,
            StatRaw(1, 0, 0.01, 0, 0),
            {"dom": 5, "is_tamed": True},
            1.0,
            1.05,
        ),
    ],
)
def test_stat_formula(
    stat: int,
    raw: StatRaw,
    kwargs: Dict[str, object],
    expected_breeding: float,
    expected_current: float,
) -> None:
    breeding, current = compute_one(stat, raw, **kwargs)  # type: ignore[arg-type]
    assert breeding == pytest.approx(expected_breeding)
    assert current == pytest.approx(expected_current)


def test_tamed_base_health_multiplier_only_applies_to_health() -> None:
    raw = StatRaw(100, 0.1, 0, 0, 0)
    health, _ = compute_one(
        Stat.HEALTH, raw, wild=10, tamed_base_health_multiplier=0.5
    )
    stamina, _ = compute_one(
        Stat.STAMINA, raw, wild=10, tamed_base_health_multiplier=0.5
    )
    assert health == pytest.approx(100.0)
    assert stamina == pytest.approx(200.0)


def test_imprinting_bonus() -> None:
    raw = StatRaw(100, 0, 0, 0, 0)
    imprinted, _ = compute_one(Stat.HEALTH, raw, imprinting=1.0, imprint={0: 0.2})
    not_imprinted, _ = compute_one(Stat.HEALTH, raw, imprinting=0.0, imprint={0: 0.2})
    assert imprinted == pytest.approx(120.0)
    assert not_imprinted == pytest.approx(100.0)


def test_additive_increase_mode() -> None:
    raw = StatRaw(10, 2, 1, 0, 0)
    breeding, current = compute_one(
        Stat.STAMINA,
        raw,
        wild=5,
        dom=3,
        is_tamed=True,
        percentage={Stat.STAMINA: False},
    )
    assert breeding == pytest.approx(20.0)
    assert current == pytest.approx(23.0)


@pytest.mark.parametrize("te", [0.0, 0.25, 0.5, 0.99, 1.0])
def test_negative_affinity_is_flat_penalty(te: float) -> None:
    _, current = compute_one(
        Stat.MELEE_DAMAGE_MULTIPLIER,
        StatRaw(1, 0.05, 0.017, 0.7, -0.2),
        wild=10,
        is_tamed=True,
        te=te,
    )
    reference, _ = compute_one(
        Stat.MELEE_DAMAGE_MULTIPLIER,
        StatRaw(1, 0.05, 0.017, 0.7, -0.2),
        wild=10,
        is_tamed=True,
        te=0.5,
    )
    assert current == reference


def test_current_equals_breeding_without_dom_levels() -> None:
    raws = {i: StatRaw(100 + i, 0.2, 0.1, 0.5, 0.3) for i in range(STATS_COUNT)}
    result = compute_stat_values(
        make_species_stats(raws),
        levels(default=25),
        levels(),
        levels({3: 4}),
        True,
        0.87,
        0.4,
    )
    assert list(result.values_current) == list(result.values_breeding)


def test_missing_coefficients_leave_zero() -> None:
    result = compute_stat_values(
        make_species_stats({Stat.HEALTH: StatRaw(100, 0.2, 0.1, 0, 0)}),
        levels(default=10),
        levels(default=10),
        None,
        True,
        1.0,
        0.0,
    )
    assert result.values_breeding[Stat.HEALTH] > 0
    assert all(v == 0 for v in list(result.values_breeding)[1:])
    assert all(v == 0 for v in list(result.values_current)[1:])
    assert len(result.values_breeding) == STATS_COUNT


@pytest.mark.parametrize(
    "value, digits, expected",
    [
        (1.25, 1, 1.3),
        (12.34999, 1, 12.3),
        (-1.25, 1, -1.3),
        (0.125, 2, 0.13),
        (1.2344, 3, 1.234),
    ],
)
def test_round_half_away_from_zero(value: float, digits: int, expected: float) -> None:
    assert round_half_away_from_zero(value, digits) == pytest.approx(expected)


def test_precision() -> None:
    assert [precision(i) for i in range(STATS_COUNT)] == [1] * 8 + [3] * 4
