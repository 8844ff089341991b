"""Stat slot constants and the stat value formula."""

from .constants import (
    COLOR_REGION_COUNT,
    DISPLAY_ORDER,
    STATS_COUNT,
    Stat,
    is_percentage,
    precision,
)
from .calculator import StatComputeResult, compute_stat_values

__all__ = [
    "COLOR_REGION_COUNT",
    "DISPLAY_ORDER",
    "STATS_COUNT",
    "Stat",
    "StatComputeResult",
    "compute_stat_values",
    "is_percentage",
    "precision",
]
