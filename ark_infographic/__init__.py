"""ark_infographic
=================

Deterministic renderer for ARK creature infographic cards and region-based
sprite colorization.

Typical use::

    from ark_infographic import (
        DEFAULT_CONFIG, DEFAULT_SERVER_SETTINGS, compute_stat_values,
        render_infographic_svg,
    )

    values = compute_stat_values(species_stats, wild, dom, mutated, True, 0.9, 0.0)
    creature = Creature(..., values_breeding=values.values_breeding,
                        values_current=values.values_current)
    svg = render_infographic_svg(creature, species_info, DEFAULT_SERVER_SETTINGS,
                                 DEFAULT_CONFIG, palette.get)

PNG output lives in :mod:`ark_infographic.rasterizer`, which needs cairosvg.
"""

from .colorizer import ColorRegionMask, colorize, colorize_png
from .models import (
    DEFAULT_CONFIG,
    DEFAULT_SERVER_SETTINGS,
    ArkColor,
    Creature,
    InfoGraphicConfig,
    ServerSettings,
    Sex,
    SpeciesInfo,
    SpeciesStats,
    StatRaw,
    ark_color_to_srgb,
)
from .rendering import Layout, SvgBuilder, compute_layout, render_infographic_svg
from .stats import Stat, StatComputeResult, compute_stat_values, precision
from .strings import default_get_string
from .types import Color, ColorLookup, StringLookup

__all__ = [
    "ArkColor",
    "Color",
    "ColorLookup",
    "ColorRegionMask",
    "Creature",
    "DEFAULT_CONFIG",
    "DEFAULT_SERVER_SETTINGS",
    "InfoGraphicConfig",
    "Layout",
    "ServerSettings",
    "Sex",
    "SpeciesInfo",
    "SpeciesStats",
    "Stat",
    "StatComputeResult",
    "StatRaw",
    "StringLookup",
    "SvgBuilder",
    "ark_color_to_srgb",
    "colorize",
    "colorize_png",
    "compute_layout",
    "compute_stat_values",
    "default_get_string",
    "precision",
    "render_infographic_svg",
]
