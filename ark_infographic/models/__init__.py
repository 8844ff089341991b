"""Plain data models passed into the renderer.

All models are frozen dataclasses; they carry no rendering logic.
"""

from .ark_color import ArkColor, ark_color_to_srgb, linear_to_srgb_component
from .config import DEFAULT_CONFIG, InfoGraphicConfig
from .creature import Creature, Sex
from .server import ASA_GAME, DEFAULT_SERVER_SETTINGS, ServerSettings
from .species import SpeciesInfo, SpeciesStats, StatRaw

__all__ = [
    "ASA_GAME",
    "ArkColor",
    "Creature",
    "DEFAULT_CONFIG",
    "DEFAULT_SERVER_SETTINGS",
    "InfoGraphicConfig",
    "ServerSettings",
    "Sex",
    "SpeciesInfo",
    "SpeciesStats",
    "StatRaw",
    "ark_color_to_srgb",
    "linear_to_srgb_component",
]
