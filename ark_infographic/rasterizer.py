"""SVG to PNG rasterization of infographic cards.

Uses cairosvg. Fonts are not bundled or passed in as buffers: text is
resolved by the system fontconfig from the family named in
``InfoGraphicConfig.font_name``, so install that family (or point fontconfig
at a font directory) on hosts that rasterize cards. Import this module
explicitly, it is not loaded by ``import ark_infographic``.
"""

import logging
from typing import Optional

import cairosvg

from ark_infographic.models.config import InfoGraphicConfig
from ark_infographic.models.creature import Creature
from ark_infographic.models.server import ServerSettings
from ark_infographic.models.species import SpeciesInfo
from ark_infographic.rendering.infographic import render_infographic_svg
from ark_infographic.strings import default_get_string
from ark_infographic.types import ColorLookup, StringLookup

logger = logging.getLogger(__name__)


def svg_to_png(svg: str, scale: float = 1.0) -> bytes:
    """Rasterize an SVG document at its own size times ``scale``."""
    png: bytes = cairosvg.svg2png(bytestring=svg.encode("utf-8"), scale=scale)
    logger.debug("Rasterized SVG (%d chars) to %d PNG bytes", len(svg), len(png))
    return png


def render_infographic_png(
    creature: Creature,
    species: SpeciesInfo,
    server: ServerSettings,
    config: InfoGraphicConfig,
    get_color: ColorLookup,
    get_string: StringLookup = default_get_string,
    creature_image_data_uri: Optional[str] = None,
    scale: float = 1.0,
) -> bytes:
    """Render a creature infographic directly to PNG bytes.

    Arguments match :func:`ark_infographic.rendering.render_infographic_svg`.
    """
    svg = render_infographic_svg(
        creature,
        species,
        server,
        config,
        get_color,
        get_string,
        creature_image_data_uri,
    )
    return svg_to_png(svg, scale=scale)
