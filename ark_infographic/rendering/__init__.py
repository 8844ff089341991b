"""Rendering subpackage.

Turns a creature snapshot into an infographic SVG document:

* :mod:`~ark_infographic.rendering.layout` computes every coordinate and
  font size from the configuration and the creature's data.
* :mod:`~ark_infographic.rendering.svg` is the append-only SVG builder.
* :mod:`~ark_infographic.rendering.infographic` draws the card in a fixed
  order using both.
"""

from .infographic import render_infographic_svg
from .layout import Layout, compute_layout
from .svg import FontWeight, GradientStop, SvgBuilder, TextAnchor

__all__ = [
    "FontWeight",
    "GradientStop",
    "Layout",
    "SvgBuilder",
    "TextAnchor",
    "compute_layout",
    "render_infographic_svg",
]
