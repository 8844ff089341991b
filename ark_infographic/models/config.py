"""Infographic display configuration.

The card is sized entirely from ``height`` and ``border_width``; everything
else toggles optional columns and text. Derive variants with
``dataclasses.replace(DEFAULT_CONFIG, ...)``.
"""

from dataclasses import dataclass
from typing import Optional

from ark_infographic.types import BLACK, WHITE, Color


@dataclass(frozen=True)
class InfoGraphicConfig:
    """Card rendering options.

    Attributes:
        height: Card height in pixels; values below 5 fall back to 180.
        font_name: Font family written into every text element.
        fore_color: Text color.
        back_color: Background fill.
        border_color: Border stroke color.
        border_width: Border width in pixels, 0 disables the border.
        display_creature_name: Append the creature name to the header.
        display_dom_levels: Show the dom level column, current values and TE/imprinting.
        display_sum_wild_mut_levels: Show wild+mutated sums instead of a mutated column.
        display_mutations: Show the mutation counter in the info line.
        display_generation: Show the generation in the info line.
        display_stat_values: Show the stat value column.
        display_max_wild_level: Show the server max wild level footer.
        display_extra_region_names: Widen the card and always show region names.
        display_region_names_if_no_image: Show region names when no creature image is drawn.
        background_image_path: Not drawn by the SVG renderer.
        text_outline_color: Not drawn by the SVG renderer.
        text_outline_width: Not drawn by the SVG renderer.
        creature_outline_color: Not drawn by the SVG renderer.
        creature_outline_width: Not drawn by the SVG renderer.
        creature_outline_blurring: Not drawn by the SVG renderer.
    """

    height: int = 180
    font_name: str = "Liberation Sans"
    fore_color: Color = BLACK
    back_color: Color = WHITE
    border_color: Color = BLACK
    border_width: int = 1
    display_creature_name: bool = True
    display_dom_levels: bool = True
    display_sum_wild_mut_levels: bool = False
    display_mutations: bool = True
    display_generation: bool = True
    display_stat_values: bool = True
    display_max_wild_level: bool = True
    display_extra_region_names: bool = False
    display_region_names_if_no_image: bool = True
    background_image_path: Optional[str] = None
    text_outline_color: Color = WHITE
    text_outline_width: int = 0
    creature_outline_color: Color = WHITE
    creature_outline_width: int = 0
    creature_outline_blurring: float = 0.8


DEFAULT_CONFIG = InfoGraphicConfig()
