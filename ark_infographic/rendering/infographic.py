"""Infographic card composition.

:func:`render_infographic_svg` draws one card in a fixed order so later
elements paint over earlier ones:

1. Background fill.
2. Header (species and optional creature name, bold, auto-shrunk).
3. Info line (level, sex, neuter tag, mutation counter, generation).
4. Translucent separator line.
5. Right-aligned column headers for the active columns.
6. One row per displayed stat: track, gradient bar, glow, bar border, name
   and the level / mutated / dom / value columns.
7. Optional creature image.
8. Color section: header, TE or imprinting, one swatch per enabled region.
9. Mutagen note, max wild level footer and the card border.

All positions come from :class:`~ark_infographic.rendering.layout.Layout`.
"""

import logging
from typing import Optional

from ark_infographic.models.config import InfoGraphicConfig
from ark_infographic.models.creature import Creature
from ark_infographic.models.server import ServerSettings
from ark_infographic.models.species import SpeciesInfo
from ark_infographic.rendering.graphic_utils import (
    color_from_percent,
    fore_color,
    stat_name,
    to_fixed,
)
from ark_infographic.rendering.labels import header_text, info_text, wild_column_label
from ark_infographic.rendering.layout import Layout, compute_layout, truncate_region_name
from ark_infographic.rendering.svg import FontWeight, SvgBuilder, TextAnchor
from ark_infographic.stats.constants import (
    COLOR_REGION_COUNT,
    DISPLAY_ORDER,
    Stat,
    is_percentage,
)
from ark_infographic.strings import default_get_string
from ark_infographic.types import Color, ColorLookup, StringLookup

logger = logging.getLogger(__name__)

DEFAULT_FONT = "Arial"
TRACK_COLOR = Color(169, 169, 169)
SEPARATOR_ALPHA = 50
GLOW_ALPHA = 10
GLOW_STEPS = 4
BAR_BORDER_LIGHT = -0.5
MUTAGEN_TEXT = "Mutagen applied"


class _CardPainter:
    """Draw helpers bound to one builder, layout and text style."""

    def __init__(self, svg: SvgBuilder, layout: Layout, font: str, fore: Color):
        self.svg = svg
        self.layout = layout
        self.font = font
        self.fore = fore

    def text(
        self,
        content: str,
        x: float,
        y: float,
        font_size: Optional[int] = None,
        anchor: TextAnchor = TextAnchor.START,
        weight: FontWeight = FontWeight.NORMAL,
    ) -> None:
        self.svg.text(
            content,
            x,
            y,
            font_family=self.font,
            font_size=self.layout.font_size if font_size is None else font_size,
            font_weight=weight,
            fill=self.fore,
            text_anchor=anchor,
        )

    def right(self, content: str, x: float, y: float) -> None:
        self.text(content, x, y, anchor=TextAnchor.END)


def _draw_column_headers(
    painter: _CardPainter, config: InfoGraphicConfig, get_string: StringLookup
) -> None:
    layout = painter.layout
    y = layout.columns_y + layout.font_size
    letter_shift = int(layout.mean_letter_width)

    w_shift = (
        letter_shift
        if layout.display_mutated_levels or config.display_dom_levels
        else 0
    )
    painter.right(wild_column_label(config, get_string), layout.x_right_level_value - w_shift, y)

    if layout.display_mutated_levels:
        m_shift = letter_shift if config.display_dom_levels else 0
        painter.right(get_string("M"), layout.x_right_level_mut_value - m_shift, y)

    if config.display_dom_levels:
        painter.right(get_string("D"), layout.x_right_level_dom_value, y)

    if config.display_stat_values:
        painter.right(get_string("Values"), layout.x_right_br_value, y)


def _draw_stat_bar(
    painter: _CardPainter, y: int, level_wild: int, max_graph_level: int
) -> None:
    layout = painter.layout
    svg = painter.svg
    bar_y = y + layout.stat_line_height - 1

    svg.rect(
        layout.x_stat_name, bar_y, layout.max_box_length, layout.stat_box_height,
        fill=TRACK_COLOR,
    )

    level_fraction = max(0.0, min(1.0, level_wild / max_graph_level))
    level_percent = int(100 * level_fraction)
    bar_length = max(1, int(layout.max_box_length * level_fraction))
    bar_color = color_from_percent(level_percent)

    svg.rect(
        layout.x_stat_name, bar_y, bar_length, layout.stat_box_height,
        fill=bar_color,
    )

    glow = bar_color.with_alpha(GLOW_ALPHA)
    for r in range(GLOW_STEPS, 0, -1):
        svg.rect(
            layout.x_stat_name - r,
            bar_y - 1 - r,
            bar_length + 2 * r,
            layout.stat_box_height + 2 * r,
            fill=glow,
        )

    svg.rect(
        layout.x_stat_name, bar_y, bar_length, layout.stat_box_height,
        stroke=color_from_percent(level_percent, BAR_BORDER_LIGHT),
        stroke_width=1,
    )


def _stat_value_text(value: float, stat_index: int) -> str:
    if value < 0:
        return "?"
    if is_percentage(stat_index):
        return to_fixed(100 * value, 1)
    return to_fixed(value, 1)


def _draw_stat_row(
    painter: _CardPainter,
    row: int,
    stat_index: Stat,
    creature: Creature,
    species: SpeciesInfo,
    config: InfoGraphicConfig,
    get_string: StringLookup,
    max_graph_level: int,
) -> None:
    layout = painter.layout
    y = layout.stat_row_y(row)
    text_y = y + layout.font_size
    level_wild = creature.levels_wild[stat_index]
    levels_mutated = creature.levels_mutated

    _draw_stat_bar(painter, y, level_wild, max_graph_level)

    painter.text(
        stat_name(stat_index, True, species.stat_names, get_string),
        layout.x_stat_name,
        text_y,
    )

    displayed_level = level_wild
    if (
        config.display_sum_wild_mut_levels
        and levels_mutated is not None
        and levels_mutated[stat_index] > 0
    ):
        displayed_level += levels_mutated[stat_index]
    pipe = " |" if layout.display_mutated_levels or config.display_dom_levels else ""
    level_label = "?" if level_wild < 0 else str(displayed_level)
    painter.right(level_label + pipe, layout.x_right_level_value, text_y)

    if layout.display_mutated_levels and levels_mutated is not None:
        mut_pipe = " |" if config.display_dom_levels else ""
        level_mutated = levels_mutated[stat_index]
        mut_label = "" if level_mutated < 0 else f"{level_mutated}{mut_pipe}"
        painter.right(mut_label, layout.x_right_level_mut_value, text_y)

    if config.display_dom_levels:
        painter.right(str(creature.levels_dom[stat_index]), layout.x_right_level_dom_value, text_y)

    if config.display_stat_values:
        value = (
            creature.values_current[stat_index]
            if config.display_dom_levels
            else creature.values_breeding[stat_index]
        )
        if value >= 0 and is_percentage(stat_index):
            # The percent sign starts where the right-aligned number ends.
            painter.text("%", layout.x_right_br_value, text_y)
        painter.right(_stat_value_text(value, stat_index), layout.x_right_br_value, text_y)


def _draw_color_section(
    painter: _CardPainter,
    creature: Creature,
    species: SpeciesInfo,
    config: InfoGraphicConfig,
    get_color: ColorLookup,
    get_string: StringLookup,
    image_shown: bool,
) -> int:
    layout = painter.layout
    svg = painter.svg
    header_y = layout.columns_y + layout.font_size

    painter.text(get_string("Colors"), layout.x_color, header_y)

    if config.display_dom_levels:
        if creature.is_bred or creature.imprinting_bonus > 0:
            painter.text(
                f"Imp: {to_fixed(creature.imprinting_bonus * 100, 1)} %",
                layout.imprinting_x,
                header_y,
            )
        elif creature.taming_effectiveness >= 0:
            painter.text(
                f"TE: {to_fixed(creature.taming_effectiveness * 100, 1)} %",
                layout.imprinting_x,
                header_y,
            )

    max_name_length = layout.max_color_name_length(image_shown)
    show_region_names = config.display_extra_region_names or (
        not image_shown and config.display_region_names_if_no_image
    )
    border_color = fore_color(config.back_color)
    radius = layout.circle_diameter / 2

    row = 0
    for region in range(COLOR_REGION_COUNT):
        if not species.enabled_color_regions[region]:
            continue
        y = layout.color_row_y(row)
        row += 1

        color_id = creature.colors[region]
        cx = layout.x_color + radius
        cy = y + radius
        svg.ellipse(cx, cy, radius, radius, fill=get_color(color_id))
        svg.ellipse(cx, cy, radius, radius, stroke=border_color, stroke_width=1)

        suffix = ""
        region_name = species.color_region_names[region] if show_region_names else None
        if region_name is not None:
            region_name = truncate_region_name(region_name, max_name_length)
            if region_name:
                suffix = f" ({region_name})"

        painter.text(
            f"[{region}] {color_id}{suffix}",
            layout.x_color + layout.circle_diameter + 4,
            y + layout.font_size_small,
            font_size=layout.font_size_small,
        )
    return row


def render_infographic_svg(
    creature: Creature,
    species: SpeciesInfo,
    server: ServerSettings,
    config: InfoGraphicConfig,
    get_color: ColorLookup,
    get_string: StringLookup = default_get_string,
    creature_image_data_uri: Optional[str] = None,
) -> str:
    """Render a creature infographic card as an SVG document.

    Args:
        creature: Creature levels, values and colors.
        species: Used stats, enabled color regions and their names.
        server: Server limits and game identifier.
        config: Display configuration.
        get_color: Maps a color id to its RGBA color.
        get_string: Localized string lookup.
        creature_image_data_uri: Optional (data) URI of the colorized sprite;
            drawn only when there is room for it.

    Returns:
        str: SVG document text.
    """
    layout = compute_layout(config, creature, server, get_string)
    svg = SvgBuilder(layout.width, layout.height)
    painter = _CardPainter(svg, layout, config.font_name or DEFAULT_FONT, config.fore_color)

    svg.rect(0, 0, layout.width, layout.height, fill=config.back_color)

    painter.text(
        header_text(creature, server, config),
        layout.border_and_padding,
        layout.header_y,
        font_size=layout.header_font_size,
        weight=FontWeight.BOLD,
    )
    painter.text(
        info_text(creature, server, config, get_string),
        layout.border_and_padding,
        layout.info_y + layout.info_font_size,
        font_size=layout.info_font_size,
    )

    svg.line(
        layout.border_width,
        layout.separator_y,
        layout.width - layout.border_width,
        layout.separator_y,
        stroke=config.fore_color.with_alpha(SEPARATOR_ALPHA),
        stroke_width=1,
    )

    _draw_column_headers(painter, config, get_string)

    max_graph_level = max(1, server.max_chart_level)
    row = 0
    for stat_index in DISPLAY_ORDER:
        if stat_index == Stat.TORPIDITY or not species.used_stats[stat_index]:
            continue
        _draw_stat_row(
            painter, row, stat_index, creature, species, config, get_string, max_graph_level
        )
        row += 1

    image_shown = layout.image_fits() and creature_image_data_uri is not None
    if image_shown:
        svg.image(
            creature_image_data_uri,
            layout.image_x,
            layout.image_y,
            layout.image_size,
            layout.image_size,
        )

    swatches = _draw_color_section(
        painter, creature, species, config, get_color, get_string, image_shown
    )

    footer_y = layout.height - layout.border_and_padding
    if creature.is_mutagen_applied:
        painter.text(MUTAGEN_TEXT, layout.x_color, footer_y, font_size=layout.font_size_small)

    if config.display_max_wild_level:
        painter.text(
            f"{get_string('max wild level')}: {server.max_wild_level}",
            layout.width - layout.border_and_padding,
            footer_y,
            font_size=layout.font_size_small,
            anchor=TextAnchor.END,
        )

    if layout.border_width > 0:
        svg.rect(
            layout.border_width / 2,
            layout.border_width / 2,
            layout.width - layout.border_width,
            layout.height - layout.border_width,
            stroke=config.border_color,
            stroke_width=layout.border_width,
        )

    logger.debug(
        "Rendered %s card %dx%d with %d stat rows and %d color swatches",
        creature.species_name,
        layout.width,
        layout.height,
        row,
        swatches,
    )
    return svg.to_string()
