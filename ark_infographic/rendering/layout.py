"""Card geometry.

:func:`compute_layout` derives every coordinate and font size of the
infographic from the configured height and border, the creature's level
magnitudes and the server settings. Integer divisions truncate toward zero,
and text widths are estimated as ``character count * mean letter width``
rather than measured, so the same inputs always give the same card.

Column widths depend on the data: a creature with three-digit dom levels gets
a wider dom column than one with single-digit levels.
"""

import math
from dataclasses import dataclass
from typing import Sequence

from ark_infographic.models.config import InfoGraphicConfig
from ark_infographic.models.creature import Creature
from ark_infographic.models.server import ASA_GAME, ServerSettings
from ark_infographic.rendering.labels import header_text, info_text
from ark_infographic.stats.constants import STATS_COUNT, Stat, precision
from ark_infographic.strings import default_get_string
from ark_infographic.types import StringLookup

DEFAULT_HEIGHT = 180
MIN_HEIGHT = 5
MIN_FONT_SIZE = 5
LETTER_WIDTH_FACTOR = 0.7
# Characters of a color label besides the region name: "[i] ccc (" ... ")".
COLOR_LABEL_OVERHEAD = 11


def idiv(a: float, b: float) -> int:
    """Division truncated toward zero."""
    return math.trunc(a / b)


def digit_count(value: float) -> int:
    """Length of the integer's decimal text, sign included."""
    return len(str(math.trunc(value)))


def max_char_length(values: Sequence[float]) -> int:
    """Widest stat value in characters: integer digits plus decimals."""
    longest = 0
    for stat_index in range(STATS_COUNT):
        length = digit_count(values[stat_index]) + precision(stat_index)
        longest = max(longest, length)
    return longest


def fit_font_size(
    char_count: int, font_size: int, available_width: float, letter_width: float
) -> int:
    """Shrink ``font_size`` so ``char_count`` letters fit ``available_width``.

    Returns ``font_size`` unchanged when the estimate already fits, else the
    proportionally reduced size, floored and never below 5.
    """
    estimated_width = char_count * letter_width
    if estimated_width <= available_width:
        return font_size
    if estimated_width == 0:
        # Empty text with no room left: the smallest size.
        return MIN_FONT_SIZE
    return max(MIN_FONT_SIZE, math.trunc(font_size * available_width / estimated_width))


def truncate_region_name(name: str, max_length: int) -> str:
    """Shorten a region name so its color label fits ``max_length`` characters.

    Truncated names end with an ellipsis; names that would keep fewer than two
    characters become empty.
    """
    total_length = len(name) + COLOR_LABEL_OVERHEAD
    if total_length <= max_length:
        return name
    length_for_name = len(name) - (total_length - max_length)
    if length_for_name < 2:
        return ""
    return name[: length_for_name - 1] + "…"


@dataclass(frozen=True)
class Layout:
    """Resolved card geometry.

    Attributes:
        width: Card width including border.
        height: Card height including border.
        content_width: Width inside the border (without extra region-name space).
        content_height: Height inside the border.
        border_width: Border stroke width.
        padding: Inner padding.
        border_and_padding: ``border_width + padding``.
        font_size: Body font size.
        font_size_small: Color labels and footers.
        font_size_header: Header before auto-shrink.
        header_font_size: Header after auto-shrink.
        info_font_size: Info line after auto-shrink.
        stat_line_height: Vertical distance between stat rows.
        mean_letter_width: Estimated width of one body character.
        stat_box_height: Stat bar thickness.
        x_stat_name: Left edge of stat names and bars.
        x_right_level_value: Right edge of the wild level column.
        x_right_level_mut_value: Right edge of the mutated level column.
        x_right_level_dom_value: Right edge of the dom level column.
        x_right_br_value: Right edge of the stat value column.
        max_box_length: Full stat bar length.
        x_color: Left edge of the color section.
        circle_diameter: Color swatch diameter.
        color_row_height: Vertical distance between swatches.
        display_mutated_levels: Whether the mutated level column is drawn.
        extra_margin_bottom: Space reserved for the max-wild-level footer.
        header_y: Header baseline.
        info_y: Top of the info line.
        separator_y: Separator line position.
        columns_y: Top of column headers and the colors header.
        rows_y: Top of the first stat row and first swatch.
        image_size: Side of the creature image; drawn only when greater than 5.
        image_x: Left edge of the creature image.
        image_y: Top edge of the creature image.
        imprinting_x: Left edge of the TE / imprinting text.
    """

    width: int
    height: int
    content_width: int
    content_height: int
    border_width: int
    padding: int
    border_and_padding: int

    font_size: int
    font_size_small: int
    font_size_header: int
    header_font_size: int
    info_font_size: int

    stat_line_height: int
    mean_letter_width: float
    stat_box_height: int

    x_stat_name: int
    x_right_level_value: int
    x_right_level_mut_value: int
    x_right_level_dom_value: int
    x_right_br_value: int
    max_box_length: int

    x_color: int
    circle_diameter: int
    color_row_height: int

    display_mutated_levels: bool
    extra_margin_bottom: int

    header_y: int
    info_y: int
    separator_y: int
    columns_y: int
    rows_y: int

    image_size: int
    image_x: int
    image_y: int
    imprinting_x: int

    def stat_row_y(self, row: int) -> int:
        return self.rows_y + row * self.stat_line_height

    def color_row_y(self, row: int) -> int:
        return self.rows_y + row * self.color_row_height

    def image_fits(self) -> bool:
        return self.image_size > 5

    def max_color_name_length(self, image_shown: bool) -> int:
        """Character budget of a color label, never negative."""
        free_width = (
            self.width
            - 2 * self.border_width
            - self.x_color
            - self.circle_diameter
            - (self.image_size if image_shown else 0)
        )
        return max(0, math.trunc(free_width * 1.5 / self.mean_letter_width))


def compute_layout(
    config: InfoGraphicConfig,
    creature: Creature,
    server: ServerSettings,
    get_string: StringLookup = default_get_string,
) -> Layout:
    """Compute the card geometry.

    Args:
        config: Display configuration.
        creature: Creature snapshot; its levels drive column widths.
        server: Server limits and game identifier.
        get_string: String lookup; the header, info line and colors label
            are sized from their localized text.

    Returns:
        Layout: Immutable geometry record.
    """
    height = DEFAULT_HEIGHT if config.height < MIN_HEIGHT else config.height
    border_width = config.border_width
    content_height = height - 2 * border_width
    content_width = idiv(content_height * 12, 6)
    width = content_width + 2 * border_width
    if config.display_extra_region_names:
        width += idiv(content_height, 2)
    padding = 3 * max(1, idiv(height, 180))
    border_and_padding = border_width + padding

    font_size = max(MIN_FONT_SIZE, idiv(content_height, 18))
    font_size_small = max(MIN_FONT_SIZE, idiv(content_height * 2, 45))
    font_size_header = max(MIN_FONT_SIZE, idiv(content_height, 15))
    stat_line_height = idiv(content_height * 5, 59)
    mean_letter_width = font_size * LETTER_WIDTH_FACTOR
    stat_box_height = max(2, idiv(content_height, 90))

    header_font_size = fit_font_size(
        len(header_text(creature, server, config)),
        font_size_header,
        content_width,
        font_size_header * LETTER_WIDTH_FACTOR,
    )
    info_font_size = fit_font_size(
        len(info_text(creature, server, config, get_string)),
        font_size,
        width - 2 * border_and_padding,
        mean_letter_width,
    )

    # Columns
    x_stat_name = border_and_padding
    display_mutated_levels = (
        not config.display_sum_wild_mut_levels
        and creature.levels_mutated is not None
        and server.game == ASA_GAME
    )

    torpidity_level_length = digit_count(creature.levels_wild[Stat.TORPIDITY])
    x_right_level_value = math.trunc(
        x_stat_name + (6 + torpidity_level_length) * mean_letter_width
    )

    x_right_level_mut_value = x_right_level_value
    if display_mutated_levels and creature.levels_mutated is not None:
        max_mut_level = max(creature.levels_mutated)
        x_right_level_mut_value += math.trunc(
            (digit_count(max_mut_level) + 2) * mean_letter_width
        )

    x_right_level_dom_value = x_right_level_mut_value
    if config.display_dom_levels:
        max_dom_level = max(creature.levels_dom)
        x_right_level_dom_value += math.trunc(
            (digit_count(max_dom_level) + 1) * mean_letter_width
        )

    x_right_br_value = math.trunc(
        x_right_level_dom_value
        + (2 + max_char_length(creature.values_breeding)) * mean_letter_width
    )
    max_box_length = x_right_br_value - x_stat_name

    # Color section
    x_color = math.trunc(x_right_br_value + mean_letter_width * 3.5)
    circle_diameter = idiv(content_height * 4, 45)
    color_row_height = circle_diameter + 2

    extra_margin_bottom = font_size_small if config.display_max_wild_level else 0

    # Vertical flow
    header_y = border_and_padding + header_font_size
    info_y = border_and_padding + idiv(content_height * 19, 180)
    separator_y = info_y + idiv(content_height * 17, 180)
    columns_y = separator_y + 2
    rows_y = columns_y + idiv(content_height, 9)

    image_size = math.trunc(
        min(
            content_width
            - x_color
            + border_width
            - circle_diameter
            - 8 * mean_letter_width,
            content_height - columns_y + border_width - extra_margin_bottom,
        )
    )
    image_x = width - image_size - border_and_padding
    image_y = height - image_size - border_and_padding - extra_margin_bottom

    imprinting_x = x_color + math.trunc((len(get_string("Colors")) + 3) * mean_letter_width)

    return Layout(
        width=width,
        height=height,
        content_width=content_width,
        content_height=content_height,
        border_width=border_width,
        padding=padding,
        border_and_padding=border_and_padding,
        font_size=font_size,
        font_size_small=font_size_small,
        font_size_header=font_size_header,
        header_font_size=header_font_size,
        info_font_size=info_font_size,
        stat_line_height=stat_line_height,
        mean_letter_width=mean_letter_width,
        stat_box_height=stat_box_height,
        x_stat_name=x_stat_name,
        x_right_level_value=x_right_level_value,
        x_right_level_mut_value=x_right_level_mut_value,
        x_right_level_dom_value=x_right_level_dom_value,
        x_right_br_value=x_right_br_value,
        max_box_length=max_box_length,
        x_color=x_color,
        circle_diameter=circle_diameter,
        color_row_height=color_row_height,
        display_mutated_levels=display_mutated_levels,
        extra_margin_bottom=extra_margin_bottom,
        header_y=header_y,
        info_y=info_y,
        separator_y=separator_y,
        columns_y=columns_y,
        rows_y=rows_y,
        image_size=image_size,
        image_x=image_x,
        image_y=image_y,
        imprinting_x=imprinting_x,
    )
