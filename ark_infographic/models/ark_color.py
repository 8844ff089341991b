"""ARK palette colors.

The game defines dye and natural colors in linear space. Conversion to sRGB
uses the game's simplified gamma curve ``255.999 * lc ** (1 / 2.2)`` rather
than the piecewise sRGB transfer function, so values match in-game swatches.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from ark_infographic.types import Color

GAMMA = 2.2


@dataclass(frozen=True)
class ArkColor:
    """Palette entry.

    Attributes:
        id: Color id as stored on creatures.
        name: Display name.
        linear_rgba: Linear RGBA, 0..1 (may exceed 1 for HDR colors).
        is_dye: Dye colors come after the natural colors in the palette.
    """

    id: int
    name: str
    linear_rgba: Tuple[float, float, float, float]
    is_dye: bool = False

    def to_color(self) -> Color:
        r, g, b = ark_color_to_srgb(self)
        return Color(r, g, b)


def linear_to_srgb_component(lc: float) -> int:
    """Gamma-correct one linear component to a byte, clamped to [0, 255]."""
    if lc <= 0:
        return 0
    v = math.trunc(255.999 * math.pow(lc, 1 / GAMMA))
    return max(0, min(255, v))


def ark_color_to_srgb(color: ArkColor) -> Tuple[int, int, int]:
    r, g, b, _ = color.linear_rgba
    return (
        linear_to_srgb_component(r),
        linear_to_srgb_component(g),
        linear_to_srgb_component(b),
    )
