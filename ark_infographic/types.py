"""Common value types and callable aliases.

``StringLookup`` and ``ColorLookup`` are the two extension points the
renderer calls out to: localized text and the ARK color-id palette. Both are
plain callables so a dict's ``get`` or a lambda can be passed directly.
"""

from dataclasses import dataclass, replace
from typing import Callable, Tuple


@dataclass(frozen=True)
class Color:
    """8-bit RGBA color.

    Attributes:
        r: Red channel, 0-255.
        g: Green channel, 0-255.
        b: Blue channel, 0-255.
        a: Alpha channel, 0-255. Values below 255 are written to SVG as a
            separate opacity attribute.
    """

    r: int
    g: int
    b: int
    a: int = 255

    def with_alpha(self, a: int) -> "Color":
        return replace(self, a=a)

    @property
    def rgb(self) -> Tuple[int, int, int]:
        return self.r, self.g, self.b


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)

StringLookup = Callable[[str], str]
ColorLookup = Callable[[int], Color]
