"""Minimal append-only SVG document builder.

Primitives are stored as frozen dataclasses and serialized once by
:meth:`SvgBuilder.to_string`. Emission order is draw order: later elements
paint over earlier ones.

Nested ``<g>`` and ``<defs>`` scopes are tracked on an explicit stack. Opening
a scope redirects subsequent primitives into it until :meth:`SvgBuilder.end`
closes it and attaches it to the enclosing scope::

    svg = SvgBuilder(100, 50)
    svg.group(opacity=0.5).rect(0, 0, 10, 10, fill=RED).end()
    svg.to_string()

Colors are 8-bit RGBA. The RGB part is written as ``rgb(r,g,b)`` and an alpha
below 255 becomes a separate ``*-opacity`` attribute (``alpha / 255``).
"""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import List, Optional, Sequence, Tuple, Union
from xml.sax.saxutils import escape

from ark_infographic.types import Color

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

Number = Union[int, float]

_XML_ENTITIES = {'"': "&quot;", "'": "&apos;"}


class TextAnchor(StrEnum):
    START = "start"
    MIDDLE = "middle"
    END = "end"


class FontWeight(StrEnum):
    NORMAL = "normal"
    BOLD = "bold"


@dataclass(frozen=True)
class Rect:
    x: Number
    y: Number
    width: Number
    height: Number
    fill: Optional[Color] = None
    stroke: Optional[Color] = None
    stroke_width: Optional[Number] = None
    opacity: Optional[Number] = None


@dataclass(frozen=True)
class Text:
    content: str
    x: Number
    y: Number
    font_family: Optional[str] = None
    font_size: Optional[Number] = None
    font_weight: FontWeight = FontWeight.NORMAL
    fill: Optional[Color] = None
    text_anchor: TextAnchor = TextAnchor.START


@dataclass(frozen=True)
class Ellipse:
    cx: Number
    cy: Number
    rx: Number
    ry: Number
    fill: Optional[Color] = None
    stroke: Optional[Color] = None
    stroke_width: Optional[Number] = None


@dataclass(frozen=True)
class Line:
    x1: Number
    y1: Number
    x2: Number
    y2: Number
    stroke: Optional[Color] = None
    stroke_width: Optional[Number] = None
    opacity: Optional[Number] = None


@dataclass(frozen=True)
class EmbeddedImage:
    href: str
    x: Number
    y: Number
    width: Number
    height: Number


@dataclass(frozen=True)
class GradientStop:
    offset: Number
    color: Color
    opacity: Optional[Number] = None


@dataclass(frozen=True)
class RadialGradient:
    id: str
    stops: Tuple[GradientStop, ...]


@dataclass(frozen=True)
class Group:
    children: Tuple["SvgElement", ...]
    opacity: Optional[Number] = None


@dataclass(frozen=True)
class Defs:
    children: Tuple["SvgElement", ...]


SvgElement = Union[
    Rect, Text, Ellipse, Line, EmbeddedImage, RadialGradient, Group, Defs
]


# --- Serialization helpers ---


def escape_xml(s: str) -> str:
    return escape(s, _XML_ENTITIES)


def format_number(value: Number) -> str:
    """Format a number the way JavaScript stringifies it (``2.0`` -> ``2``)."""
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value) if isinstance(value, float) else str(value)


def color_to_svg(color: Color) -> str:
    r, g, b = color.rgb
    return f"rgb({r},{g},{b})"


def color_opacity(color: Color) -> float:
    return color.a / 255


def _paint_attrs(name: str, color: Color) -> str:
    s = f' {name}="{color_to_svg(color)}"'
    opacity = color_opacity(color)
    if opacity < 1:
        s += f' {name}-opacity="{format_number(opacity)}"'
    return s


def _optional_number(name: str, value: Optional[Number]) -> str:
    if value is None:
        return ""
    return f' {name}="{format_number(value)}"'


def _serialize_rect(el: Rect) -> str:
    n = format_number
    s = f'<rect x="{n(el.x)}" y="{n(el.y)}" width="{n(el.width)}" height="{n(el.height)}"'
    s += _paint_attrs("fill", el.fill) if el.fill is not None else ' fill="none"'
    if el.stroke is not None:
        s += _paint_attrs("stroke", el.stroke)
    s += _optional_number("stroke-width", el.stroke_width)
    s += _optional_number("opacity", el.opacity)
    return s + "/>"


def _serialize_text(el: Text) -> str:
    s = f'<text x="{format_number(el.x)}" y="{format_number(el.y)}"'
    if el.font_family:
        s += f' font-family="{escape_xml(el.font_family)}"'
    s += _optional_number("font-size", el.font_size)
    if el.font_weight != FontWeight.NORMAL:
        s += f' font-weight="{el.font_weight}"'
    if el.fill is not None:
        s += _paint_attrs("fill", el.fill)
    if el.text_anchor != TextAnchor.START:
        s += f' text-anchor="{el.text_anchor}"'
    return s + f">{escape_xml(el.content)}</text>"


def _serialize_ellipse(el: Ellipse) -> str:
    n = format_number
    s = f'<ellipse cx="{n(el.cx)}" cy="{n(el.cy)}" rx="{n(el.rx)}" ry="{n(el.ry)}"'
    s += _paint_attrs("fill", el.fill) if el.fill is not None else ' fill="none"'
    if el.stroke is not None:
        s += _paint_attrs("stroke", el.stroke)
    s += _optional_number("stroke-width", el.stroke_width)
    return s + "/>"


def _serialize_line(el: Line) -> str:
    n = format_number
    s = f'<line x1="{n(el.x1)}" y1="{n(el.y1)}" x2="{n(el.x2)}" y2="{n(el.y2)}"'
    if el.stroke is not None:
        s += _paint_attrs("stroke", el.stroke)
    s += _optional_number("stroke-width", el.stroke_width)
    s += _optional_number("opacity", el.opacity)
    return s + "/>"


def _serialize_image(el: EmbeddedImage) -> str:
    n = format_number
    return (
        f'<image href="{escape_xml(el.href)}" x="{n(el.x)}" y="{n(el.y)}"'
        f' width="{n(el.width)}" height="{n(el.height)}"/>'
    )


def _serialize_radial_gradient(el: RadialGradient) -> str:
    s = f'<radialGradient id="{escape_xml(el.id)}">'
    for stop in el.stops:
        s += f'<stop offset="{format_number(stop.offset)}" stop-color="{color_to_svg(stop.color)}"'
        opacity = stop.opacity if stop.opacity is not None else color_opacity(stop.color)
        if opacity < 1:
            s += f' stop-opacity="{format_number(opacity)}"'
        s += "/>"
    return s + "</radialGradient>"


def _serialize_group(el: Group) -> str:
    s = "<g" + _optional_number("opacity", el.opacity) + ">"
    s += "".join(serialize_element(child) for child in el.children)
    return s + "</g>"


def _serialize_defs(el: Defs) -> str:
    return "<defs>" + "".join(serialize_element(c) for c in el.children) + "</defs>"


def serialize_element(el: SvgElement) -> str:
    if isinstance(el, Rect):
        return _serialize_rect(el)
    if isinstance(el, Text):
        return _serialize_text(el)
    if isinstance(el, Ellipse):
        return _serialize_ellipse(el)
    if isinstance(el, Line):
        return _serialize_line(el)
    if isinstance(el, EmbeddedImage):
        return _serialize_image(el)
    if isinstance(el, RadialGradient):
        return _serialize_radial_gradient(el)
    if isinstance(el, Group):
        return _serialize_group(el)
    if isinstance(el, Defs):
        return _serialize_defs(el)
    raise ValueError(f"Unknown SVG element: {el!r}")


# --- Builder ---


@dataclass
class _Scope:
    kind: str
    opacity: Optional[Number] = None
    elements: List[SvgElement] = field(default_factory=list)


class SvgBuilder:
    """Accumulates primitives for one SVG document.

    All emitters return the builder so calls can be chained. Each builder is
    meant for a single render and is not shared.
    """

    width: Number
    height: Number

    def __init__(self, width: Number, height: Number):
        self.width = width
        self.height = height
        self._root = _Scope(kind="svg")
        self._stack: List[_Scope] = [self._root]

    @property
    def depth(self) -> int:
        """Number of open group/defs scopes."""
        return len(self._stack) - 1

    @property
    def elements(self) -> Tuple[SvgElement, ...]:
        """Top-level elements emitted so far (open scopes not included)."""
        return tuple(self._root.elements)

    def _append(self, element: SvgElement) -> "SvgBuilder":
        self._stack[-1].elements.append(element)
        return self

    def rect(
        self,
        x: Number,
        y: Number,
        width: Number,
        height: Number,
        fill: Optional[Color] = None,
        stroke: Optional[Color] = None,
        stroke_width: Optional[Number] = None,
        opacity: Optional[Number] = None,
    ) -> "SvgBuilder":
        return self._append(
            Rect(x, y, width, height, fill, stroke, stroke_width, opacity)
        )

    def text(
        self,
        content: str,
        x: Number,
        y: Number,
        font_family: Optional[str] = None,
        font_size: Optional[Number] = None,
        font_weight: FontWeight = FontWeight.NORMAL,
        fill: Optional[Color] = None,
        text_anchor: TextAnchor = TextAnchor.START,
    ) -> "SvgBuilder":
        return self._append(
            Text(content, x, y, font_family, font_size, font_weight, fill, text_anchor)
        )

    def ellipse(
        self,
        cx: Number,
        cy: Number,
        rx: Number,
        ry: Number,
        fill: Optional[Color] = None,
        stroke: Optional[Color] = None,
        stroke_width: Optional[Number] = None,
    ) -> "SvgBuilder":
        return self._append(Ellipse(cx, cy, rx, ry, fill, stroke, stroke_width))

    def line(
        self,
        x1: Number,
        y1: Number,
        x2: Number,
        y2: Number,
        stroke: Optional[Color] = None,
        stroke_width: Optional[Number] = None,
        opacity: Optional[Number] = None,
    ) -> "SvgBuilder":
        return self._append(Line(x1, y1, x2, y2, stroke, stroke_width, opacity))

    def image(
        self, href: str, x: Number, y: Number, width: Number, height: Number
    ) -> "SvgBuilder":
        return self._append(EmbeddedImage(href, x, y, width, height))

    def radial_gradient(
        self, id: str, stops: Sequence[GradientStop]
    ) -> "SvgBuilder":
        return self._append(RadialGradient(id, tuple(stops)))

    def group(self, opacity: Optional[Number] = None) -> "SvgBuilder":
        """Open a ``<g>`` scope; close it with :meth:`end`."""
        self._stack.append(_Scope(kind="group", opacity=opacity))
        return self

    def defs(self) -> "SvgBuilder":
        """Open a ``<defs>`` scope; close it with :meth:`end`."""
        self._stack.append(_Scope(kind="defs"))
        return self

    def end(self) -> "SvgBuilder":
        """Close the innermost group/defs scope.

        Raises:
            ValueError: If no scope is open.
        """
        if len(self._stack) == 1:
            raise ValueError("end() called without an open group or defs scope")
        scope = self._stack.pop()
        children = tuple(scope.elements)
        if scope.kind == "group":
            return self._append(Group(children=children, opacity=scope.opacity))
        return self._append(Defs(children=children))

    def to_string(self) -> str:
        """Serialize the document.

        Raises:
            ValueError: If a group/defs scope is still open.
        """
        if len(self._stack) != 1:
            raise ValueError(f"{self.depth} group/defs scope(s) left open")
        s = (
            f'<svg xmlns="{SVG_NAMESPACE}" width="{format_number(self.width)}"'
            f' height="{format_number(self.height)}">'
        )
        s += "".join(serialize_element(el) for el in self._root.elements)
        return s + "</svg>"

    def __str__(self) -> str:
        return self.to_string()
