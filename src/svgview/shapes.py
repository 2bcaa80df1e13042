"""
Typed shape records and their conversion to elements.

A shape is plain data: a tag name, a self-closing flag and typed fields. Each
shape lists its attributes explicitly, in declaration order; calling a shape
builds the corresponding `Element`:

    Circle(cx=50, cy=50, r=40)()
    # <circle cx="50" cy="50" r="40"></circle>

    SVG(width=100, height=100)(Circle(cx=50, cy=50, r=40)().fill("blue"))

A shape passed as a child without the call is built the same way, so
`G()(Circle(r=1))` works too.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, ClassVar

from .builder import build
from .core import attribute_value
from .elements import Element, attribute_name
from .numbers import format_number

Points = str | Sequence[tuple[float, float]]


@dataclass(frozen=True, slots=True)
class ViewBox:
    min_x: float
    min_y: float
    width: float
    height: float

    def __str__(self) -> str:
        return " ".join(
            format_number(v) for v in (self.min_x, self.min_y, self.width, self.height)
        )


def format_points(points: Points | None) -> str | None:
    """Format `[(x, y), ...]` as an SVG points list: `"0,0 10,5"`."""
    if points is None or isinstance(points, str):
        return points
    return " ".join(f"{format_number(x)},{format_number(y)}" for x, y in points)


class Shape:
    """Base for shape records."""

    __slots__ = ()

    tag_name: ClassVar[str]
    is_self_closing: ClassVar[bool] = False

    def attributes(self) -> list[tuple[str, Any]]:
        """Ordered `(field name, value)` pairs; None values are omitted on output."""
        raise NotImplementedError

    def content(self) -> Any:
        """Text content carried by the shape itself, rendered before any children."""
        return None

    def __call__(self, *children: Any) -> Element:
        own = self.content()
        if own is not None:
            children = (own, *children)
        return Element(
            self.tag_name,
            shape_attributes(self),
            build(*children) if children else None,
            self.is_self_closing,
        )


def shape_attributes(shape: Shape) -> dict[str, str | None]:
    """Static attributes of a shape, with SVG names and formatted values."""
    attributes: dict[str, str | None] = {}
    for name, value in shape.attributes():
        value = attribute_value(value)
        if value is not None:
            attributes[attribute_name(name)] = value
    return attributes


# Document structure


@dataclass(frozen=True, slots=True)
class SVG(Shape):
    tag_name: ClassVar[str] = "svg"

    width: float | str | None = None
    height: float | str | None = None
    view_box: ViewBox | str | None = None
    x: float | None = None
    y: float | None = None
    preserve_aspect_ratio: str | None = None
    xmlns: str | None = None

    def attributes(self) -> list[tuple[str, Any]]:
        return [
            ("xmlns", self.xmlns),
            ("x", self.x),
            ("y", self.y),
            ("width", self.width),
            ("height", self.height),
            ("view_box", self.view_box),
            ("preserve_aspect_ratio", self.preserve_aspect_ratio),
        ]


@dataclass(frozen=True, slots=True)
class G(Shape):
    tag_name: ClassVar[str] = "g"

    id: str | None = None
    transform: str | None = None

    def attributes(self) -> list[tuple[str, Any]]:
        return [("id", self.id), ("transform", self.transform)]


@dataclass(frozen=True, slots=True)
class Defs(Shape):
    tag_name: ClassVar[str] = "defs"

    def attributes(self) -> list[tuple[str, Any]]:
        return []


@dataclass(frozen=True, slots=True)
class Use(Shape):
    tag_name: ClassVar[str] = "use"

    href: str
    x: float | None = None
    y: float | None = None
    width: float | None = None
    height: float | None = None

    def attributes(self) -> list[tuple[str, Any]]:
        return [
            ("href", self.href),
            ("x", self.x),
            ("y", self.y),
            ("width", self.width),
            ("height", self.height),
        ]


# Basic shapes


@dataclass(frozen=True, slots=True)
class Circle(Shape):
    tag_name: ClassVar[str] = "circle"

    cx: float = 0
    cy: float = 0
    r: float = 0

    def attributes(self) -> list[tuple[str, Any]]:
        return [("cx", self.cx), ("cy", self.cy), ("r", self.r)]


@dataclass(frozen=True, slots=True)
class Ellipse(Shape):
    tag_name: ClassVar[str] = "ellipse"

    cx: float = 0
    cy: float = 0
    rx: float = 0
    ry: float = 0

    def attributes(self) -> list[tuple[str, Any]]:
        return [("cx", self.cx), ("cy", self.cy), ("rx", self.rx), ("ry", self.ry)]


@dataclass(frozen=True, slots=True)
class Rect(Shape):
    tag_name: ClassVar[str] = "rect"

    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0
    rx: float | None = None
    ry: float | None = None

    def attributes(self) -> list[tuple[str, Any]]:
        return [
            ("x", self.x),
            ("y", self.y),
            ("width", self.width),
            ("height", self.height),
            ("rx", self.rx),
            ("ry", self.ry),
        ]


@dataclass(frozen=True, slots=True)
class Line(Shape):
    tag_name: ClassVar[str] = "line"

    x1: float = 0
    y1: float = 0
    x2: float = 0
    y2: float = 0

    def attributes(self) -> list[tuple[str, Any]]:
        return [("x1", self.x1), ("y1", self.y1), ("x2", self.x2), ("y2", self.y2)]


@dataclass(frozen=True, slots=True)
class Polyline(Shape):
    tag_name: ClassVar[str] = "polyline"

    points: Points = ""

    def attributes(self) -> list[tuple[str, Any]]:
        return [("points", format_points(self.points))]


@dataclass(frozen=True, slots=True)
class Polygon(Shape):
    tag_name: ClassVar[str] = "polygon"

    points: Points = ""

    def attributes(self) -> list[tuple[str, Any]]:
        return [("points", format_points(self.points))]


@dataclass(frozen=True, slots=True)
class Path(Shape):
    tag_name: ClassVar[str] = "path"

    d: str = ""
    fill_rule: str | None = None
    path_length: float | None = None

    def attributes(self) -> list[tuple[str, Any]]:
        return [("d", self.d), ("fill_rule", self.fill_rule), ("path_length", self.path_length)]


@dataclass(frozen=True, slots=True)
class Image(Shape):
    tag_name: ClassVar[str] = "image"

    href: str
    x: float | None = None
    y: float | None = None
    width: float | None = None
    height: float | None = None
    preserve_aspect_ratio: str | None = None

    def attributes(self) -> list[tuple[str, Any]]:
        return [
            ("href", self.href),
            ("x", self.x),
            ("y", self.y),
            ("width", self.width),
            ("height", self.height),
            ("preserve_aspect_ratio", self.preserve_aspect_ratio),
        ]


# Text


@dataclass(frozen=True, slots=True)
class Text(Shape):
    tag_name: ClassVar[str] = "text"

    text: str | None = None
    x: float | None = None
    y: float | None = None
    dx: float | None = None
    dy: float | None = None
    text_anchor: str | None = None
    text_length: float | None = None

    def attributes(self) -> list[tuple[str, Any]]:
        return [
            ("x", self.x),
            ("y", self.y),
            ("dx", self.dx),
            ("dy", self.dy),
            ("text_anchor", self.text_anchor),
            ("text_length", self.text_length),
        ]

    def content(self) -> Any:
        return self.text


@dataclass(frozen=True, slots=True)
class TSpan(Shape):
    tag_name: ClassVar[str] = "tspan"

    text: str | None = None
    x: float | None = None
    y: float | None = None
    dx: float | None = None
    dy: float | None = None

    def attributes(self) -> list[tuple[str, Any]]:
        return [("x", self.x), ("y", self.y), ("dx", self.dx), ("dy", self.dy)]

    def content(self) -> Any:
        return self.text


# Paint servers


@dataclass(frozen=True, slots=True)
class LinearGradient(Shape):
    tag_name: ClassVar[str] = "linearGradient"

    id: str
    x1: float | str | None = None
    y1: float | str | None = None
    x2: float | str | None = None
    y2: float | str | None = None
    gradient_units: str | None = None
    gradient_transform: str | None = None
    spread_method: str | None = None

    def attributes(self) -> list[tuple[str, Any]]:
        return [
            ("id", self.id),
            ("x1", self.x1),
            ("y1", self.y1),
            ("x2", self.x2),
            ("y2", self.y2),
            ("gradient_units", self.gradient_units),
            ("gradient_transform", self.gradient_transform),
            ("spread_method", self.spread_method),
        ]


@dataclass(frozen=True, slots=True)
class RadialGradient(Shape):
    tag_name: ClassVar[str] = "radialGradient"

    id: str
    cx: float | str | None = None
    cy: float | str | None = None
    r: float | str | None = None
    fx: float | str | None = None
    fy: float | str | None = None
    gradient_units: str | None = None
    gradient_transform: str | None = None
    spread_method: str | None = None

    def attributes(self) -> list[tuple[str, Any]]:
        return [
            ("id", self.id),
            ("cx", self.cx),
            ("cy", self.cy),
            ("r", self.r),
            ("fx", self.fx),
            ("fy", self.fy),
            ("gradient_units", self.gradient_units),
            ("gradient_transform", self.gradient_transform),
            ("spread_method", self.spread_method),
        ]


@dataclass(frozen=True, slots=True)
class Stop(Shape):
    tag_name: ClassVar[str] = "stop"

    offset: float | str = 0
    stop_color: str | None = None
    stop_opacity: float | None = None

    def attributes(self) -> list[tuple[str, Any]]:
        return [
            ("offset", self.offset),
            ("stop_color", self.stop_color),
            ("stop_opacity", self.stop_opacity),
        ]


@dataclass(frozen=True, slots=True)
class Pattern(Shape):
    tag_name: ClassVar[str] = "pattern"

    id: str
    x: float | None = None
    y: float | None = None
    width: float | None = None
    height: float | None = None
    pattern_units: str | None = None
    pattern_content_units: str | None = None
    view_box: ViewBox | str | None = None

    def attributes(self) -> list[tuple[str, Any]]:
        return [
            ("id", self.id),
            ("x", self.x),
            ("y", self.y),
            ("width", self.width),
            ("height", self.height),
            ("pattern_units", self.pattern_units),
            ("pattern_content_units", self.pattern_content_units),
            ("view_box", self.view_box),
        ]


# Clipping, masking, markers


@dataclass(frozen=True, slots=True)
class ClipPath(Shape):
    tag_name: ClassVar[str] = "clipPath"

    id: str
    clip_path_units: str | None = None

    def attributes(self) -> list[tuple[str, Any]]:
        return [("id", self.id), ("clip_path_units", self.clip_path_units)]


@dataclass(frozen=True, slots=True)
class Mask(Shape):
    tag_name: ClassVar[str] = "mask"

    id: str
    x: float | str | None = None
    y: float | str | None = None
    width: float | str | None = None
    height: float | str | None = None
    mask_units: str | None = None
    mask_content_units: str | None = None

    def attributes(self) -> list[tuple[str, Any]]:
        return [
            ("id", self.id),
            ("x", self.x),
            ("y", self.y),
            ("width", self.width),
            ("height", self.height),
            ("mask_units", self.mask_units),
            ("mask_content_units", self.mask_content_units),
        ]


@dataclass(frozen=True, slots=True)
class Marker(Shape):
    tag_name: ClassVar[str] = "marker"

    id: str
    marker_width: float | None = None
    marker_height: float | None = None
    ref_x: float | None = None
    ref_y: float | None = None
    orient: str | None = None
    marker_units: str | None = None
    view_box: ViewBox | str | None = None

    def attributes(self) -> list[tuple[str, Any]]:
        return [
            ("id", self.id),
            ("view_box", self.view_box),
            ("marker_width", self.marker_width),
            ("marker_height", self.marker_height),
            ("ref_x", self.ref_x),
            ("ref_y", self.ref_y),
            ("orient", self.orient),
            ("marker_units", self.marker_units),
        ]


# Descriptive


@dataclass(frozen=True, slots=True)
class Title(Shape):
    tag_name: ClassVar[str] = "title"

    text: str | None = None

    def attributes(self) -> list[tuple[str, Any]]:
        return []

    def content(self) -> Any:
        return self.text


@dataclass(frozen=True, slots=True)
class Desc(Shape):
    tag_name: ClassVar[str] = "desc"

    text: str | None = None

    def attributes(self) -> list[tuple[str, Any]]:
        return []

    def content(self) -> Any:
        return self.text
