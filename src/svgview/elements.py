"""
SVG element and element factories for pure-Python composition.

Usage:
    from svgview.elements import svg, g, circle, rect, text

    svg(
        circle(cx=50, cy=50, r=40).fill("red"),
        g(
            rect(x=10, y=10, width=30, height=30),
            text("Label", x=20, y=60),
            stroke="black",
        ),
        width=100,
        height=100,
        view_box="0 0 100 100",
    )

Keyword arguments are the element's static attributes, rendered in the order
given. Attributes chained onto an element (`.fill("red")`) follow them, and
attributes bubbled up from children come last.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from .builder import build
from .context import Context
from .core import DirectView, View, attribute_value
from .escape import escape_attribute_value, escape_static_attribute_value

# SVG attributes whose canonical spelling is camelCase.
CAMEL_CASE_ATTRIBUTES = frozenset(
    {
        "viewBox",
        "preserveAspectRatio",
        "patternUnits",
        "patternContentUnits",
        "gradientUnits",
        "gradientTransform",
        "spreadMethod",
        "clipPathUnits",
        "maskUnits",
        "maskContentUnits",
        "filterUnits",
        "primitiveUnits",
        "markerUnits",
        "markerWidth",
        "markerHeight",
        "refX",
        "refY",
        "textLength",
        "lengthAdjust",
        "startOffset",
        "baseFrequency",
        "numOctaves",
        "targetX",
        "targetY",
        "stdDeviation",
        "tableValues",
        "pathLength",
        "repeatCount",
        "repeatDur",
        "attributeName",
        "attributeType",
        "calcMode",
        "keyTimes",
        "keySplines",
        "keyPoints",
        "xChannelSelector",
        "yChannelSelector",
    }
)

NAMESPACE_PREFIXES = ("xlink", "xmlns", "xml")

_UPPER = re.compile(r"(?<!^)([A-Z])")


def _snake_case(name: str) -> str:
    return _UPPER.sub(r"_\1", name).lower()


def _kebab_case(name: str) -> str:
    return _UPPER.sub(r"-\1", name).lower().replace("_", "-")


# view_box -> viewBox, ref_x -> refX, ...
_SNAKE_CASE_ALIASES = {_snake_case(name): name for name in CAMEL_CASE_ATTRIBUTES}


def attribute_name(name: str) -> str:
    """
    Convert a Python-side name to an SVG attribute name.

    - camelCase SVG names pass through: viewBox -> viewBox
    - their snake_case spelling maps back: view_box -> viewBox
    - trailing underscore is dropped: class_ -> class
    - namespace prefixes: xlink_href -> xlink:href, xml_space -> xml:space
    - everything else becomes kebab-case: stroke_width -> stroke-width
    """
    if name in CAMEL_CASE_ATTRIBUTES:
        return name
    if name.endswith("_"):
        name = name[:-1]
    if alias := _SNAKE_CASE_ALIASES.get(name):
        return alias
    prefix, sep, rest = name.partition("_")
    if sep and rest and prefix in NAMESPACE_PREFIXES:
        return f"{prefix}:{_kebab_case(rest)}"
    return _kebab_case(name)


def static_attributes(attrs: dict[str, Any]) -> dict[str, str | None]:
    """Convert keyword attributes to an element's static attribute map."""
    return {attribute_name(key): attribute_value(value) for key, value in attrs.items()}


def _write_attributes(
    buffer: bytearray,
    attributes: dict[str, str | None],
    escape: Callable[[bytes], bytes],
) -> None:
    for name, value in attributes.items():
        if value is None:
            continue
        buffer += b" "
        buffer += name.encode("utf-8")
        if value:
            buffer += b'="'
            buffer += escape(value.encode("utf-8"))
            buffer += b'"'


@dataclass(frozen=True, slots=True)
class Element(DirectView):
    """
    An SVG element with static attributes and optional content.

    Rendering order of attributes on the opening tag:
    1. static `attributes`, in declared order
    2. attributes chained onto this element
    3. attributes bubbled up from `content`

    A `self_closing` element with no rendered content is written as `<tag .../>`.

    Tiers are not merged: a name set in two tiers is written twice, which XML
    parsers reject as a duplicate attribute. Set each name in one tier only.
    """

    tag: str
    attributes: dict[str, str | None] = field(default_factory=dict)
    content: View | None = None
    self_closing: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", dict(self.attributes))

    def _render(self, buffer: bytearray, context: Context) -> None:
        indentation = context.indentation
        chained = context.take_attributes()

        # Content renders first so the attributes it stages are known before the opening tag.
        inner = bytearray()
        bubbled: dict[str, str] = {}
        if self.content is not None:
            nested = context.nested()
            self.content._render(inner, nested)
            bubbled = nested.attributes

        if context.depth or buffer:
            buffer += context.newline
        buffer += indentation
        tag = self.tag.encode("utf-8")
        buffer += b"<" + tag
        _write_attributes(buffer, self.attributes, escape_static_attribute_value)
        _write_attributes(buffer, chained, escape_attribute_value)
        _write_attributes(buffer, bubbled, escape_attribute_value)

        if self.self_closing and not inner:
            buffer += b"/>"
            return

        buffer += b">"
        buffer += inner
        buffer += context.newline
        buffer += indentation
        buffer += b"</" + tag + b">"

    def __repr__(self) -> str:
        return (
            f"Element({self.tag!r}, attributes={list(self.attributes)},"
            f" content={self.content is not None})"
        )


def element(tag: str, *children: Any, self_closing: bool = False, **attrs: Any) -> Element:
    """Create an element with keyword attributes and positional children."""
    content = build(*children) if children else None
    return Element(tag, static_attributes(attrs), content, self_closing)


def _make_element(tag: str, self_closing: bool = False):
    """Factory for creating element functions."""

    def factory(*children: Any, **attrs: Any) -> Element:
        return element(tag, *children, self_closing=self_closing, **attrs)

    factory.__name__ = _snake_case(tag).replace("-", "_")
    factory.__doc__ = f"Create a <{tag}> element."
    return factory


# Document structure
svg = _make_element("svg")
g = _make_element("g")
defs = _make_element("defs")
symbol = _make_element("symbol")
use = _make_element("use")
title = _make_element("title")
desc = _make_element("desc")
metadata = _make_element("metadata")
switch = _make_element("switch")
a = _make_element("a")
style = _make_element("style")
foreign_object = _make_element("foreignObject")

# Basic shapes
circle = _make_element("circle")
ellipse = _make_element("ellipse")
line = _make_element("line")
polygon = _make_element("polygon")
polyline = _make_element("polyline")
rect = _make_element("rect")
path = _make_element("path")
image = _make_element("image")

# Text
text = _make_element("text")
tspan = _make_element("tspan")
text_path = _make_element("textPath")

# Paint servers
linear_gradient = _make_element("linearGradient")
radial_gradient = _make_element("radialGradient")
stop = _make_element("stop")
pattern = _make_element("pattern")

# Clipping, masking, markers
clip_path = _make_element("clipPath")
mask = _make_element("mask")
marker = _make_element("marker")

# Filters
filter_ = _make_element("filter")
fe_blend = _make_element("feBlend")
fe_color_matrix = _make_element("feColorMatrix")
fe_composite = _make_element("feComposite")
fe_flood = _make_element("feFlood")
fe_gaussian_blur = _make_element("feGaussianBlur")
fe_merge = _make_element("feMerge")
fe_merge_node = _make_element("feMergeNode")
fe_offset = _make_element("feOffset")

# Animation
animate = _make_element("animate")
animate_motion = _make_element("animateMotion")
animate_transform = _make_element("animateTransform")
set_ = _make_element("set")
