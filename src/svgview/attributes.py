"""
Attribute-only views for use as children.

An attribute function renders nothing itself; the attribute it stages is
written on the nearest enclosing element:

    from svgview.attributes import fill, stroke, cx

    circle(fill("red"), stroke("black", width=3), cx(50))
    # <circle fill="red" stroke="black" stroke-width="3" cx="50"></circle>

A None value makes the function a no-op, so optional values can be passed
straight through: `cx(maybe_center)`.
"""

from __future__ import annotations

from typing import Any

from .core import AttributeWrapper, Empty
from .modifiers import rotate_value, scale_value, skew_x_value, skew_y_value, translate_value


def attribute(name: str, value: Any = "") -> AttributeWrapper:
    """Stage a single attribute on the enclosing element."""
    return Empty().attribute(name, value)


def _make_attribute(name: str):
    """Factory for creating attribute functions."""

    def setter(value: Any) -> AttributeWrapper:
        return attribute(name, value)

    setter.__name__ = name.replace("-", "_")
    setter.__doc__ = f"Stage the `{name}` attribute on the enclosing element."
    return setter


# Presentation
fill = _make_attribute("fill")
fill_opacity = _make_attribute("fill-opacity")
fill_rule = _make_attribute("fill-rule")
stroke_width = _make_attribute("stroke-width")
stroke_opacity = _make_attribute("stroke-opacity")
stroke_linecap = _make_attribute("stroke-linecap")
stroke_linejoin = _make_attribute("stroke-linejoin")
stroke_miterlimit = _make_attribute("stroke-miterlimit")
stroke_dasharray = _make_attribute("stroke-dasharray")
stroke_dashoffset = _make_attribute("stroke-dashoffset")
opacity = _make_attribute("opacity")
color = _make_attribute("color")
display = _make_attribute("display")
visibility = _make_attribute("visibility")
clip_path = _make_attribute("clip-path")
clip_rule = _make_attribute("clip-rule")
mask = _make_attribute("mask")
filter_ = _make_attribute("filter")
marker_start = _make_attribute("marker-start")
marker_mid = _make_attribute("marker-mid")
marker_end = _make_attribute("marker-end")
stop_color = _make_attribute("stop-color")
stop_opacity = _make_attribute("stop-opacity")
vector_effect = _make_attribute("vector-effect")
shape_rendering = _make_attribute("shape-rendering")

# Text
font_family = _make_attribute("font-family")
font_size = _make_attribute("font-size")
font_weight = _make_attribute("font-weight")
font_style = _make_attribute("font-style")
text_anchor = _make_attribute("text-anchor")
dominant_baseline = _make_attribute("dominant-baseline")
letter_spacing = _make_attribute("letter-spacing")

# Common
id_ = _make_attribute("id")
class_ = _make_attribute("class")
style = _make_attribute("style")
transform = _make_attribute("transform")
href = _make_attribute("href")

# Geometry
x = _make_attribute("x")
y = _make_attribute("y")
x1 = _make_attribute("x1")
y1 = _make_attribute("y1")
x2 = _make_attribute("x2")
y2 = _make_attribute("y2")
cx = _make_attribute("cx")
cy = _make_attribute("cy")
r = _make_attribute("r")
rx = _make_attribute("rx")
ry = _make_attribute("ry")
dx = _make_attribute("dx")
dy = _make_attribute("dy")
width = _make_attribute("width")
height = _make_attribute("height")
d = _make_attribute("d")
points = _make_attribute("points")
offset = _make_attribute("offset")
view_box = _make_attribute("viewBox")
preserve_aspect_ratio = _make_attribute("preserveAspectRatio")
path_length = _make_attribute("pathLength")

# Gradients, patterns, markers
gradient_units = _make_attribute("gradientUnits")
gradient_transform = _make_attribute("gradientTransform")
spread_method = _make_attribute("spreadMethod")
pattern_units = _make_attribute("patternUnits")
marker_width = _make_attribute("markerWidth")
marker_height = _make_attribute("markerHeight")
ref_x = _make_attribute("refX")
ref_y = _make_attribute("refY")
orient = _make_attribute("orient")


def stroke(color: str | None, width: float | None = None) -> AttributeWrapper:
    """Stage `stroke`, and `stroke-width` when a width is given."""
    return attribute("stroke", color).attribute("stroke-width", width)


def translate(x: float = 0, y: float = 0) -> AttributeWrapper:
    return attribute("transform", translate_value(x, y))


def rotate(angle: float, cx: float | None = None, cy: float | None = None) -> AttributeWrapper:
    return attribute("transform", rotate_value(angle, cx, cy))


def scale(x: float, y: float | None = None) -> AttributeWrapper:
    return attribute("transform", scale_value(x, y))


def skew_x(angle: float) -> AttributeWrapper:
    return attribute("transform", skew_x_value(angle))


def skew_y(angle: float) -> AttributeWrapper:
    return attribute("transform", skew_y_value(angle))
