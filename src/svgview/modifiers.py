"""
Chainable attribute methods available on every view.

Usage:
    circle(cx=50, cy=50, r=40).fill("red").stroke("black", width=3)

Each method is a thin call to `View.attribute`, so a chain on an attribute
wrapper extends the same wrapper instead of nesting a new one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .numbers import format_number

if TYPE_CHECKING:
    from .core import AttributeWrapper


def translate_value(x: float = 0, y: float = 0) -> str:
    return f"translate({format_number(x)}, {format_number(y)})"


def rotate_value(angle: float, cx: float | None = None, cy: float | None = None) -> str:
    if cx is not None and cy is not None:
        return f"rotate({format_number(angle)}, {format_number(cx)}, {format_number(cy)})"
    return f"rotate({format_number(angle)})"


def scale_value(x: float, y: float | None = None) -> str:
    if y is not None:
        return f"scale({format_number(x)}, {format_number(y)})"
    return f"scale({format_number(x)})"


def skew_x_value(angle: float) -> str:
    return f"skewX({format_number(angle)})"


def skew_y_value(angle: float) -> str:
    return f"skewY({format_number(angle)})"


def _modifier(name: str):
    """Factory for a method that sets one attribute."""

    def modifier(self, value: Any) -> AttributeWrapper:
        return self.attribute(name, value)

    modifier.__name__ = name.replace("-", "_")
    modifier.__doc__ = f"Set the `{name}` attribute."
    return modifier


class AttributeModifiers:
    """
    Mixin supplying named attribute setters to `View`.

    Geometry attributes (`cx`, `width`, ...) have no method form; set them with
    `attribute()` or the functions in `svgview.attributes`. Dataclass fields on
    a component must not reuse a method name from this class, since the
    inherited method would be taken as the field default.
    """

    __slots__ = ()

    # Presentation
    fill = _modifier("fill")
    fill_opacity = _modifier("fill-opacity")
    fill_rule = _modifier("fill-rule")
    stroke_width = _modifier("stroke-width")
    stroke_opacity = _modifier("stroke-opacity")
    stroke_linecap = _modifier("stroke-linecap")
    stroke_linejoin = _modifier("stroke-linejoin")
    stroke_miterlimit = _modifier("stroke-miterlimit")
    stroke_dasharray = _modifier("stroke-dasharray")
    stroke_dashoffset = _modifier("stroke-dashoffset")
    opacity = _modifier("opacity")
    color = _modifier("color")
    display = _modifier("display")
    visibility = _modifier("visibility")
    clip_path = _modifier("clip-path")
    clip_rule = _modifier("clip-rule")
    mask = _modifier("mask")
    filter = _modifier("filter")
    marker_start = _modifier("marker-start")
    marker_mid = _modifier("marker-mid")
    marker_end = _modifier("marker-end")
    stop_color = _modifier("stop-color")
    stop_opacity = _modifier("stop-opacity")
    vector_effect = _modifier("vector-effect")
    shape_rendering = _modifier("shape-rendering")

    # Text
    font_family = _modifier("font-family")
    font_size = _modifier("font-size")
    font_weight = _modifier("font-weight")
    font_style = _modifier("font-style")
    text_anchor = _modifier("text-anchor")
    dominant_baseline = _modifier("dominant-baseline")
    letter_spacing = _modifier("letter-spacing")

    # Common
    id = _modifier("id")
    class_ = _modifier("class")
    style = _modifier("style")
    transform = _modifier("transform")
    href = _modifier("href")

    def stroke(self, color: str | None, width: float | None = None) -> AttributeWrapper:
        """Set `stroke`, and `stroke-width` when a width is given."""
        return self.attribute("stroke", color).attribute("stroke-width", width)

    def translate(self, x: float = 0, y: float = 0) -> AttributeWrapper:
        return self.attribute("transform", translate_value(x, y))

    def rotate(
        self, angle: float, cx: float | None = None, cy: float | None = None
    ) -> AttributeWrapper:
        return self.attribute("transform", rotate_value(angle, cx, cy))

    def scale(self, x: float, y: float | None = None) -> AttributeWrapper:
        return self.attribute("transform", scale_value(x, y))

    def skew_x(self, angle: float) -> AttributeWrapper:
        return self.attribute("transform", skew_x_value(angle))

    def skew_y(self, angle: float) -> AttributeWrapper:
        return self.attribute("transform", skew_y_value(angle))
