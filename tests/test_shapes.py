"""
Tests for typed shape records.
"""

from dataclasses import dataclass
from typing import ClassVar

import pytest
from svgview import Element, render
from svgview.shapes import (
    SVG,
    Circle,
    Defs,
    G,
    LinearGradient,
    Marker,
    Path,
    Polygon,
    Rect,
    Shape,
    Stop,
    Text,
    Title,
    Use,
    ViewBox,
    format_points,
    shape_attributes,
)


@dataclass(frozen=True)
class Dot(Shape):
    tag_name: ClassVar[str] = "circle"
    is_self_closing: ClassVar[bool] = True

    r: float = 1

    def attributes(self):
        return [("r", self.r)]


class TestShapeAttributes:
    def test_declaration_order(self):
        assert shape_attributes(Circle(cx=50, cy=50, r=40)) == {
            "cx": "50",
            "cy": "50",
            "r": "40",
        }

    def test_absent_fields_skipped(self):
        assert shape_attributes(Rect(width=10, height=5)) == {
            "x": "0",
            "y": "0",
            "width": "10",
            "height": "5",
        }

    def test_names_converted(self):
        attrs = shape_attributes(Path(d="M0 0L10 10", fill_rule="evenodd", path_length=100))
        assert list(attrs) == ["d", "fill-rule", "pathLength"]

    def test_base_requires_attributes(self):
        with pytest.raises(NotImplementedError):
            Shape().attributes()


class TestShapeElements:
    def test_minimal_circle(self):
        assert render(Circle(cx=50, cy=50, r=40)()) == (
            '<circle cx="50" cy="50" r="40"></circle>'
        )

    def test_returns_element(self):
        el = Circle(r=1)()
        assert isinstance(el, Element)
        assert el.content is None

    def test_document(self):
        view = SVG(width=100, height=100, view_box=ViewBox(0, 0, 100, 100))(
            Circle(cx=50, cy=50, r=40)().fill("blue")
        )
        assert render(view) == (
            '<svg width="100" height="100" viewBox="0 0 100 100">'
            '<circle cx="50" cy="50" r="40" fill="blue"></circle>'
            "</svg>"
        )

    def test_xmlns_first(self):
        view = SVG(width=10, xmlns="http://www.w3.org/2000/svg")()
        assert render(view) == '<svg xmlns="http://www.w3.org/2000/svg" width="10"></svg>'

    def test_points(self):
        assert render(Polygon(points=[(0, 0), (10, 5.5)])()) == (
            '<polygon points="0,0 10,5.5"></polygon>'
        )

    def test_text_content_escaped(self):
        assert render(Text(text="Hi & bye", x=10, text_anchor="end")()) == (
            '<text x="10" text-anchor="end">Hi &amp; bye</text>'
        )

    def test_content_before_children(self):
        view = Title(text="Chart")(" (draft)")
        assert render(view) == "<title>Chart (draft)</title>"

    def test_gradient(self):
        view = Defs()(
            LinearGradient(id="fade", x2=1, gradient_units="objectBoundingBox")(
                Stop(offset=0, stop_color="white")(),
                Stop(offset=1, stop_color="white", stop_opacity=0)(),
            )
        )
        assert render(view) == (
            "<defs>"
            '<linearGradient id="fade" x2="1" gradientUnits="objectBoundingBox">'
            '<stop offset="0" stop-color="white"></stop>'
            '<stop offset="1" stop-color="white" stop-opacity="0"></stop>'
            "</linearGradient>"
            "</defs>"
        )

    def test_marker(self):
        view = Marker(id="arrow", marker_width=6, marker_height=6, ref_x=3, ref_y=3, orient="auto")
        assert render(view()) == (
            '<marker id="arrow" markerWidth="6" markerHeight="6" refX="3" refY="3"'
            ' orient="auto"></marker>'
        )

    def test_group_and_use(self):
        view = G(id="layer", transform="translate(1, 1)")(Use(href="#arrow", x=5)())
        assert render(view) == (
            '<g id="layer" transform="translate(1, 1)"><use href="#arrow" x="5"></use></g>'
        )

    def test_self_closing_shape(self):
        assert render(Dot(r=2)()) == '<circle r="2"/>'
        assert render(Dot()("x")) == '<circle r="1">x</circle>'

    def test_uncalled_shape_child(self):
        view = SVG(width=1)(Circle(r=1), G(id="layer"))
        assert render(view) == (
            '<svg width="1"><circle cx="0" cy="0" r="1"></circle><g id="layer"></g></svg>'
        )


class TestHelpers:
    def test_view_box(self):
        assert str(ViewBox(0, 0, 200, 100)) == "0 0 200 100"
        assert str(ViewBox(-0.5, 0, 1.25, 1)) == "-0.5 0 1.25 1"

    def test_format_points(self):
        assert format_points([(1, 2), (3.5, 4)]) == "1,2 3.5,4"
        assert format_points("0,0 1,1") == "0,0 1,1"
        assert format_points(None) is None
