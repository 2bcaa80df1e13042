"""
Tests for svgview core functionality.
"""

from dataclasses import dataclass

import pytest
from svgview import (
    AnyView,
    AttributeWrapper,
    DirectView,
    Empty,
    Raw,
    Text,
    View,
    ViewBodyError,
    arender,
    arender_bytes,
    attribute_value,
    render,
    render_bytes,
)
from svgview.elements import circle, g, rect, text


@dataclass(frozen=True)
class Badge(View):
    label: str

    @property
    def body(self):
        return g(rect(width=80, height=20), text(self.label, x=40, y=14))


class TestAttributeValue:
    def test_none_and_false_omit(self):
        assert attribute_value(None) is None
        assert attribute_value(False) is None

    def test_true_is_bare(self):
        assert attribute_value(True) == ""

    def test_numbers(self):
        assert attribute_value(40) == "40"
        assert attribute_value(0.5) == "0.5"
        assert attribute_value(2.0) == "2"

    def test_other_values_stringified(self):
        assert attribute_value("red") == "red"


class TestViewBody:
    def test_composite_renders_body(self):
        assert render(Badge("OK")) == (
            '<g><rect width="80" height="20"></rect><text x="40" y="14">OK</text></g>'
        )

    def test_chained_attribute_lands_on_body_element(self):
        assert render(Badge("OK").fill("red")).startswith('<g fill="red">')

    def test_missing_body_raises(self):
        class Broken(View):
            pass

        with pytest.raises(ViewBodyError):
            render(Broken())

    def test_direct_view_has_no_body(self):
        with pytest.raises(ViewBodyError):
            DirectView().body
        with pytest.raises(ViewBodyError):
            Text("x").body

    def test_direct_view_must_render(self):
        with pytest.raises(NotImplementedError):
            render(DirectView())


class TestAttributeWrapper:
    def test_attribute_wraps(self):
        wrapped = circle().attribute("fill", "red")
        assert isinstance(wrapped, AttributeWrapper)
        assert wrapped.attributes == {"fill": "red"}

    def test_chain_extends_same_wrapper(self):
        wrapped = circle().fill("red").stroke_width(2)
        assert isinstance(wrapped.content, type(circle()))
        assert wrapped.attributes == {"fill": "red", "stroke-width": "2"}

    def test_update_keeps_position(self):
        view = circle().attribute("x", "1").attribute("y", "2").attribute("x", "3")
        assert render(view) == '<circle x="3" y="2"></circle>'

    def test_none_is_noop(self):
        wrapped = circle().fill("red")
        assert wrapped.attribute("stroke", None) is wrapped
        assert render(circle().fill(None)) == "<circle></circle>"

    def test_bare_attribute(self):
        assert render(circle().attribute("hidden")) == "<circle hidden></circle>"

    def test_wrapper_is_immutable(self):
        base = circle().fill("red")
        base.stroke("black")
        assert base.attributes == {"fill": "red"}

    def test_wrapper_copies_attributes(self):
        attrs = {"fill": "red"}
        wrapped = AttributeWrapper(circle(), attrs)
        attrs["fill"] = "blue"
        assert render(wrapped) == '<circle fill="red"></circle>'

    def test_rendering_does_not_mutate(self):
        view = g(circle().fill("red"), Empty().attribute("stroke", "blue"))
        first = render(view)
        assert render(view) == first


class TestPrimitives:
    def test_empty_renders_nothing(self):
        assert render(Empty()) == ""
        assert render(g(Empty())) == "<g></g>"

    def test_text_escaped(self):
        assert render(Text("a < b & c")) == "a &lt; b &amp; c"

    def test_text_concatenation(self):
        assert Text("Hello, ") + Text("world") == Text("Hello, world")

    def test_text_add_rejects_str(self):
        with pytest.raises(TypeError):
            Text("a") + "b"

    def test_raw_passes_through(self):
        markup = "<path d='M0 0'/>"
        assert render(g(Raw(markup))) == f"<g>{markup}</g>"

    def test_any_view(self):
        assert render(AnyView(circle(r=1))) == render(circle(r=1))

    def test_any_view_forwards_attributes(self):
        assert render(AnyView(circle()).fill("red")) == '<circle fill="red"></circle>'


class TestRender:
    def test_render_bytes(self):
        assert render_bytes(circle(r=2)) == b'<circle r="2"></circle>'

    def test_render_plain_values(self):
        assert render("a<b") == "a&lt;b"
        assert render(None) == ""
        assert render([circle(), rect()]) == "<circle></circle><rect></rect>"

    def test_utf8_output(self):
        assert render_bytes(Text("✓")) == "✓".encode("utf-8")

    def test_dunder_conversions(self):
        view = circle(r=1)
        assert str(view) == '<circle r="1"></circle>'
        assert bytes(view) == b'<circle r="1"></circle>'
        assert view.__html__() == '<circle r="1"></circle>'

    @pytest.mark.asyncio
    async def test_arender(self):
        assert await arender(circle(r=1)) == '<circle r="1"></circle>'

    @pytest.mark.asyncio
    async def test_arender_bytes(self):
        assert await arender_bytes(Badge("x")) == render_bytes(Badge("x"))
