"""
svgview - Composable, type-safe SVG generation

Views are immutable values that render to SVG bytes. Attributes can be set
on an element directly, chained onto any view, or staged by a child and
bubbled up to the nearest enclosing element.
"""

from .builder import Group, build, either, for_each, group, to_view, when
from .composites import Array, Conditional, OptionalView, Sequence
from .context import Configuration, Context
from .core import (
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
from .elements import Element, attribute_name, element
from .escape import escape_attribute_value, escape_static_attribute_value, escape_text
from .numbers import format_number

__version__ = "0.1.0"

__all__ = [
    # core
    "View",
    "DirectView",
    "AttributeWrapper",
    "Empty",
    "Text",
    "Raw",
    "AnyView",
    "ViewBodyError",
    "attribute_value",
    # rendering
    "Configuration",
    "Context",
    "render",
    "render_bytes",
    "arender",
    "arender_bytes",
    # containers
    "Sequence",
    "Array",
    "Conditional",
    "OptionalView",
    # composition
    "Group",
    "build",
    "group",
    "for_each",
    "either",
    "when",
    "to_view",
    # elements
    "Element",
    "element",
    "attribute_name",
    # formatting
    "format_number",
    "escape_text",
    "escape_attribute_value",
    "escape_static_attribute_value",
]

try:
    from .fastapi import SVGResponse, SVGRoute, render_svg, svg_response

    __all__ += ["SVGResponse", "SVGRoute", "render_svg", "svg_response"]

except ImportError:
    # FastAPI is an optional extra.
    pass
