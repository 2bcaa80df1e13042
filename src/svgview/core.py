"""
View abstraction, attribute staging and render entry points.

A view is an immutable value that knows how to write itself into a byte
buffer. Composite views are declared with a `body`:

    @dataclass(frozen=True)
    class Badge(View):
        label: str

        @property
        def body(self):
            return g(rect(width=80, height=20), text(self.label, x=40, y=14))

Primitive views (`Text`, `Raw`, `Element`, ...) write their output directly and
have no body.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

from .context import Configuration, Context
from .escape import escape_text
from .modifiers import AttributeModifiers
from .numbers import format_number

logger = logging.getLogger(__name__)


class ViewBodyError(RuntimeError):
    """A view was asked for a body it does not have. Indicates a broken view type."""


def attribute_value(value: Any) -> str | None:
    """
    Convert a Python value to an attribute value.

    - None or False: None (attribute omitted)
    - True or "": "" (bare attribute)
    - int/float: canonical decimal via `format_number`
    - anything else: str(value)
    """
    if value is None or value is False:
        return None
    if value is True:
        return ""
    if isinstance(value, (int, float)):
        return format_number(value)
    return str(value)


class View(AttributeModifiers):
    """Base class for everything that renders to SVG."""

    __slots__ = ()

    @property
    def body(self) -> Any:
        raise ViewBodyError(f"{type(self).__name__} must define `body` or override `_render`")

    def _render(self, buffer: bytearray, context: Context) -> None:
        from .builder import to_view

        to_view(self.body)._render(buffer, context)

    def attribute(self, name: str, value: Any = "") -> AttributeWrapper:
        """
        Stage an attribute for the nearest enclosing element.

        A None value is a no-op, an empty string renders as a bare attribute.
        """
        value = attribute_value(value)
        return AttributeWrapper(self, {name: value} if value is not None else {})

    def __str__(self) -> str:
        return render(self)

    def __bytes__(self) -> bytes:
        return render_bytes(self)

    def __html__(self) -> str:
        return render(self)


class DirectView(View):
    """A view that renders itself without a body."""

    __slots__ = ()

    @property
    def body(self) -> Any:
        raise ViewBodyError(f"{type(self).__name__} renders directly and has no body")

    def _render(self, buffer: bytearray, context: Context) -> None:
        """Write this view into `buffer`. Subclasses must override."""
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class AttributeWrapper(DirectView):
    """Stages `attributes` on the context, then renders `content`."""

    content: View
    attributes: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", dict(self.attributes))

    def attribute(self, name: str, value: Any = "") -> AttributeWrapper:
        value = attribute_value(value)
        if value is None:
            return self
        return AttributeWrapper(self.content, {**self.attributes, name: value})

    def _render(self, buffer: bytearray, context: Context) -> None:
        context.stage(self.attributes)
        self.content._render(buffer, context)


@dataclass(frozen=True, slots=True)
class Empty(DirectView):
    """Renders nothing."""

    def _render(self, buffer: bytearray, context: Context) -> None:
        pass


@dataclass(frozen=True, slots=True)
class Text(DirectView):
    """Character data, escaped on output."""

    text: str

    def _render(self, buffer: bytearray, context: Context) -> None:
        buffer += escape_text(self.text.encode("utf-8"))

    def __add__(self, other: Text) -> Text:
        if not isinstance(other, Text):
            return NotImplemented
        return Text(self.text + other.text)


@dataclass(frozen=True, slots=True)
class Raw(DirectView):
    """
    Markup emitted verbatim, without escaping.

    The caller is responsible for the content being well-formed and safe.
    """

    content: str

    def _render(self, buffer: bytearray, context: Context) -> None:
        buffer += self.content.encode("utf-8")


@dataclass(frozen=True, slots=True)
class AnyView(DirectView):
    """Type-erased wrapper around any view."""

    base: View

    def _render(self, buffer: bytearray, context: Context) -> None:
        self.base._render(buffer, context)


# Render entry points


def render_bytes(view: Any, configuration: Configuration | None = None) -> bytes:
    """Render a view (or anything `to_view` accepts) to UTF-8 bytes."""
    from .builder import to_view

    context = Context(configuration or Configuration())
    buffer = bytearray()
    to_view(view)._render(buffer, context)
    logger.debug(
        f"rendered {type(view).__name__} to {len(buffer)} bytes"
        f" indentation={context.configuration.indentation!r}"
    )
    return bytes(buffer)


def render(view: Any, configuration: Configuration | None = None) -> str:
    """Render a view to a string."""
    return render_bytes(view, configuration).decode("utf-8")


async def arender_bytes(view: Any, configuration: Configuration | None = None) -> bytes:
    """Yield to the event loop once, then render to bytes."""
    await asyncio.sleep(0)
    return render_bytes(view, configuration)


async def arender(view: Any, configuration: Configuration | None = None) -> str:
    """Yield to the event loop once, then render to a string."""
    return (await arender_bytes(view, configuration)).decode("utf-8")
