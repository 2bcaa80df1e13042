"""
Composition helpers that assemble children into container views.

Usage:
    from svgview.builder import build, either, for_each, group, when

    svg(
        circle(cx=50, cy=50, r=40),
        when(show_border, lambda: rect(width=100, height=100).fill("none")),
        for_each(points, lambda p: circle(cx=p.x, cy=p.y, r=2)),
        either(dark, rect(fill="black"), rect(fill="white")),
    )

Plain Python values are accepted wherever a view is expected: strings become
escaped text, numbers are formatted, None renders nothing, shape records are
called to build their element, and lists, tuples and generators become
arrays.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, TypeVar

from .composites import Array, Conditional, OptionalView, Sequence
from .core import Empty, Text, View
from .numbers import format_number

T = TypeVar("T")


def to_view(value: Any) -> View:
    """Coerce a child value to a view."""
    from .shapes import Shape

    if isinstance(value, View):
        return value
    if value is None:
        return OptionalView(None)
    if isinstance(value, str):
        return Text(value)
    if isinstance(value, (bytes, bytearray)):
        raise TypeError("Cannot render bytes as SVG; decode them or wrap markup in Raw")
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return Text(format_number(value))
    if isinstance(value, Shape):
        return value()
    if hasattr(value, "__iter__"):
        return Array(tuple(to_view(item) for item in value))
    raise TypeError(f"Cannot render {type(value).__name__!r} as SVG")


def build(*children: Any) -> View:
    """Combine children: none is `Empty`, one is itself, more is a `Sequence`."""
    if not children:
        return Empty()
    if len(children) == 1:
        return to_view(children[0])
    return Sequence(tuple(to_view(child) for child in children))


@dataclass(frozen=True, slots=True)
class Group(View):
    """Groups children without adding an element of its own."""

    children: tuple[Any, ...]

    @property
    def body(self) -> View:
        return build(*self.children)


def group(*children: Any) -> Group:
    return Group(children)


def for_each(items: Iterable[T], fn: Callable[[T], Any]) -> Array:
    """Build one view per item."""
    return Array(tuple(to_view(fn(item)) for item in items))


def _resolve(value: Any) -> Any:
    # Shapes are callable too; calling one builds its element.
    if callable(value) and not isinstance(value, View):
        return value()
    return value


def either(condition: Any, then: Any, otherwise: Any = None) -> Conditional:
    """
    Pick one of two children.

    Callables are only invoked for the taken branch.
    """
    if condition:
        return Conditional.first(to_view(_resolve(then)))
    return Conditional.second(to_view(_resolve(otherwise)))


def when(condition: Any, content: Any) -> OptionalView:
    """Include `content` only if `condition` is truthy."""
    if not condition:
        return OptionalView(None)
    return OptionalView(to_view(_resolve(content)))
