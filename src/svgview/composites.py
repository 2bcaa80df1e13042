"""
Container views: sequences, arrays, conditionals and optionals.

Containers render their members into the same buffer and context, so
attributes staged inside them keep bubbling to the enclosing element.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Literal

from .context import Context
from .core import DirectView, View


def _render_members(members: Iterable[View], buffer: bytearray, context: Context) -> None:
    """
    Render members in order, each with its own attribute scope.

    The first member sees the attributes pending on entry; later members start
    empty. Whatever a member leaves unconsumed is collected, in order, and left
    pending for the enclosing element.
    """
    leftover: dict[str, str] | None = None
    for member in members:
        if leftover is None:
            leftover = {}
        else:
            context.attributes = {}
        member._render(buffer, context)
        leftover.update(context.attributes)
    if leftover is not None:
        context.attributes = leftover


@dataclass(frozen=True, slots=True)
class Sequence(DirectView):
    """A fixed group of heterogeneous views."""

    members: tuple[View, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "members", tuple(self.members))

    def _render(self, buffer: bytearray, context: Context) -> None:
        _render_members(self.members, buffer, context)


@dataclass(frozen=True, slots=True)
class Array(DirectView):
    """Views produced by iteration, rendered in index order."""

    elements: tuple[View, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(self.elements))

    def _render(self, buffer: bytearray, context: Context) -> None:
        _render_members(self.elements, buffer, context)


@dataclass(frozen=True, slots=True)
class Conditional(DirectView):
    """The taken arm of an if/else. The other arm is never stored."""

    content: View
    branch: Literal["first", "second"] = "first"

    @classmethod
    def first(cls, content: View) -> Conditional:
        return cls(content, "first")

    @classmethod
    def second(cls, content: View) -> Conditional:
        return cls(content, "second")

    def _render(self, buffer: bytearray, context: Context) -> None:
        self.content._render(buffer, context)


@dataclass(frozen=True, slots=True)
class OptionalView(DirectView):
    """Renders `content` if present, nothing otherwise."""

    content: View | None = None

    def _render(self, buffer: bytearray, context: Context) -> None:
        if self.content is not None:
            self.content._render(buffer, context)
