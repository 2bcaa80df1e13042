"""
Per-render state and output formatting configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict


class Configuration(BaseModel):
    """
    Output formatting for a render call.

    The defaults produce compact output with no inserted whitespace.

    Usage:
        render(view, Configuration.pretty())
        render(view, Configuration(indentation="\\t", newline="\\n"))
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    indentation: str = ""
    newline: str = ""

    @classmethod
    def compact(cls) -> Configuration:
        return cls()

    @classmethod
    def pretty(cls, indentation: str = "  ", newline: str = "\n") -> Configuration:
        return cls(indentation=indentation, newline=newline)

    @property
    def indentation_bytes(self) -> bytes:
        return self.indentation.encode("utf-8")

    @property
    def newline_bytes(self) -> bytes:
        return self.newline.encode("utf-8")


@dataclass(slots=True)
class Context:
    """
    Mutable state threaded through a single render call.

    `attributes` holds the attributes staged by wrappers that have not yet been
    written by an element. Insertion order is output order; assigning an
    existing key keeps its position.
    """

    configuration: Configuration = field(default_factory=Configuration)
    attributes: dict[str, str] = field(default_factory=dict)
    indentation: bytes = b""
    depth: int = 0
    newline: bytes = field(init=False, repr=False)
    indent_unit: bytes = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.newline = self.configuration.newline_bytes
        self.indent_unit = self.configuration.indentation_bytes

    def nested(self) -> Context:
        """Context for an element's content: no pending attributes, one level deeper."""
        return Context(
            configuration=self.configuration,
            indentation=self.indentation + self.indent_unit,
            depth=self.depth + 1,
        )

    def stage(self, attributes: dict[str, str]) -> None:
        self.attributes.update(attributes)

    def take_attributes(self) -> dict[str, str]:
        """Return the pending attributes and clear them from this context."""
        attributes, self.attributes = self.attributes, {}
        return attributes
