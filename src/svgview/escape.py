"""
XML escaping for text content and attribute values.

All functions work on UTF-8 encoded bytes. The escaped characters are ASCII,
which never occur inside a multi-byte UTF-8 sequence, so non-ASCII text passes
through untouched.
"""

from __future__ import annotations


# Ampersand goes first so the entities produced by later replacements are not escaped again.
_TEXT_ENTITIES: tuple[tuple[bytes, bytes], ...] = (
    (b"&", b"&amp;"),
    (b"<", b"&lt;"),
    (b">", b"&gt;"),
    (b'"', b"&quot;"),
    (b"'", b"&apos;"),
)

# Static attributes leave the apostrophe alone.
_STATIC_ATTRIBUTE_ENTITIES: tuple[tuple[bytes, bytes], ...] = (
    (b"&", b"&amp;"),
    (b"<", b"&lt;"),
    (b">", b"&gt;"),
    (b'"', b"&quot;"),
)

_SPECIAL = frozenset(b"&<>\"'")


def _replace(value: bytes, entities: tuple[tuple[bytes, bytes], ...]) -> bytes:
    if _SPECIAL.isdisjoint(value):
        return value
    for char, entity in entities:
        value = value.replace(char, entity)
    return value


def escape_text(value: bytes) -> bytes:
    """Escape `& < > " '` for use as XML character data."""
    return _replace(value, _TEXT_ENTITIES)


def escape_attribute_value(value: bytes) -> bytes:
    """
    Escape a method-chained or bubbled attribute value.

    Escapes the same five characters as `escape_text`.
    """
    return _replace(value, _TEXT_ENTITIES)


def escape_static_attribute_value(value: bytes) -> bytes:
    """
    Escape an element's static attribute value.

    Only `& < > "` are escaped; an apostrophe is emitted as is. The value is
    always written inside double quotes, so the output stays well-formed.
    """
    return _replace(value, _STATIC_ATTRIBUTE_ENTITIES)
