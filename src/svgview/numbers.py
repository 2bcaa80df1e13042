"""
Canonical decimal formatting for numeric attribute values.
"""

from __future__ import annotations

import math

# Beyond this magnitude floats stop representing every integer exactly.
_MAX_EXACT_INTEGER = 2**53


def format_number(value: float | int) -> str:
    """
    Format a number as the shortest decimal that round-trips.

    Integral values drop the fractional part: `50.0` -> `"50"`, `1.50` -> `"1.5"`.
    """
    if isinstance(value, bool):
        raise TypeError(f"Expected a number, got {value!r}")
    if isinstance(value, int):
        return str(value)
    value = float(value)
    if math.isfinite(value) and value.is_integer() and abs(value) <= _MAX_EXACT_INTEGER:
        return str(int(value))
    return repr(value)
