"""
Unit suffixes for bare numeric token values.

The token category is read from the dotted path: anything under a
``duration`` path is milliseconds, spacing and sizing paths are pixels,
and every other number stays unitless (ratios, opacities, z-indexes).
"""

from __future__ import annotations

from typing import Any

DURATION_UNIT = "ms"
LENGTH_UNIT = "px"

_DURATION_MARKERS = ("duration",)
_LENGTH_MARKERS = ("space", "size", "breakpoint", "border.radius")


def is_number(value: Any) -> bool:
    """True for int and float values; booleans are not numbers here."""
    return isinstance(value, int | float) and not isinstance(value, bool)


def unit_for_path(path: str) -> str | None:
    """Pick the unit for a token path, matching substrings of the full path."""
    if any(marker in path for marker in _DURATION_MARKERS):
        return DURATION_UNIT
    if any(marker in path for marker in _LENGTH_MARKERS):
        return LENGTH_UNIT
    return None


def format_number(value: int | float) -> str:
    """Render a number the way CSS expects (``2.0`` -> ``2``)."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def annotate_unit(value: Any, path: str) -> Any:
    """
    Append a unit to a bare number based on its token path.

    Args:
        value: Resolved token value.
        path: Dotted token path, e.g. ``animation.duration.fast``.

    Returns:
        ``"200ms"``/``"4px"`` style strings for numbers in a unit category;
        the value unchanged otherwise.
    """
    if not is_number(value):
        return value
    unit = unit_for_path(path)
    if unit is None:
        return value
    return f"{format_number(value)}{unit}"
