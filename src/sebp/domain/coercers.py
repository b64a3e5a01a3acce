"""Forgiving text to value conversions shared by the decoder and encoder.

Every ``coerce_*`` helper returns ``None`` for missing, blank or malformed
input instead of raising, so a damaged scalar never aborts a decode.
"""
from __future__ import annotations

import math
import re
from typing import Callable, Mapping, Sequence, TypeVar

from sebp.domain.defs.geometry_def import BlockOrientation, Quaternion, Vector3, Vector3Int

T = TypeVar("T")

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
INT32_RANGE = (-(2**31), 2**31 - 1)
INT64_RANGE = (-(2**63), 2**63 - 1)
_TRUE = "true"
_FALSE = "false"
_POSITIVE_INFINITY = "INF"
_NEGATIVE_INFINITY = "-INF"


def _clean(raw: str | None) -> str | None:
    if raw is None:
        return None
    text = raw.strip()
    return text or None


def coerce_text(raw: str | None) -> str | None:
    """Return text unchanged; an empty element stays an empty string."""
    return raw


def _coerce_ranged_int(raw: str | None, bounds: tuple[int, int]) -> int | None:
    text = _clean(raw)
    if text is None or not _INTEGER_PATTERN.fullmatch(text):
        return None
    value = int(text)
    low, high = bounds
    if not low <= value <= high:
        return None
    return value


def coerce_int(raw: str | None) -> int | None:
    """Parse a 32-bit signed integer."""
    return _coerce_ranged_int(raw, INT32_RANGE)


def coerce_long(raw: str | None) -> int | None:
    """Parse a 64-bit signed integer."""
    return _coerce_ranged_int(raw, INT64_RANGE)


def coerce_float(raw: str | None) -> float | None:
    """Parse a float; digit separators and NaN are rejected."""
    text = _clean(raw)
    if text is None or "_" in text:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if math.isnan(value):
        return None
    return value


def coerce_bool(raw: str | None) -> bool | None:
    """Accept only ``true``/``false`` (any case)."""
    text = _clean(raw)
    if text is None:
        return None
    lowered = text.lower()
    if lowered == _TRUE:
        return True
    if lowered == _FALSE:
        return False
    return None


def _coerce_components(
    components: Mapping[str, str],
    names: Sequence[str],
    coerce: Callable[[str | None], T | None],
    fallback: T,
) -> list[T] | None:
    lowered = {key.lower(): value for key, value in components.items()}
    values: list[T] = []
    for name in names:
        raw = lowered.get(name)
        if raw is None:
            values.append(fallback)
            continue
        value = coerce(raw)
        if value is None:
            return None
        values.append(value)
    return values


def coerce_vector3(components: Mapping[str, str] | None) -> Vector3 | None:
    """Build a Vector3 from x/y/z components; absent components are 0."""
    if components is None:
        return None
    values = _coerce_components(components, ("x", "y", "z"), coerce_float, 0.0)
    if values is None:
        return None
    return Vector3(*values)


def coerce_vector3_int(components: Mapping[str, str] | None) -> Vector3Int | None:
    """Build a Vector3Int from x/y/z components; absent components are 0."""
    if components is None:
        return None
    values = _coerce_components(components, ("x", "y", "z"), coerce_int, 0)
    if values is None:
        return None
    return Vector3Int(*values)


def coerce_quaternion(components: Mapping[str, str] | None) -> Quaternion | None:
    """Build a Quaternion from X/Y/Z/W components; absent components are 0."""
    if components is None:
        return None
    values = _coerce_components(components, ("x", "y", "z", "w"), coerce_float, 0.0)
    if values is None:
        return None
    return Quaternion(*values)


def coerce_block_orientation(components: Mapping[str, str] | None) -> BlockOrientation | None:
    if components is None:
        return None
    lowered = {key.lower(): value for key, value in components.items()}
    return BlockOrientation(forward=lowered.get("forward"), up=lowered.get("up"))


def format_int(value: int) -> str:
    return str(int(value))


def format_float(value: float) -> str:
    """Shortest text that parses back to the same float; infinities use ``INF``."""
    number = float(value)
    if math.isinf(number):
        return _POSITIVE_INFINITY if number > 0 else _NEGATIVE_INFINITY
    return repr(number)


def format_bool(value: bool) -> str:
    return _TRUE if value else _FALSE


__all__ = [
    "INT32_RANGE",
    "INT64_RANGE",
    "coerce_block_orientation",
    "coerce_bool",
    "coerce_float",
    "coerce_int",
    "coerce_long",
    "coerce_quaternion",
    "coerce_text",
    "coerce_vector3",
    "coerce_vector3_int",
    "format_bool",
    "format_float",
    "format_int",
]
