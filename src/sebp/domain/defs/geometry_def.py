"""Spatial value types used by grids and blocks."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class Vector3:
    """Floating point vector, written as x/y/z attributes."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(slots=True)
class Vector3Int:
    """Integer grid coordinate, written as x/y/z attributes."""

    x: int = 0
    y: int = 0
    z: int = 0


@dataclass(slots=True)
class Quaternion:
    """Rotation written as X/Y/Z/W child elements."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0


@dataclass(slots=True)
class BlockOrientation:
    """Base6 direction names of a block's forward and up axes."""

    forward: str | None = None
    up: str | None = None


@dataclass(slots=True)
class PositionAndOrientation:
    """World placement of a grid."""

    position: Vector3 | None = None
    forward: Vector3 | None = None
    up: Vector3 | None = None
    orientation: Quaternion | None = None
