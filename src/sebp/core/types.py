"""Shared type aliases for the core and domain layers."""
from typing import Literal

FieldKind = Literal[
    "text",
    "integer",
    "long",
    "float",
    "boolean",
    "vector3",
    "vector3_int",
    "quaternion",
    "block_orientation",
    "component_container",
    "placement",
]

__all__ = ["FieldKind"]
