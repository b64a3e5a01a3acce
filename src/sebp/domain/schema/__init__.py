"""Registry tables for the record types the codec maps field by field."""

from .block_fields import BLOCK_FIELDS, BLOCK_REGISTRY
from .grid_fields import CUBE_BLOCKS_ELEMENT, GRID_FIELDS, GRID_REGISTRY

__all__ = [
    "BLOCK_FIELDS",
    "BLOCK_REGISTRY",
    "CUBE_BLOCKS_ELEMENT",
    "GRID_FIELDS",
    "GRID_REGISTRY",
]
