"""Known cube grid fields. ``CubeBlocks`` is structural and handled by the codec."""
from __future__ import annotations

from sebp.domain.registry import FieldRegistry, FieldSpec

CUBE_BLOCKS_ELEMENT = "CubeBlocks"

GRID_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("SubtypeName", "text"),
    FieldSpec("EntityId", "text"),
    FieldSpec("PersistentFlags", "text"),
    FieldSpec("PositionAndOrientation", "placement"),
    FieldSpec("LocalPositionAndOrientation", "text"),
    FieldSpec("GridSizeEnum", "text"),
)

GRID_REGISTRY = FieldRegistry(GRID_FIELDS, reserved=(CUBE_BLOCKS_ELEMENT,))

__all__ = ["CUBE_BLOCKS_ELEMENT", "GRID_FIELDS", "GRID_REGISTRY"]
