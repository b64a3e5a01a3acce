"""Domain definition exports."""

from .block_def import DEFAULT_BLOCK_ELEMENT, CubeBlock, CubeGrid
from .blueprint_def import SHIP_BLUEPRINT_TYPE, BlueprintFile, BlueprintId, ShipBlueprint
from .component_def import ComponentContainer, ComponentData
from .geometry_def import BlockOrientation, PositionAndOrientation, Quaternion, Vector3, Vector3Int
from .record_def import MappedRecord

__all__ = [
    "DEFAULT_BLOCK_ELEMENT",
    "SHIP_BLUEPRINT_TYPE",
    "BlockOrientation",
    "BlueprintFile",
    "BlueprintId",
    "ComponentContainer",
    "ComponentData",
    "CubeBlock",
    "CubeGrid",
    "MappedRecord",
    "PositionAndOrientation",
    "Quaternion",
    "ShipBlueprint",
    "Vector3",
    "Vector3Int",
]
