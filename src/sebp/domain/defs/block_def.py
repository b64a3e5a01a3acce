"""Cube block and cube grid records."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from sebp.domain.defs.record_def import MappedRecord
from sebp.domain.registry import FieldRegistry
from sebp.domain.schema import BLOCK_REGISTRY, GRID_REGISTRY

DEFAULT_BLOCK_ELEMENT = "MyObjectBuilder_CubeBlock"


@dataclass
class CubeBlock(MappedRecord):
    """One placed block; ``xsi_type`` names its concrete object builder type."""

    registry: FieldRegistry = field(default_factory=lambda: BLOCK_REGISTRY, repr=False, compare=False)
    xsi_type: str | None = None

    @property
    def subtype_name(self) -> str | None:
        return self.get_text("SubtypeName")

    @property
    def entity_id(self) -> str | None:
        return self.get_text("EntityId")

    @property
    def custom_name(self) -> str | None:
        return self.get_text("CustomName")


@dataclass
class CubeGrid(MappedRecord):
    """A rigid structure made of blocks."""

    registry: FieldRegistry = field(default_factory=lambda: GRID_REGISTRY, repr=False, compare=False)
    cube_blocks: List[CubeBlock] = field(default_factory=list)

    @property
    def subtype_name(self) -> str | None:
        return self.get_text("SubtypeName")

    @property
    def entity_id(self) -> str | None:
        return self.get_text("EntityId")

    @property
    def grid_size(self) -> str | None:
        return self.get_text("GridSizeEnum")
