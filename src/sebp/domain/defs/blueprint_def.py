"""Blueprint document structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from sebp.domain.defs.block_def import CubeGrid
from sebp.domain.unmapped import UnmappedFields

SHIP_BLUEPRINT_TYPE = "MyObjectBuilder_ShipBlueprintDefinition"


@dataclass(slots=True)
class BlueprintId:
    """Identity pair stored as attributes on a definition's ``<Id>`` element."""

    type: str | None = None
    subtype: str | None = None


@dataclass
class ShipBlueprint:
    """One top-level blueprint definition (a ship or station design)."""

    id: BlueprintId | None = None
    display_name: str | None = None
    dlcs: List[str] = field(default_factory=list)
    cube_grids: List[CubeGrid] = field(default_factory=list)
    xsi_type: str | None = SHIP_BLUEPRINT_TYPE
    other_fields: UnmappedFields = field(default_factory=UnmappedFields)


@dataclass
class BlueprintFile:
    """A decoded blueprint directory."""

    ship_blueprints: List[ShipBlueprint] = field(default_factory=list)
    thumb_path: Path | None = None
