"""JSON export of a decoded blueprint graph."""
from __future__ import annotations

import json
import logging
import re
from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Any, Dict, List

from sebp.domain.defs import BlueprintFile, CubeBlock, CubeGrid, MappedRecord, ShipBlueprint
from sebp.domain.unmapped import UnmappedFields
from sebp.services.errors import BlueprintWriteError

logger = logging.getLogger(__name__)

ExportPayload = Dict[str, Any]

DEFAULT_EXPORT_NAME = "blueprint"
_UNSAFE_NAME_CHARS = re.compile(r"[^a-zA-Z0-9_-]")


def _blank_record(record: MappedRecord) -> None:
    blanks = [name for name, value in record.values.items() if value == ""]
    for name in blanks:
        del record.values[name]


def blank_strings_to_none(blueprint_file: BlueprintFile) -> None:
    """Clear empty-string typed values in place. Unmapped bags are left as they are."""
    for blueprint in blueprint_file.ship_blueprints:
        if blueprint.display_name == "":
            blueprint.display_name = None
        if blueprint.id is not None:
            if blueprint.id.type == "":
                blueprint.id.type = None
            if blueprint.id.subtype == "":
                blueprint.id.subtype = None
        for grid in blueprint.cube_grids:
            _blank_record(grid)
            for block in grid.cube_blocks:
                _blank_record(block)


def _prune(value: Any) -> Any:
    if isinstance(value, dict):
        pruned = {key: _prune(item) for key, item in value.items()}
        return {key: item for key, item in pruned.items() if not _is_empty(item)}
    if isinstance(value, list):
        return [_prune(item) for item in value]
    return value


def _is_empty(value: Any) -> bool:
    return value is None or value == "" or value == {}


def _convert(value: object) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return _prune(asdict(value))
    if isinstance(value, str):
        return str(value)
    return value


def _bag_payload(fields: UnmappedFields) -> Dict[str, str]:
    return {name: str(value) for name, value in fields.items()}


def _record_payload(record: MappedRecord) -> ExportPayload:
    return {spec.name: _convert(value) for spec, value in record.populated()}


def _block_payload(block: CubeBlock) -> ExportPayload:
    return _prune(
        {
            "xsi_type": block.xsi_type,
            "fields": _record_payload(block),
            "other_fields": _bag_payload(block.other_fields),
        }
    )


def _grid_payload(grid: CubeGrid) -> ExportPayload:
    payload = _prune(
        {
            "fields": _record_payload(grid),
            "other_fields": _bag_payload(grid.other_fields),
        }
    )
    payload["cube_blocks"] = [_block_payload(block) for block in grid.cube_blocks]
    return payload


def _blueprint_payload(blueprint: ShipBlueprint) -> ExportPayload:
    payload = _prune(
        {
            "id": asdict(blueprint.id) if blueprint.id is not None else None,
            "display_name": blueprint.display_name,
            "xsi_type": blueprint.xsi_type,
            "other_fields": _bag_payload(blueprint.other_fields),
        }
    )
    payload["dlcs"] = list(blueprint.dlcs)
    payload["cube_grids"] = [_grid_payload(grid) for grid in blueprint.cube_grids]
    return payload


def to_payload(blueprint_file: BlueprintFile) -> ExportPayload:
    """Return a JSON-serializable view of the graph with empty values omitted."""
    payload: ExportPayload = {
        "ship_blueprints": [_blueprint_payload(blueprint) for blueprint in blueprint_file.ship_blueprints],
    }
    if blueprint_file.thumb_path is not None:
        payload["thumb_path"] = str(blueprint_file.thumb_path)
    return payload


def export_name(blueprint_file: BlueprintFile) -> str:
    """File stem for an export: the first display name with unsafe characters replaced."""
    name = None
    if blueprint_file.ship_blueprints:
        name = blueprint_file.ship_blueprints[0].display_name
    if name is None or not name.strip():
        return DEFAULT_EXPORT_NAME
    return _UNSAFE_NAME_CHARS.sub("_", name)


def export_json(blueprint_file: BlueprintFile, output_dir: Path | str) -> Path:
    """Write ``<name>.json`` into ``output_dir`` and return its path."""
    target = Path(output_dir) / f"{export_name(blueprint_file)}.json"
    text = json.dumps(to_payload(blueprint_file), indent=2)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise BlueprintWriteError(f"Unable to write JSON export: {target}") from exc
    logger.info("Exported blueprint JSON to %s", target)
    return target


__all__: List[str] = [
    "DEFAULT_EXPORT_NAME",
    "blank_strings_to_none",
    "export_json",
    "export_name",
    "to_payload",
]
