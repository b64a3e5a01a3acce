"""Console rendering for decoded blueprints."""
from __future__ import annotations

from typing import List

from sebp.domain.defs import BlueprintFile, CubeBlock, CubeGrid, ShipBlueprint


def _or_blank(value: object | None) -> str:
    return "" if value is None else str(value)


def format_block_line(block: CubeBlock) -> str:
    return (
        f"    Block: {_or_blank(block.subtype_name)}, Type: {_or_blank(block.xsi_type)}, "
        f"EntityId: {_or_blank(block.entity_id)}"
    )


def format_grid_line(grid: CubeGrid) -> str:
    return f"  Grid EntityId: {_or_blank(grid.entity_id)}, Blocks: {len(grid.cube_blocks)}"


def format_blueprint_line(blueprint: ShipBlueprint) -> str:
    return f"Blueprint: {_or_blank(blueprint.display_name)}, Grids: {len(blueprint.cube_grids)}"


def summary_lines(blueprint_file: BlueprintFile) -> List[str]:
    """Return the summary printed after loading a blueprint directory."""
    lines = [f"Loaded {len(blueprint_file.ship_blueprints)} blueprint(s)."]
    if blueprint_file.thumb_path is not None:
        lines.append(f"Thumbnail found: {blueprint_file.thumb_path}")
    else:
        lines.append("No thumbnail found.")
    for blueprint in blueprint_file.ship_blueprints:
        lines.append(format_blueprint_line(blueprint))
        for grid in blueprint.cube_grids:
            lines.append(format_grid_line(grid))
            lines.extend(format_block_line(block) for block in grid.cube_blocks)
    return lines


def render_summary(blueprint_file: BlueprintFile) -> None:
    for line in summary_lines(blueprint_file):
        print(line)
