"""Schema-driven conversion from a parsed blueprint document to typed records."""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Callable, Dict, Iterator, List, Mapping

from sebp.core.types import FieldKind
from sebp.data.xml_io import XSI_TYPE, inner_markup, local_name, serialize_element
from sebp.domain import coercers
from sebp.domain.defs import (
    BlueprintId,
    ComponentContainer,
    ComponentData,
    CubeBlock,
    CubeGrid,
    MappedRecord,
    PositionAndOrientation,
    ShipBlueprint,
)
from sebp.domain.registry import FieldRegistry
from sebp.domain.schema import BLOCK_REGISTRY, CUBE_BLOCKS_ELEMENT, GRID_REGISTRY
from sebp.domain.unmapped import RawMarkup, UnmappedFields

logger = logging.getLogger(__name__)

FieldReader = Callable[[ET.Element], object]

DEFINITION_ELEMENTS: tuple[str, ...] = ("Id", "DisplayName", "DLC", "CubeGrids")


def _children(element: ET.Element, name: str) -> Iterator[ET.Element]:
    lowered = name.lower()
    for child in element:
        child_name = local_name(child.tag)
        if child_name is not None and child_name.lower() == lowered:
            yield child


def _child(element: ET.Element, name: str) -> ET.Element | None:
    return next(_children(element, name), None)


def _index_children(element: ET.Element) -> Dict[str, ET.Element]:
    """Map lower-cased child names to the first child carrying them."""
    index: Dict[str, ET.Element] = {}
    for child in element:
        name = local_name(child.tag)
        if name is not None:
            index.setdefault(name.lower(), child)
    return index


def _child_texts(element: ET.Element) -> Dict[str, str]:
    texts: Dict[str, str] = {}
    for child in element:
        name = local_name(child.tag)
        if name is not None:
            texts.setdefault(name, child.text or "")
    return texts


def _attributes(element: ET.Element) -> Mapping[str, str]:
    return {local_name(key) or key: value for key, value in element.attrib.items()}


def _attribute(element: ET.Element, name: str) -> str | None:
    lowered = name.lower()
    for key, value in _attributes(element).items():
        if key.lower() == lowered:
            return value
    return None


def read_text(element: ET.Element) -> str:
    """Return an element's raw text; nested markup comes back as RawMarkup."""
    if len(element):
        return RawMarkup(inner_markup(element))
    return element.text or ""


def _read_vector3_child(index: Mapping[str, ET.Element], name: str):
    child = index.get(name)
    return coercers.coerce_vector3(_attributes(child)) if child is not None else None


def read_placement(element: ET.Element) -> PositionAndOrientation:
    index = _index_children(element)
    orientation = index.get("orientation")
    return PositionAndOrientation(
        position=_read_vector3_child(index, "position"),
        forward=_read_vector3_child(index, "forward"),
        up=_read_vector3_child(index, "up"),
        orientation=coercers.coerce_quaternion(_child_texts(orientation)) if orientation is not None else None,
    )


def _is_named(element: ET.Element, name: str) -> bool:
    tag = local_name(element.tag)
    return tag is not None and tag.lower() == name.lower()


def read_component_data(element: ET.Element) -> ComponentData:
    data = ComponentData()
    for child in element:
        if local_name(child.tag) is None:
            continue
        if _is_named(child, "TypeId") and data.type_id is None:
            data.type_id = child.text or ""
        elif _is_named(child, "Component") and data.component is None:
            data.component = serialize_element(child)
        else:
            data.other_elements.append(serialize_element(child))
    return data


def read_component_container(element: ET.Element) -> ComponentContainer:
    """Keep each component's ``<Component>`` subtree, and anything else, as serialized text."""
    container = ComponentContainer(has_components=False)
    for child in element:
        if local_name(child.tag) is None:
            continue
        if _is_named(child, "Components") and not container.has_components:
            container.has_components = True
            for entry in child:
                if local_name(entry.tag) is None:
                    continue
                if _is_named(entry, "ComponentData"):
                    container.components.append(read_component_data(entry))
                else:
                    container.other_entries.append(serialize_element(entry))
        else:
            container.other_elements.append(serialize_element(child))
    return container


_FIELD_READERS: Dict[FieldKind, FieldReader] = {
    "text": read_text,
    "integer": lambda element: coercers.coerce_int(element.text),
    "long": lambda element: coercers.coerce_long(element.text),
    "float": lambda element: coercers.coerce_float(element.text),
    "boolean": lambda element: coercers.coerce_bool(element.text),
    "vector3": lambda element: coercers.coerce_vector3(_attributes(element)),
    "vector3_int": lambda element: coercers.coerce_vector3_int(_attributes(element)),
    "quaternion": lambda element: coercers.coerce_quaternion(_child_texts(element)),
    "block_orientation": lambda element: coercers.coerce_block_orientation(_attributes(element)),
    "component_container": read_component_container,
    "placement": read_placement,
}


class BlueprintDecoder:
    """Builds the typed blueprint graph from a ``<Definitions>`` element."""

    def __init__(
        self,
        *,
        block_registry: FieldRegistry = BLOCK_REGISTRY,
        grid_registry: FieldRegistry = GRID_REGISTRY,
        report_unmapped: bool = True,
    ) -> None:
        self._block_registry = block_registry
        self._grid_registry = grid_registry
        self._report_unmapped = report_unmapped

    def decode(self, root: ET.Element) -> List[ShipBlueprint]:
        """Return every ShipBlueprint found under ``ShipBlueprints``."""
        container = _child(root, "ShipBlueprints")
        if container is None:
            return []
        return [self.decode_ship_blueprint(element) for element in _children(container, "ShipBlueprint")]

    def decode_ship_blueprint(self, element: ET.Element) -> ShipBlueprint:
        id_element = _child(element, "Id")
        blueprint_id = None
        if id_element is not None:
            blueprint_id = BlueprintId(
                type=_attribute(id_element, "Type"),
                subtype=_attribute(id_element, "Subtype"),
            )
        display_name = _child(element, "DisplayName")
        blueprint = ShipBlueprint(
            id=blueprint_id,
            display_name=read_text(display_name) if display_name is not None else None,
            dlcs=[read_text(dlc) for dlc in _children(element, "DLC")],
            xsi_type=element.get(XSI_TYPE),
        )
        grids = _child(element, "CubeGrids")
        if grids is not None:
            blueprint.cube_grids = [self.decode_grid(grid) for grid in _children(grids, "CubeGrid")]

        known = {name.lower() for name in DEFINITION_ELEMENTS}
        for child in element:
            name = local_name(child.tag)
            if name is not None and name.lower() not in known:
                blueprint.other_fields.add_if_absent(name, read_text(child))
        subtype = blueprint_id.subtype if blueprint_id is not None else None
        self._warn_unmapped("blueprint", subtype, None, blueprint.other_fields)
        return blueprint

    def decode_grid(self, element: ET.Element) -> CubeGrid:
        grid = CubeGrid(registry=self._grid_registry)
        self._decode_record(element, grid)
        blocks = _child(element, CUBE_BLOCKS_ELEMENT)
        if blocks is not None:
            grid.cube_blocks = [
                self.decode_block(block) for block in blocks if local_name(block.tag) is not None
            ]
        self._warn_unmapped("grid", grid.subtype_name, grid.entity_id, grid.other_fields)
        return grid

    def decode_block(self, element: ET.Element) -> CubeBlock:
        block = CubeBlock(registry=self._block_registry, xsi_type=element.get(XSI_TYPE))
        self._decode_record(element, block)
        self._warn_unmapped("block", block.subtype_name, block.entity_id, block.other_fields)
        return block

    @staticmethod
    def _decode_record(element: ET.Element, record: MappedRecord) -> None:
        index = _index_children(element)
        for spec in record.registry:
            child = index.get(spec.name.lower())
            if child is None:
                continue
            value = _FIELD_READERS[spec.kind](child)
            if value is not None:
                record.values[spec.name] = value

        for child in element:
            name = local_name(child.tag)
            if name is None or record.registry.is_known(name):
                continue
            record.other_fields.add_if_absent(name, read_text(child))

    def _warn_unmapped(
        self,
        kind: str,
        subtype: str | None,
        entity_id: str | None,
        fields: UnmappedFields,
    ) -> None:
        if not self._report_unmapped or not fields:
            return
        details = ", ".join(f"{name}=[{value}]" for name, value in fields.items())
        logger.warning(
            "Unmapped fields in %s %s (EntityId: %s): %s",
            kind,
            subtype or "(unknown)",
            entity_id or "(none)",
            details,
        )
