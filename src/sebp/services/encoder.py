"""Schema-driven conversion from typed records back to a blueprint document."""
from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Callable, Dict, Sequence

from sebp.core.types import FieldKind
from sebp.data.xml_io import XSD_NAMESPACE, XSI_TYPE, parse_element, parse_inner_markup
from sebp.domain import coercers
from sebp.domain.defs import (
    DEFAULT_BLOCK_ELEMENT,
    BlockOrientation,
    ComponentContainer,
    CubeBlock,
    CubeGrid,
    MappedRecord,
    PositionAndOrientation,
    Quaternion,
    ShipBlueprint,
    Vector3,
    Vector3Int,
)
from sebp.domain.schema import CUBE_BLOCKS_ELEMENT
from sebp.domain.unmapped import RawMarkup, UnmappedFields
from sebp.services.errors import BlueprintWriteError

FieldWriter = Callable[[str, object], ET.Element]


def write_text(name: str, value: str) -> ET.Element:
    """Rebuild an element from raw text; RawMarkup becomes child elements again."""
    if isinstance(value, RawMarkup):
        return parse_inner_markup(name, value)
    element = ET.Element(name)
    element.text = value
    return element


def _write_scalar(format_value: Callable[[object], str]) -> FieldWriter:
    def writer(name: str, value: object) -> ET.Element:
        element = ET.Element(name)
        element.text = format_value(value)
        return element

    return writer


def write_vector3(name: str, vector: Vector3) -> ET.Element:
    return ET.Element(
        name,
        {
            "x": coercers.format_float(vector.x),
            "y": coercers.format_float(vector.y),
            "z": coercers.format_float(vector.z),
        },
    )


def write_vector3_int(name: str, vector: Vector3Int) -> ET.Element:
    return ET.Element(
        name,
        {
            "x": coercers.format_int(vector.x),
            "y": coercers.format_int(vector.y),
            "z": coercers.format_int(vector.z),
        },
    )


def write_quaternion(name: str, quaternion: Quaternion) -> ET.Element:
    element = ET.Element(name)
    for component, value in (
        ("X", quaternion.x),
        ("Y", quaternion.y),
        ("Z", quaternion.z),
        ("W", quaternion.w),
    ):
        ET.SubElement(element, component).text = coercers.format_float(value)
    return element


def write_block_orientation(name: str, orientation: BlockOrientation) -> ET.Element:
    element = ET.Element(name)
    if orientation.forward is not None:
        element.set("Forward", orientation.forward)
    if orientation.up is not None:
        element.set("Up", orientation.up)
    return element


def write_component_container(name: str, container: ComponentContainer) -> ET.Element:
    """Replay stored component subtrees; unmodelled children follow the modelled ones."""
    element = ET.Element(name)
    if container.has_components or container.components or container.other_entries:
        components = ET.SubElement(element, "Components")
        for data in container.components:
            data_element = ET.SubElement(components, "ComponentData")
            if data.type_id is not None:
                ET.SubElement(data_element, "TypeId").text = data.type_id
            if data.component is not None:
                data_element.append(parse_element(data.component))
            for markup in data.other_elements:
                data_element.append(parse_element(markup))
        for markup in container.other_entries:
            components.append(parse_element(markup))
    for markup in container.other_elements:
        element.append(parse_element(markup))
    return element


def write_placement(name: str, placement: PositionAndOrientation) -> ET.Element:
    element = ET.Element(name)
    for child_name, vector in (
        ("Position", placement.position),
        ("Forward", placement.forward),
        ("Up", placement.up),
    ):
        if vector is not None:
            element.append(write_vector3(child_name, vector))
    if placement.orientation is not None:
        element.append(write_quaternion("Orientation", placement.orientation))
    return element


_FIELD_WRITERS: Dict[FieldKind, FieldWriter] = {
    "text": write_text,
    "integer": _write_scalar(coercers.format_int),
    "long": _write_scalar(coercers.format_int),
    "float": _write_scalar(coercers.format_float),
    "boolean": _write_scalar(coercers.format_bool),
    "vector3": write_vector3,
    "vector3_int": write_vector3_int,
    "quaternion": write_quaternion,
    "block_orientation": write_block_orientation,
    "component_container": write_component_container,
    "placement": write_placement,
}


class BlueprintEncoder:
    """Builds a ``<Definitions>`` element tree from the typed blueprint graph."""

    def encode(self, ship_blueprints: Sequence[ShipBlueprint]) -> ET.Element:
        root = ET.Element("Definitions", {"xmlns:xsd": XSD_NAMESPACE})
        container = ET.SubElement(root, "ShipBlueprints")
        for blueprint in ship_blueprints:
            container.append(self.encode_ship_blueprint(blueprint))
        return root

    def encode_ship_blueprint(self, blueprint: ShipBlueprint) -> ET.Element:
        attrib = {XSI_TYPE: blueprint.xsi_type} if blueprint.xsi_type is not None else {}
        element = ET.Element("ShipBlueprint", attrib)
        if blueprint.id is not None:
            id_attrib: Dict[str, str] = {}
            if blueprint.id.type is not None:
                id_attrib["Type"] = blueprint.id.type
            if blueprint.id.subtype is not None:
                id_attrib["Subtype"] = blueprint.id.subtype
            ET.SubElement(element, "Id", id_attrib)
        if blueprint.display_name is not None:
            element.append(self._write_field("DisplayName", write_text, blueprint.display_name))
        for dlc in blueprint.dlcs:
            element.append(self._write_field("DLC", write_text, dlc))
        self._append_unmapped(element, blueprint.other_fields)
        grids = ET.SubElement(element, "CubeGrids")
        for grid in blueprint.cube_grids:
            grids.append(self.encode_grid(grid))
        return element

    def encode_grid(self, grid: CubeGrid) -> ET.Element:
        element = ET.Element("CubeGrid")
        self._encode_record(element, grid)
        blocks = ET.SubElement(element, CUBE_BLOCKS_ELEMENT)
        for block in grid.cube_blocks:
            blocks.append(self.encode_block(block))
        self._append_unmapped(element, grid.other_fields)
        return element

    def encode_block(self, block: CubeBlock) -> ET.Element:
        attrib = {XSI_TYPE: block.xsi_type} if block.xsi_type is not None else {}
        element = ET.Element(DEFAULT_BLOCK_ELEMENT, attrib)
        self._encode_record(element, block)
        self._append_unmapped(element, block.other_fields)
        return element

    def _encode_record(self, element: ET.Element, record: MappedRecord) -> None:
        for spec, value in record.populated():
            element.append(self._write_field(spec.name, _FIELD_WRITERS[spec.kind], value))

    def _append_unmapped(self, element: ET.Element, fields: UnmappedFields) -> None:
        for name, value in fields.items():
            element.append(self._write_field(name, write_text, value))

    @staticmethod
    def _write_field(name: str, writer: FieldWriter, value: object) -> ET.Element:
        try:
            return writer(name, value)
        except ET.ParseError as exc:
            raise BlueprintWriteError(f"Field '{name}' holds markup that cannot be parsed: {exc}") from exc
        except (AttributeError, TypeError, ValueError) as exc:
            raise BlueprintWriteError(f"Field '{name}' holds a value of the wrong type: {value!r}") from exc
