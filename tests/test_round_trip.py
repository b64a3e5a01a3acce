from __future__ import annotations

import xml.etree.ElementTree as ET

from sebp.data.xml_io import XSI_TYPE, load_xml, write_xml
from sebp.domain.unmapped import RawMarkup
from sebp.services.decoder import BlueprintDecoder
from sebp.services.encoder import BlueprintEncoder

from tests.helpers.blueprint_xml import SHUTTLE_DIR, block_xml, parse_document


def _reencode(root: ET.Element) -> ET.Element:
    decoded = BlueprintDecoder(report_unmapped=False).decode(root)
    return BlueprintEncoder().encode(decoded)


def test_round_trip_is_idempotent_for_fixture(tmp_path) -> None:
    decoder = BlueprintDecoder(report_unmapped=False)
    original = decoder.decode(load_xml(SHUTTLE_DIR / "bp.sbc"))
    first_path = tmp_path / "first.sbc"
    write_xml(BlueprintEncoder().encode(original), first_path)
    once = decoder.decode(load_xml(first_path))
    assert once == original

    second_path = tmp_path / "second.sbc"
    write_xml(BlueprintEncoder().encode(once), second_path)
    assert second_path.read_bytes() == first_path.read_bytes()


def test_round_trip_keeps_unknown_and_nested_fields() -> None:
    root = parse_document(
        [
            block_xml(
                "<SubtypeName>Probe</SubtypeName>"
                "<FooBar>42</FooBar>"
                "<Toolbar><Slots><Slot><Index>0</Index></Slot></Slots></Toolbar>"
                "<Mystery><Inner>value &amp; more</Inner></Mystery>"
            )
        ]
    )
    block = BlueprintDecoder(report_unmapped=False).decode(_reencode(root))[0].cube_grids[0].cube_blocks[0]
    assert block.other_fields["FooBar"] == "42"
    assert block.get("Toolbar") == RawMarkup("<Slots><Slot><Index>0</Index></Slot></Slots>")
    assert block.other_fields["Mystery"] == "<Inner>value &amp; more</Inner>"


def test_round_trip_keeps_block_xsi_type() -> None:
    root = parse_document([block_xml("<SubtypeName>Door</SubtypeName>", xsi_type="MyObjectBuilder_Door")])
    encoded = _reencode(root)
    block = encoded.find("ShipBlueprints/ShipBlueprint/CubeGrids/CubeGrid/CubeBlocks/MyObjectBuilder_CubeBlock")
    assert block.get(XSI_TYPE) == "MyObjectBuilder_Door"


def test_round_trip_drops_malformed_scalars() -> None:
    root = parse_document([block_xml("<Enabled>notabool</Enabled><CustomName>Hinge</CustomName>")])
    block = _reencode(root).find(
        "ShipBlueprints/ShipBlueprint/CubeGrids/CubeGrid/CubeBlocks/MyObjectBuilder_CubeBlock"
    )
    assert block.find("Enabled") is None
    assert block.find("CustomName").text == "Hinge"


def _decode_file(path) -> list:
    return BlueprintDecoder(report_unmapped=False).decode(load_xml(path))


def test_carriage_returns_in_text_survive_a_file_round_trip(tmp_path) -> None:
    root = parse_document(
        [
            block_xml(
                "<CustomName>line&#13;&#10;two</CustomName>"
                "<CustomData>a&#13;&#10;b</CustomData>"
                "<Script><Line>x&#13;y</Line></Script>"
            )
        ]
    )
    first = BlueprintDecoder(report_unmapped=False).decode(root)
    block = first[0].cube_grids[0].cube_blocks[0]
    assert block.custom_name == "line\r\ntwo"
    assert block.other_fields["CustomData"] == "a\r\nb"

    path = tmp_path / "bp.sbc"
    write_xml(BlueprintEncoder().encode(first), path)
    assert b"&#13;" in path.read_bytes()
    assert b"\r" not in path.read_bytes()
    second = _decode_file(path)
    assert second == first


def test_component_container_keeps_unmodelled_children(tmp_path) -> None:
    root = parse_document(
        [
            block_xml(
                "<ComponentContainer><Components>"
                "<ComponentData><TypeId>T</TypeId><Extra>keep-me</Extra><Component><A>1</A></Component></ComponentData>"
                "<Note>entry</Note>"
                "</Components><Sibling>also</Sibling></ComponentContainer>"
            )
        ]
    )
    first = BlueprintDecoder(report_unmapped=False).decode(root)
    path = tmp_path / "bp.sbc"
    write_xml(BlueprintEncoder().encode(first), path)
    text = path.read_text(encoding="utf-8")
    assert "keep-me" in text
    assert "also" in text
    assert "entry" in text

    second = _decode_file(path)
    assert second == first
    container = second[0].cube_grids[0].cube_blocks[0].get("ComponentContainer")
    assert container.components[0].type_id == "T"
    assert container.components[0].other_elements == ["<Extra>keep-me</Extra>"]
    assert container.other_entries == ["<Note>entry</Note>"]
    assert container.other_elements == ["<Sibling>also</Sibling>"]


def test_component_container_without_components_stays_without() -> None:
    root = parse_document([block_xml("<ComponentContainer><Sibling>also</Sibling></ComponentContainer>")])
    container_element = _reencode(root).find(
        "ShipBlueprints/ShipBlueprint/CubeGrids/CubeGrid/CubeBlocks/MyObjectBuilder_CubeBlock/ComponentContainer"
    )
    assert [child.tag for child in container_element] == ["Sibling"]
