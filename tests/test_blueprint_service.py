from __future__ import annotations

from pathlib import Path

import pytest

from sebp.config import CodecSettings
from sebp.data.errors import BlueprintLoadError, BlueprintNotFoundError
from sebp.services.blueprint_service import BlueprintService, load_blueprint, save_blueprint
from sebp.services.errors import BlueprintWriteError

from tests.helpers.blueprint_xml import copy_shuttle, document_xml, write_blueprint_dir


def test_load_shuttle_with_thumbnail(tmp_path: Path) -> None:
    directory = copy_shuttle(tmp_path, thumbnail=True)
    blueprint_file = load_blueprint(directory)
    assert len(blueprint_file.ship_blueprints) == 1
    blueprint = blueprint_file.ship_blueprints[0]
    assert blueprint.display_name == "Shuttle"
    assert blueprint.dlcs == ["HeavyIndustry"]
    assert len(blueprint.cube_grids) == 1
    assert len(blueprint.cube_grids[0].cube_blocks) == 2
    assert blueprint_file.thumb_path == directory / "thumb.png"


def test_load_shuttle_without_thumbnail(tmp_path: Path) -> None:
    directory = copy_shuttle(tmp_path, thumbnail=False)
    blueprint_file = load_blueprint(directory)
    assert blueprint_file.thumb_path is None
    assert blueprint_file.ship_blueprints[0].display_name == "Shuttle"


def test_shuttle_definition_fields_land_in_bag(tmp_path: Path) -> None:
    blueprint = load_blueprint(copy_shuttle(tmp_path)).ship_blueprints[0]
    assert list(blueprint.other_fields) == ["WorkshopId", "OwnerSteamId", "Points"]
    cockpit = blueprint.cube_grids[0].cube_blocks[0]
    assert cockpit.xsi_type == "MyObjectBuilder_Cockpit"
    assert cockpit.custom_name == "Cockpit"
    assert cockpit.get("ComponentContainer").components[0].type_id == "MyTimerComponent"


def test_missing_document_raises_not_found(tmp_path: Path) -> None:
    with pytest.raises(BlueprintNotFoundError, match="not found"):
        load_blueprint(tmp_path)


def test_invalid_xml_raises_load_error(tmp_path: Path) -> None:
    write_blueprint_dir(tmp_path, "<Definitions><ShipBlueprints>")
    with pytest.raises(BlueprintLoadError):
        load_blueprint(tmp_path)


def test_save_creates_directory_and_reloads(tmp_path: Path) -> None:
    source = write_blueprint_dir(tmp_path / "src", document_xml(name="Probe"))
    blueprint_file = load_blueprint(source)
    target = tmp_path / "out" / "nested"
    path = save_blueprint(blueprint_file, target)
    assert path == target / "bp.sbc"
    assert path.read_bytes().startswith(b"<?xml")
    reloaded = load_blueprint(target)
    assert reloaded.ship_blueprints == blueprint_file.ship_blueprints


def test_save_overwrites_existing_document(tmp_path: Path) -> None:
    source = write_blueprint_dir(tmp_path / "src", document_xml(name="Probe"))
    target = write_blueprint_dir(tmp_path / "out", document_xml(name="Old"))
    save_blueprint(load_blueprint(source), target)
    assert load_blueprint(target).ship_blueprints[0].display_name == "Probe"


def test_custom_settings_change_filenames(tmp_path: Path) -> None:
    settings = CodecSettings(document_filename="ship.sbc", thumbnail_filename="preview.png", indent="")
    (tmp_path / "ship.sbc").write_text(document_xml(name="Custom"), encoding="utf-8")
    (tmp_path / "preview.png").write_bytes(b"png")
    service = BlueprintService(settings=settings)
    blueprint_file = service.deserialize(tmp_path)
    assert blueprint_file.thumb_path == tmp_path / "preview.png"
    out = service.serialize(blueprint_file, tmp_path / "copy")
    assert out.name == "ship.sbc"
    assert b"\n  " not in out.read_bytes()


def test_save_into_file_path_raises_write_error(tmp_path: Path) -> None:
    source = write_blueprint_dir(tmp_path / "src", document_xml())
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    with pytest.raises(BlueprintWriteError):
        save_blueprint(load_blueprint(source), blocker / "child")
