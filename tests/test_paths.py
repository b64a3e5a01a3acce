from pathlib import Path

from sebp.data import paths


def test_get_document_path_joins_default_filename(tmp_path: Path) -> None:
    assert paths.get_document_path(tmp_path) == tmp_path / "bp.sbc"


def test_get_document_path_accepts_str_and_custom_name(tmp_path: Path) -> None:
    assert paths.get_document_path(str(tmp_path), "other.sbc") == tmp_path / "other.sbc"


def test_get_thumbnail_path_missing_returns_none(tmp_path: Path) -> None:
    assert paths.get_thumbnail_path(tmp_path) is None


def test_get_thumbnail_path_existing_file(tmp_path: Path) -> None:
    thumb = tmp_path / "thumb.png"
    thumb.write_bytes(b"png")
    assert paths.get_thumbnail_path(tmp_path) == thumb


def test_get_thumbnail_path_ignores_directory_named_like_thumbnail(tmp_path: Path) -> None:
    (tmp_path / "thumb.png").mkdir()
    assert paths.get_thumbnail_path(tmp_path) is None
