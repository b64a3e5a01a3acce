from __future__ import annotations

import json
from pathlib import Path

from sebp import config
from sebp.config import CodecSettings, load_config, save_config


def test_load_config_missing_returns_defaults(tmp_path: Path) -> None:
    assert load_config(tmp_path / "missing.json") == CodecSettings()


def test_load_config_corrupt_returns_defaults(tmp_path: Path, caplog) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_config(path) == CodecSettings()
    assert any("Ignoring" in record.getMessage() for record in caplog.records)


def test_load_config_non_object_returns_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert load_config(path) == CodecSettings()


def test_load_config_normalizes_bad_values(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "document_filename": "../escape.sbc",
                "thumbnail_filename": "",
                "warn_unmapped": "no",
                "indent": "xx",
            }
        ),
        encoding="utf-8",
    )
    assert load_config(path) == CodecSettings()


def test_save_and_load_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "config.json"
    settings = CodecSettings(document_filename="ship.sbc", warn_unmapped=False, indent="\t")
    save_config(settings, path)
    assert load_config(path) == settings


def test_default_config_path_uses_home(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr(config.os, "name", "posix")
    monkeypatch.setattr(config.Path, "home", classmethod(lambda cls: tmp_path))
    assert config.get_default_config_path() == tmp_path / ".config" / "sebp" / "config.json"
