"""Codec settings persisted as a small JSON file."""
from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass
from pathlib import Path

from sebp.data.paths import DOCUMENT_FILENAME, THUMBNAIL_FILENAME

logger = logging.getLogger(__name__)

_DEFAULT_INDENT = "  "


@dataclass(slots=True)
class CodecSettings:
    """File names and output options used when loading and saving blueprints."""

    document_filename: str = DOCUMENT_FILENAME
    thumbnail_filename: str = THUMBNAIL_FILENAME
    warn_unmapped: bool = True
    indent: str = _DEFAULT_INDENT


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "sebp"
        return Path.home() / "sebp"
    return Path.home() / ".config" / "sebp"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def _normalize_filename(value: object, default: str) -> str:
    if isinstance(value, str) and value.strip() and Path(value).name == value:
        return value
    return default


def _normalize_indent(value: object) -> str:
    if isinstance(value, str) and not value.strip():
        return value
    return _DEFAULT_INDENT


def _normalize(raw: dict) -> CodecSettings:
    warn_unmapped = raw.get("warn_unmapped")
    return CodecSettings(
        document_filename=_normalize_filename(raw.get("document_filename"), DOCUMENT_FILENAME),
        thumbnail_filename=_normalize_filename(raw.get("thumbnail_filename"), THUMBNAIL_FILENAME),
        warn_unmapped=warn_unmapped if isinstance(warn_unmapped, bool) else True,
        indent=_normalize_indent(raw.get("indent")),
    )


def load_config(path: Path | None = None) -> CodecSettings:
    """Load settings from disk or return defaults."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return CodecSettings()
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", config_path, exc)
        return CodecSettings()
    if not isinstance(raw, dict):
        logger.warning("Ignoring config %s: expected a JSON object", config_path)
        return CodecSettings()
    return _normalize(raw)


def save_config(settings: CodecSettings, path: Path | None = None) -> None:
    """Persist settings to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = asdict(_normalize(asdict(settings)))
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
