"""Helpers for resolving blueprint file locations."""
from __future__ import annotations

from pathlib import Path

DOCUMENT_FILENAME = "bp.sbc"
THUMBNAIL_FILENAME = "thumb.png"


def get_document_path(directory: Path | str, filename: str = DOCUMENT_FILENAME) -> Path:
    """Return the path of the primary blueprint document inside a directory."""
    return Path(directory) / filename


def get_thumbnail_path(directory: Path | str, filename: str = THUMBNAIL_FILENAME) -> Path | None:
    """Return the thumbnail path if the image exists, otherwise None."""
    path = Path(directory) / filename
    return path if path.is_file() else None
