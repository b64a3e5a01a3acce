"""Data layer utilities for locating and parsing blueprint documents."""

from .errors import BlueprintError, BlueprintLoadError, BlueprintNotFoundError, SchemaError
from .paths import DOCUMENT_FILENAME, THUMBNAIL_FILENAME, get_document_path, get_thumbnail_path

__all__ = [
    "BlueprintError",
    "BlueprintLoadError",
    "BlueprintNotFoundError",
    "SchemaError",
    "DOCUMENT_FILENAME",
    "THUMBNAIL_FILENAME",
    "get_document_path",
    "get_thumbnail_path",
]
