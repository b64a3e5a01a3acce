"""Loading and saving blueprint directories (``bp.sbc`` plus optional ``thumb.png``)."""
from __future__ import annotations

import logging
from pathlib import Path

from sebp.config import CodecSettings
from sebp.data import paths
from sebp.data.errors import BlueprintNotFoundError
from sebp.data.xml_io import load_xml, write_xml
from sebp.domain.defs import BlueprintFile
from sebp.services.decoder import BlueprintDecoder
from sebp.services.encoder import BlueprintEncoder
from sebp.services.errors import BlueprintWriteError

logger = logging.getLogger(__name__)


class BlueprintService:
    """Converts blueprint directories to/from the typed blueprint graph."""

    def __init__(
        self,
        *,
        settings: CodecSettings | None = None,
        decoder: BlueprintDecoder | None = None,
        encoder: BlueprintEncoder | None = None,
    ) -> None:
        self._settings = settings or CodecSettings()
        self._decoder = decoder or BlueprintDecoder(report_unmapped=self._settings.warn_unmapped)
        self._encoder = encoder or BlueprintEncoder()

    def deserialize(self, directory: Path | str) -> BlueprintFile:
        """Load a blueprint directory; a missing document is the only hard failure."""
        document_path = paths.get_document_path(directory, self._settings.document_filename)
        if not document_path.is_file():
            raise BlueprintNotFoundError(f"Blueprint file not found: {document_path}")
        logger.info("Loading blueprint from %s", document_path)
        root = load_xml(document_path)
        blueprints = self._decoder.decode(root)
        thumb_path = paths.get_thumbnail_path(directory, self._settings.thumbnail_filename)
        logger.debug("Decoded %d blueprint(s); thumbnail: %s", len(blueprints), thumb_path)
        return BlueprintFile(ship_blueprints=blueprints, thumb_path=thumb_path)

    def serialize(self, blueprint_file: BlueprintFile, directory: Path | str) -> Path:
        """Write ``bp.sbc`` into ``directory`` (created if needed) and return its path."""
        root = self._encoder.encode(blueprint_file.ship_blueprints)
        document_path = paths.get_document_path(directory, self._settings.document_filename)
        try:
            document_path.parent.mkdir(parents=True, exist_ok=True)
            write_xml(root, document_path, indent=self._settings.indent)
        except OSError as exc:
            raise BlueprintWriteError(f"Unable to write blueprint file: {document_path}") from exc
        logger.info("Saved blueprint to %s", document_path)
        return document_path


def load_blueprint(directory: Path | str, settings: CodecSettings | None = None) -> BlueprintFile:
    """Decode the blueprint stored in ``directory``."""
    return BlueprintService(settings=settings).deserialize(directory)


def save_blueprint(
    blueprint_file: BlueprintFile,
    directory: Path | str,
    settings: CodecSettings | None = None,
) -> Path:
    """Encode ``blueprint_file`` into ``directory`` and return the document path."""
    return BlueprintService(settings=settings).serialize(blueprint_file, directory)
