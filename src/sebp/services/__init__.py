"""Service layer exports."""

from .errors import BlueprintWriteError
from .decoder import BlueprintDecoder
from .encoder import BlueprintEncoder
from .blueprint_service import BlueprintService, load_blueprint, save_blueprint
from .export_service import blank_strings_to_none, export_json, to_payload

__all__ = [
    "BlueprintWriteError",
    "BlueprintDecoder",
    "BlueprintEncoder",
    "BlueprintService",
    "load_blueprint",
    "save_blueprint",
    "blank_strings_to_none",
    "export_json",
    "to_payload",
]
