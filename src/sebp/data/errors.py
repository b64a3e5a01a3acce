"""Custom exceptions for blueprint loading and schema definition."""


class BlueprintError(Exception):
    """Base exception for the blueprint codec."""


class BlueprintLoadError(BlueprintError):
    """Raised when a blueprint document cannot be read or parsed as XML."""


class BlueprintNotFoundError(BlueprintLoadError):
    """Raised when a blueprint directory has no primary document."""


class SchemaError(BlueprintError):
    """Raised when a field registry is defined inconsistently."""
