"""Service-layer exceptions."""

from sebp.data.errors import BlueprintError


class BlueprintWriteError(BlueprintError):
    """Raised when a blueprint cannot be encoded or written to disk."""
