"""Records whose fields are driven by a FieldRegistry."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, Tuple

from sebp.domain.registry import FieldRegistry, FieldSpec
from sebp.domain.unmapped import UnmappedFields


@dataclass
class MappedRecord:
    """Typed values for registry fields plus an unmapped bag for the rest.

    ``values`` only holds populated fields, keyed by the registry's spelling.
    A name never lives in both ``values`` and ``other_fields``.
    """

    values: Dict[str, object] = field(default_factory=dict)
    other_fields: UnmappedFields = field(default_factory=UnmappedFields)
    registry: FieldRegistry = field(default_factory=lambda: FieldRegistry(()), repr=False, compare=False)

    def get(self, name: str) -> object | None:
        """Return the typed value of a registry field, or None when empty or unknown."""
        spec = self.registry.lookup(name)
        if spec is None:
            return None
        return self.values.get(spec.name)

    def value_or_default(self, name: str) -> object | None:
        """Return the typed value, falling back to the registry default."""
        spec = self.registry.require(name)
        value = self.values.get(spec.name)
        return spec.default if value is None else value

    def set(self, name: str, value: object | None) -> None:
        """Assign a registry field; None clears it. Unknown names raise KeyError."""
        spec = self.registry.require(name)
        if value is None:
            self.values.pop(spec.name, None)
        else:
            self.values[spec.name] = value
        self.other_fields.pop(spec.name, None)

    def populated(self) -> Iterator[Tuple[FieldSpec, object]]:
        """Yield (spec, value) for every non-empty field in registry order."""
        for spec in self.registry:
            value = self.values.get(spec.name)
            if value is not None:
                yield spec, value

    def get_text(self, name: str) -> str | None:
        """Return a field's value when it is text, otherwise None."""
        value = self.get(name)
        return value if isinstance(value, str) else None
