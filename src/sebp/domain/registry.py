"""Declarative field tables consulted by both the decoder and the encoder."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Tuple, get_args

from sebp.core.types import FieldKind
from sebp.data.errors import SchemaError

KNOWN_KINDS = frozenset(get_args(FieldKind))


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """One known field: its element name, semantic kind and read-side default."""

    name: str
    kind: FieldKind
    default: object = None


class FieldRegistry:
    """Ordered, case-insensitive table of known fields.

    ``reserved`` names are structural children handled outside the table
    (for example a grid's ``CubeBlocks``); they count as known so they never
    land in an unmapped bag.
    """

    def __init__(self, specs: Iterable[FieldSpec], *, reserved: Iterable[str] = ()) -> None:
        self._specs: Tuple[FieldSpec, ...] = tuple(specs)
        self._reserved: Tuple[str, ...] = tuple(reserved)
        self._index: Dict[str, FieldSpec] = {}
        seen: set[str] = set()
        for spec in self._specs:
            if spec.kind not in KNOWN_KINDS:
                raise SchemaError(f"Unknown field kind '{spec.kind}' for {spec.name}")
            key = spec.name.lower()
            if key in seen:
                raise SchemaError(f"Duplicate field name in registry: {spec.name}")
            seen.add(key)
            self._index[key] = spec
        for name in self._reserved:
            key = name.lower()
            if key in seen:
                raise SchemaError(f"Reserved name collides with a registry field: {name}")
            seen.add(key)
        self._known = frozenset(seen)

    def __iter__(self) -> Iterator[FieldSpec]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._index

    def lookup(self, name: str) -> FieldSpec | None:
        """Return the spec for ``name`` ignoring case, or None."""
        return self._index.get(name.lower())

    def require(self, name: str) -> FieldSpec:
        spec = self.lookup(name)
        if spec is None:
            raise KeyError(name)
        return spec

    def is_known(self, name: str) -> bool:
        """True for registry fields and reserved structural names."""
        return name.lower() in self._known

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(spec.name for spec in self._specs)

    @property
    def reserved(self) -> Tuple[str, ...]:
        return self._reserved

    def extended(self, *specs: FieldSpec) -> FieldRegistry:
        """Return a new registry with ``specs`` appended."""
        return FieldRegistry((*self._specs, *specs), reserved=self._reserved)

    def __repr__(self) -> str:
        return f"FieldRegistry({len(self._specs)} fields, reserved={list(self._reserved)})"
