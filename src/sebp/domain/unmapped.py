"""Storage for document fields the registry does not know about."""
from __future__ import annotations

from typing import Dict, Iterable, Iterator, Mapping, MutableMapping, Tuple


class RawMarkup(str):
    """Text holding the serialized child markup of an element.

    Plain ``str`` values are written back as element text; ``RawMarkup``
    values are parsed and written back as child elements.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"RawMarkup({str.__repr__(self)})"


class UnmappedFields(MutableMapping[str, str]):
    """Insertion-ordered ``name -> raw text`` mapping with case-insensitive keys.

    The spelling used when a key was first stored is kept for iteration and
    re-encoding.
    """

    def __init__(self, items: Mapping[str, str] | Iterable[Tuple[str, str]] = ()) -> None:
        self._items: Dict[str, Tuple[str, str]] = {}
        pairs = items.items() if isinstance(items, Mapping) else items
        for name, value in pairs:
            self[name] = value

    def __getitem__(self, name: str) -> str:
        return self._items[name.lower()][1]

    def __setitem__(self, name: str, value: str) -> None:
        self._items[name.lower()] = (name, value)

    def __delitem__(self, name: str) -> None:
        del self._items[name.lower()]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._items

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def add_if_absent(self, name: str, value: str) -> bool:
        """Store ``value`` unless the name is already recorded; return True if stored."""
        if name in self:
            return False
        self[name] = value
        return True

    def copy(self) -> UnmappedFields:
        return UnmappedFields(self.items())

    def __repr__(self) -> str:
        return f"UnmappedFields({dict(self.items())!r})"
