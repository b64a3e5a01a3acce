"""Component container structures kept as opaque cargo."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True)
class ComponentData:
    """One entry of a block's component container.

    ``component`` holds the serialized ``<Component>`` element exactly as it
    was read; it is replayed on write without being inspected. Any other
    children are kept serialized in ``other_elements``.
    """

    type_id: str | None = None
    component: str | None = None
    other_elements: List[str] = field(default_factory=list)


@dataclass(slots=True)
class ComponentContainer:
    """Container of per-block game components.

    ``other_entries`` keeps serialized children of ``<Components>`` that are
    not ``<ComponentData>``; ``other_elements`` keeps the container's other
    children. ``has_components`` is False when the source had no
    ``<Components>`` child, so none is written back.
    """

    components: List[ComponentData] = field(default_factory=list)
    other_entries: List[str] = field(default_factory=list)
    other_elements: List[str] = field(default_factory=list)
    has_components: bool = True
