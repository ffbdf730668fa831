"""SVG element node — the unit appended to and serialized by the drawing surface."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

SVG_NS = "http://www.w3.org/2000/svg"

# Ordered (name, values) pairs, e.g. [("translate", (10, 0)), ("rotate", (45, 5, 5))]
Transform = list[tuple[str, tuple[Any, ...]]]


@dataclass
class SvgElement:
    tag: str
    # Insertion order is serialization order
    attributes: dict[str, Any] = field(default_factory=dict)
    children: list[SvgElement] = field(default_factory=list)
    transforms: Transform = field(default_factory=list)

    def transform(self, **components: Sequence[float]) -> SvgElement:
        """Attach an affine transform; components keep the order they are given in.

        ``el.transform(translate=(10, 0), rotate=(45, 5, 5))`` renders as
        ``translate(10,0) rotate(45,5,5)``.
        """
        self.transforms = [(name, tuple(values)) for name, values in components.items()]
        return self
