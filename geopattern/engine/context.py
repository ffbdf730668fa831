"""GenerationContext — the state one generator call reads from and draws into."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from geopattern.engine.digest import hex_value
from geopattern.svg.builder import SvgBuilder


@dataclass
class GenerationContext:
    """Read-only digest in, primitives out through ``svg``."""

    digest: str
    svg: SvgBuilder = field(default_factory=SvgBuilder)

    def hex(self, index: int, length: int = 1) -> int:
        return hex_value(self.digest, index, length)

    def cells(self, columns: int = 6, rows: int = 6) -> Iterator[tuple[int, int, int]]:
        """Row-major ``(i, x, y)``; ``i`` is also the digest offset of the cell's nibble."""
        i = 0
        for y in range(rows):
            for x in range(columns):
                yield i, x, y
                i += 1
