"""Generator registry — every pattern is a standalone function registered via decorator.

Usage:
    @generator(name="squares", description="6x6 grid of squares")
    def squares(ctx: GenerationContext) -> None:
        size = remap(ctx.hex(0), 0, 15, 10, 60)
        ...

The set of names is closed: ``GENERATORS`` fixes both the allowed names and
the order the digest selects from.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from geopattern.engine.digest import hex_value

if TYPE_CHECKING:
    from geopattern.engine.context import GenerationContext

logger = logging.getLogger(__name__)

GENERATORS: tuple[str, ...] = (
    "octagons",
    "overlappingCircles",
    "plusSigns",
    "xes",
    "sineWaves",
    "hexagons",
    "overlappingRings",
    "plaid",
    "triangles",
    "squares",
    "concentricCircles",
    "diamonds",
    "tessellation",
    "nestedSquares",
    "mosaicSquares",
    "chevrons",
)

# Digest offset whose nibble picks the default generator
SELECTOR_INDEX = 20


class UnknownGeneratorError(ValueError):
    def __init__(self, name: str) -> None:
        super().__init__(f"The generator {name} does not exist.")
        self.name = name


@dataclass
class GeneratorSpec:
    name: str
    fn: Callable[["GenerationContext"], None]
    description: str = ""


class GeneratorRegistry:
    """Name -> generator dispatch table."""

    def __init__(self, names: tuple[str, ...] = GENERATORS) -> None:
        self.names = names
        self._generators: dict[str, GeneratorSpec] = {}

    def register(self, spec: GeneratorSpec) -> None:
        if spec.name not in self.names:
            raise ValueError(f"Generator name not in the fixed set: {spec.name}")
        if spec.name in self._generators:
            raise ValueError(f"Duplicate generator name: {spec.name}")
        self._generators[spec.name] = spec
        logger.debug("Registered generator %s", spec.name)

    def get(self, name: str) -> GeneratorSpec:
        spec = self._generators.get(name)
        if spec is None:
            raise UnknownGeneratorError(name)
        return spec

    def select(self, digest: str) -> GeneratorSpec:
        """Default choice: the nibble at ``SELECTOR_INDEX`` indexes ``names``."""
        return self.get(self.names[hex_value(digest, SELECTOR_INDEX) % len(self.names)])

    def resolve(self, name: str | None, digest: str) -> GeneratorSpec:
        return self.get(name) if name else self.select(digest)

    def all(self) -> list[GeneratorSpec]:
        return [self._generators[n] for n in self.names if n in self._generators]

    def __contains__(self, name: object) -> bool:
        return name in self._generators

    @property
    def count(self) -> int:
        return len(self._generators)


# Module-level singleton
_registry = GeneratorRegistry()


def get_registry() -> GeneratorRegistry:
    return _registry


def generator(*, name: str, description: str = ""):
    """Decorator to register a pattern generator function."""

    def decorator(fn: Callable[["GenerationContext"], None]):
        _registry.register(GeneratorSpec(name=name, fn=fn, description=description))
        return fn

    return decorator
