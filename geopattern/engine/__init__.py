"""geopattern generation engine."""

from geopattern.engine.registry import GENERATORS, UnknownGeneratorError, generator, get_registry
from geopattern.engine.config import PatternOptions
from geopattern.engine.context import GenerationContext
from geopattern.engine.digest import InvalidDigestError
from geopattern.engine.pattern import Pattern, generate

__all__ = [
    "GENERATORS",
    "UnknownGeneratorError",
    "InvalidDigestError",
    "generator",
    "get_registry",
    "PatternOptions",
    "GenerationContext",
    "Pattern",
    "generate",
]
