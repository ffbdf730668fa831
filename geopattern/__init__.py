"""Generate tiling SVG background patterns from strings."""

from geopattern.engine import (
    GENERATORS,
    InvalidDigestError,
    Pattern,
    PatternOptions,
    UnknownGeneratorError,
    generate,
)
from geopattern.utils.color import InvalidColorError

__version__ = "0.1.0"

__all__ = [
    "GENERATORS",
    "InvalidColorError",
    "InvalidDigestError",
    "Pattern",
    "PatternOptions",
    "UnknownGeneratorError",
    "generate",
]
