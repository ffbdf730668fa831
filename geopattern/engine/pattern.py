"""Pattern orchestrator — digest, background, generator dispatch, export."""

from __future__ import annotations

import base64
import logging
import time
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from geopattern.engine.config import PatternOptions, coerce_options
from geopattern.engine.context import GenerationContext
from geopattern.engine.digest import sha1_digest, validate_digest
from geopattern.engine.generators import register_generators
from geopattern.engine.palette import resolve_background
from geopattern.engine.registry import GeneratorRegistry, get_registry
from geopattern.svg.builder import SvgBuilder
from geopattern.utils.color import rgb_to_css, rgb_to_hex

logger = logging.getLogger(__name__)

register_generators()


class Pattern:
    """One generated pattern. Everything is computed in the constructor.

    Raises ``UnknownGeneratorError``, ``InvalidDigestError`` or
    ``InvalidColorError`` (all ``ValueError``) before anything is drawn.
    """

    def __init__(
        self,
        string: str,
        options: PatternOptions | Mapping[str, Any] | None = None,
        registry: GeneratorRegistry | None = None,
    ) -> None:
        start = time.perf_counter()
        registry = registry or get_registry()

        self.options = coerce_options(options)
        self.hash = validate_digest(self.options.hash) if self.options.hash else sha1_digest(string)
        self.svg = SvgBuilder()

        spec = registry.resolve(self.options.generator, self.hash)
        self.generator = spec.name

        self._generate_background()
        spec.fn(GenerationContext(digest=self.hash, svg=self.svg))

        logger.debug(
            "Generated %s (%sx%s) in %.1fms",
            self.generator,
            self.width,
            self.height,
            (time.perf_counter() - start) * 1000,
        )

    def _generate_background(self) -> None:
        rgb = resolve_background(self.options, self.hash)
        self.color = rgb_to_hex(rgb)
        self.svg.rect(0, 0, "100%", "100%", {"fill": rgb_to_css(rgb)})

    @property
    def width(self) -> int:
        return self.svg.width

    @property
    def height(self) -> int:
        return self.svg.height

    def to_svg(self) -> str:
        return self.svg.to_string()

    def __str__(self) -> str:
        return self.to_svg()

    def to_base64(self) -> str:
        return base64.b64encode(self.to_svg().encode("utf-8")).decode("ascii")

    def to_data_uri(self) -> str:
        return "data:image/svg+xml;base64," + self.to_base64()

    def to_data_url(self) -> str:
        """CSS-ready value, e.g. for ``background-image``."""
        return f'url("{self.to_data_uri()}")'


def _timestamp() -> str:
    return datetime.now().astimezone().strftime("%a %b %d %Y %H:%M:%S GMT%z (%Z)")


def generate(
    string: str | PatternOptions | Mapping[str, Any] | None = None,
    options: PatternOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> Pattern:
    """Generate a pattern from a string.

    ``generate(options)`` is accepted too; without a string the current
    timestamp is hashed, so the result changes on every call. Keyword
    overrides (``generator="xes"``, ``base_color=...``) are merged over
    ``options``.
    """
    if isinstance(string, (PatternOptions, Mapping)):
        options, string = string, None

    if string is None:
        string = _timestamp()

    merged = coerce_options(options)
    if overrides:
        merged = merged.merged(**overrides)

    return Pattern(string, merged)
