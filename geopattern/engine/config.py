"""Pattern configuration — the options one generation runs with."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

DEFAULT_BASE_COLOR = "#933c3c"

# camelCase spellings accepted alongside the field names
_OPTION_ALIASES = {"baseColor": "base_color"}


@dataclass(frozen=True)
class PatternOptions:
    """Overrides for a single pattern; empty values fall back to the digest."""

    # Relative background color; hue/saturation get shifted by the digest
    base_color: str = DEFAULT_BASE_COLOR
    # Exact background color (hex), skips the shift
    color: str | None = None
    # One of the registered generator names
    generator: str | None = None
    # Explicit 40-char digest, replaces hashing the input
    hash: str | None = None

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> PatternOptions:
        """Build from a dict; ``None`` values keep the defaults."""
        names = {f.name for f in dataclasses.fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in values.items():
            name = _OPTION_ALIASES.get(key, key)
            if name not in names:
                raise TypeError(f"Unknown pattern option: {key}")
            if value is not None:
                kwargs[name] = value
        return cls(**kwargs)

    def merged(self, **overrides: Any) -> PatternOptions:
        """Overlay the non-``None`` overrides; ``None`` leaves the current value."""
        given = {key: value for key, value in overrides.items() if value is not None}
        return self.from_mapping({**dataclasses.asdict(self), **given})


def coerce_options(options: PatternOptions | Mapping[str, Any] | None) -> PatternOptions:
    if options is None:
        return PatternOptions()
    if isinstance(options, PatternOptions):
        return options
    return PatternOptions.from_mapping(options)
