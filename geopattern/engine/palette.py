"""Palette Selector — per-shape fill tone/opacity and the background color."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from geopattern.engine.digest import hex_value
from geopattern.utils.color import RGB, HSL, hex_to_rgb, hsl_to_rgb, rgb_to_hsl
from geopattern.utils.math_helpers import remap

if TYPE_CHECKING:
    from geopattern.engine.config import PatternOptions

logger = logging.getLogger(__name__)

FILL_COLOR_DARK = "#222"
FILL_COLOR_LIGHT = "#ddd"
STROKE_COLOR = "#000"
STROKE_OPACITY = 0.02
OPACITY_MIN = 0.02
OPACITY_MAX = 0.15


def fill_color(val: int) -> str:
    return FILL_COLOR_LIGHT if val % 2 == 0 else FILL_COLOR_DARK


def fill_opacity(val: int) -> float:
    return remap(val, 0, 15, OPACITY_MIN, OPACITY_MAX)


def filled_styles(val: int) -> dict[str, Any]:
    """Faintly stroked fill — the style most tile shapes share."""
    return {
        "fill": fill_color(val),
        "fill-opacity": fill_opacity(val),
        "stroke": STROKE_COLOR,
        "stroke-opacity": STROKE_OPACITY,
    }


def resolve_background(options: PatternOptions, digest: str) -> RGB:
    """Explicit ``color`` wins; otherwise shift the base color's hue and saturation.

    Hue offset: digest[14:17] scaled 0-4095 -> 0-359 degrees.
    Saturation offset: digest[17] percentage points, added when even, removed when odd.
    """
    if options.color:
        return hex_to_rgb(options.color)

    hue_offset = remap(hex_value(digest, 14, 3), 0, 4095, 0, 359)
    sat_offset = hex_value(digest, 17)
    base = rgb_to_hsl(hex_to_rgb(options.base_color))

    hue = ((base.h * 360 - hue_offset + 360) % 360) / 360
    if sat_offset % 2 == 0:
        saturation = min(1, (base.s * 100 + sat_offset) / 100)
    else:
        saturation = max(0, (base.s * 100 - sat_offset) / 100)

    logger.debug("Background shift: hue offset %.1f, saturation offset %s", hue_offset, sat_offset)
    return hsl_to_rgb(HSL(hue, saturation, base.l))
