"""Color conversions — hex <-> RGB <-> HSL and CSS formatting. No engine imports.

RGB channels are ints in 0-255; HSL components are fractions in 0-1.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from geopattern.utils.math_helpers import round_half_up

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


class InvalidColorError(ValueError):
    """Raised for strings that are not 3 or 6 digit hex colors."""


class RGB(NamedTuple):
    r: int
    g: int
    b: int


class HSL(NamedTuple):
    h: float
    s: float
    l: float


def hex_to_rgb(color: str) -> RGB:
    """Parse ``#rrggbb`` / ``#rgb`` (leading ``#`` optional)."""
    match = _HEX_RE.match(color.strip()) if isinstance(color, str) else None
    if match is None:
        raise InvalidColorError(f"Invalid hex color: {color!r}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    num = int(digits, 16)
    return RGB(num >> 16, (num >> 8) & 255, num & 255)


def rgb_to_hex(rgb: RGB) -> str:
    return "#" + format((1 << 24) + (rgb.r << 16) + (rgb.g << 8) + rgb.b, "x")[1:]


def rgb_to_hsl(rgb: RGB) -> HSL:
    r, g, b = rgb.r / 255, rgb.g / 255, rgb.b / 255
    hi = max(r, g, b)
    lo = min(r, g, b)
    lightness = (hi + lo) / 2

    if hi == lo:
        return HSL(0.0, 0.0, lightness)

    d = hi - lo
    saturation = d / (2 - hi - lo) if lightness > 0.5 else d / (hi + lo)
    if hi == r:
        hue = (g - b) / d + (6 if g < b else 0)
    elif hi == g:
        hue = (b - r) / d + 2
    else:
        hue = (r - g) / d + 4
    return HSL(hue / 6, saturation, lightness)


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(hsl: HSL) -> RGB:
    h, s, lightness = hsl
    if s == 0:
        r = g = b = lightness
    else:
        q = lightness * (1 + s) if lightness < 0.5 else lightness + s - lightness * s
        p = 2 * lightness - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)
    return RGB(round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255))


def rgb_to_css(rgb: RGB) -> str:
    """``rgb(r,g,b)`` with no spaces."""
    return f"rgb({rgb.r},{rgb.g},{rgb.b})"
