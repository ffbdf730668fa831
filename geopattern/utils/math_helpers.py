"""Math helpers — range re-mapping and JS-compatible rounding. No engine imports."""

from __future__ import annotations

import math


def remap(value: float, src_min: float, src_max: float, dst_min: float, dst_max: float) -> float:
    """Re-map a value from one range to another (Processing's ``map()``).

    No clamping: callers keep ``value`` inside ``[src_min, src_max]``.
    """
    src_range = src_max - src_min
    dst_range = dst_max - dst_min
    return ((float(value) - src_min) * dst_range) / src_range + dst_min


def round_half_up(value: float) -> int:
    """Round .5 towards +inf, unlike the banker's rounding of ``round()``."""
    return math.floor(value + 0.5)
