"""Shape Builders — point lists for the polygons the generators tile.

Point lists are flattened ``x,y,x,y,...`` strings ready for ``<polyline points>``.
"""

from __future__ import annotations

import math

from geopattern.svg.serializer import fmt_num


def _points(*coords: float) -> str:
    return ",".join(fmt_num(c) for c in coords)


def build_hexagon(side_length: float) -> str:
    """Flat-top regular hexagon."""
    c = side_length
    a = c / 2
    b = math.sin((60 * math.pi) / 180) * c
    return _points(0, b, a, 0, a + c, 0, 2 * c, b, a + c, 2 * b, a, 2 * b, 0, b)


def build_chevron(width: float, height: float) -> list[str]:
    """Left and right halves of a chevron, apex at 0.66 of the height."""
    e = height * 0.66
    return [
        _points(0, 0, width / 2, height - e, width / 2, height, 0, e, 0, 0),
        _points(width / 2, height - e, width, 0, width, e, width / 2, height, width / 2, height - e),
    ]


def build_plus(square_size: float) -> list[tuple[float, float, float, float]]:
    """Two overlapping bars as ``(x, y, width, height)`` boxes."""
    return [
        (square_size, 0, square_size, square_size * 3),
        (0, square_size, square_size * 3, square_size),
    ]


def build_octagon(square_size: float) -> str:
    s = square_size
    c = s * 0.33
    return _points(c, 0, s - c, 0, s, c, s, s - c, s - c, s, c, s, 0, s - c, 0, c, c, 0)


def build_triangle(side_length: float, height: float) -> str:
    half_width = side_length / 2
    return _points(half_width, 0, side_length, height, 0, height, half_width, 0)


def build_rotated_triangle(side_length: float, triangle_width: float) -> str:
    """Triangle pointing right, for the 3.4.6.4 tessellation."""
    half_height = side_length / 2
    return _points(0, 0, triangle_width, half_height, 0, side_length, 0, 0)


def build_diamond(width: float, height: float) -> str:
    return _points(width / 2, 0, width, height / 2, width / 2, height, 0, height / 2)


def build_right_triangle(side_length: float) -> str:
    return _points(0, 0, side_length, side_length, 0, side_length, 0, 0)
