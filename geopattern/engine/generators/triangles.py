"""Triangles — alternating up/down equilateral triangles."""

from __future__ import annotations

import math

from geopattern.engine.context import GenerationContext
from geopattern.engine.palette import filled_styles
from geopattern.engine.registry import generator
from geopattern.engine.shapes import build_triangle
from geopattern.utils.math_helpers import remap


@generator(name="triangles", description="Rows of alternating triangles")
def triangles(ctx: GenerationContext) -> None:
    side_length = remap(ctx.hex(0), 0, 15, 15, 80)
    triangle_height = (side_length / 2) * math.sqrt(3)
    triangle = build_triangle(side_length, triangle_height)
    svg = ctx.svg

    svg.set_width(side_length * 3)
    svg.set_height(triangle_height * 6)

    for i, x, y in ctx.cells():
        styles = filled_styles(ctx.hex(i))
        # Even rows start pointing down, odd rows pointing up
        if y % 2 == 0:
            rotation = 180 if x % 2 == 0 else 0
        else:
            rotation = 180 if x % 2 != 0 else 0
        pivot = (rotation, side_length / 2, triangle_height / 2)

        svg.polyline(triangle, styles).transform(
            translate=(x * side_length * 0.5 - side_length / 2, triangle_height * y),
            rotate=pivot,
        )

        if x == 0:
            svg.polyline(triangle, styles).transform(
                translate=(6 * side_length * 0.5 - side_length / 2, triangle_height * y),
                rotate=pivot,
            )
