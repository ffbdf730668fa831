"""Overlapping circles — circles spaced one radius apart."""

from __future__ import annotations

from geopattern.engine.context import GenerationContext
from geopattern.engine.palette import fill_color, fill_opacity
from geopattern.engine.registry import generator
from geopattern.utils.math_helpers import remap


@generator(name="overlappingCircles", description="Circles overlapping by half their diameter")
def overlapping_circles(ctx: GenerationContext) -> None:
    diameter = remap(ctx.hex(0), 0, 15, 25, 200)
    radius = diameter / 2
    svg = ctx.svg

    svg.set_width(radius * 6)
    svg.set_height(radius * 6)

    for i, x, y in ctx.cells():
        val = ctx.hex(i)
        styles = {"fill": fill_color(val), "opacity": fill_opacity(val)}

        svg.circle(x * radius, y * radius, radius, styles)

        # Right edge copy for tiling
        if x == 0:
            svg.circle(6 * radius, y * radius, radius, styles)

        # Bottom edge copy
        if y == 0:
            svg.circle(x * radius, 6 * radius, radius, styles)

        # Bottom-right corner
        if x == 0 and y == 0:
            svg.circle(6 * radius, 6 * radius, radius, styles)
