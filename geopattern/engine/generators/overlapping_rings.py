"""Overlapping rings — stroked circles twice the grid spacing wide."""

from __future__ import annotations

from geopattern.engine.context import GenerationContext
from geopattern.engine.palette import fill_color, fill_opacity
from geopattern.engine.registry import generator
from geopattern.svg.serializer import fmt_num
from geopattern.utils.math_helpers import remap


@generator(name="overlappingRings", description="Interlocking stroked rings")
def overlapping_rings(ctx: GenerationContext) -> None:
    ring_size = remap(ctx.hex(0), 0, 15, 10, 60)
    stroke_width = ring_size / 4
    radius = ring_size - stroke_width / 2
    svg = ctx.svg

    svg.set_width(ring_size * 6)
    svg.set_height(ring_size * 6)

    for i, x, y in ctx.cells():
        val = ctx.hex(i)
        styles = {
            "fill": "none",
            "stroke": fill_color(val),
            "opacity": fill_opacity(val),
            "stroke-width": f"{fmt_num(stroke_width)}px",
        }

        svg.circle(x * ring_size, y * ring_size, radius, styles)

        if x == 0:
            svg.circle(6 * ring_size, y * ring_size, radius, styles)

        if y == 0:
            svg.circle(x * ring_size, 6 * ring_size, radius, styles)

        if x == 0 and y == 0:
            svg.circle(6 * ring_size, 6 * ring_size, radius, styles)
