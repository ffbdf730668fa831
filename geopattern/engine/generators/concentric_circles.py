"""Concentric circles — a stroked ring with a filled dot in every cell.

The ring reads nibble ``i``, the dot reads nibble ``39 - i`` so both ends of
the digest contribute.
"""

from __future__ import annotations

from geopattern.engine.context import GenerationContext
from geopattern.engine.palette import fill_color, fill_opacity
from geopattern.engine.registry import generator
from geopattern.svg.serializer import fmt_num
from geopattern.utils.math_helpers import remap


@generator(name="concentricCircles", description="Rings with a dot at the center")
def concentric_circles(ctx: GenerationContext) -> None:
    ring_size = remap(ctx.hex(0), 0, 15, 10, 60)
    stroke_width = ring_size / 5
    svg = ctx.svg

    svg.set_width((ring_size + stroke_width) * 6)
    svg.set_height((ring_size + stroke_width) * 6)

    for i, x, y in ctx.cells():
        cx = x * ring_size + x * stroke_width + (ring_size + stroke_width) / 2
        cy = y * ring_size + y * stroke_width + (ring_size + stroke_width) / 2

        val = ctx.hex(i)
        svg.circle(cx, cy, ring_size / 2, {
            "fill": "none",
            "stroke": fill_color(val),
            "opacity": fill_opacity(val),
            "stroke-width": f"{fmt_num(stroke_width)}px",
        })

        val = ctx.hex(39 - i)
        svg.circle(cx, cy, ring_size / 4, {
            "fill": fill_color(val),
            "fill-opacity": fill_opacity(val),
        })
