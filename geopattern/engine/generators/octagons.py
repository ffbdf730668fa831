"""Octagons — 6x6 grid of squares with cut corners."""

from __future__ import annotations

from geopattern.engine.context import GenerationContext
from geopattern.engine.palette import filled_styles
from geopattern.engine.registry import generator
from geopattern.engine.shapes import build_octagon
from geopattern.utils.math_helpers import remap


@generator(name="octagons", description="Grid of octagons, one nibble per tile")
def octagons(ctx: GenerationContext) -> None:
    square_size = remap(ctx.hex(0), 0, 15, 10, 60)
    tile = build_octagon(square_size)

    ctx.svg.set_width(square_size * 6)
    ctx.svg.set_height(square_size * 6)

    for i, x, y in ctx.cells():
        ctx.svg.polyline(tile, filled_styles(ctx.hex(i))).transform(
            translate=(x * square_size, y * square_size),
        )
