"""Squares — plain 6x6 checkerboard of tinted squares."""

from __future__ import annotations

from geopattern.engine.context import GenerationContext
from geopattern.engine.palette import filled_styles
from geopattern.engine.registry import generator
from geopattern.utils.math_helpers import remap


@generator(name="squares", description="Grid of squares, one nibble per square")
def squares(ctx: GenerationContext) -> None:
    square_size = remap(ctx.hex(0), 0, 15, 10, 60)

    ctx.svg.set_width(square_size * 6)
    ctx.svg.set_height(square_size * 6)

    for i, x, y in ctx.cells():
        ctx.svg.rect(x * square_size, y * square_size, square_size, square_size, filled_styles(ctx.hex(i)))
