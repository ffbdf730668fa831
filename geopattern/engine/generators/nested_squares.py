"""Nested squares — a stroked square with a smaller one inside, per cell."""

from __future__ import annotations

from geopattern.engine.context import GenerationContext
from geopattern.engine.palette import fill_color, fill_opacity
from geopattern.engine.registry import generator
from geopattern.svg.serializer import fmt_num
from geopattern.utils.math_helpers import remap


def _outline(val: int, block_size: float) -> dict:
    return {
        "fill": "none",
        "stroke": fill_color(val),
        "opacity": fill_opacity(val),
        "stroke-width": f"{fmt_num(block_size)}px",
    }


@generator(name="nestedSquares", description="Squares inside squares")
def nested_squares(ctx: GenerationContext) -> None:
    block_size = remap(ctx.hex(0), 0, 15, 4, 12)
    square_size = block_size * 7
    svg = ctx.svg

    svg.set_width((square_size + block_size) * 6 + block_size * 6)
    svg.set_height((square_size + block_size) * 6 + block_size * 6)

    for i, x, y in ctx.cells():
        left = x * square_size + x * block_size * 2 + block_size / 2
        top = y * square_size + y * block_size * 2 + block_size / 2

        svg.rect(left, top, square_size, square_size, _outline(ctx.hex(i), block_size))

        svg.rect(
            left + block_size * 2,
            top + block_size * 2,
            block_size * 3,
            block_size * 3,
            _outline(ctx.hex(39 - i), block_size),
        )
