"""Plus signs — interlocking crosses, odd rows shifted by one bar width."""

from __future__ import annotations

from geopattern.engine.context import GenerationContext
from geopattern.engine.palette import STROKE_COLOR, STROKE_OPACITY, fill_color, fill_opacity
from geopattern.engine.registry import generator
from geopattern.engine.shapes import build_plus
from geopattern.utils.math_helpers import remap


@generator(name="plusSigns", description="Interlocking plus signs")
def plus_signs(ctx: GenerationContext) -> None:
    square_size = remap(ctx.hex(0), 0, 15, 10, 25)
    plus_size = square_size * 3
    plus_shape = build_plus(square_size)
    svg = ctx.svg

    svg.set_width(square_size * 12)
    svg.set_height(square_size * 12)

    def draw(styles: dict, tx: float, ty: float) -> None:
        with svg.group(styles) as group:
            group.transform(translate=(tx, ty))
            svg.rects(plus_shape)

    for i, x, y in ctx.cells():
        val = ctx.hex(i)
        dx = 0 if y % 2 == 0 else 1
        styles = {
            "fill": fill_color(val),
            "stroke": STROKE_COLOR,
            "stroke-opacity": STROKE_OPACITY,
            "fill-opacity": fill_opacity(val),
        }

        tx = x * plus_size - x * square_size + dx * square_size - square_size
        ty = y * plus_size - y * square_size - plus_size / 2
        # The pattern repeats every 4 plus widths
        edge_tx = 4 * plus_size - x * square_size + dx * square_size - square_size
        edge_ty = 4 * plus_size - y * square_size - plus_size / 2

        draw(styles, tx, ty)

        if x == 0:
            draw(styles, edge_tx, ty)

        if y == 0:
            draw(styles, tx, edge_ty)

        if x == 0 and y == 0:
            draw(styles, edge_tx, edge_ty)
