"""Xes — plus shapes rotated 45 degrees, odd columns dropped a quarter step.

Rotated shapes hang past the bottom edge, so the last row also gets a copy
above the top edge.
"""

from __future__ import annotations

from geopattern.engine.context import GenerationContext
from geopattern.engine.palette import fill_color, fill_opacity
from geopattern.engine.registry import generator
from geopattern.engine.shapes import build_plus
from geopattern.utils.math_helpers import remap


@generator(name="xes", description="Diagonal crosses")
def xes(ctx: GenerationContext) -> None:
    square_size = remap(ctx.hex(0), 0, 15, 10, 25)
    x_shape = build_plus(square_size)
    x_size = square_size * 3 * 0.943
    pivot = (45, x_size / 2, x_size / 2)
    svg = ctx.svg

    svg.set_width(x_size * 3)
    svg.set_height(x_size * 3)

    def draw(styles: dict, tx: float, ty: float) -> None:
        with svg.group(styles) as group:
            group.transform(translate=(tx, ty), rotate=pivot)
            svg.rects(x_shape)

    for i, x, y in ctx.cells():
        val = ctx.hex(i)
        styles = {"fill": fill_color(val), "opacity": fill_opacity(val)}
        if x % 2 == 0:
            dy = y * x_size - x_size * 0.5
        else:
            dy = y * x_size - x_size * 0.5 + x_size / 4

        draw(styles, (x * x_size) / 2 - x_size / 2, dy - (y * x_size) / 2)

        if x == 0:
            draw(styles, (6 * x_size) / 2 - x_size / 2, dy - (y * x_size) / 2)

        if y == 0:
            if x % 2 == 0:
                dy = 6 * x_size - x_size / 2
            else:
                dy = 6 * x_size - x_size / 2 + x_size / 4
            draw(styles, (x * x_size) / 2 - x_size / 2, dy - (6 * x_size) / 2)

        if y == 5:
            draw(styles, (x * x_size) / 2 - x_size / 2, dy - (11 * x_size) / 2)

        # dy already points at the bottom copy here
        if x == 0 and y == 0:
            draw(styles, (6 * x_size) / 2 - x_size / 2, dy - (6 * x_size) / 2)
