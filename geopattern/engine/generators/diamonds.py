"""Diamonds — staggered rhombi, odd rows shifted half a width."""

from __future__ import annotations

from geopattern.engine.context import GenerationContext
from geopattern.engine.palette import filled_styles
from geopattern.engine.registry import generator
from geopattern.engine.shapes import build_diamond
from geopattern.utils.math_helpers import remap


@generator(name="diamonds", description="Staggered diamonds")
def diamonds(ctx: GenerationContext) -> None:
    diamond_width = remap(ctx.hex(0), 0, 15, 10, 50)
    diamond_height = remap(ctx.hex(1), 0, 15, 10, 50)
    diamond = build_diamond(diamond_width, diamond_height)
    svg = ctx.svg

    svg.set_width(diamond_width * 6)
    svg.set_height(diamond_height * 3)

    for i, x, y in ctx.cells():
        styles = filled_styles(ctx.hex(i))
        dx = 0 if y % 2 == 0 else diamond_width / 2

        tx = x * diamond_width - diamond_width / 2 + dx
        ty = (diamond_height / 2) * y - diamond_height / 2
        edge_tx = 6 * diamond_width - diamond_width / 2 + dx
        edge_ty = (diamond_height / 2) * 6 - diamond_height / 2

        svg.polyline(diamond, styles).transform(translate=(tx, ty))

        if x == 0:
            svg.polyline(diamond, styles).transform(translate=(edge_tx, ty))

        if y == 0:
            svg.polyline(diamond, styles).transform(translate=(tx, edge_ty))

        if x == 0 and y == 0:
            svg.polyline(diamond, styles).transform(translate=(edge_tx, edge_ty))
