"""Hexagons — flat-top honeycomb, odd columns shifted half a hex down."""

from __future__ import annotations

import math

from geopattern.engine.context import GenerationContext
from geopattern.engine.palette import filled_styles
from geopattern.engine.registry import generator
from geopattern.engine.shapes import build_hexagon
from geopattern.utils.math_helpers import remap


@generator(name="hexagons", description="Honeycomb of hexagons")
def hexagons(ctx: GenerationContext) -> None:
    side_length = remap(ctx.hex(0), 0, 15, 8, 60)
    hex_height = side_length * math.sqrt(3)
    hex_width = side_length * 2
    hexagon = build_hexagon(side_length)
    svg = ctx.svg

    svg.set_width(hex_width * 3 + side_length * 3)
    svg.set_height(hex_height * 6)

    for i, x, y in ctx.cells():
        styles = filled_styles(ctx.hex(i))
        dy = y * hex_height if x % 2 == 0 else y * hex_height + hex_height / 2
        tx = x * side_length * 1.5 - hex_width / 2
        edge_tx = 6 * side_length * 1.5 - hex_width / 2

        svg.polyline(hexagon, styles).transform(translate=(tx, dy - hex_height / 2))

        # Extra one at top-right, for tiling
        if x == 0:
            svg.polyline(hexagon, styles).transform(translate=(edge_tx, dy - hex_height / 2))

        # Extra row at the end that matches the first row
        if y == 0:
            dy = 6 * hex_height if x % 2 == 0 else 6 * hex_height + hex_height / 2
            svg.polyline(hexagon, styles).transform(translate=(tx, dy - hex_height / 2))

        # Extra one at bottom-right
        if x == 0 and y == 0:
            svg.polyline(hexagon, styles).transform(
                translate=(edge_tx, 5 * hex_height + hex_height / 2),
            )
