"""Mosaic squares — 4x4 checkerboard of four-triangle tiles.

Outer tiles point their triangles at the tile edges and take one nibble;
inner tiles point them at the center and split two nibbles between the two
diagonals.
"""

from __future__ import annotations

from geopattern.engine.context import GenerationContext
from geopattern.engine.palette import STROKE_COLOR, STROKE_OPACITY, fill_color, fill_opacity
from geopattern.engine.registry import generator
from geopattern.engine.shapes import build_right_triangle
from geopattern.svg.builder import SvgBuilder
from geopattern.utils.math_helpers import remap


def _styles(val: int) -> dict:
    return {
        "stroke": STROKE_COLOR,
        "stroke-opacity": STROKE_OPACITY,
        "fill-opacity": fill_opacity(val),
        "fill": fill_color(val),
    }


def draw_inner_tile(svg: SvgBuilder, x: float, y: float, triangle_size: float, vals: tuple[int, int]) -> None:
    triangle = build_right_triangle(triangle_size)

    styles = _styles(vals[0])
    svg.polyline(triangle, styles).transform(translate=(x + triangle_size, y), scale=(-1, 1))
    svg.polyline(triangle, styles).transform(translate=(x + triangle_size, y + triangle_size * 2), scale=(1, -1))

    styles = _styles(vals[1])
    svg.polyline(triangle, styles).transform(translate=(x + triangle_size, y + triangle_size * 2), scale=(-1, -1))
    svg.polyline(triangle, styles).transform(translate=(x + triangle_size, y), scale=(1, 1))


def draw_outer_tile(svg: SvgBuilder, x: float, y: float, triangle_size: float, val: int) -> None:
    triangle = build_right_triangle(triangle_size)
    styles = _styles(val)

    svg.polyline(triangle, styles).transform(translate=(x, y + triangle_size), scale=(1, -1))
    svg.polyline(triangle, styles).transform(translate=(x + triangle_size * 2, y + triangle_size), scale=(-1, -1))
    svg.polyline(triangle, styles).transform(translate=(x, y + triangle_size), scale=(1, 1))
    svg.polyline(triangle, styles).transform(translate=(x + triangle_size * 2, y + triangle_size), scale=(-1, 1))


@generator(name="mosaicSquares", description="Checkerboard of triangle mosaics")
def mosaic_squares(ctx: GenerationContext) -> None:
    triangle_size = remap(ctx.hex(0), 0, 15, 15, 50)

    ctx.svg.set_width(triangle_size * 8)
    ctx.svg.set_height(triangle_size * 8)

    for i, x, y in ctx.cells(4, 4):
        left = x * triangle_size * 2
        top = y * triangle_size * 2
        if (x % 2 == 0) == (y % 2 == 0):
            draw_outer_tile(ctx.svg, left, top, triangle_size, ctx.hex(i))
        else:
            draw_inner_tile(ctx.svg, left, top, triangle_size, (ctx.hex(i), ctx.hex(i + 1)))
