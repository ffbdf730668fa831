"""Tessellation — one tile of the 3.4.6.4 semi-regular tessellation.

Unlike the grid patterns, the tile is 20 fixed placements: nibble ``i``
colors placement ``i``. Shapes on the tile border are drawn on both sides
so neighbouring tiles meet without a seam. Transform components are emitted
in the order listed for each placement; reordering them moves the shape.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Callable

from geopattern.engine.context import GenerationContext
from geopattern.engine.palette import STROKE_COLOR, STROKE_OPACITY, fill_color, fill_opacity
from geopattern.engine.registry import generator
from geopattern.engine.shapes import build_rotated_triangle
from geopattern.svg.builder import SvgBuilder
from geopattern.utils.math_helpers import remap


@dataclass(frozen=True)
class _Tile:
    side: float
    hex_height: float
    hex_width: float
    triangle_height: float
    triangle: str
    width: float
    height: float

    @classmethod
    def from_side(cls, side: float) -> _Tile:
        hex_height = side * math.sqrt(3)
        triangle_height = (side / 2) * math.sqrt(3)
        return cls(
            side=side,
            hex_height=hex_height,
            hex_width=side * 2,
            triangle_height=triangle_height,
            triangle=build_rotated_triangle(side, triangle_height),
            width=side * 3 + triangle_height * 2,
            height=hex_height * 2 + side * 2,
        )


Placement = Callable[[SvgBuilder, _Tile, dict[str, Any]], None]


def _corners(svg: SvgBuilder, t: _Tile, styles: dict[str, Any]) -> None:
    s = t.side
    svg.rect(-s / 2, -s / 2, s, s, styles)
    svg.rect(t.width - s / 2, -s / 2, s, s, styles)
    svg.rect(-s / 2, t.height - s / 2, s, s, styles)
    svg.rect(t.width - s / 2, t.height - s / 2, s, s, styles)


def _center_top_square(svg: SvgBuilder, t: _Tile, styles: dict[str, Any]) -> None:
    svg.rect(t.hex_width / 2 + t.triangle_height, t.hex_height / 2, t.side, t.side, styles)


def _side_squares(svg: SvgBuilder, t: _Tile, styles: dict[str, Any]) -> None:
    s = t.side
    svg.rect(-s / 2, t.height / 2 - s / 2, s, s, styles)
    svg.rect(t.width - s / 2, t.height / 2 - s / 2, s, s, styles)


def _center_bottom_square(svg: SvgBuilder, t: _Tile, styles: dict[str, Any]) -> None:
    svg.rect(t.hex_width / 2 + t.triangle_height, t.hex_height * 1.5 + t.side, t.side, t.side, styles)


def _left_edge_triangles(svg: SvgBuilder, t: _Tile, styles: dict[str, Any]) -> None:
    s = t.side
    pivot = (0, s / 2, t.triangle_height / 2)
    svg.polyline(t.triangle, styles).transform(translate=(s / 2, -s / 2), rotate=pivot)
    svg.polyline(t.triangle, styles).transform(
        translate=(s / 2, t.height - -s / 2), rotate=pivot, scale=(1, -1),
    )


def _right_edge_triangles(svg: SvgBuilder, t: _Tile, styles: dict[str, Any]) -> None:
    s = t.side
    pivot = (0, s / 2, t.triangle_height / 2)
    svg.polyline(t.triangle, styles).transform(
        translate=(t.width - s / 2, -s / 2), rotate=pivot, scale=(-1, 1),
    )
    svg.polyline(t.triangle, styles).transform(
        translate=(t.width - s / 2, t.height + s / 2), rotate=pivot, scale=(-1, -1),
    )


def _center_top_right_triangle(svg: SvgBuilder, t: _Tile, styles: dict[str, Any]) -> None:
    svg.polyline(t.triangle, styles).transform(translate=(t.width / 2 + t.side / 2, t.hex_height / 2))


def _center_top_left_triangle(svg: SvgBuilder, t: _Tile, styles: dict[str, Any]) -> None:
    svg.polyline(t.triangle, styles).transform(
        translate=(t.width - t.width / 2 - t.side / 2, t.hex_height / 2), scale=(-1, 1),
    )


def _center_bottom_right_triangle(svg: SvgBuilder, t: _Tile, styles: dict[str, Any]) -> None:
    svg.polyline(t.triangle, styles).transform(
        translate=(t.width / 2 + t.side / 2, t.height - t.hex_height / 2), scale=(1, -1),
    )


def _center_bottom_left_triangle(svg: SvgBuilder, t: _Tile, styles: dict[str, Any]) -> None:
    svg.polyline(t.triangle, styles).transform(
        translate=(t.width - t.width / 2 - t.side / 2, t.height - t.hex_height / 2), scale=(-1, -1),
    )


def _left_middle_triangle(svg: SvgBuilder, t: _Tile, styles: dict[str, Any]) -> None:
    svg.polyline(t.triangle, styles).transform(translate=(t.side / 2, t.height / 2 - t.side / 2))


def _right_middle_triangle(svg: SvgBuilder, t: _Tile, styles: dict[str, Any]) -> None:
    svg.polyline(t.triangle, styles).transform(
        translate=(t.width - t.side / 2, t.height / 2 - t.side / 2), scale=(-1, 1),
    )


def _left_top_square(svg: SvgBuilder, t: _Tile, styles: dict[str, Any]) -> None:
    s = t.side
    svg.rect(0, 0, s, s, styles).transform(translate=(s / 2, s / 2), rotate=(-30, 0, 0))


def _right_top_square(svg: SvgBuilder, t: _Tile, styles: dict[str, Any]) -> None:
    s = t.side
    svg.rect(0, 0, s, s, styles).transform(
        scale=(-1, 1), translate=(-t.width + s / 2, s / 2), rotate=(-30, 0, 0),
    )


def _left_center_top_square(svg: SvgBuilder, t: _Tile, styles: dict[str, Any]) -> None:
    s = t.side
    svg.rect(0, 0, s, s, styles).transform(
        translate=(s / 2, t.height / 2 - s / 2 - s), rotate=(30, 0, s),
    )


def _right_center_top_square(svg: SvgBuilder, t: _Tile, styles: dict[str, Any]) -> None:
    s = t.side
    svg.rect(0, 0, s, s, styles).transform(
        scale=(-1, 1), translate=(-t.width + s / 2, t.height / 2 - s / 2 - s), rotate=(30, 0, s),
    )


def _left_center_bottom_square(svg: SvgBuilder, t: _Tile, styles: dict[str, Any]) -> None:
    s = t.side
    svg.rect(0, 0, s, s, styles).transform(
        scale=(1, -1), translate=(s / 2, -t.height + t.height / 2 - s / 2 - s), rotate=(30, 0, s),
    )


def _right_center_bottom_square(svg: SvgBuilder, t: _Tile, styles: dict[str, Any]) -> None:
    s = t.side
    svg.rect(0, 0, s, s, styles).transform(
        scale=(-1, -1), translate=(-t.width + s / 2, -t.height + t.height / 2 - s / 2 - s), rotate=(30, 0, s),
    )


def _left_bottom_square(svg: SvgBuilder, t: _Tile, styles: dict[str, Any]) -> None:
    s = t.side
    svg.rect(0, 0, s, s, styles).transform(
        scale=(1, -1), translate=(s / 2, -t.height + s / 2), rotate=(-30, 0, 0),
    )


def _right_bottom_square(svg: SvgBuilder, t: _Tile, styles: dict[str, Any]) -> None:
    s = t.side
    svg.rect(0, 0, s, s, styles).transform(
        scale=(-1, -1), translate=(-t.width + s / 2, -t.height + s / 2), rotate=(-30, 0, 0),
    )


# Index i is drawn with digest nibble i
PLACEMENTS: tuple[Placement, ...] = (
    _corners,
    _center_top_square,
    _side_squares,
    _center_bottom_square,
    _left_edge_triangles,
    _right_edge_triangles,
    _center_top_right_triangle,
    _center_top_left_triangle,
    _center_bottom_right_triangle,
    _center_bottom_left_triangle,
    _left_middle_triangle,
    _right_middle_triangle,
    _left_top_square,
    _right_top_square,
    _left_center_top_square,
    _right_center_top_square,
    _left_center_bottom_square,
    _right_center_bottom_square,
    _left_bottom_square,
    _right_bottom_square,
)


@generator(name="tessellation", description="3.4.6.4 semi-regular tessellation")
def tessellation(ctx: GenerationContext) -> None:
    tile = _Tile.from_side(remap(ctx.hex(0), 0, 15, 5, 40))

    ctx.svg.set_width(tile.width)
    ctx.svg.set_height(tile.height)

    for i, place in enumerate(PLACEMENTS):
        val = ctx.hex(i)
        styles = {
            "stroke": STROKE_COLOR,
            "stroke-opacity": STROKE_OPACITY,
            "fill": fill_color(val),
            "fill-opacity": fill_opacity(val),
            "stroke-width": 1,
        }
        place(ctx.svg, tile, styles)
