"""Chevrons — stacked arrow shapes, rows overlapping by a third."""

from __future__ import annotations

from geopattern.engine.context import GenerationContext
from geopattern.engine.palette import STROKE_COLOR, STROKE_OPACITY, fill_color, fill_opacity
from geopattern.engine.registry import generator
from geopattern.engine.shapes import build_chevron
from geopattern.utils.math_helpers import remap


@generator(name="chevrons", description="Rows of chevrons")
def chevrons(ctx: GenerationContext) -> None:
    chevron_width = remap(ctx.hex(0), 0, 15, 30, 80)
    chevron_height = remap(ctx.hex(0), 0, 15, 30, 80)
    chevron = build_chevron(chevron_width, chevron_height)
    svg = ctx.svg

    svg.set_width(chevron_width * 6)
    svg.set_height(chevron_height * 6 * 0.66)

    def draw(styles: dict, tx: float, ty: float) -> None:
        with svg.group(styles) as group:
            group.transform(translate=(tx, ty))
            svg.polylines(chevron)

    for i, x, y in ctx.cells():
        val = ctx.hex(i)
        styles = {
            "stroke": STROKE_COLOR,
            "stroke-opacity": STROKE_OPACITY,
            "fill": fill_color(val),
            "fill-opacity": fill_opacity(val),
            "stroke-width": 1,
        }

        draw(styles, x * chevron_width, y * chevron_height * 0.66 - chevron_height / 2)

        # Extra row at the end that matches the first row
        if y == 0:
            draw(styles, x * chevron_width, 6 * chevron_height * 0.66 - chevron_height / 2)
