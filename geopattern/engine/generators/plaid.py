"""Plaid — horizontal then vertical stripes from two scans of nibble pairs.

Each pair is (gap, stripe): the gap nibble plus 5 spaces the stripe from the
previous one, the stripe nibble plus 5 is its thickness. The canvas size is
wherever the stripes end.
"""

from __future__ import annotations

from geopattern.engine.context import GenerationContext
from geopattern.engine.palette import fill_color, fill_opacity
from geopattern.engine.registry import generator


@generator(name="plaid", description="Crossing stripes of varying width")
def plaid(ctx: GenerationContext) -> None:
    svg = ctx.svg
    height = 0
    width = 0

    # Horizontal stripes
    for i in range(0, 36, 2):
        height += ctx.hex(i) + 5
        val = ctx.hex(i + 1)
        stripe_height = val + 5
        svg.rect(0, height, "100%", stripe_height, {
            "opacity": fill_opacity(val),
            "fill": fill_color(val),
        })
        height += stripe_height

    # Vertical stripes
    for i in range(0, 36, 2):
        width += ctx.hex(i) + 5
        val = ctx.hex(i + 1)
        stripe_width = val + 5
        svg.rect(width, 0, stripe_width, "100%", {
            "opacity": fill_opacity(val),
            "fill": fill_color(val),
        })
        width += stripe_width

    svg.set_width(width)
    svg.set_height(height)
