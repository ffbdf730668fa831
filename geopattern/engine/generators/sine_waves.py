"""Sine waves — 36 stacked cubic-bezier waves, each repeated one canvas lower."""

from __future__ import annotations

import math

from geopattern.engine.context import GenerationContext
from geopattern.engine.palette import fill_color, fill_opacity
from geopattern.engine.registry import generator
from geopattern.svg.serializer import fmt_num as n
from geopattern.utils.math_helpers import remap


def build_wave(period: int, amplitude: int) -> str:
    """One and a half periods of a smooth wave as an SVG path."""
    x_offset = (period / 4) * 0.7
    return (
        f"M0 {n(amplitude)}"
        f" C {n(x_offset)} 0, {n(period / 2 - x_offset)} 0, {n(period / 2)} {n(amplitude)}"
        f" S {n(period - x_offset)} {n(amplitude * 2)}, {n(period)} {n(amplitude)}"
        f" S {n(period * 1.5 - x_offset)} 0, {n(period * 1.5)}, {n(amplitude)}"
    )


@generator(name="sineWaves", description="Horizontal stroked waves")
def sine_waves(ctx: GenerationContext) -> None:
    period = math.floor(remap(ctx.hex(0), 0, 15, 100, 400))
    amplitude = math.floor(remap(ctx.hex(1), 0, 15, 30, 100))
    wave_width = math.floor(remap(ctx.hex(2), 0, 15, 3, 30))
    wave = build_wave(period, amplitude)
    svg = ctx.svg

    svg.set_width(period)
    svg.set_height(wave_width * 36)

    for i in range(36):
        val = ctx.hex(i)
        styles = {
            "fill": "none",
            "stroke": fill_color(val),
            "opacity": fill_opacity(val),
            "stroke-width": f"{wave_width}px",
        }

        ty = wave_width * i - amplitude * 1.5
        svg.path(wave, styles).transform(translate=(-period / 4, ty))
        svg.path(wave, styles).transform(translate=(-period / 4, ty + wave_width * 36))
