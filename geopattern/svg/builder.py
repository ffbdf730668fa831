"""SvgBuilder — the drawing surface generators append primitives to.

Usage:
    svg = SvgBuilder()
    svg.set_width(120)
    svg.rect(0, 0, 10, 10, {"fill": "#ddd"})
    svg.polyline("0,0,10,10", styles).transform(translate=(5, 5))
    with svg.group(styles) as g:
        g.transform(translate=(0, 20))
        svg.rects([(10, 0, 10, 30), (0, 10, 30, 10)])
    text = svg.to_string()

Style attributes are written first, then geometry, then ``transform``.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator, Mapping, Sequence
from contextlib import contextmanager
from typing import Any

from geopattern.svg.primitives import SVG_NS, SvgElement
from geopattern.svg.serializer import serialize_svg

Styles = Mapping[str, Any]
Box = Sequence[Any]


class SvgBuilder:
    """Accumulates SVG primitives under a single ``<svg>`` root."""

    def __init__(self, width: int = 100, height: int = 100) -> None:
        self.root = SvgElement("svg", {"xmlns": SVG_NS, "width": width, "height": height})
        self._context: list[SvgElement] = []

    @property
    def width(self) -> int:
        return self.root.attributes["width"]

    @property
    def height(self) -> int:
        return self.root.attributes["height"]

    def set_width(self, width: float) -> None:
        self.root.attributes["width"] = _floor(width)

    def set_height(self, height: float) -> None:
        self.root.attributes["height"] = _floor(height)

    @property
    def current_context(self) -> SvgElement:
        return self._context[-1] if self._context else self.root

    def _append(self, tag: str, styles: Styles | None, **geometry: Any) -> SvgElement:
        element = SvgElement(tag, {**(styles or {}), **geometry})
        self.current_context.children.append(element)
        return element

    def rect(self, x: Any, y: Any, width: Any, height: Any, styles: Styles | None = None) -> SvgElement:
        return self._append("rect", styles, x=x, y=y, width=width, height=height)

    def rects(self, boxes: Iterable[Box], styles: Styles | None = None) -> list[SvgElement]:
        """One rect per ``(x, y, width, height)`` box."""
        return [self.rect(*box, styles) for box in boxes]

    def circle(self, cx: float, cy: float, r: float, styles: Styles | None = None) -> SvgElement:
        return self._append("circle", styles, cx=cx, cy=cy, r=r)

    def path(self, d: str, styles: Styles | None = None) -> SvgElement:
        return self._append("path", styles, d=d)

    def polyline(self, points: str, styles: Styles | None = None) -> SvgElement:
        return self._append("polyline", styles, points=points)

    def polylines(self, outlines: Iterable[str], styles: Styles | None = None) -> list[SvgElement]:
        return [self.polyline(points, styles) for points in outlines]

    @contextmanager
    def group(self, styles: Styles | None = None) -> Iterator[SvgElement]:
        """Open a ``<g>``; primitives drawn inside the block become its children."""
        element = self._append("g", styles)
        self._context.append(element)
        try:
            yield element
        finally:
            self._context.pop()

    def to_string(self) -> str:
        return serialize_svg(self.root)

    def __str__(self) -> str:
        return self.to_string()


def _floor(value: float) -> Any:
    # nan/inf have no integer floor; keep them so a degenerate size stays visible
    if isinstance(value, float) and not math.isfinite(value):
        return value
    return math.floor(value)
