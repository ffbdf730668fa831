"""SVG drawing surface: element model, builder, serializer and parser."""

from geopattern.svg.builder import SvgBuilder
from geopattern.svg.parser import parse_svg
from geopattern.svg.primitives import SvgElement
from geopattern.svg.serializer import fmt_num, serialize_svg

__all__ = [
    "SvgBuilder",
    "SvgElement",
    "fmt_num",
    "parse_svg",
    "serialize_svg",
]
