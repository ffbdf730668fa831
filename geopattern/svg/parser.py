"""SVG parser — facade over xml.etree.

Reads SVG text back into an ``SvgElement`` tree so generated output can be
compared structurally and inspected (tiling checks, fixtures).
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from geopattern.svg.primitives import SvgElement

logger = logging.getLogger(__name__)


def strip_ns(tag: str) -> str:
    """Remove namespace from tag name."""
    return tag.split("}")[-1] if "}" in tag else tag


def _convert(node: ET.Element) -> SvgElement:
    return SvgElement(
        tag=strip_ns(node.tag),
        attributes=dict(node.attrib),
        children=[_convert(child) for child in node],
    )


def parse_svg(svg_text: str) -> SvgElement:
    """Parse SVG text; attribute values stay strings, ``transform`` included.

    Raises ``xml.etree.ElementTree.ParseError`` on malformed input.
    """
    root = ET.fromstring(svg_text)
    element = _convert(root)
    logger.debug("Parsed SVG: <%s> with %d children", element.tag, len(element.children))
    return element
