"""Write SVG text from an element tree."""

from __future__ import annotations

import math
from typing import Any

from geopattern.svg.primitives import SvgElement


def fmt_num(value: Any) -> str:
    """Format an attribute value the way a browser stringifies numbers.

    Shortest round-trip digits, integral floats without ``.0``, ``-0`` as
    ``0``, and exponent notation only outside ``1e-7 <= |v| < 1e21``.
    Strings pass through untouched.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)

    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if value.is_integer() and abs(value) < 2**53:
        return str(int(value))

    text = repr(value)
    if "e" not in text:
        return text[:-2] if text.endswith(".0") else text

    # repr switches to exponents earlier than JS does; re-expand.
    mantissa, exp_text = text.split("e")
    exponent = int(exp_text)
    sign = "-" if value < 0 else ""
    digits = mantissa.lstrip("-").replace(".", "")
    if -7 < exponent < 21:
        point = exponent + 1
        if point <= 0:
            return f"{sign}0.{'0' * -point}{digits}"
        if point >= len(digits):
            return f"{sign}{digits}{'0' * (point - len(digits))}"
        return f"{sign}{digits[:point]}.{digits[point:]}"
    lead = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
    return f"{sign}{lead}e{'+' if exponent > 0 else '-'}{abs(exponent)}"


def fmt_transform(element: SvgElement) -> str:
    return " ".join(
        f"{name}({','.join(fmt_num(v) for v in values)})" for name, values in element.transforms
    )


def serialize_element(element: SvgElement) -> str:
    """``<tag a="1" ...>children</tag>``; always an explicit closing tag."""
    attrs = [f'{k}="{fmt_num(v)}"' for k, v in element.attributes.items()]
    if element.transforms:
        attrs.append(f'transform="{fmt_transform(element)}"')
    attr_str = (" " + " ".join(attrs)) if attrs else ""
    content = "".join(serialize_element(child) for child in element.children)
    return f"<{element.tag}{attr_str}>{content}</{element.tag}>"


def serialize_svg(root: SvgElement) -> str:
    return serialize_element(root)
