"""Generated SVG compared element by element with the reference assets."""

import re

import pytest

from geopattern import GENERATORS, generate
from geopattern.svg.parser import parse_svg
from tests.conftest import load_asset

_NUMBER_RE = re.compile(r"(-?\d*\.?\d+(?:e[-+]?\d+)?)")


def _tokens(value: str) -> list[str]:
    return [tok for tok in _NUMBER_RE.split(value) if tok]


def _same_value(actual: str, expected: str) -> bool:
    a, b = _tokens(actual), _tokens(expected)
    if len(a) != len(b):
        return False
    for x, y in zip(a, b):
        if _NUMBER_RE.fullmatch(x) and _NUMBER_RE.fullmatch(y):
            if float(x) != pytest.approx(float(y), rel=1e-12, abs=1e-12):
                return False
        elif x != y:
            return False
    return True


def _assert_same_tree(actual, expected, path="svg"):
    assert actual.tag == expected.tag, path
    assert list(actual.attributes) == list(expected.attributes), path
    for key, value in expected.attributes.items():
        assert _same_value(actual.attributes[key], value), f"{path}@{key}: {actual.attributes[key]} != {value}"
    assert len(actual.children) == len(expected.children), path
    for i, (a, e) in enumerate(zip(actual.children, expected.children)):
        _assert_same_tree(a, e, f"{path}/{e.tag}[{i}]")


@pytest.mark.parametrize("name", GENERATORS)
def test_matches_reference(name):
    actual = parse_svg(generate(name, generator=name).to_svg())
    expected = parse_svg(load_asset(name))
    _assert_same_tree(actual, expected)


def test_reference_text_for_squares():
    # no trig involved, so the text is identical
    assert generate("squares", generator="squares").to_svg() == load_asset("squares")
