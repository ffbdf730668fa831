"""Tests for the shape point lists."""

from geopattern.engine.shapes import (
    build_chevron,
    build_diamond,
    build_hexagon,
    build_octagon,
    build_plus,
    build_right_triangle,
    build_rotated_triangle,
    build_triangle,
)


def test_hexagon():
    assert build_hexagon(10) == (
        "0,8.660254037844386,5,0,15,0,20,8.660254037844386,"
        "15,17.32050807568877,5,17.32050807568877,0,8.660254037844386"
    )


def test_octagon():
    assert build_octagon(10) == (
        "3.3000000000000003,0,6.699999999999999,0,10,3.3000000000000003,"
        "10,6.699999999999999,6.699999999999999,10,3.3000000000000003,10,"
        "0,6.699999999999999,0,3.3000000000000003,3.3000000000000003,0"
    )


def test_chevron_halves():
    assert build_chevron(30, 30) == [
        "0,0,15,10.2,15,30,0,19.8,0,0",
        "15,10.2,30,0,30,19.8,15,30,15,10.2",
    ]


def test_plus_boxes():
    assert build_plus(10) == [(10, 0, 10, 30), (0, 10, 30, 10)]


def test_triangles():
    assert build_triangle(10, 20) == "5,0,10,20,0,20,5,0"
    assert build_rotated_triangle(10, 20) == "0,0,20,5,0,10,0,0"
    assert build_right_triangle(10) == "0,0,10,10,0,10,0,0"


def test_diamond():
    assert build_diamond(20, 30) == "10,0,20,15,10,30,0,15"


def test_polygons_are_closed():
    for points in (build_hexagon(7), build_octagon(7), build_triangle(7, 3)):
        coords = points.split(",")
        assert coords[:2] == coords[-2:]
