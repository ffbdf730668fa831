"""Affine helpers for checking generated SVG geometry in tests."""

from __future__ import annotations

import math
import re

import numpy as np
from numpy.typing import NDArray

_TRANSFORM_RE = re.compile(r"(\w+)\(([^)]*)\)")


def parse_numbers(text: str) -> list[float]:
    """Split a comma/space separated number list (``points``, transform args)."""
    return [float(tok) for tok in re.split(r"[\s,]+", text.strip()) if tok]


def parse_points(points: str) -> NDArray[np.float64]:
    """``"0,0,10,10"`` -> Nx2 array."""
    return np.array(parse_numbers(points), dtype=np.float64).reshape(-1, 2)


def translation(tx: float, ty: float = 0.0) -> NDArray[np.float64]:
    return np.array([[1.0, 0.0, tx], [0.0, 1.0, ty], [0.0, 0.0, 1.0]])


def scaling(sx: float, sy: float | None = None) -> NDArray[np.float64]:
    sy = sx if sy is None else sy
    return np.array([[sx, 0.0, 0.0], [0.0, sy, 0.0], [0.0, 0.0, 1.0]])


def rotation(degrees: float, cx: float = 0.0, cy: float = 0.0) -> NDArray[np.float64]:
    """Rotation about ``(cx, cy)``, matching SVG ``rotate(a, cx, cy)``."""
    rad = math.radians(degrees)
    c, s = math.cos(rad), math.sin(rad)
    rot = np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])
    return translation(cx, cy) @ rot @ translation(-cx, -cy)


def transform_matrix(transform: str | None) -> NDArray[np.float64]:
    """Compose an SVG transform attribute into one 3x3 matrix (left to right)."""
    matrix = np.eye(3)
    if not transform:
        return matrix
    for name, args in _TRANSFORM_RE.findall(transform):
        values = parse_numbers(args)
        if name == "translate":
            step = translation(*values)
        elif name == "scale":
            step = scaling(*values)
        elif name == "rotate":
            step = rotation(*values)
        else:
            raise ValueError(f"Unsupported transform: {name}")
        matrix = matrix @ step
    return matrix


def apply_matrix(matrix: NDArray[np.float64], points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Map Nx2 points through a 3x3 affine matrix."""
    homogeneous = np.hstack([points, np.ones((len(points), 1))])
    return (homogeneous @ matrix.T)[:, :2]
