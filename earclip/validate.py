"""Correctness checks for a finished triangulation."""

from __future__ import annotations
from typing import Sequence, Tuple

from .geometry import Point, Triangle, polygon_area


def validate_triangulation(points: Sequence[Point], triangles: Sequence[Triangle]) -> Tuple[bool, str]:
    """
    Verify that triangles form a full triangulation of the polygon.

    Checks:
    1. Triangle count: n - 2 triangles for an n-vertex polygon
    2. No degenerate triangles: all triangles have positive area
    3. Area preservation: sum of triangle areas == polygon area
    """
    n = len(points)

    expected = n - 2
    if len(triangles) != expected:
        return False, f"Wrong count: {len(triangles)} != {expected}"

    for tri in triangles:
        if tri.area() < 1e-12:
            return False, f"Degenerate triangle: {tri}"

    poly_a = polygon_area(points)
    tri_a = sum(tri.area() for tri in triangles)
    if abs(poly_a - tri_a) > 1e-6 * max(1, poly_a):
        return False, f"Area mismatch: {poly_a:.6f} vs {tri_a:.6f}"

    return True, "OK"
