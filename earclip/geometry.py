"""
Geometric primitives for ear clipping.

Points are plain ``(x, y)`` float tuples. The sign conventions fix the
accepted winding: a counter-clockwise boundary (y axis pointing up) has
convex vertices that turn left, so ``Triangle.is_reflex`` is false for them.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

import numpy as np

Point = Tuple[float, float]


def cross(u: Point, v: Point) -> float:
    """z-component of the cross product u x v."""
    return u[0] * v[1] - v[0] * u[1]


@dataclass(frozen=True)
class Triangle:
    """Three positions (previous, current, next) captured when an ear is clipped."""

    a: Point
    b: Point
    c: Point

    def __iter__(self) -> Iterator[Point]:
        return iter((self.a, self.b, self.c))

    def contains(self, point: Point) -> bool:
        """True if point lies inside the triangle or on its boundary."""
        px, py = point
        # Center abc around the origin.
        a = (self.a[0] - px, self.a[1] - py)
        b = (self.b[0] - px, self.b[1] - py)
        c = (self.c[0] - px, self.c[1] - py)

        return cross(c, a) >= 0.0 and cross(a, b) >= 0.0 and cross(b, c) >= 0.0

    def is_reflex(self) -> bool:
        """True if the corner at b does not turn left. Colinear counts as reflex."""
        ba = (self.b[0] - self.a[0], self.b[1] - self.a[1])
        cb = (self.c[0] - self.b[0], self.c[1] - self.b[1])
        return ba[1] * cb[0] - cb[1] * ba[0] >= 0.0

    def signed_area(self) -> float:
        """Positive for counter-clockwise corners."""
        ab = (self.b[0] - self.a[0], self.b[1] - self.a[1])
        ac = (self.c[0] - self.a[0], self.c[1] - self.a[1])
        return cross(ab, ac) / 2.0

    def area(self) -> float:
        return abs(self.signed_area())


def signed_area(points: Sequence[Point]) -> float:
    """Shoelace area of a closed polygon, positive if counter-clockwise."""
    n = len(points)
    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i][0] * points[j][1] - points[j][0] * points[i][1]
    return area / 2.0


def polygon_area(points: Sequence[Point]) -> float:
    return abs(signed_area(points))


def triangles_to_array(triangles: Sequence[Triangle]) -> np.ndarray:
    """Stack triangles into a float array of shape (M, 3, 2)."""
    if not triangles:
        return np.zeros((0, 3, 2), dtype=np.float64)
    return np.array([[t.a, t.b, t.c] for t in triangles], dtype=np.float64)


def rotate_points(points: Sequence[Point], angle_rad: float) -> List[Point]:
    """Rotate points about the origin. Rotation keeps the winding."""
    ca = np.cos(angle_rad)
    sa = np.sin(angle_rad)
    return [(float(ca * x - sa * y), float(sa * x + ca * y)) for (x, y) in points]
