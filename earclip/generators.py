"""
Deterministic polygon families for tests and benchmarks.

Every generator returns a simple polygon in counter-clockwise order, which is
the winding the ear test treats as convex.
"""

from __future__ import annotations
import math
import random
from typing import Callable, Dict, List

from .geometry import Point, rotate_points

# Fixed rotation (radians) applied to generated datasets, avoids axis-aligned ties.
ROT_ANGLE = 0.123456789


def convex_polygon(n: int, radius: float = 100.0) -> List[Point]:
    """Regular n-gon."""
    return [
        (
            radius * math.cos(2 * math.pi * i / n),
            radius * math.sin(2 * math.pi * i / n),
        )
        for i in range(n)
    ]


def random_polygon(n: int, radius: float = 100.0, seed: int = 42) -> List[Point]:
    """Random simple polygon via angular sweep - star-shaped around the origin."""
    rng = random.Random(seed + n)
    angles = sorted(rng.random() * 2 * math.pi for _ in range(n))
    points = []
    for angle in angles:
        r = radius * (0.4 + 0.6 * rng.random())
        points.append((r * math.cos(angle), r * math.sin(angle)))
    return points


def star_polygon(n_pairs: int, outer: float = 100.0, inner: float = 30.0) -> List[Point]:
    """Star with n_pairs spikes; every inner vertex is reflex."""
    points = []
    for i in range(2 * n_pairs):
        angle = math.pi * i / n_pairs
        r = outer if i % 2 == 0 else inner
        points.append((r * math.cos(angle), r * math.sin(angle)))
    return points


def l_shape() -> List[Point]:
    return [(0, 0), (2, 0), (2, 1), (1, 1), (1, 2), (0, 2)]


def notch_polygon() -> List[Point]:
    """Square with a triangular notch cut from the top edge."""
    return [(0, 0), (4, 0), (4, 4), (2, 1), (0, 4)]


def outline_polygon() -> List[Point]:
    """Ten-vertex outline used by the plotting example."""
    coords = [0, 80, 100, 0, 190, 85, 270, 35, 345, 140, 255, 130, 215, 210, 140, 70, 45, 95, 50, 185]
    return [(float(coords[i]), float(coords[i + 1])) for i in range(0, len(coords), 2)]


def _sized(family: Callable[[int], List[Point]]) -> Callable[[int], List[Point]]:
    # Rotated copy, sized by vertex count.
    return lambda n: rotate_points(family(n), ROT_ANGLE)


GENERATORS: Dict[str, Callable[[int], List[Point]]] = {
    "convex": _sized(convex_polygon),
    "random": _sized(random_polygon),
    "star": _sized(lambda n: star_polygon(max(3, n // 2))),
}
