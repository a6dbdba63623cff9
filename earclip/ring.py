"""
Circular doubly linked list over polygon vertices.

Nodes are stored once, in input order, and link to each other by index into
``Ring.nodes``. Removing a vertex relinks its two neighbours; the removed
node stays in storage with stale links and must not be visited again.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Optional

import numpy as np

from .errors import InvalidInputError
from .geometry import Point


@dataclass
class Node:
    """A ring node, with index references into the backing list."""

    pos: Point
    prev: int
    next: int


def _coerce_points(points) -> List[Point]:
    try:
        arr = np.asarray(points, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"polygon points are not numeric (x, y) pairs: {exc}") from exc

    if arr.size == 0:
        arr = arr.reshape(0, 2)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise InvalidInputError(f"expected a sequence of (x, y) pairs, got array of shape {arr.shape}")
    if len(arr) < 3:
        raise InvalidInputError(f"a polygon needs at least 3 vertices, got {len(arr)}")
    if not np.all(np.isfinite(arr)):
        raise InvalidInputError("polygon coordinates must be finite")

    return [(float(x), float(y)) for x, y in arr]


class Ring:
    """
    Backing storage for the vertex ring.

    The caller is responsible for valid input: counter-clockwise order, no
    duplicate consecutive points, no self-intersections.
    """

    def __init__(self, points):
        pts = _coerce_points(points)
        n = len(pts)
        self.nodes: List[Node] = [
            Node(pos=pos, prev=(i - 1) % n, next=(i + 1) % n)
            for i, pos in enumerate(pts)
        ]
        self.size = n
        self.head = 0  # any live node

    @classmethod
    def from_points(cls, points) -> "Ring":
        return cls(points)

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return f"Ring(live={self.size}, capacity={len(self.nodes)})"

    def remove(self, idx: int) -> None:
        """Unlink node idx. Its own prev/next are left as they were."""
        node = self.nodes[idx]
        self.nodes[node.prev].next = node.next
        self.nodes[node.next].prev = node.prev
        self.size -= 1
        if idx == self.head:
            self.head = node.next

    def walk(self, start: Optional[int] = None) -> Iterator[int]:
        """Yield live indices once around the ring, beginning at start."""
        if start is None:
            start = self.head
        idx = start
        while True:
            yield idx
            idx = self.nodes[idx].next
            if idx == start:
                return

    def positions(self, start: Optional[int] = None) -> List[Point]:
        return [self.nodes[i].pos for i in self.walk(start)]

    def is_consistent(self) -> bool:
        """Check that every live node is linked back by both neighbours."""
        n = len(self.nodes)
        seen = 0
        for idx in self.walk():
            node = self.nodes[idx]
            if not (0 <= node.prev < n and 0 <= node.next < n):
                return False
            if self.nodes[node.next].prev != idx or self.nodes[node.prev].next != idx:
                return False
            seen += 1
            if seen > self.size:
                return False
        return seen == self.size
