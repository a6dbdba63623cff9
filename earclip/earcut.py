"""
Ear-clipping triangulation over a vertex ring.

The engine walks the ring, clips every vertex that forms an ear with its two
neighbours and stops when the ring has collapsed to a single edge. If a full
pass finds no ear (wrong winding, degenerate or invalid input), it stops
early and the triangles clipped so far are the result.
"""

from __future__ import annotations
import logging
from enum import Enum
from typing import List

from .geometry import Triangle
from .ring import Ring

logger = logging.getLogger(__name__)


class EarPolicy(Enum):
    """How a vertex found inside a candidate ear is treated."""

    CONTAINMENT = "containment"     # any contained vertex rejects the ear
    REFLEX_GATED = "reflex-gated"   # only a contained reflex vertex rejects it


def corner(ring: Ring, idx: int) -> Triangle:
    """Triangle formed by node idx and its two live neighbours."""
    nodes = ring.nodes
    node = nodes[idx]
    return Triangle(nodes[node.prev].pos, node.pos, nodes[node.next].pos)


def is_ear(ring: Ring, idx: int, policy: EarPolicy = EarPolicy.CONTAINMENT) -> bool:
    """
    True if node idx can be clipped.

    The corner at idx must be convex, and no other live vertex (the ones
    strictly between next and prev) may lie in the closed triangle. With
    ``EarPolicy.REFLEX_GATED`` a contained vertex only counts when its own
    corner is reflex.
    """
    nodes = ring.nodes
    node = nodes[idx]
    candidate = corner(ring, idx)

    if candidate.is_reflex():
        return False

    gated = policy is EarPolicy.REFLEX_GATED
    other = nodes[node.next].next
    while other != node.prev:
        if candidate.contains(nodes[other].pos):
            if not gated or corner(ring, other).is_reflex():
                return False
        other = nodes[other].next

    return True


def clip_ears(ring: Ring, policy: EarPolicy = EarPolicy.CONTAINMENT) -> List[Triangle]:
    """
    Clip ears from ring until it is a single edge, consuming the ring.

    Triangles are (prev, current, next) positions in clip order. The scan
    starts at the ring head; a three-vertex ring starts one node later so
    its only triangle keeps the input order.
    """
    nodes = ring.nodes
    tris: List[Triangle] = []

    current = ring.head
    if len(ring) == 3:
        current = nodes[current].next
    anchor = current

    while True:
        node = nodes[current]

        # Two vertices left: the ring is a line and every triangle is out.
        if node.next == node.prev:
            break

        if is_ear(ring, current, policy):
            tris.append(Triangle(nodes[node.prev].pos, node.pos, nodes[node.next].pos))
            ring.remove(current)
            anchor = current = node.next
            continue

        current = node.next
        if current == anchor:
            logger.warning(
                "no ear found in a full pass; stopping with %d vertices left and %d triangles",
                len(ring), len(tris),
            )
            break

    return tris


def triangulate(polygon, policy: EarPolicy = EarPolicy.CONTAINMENT) -> List[Triangle]:
    """Triangulate a Ring (consumed) or a sequence of (x, y) points."""
    if isinstance(polygon, Ring):
        return clip_ears(polygon, EarPolicy(policy))
    return Triangulator(polygon, policy).triangulate()


class Triangulator:
    """
    Ear-clipping triangulator for one counter-clockwise simple polygon.

    After ``triangulate()``, ``complete`` tells whether the ring collapsed
    fully (``n - 2`` triangles) or the scan gave up on a partial result.
    """

    def __init__(self, points, policy: EarPolicy = EarPolicy.CONTAINMENT):
        self.ring = Ring(points)
        self.policy = EarPolicy(policy)
        self.n = len(self.ring)
        self.reflex_count = sum(1 for i in range(self.n) if corner(self.ring, i).is_reflex())
        self.triangles: List[Triangle] = []
        self.complete = False
        self._done = False

    def triangulate(self) -> List[Triangle]:
        """Triangulate the polygon, returning list of triangles."""
        if self._done:
            return self.triangles

        logger.debug(
            "triangulating %d vertices (%d reflex), policy=%s",
            self.n, self.reflex_count, self.policy.value,
        )
        self.triangles = clip_ears(self.ring, self.policy)
        self.complete = len(self.ring) == 2
        self._done = True
        logger.debug("emitted %d triangles, complete=%s", len(self.triangles), self.complete)
        return self.triangles
