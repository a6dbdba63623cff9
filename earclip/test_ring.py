import numpy as np
import pytest

from earclip.errors import InvalidInputError
from earclip.generators import convex_polygon
from earclip.ring import Node, Ring


def test_new_is_valid_indices():
    ring = Ring([(0.0, 0.0)] * 3)

    assert ring.nodes == [
        Node(pos=(0.0, 0.0), prev=2, next=1),
        Node(pos=(0.0, 0.0), prev=0, next=2),
        Node(pos=(0.0, 0.0), prev=1, next=0),
    ]


def test_links_and_consistency():
    for n in range(3, 12):
        ring = Ring(convex_polygon(n))
        assert len(ring) == n
        for i, node in enumerate(ring.nodes):
            assert 0 <= node.prev < n and 0 <= node.next < n
            assert node.prev == (i - 1) % n
            assert node.next == (i + 1) % n
            assert ring.nodes[node.next].prev == i
            assert ring.nodes[node.prev].next == i
        assert ring.is_consistent()


def test_positions_in_input_order():
    pts = [(0, 0), (4, 0), (4, 4), (2, 1), (0, 4)]
    ring = Ring(pts)
    assert ring.positions() == [(0.0, 0.0), (4.0, 0.0), (4.0, 4.0), (2.0, 1.0), (0.0, 4.0)]
    assert ring.positions(3)[0] == (2.0, 1.0)
    assert all(isinstance(c, float) for p in ring.positions() for c in p)


def test_input_is_copied():
    pts = [[0, 0], [1, 0], [0, 1]]
    ring = Ring(pts)
    pts[0][0] = 99
    assert ring.nodes[0].pos == (0.0, 0.0)


def test_numpy_input():
    ring = Ring(np.array([[0, 0], [2, 0], [2, 2], [0, 2]]))
    assert len(ring) == 4
    assert ring.nodes[2].pos == (2.0, 2.0)


@pytest.mark.parametrize("pts", [[], [(0, 0)], [(0, 0), (1, 0)]])
def test_too_few_vertices(pts):
    with pytest.raises(InvalidInputError, match="at least 3"):
        Ring(pts)


def test_invalid_input_is_value_error():
    with pytest.raises(ValueError):
        Ring([(0, 0), (1, 1)])


@pytest.mark.parametrize("pts", [
    [(0, 0, 0), (1, 0, 0), (0, 1, 0)],
    [1.0, 2.0, 3.0],
    [("a", "b"), ("c", "d"), ("e", "f")],
    [(0, 0), (1, float("nan")), (0, 1)],
])
def test_malformed_points(pts):
    with pytest.raises(InvalidInputError):
        Ring(pts)


def test_remove_relinks_neighbours():
    ring = Ring(convex_polygon(5))
    ring.remove(2)

    assert len(ring) == 4
    assert ring.nodes[1].next == 3
    assert ring.nodes[3].prev == 1
    # removed node keeps its stale links
    assert ring.nodes[2].prev == 1 and ring.nodes[2].next == 3
    assert list(ring.walk()) == [0, 1, 3, 4]
    assert ring.is_consistent()


def test_remove_head():
    ring = Ring(convex_polygon(5))
    ring.remove(0)
    ring.remove(1)
    assert ring.head == 2
    assert list(ring.walk()) == [2, 3, 4]
    assert ring.nodes[4].next == 2
    assert ring.is_consistent()


def test_remove_down_to_edge():
    ring = Ring(convex_polygon(4))
    ring.remove(1)
    ring.remove(2)
    assert len(ring) == 2
    assert ring.nodes[0].next == ring.nodes[0].prev == 3
    assert ring.is_consistent()


def test_inconsistent_ring_detected():
    ring = Ring(convex_polygon(4))
    ring.nodes[1].prev = 3
    assert not ring.is_consistent()
