"""Tests for the adjacency-set and linked grid representations."""

import pytest

from gridpath import build_grid
from gridpath.environment import (
    AdjacencySetGraph,
    Direction,
    LinkedGridGraph,
    SequentialLocator,
    representations_agree,
)


def test_adjacency_graph_is_symmetric():
    graph = AdjacencySetGraph.build(6, 4)
    for cell_id in range(graph.cell_count):
        for neighbor in graph.neighbors(cell_id):
            assert cell_id in graph.neighbor_set(neighbor)


def test_adjacency_edge_count():
    # 3x3 grid: 12 orthogonal + 8 diagonal edges
    graph = AdjacencySetGraph.build(3, 3)
    assert graph.edge_count() == 20
    assert graph.neighbor_set(4) == frozenset({0, 1, 2, 3, 5, 6, 7, 8})


@pytest.mark.parametrize("width,height", [(1, 1), (1, 4), (2, 2), (5, 3), (7, 6)])
def test_representations_enumerate_identical_neighbors(width, height):
    adjacency, linked, _ = build_grid(width, height)
    assert representations_agree(adjacency, linked)


def test_linked_neighbor_sets_match_per_cell():
    adjacency, linked, _ = build_grid(4, 5)
    locator = SequentialLocator(linked)
    for cell_id in range(adjacency.cell_count):
        node = locator.locate(cell_id)
        assert {n.cell_id for n in linked.neighbors(node)} == adjacency.neighbor_set(cell_id)


def test_head_is_top_left_and_boundary_links_absent():
    linked = LinkedGridGraph.build(3, 3)
    head = linked.head
    assert head.cell_id == 0
    assert head.north is None and head.west is None
    assert head.north_west is None and head.north_east is None and head.south_west is None
    assert linked.follow(head, Direction.NORTH) is None
    assert linked.follow(head, Direction.EAST).cell_id == 1
    assert linked.follow(head, Direction.SOUTH_EAST).cell_id == 4
    assert head.present_links() == [Direction.SOUTH, Direction.EAST, Direction.SOUTH_EAST]


def test_links_point_back():
    linked = LinkedGridGraph.build(4, 4)
    locator = SequentialLocator(linked)
    center = locator.locate(5)
    for direction in center.present_links():
        neighbor = linked.follow(center, direction)
        assert linked.follow(neighbor, direction.opposite) is center


def test_linked_graph_offers_no_lookup_by_id():
    linked = LinkedGridGraph.build(3, 3)
    # Nodes are reachable from head only; there is no public indexing API.
    assert not hasattr(linked, "__getitem__")
    assert not hasattr(linked, "node")
    assert not hasattr(linked, "nodes")


def test_build_rejects_empty_grid():
    with pytest.raises(ValueError):
        build_grid(0, 5)
    with pytest.raises(ValueError):
        LinkedGridGraph.build(3, 0)
