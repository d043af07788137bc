"""Tests for the serpentine sequential locator."""

import pytest

from gridpath.environment import LinkedGridGraph, SequentialLocator, serpentine_steps
from gridpath.errors import InvalidCellIdError


@pytest.mark.parametrize("width,height", [(1, 3), (5, 3), (4, 4), (3, 6)])
def test_walk_step_count_matches_formula(width, height):
    locator = SequentialLocator(LinkedGridGraph.build(width, height))
    for row in range(height):
        for col in range(width):
            target = row * width + col
            node, steps = locator.walk(target)
            assert node.cell_id == target
            assert steps == serpentine_steps(row, col, width)
            assert steps == locator.expected_steps(target)


def test_odd_row_example():
    # width=5, height=3: cell (1, 2) is reached after 1*5 + (5-1-2) = 7 links
    locator = SequentialLocator(LinkedGridGraph.build(5, 3))
    node, steps = locator.walk(1 * 5 + 2)
    assert node.cell_id == 7
    assert steps == 7


def test_odd_row_start_costs_a_full_row_more():
    # (1, 0) sits at the far end of the backwards row
    locator = SequentialLocator(LinkedGridGraph.build(10, 2))
    _, steps = locator.walk(10)
    assert steps == 19


def test_head_costs_nothing():
    locator = SequentialLocator(LinkedGridGraph.build(3, 3))
    node, steps = locator.walk(0)
    assert node is locator.graph.head
    assert steps == 0


def test_locate_rejects_ids_off_the_grid():
    locator = SequentialLocator(LinkedGridGraph.build(3, 3))
    with pytest.raises(InvalidCellIdError):
        locator.locate(9)
    with pytest.raises(InvalidCellIdError):
        locator.locate(-1)
