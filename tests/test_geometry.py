"""Tests for grid neighbor geometry."""

import pytest

from gridpath.environment import (
    CANONICAL_ORDER,
    Direction,
    cell_coords,
    cell_id,
    neighbor_arity,
    neighbor_coords,
    serpentine_steps,
)
from gridpath.errors import InvalidCellIdError


@pytest.mark.parametrize("width,height", [(2, 2), (3, 3), (5, 3), (4, 7), (10, 10)])
def test_neighbor_arity_by_position(width, height):
    for row in range(height):
        for col in range(width):
            on_row_edge = row in (0, height - 1)
            on_col_edge = col in (0, width - 1)
            if on_row_edge and on_col_edge:
                expected = 3
            elif on_row_edge or on_col_edge:
                expected = 5
            else:
                expected = 8
            assert neighbor_arity(row, col, width, height) == expected, (row, col)


@pytest.mark.parametrize("width,height", [(2, 2), (4, 3), (6, 5)])
def test_neighbor_relation_is_symmetric(width, height):
    for row in range(height):
        for col in range(width):
            for _, (nr, nc) in neighbor_coords(row, col, width, height):
                back = [coord for _, coord in neighbor_coords(nr, nc, width, height)]
                assert (row, col) in back


def test_interior_neighbors_follow_canonical_order():
    neighbors = neighbor_coords(1, 1, 3, 3)
    assert [d for d, _ in neighbors] == list(CANONICAL_ORDER)
    assert [coord for _, coord in neighbors] == [
        (0, 1),  # N
        (2, 1),  # S
        (1, 2),  # E
        (1, 0),  # W
        (0, 2),  # NE
        (0, 0),  # NW
        (2, 2),  # SE
        (2, 0),  # SW
    ]


def test_corner_drops_out_of_range_directions():
    neighbors = neighbor_coords(0, 0, 4, 4)
    assert [d for d, _ in neighbors] == [Direction.SOUTH, Direction.EAST, Direction.SOUTH_EAST]

    bottom_right = neighbor_coords(3, 3, 4, 4)
    assert [d for d, _ in bottom_right] == [Direction.NORTH, Direction.WEST, Direction.NORTH_WEST]


def test_direction_opposites():
    assert Direction.NORTH.opposite is Direction.SOUTH
    assert Direction.NORTH_EAST.opposite is Direction.SOUTH_WEST
    assert Direction.WEST.opposite is Direction.EAST
    assert Direction.SOUTH_EAST.slot == "south_east"


def test_cell_id_round_trip_and_bounds():
    assert cell_id(2, 3, 5, 4) == 13
    assert cell_coords(13, 5, 4) == (2, 3)

    with pytest.raises(InvalidCellIdError):
        cell_id(4, 0, 5, 4)  # row past the bottom
    with pytest.raises(InvalidCellIdError):
        cell_id(0, -1, 5, 4)
    with pytest.raises(InvalidCellIdError):
        cell_coords(20, 5, 4)


def test_serpentine_steps_formula():
    # Even rows match the row-major id, odd rows run backwards.
    assert serpentine_steps(0, 3, 5) == 3
    assert serpentine_steps(1, 2, 5) == 7
    assert serpentine_steps(1, 4, 5) == 5
    assert serpentine_steps(2, 0, 5) == 10
