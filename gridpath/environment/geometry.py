"""Neighbor geometry for a rectangular 8-connected grid.

Row 0 is the top row and column 0 the leftmost column, so "north" means
``row - 1``. Cell identifiers are row-major: ``cell_id = row * width + col``.

Every neighbor list produced here follows the canonical compass order
N, S, E, W, NE, NW, SE, SW. Both graph representations are built from
``neighbor_coords`` so they enumerate neighbors in the same order, which keeps
BFS tie-breaking identical across them.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Tuple

from ..errors import InvalidCellIdError

Coord = Tuple[int, int]  # (row, col)


class Direction(Enum):
    """Compass directions as (row delta, col delta), in canonical order."""

    NORTH = (-1, 0)
    SOUTH = (1, 0)
    EAST = (0, 1)
    WEST = (0, -1)
    NORTH_EAST = (-1, 1)
    NORTH_WEST = (-1, -1)
    SOUTH_EAST = (1, 1)
    SOUTH_WEST = (1, -1)

    @property
    def delta(self) -> Coord:
        return self.value

    @property
    def opposite(self) -> "Direction":
        dr, dc = self.value
        return Direction((-dr, -dc))

    @property
    def slot(self) -> str:
        """Attribute name of this direction's link on a linked grid node."""
        return self.name.lower()


# Enum iteration preserves definition order, which is the canonical order.
CANONICAL_ORDER: Tuple[Direction, ...] = tuple(Direction)


def in_bounds(row: int, col: int, width: int, height: int) -> bool:
    return 0 <= row < height and 0 <= col < width


def neighbor_coords(row: int, col: int, width: int, height: int) -> List[Tuple[Direction, Coord]]:
    """Return ``(direction, (row, col))`` for every in-bounds neighbor of a cell.

    Corners yield 3 neighbors, other edge cells 5 and interior cells 8 (on
    grids of at least 2x2). Out-of-range directions are simply dropped.
    """

    out: List[Tuple[Direction, Coord]] = []
    for direction in CANONICAL_ORDER:
        dr, dc = direction.delta
        nr, nc = row + dr, col + dc
        if in_bounds(nr, nc, width, height):
            out.append((direction, (nr, nc)))
    return out


def neighbor_arity(row: int, col: int, width: int, height: int) -> int:
    """Number of neighbors of ``(row, col)``: 3 at corners, 5 on edges, 8 inside."""
    return len(neighbor_coords(row, col, width, height))


def cell_id(row: int, col: int, width: int, height: int) -> int:
    """Row-major identifier of ``(row, col)``. Raises for coordinates off the grid."""
    if not in_bounds(row, col, width, height):
        raise InvalidCellIdError(
            cell_id=row * width + col,
            cell_count=width * height,
            coords=(row, col),
        )
    return row * width + col


def cell_coords(identifier: int, width: int, height: int) -> Coord:
    """Inverse of ``cell_id``. Raises for identifiers outside ``[0, width*height)``."""
    check_cell_id(identifier, width * height)
    return divmod(identifier, width)


def check_cell_id(identifier: int, cell_count: int) -> int:
    # bool is an int subclass; True/False are never meaningful cell ids
    if isinstance(identifier, bool) or not isinstance(identifier, int):
        raise TypeError(f"Cell ids are integers, got {identifier!r}")
    if not 0 <= identifier < cell_count:
        raise InvalidCellIdError(cell_id=identifier, cell_count=cell_count)
    return identifier


def serpentine_steps(row: int, col: int, width: int) -> int:
    """Links followed from the head to reach ``(row, col)`` in serpentine order.

    Even rows are walked left to right and odd rows right to left, so the count
    equals the row-major id only on even rows.
    """

    if row % 2 == 0:
        return row * width + col
    return row * width + (width - 1 - col)
