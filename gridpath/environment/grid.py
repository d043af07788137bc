"""Cell records and the registry that owns them.

The registry is the single source of truth for per-cell attributes. Both graph
representations refer to cells by identifier only and consult the registry (or
an obstacle snapshot taken from it) at query time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterator, List, Optional, Set

from ..errors import PreconditionViolationError
from .geometry import Coord, cell_coords, cell_id, check_cell_id


@dataclass
class Cell:
    """Attributes of a single grid cell."""

    cell_id: int
    row: int
    col: int
    is_obstacle: bool = False
    is_source: bool = False
    is_destination: bool = False

    @property
    def coords(self) -> Coord:
        return (self.row, self.col)


@dataclass
class CellRegistry:
    """Owns one ``Cell`` per grid position and enforces the selection invariants.

    Invariants:
    - at most one source and at most one destination
    - a source or destination is never an obstacle

    The source and destination may be the same cell.
    """

    width: int
    height: int
    cells: List[Cell] = field(default_factory=list)
    obstacles: Set[int] = field(default_factory=set)
    source_id: Optional[int] = None
    destination_id: Optional[int] = None

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Grid dimensions must be positive, got {self.width}x{self.height}")
        if not self.cells:
            self.cells = [
                Cell(cell_id=row * self.width + col, row=row, col=col)
                for row in range(self.height)
                for col in range(self.width)
            ]

    # --------------------------------------------------
    @property
    def cell_count(self) -> int:
        return self.width * self.height

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def get(self, identifier: int) -> Cell:
        """Return the cell with ``identifier``; out-of-range ids raise ``InvalidCellIdError``."""
        return self.cells[check_cell_id(identifier, self.cell_count)]

    def id_at(self, row: int, col: int) -> int:
        return cell_id(row, col, self.width, self.height)

    def coords_of(self, identifier: int) -> Coord:
        return cell_coords(identifier, self.width, self.height)

    def is_obstacle(self, identifier: int) -> bool:
        return self.get(identifier).is_obstacle

    def obstacle_snapshot(self) -> FrozenSet[int]:
        """Read-only copy of the obstacle set, handed to a single search."""
        return frozenset(self.obstacles)

    # --------------------------------------------------
    def set_obstacle(self, identifier: int, blocked: bool) -> None:
        cell = self.get(identifier)
        if blocked and (cell.is_source or cell.is_destination):
            role = "source" if cell.is_source else "destination"
            raise PreconditionViolationError(
                reason=f"Cannot mark the selected {role} as an obstacle",
                cell_id=identifier,
            )
        cell.is_obstacle = blocked
        if blocked:
            self.obstacles.add(identifier)
        else:
            self.obstacles.discard(identifier)

    def set_source(self, identifier: int) -> None:
        cell = self.get(identifier)
        if cell.is_obstacle:
            raise PreconditionViolationError(
                reason="An obstacle cannot be selected as the source",
                cell_id=identifier,
            )
        if self.source_id is not None:
            self.cells[self.source_id].is_source = False
        cell.is_source = True
        self.source_id = identifier

    def set_destination(self, identifier: int) -> None:
        cell = self.get(identifier)
        if cell.is_obstacle:
            raise PreconditionViolationError(
                reason="An obstacle cannot be selected as the destination",
                cell_id=identifier,
            )
        if self.destination_id is not None:
            self.cells[self.destination_id].is_destination = False
        cell.is_destination = True
        self.destination_id = identifier

    def clear_selections(self) -> None:
        """Unset source and destination. Obstacles are left in place."""
        if self.source_id is not None:
            self.cells[self.source_id].is_source = False
        if self.destination_id is not None:
            self.cells[self.destination_id].is_destination = False
        self.source_id = None
        self.destination_id = None

    def clear_obstacles(self) -> None:
        for identifier in self.obstacles:
            self.cells[identifier].is_obstacle = False
        self.obstacles.clear()
