"""
Pydantic schemas for query results handed to a presentation layer.

Design Philosophy:
- Unreachable is a value (``path is None``), never an exception
- Results are plain data: ids and timings, no references into the graphs
- Text helpers mirror what the interactive board displays after a run
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from gridpath.environment import CellState, GridState, Representation


# ============================================================================
# Query Results
# ============================================================================


class PathResult(BaseModel):
    """Outcome of one shortest-path query.

    ``path`` lists cell ids from source to destination inclusive. A query whose
    source equals its destination yields a single-cell path. ``None`` means the
    destination cannot be reached around the obstacles.
    """

    representation: Representation = Field(..., description="Graph the query ran against")
    source: int = Field(..., ge=0, description="Source cell id")
    destination: int = Field(..., ge=0, description="Destination cell id")
    path: Optional[List[int]] = Field(
        None,
        description="Cell ids from source to destination, or None when unreachable",
    )
    elapsed_ms: float = Field(..., ge=0.0, description="Wall-clock time of the search in milliseconds")
    # Links followed by the serpentine locator; 0 for the map representation.
    locator_steps: int = Field(0, ge=0, description="Links walked to locate source and destination")

    @property
    def reachable(self) -> bool:
        return self.path is not None

    @property
    def length(self) -> int:
        """Number of cells on the path, source and destination included (0 if unreachable)."""
        return len(self.path) if self.path is not None else 0

    @property
    def hops(self) -> Optional[int]:
        """Moves needed to walk the path, or None when unreachable."""
        return len(self.path) - 1 if self.path is not None else None

    @property
    def highlighted_cells(self) -> List[int]:
        """Path cells between source and destination (what the board paints)."""
        if not self.path:
            return []
        return [c for c in self.path if c not in (self.source, self.destination)]

    def describe(self) -> str:
        """Two-line summary: path length in tiles and time taken."""
        if self.path is None:
            first = "No path exists between the source and destination."
        else:
            first = f"Shortest path: {self.length} tiles"
        return f"{first}\nTime taken: {self.elapsed_ms:.2f} ms"


class ComparisonResult(BaseModel):
    """The same query answered by both representations."""

    map_result: PathResult
    linked_result: PathResult

    @property
    def paths_agree(self) -> bool:
        return self.map_result.path == self.linked_result.path

    @property
    def faster(self) -> Representation:
        if self.linked_result.elapsed_ms < self.map_result.elapsed_ms:
            return Representation.LINKED_LIST
        return Representation.MAP

    @property
    def speedup(self) -> Optional[float]:
        """How many times faster the faster representation was (None if a timer read 0)."""
        fast = min(self.map_result.elapsed_ms, self.linked_result.elapsed_ms)
        slow = max(self.map_result.elapsed_ms, self.linked_result.elapsed_ms)
        if fast <= 0.0:
            return None
        return slow / fast

    def describe(self) -> str:
        lines = [
            f"map:         {self.map_result.elapsed_ms:.2f} ms",
            f"linked_list: {self.linked_result.elapsed_ms:.2f} ms "
            f"({self.linked_result.locator_steps} locator steps)",
        ]
        speedup = self.speedup
        if speedup is not None:
            lines.append(f"{self.faster.value} was {speedup:.1f}x faster")
        return "\n".join(lines)


# ============================================================================
# Board Snapshot
# ============================================================================


class BoardState(BaseModel):
    """Everything a presentation layer needs to draw the board."""

    grid: GridState
    last_result: Optional[PathResult] = Field(
        None,
        description="Most recent query result; cleared by clear_selections and reset",
    )

    def cell_role(self, cell_id: int) -> str:
        """Return 'source', 'destination', 'obstacle', 'path' or 'empty' for a cell."""
        if cell_id == self.grid.source:
            return "source"
        if cell_id == self.grid.destination:
            return "destination"
        if cell_id in self.grid.obstacles:
            return "obstacle"
        if self.last_result is not None and cell_id in self.last_result.highlighted_cells:
            return "path"
        return "empty"


__all__ = [
    "CellState",
    "GridState",
    "Representation",
    "PathResult",
    "ComparisonResult",
    "BoardState",
]
