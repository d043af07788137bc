"""
Core facade used by a presentation layer.

Builds the cell registry and both graph representations once, then serves:
1. Obstacle and endpoint edits (between queries)
2. Shortest-path queries on either representation
3. Side-by-side comparison of the two representations
4. Snapshots and text rendering of the board

Holds no drawing, window or input state. One query runs to completion before
the next begins; each query allocates its own visited list and predecessor map.
"""

from typing import Optional, Tuple, Union

from .config import Config
from .environment import (
    AdjacencySetGraph,
    CellRegistry,
    CellState,
    LinkedGridGraph,
    Representation,
    cell_state,
    grid_state,
    reconstruct_path,
    render_ascii_board,
    run_search,
)
from .errors import PreconditionViolationError
from .logging_utils import (
    colored,
    Color,
    LOG_TAG_DETERMINISTIC,
    LOG_TAG_ERROR,
    LOG_TAG_INFO,
    LOG_TAG_SUCCESS,
    LOG_TAG_UNREACHABLE,
)
from .schemas import BoardState, ComparisonResult, PathResult


def build_grid(width: int, height: int) -> Tuple[AdjacencySetGraph, LinkedGridGraph, CellRegistry]:
    """One-time setup: registry plus both graph representations for a ``width`` x ``height`` grid."""
    if width < 1 or height < 1:
        raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
    registry = CellRegistry(width=width, height=height)
    adjacency = AdjacencySetGraph.build(width, height)
    linked = LinkedGridGraph.build(width, height)
    return adjacency, linked, registry


class Board:
    """Grid of cells with source/destination/obstacle selections and BFS queries.

    Usage:
        board = Board(width=10, height=10)
        board.set_source(board.cell_at(0, 0))
        board.set_destination(board.cell_at(9, 9))
        board.set_obstacle(board.cell_at(5, 5), True)
        result = board.find_shortest_path("linked_list")
        print(result.describe())
    """

    def __init__(
        self,
        width: Optional[int] = None,
        height: Optional[int] = None,
        *,
        verbose: Optional[bool] = None,
    ):
        self.width = Config.GRID_WIDTH if width is None else width
        self.height = Config.GRID_HEIGHT if height is None else height
        self.verbose = Config.VERBOSE if verbose is None else verbose

        self.adjacency, self.linked, self.registry = build_grid(self.width, self.height)
        self.last_result: Optional[PathResult] = None

        self._log(
            f"  {LOG_TAG_DETERMINISTIC} [Board] Built {self.width}x{self.height} grid "
            f"({self.adjacency.edge_count()} edges)",
            Color.BLUE,
        )

    # --------------------------------------------------
    # Coordinates
    # --------------------------------------------------
    @property
    def cell_count(self) -> int:
        return self.registry.cell_count

    def cell_at(self, row: int, col: int) -> int:
        """Row-major id for ``(row, col)``; raises ``InvalidCellIdError`` off the grid."""
        return self.registry.id_at(row, col)

    def coords_of(self, cell_id: int) -> Tuple[int, int]:
        return self.registry.coords_of(cell_id)

    # --------------------------------------------------
    # Edits (never during a query)
    # --------------------------------------------------
    def set_obstacle(self, cell_id: int, blocked: bool) -> None:
        self.registry.set_obstacle(cell_id, blocked)

    def toggle_obstacle(self, cell_id: int) -> bool:
        """Flip a cell's obstacle flag and return the new value."""
        blocked = not self.registry.is_obstacle(cell_id)
        self.registry.set_obstacle(cell_id, blocked)
        return blocked

    def set_source(self, cell_id: int) -> None:
        self.registry.set_source(cell_id)

    def set_destination(self, cell_id: int) -> None:
        self.registry.set_destination(cell_id)

    def clear_selections(self) -> None:
        """Unset source and destination and drop the last result. Obstacles stay."""
        self.registry.clear_selections()
        self.last_result = None

    def reset(self) -> None:
        """Return the board to its initial state: no selections, no obstacles, no result."""
        self.registry.clear_selections()
        self.registry.clear_obstacles()
        self.last_result = None
        self._log(f"  {LOG_TAG_INFO} [Board] Reset", Color.CYAN)

    # --------------------------------------------------
    # Queries
    # --------------------------------------------------
    def find_shortest_path(
        self,
        representation: Union[Representation, str, None] = None,
        source: Optional[int] = None,
        destination: Optional[int] = None,
    ) -> PathResult:
        """Run BFS on the chosen representation and return the reconstructed path.

        ``source`` and ``destination`` default to the registry's current
        selection. Unreachable destinations come back as a result with
        ``path=None``.

        Raises:
            PreconditionViolationError: an endpoint is unset or is an obstacle
            InvalidCellIdError: an endpoint id is outside the grid
            ValueError: unknown representation name
        """

        representation = Representation(representation or Config.DEFAULT_REPRESENTATION)
        source, destination = self._resolve_endpoints(source, destination)
        graph = self.adjacency if representation is Representation.MAP else self.linked

        self._log(
            f"  {LOG_TAG_DETERMINISTIC} [{representation.value}] BFS from {self.coords_of(source)} "
            f"to {self.coords_of(destination)}...",
            Color.BLUE,
        )
        outcome = run_search(
            representation,
            graph,
            source,
            destination,
            self.registry.obstacle_snapshot(),
        )
        path = reconstruct_path(outcome.predecessors, source, destination)
        result = PathResult(
            representation=representation,
            source=source,
            destination=destination,
            path=path,
            elapsed_ms=outcome.elapsed_ms,
            locator_steps=outcome.locator_steps,
        )
        self.last_result = result

        if result.reachable:
            self._log(
                f"  {LOG_TAG_SUCCESS} [{representation.value}] Path of {result.length} tiles "
                f"in {result.elapsed_ms:.2f} ms",
                Color.GREEN,
            )
        else:
            self._log(
                f"  {LOG_TAG_UNREACHABLE} [{representation.value}] Destination unreachable "
                f"({result.elapsed_ms:.2f} ms)",
                Color.YELLOW,
            )
        return result

    def compare_representations(
        self,
        source: Optional[int] = None,
        destination: Optional[int] = None,
    ) -> ComparisonResult:
        """Answer the same query with both representations."""
        map_result = self.find_shortest_path(Representation.MAP, source, destination)
        linked_result = self.find_shortest_path(Representation.LINKED_LIST, source, destination)
        comparison = ComparisonResult(map_result=map_result, linked_result=linked_result)
        if not comparison.paths_agree:
            # Both graphs come from the same geometry; disagreement means a construction bug.
            self._log(f"  {LOG_TAG_ERROR} [Board] Representations returned different paths", Color.RED)
        return comparison

    # --------------------------------------------------
    # Views
    # --------------------------------------------------
    def cell(self, cell_id: int) -> CellState:
        return cell_state(self.registry, cell_id)

    def snapshot(self) -> BoardState:
        return BoardState(grid=grid_state(self.registry), last_result=self.last_result)

    def render(self) -> str:
        path = self.last_result.path if self.last_result is not None else None
        return render_ascii_board(self.registry, path)

    # --------------------------------------------------
    def _resolve_endpoints(self, source: Optional[int], destination: Optional[int]) -> Tuple[int, int]:
        source = self.registry.source_id if source is None else source
        destination = self.registry.destination_id if destination is None else destination
        if source is None:
            raise PreconditionViolationError(reason="No source cell selected")
        if destination is None:
            raise PreconditionViolationError(reason="No destination cell selected")
        if self.registry.is_obstacle(source):
            raise PreconditionViolationError(reason="Source cell is an obstacle", cell_id=source)
        if self.registry.is_obstacle(destination):
            raise PreconditionViolationError(reason="Destination cell is an obstacle", cell_id=destination)
        return source, destination

    def _log(self, message: str, color: Color) -> None:
        if self.verbose:
            print(colored(message, color))
