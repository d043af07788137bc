"""Grid geometry, cell registry, both graph representations and BFS for gridpath."""

from .geometry import (
    CANONICAL_ORDER,
    Direction,
    cell_coords,
    cell_id,
    neighbor_arity,
    neighbor_coords,
    serpentine_steps,
)
from .grid import Cell, CellRegistry
from .graph import AdjacencySetGraph
from .linked import LinkedGridGraph, LinkedNode, SequentialLocator
from .schemas import CellState, GridState, Representation
from .search import (
    NO_PREDECESSOR,
    SearchOutcome,
    bfs_adjacency,
    bfs_linked,
    run_search,
)
from .helpers import (
    cell_state,
    grid_state,
    reconstruct_path,
    render_ascii_board,
    representations_agree,
)

__all__ = [
    "CANONICAL_ORDER",
    "Direction",
    "cell_coords",
    "cell_id",
    "neighbor_arity",
    "neighbor_coords",
    "serpentine_steps",
    "Cell",
    "CellRegistry",
    "AdjacencySetGraph",
    "LinkedGridGraph",
    "LinkedNode",
    "SequentialLocator",
    "CellState",
    "GridState",
    "Representation",
    "NO_PREDECESSOR",
    "SearchOutcome",
    "bfs_adjacency",
    "bfs_linked",
    "run_search",
    "cell_state",
    "grid_state",
    "reconstruct_path",
    "render_ascii_board",
    "representations_agree",
]
