"""
gridpath - BFS shortest paths on an 8-connected grid, two ways.

Compares a random-access adjacency map against a linked grid that can only be
walked from its head node.

No file I/O. No rendering toolkit. No global board state.
"""

__version__ = "0.1.0"

# Core facade
from .board import Board, build_grid

# Errors
from .errors import InvalidCellIdError, PreconditionViolationError

# Result schemas
from .schemas import BoardState, ComparisonResult, PathResult

from .environment import (
    AdjacencySetGraph,
    Cell,
    CellRegistry,
    CellState,
    Direction,
    GridState,
    LinkedGridGraph,
    LinkedNode,
    Representation,
    SequentialLocator,
    neighbor_coords,
    reconstruct_path,
    render_ascii_board,
    serpentine_steps,
)

__all__ = [
    # Facade
    "Board",
    "build_grid",
    # Errors
    "InvalidCellIdError",
    "PreconditionViolationError",
    # Schemas
    "BoardState",
    "ComparisonResult",
    "PathResult",
    "CellState",
    "GridState",
    "Representation",
    # Environment
    "AdjacencySetGraph",
    "Cell",
    "CellRegistry",
    "Direction",
    "LinkedGridGraph",
    "LinkedNode",
    "SequentialLocator",
    "neighbor_coords",
    "reconstruct_path",
    "render_ascii_board",
    "serpentine_steps",
]
