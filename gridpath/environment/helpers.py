"""Utilities for grid graphs: path reconstruction, equivalence checks and rendering."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from .graph import AdjacencySetGraph
from .grid import CellRegistry
from .linked import LinkedGridGraph, SequentialLocator
from .schemas import CellState, GridState
from .search import NO_PREDECESSOR, PredecessorMap


def reconstruct_path(
    predecessors: PredecessorMap,
    source: int,
    destination: int,
) -> Optional[List[int]]:
    """Return cell ids from source to destination (inclusive), or None if unreachable.

    A destination with no recorded predecessor is unreachable unless it is the
    source itself, in which case the path is the single source cell.
    """

    if destination == source:
        return [source]
    if predecessors[destination] == NO_PREDECESSOR:
        return None

    # Walk back from the destination; BFS guarantees this terminates at source.
    path = [destination]
    current = destination
    while current != source:
        current = predecessors[current]
        path.append(current)
    path.reverse()
    return path


def representations_agree(adjacency: AdjacencySetGraph, linked: LinkedGridGraph) -> bool:
    """True when both graphs list the same neighbors, in the same order, for every cell.

    Visits linked nodes by serpentine walk from the head, so this costs
    O(V^2) link traversals; meant for tests and diagnostics, not per query.
    """

    if (adjacency.width, adjacency.height) != (linked.width, linked.height):
        return False
    locator = SequentialLocator(linked)
    for cell_id in range(adjacency.cell_count):
        node = locator.locate(cell_id)
        linked_ids = [n.cell_id for n in linked.neighbors(node)]
        if linked_ids != adjacency.neighbors(cell_id):
            return False
    return True


def grid_state(registry: CellRegistry) -> GridState:
    """Serializable snapshot of the registry's selections and obstacles."""
    return GridState(
        width=registry.width,
        height=registry.height,
        obstacles=sorted(registry.obstacles),
        source=registry.source_id,
        destination=registry.destination_id,
    )


def cell_state(registry: CellRegistry, cell_id: int) -> CellState:
    cell = registry.get(cell_id)
    return CellState(
        cell_id=cell.cell_id,
        row=cell.row,
        col=cell.col,
        is_obstacle=cell.is_obstacle,
        is_source=cell.is_source,
        is_destination=cell.is_destination,
    )


_DEFAULT_CELL_SYMBOLS: Dict[str, str] = {
    "empty": ". ",
    "obstacle": "██",
    "source": "S ",
    "destination": "D ",
    "path": "* ",
}


def render_ascii_board(
    registry: CellRegistry,
    path: Optional[Sequence[int]] = None,
    *,
    symbols: Optional[Dict[str, str]] = None,
) -> str:
    """Render the whole board as text, row 0 first.

    Path cells other than source and destination are drawn with the ``path``
    symbol, matching how a presentation layer highlights a result.
    """

    mapping = {**_DEFAULT_CELL_SYMBOLS}
    if symbols:
        mapping.update(symbols)

    on_path = set(path or ())
    lines: List[str] = []
    for row in range(registry.height):
        row_chars: List[str] = []
        for col in range(registry.width):
            cell = registry.cells[row * registry.width + col]
            if cell.is_source:
                row_chars.append(mapping["source"])
            elif cell.is_destination:
                row_chars.append(mapping["destination"])
            elif cell.is_obstacle:
                row_chars.append(mapping["obstacle"])
            elif cell.cell_id in on_path:
                row_chars.append(mapping["path"])
            else:
                row_chars.append(mapping["empty"])
        lines.append("".join(row_chars).rstrip())

    return "\n".join(lines)
