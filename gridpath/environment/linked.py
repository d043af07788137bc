"""Linked representation of the grid ("linked list" representation).

Each node carries up to eight directional links to its neighbors. Links are
stored as optional arena indices instead of object references, so a missing
neighbor is always an explicit ``None`` and never a dangling pointer.

The arena itself is private. Callers reach nodes only by starting at ``head``
and following links, either directly (``follow``/``neighbors``) or through the
``SequentialLocator``, which walks the grid in serpentine order the way one
would walk a linked list with no index.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .geometry import Direction, CANONICAL_ORDER, check_cell_id, neighbor_coords, serpentine_steps


@dataclass
class LinkedNode:
    """One grid cell in the linked representation.

    Holds the id of its cell (not the cell record) and one optional link per
    compass direction.
    """

    cell_id: int
    north: Optional[int] = None
    south: Optional[int] = None
    east: Optional[int] = None
    west: Optional[int] = None
    north_east: Optional[int] = None
    north_west: Optional[int] = None
    south_east: Optional[int] = None
    south_west: Optional[int] = None

    def link(self, direction: Direction) -> Optional[int]:
        return getattr(self, direction.slot)

    def set_link(self, direction: Direction, target: Optional[int]) -> None:
        setattr(self, direction.slot, target)

    def present_links(self) -> List[Direction]:
        return [d for d in CANONICAL_ORDER if self.link(d) is not None]


class LinkedGridGraph:
    """Grid of ``LinkedNode`` records reachable only by following links from ``head``."""

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._nodes: List[LinkedNode] = []
        self._head_index = 0

    @classmethod
    def build(cls, width: int, height: int) -> "LinkedGridGraph":
        graph = cls(width, height)
        # Pass 1: allocate every node so links always have a target.
        graph._nodes = [LinkedNode(cell_id=i) for i in range(width * height)]
        # Pass 2: wire links from the shared geometry.
        for node in graph._nodes:
            row, col = divmod(node.cell_id, width)
            for direction, (nr, nc) in neighbor_coords(row, col, width, height):
                node.set_link(direction, nr * width + nc)
        return graph

    # --------------------------------------------------
    @property
    def cell_count(self) -> int:
        return self.width * self.height

    @property
    def head(self) -> LinkedNode:
        """Node for cell (0, 0). Fixed at construction."""
        return self._nodes[self._head_index]

    def follow(self, node: LinkedNode, direction: Direction) -> Optional[LinkedNode]:
        """Follow one link out of ``node``. Returns ``None`` at the grid boundary."""
        target = node.link(direction)
        if target is None:
            return None
        return self._nodes[target]

    def neighbors(self, node: LinkedNode) -> Iterator[LinkedNode]:
        """Yield linked neighbors of ``node`` in canonical order, skipping absent links."""
        for direction in CANONICAL_ORDER:
            target = node.link(direction)
            if target is not None:
                yield self._nodes[target]

    def coords_of(self, node: LinkedNode) -> Tuple[int, int]:
        return divmod(node.cell_id, self.width)


class SequentialLocator:
    """Finds a node by walking the linked grid in serpentine order from ``head``.

    Row 0 is walked east from column 0 to the last column, then the walk steps
    south; odd rows are walked west back to column 0, then south again. Reaching
    the cell at ``(row, col)`` costs exactly ``serpentine_steps(row, col, width)``
    link traversals.
    """

    def __init__(self, graph: LinkedGridGraph):
        self.graph = graph

    def locate(self, target_id: int) -> LinkedNode:
        node, _ = self.walk(target_id)
        return node

    def walk(self, target_id: int) -> Tuple[LinkedNode, int]:
        """Return the node for ``target_id`` and the number of links followed."""
        check_cell_id(target_id, self.graph.cell_count)
        last_col = self.graph.width - 1
        node = self.graph.head
        steps = 0
        while node.cell_id != target_id:
            row, col = self.graph.coords_of(node)
            if row % 2 == 0:
                direction = Direction.EAST if col < last_col else Direction.SOUTH
            else:
                direction = Direction.WEST if col > 0 else Direction.SOUTH
            node = self.graph.follow(node, direction)
            steps += 1
        return node, steps

    def expected_steps(self, target_id: int) -> int:
        check_cell_id(target_id, self.graph.cell_count)
        row, col = divmod(target_id, self.graph.width)
        return serpentine_steps(row, col, self.graph.width)
