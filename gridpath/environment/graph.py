"""Adjacency-set representation of the grid ("map" representation).

Maps each cell id to its neighbor ids. Lookup by id is O(1), which is what the
search engine relies on when expanding a cell.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List

from .geometry import check_cell_id, neighbor_coords


@dataclass
class AdjacencySetGraph:
    """Immutable-after-build adjacency map between cell ids.

    Neighbor lists are stored in canonical compass order; ``neighbor_set``
    exposes the same ids as a set. Obstacles are not removed from the map,
    the search engine skips them at query time.
    """

    width: int
    height: int
    adjacency: Dict[int, List[int]] = field(default_factory=dict)

    @classmethod
    def build(cls, width: int, height: int) -> "AdjacencySetGraph":
        graph = cls(width=width, height=height)
        for row in range(height):
            for col in range(width):
                identifier = row * width + col
                graph.adjacency[identifier] = [
                    nr * width + nc for _, (nr, nc) in neighbor_coords(row, col, width, height)
                ]
        return graph

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    def neighbors(self, cell_id: int) -> List[int]:
        return self.adjacency[check_cell_id(cell_id, self.cell_count)]

    def neighbor_set(self, cell_id: int) -> FrozenSet[int]:
        return frozenset(self.neighbors(cell_id))

    def edge_count(self) -> int:
        """Number of undirected edges."""
        return sum(len(ids) for ids in self.adjacency.values()) // 2
