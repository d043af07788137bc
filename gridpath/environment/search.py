"""Breadth-first search over either grid representation.

Both searches share the same shape: a FIFO frontier, a visited list sized to the
grid, cells marked visited when enqueued, neighbors expanded in canonical
compass order and an early stop as soon as the destination is discovered. The
only difference is how neighbors are enumerated, by id lookup in the adjacency
map or by following links between nodes.

Timing covers the whole query. For the linked representation that includes the
two serpentine walks needed to find the source and destination nodes.
"""

from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass
from typing import AbstractSet, List, Union

from .geometry import check_cell_id
from .graph import AdjacencySetGraph
from .linked import LinkedGridGraph, LinkedNode, SequentialLocator
from .schemas import Representation

# Predecessor sentinel: covers both the source itself and cells never reached.
NO_PREDECESSOR = -1

PredecessorMap = List[int]


@dataclass
class SearchOutcome:
    """Raw output of one search, consumed by ``reconstruct_path``."""

    predecessors: PredecessorMap
    elapsed_ms: float
    found: bool
    # Links followed by the sequential locator (always 0 for the map representation).
    locator_steps: int = 0


def bfs_adjacency(
    graph: AdjacencySetGraph,
    source: int,
    destination: int,
    obstacles: AbstractSet[int],
) -> SearchOutcome:
    """Search the adjacency map from ``source`` until ``destination`` is discovered."""

    start = time.perf_counter()
    cell_count = graph.cell_count
    check_cell_id(source, cell_count)
    check_cell_id(destination, cell_count)

    predecessors: PredecessorMap = [NO_PREDECESSOR] * cell_count
    visited = [False] * cell_count
    visited[source] = True
    found = source == destination

    queue = deque([source])
    while queue and not found:
        u = queue.popleft()
        for v in graph.adjacency[u]:
            if visited[v] or v in obstacles:
                continue
            visited[v] = True
            predecessors[v] = u
            if v == destination:
                found = True
                break
            queue.append(v)

    elapsed_ms = (time.perf_counter() - start) * 1000.0
    return SearchOutcome(predecessors=predecessors, elapsed_ms=elapsed_ms, found=found)


def bfs_linked(
    graph: LinkedGridGraph,
    source: int,
    destination: int,
    obstacles: AbstractSet[int],
) -> SearchOutcome:
    """Locate both endpoints by serpentine walk, then search by following links."""

    start = time.perf_counter()
    locator = SequentialLocator(graph)
    source_node, source_steps = locator.walk(source)
    destination_node, destination_steps = locator.walk(destination)

    cell_count = graph.cell_count
    predecessors: PredecessorMap = [NO_PREDECESSOR] * cell_count
    visited = [False] * cell_count
    visited[source_node.cell_id] = True
    target = destination_node.cell_id
    found = source_node.cell_id == target

    queue: deque[LinkedNode] = deque([source_node])
    while queue and not found:
        current = queue.popleft()
        for neighbor in graph.neighbors(current):
            v = neighbor.cell_id
            if visited[v] or v in obstacles:
                continue
            visited[v] = True
            predecessors[v] = current.cell_id
            if v == target:
                found = True
                break
            queue.append(neighbor)

    elapsed_ms = (time.perf_counter() - start) * 1000.0
    return SearchOutcome(
        predecessors=predecessors,
        elapsed_ms=elapsed_ms,
        found=found,
        locator_steps=source_steps + destination_steps,
    )


def run_search(
    representation: Union[Representation, str],
    graph: Union[AdjacencySetGraph, LinkedGridGraph],
    source: int,
    destination: int,
    obstacles: AbstractSet[int],
) -> SearchOutcome:
    """Dispatch to the search matching ``representation``.

    Raises:
        ValueError: unknown representation name
        TypeError: graph does not match the representation
    """

    representation = Representation(representation)
    if representation is Representation.MAP:
        if not isinstance(graph, AdjacencySetGraph):
            raise TypeError("The map representation searches an AdjacencySetGraph")
        return bfs_adjacency(graph, source, destination, obstacles)
    if not isinstance(graph, LinkedGridGraph):
        raise TypeError("The linked_list representation searches a LinkedGridGraph")
    return bfs_linked(graph, source, destination, obstacles)
