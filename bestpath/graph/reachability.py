"""Reachability filtering of target vertices."""

from __future__ import annotations

from collections import deque
from typing import List, Sequence, Set

from .builder import TerrainGraph


def reachable_vertices(graph: TerrainGraph, start: int) -> Set[int]:
    """Return every vertex reachable from ``start`` (including ``start``).

    Uses breadth-first search; only connectivity matters here, not distance.
    """

    visited = {start}
    queue: deque[int] = deque([start])

    while queue:
        vertex = queue.popleft()
        for edge in graph.neighbors(vertex):
            if edge.target in visited:
                continue
            visited.add(edge.target)
            queue.append(edge.target)
    return visited


def filter_reachable_targets(graph: TerrainGraph, start: int, targets: Sequence[int]) -> List[int]:
    """Keep the targets reachable from ``start``, preserving order and duplicates."""

    reachable = reachable_vertices(graph, start)
    return [target for target in targets if target in reachable]
