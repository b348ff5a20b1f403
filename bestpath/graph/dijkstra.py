"""Single-source shortest paths over the terrain graph."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .builder import TerrainGraph


@dataclass
class ShortestPaths:
    """Distances and predecessors from one source to every vertex.

    ``distances[v]`` is None when ``v`` is unreachable. ``predecessors[v]`` is
    None for the source and for unreachable vertices.
    """

    source: int
    distances: List[Optional[int]]
    predecessors: List[Optional[int]]


@dataclass
class PathResult:
    """Path to one target. ``path is None`` means unreachable (``total_cost`` is then 0)."""

    path: Optional[List[int]]
    target: int
    total_cost: int


def dijkstra(graph: TerrainGraph, source: int) -> ShortestPaths:
    """Run Dijkstra from ``source`` until the queue is empty.

    The search is never stopped early, so one run answers distance queries for
    every vertex. Entries with equal distance pop in insertion order.
    """

    size = len(graph)
    distances: List[Optional[int]] = [None] * size
    predecessors: List[Optional[int]] = [None] * size
    finalized = [False] * size

    distances[source] = 0
    counter = 0
    heap: List[Tuple[int, int, int]] = [(0, counter, source)]

    while heap:
        dist, _, vertex = heapq.heappop(heap)
        # Stale entry: vertex already settled with a shorter distance
        if finalized[vertex]:
            continue
        finalized[vertex] = True

        for edge in graph.neighbors(vertex):
            if finalized[edge.target]:
                continue
            candidate = dist + edge.weight
            current = distances[edge.target]
            if current is None or candidate < current:
                distances[edge.target] = candidate
                predecessors[edge.target] = vertex
                counter += 1
                heapq.heappush(heap, (candidate, counter, edge.target))

    return ShortestPaths(source=source, distances=distances, predecessors=predecessors)


def reconstruct_path(shortest: ShortestPaths, target: int) -> Optional[List[int]]:
    """Walk predecessors from ``target`` back to the source.

    Returns ``[source]`` when ``target`` is the source itself and None when the
    target was never reached.
    """

    if target == shortest.source:
        return [target]
    if shortest.distances[target] is None:
        return None

    path = [target]
    current = target
    while current != shortest.source:
        previous = shortest.predecessors[current]
        if previous is None:
            return None
        path.append(previous)
        current = previous
    path.reverse()
    return path


def find_shortest_paths(graph: TerrainGraph, source: int, targets: Sequence[int]) -> List[PathResult]:
    """Return one PathResult per entry of ``targets`` from a single Dijkstra run."""

    shortest = dijkstra(graph, source)
    results: List[PathResult] = []
    for target in targets:
        path = reconstruct_path(shortest, target)
        distance = shortest.distances[target]
        results.append(
            PathResult(
                path=path,
                target=target,
                total_cost=distance if path is not None and distance is not None else 0,
            )
        )
    return results
