"""
Greedy multi-target routing.

The router visits targets one at a time. From its current vertex it runs one
full Dijkstra search, picks the cheapest remaining target, emits the moves to
reach it and continues from there. This is nearest-remaining-next, not a tour
optimizer: the visit order can cost more in total than the best possible order,
and callers rely on that order being the greedy one.

Selection rules:
- Minimum path cost wins; ties go to the target listed first in ``remaining``
- One list entry is consumed per iteration, so a target requested twice is
  visited twice (the second visit is an empty segment)
- A candidate without a path is dropped and recorded in ``skipped``; it is not
  retried. With reachability filtering upstream this does not happen.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from .directions import path_to_directions
from .graph.builder import TerrainGraph
from .graph.dijkstra import find_shortest_paths
from .grid.transform import CoordinateMap
from .schemas import Direction


@dataclass
class RouteSegment:
    """One visited target: the vertex path to it, its cost and the moves."""

    target: int
    path: List[int]
    cost: int
    directions: List[Direction] = field(default_factory=list)


@dataclass
class RouteOutcome:
    segments: List[RouteSegment] = field(default_factory=list)
    skipped: List[int] = field(default_factory=list)

    @property
    def directions(self) -> List[List[Direction]]:
        return [segment.directions for segment in self.segments]


def route_targets(
    graph: TerrainGraph,
    start: int,
    targets: Sequence[int],
    coordinates: CoordinateMap,
) -> RouteOutcome:
    """Visit every target greedily, cheapest-from-here first.

    Args:
        graph: Terrain graph shared by every search
        start: Vertex the agent starts on
        targets: Target vertices, ideally already filtered for reachability
        coordinates: Index → coordinate map used to translate paths

    Returns:
        RouteOutcome with segments in visit order

    Raises:
        PathTranslationError: If a path cannot be translated into moves
    """
    outcome = RouteOutcome()
    current = start
    remaining = list(targets)

    while remaining:
        results = find_shortest_paths(graph, current, remaining)
        # min() keeps the first of equal costs, i.e. the earliest remaining entry
        position, best = min(enumerate(results), key=lambda item: item[1].total_cost)
        del remaining[position]

        if best.path is None:
            outcome.skipped.append(best.target)
            continue

        outcome.segments.append(
            RouteSegment(
                target=best.target,
                path=best.path,
                cost=best.total_cost,
                directions=path_to_directions(coordinates, best.path),
            )
        )
        current = best.target

    return outcome
