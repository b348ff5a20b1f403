"""
Planner entry point.

Runs the planning stages in order for one call:
1. Normalize known cells, targets and start into a dense matrix
2. Fill unknown cells through estimation/discovery (only if requested)
3. Build the terrain graph
4. Drop targets that cannot be reached from the start
5. Route greedily through the remaining targets
6. Translate vertex paths into movement directions

Everything is synchronous and owned by the call; nothing is cached between
calls, so identical inputs with discovery disabled always give identical output.

Usage:
    planner = BestPath(discoverer=world.discover)
    segments = planner.shortest_path(known, targets=[(3, 3)], start=(0, 0), discover=True)
    # segments[0] is the list of Direction moves to the first visited target
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from .config import Config
from .directions import PathTranslationError
from .discovery import Discoverer
from .graph.builder import build_graph
from .graph.reachability import filter_reachable_targets
from .grid.filler import FillReport, fill_unknown_cells
from .grid.normalizer import KnownCellInput, normalize_known_cells
from .grid.render import render_matrix
from .grid.transform import CoordinateMap
from .logging_utils import log_deterministic, log_discovery, log_error, log_info, log_success
from .routing import route_targets
from .schemas import Coord, Direction, RoutePlan


class GraphConstructionError(RuntimeError):
    """Raised when the normalized matrix cannot be turned into a graph.

    Indicates an internal inconsistency (the start or a target fell outside
    the bounding box the normalizer computed), not a caller error.
    """


class BestPath:
    """Partial-grid shortest-path planner.

    Holds the host's discovery capability so that hosts can build one planner
    per agent and call it every tick with fresh knowledge.

    Args:
        discoverer: Callable resolving world coordinates to tiles; required
            only for calls with ``discover=True``
        verbose: Print per-stage logs; defaults to ``Config.VERBOSE``
    """

    def __init__(self, discoverer: Optional[Discoverer] = None, *, verbose: Optional[bool] = None):
        self.discoverer = discoverer
        self.verbose = Config.VERBOSE if verbose is None else verbose

    def plan(
        self,
        known_cells: Iterable[KnownCellInput],
        targets: Sequence[Coord],
        start: Coord,
        discover: Optional[bool] = None,
    ) -> RoutePlan:
        """Plan a visit of every reachable target and report the details.

        Args:
            known_cells: Ground-truth ``KnownCell`` records or ``(coord, tile)`` pairs
            targets: World coordinates to visit (non-empty)
            start: World coordinate of the agent
            discover: Fill unknown cells through the discoverer; defaults to
                ``Config.DISCOVER``

        Returns:
            RoutePlan with segments in visit order and the reachability report

        Raises:
            ValueError: If ``targets`` is empty, or discovery is requested
                without a discoverer
            DiscoveryError: If the discoverer fails for any cell
            GraphConstructionError: If the matrix cannot be turned into a graph
            PathTranslationError: If a route cannot be expressed as moves
        """
        if not targets:
            raise ValueError("At least one target coordinate is required")
        if discover is None:
            discover = Config.DISCOVER
        if discover and self.discoverer is None:
            raise ValueError("discover=True requires a discoverer")

        target_coords: List[Coord] = [tuple(t) for t in targets]
        start_coord: Coord = tuple(start)

        grid = normalize_known_cells(known_cells, target_coords, start_coord)
        transform = grid.transform
        if self.verbose:
            log_deterministic(
                f"[BestPath] Normalized {grid.rows}x{grid.cols} matrix, "
                f"{grid.unknown_count()} unknown cells"
            )

        report = FillReport()
        if discover:
            report = fill_unknown_cells(grid, self.discoverer)
            if self.verbose:
                log_discovery(
                    f"[BestPath] Filled matrix: {report.discovery_calls} discovered, "
                    f"{len(report.estimated)} estimated"
                )

        if Config.DEBUG_PLANNER:
            marks = {coord: "X" for coord in target_coords}
            marks[start_coord] = "S"
            log_info("[BestPath] Planning matrix:\n" + render_matrix(grid, marks=marks))

        try:
            graph = build_graph(
                grid.matrix,
                [transform.to_local(coord) for coord in target_coords],
                transform.to_local(start_coord),
            )
        except ValueError as exc:
            raise GraphConstructionError(str(exc)) from exc
        coordinates = CoordinateMap(grid.rows, grid.cols)

        reachable = filter_reachable_targets(graph, graph.start, graph.targets)
        reachable_set = set(reachable)
        unreachable = [
            coord for coord, vertex in zip(target_coords, graph.targets) if vertex not in reachable_set
        ]
        if self.verbose:
            log_deterministic(
                f"[BestPath] Graph has {len(graph)} vertices, {graph.edge_count} edges; "
                f"{len(reachable)}/{len(target_coords)} targets reachable"
            )

        outcome = route_targets(graph, graph.start, reachable, coordinates)
        unreachable.extend(transform.to_world(transform.coord_of(vertex)) for vertex in outcome.skipped)

        plan = RoutePlan(
            segments=outcome.directions,
            visited_targets=[transform.to_world(transform.coord_of(s.target)) for s in outcome.segments],
            segment_costs=[segment.cost for segment in outcome.segments],
            unreachable_targets=unreachable,
            discovered=report.discovered,
            estimated=report.estimated,
        )
        if self.verbose:
            log_success(
                f"[BestPath] Routed {len(plan.segments)} segments, "
                f"{plan.move_count} moves, total cost {plan.total_cost}"
            )
        return plan

    def shortest_path(
        self,
        known_cells: Iterable[KnownCellInput],
        targets: Sequence[Coord],
        start: Coord,
        discover: Optional[bool] = None,
    ) -> List[List[Direction]]:
        """Return the movement segments for visiting every reachable target.

        Same contract as :meth:`plan`, except that graph and path translation
        inconsistencies are logged and answered with ``[[]]`` instead of
        raising. Empty targets and discovery failures still raise.
        """
        try:
            plan = self.plan(known_cells, targets, start, discover=discover)
        except (GraphConstructionError, PathTranslationError) as exc:
            log_error(f"[BestPath] Planning failed, returning empty route: {exc}")
            return [[]]
        return plan.segments


def shortest_path(
    known_cells: Iterable[KnownCellInput],
    targets: Sequence[Coord],
    start: Coord,
    discover: bool = False,
    discoverer: Optional[Discoverer] = None,
) -> List[List[Direction]]:
    """Plan with a one-off :class:`BestPath`; see :meth:`BestPath.shortest_path`."""
    return BestPath(discoverer).shortest_path(known_cells, targets, start, discover=discover)
