"""Fill unknown matrix cells by estimation or discovery.

One forward pass over the matrix, rows top to bottom and columns left to right.
For each cell nobody has reported on:

1. If any of its 8 neighbours is known (caller-supplied or discovered earlier
   in this pass), walkable and not free, copy the one with the highest cost.
   The cell stays unknown in the mask, so estimates never seed further
   estimates.
2. Otherwise ask the host to discover the cell. The result is ground truth and
   is marked known, so cells later in the pass may estimate from it.

Because discoveries are visible to later cells, the result depends on the
traversal order; ``iter_fill_order`` is the single definition of that order.
Estimates take the maximum-cost neighbour, never an average.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from bestpath.discovery import Discoverer, discover_tile
from bestpath.schemas import Coord, Tile

from .normalizer import NormalizedGrid


# Scan order for neighbour estimation: NW, N, NE, W, E, SW, S, SE.
# Ties on cost keep the first neighbour in this order.
NEIGHBOR_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


@dataclass
class FillReport:
    """What the filler did, keyed by world coordinate."""

    discovered: Dict[Coord, Tile] = field(default_factory=dict)
    estimated: List[Coord] = field(default_factory=list)

    @property
    def discovery_calls(self) -> int:
        return len(self.discovered)


def iter_fill_order(grid: NormalizedGrid) -> Iterator[Coord]:
    """Yield matrix-local coordinates in the order the filler visits them."""
    for r in range(grid.rows):
        for c in range(grid.cols):
            yield (r, c)


def estimate_from_neighbors(grid: NormalizedGrid, local: Coord) -> Optional[Tile]:
    """Return a copy of the costliest usable known neighbour, or None.

    Only walkable neighbours with a positive cost are candidates. Walls, lava
    and deep water never become estimates, and neither do free tiles such as
    streets, so a cell surrounded only by those is discovered instead.
    """

    best: Optional[Tile] = None
    best_cost = 0
    r, c = local
    for dr, dc in NEIGHBOR_OFFSETS:
        neighbor = (r + dr, c + dc)
        if not grid.transform.contains_local(neighbor):
            continue
        if not grid.is_known(neighbor):
            continue
        tile = grid.tile_at(neighbor)
        if not tile.walkable:
            continue
        if tile.cost > best_cost:
            best, best_cost = tile, tile.cost
    return best.model_copy() if best is not None else None


def fill_unknown_cells(grid: NormalizedGrid, discoverer: Discoverer) -> FillReport:
    """Resolve every unknown cell of ``grid`` in place.

    Args:
        grid: Normalized matrix; mutated in place
        discoverer: Host capability used when a cell has no known neighbour

    Returns:
        FillReport listing discovered tiles and estimated cells (world coords)

    Raises:
        DiscoveryError: If any discovery request fails; the grid is left
            partially filled and must not be used
    """
    report = FillReport()

    for local in iter_fill_order(grid):
        if grid.is_known(local):
            continue

        world = grid.transform.to_world(local)
        estimate = estimate_from_neighbors(grid, local)
        if estimate is not None:
            grid.set_tile(local, estimate, known=False)
            report.estimated.append(world)
            continue

        tile = discover_tile(discoverer, world)
        grid.set_tile(local, tile, known=True)
        report.discovered[world] = tile

    return report
