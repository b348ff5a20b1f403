"""
Island Explorer

An agent on a small island sees only the tiles around it. Each tick it asks
the planner for a route through every remaining point of interest, walks one
step, and looks around again. Cells it has never seen are estimated from
remembered neighbours or discovered from the world, so routes bend as the
coastline comes into view.

Run: uv run python examples/island/run.py
"""

import argparse
from typing import Dict, List

from bestpath import (
    BestPath,
    Coord,
    KnownCell,
    SimulatedWorld,
    Tile,
    normalize_known_cells,
    render_matrix,
)
from bestpath.logging_utils import log_error, log_info, log_success

ISLAND = [
    "~~~~~~~~~~",
    "~:::..:::~",
    "~:..^^..:~",
    "~:.^MM^.,~",
    "~:..~~..:~",
    "~::.,,.::~",
    "~~:=====:~",
    "~~~~~~~~~~",
]
VISIBILITY_RADIUS = 2
MAX_TICKS = 40
START = (1, 1)
POINTS_OF_INTEREST = [(5, 7), (2, 4), (6, 3)]


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Island explorer with partial observability")
    parser.add_argument("--ticks", type=int, default=MAX_TICKS, help="Maximum number of ticks to simulate")
    parser.add_argument("--radius", type=int, default=VISIBILITY_RADIUS, help="Visibility radius around the agent")
    parser.add_argument("--verbose", action="store_true", help="Print planner stage logs")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    world = SimulatedWorld.from_ascii(ISLAND)
    planner = BestPath(discoverer=world, verbose=args.verbose)

    memory: Dict[Coord, Tile] = {}
    position = START
    remaining: List[Coord] = list(POINTS_OF_INTEREST)

    for tick in range(1, args.ticks + 1):
        for cell in world.visible_cells(position, radius=args.radius):
            memory[cell.coordinate] = cell.tile
        remaining = [target for target in remaining if target != position]
        if not remaining:
            log_success(f"Tick {tick}: visited every point of interest")
            break

        known = [KnownCell(coordinate=coord, tile=tile) for coord, tile in memory.items()]
        plan = planner.plan(known, remaining, position, discover=True)
        memory.update(plan.discovered)
        if not plan.segments or not any(plan.segments):
            log_error(f"Tick {tick}: no route from {position} to {remaining}")
            break

        step = next(direction for segment in plan.segments for direction in segment)
        dr, dc = step.delta
        position = (position[0] + dr, position[1] + dc)
        log_info(
            f"Tick {tick}: moved {step.value} to {position}, "
            f"next target {plan.visited_targets[0]}, {len(plan.unreachable_targets)} unreachable"
        )
    else:
        log_error(f"Gave up after {args.ticks} ticks; remaining {remaining}")

    known = [KnownCell(coordinate=coord, tile=tile) for coord, tile in memory.items()]
    grid = normalize_known_cells(known, POINTS_OF_INTEREST, position)
    print(render_matrix(grid, marks={position: "@", **{poi: "X" for poi in POINTS_OF_INTEREST}}))


if __name__ == "__main__":
    main()
