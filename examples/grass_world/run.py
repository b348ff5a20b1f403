"""
Grass World with Discovery

The smallest possible host: a 4x4 world made entirely of grass. The agent
stands in the top-left corner knowing nothing about its surroundings and asks
the planner for a route to the opposite corner, letting it discover cells as
needed.

Run: uv run python examples/grass_world/run.py
"""

from bestpath import BestPath, Config, SimulatedWorld, TerrainType, replay
from bestpath.logging_utils import log_info

WORLD_SIZE = 4
START = (0, 0)
TARGET = (3, 3)


def main() -> None:
    Config.validate()
    world = SimulatedWorld.uniform(WORLD_SIZE, WORLD_SIZE, TerrainType.GRASS)
    planner = BestPath(discoverer=world.discover, verbose=True)

    plan = planner.plan(known_cells=[], targets=[TARGET], start=START, discover=True)

    for target, segment, cost in zip(plan.visited_targets, plan.segments, plan.segment_costs):
        moves = ", ".join(direction.value for direction in segment) or "(stay)"
        log_info(f"Target {target} (cost {cost}): {moves}")

    log_info(f"Agent ends at {replay(START, [d for seg in plan.segments for d in seg])[-1]}")
    log_info(
        f"World answered {world.discovery_requests} discovery requests for "
        f"{len(world.discovered)} cells; {len(plan.estimated)} cells were estimated"
    )


if __name__ == "__main__":
    main()
