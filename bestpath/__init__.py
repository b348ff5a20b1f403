"""
BestPath - shortest-path planning on partially observed grid worlds.

Plan the cheapest greedy visit of several points of interest from an agent's
current cell, using whatever the agent knows about the terrain and, when
asked, a host-supplied discovery capability for the rest.

No world storage, no agent loop, no global state.
All collaborators injected by the host application.
"""

__version__ = "0.1.0"

# Entry point
from .planner import BestPath, GraphConstructionError, shortest_path

# Data model
from .schemas import (
    Coord,
    Direction,
    KnownCell,
    RoutePlan,
    TerrainType,
    Tile,
    IMPASSABLE_TERRAIN,
    TERRAIN_COSTS,
)

# Host collaborators
from .discovery import Discoverer, DiscoveryError, discover_tile
from .world import SimulatedWorld

# Planning stages
from .grid import (
    CoordinateMap,
    CoordinateTransform,
    FillReport,
    NormalizedGrid,
    fill_unknown_cells,
    normalize_known_cells,
    render_matrix,
)
from .graph import (
    Edge,
    PathResult,
    TerrainGraph,
    build_graph,
    dijkstra,
    edge_weight,
    elevation_penalty,
    filter_reachable_targets,
    find_shortest_paths,
)
from .routing import RouteOutcome, RouteSegment, route_targets
from .directions import PathTranslationError, path_to_directions, replay

from .config import Config

__all__ = [
    # Entry point
    "BestPath",
    "shortest_path",
    "GraphConstructionError",
    # Data model
    "Coord",
    "Direction",
    "KnownCell",
    "RoutePlan",
    "TerrainType",
    "Tile",
    "IMPASSABLE_TERRAIN",
    "TERRAIN_COSTS",
    # Host collaborators
    "Discoverer",
    "DiscoveryError",
    "discover_tile",
    "SimulatedWorld",
    # Grid stages
    "CoordinateMap",
    "CoordinateTransform",
    "FillReport",
    "NormalizedGrid",
    "fill_unknown_cells",
    "normalize_known_cells",
    "render_matrix",
    # Graph stages
    "Edge",
    "PathResult",
    "TerrainGraph",
    "build_graph",
    "dijkstra",
    "edge_weight",
    "elevation_penalty",
    "filter_reachable_targets",
    "find_shortest_paths",
    # Routing
    "RouteOutcome",
    "RouteSegment",
    "route_targets",
    "PathTranslationError",
    "path_to_directions",
    "replay",
    # Configuration
    "Config",
]
