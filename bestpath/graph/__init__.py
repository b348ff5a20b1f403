"""Graph-side planning stages: construction, reachability and shortest paths."""

from .builder import (
    CARDINAL_OFFSETS,
    Edge,
    TerrainGraph,
    build_graph,
    edge_weight,
    elevation_penalty,
)
from .reachability import filter_reachable_targets, reachable_vertices
from .dijkstra import (
    PathResult,
    ShortestPaths,
    dijkstra,
    find_shortest_paths,
    reconstruct_path,
)

__all__ = [
    "CARDINAL_OFFSETS",
    "Edge",
    "TerrainGraph",
    "build_graph",
    "edge_weight",
    "elevation_penalty",
    "filter_reachable_targets",
    "reachable_vertices",
    "PathResult",
    "ShortestPaths",
    "dijkstra",
    "find_shortest_paths",
    "reconstruct_path",
]
