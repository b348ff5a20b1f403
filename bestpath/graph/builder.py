"""Turn a dense tile matrix into a weighted directed graph.

One vertex per cell, numbered row-major. A walkable cell gets an edge to each
walkable up/right/down/left neighbour; impassable cells get no edges at all and
no edge ever points at them. The weight of an edge is what the agent pays on
arrival: the destination terrain cost plus the squared height gained, if any.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from bestpath.grid.transform import CoordinateTransform
from bestpath.schemas import Coord, Tile


# Up, right, down, left. Adjacency lists are emitted in this order.
CARDINAL_OFFSETS = ((-1, 0), (0, 1), (1, 0), (0, -1))


@dataclass(frozen=True)
class Edge:
    target: int
    weight: int


@dataclass
class TerrainGraph:
    """Adjacency lists plus the start vertex and requested target vertices.

    ``targets`` keeps the caller's order; several targets may share a vertex.
    """

    adjacency: List[List[Edge]]
    start: int
    targets: List[int] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.adjacency)

    def neighbors(self, vertex: int) -> List[Edge]:
        return self.adjacency[vertex]

    @property
    def edge_count(self) -> int:
        return sum(len(edges) for edges in self.adjacency)


def elevation_penalty(destination: Tile, source: Tile) -> int:
    """Squared climb from ``source`` to ``destination``; descending is free."""
    if destination.elevation <= source.elevation:
        return 0
    return (destination.elevation - source.elevation) ** 2


def edge_weight(destination: Tile, source: Tile) -> int:
    return destination.cost + elevation_penalty(destination, source)


def build_graph(
    matrix: Sequence[Sequence[Tile]],
    targets: Sequence[Coord],
    start: Coord,
) -> TerrainGraph:
    """Build the planning graph for ``matrix``.

    Args:
        matrix: Dense rectangular tile matrix (``matrix[row][col]``)
        targets: Matrix-local target coordinates
        start: Matrix-local start coordinate

    Returns:
        TerrainGraph with row-major vertices

    Raises:
        ValueError: If the matrix is empty or ragged, or if the start or a
            target lies outside it
    """
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if rows == 0 or cols == 0:
        raise ValueError("Cannot build a graph from an empty matrix")
    if any(len(row) != cols for row in matrix):
        raise ValueError("Matrix rows must all have the same length")

    box = CoordinateTransform(min_row=0, min_col=0, rows=rows, cols=cols)
    start_vertex = box.index_of(start)
    target_vertices = [box.index_of(target) for target in targets]

    adjacency: List[List[Edge]] = [[] for _ in range(box.size)]
    for r in range(rows):
        for c in range(cols):
            tile = matrix[r][c]
            if not tile.walkable:
                continue
            edges = adjacency[box.index_of((r, c))]
            for dr, dc in CARDINAL_OFFSETS:
                neighbor = (r + dr, c + dc)
                if not box.contains_local(neighbor):
                    continue
                destination = matrix[neighbor[0]][neighbor[1]]
                if not destination.walkable:
                    continue
                edges.append(Edge(target=box.index_of(neighbor), weight=edge_weight(destination, tile)))

    return TerrainGraph(adjacency=adjacency, start=start_vertex, targets=target_vertices)
