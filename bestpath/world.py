"""In-memory host world for examples and tests.

The planner never owns the world; it only needs known cells and a discovery
capability. ``SimulatedWorld`` is a small stand-in for a host application:
it holds the complete tile grid, hands out partial observations around the
agent, and answers discovery requests while tracking what has been explored
and charging an optional discovery budget.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Set

from .discovery import DiscoveryError
from .grid.render import DEFAULT_TERRAIN_SYMBOLS
from .schemas import Coord, KnownCell, TerrainType, Tile


class SimulatedWorld:
    """Fully known rectangular world addressed by ``(row, col)``.

    Example:
        >>> world = SimulatedWorld.uniform(4, 4, TerrainType.GRASS)
        >>> world.discover([(1, 2)])[(1, 2)].tile_type
        <TerrainType.GRASS: 'grass'>
    """

    def __init__(self, tiles: Sequence[Sequence[Tile]], *, discovery_budget: Optional[int] = None):
        if not tiles or not tiles[0]:
            raise ValueError("A world needs at least one tile")
        width = len(tiles[0])
        if any(len(row) != width for row in tiles):
            raise ValueError("World rows must all have the same length")

        self.tiles: List[List[Tile]] = [list(row) for row in tiles]
        self.height = len(self.tiles)
        self.width = width
        # None means unlimited discovery
        self.discovery_budget = discovery_budget
        self.discovered: Set[Coord] = set()
        self.discovery_requests = 0

    @classmethod
    def uniform(
        cls,
        height: int,
        width: int,
        tile_type: TerrainType = TerrainType.GRASS,
        *,
        elevation: int = 0,
        discovery_budget: Optional[int] = None,
    ) -> "SimulatedWorld":
        tiles = [
            [Tile(tile_type=tile_type, elevation=elevation) for _ in range(width)]
            for _ in range(height)
        ]
        return cls(tiles, discovery_budget=discovery_budget)

    @classmethod
    def from_ascii(
        cls,
        lines: Iterable[str],
        legend: Optional[Mapping[str, TerrainType]] = None,
        *,
        discovery_budget: Optional[int] = None,
    ) -> "SimulatedWorld":
        """Build a world from one character per tile.

        The default legend is the inverse of the debug renderer's symbols
        (``.`` grass, ``#`` wall, ``^`` hill, ...). Blank lines are ignored.
        """
        mapping: Dict[str, TerrainType] = {symbol: terrain for terrain, symbol in DEFAULT_TERRAIN_SYMBOLS.items()}
        if legend:
            mapping.update(legend)

        tiles: List[List[Tile]] = []
        for line in lines:
            row_text = line.strip()
            if not row_text:
                continue
            row: List[Tile] = []
            for symbol in row_text:
                if symbol not in mapping:
                    raise ValueError(f"Unknown terrain symbol {symbol!r}")
                row.append(Tile(tile_type=mapping[symbol]))
            tiles.append(row)
        return cls(tiles, discovery_budget=discovery_budget)

    def in_bounds(self, coord: Coord) -> bool:
        r, c = coord
        return 0 <= r < self.height and 0 <= c < self.width

    def tile(self, coord: Coord) -> Tile:
        return self.tiles[coord[0]][coord[1]]

    def set_tile(self, coord: Coord, tile: Tile) -> None:
        self.tiles[coord[0]][coord[1]] = tile

    def known_cells(self, coords: Iterable[Coord]) -> List[KnownCell]:
        """Ground-truth records for the in-bounds cells of ``coords``."""
        return [
            KnownCell(coordinate=coord, tile=self.tile(coord))
            for coord in coords
            if self.in_bounds(coord)
        ]

    def visible_cells(self, center: Coord, *, radius: int) -> List[KnownCell]:
        """Return the square window of cells within ``radius`` of ``center``."""

        radius = max(int(radius), 0)
        cr, cc = center
        min_r = max(0, cr - radius)
        max_r = min(self.height - 1, cr + radius)
        min_c = max(0, cc - radius)
        max_c = min(self.width - 1, cc + radius)
        window = [(r, c) for r in range(min_r, max_r + 1) for c in range(min_c, max_c + 1)]
        return self.known_cells(window)

    def discover(self, coordinates: Sequence[Coord]) -> Dict[Coord, Optional[Tile]]:
        """Resolve ``coordinates`` to their tiles, charging the discovery budget.

        Raises:
            DiscoveryError: If a coordinate is outside the world or the budget
                cannot cover the request
        """
        self.discovery_requests += 1
        for coord in coordinates:
            if not self.in_bounds(coord):
                raise DiscoveryError(coord, f"outside the {self.height}x{self.width} world")

        new_cells = [coord for coord in coordinates if coord not in self.discovered]
        if self.discovery_budget is not None:
            if len(new_cells) > self.discovery_budget:
                raise DiscoveryError(
                    coordinates[0] if coordinates else (0, 0),
                    f"discovery budget exhausted ({self.discovery_budget} left, {len(new_cells)} requested)",
                )
            self.discovery_budget -= len(new_cells)

        self.discovered.update(new_cells)
        return {coord: self.tile(coord).model_copy() for coord in coordinates}

    __call__ = discover
