"""
Pydantic schemas for the BestPath planner.

All data structures that cross the planner boundary are defined here: the
terrain model callers use to describe what they know about the world, the
known-cell records, the four movement directions and the detailed route
report.

Design Philosophy:
- Walkability is derived from terrain only (callers cannot mark a lava tile walkable)
- Traversal cost comes from a per-terrain table, overridable per tile
- Coordinates are always (row, col); rows grow downwards, columns to the right
- Pydantic validation rejects negative elevations and costs at the boundary
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

from .config import Config


Coord = Tuple[int, int]


# ============================================================================
# Terrain
# ============================================================================


class TerrainType(str, Enum):
    """Terrain classification of a single tile."""

    DEEP_WATER = "deep_water"
    SHALLOW_WATER = "shallow_water"
    SAND = "sand"
    GRASS = "grass"
    STREET = "street"
    HILL = "hill"
    MOUNTAIN = "mountain"
    SNOW = "snow"
    LAVA = "lava"
    TELEPORT = "teleport"
    WALL = "wall"


IMPASSABLE_TERRAIN = frozenset({TerrainType.DEEP_WATER, TerrainType.LAVA, TerrainType.WALL})

# Base cost of stepping onto a walkable tile of each terrain
TERRAIN_COSTS: Dict[TerrainType, int] = {
    TerrainType.STREET: 0,
    TerrainType.TELEPORT: 0,
    TerrainType.GRASS: 1,
    TerrainType.SAND: 2,
    TerrainType.SNOW: 3,
    TerrainType.SHALLOW_WATER: 5,
    TerrainType.HILL: 5,
    TerrainType.MOUNTAIN: 8,
}


class Tile(BaseModel):
    """Terrain, elevation and optional content of one grid cell.

    ``cost`` is what an agent pays to step ONTO this tile. Impassable terrain
    reports ``Config.IMPASSABLE_COST``; such tiles never get graph edges and
    are never copied into unknown cells.
    """

    tile_type: TerrainType = Field(..., description="Terrain classification")
    elevation: int = Field(0, ge=0, description="Height used for uphill penalties")
    # Content is carried through untouched; the planner never inspects it.
    content: Optional[str] = Field(None, description="Optional label for tile content (tree, rock, ...)")
    cost_override: Optional[int] = Field(
        None,
        ge=0,
        description="Replaces the terrain table cost for walkable tiles",
    )

    @property
    def walkable(self) -> bool:
        return self.tile_type not in IMPASSABLE_TERRAIN

    @property
    def cost(self) -> int:
        if not self.walkable:
            return Config.IMPASSABLE_COST
        if self.cost_override is not None:
            return self.cost_override
        return TERRAIN_COSTS[self.tile_type]

    @classmethod
    def impassable(cls) -> "Tile":
        """Tile used to pre-fill cells nobody has reported on."""
        return cls(tile_type=TerrainType.LAVA, elevation=0)


class KnownCell(BaseModel):
    """Ground-truth record supplied by the caller: a world coordinate and its tile."""

    coordinate: Coord = Field(..., description="World (row, col) of the tile")
    tile: Tile


# ============================================================================
# Movement
# ============================================================================


class Direction(str, Enum):
    """One unit move on the 4-connected grid."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> Coord:
        return _DIRECTION_DELTAS[self]

    @classmethod
    def from_delta(cls, delta: Coord) -> Optional["Direction"]:
        """Return the direction for a (d_row, d_col) unit vector, or None."""
        for direction, candidate in _DIRECTION_DELTAS.items():
            if candidate == delta:
                return direction
        return None


_DIRECTION_DELTAS: Dict[Direction, Coord] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}


# ============================================================================
# Planner output
# ============================================================================


class RoutePlan(BaseModel):
    """Detailed result of one planning call.

    ``segments[i]`` leads from the previous visited target (or the start) to
    ``visited_targets[i]`` at cost ``segment_costs[i]``. Visit order is greedy
    nearest-remaining-next, so it may differ from the requested order.
    Requested targets that could not be reached are listed in
    ``unreachable_targets`` instead of raising.
    """

    segments: List[List[Direction]] = Field(default_factory=list)
    visited_targets: List[Coord] = Field(default_factory=list)
    segment_costs: List[int] = Field(default_factory=list)
    unreachable_targets: List[Coord] = Field(default_factory=list)
    # Tiles resolved through the discovery capability, keyed by world coordinate.
    # Hosts can merge these into their own knowledge before the next call.
    discovered: Dict[Coord, Tile] = Field(
        default_factory=dict,
        description="Sparse map: world (row, col) → discovered tile",
    )
    estimated: List[Coord] = Field(
        default_factory=list,
        description="World coordinates whose tile was extrapolated from neighbours",
    )

    @property
    def total_cost(self) -> int:
        return sum(self.segment_costs)

    @property
    def move_count(self) -> int:
        return sum(len(segment) for segment in self.segments)
