"""ASCII rendering of planning matrices for debugging."""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional

from bestpath.schemas import Coord, TerrainType

from .normalizer import NormalizedGrid


DEFAULT_TERRAIN_SYMBOLS: Dict[TerrainType, str] = {
    TerrainType.DEEP_WATER: "~",
    TerrainType.SHALLOW_WATER: ",",
    TerrainType.SAND: ":",
    TerrainType.GRASS: ".",
    TerrainType.STREET: "=",
    TerrainType.HILL: "^",
    TerrainType.MOUNTAIN: "M",
    TerrainType.SNOW: "*",
    TerrainType.LAVA: "L",
    TerrainType.TELEPORT: "T",
    TerrainType.WALL: "#",
}


def render_matrix(
    grid: NormalizedGrid,
    *,
    symbols: Optional[Mapping[TerrainType, str]] = None,
    marks: Optional[Mapping[Coord, str]] = None,
) -> str:
    """Render ``grid`` as text, two characters per cell.

    The first character is the terrain symbol, the second is ``?`` when the
    cell is not ground truth: either an estimate or, with discovery off, the
    impassable pre-fill. Caller-supplied and discovered cells get a space. ``marks`` (keyed by WORLD
    coordinate) replace the terrain symbol, e.g. ``{start: "S"}``. Unknown
    terrain types fall back to ``?``.
    """

    mapping = {**DEFAULT_TERRAIN_SYMBOLS}
    if symbols:
        mapping.update(symbols)
    overlay = dict(marks or {})

    lines: List[str] = []
    for r in range(grid.rows):
        row_chars: List[str] = []
        for c in range(grid.cols):
            world = grid.transform.to_world((r, c))
            tile = grid.matrix[r][c]
            symbol = overlay.get(world) or mapping.get(tile.tile_type, "?")
            flag = " " if grid.known[r][c] else "?"
            row_chars.append(f"{symbol[:1]}{flag}")
        lines.append("".join(row_chars).rstrip())

    return "\n".join(lines)
