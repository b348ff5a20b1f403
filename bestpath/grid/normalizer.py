"""Normalize sparse known-cell records into a dense planning matrix.

The caller knows an irregular scatter of tiles. Planning needs a rectangle, so
the normalizer takes the bounding box of known cells, targets and the start,
fills it with impassable tiles, then writes every known record on top and marks
it in a parallel knowledge mask. Whatever is still unmarked afterwards is either
left impassable (discovery disabled) or handed to the terrain filler.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple, Union

from bestpath.schemas import Coord, KnownCell, Tile

from .transform import CoordinateTransform


KnownCellInput = Union[KnownCell, Tuple[Coord, Tile]]


@dataclass
class NormalizedGrid:
    """Dense matrix, knowledge mask and box transform for one planning call.

    ``matrix`` and ``known`` are indexed with matrix-local ``[row][col]`` and
    are mutated in place by the terrain filler. ``known[r][c]`` is True only
    for ground truth (caller-supplied or discovered), never for estimates.
    """

    matrix: List[List[Tile]]
    known: List[List[bool]]
    transform: CoordinateTransform

    @property
    def rows(self) -> int:
        return self.transform.rows

    @property
    def cols(self) -> int:
        return self.transform.cols

    def tile_at(self, local: Coord) -> Tile:
        return self.matrix[local[0]][local[1]]

    def is_known(self, local: Coord) -> bool:
        return self.known[local[0]][local[1]]

    def set_tile(self, local: Coord, tile: Tile, *, known: bool) -> None:
        r, c = local
        self.matrix[r][c] = tile
        self.known[r][c] = known

    def unknown_count(self) -> int:
        return sum(1 for row in self.known for flag in row if not flag)


def coerce_known_cells(known_cells: Iterable[KnownCellInput]) -> List[KnownCell]:
    """Accept ``KnownCell`` models or plain ``(coord, tile)`` pairs."""

    records: List[KnownCell] = []
    for entry in known_cells:
        if isinstance(entry, KnownCell):
            records.append(entry)
        else:
            coordinate, tile = entry
            records.append(KnownCell(coordinate=coordinate, tile=tile))
    return records


def normalize_known_cells(
    known_cells: Iterable[KnownCellInput],
    targets: Sequence[Coord],
    start: Coord,
) -> NormalizedGrid:
    """Build the dense matrix covering known cells, targets and start.

    Args:
        known_cells: Ground-truth records in world coordinates (may be empty)
        targets: World coordinates to visit; must not be empty
        start: World coordinate of the agent

    Returns:
        NormalizedGrid with impassable pre-fill overwritten by known records

    Raises:
        ValueError: If ``targets`` is empty (caller contract violation)
    """
    if not targets:
        raise ValueError("At least one target coordinate is required")

    records = coerce_known_cells(known_cells)

    coords: List[Coord] = [tuple(t) for t in targets]
    coords.append(tuple(start))
    coords.extend(record.coordinate for record in records)
    transform = CoordinateTransform.bounding(coords)

    # One tile object per cell
    matrix = [[Tile.impassable() for _ in range(transform.cols)] for _ in range(transform.rows)]
    known = [[False] * transform.cols for _ in range(transform.rows)]
    grid = NormalizedGrid(matrix=matrix, known=known, transform=transform)

    # Later records for the same coordinate win
    for record in records:
        grid.set_tile(transform.to_local(record.coordinate), record.tile, known=True)

    return grid
