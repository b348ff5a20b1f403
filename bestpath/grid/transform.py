"""Coordinate bookkeeping between world coordinates and matrix indices.

Callers speak in world ``(row, col)`` coordinates. The planner works on a dense
matrix that only covers the bounding box of everything it was told about, so
every world coordinate is shifted by the box origin before indexing, and every
matrix cell also has a row-major vertex index once the graph is built.
``CoordinateTransform`` owns the shift and the index arithmetic; nothing else
in the package offsets coordinates by hand.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List

from bestpath.schemas import Coord


@dataclass(frozen=True)
class CoordinateTransform:
    """Bounding box of a planning call and the conversions it implies."""

    min_row: int
    min_col: int
    rows: int
    cols: int

    @classmethod
    def bounding(cls, coords: Iterable[Coord]) -> "CoordinateTransform":
        """Return the smallest box containing every coordinate in ``coords``.

        Raises:
            ValueError: If ``coords`` is empty (a box needs at least one cell)
        """
        points = list(coords)
        if not points:
            raise ValueError("Cannot build a bounding box from zero coordinates")

        rows = [r for r, _ in points]
        cols = [c for _, c in points]
        min_row, max_row = min(rows), max(rows)
        min_col, max_col = min(cols), max(cols)
        return cls(
            min_row=min_row,
            min_col=min_col,
            rows=max_row - min_row + 1,
            cols=max_col - min_col + 1,
        )

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def to_local(self, world: Coord) -> Coord:
        return (world[0] - self.min_row, world[1] - self.min_col)

    def to_world(self, local: Coord) -> Coord:
        return (local[0] + self.min_row, local[1] + self.min_col)

    def contains_local(self, local: Coord) -> bool:
        r, c = local
        return 0 <= r < self.rows and 0 <= c < self.cols

    def contains_world(self, world: Coord) -> bool:
        return self.contains_local(self.to_local(world))

    def index_of(self, local: Coord) -> int:
        """Row-major vertex index of a matrix-local coordinate."""
        if not self.contains_local(local):
            raise ValueError(f"Coordinate {local} lies outside a {self.rows}x{self.cols} matrix")
        return local[0] * self.cols + local[1]

    def coord_of(self, index: int) -> Coord:
        """Matrix-local coordinate of a row-major vertex index."""
        if not 0 <= index < self.size:
            raise ValueError(f"Vertex index {index} outside 0..{self.size - 1}")
        return divmod(index, self.cols)


class CoordinateMap:
    """Vertex index → matrix-local ``(row, col)`` lookup, built once per matrix.

    An index the matrix never produced raises instead of mapping onto some
    cell.
    """

    def __init__(self, rows: int, cols: int):
        self.rows = rows
        self.cols = cols
        self._by_index: Dict[int, Coord] = {}
        index = 0
        for r in range(rows):
            for c in range(cols):
                self._by_index[index] = (r, c)
                index += 1

    @classmethod
    def for_matrix(cls, matrix: List[List[object]]) -> "CoordinateMap":
        rows = len(matrix)
        cols = len(matrix[0]) if rows else 0
        return cls(rows, cols)

    def __len__(self) -> int:
        return len(self._by_index)

    def __contains__(self, index: object) -> bool:
        return index in self._by_index

    def coordinate(self, index: int) -> Coord:
        """Return the local coordinate of ``index``.

        Raises:
            KeyError: If the index does not belong to this matrix
        """
        try:
            return self._by_index[index]
        except KeyError:
            raise KeyError(f"No coordinate recorded for vertex {index}") from None
