"""Translate vertex paths into movement directions and back into coordinates."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from .grid.transform import CoordinateMap
from .schemas import Coord, Direction


class PathTranslationError(RuntimeError):
    """Raised when a vertex path cannot be expressed as unit moves.

    Either a vertex has no recorded coordinate, or two consecutive vertices are
    not 4-neighbours. Both mean the graph and coordinate map disagree.
    """


def direction_between(current: Coord, following: Coord) -> Direction:
    """Return the unit move from ``current`` to ``following``.

    Raises:
        PathTranslationError: If the cells are not 4-neighbours
    """
    delta = (following[0] - current[0], following[1] - current[1])
    direction = Direction.from_delta(delta)
    if direction is None:
        raise PathTranslationError(
            f"Step {current} -> {following} (delta {delta}) is not a single cardinal move"
        )
    return direction


def path_to_directions(coordinates: CoordinateMap, path: Sequence[int]) -> List[Direction]:
    """Convert a vertex path into the moves that walk it.

    A path of zero or one vertex yields no moves.

    Raises:
        PathTranslationError: If a vertex is missing from ``coordinates`` or a
            step is not a unit cardinal move
    """
    directions: List[Direction] = []
    for current, following in zip(path, path[1:]):
        try:
            current_coord = coordinates.coordinate(current)
            following_coord = coordinates.coordinate(following)
        except KeyError as exc:
            raise PathTranslationError(str(exc.args[0]) if exc.args else str(exc)) from exc
        directions.append(direction_between(current_coord, following_coord))
    return directions


def replay(start: Coord, directions: Iterable[Direction]) -> List[Coord]:
    """Apply ``directions`` from ``start`` and return every visited coordinate.

    The returned list starts with ``start``; its last entry is where the moves end.
    """
    r, c = start
    visited: List[Coord] = [(r, c)]
    for direction in directions:
        dr, dc = direction.delta
        r, c = r + dr, c + dc
        visited.append((r, c))
    return visited
