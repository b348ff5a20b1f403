"""Discovery capability supplied by the host world.

Discovery resolves the true tile of cells the agent has never observed. It is
the only planner operation with side effects outside the planning call (the
host may charge energy for it or mark the cell explored), so the planner calls
it one cell at a time and only when a cell cannot be estimated locally.
"""

from __future__ import annotations

from typing import Mapping, Optional, Protocol, Sequence

from .schemas import Coord, Tile


class DiscoveryError(RuntimeError):
    """Raised when the host world fails to resolve a requested cell.

    Propagates out of the whole planning call; no partial route is returned.
    """

    def __init__(self, coordinate: Coord, reason: str) -> None:
        self.coordinate = coordinate
        self.reason = reason
        super().__init__(f"Discovery of cell {coordinate} failed: {reason}")


class Discoverer(Protocol):
    """Callable resolving world coordinates to their tiles.

    Implementations return a mapping with one entry per requested coordinate.
    A ``None`` value means the host could not resolve that cell. Raising is
    also allowed; the planner converts any failure into ``DiscoveryError``.
    """

    def __call__(self, coordinates: Sequence[Coord]) -> Mapping[Coord, Optional[Tile]]:
        ...


def discover_tile(discoverer: Discoverer, coordinate: Coord) -> Tile:
    """Resolve a single world coordinate through ``discoverer``.

    Raises:
        DiscoveryError: If the discoverer raises, omits the coordinate, or
            returns ``None`` for it
    """
    try:
        resolved = discoverer([coordinate])
    except DiscoveryError:
        raise
    except Exception as exc:
        raise DiscoveryError(coordinate, f"{type(exc).__name__}: {exc}") from exc

    tile = resolved.get(coordinate) if resolved is not None else None
    if tile is None:
        raise DiscoveryError(coordinate, "host returned no tile for this cell")
    return tile
