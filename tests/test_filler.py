"""Tests for estimating and discovering unknown cells."""

import pytest

from bestpath import DiscoveryError, KnownCell, TerrainType, Tile, fill_unknown_cells, normalize_known_cells
from bestpath.grid import estimate_from_neighbors, iter_fill_order


class RecordingDiscoverer:
    """Discoverer stub returning preset tiles and recording every request."""

    def __init__(self, tiles=None, default=TerrainType.GRASS):
        self.tiles = dict(tiles or {})
        self.default = default
        self.calls = []

    def __call__(self, coordinates):
        self.calls.append(list(coordinates))
        return {
            coord: self.tiles.get(coord, Tile(tile_type=self.default))
            for coord in coordinates
        }


def tile(terrain: TerrainType, elevation: int = 0) -> Tile:
    return Tile(tile_type=terrain, elevation=elevation)


def test_fill_order_is_row_major():
    grid = normalize_known_cells([], targets=[(1, 2)], start=(0, 0))
    assert list(iter_fill_order(grid)) == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]


def test_single_forward_pass_pins_discovery_and_estimates():
    # No known cells: (0,0) must be discovered, then its neighbours estimate from it.
    # (0,2) only touches estimates and unknowns, so it is discovered too.
    discoverer = RecordingDiscoverer(
        tiles={(0, 0): tile(TerrainType.GRASS), (0, 2): tile(TerrainType.MOUNTAIN)}
    )
    grid = normalize_known_cells([], targets=[(1, 2)], start=(0, 0))

    report = fill_unknown_cells(grid, discoverer)

    assert discoverer.calls == [[(0, 0)], [(0, 2)]]
    assert set(report.discovered) == {(0, 0), (0, 2)}
    assert report.discovery_calls == 2
    assert report.estimated == [(0, 1), (1, 0), (1, 1), (1, 2)]

    assert grid.tile_at((0, 1)).tile_type == TerrainType.GRASS
    assert grid.tile_at((1, 0)).tile_type == TerrainType.GRASS
    # (1,1) sees both discovered cells and keeps the costlier one
    assert grid.tile_at((1, 1)).tile_type == TerrainType.MOUNTAIN
    assert grid.tile_at((1, 2)).tile_type == TerrainType.MOUNTAIN

    # Discovered cells become ground truth, estimates do not
    assert grid.is_known((0, 0)) and grid.is_known((0, 2))
    assert not grid.is_known((0, 1)) and not grid.is_known((1, 1))


def test_estimate_takes_max_cost_known_neighbor():
    known = [
        KnownCell(coordinate=(0, 0), tile=tile(TerrainType.GRASS)),
        KnownCell(coordinate=(0, 1), tile=tile(TerrainType.HILL, elevation=3)),
        KnownCell(coordinate=(2, 2), tile=tile(TerrainType.SAND)),
    ]
    grid = normalize_known_cells(known, targets=[(2, 2)], start=(0, 0))

    estimate = estimate_from_neighbors(grid, (1, 1))
    assert estimate.tile_type == TerrainType.HILL
    assert estimate.elevation == 3
    # Estimates are copies, never the neighbour's own object
    assert estimate is not grid.tile_at((0, 1))


def test_estimate_ties_keep_first_neighbor_in_scan_order():
    known = [
        KnownCell(coordinate=(2, 2), tile=tile(TerrainType.GRASS, elevation=7)),
        KnownCell(coordinate=(0, 0), tile=tile(TerrainType.GRASS, elevation=3)),
    ]
    grid = normalize_known_cells(known, targets=[(2, 2)], start=(0, 0))

    # NW (0,0) is scanned before SE (2,2)
    assert estimate_from_neighbors(grid, (1, 1)).elevation == 3


def test_known_impassable_neighbors_are_never_copied():
    known = [
        KnownCell(coordinate=(0, 0), tile=tile(TerrainType.GRASS)),
        KnownCell(coordinate=(0, 1), tile=tile(TerrainType.WALL)),
        KnownCell(coordinate=(0, 2), tile=tile(TerrainType.LAVA)),
    ]
    grid = normalize_known_cells(known, targets=[(1, 1)], start=(0, 0))
    assert estimate_from_neighbors(grid, (1, 1)).tile_type == TerrainType.GRASS


def test_cells_next_to_only_obstacles_or_free_tiles_are_discovered():
    known = [
        KnownCell(coordinate=(0, 0), tile=tile(TerrainType.WALL)),
        KnownCell(coordinate=(0, 1), tile=tile(TerrainType.DEEP_WATER)),
        KnownCell(coordinate=(1, 0), tile=tile(TerrainType.STREET)),
    ]
    discoverer = RecordingDiscoverer()
    grid = normalize_known_cells(known, targets=[(1, 1)], start=(0, 0))

    assert estimate_from_neighbors(grid, (1, 1)) is None

    report = fill_unknown_cells(grid, discoverer)

    assert discoverer.calls == [[(1, 1)]]
    assert report.estimated == []
    assert grid.tile_at((1, 1)).walkable


def test_wall_next_to_unknown_cells_does_not_spread():
    # Open 3x3 room with a known pillar in the middle
    known = [
        KnownCell(coordinate=(0, 0), tile=tile(TerrainType.GRASS)),
        KnownCell(coordinate=(1, 1), tile=tile(TerrainType.WALL)),
    ]
    discoverer = RecordingDiscoverer()
    grid = normalize_known_cells(known, targets=[(2, 2)], start=(0, 0))

    report = fill_unknown_cells(grid, discoverer)

    assert discoverer.calls == [[(0, 2)], [(2, 0)], [(2, 2)]]
    assert report.estimated == [(0, 1), (1, 0), (1, 2), (2, 1)]
    for r in range(3):
        for c in range(3):
            if (r, c) != (1, 1):
                assert grid.tile_at((r, c)).walkable


def test_estimate_returns_none_without_known_neighbors():
    grid = normalize_known_cells([], targets=[(2, 2)], start=(0, 0))
    assert estimate_from_neighbors(grid, (1, 1)) is None


def test_known_cells_are_never_rediscovered():
    known = [KnownCell(coordinate=(0, c), tile=tile(TerrainType.SAND)) for c in range(3)]
    discoverer = RecordingDiscoverer()
    grid = normalize_known_cells(known, targets=[(0, 2)], start=(0, 0))

    report = fill_unknown_cells(grid, discoverer)

    assert discoverer.calls == []
    assert report.discovered == {}
    assert report.estimated == []


def test_discovery_uses_world_coordinates():
    known = [KnownCell(coordinate=(10, 10), tile=tile(TerrainType.GRASS))]
    discoverer = RecordingDiscoverer()
    grid = normalize_known_cells(known, targets=[(10, 13)], start=(10, 10))

    report = fill_unknown_cells(grid, discoverer)

    # (10,11) is estimated from (10,10); (10,12) has no known neighbour
    assert discoverer.calls[0] == [(10, 12)]
    assert (10, 12) in report.discovered
    assert report.estimated == [(10, 11), (10, 13)]


def test_discoverer_exception_becomes_discovery_error():
    def broken(coordinates):
        raise ConnectionError("world offline")

    grid = normalize_known_cells([], targets=[(0, 1)], start=(0, 0))
    with pytest.raises(DiscoveryError) as excinfo:
        fill_unknown_cells(grid, broken)

    assert excinfo.value.coordinate == (0, 0)
    assert isinstance(excinfo.value.__cause__, ConnectionError)


@pytest.mark.parametrize("response", [{}, {(0, 0): None}])
def test_missing_or_empty_discovery_result_is_an_error(response):
    grid = normalize_known_cells([], targets=[(0, 1)], start=(0, 0))
    with pytest.raises(DiscoveryError):
        fill_unknown_cells(grid, lambda coordinates: response)
