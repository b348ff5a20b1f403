"""Tests for world ↔ matrix coordinate bookkeeping."""

import pytest

from bestpath import CoordinateMap, CoordinateTransform


def test_bounding_box_covers_all_points():
    box = CoordinateTransform.bounding([(2, 5), (-1, 3), (4, 4)])
    assert (box.min_row, box.min_col) == (-1, 3)
    assert (box.rows, box.cols) == (6, 3)
    assert box.size == 18
    for point in [(2, 5), (-1, 3), (4, 4)]:
        assert box.contains_world(point)
    assert not box.contains_world((5, 4))
    assert not box.contains_world((0, 6))


def test_bounding_box_requires_points():
    with pytest.raises(ValueError):
        CoordinateTransform.bounding([])


def test_world_local_round_trip():
    box = CoordinateTransform(min_row=-3, min_col=7, rows=4, cols=5)
    for r in range(box.rows):
        for c in range(box.cols):
            local = (r, c)
            assert box.to_local(box.to_world(local)) == local
            world = box.to_world(local)
            assert box.to_world(box.to_local(world)) == world


def test_index_round_trip_is_row_major():
    box = CoordinateTransform(min_row=0, min_col=0, rows=3, cols=4)
    assert box.index_of((0, 0)) == 0
    assert box.index_of((0, 3)) == 3
    assert box.index_of((1, 0)) == 4
    assert box.index_of((2, 3)) == 11
    for index in range(box.size):
        assert box.index_of(box.coord_of(index)) == index


def test_index_out_of_box_raises():
    box = CoordinateTransform(min_row=0, min_col=0, rows=2, cols=2)
    with pytest.raises(ValueError):
        box.index_of((2, 0))
    with pytest.raises(ValueError):
        box.coord_of(4)


def test_coordinate_map_is_bijective():
    coordinates = CoordinateMap(2, 3)
    assert len(coordinates) == 6
    seen = {coordinates.coordinate(index) for index in range(6)}
    assert seen == {(r, c) for r in range(2) for c in range(3)}
    assert coordinates.coordinate(4) == (1, 1)
    assert 5 in coordinates
    assert 6 not in coordinates


def test_coordinate_map_missing_index_raises_key_error():
    coordinates = CoordinateMap.for_matrix([[1, 2], [3, 4]])
    with pytest.raises(KeyError):
        coordinates.coordinate(9)
