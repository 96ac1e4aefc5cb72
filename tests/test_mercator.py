from __future__ import annotations

import math

import pytest

from quadkey.mercator import (
    clamp_cell,
    lat_to_grid_y,
    lat_to_y,
    lon_to_grid_x,
    lon_to_x,
    normalize,
    project,
    transformer_4326_to_3857,
    unproject_bound,
)
from quadkey.types import MERCATOR_MAX_LAT


def test_normalize_keeps_positive_antimeridian():
    assert normalize(180.0, 0.0) == (180.0, 0.0)
    assert normalize(-180.0, 0.0) == (180.0, 0.0)
    assert normalize(540.0, 0.0) == (180.0, 0.0)


def test_normalize_wraps_longitude():
    assert normalize(190.0, 0.0) == (-170.0, 0.0)
    assert normalize(-190.0, 0.0) == (170.0, 0.0)
    assert normalize(370.0, 0.0) == (10.0, 0.0)
    assert normalize(-370.0, 0.0) == (-10.0, 0.0)
    assert normalize(14.4378, 50.0755) == (14.4378, 50.0755)


def test_normalize_clamps_latitude():
    assert normalize(0.0, 90.0) == (0.0, MERCATOR_MAX_LAT)
    assert normalize(0.0, -100.0) == (0.0, -MERCATOR_MAX_LAT)


def test_lon_to_x_edges_are_clamped():
    for z in range(1, 12):
        n = 2**z
        assert lon_to_x(-180.0, z) == 0
        assert lon_to_x(180.0, z) == n - 1
        assert lon_to_x(0.0, z) == n // 2


def test_lat_to_y_equator_and_limits():
    for z in range(1, 12):
        n = 2**z
        assert lat_to_y(0.0, z) == n // 2
        assert lat_to_y(MERCATOR_MAX_LAT, z) == 0
        assert lat_to_y(-MERCATOR_MAX_LAT, z) == n - 1


def test_project_tokyo_station():
    assert project(139.767125, 35.681236, 8) == (227, 100)


def test_project_clamps_poles_to_same_row():
    for z in range(1, 21):
        for lon in (-179.9, -12.5, 0.0, 139.767125):
            _, y_pole = project(lon, 90.0, z)
            _, y_max = project(lon, MERCATOR_MAX_LAT, z)
            assert y_pole == y_max == 0
            _, y_south_pole = project(lon, -90.0, z)
            assert y_south_pole == 2**z - 1


def test_project_wraps_longitude_before_projecting():
    assert project(139.767125 + 360.0, 35.681236, 8) == project(139.767125, 35.681236, 8)
    assert project(-220.232875, 35.681236, 8) == (227, 100)


def test_unproject_bound_whole_world_tile():
    b = unproject_bound(0, 0, 0)
    assert b.west == -180.0
    assert b.east == 180.0
    assert b.north == pytest.approx(85.0511287798066, abs=1e-9)
    assert b.south == pytest.approx(-85.0511287798066, abs=1e-9)


def test_unproject_bound_contains_projected_point():
    lon, lat = 139.767125, 35.681236
    x, y = project(lon, lat, 8)
    b = unproject_bound(x, y, 8)
    assert b.contains(lon, lat)
    assert b.east > b.west
    assert b.north > b.south
    assert b.east - b.west == pytest.approx(360.0 / 256)


def test_unproject_bound_rows_stack_without_gaps():
    z = 6
    for y in range(2**z - 1):
        upper = unproject_bound(3, y, z)
        lower = unproject_bound(3, y + 1, z)
        assert upper.south == lower.north


def test_forward_projection_matches_pyproj_web_mercator():
    # Tile row from pyproj's EPSG:3857 y must agree with the closed-form projection.
    t = transformer_4326_to_3857()
    half = math.pi * 6378137.0
    z = 12
    n = 2**z
    for lon, lat in [(14.4378, 50.0755), (-73.9857, 40.7484), (151.2153, -33.8568)]:
        mx, my = t.transform(lon, lat)
        x = math.floor((mx + half) / (2 * half) * n)
        y = math.floor((half - my) / (2 * half) * n)
        assert project(lon, lat, z) == (x, y)


def test_fractional_grid_helpers():
    assert lon_to_grid_x(0.0, 3) == 4.0
    assert lon_to_grid_x(-180.0, 3) == 0.0
    assert lat_to_grid_y(0.0, 3) == 4.0
    assert clamp_cell(-0.5, 3) == 0
    assert clamp_cell(8.0, 3) == 7
    assert clamp_cell(3.999, 3) == 3
