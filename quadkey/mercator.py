from __future__ import annotations

import math
from functools import lru_cache

from pyproj import Transformer

from quadkey.types import MERCATOR_MAX_LAT, Bound


def normalize(lon: float, lat: float) -> tuple[float, float]:
    """
    Wrap longitude into (-180, 180] and clamp latitude to the Web Mercator range.

    +180 stays +180 (it is not folded onto -180); -180 maps to +180.
    Out-of-range latitudes saturate, so poles never produce non-finite rows.
    """
    lon = math.fmod(float(lon), 360.0)
    if lon <= -180.0:
        lon += 360.0
    elif lon > 180.0:
        lon -= 360.0

    lat = max(-MERCATOR_MAX_LAT, min(MERCATOR_MAX_LAT, float(lat)))
    return lon, lat


def lon_to_grid_x(lon: float, z: int) -> float:
    """Fractional, unclamped column of a longitude."""
    return (float(lon) + 180.0) / 360.0 * 2.0**z


def lat_to_grid_y(lat: float, z: int) -> float:
    """Fractional, unclamped row of a latitude (row 0 is north)."""
    lat_rad = math.radians(float(lat))
    return (
        (1.0 - math.log(math.tan(lat_rad) + (1.0 / math.cos(lat_rad))) / math.pi)
        / 2.0
        * 2.0**z
    )


def clamp_cell(v: float, z: int) -> int:
    n = 2.0**z
    return int(max(0, min(math.floor(v), n - 1)))


def lon_to_x(lon: float, z: int) -> int:
    return clamp_cell(lon_to_grid_x(lon, z), z)


def lat_to_y(lat: float, z: int) -> int:
    return clamp_cell(lat_to_grid_y(lat, z), z)


def project(lon: float, lat: float, z: int) -> tuple[int, int]:
    """
    Convert lon/lat in EPSG:4326 to tile (x, y) at zoom z.
    """
    lon, lat = normalize(lon, lat)
    return lon_to_x(lon, z), lat_to_y(lat, z)


def unproject_bound(x: int, y: int, z: int) -> Bound:
    """
    Tile (z/x/y) footprint as a WGS84 lon/lat bound.
    """
    n = 2.0**z

    west = x / n * 360.0 - 180.0
    east = (x + 1) / n * 360.0 - 180.0

    def lat_from_row(row: int) -> float:
        # https://wiki.openstreetmap.org/wiki/Slippy_map_tilenames
        t = math.pi * (1.0 - 2.0 * row / n)
        return math.degrees(math.atan(math.sinh(t)))

    north = lat_from_row(y)
    south = lat_from_row(y + 1)
    return Bound.from_corners((west, north), (east, south))


@lru_cache(maxsize=1)
def transformer_4326_to_3857() -> Transformer:
    return Transformer.from_crs("EPSG:4326", "EPSG:3857", always_xy=True)
