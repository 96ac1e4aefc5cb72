from __future__ import annotations

import logging
import math
from typing import Sequence

from quadkey import config
from quadkey.errors import TooManyTilesError
from quadkey.key import QuadKey, from_xyz
from quadkey.mercator import clamp_cell, lat_to_grid_y, lon_to_grid_x, normalize
from quadkey.types import Bound

logger = logging.getLogger(__name__)

# Tile edges pushed through the forward projection land within this many cells
# (times 2**z) of the exact row/column.
_SNAP_REL = 1e-12


def keys_in_bound(
    bound: Bound | Sequence[float], zoom: int, *, max_tiles: int | None = None
) -> list[QuadKey]:
    """
    All tiles at `zoom` overlapping `bound` (west, south, east, north).

    The bound is half-open: the west and north edges are included, the east
    and south edges are excluded (columns [west, east), rows [north, south)
    counting down from the north). A bound equal to a tile's own bound
    therefore yields exactly that tile. A zero-width or zero-height bound
    covers nothing.

    Inverted bounds (min/max swapped) are recovered by sorting the corners.
    A bound crossing the antimeridian (west > east) is NOT handled: split it
    into [west, 180] and [-180, east] and union the results.

    Keys are ordered by x, then y. `max_tiles` (default: QUADKEY_MAX_TILES)
    raises `TooManyTilesError` before anything is allocated.
    """
    raw = bound if isinstance(bound, Bound) else Bound(*(float(v) for v in bound))
    if raw.west == raw.east or raw.south == raw.north:
        return []
    if raw.west > raw.east or raw.south > raw.north:
        logger.debug(
            "keys_in_bound: inverted bound %s; swapping corners", raw.as_tuple()
        )
    b = raw.normalized()

    west, south = normalize(b.west, b.south)
    east, north = normalize(b.east, b.north)
    # West is the inclusive minimum edge; on the antimeridian that is -180.
    if west == 180.0:
        west = -180.0
    if west > east:
        west, east = east, west
    if west == east or south == north:
        return []

    z = int(zoom)
    min_x, max_x = _cell_range(lon_to_grid_x(west, z), lon_to_grid_x(east, z), z)
    min_y, max_y = _cell_range(lat_to_grid_y(north, z), lat_to_grid_y(south, z), z)

    count = (max_x - min_x + 1) * (max_y - min_y + 1)
    limit = max_tiles if max_tiles is not None else config.max_tiles()
    if limit is not None and count > limit:
        raise TooManyTilesError(count=count, limit=limit)

    logger.debug("keys_in_bound: %d tiles at z=%d", count, z)
    return [
        from_xyz(x, y, z)
        for x in range(min_x, max_x + 1)
        for y in range(min_y, max_y + 1)
    ]


def _snap(v: float, z: int) -> float:
    r = round(v)
    if abs(v - r) <= _SNAP_REL * 2.0**z:
        return float(r)
    return v


def _cell_range(lo: float, hi: float, z: int) -> tuple[int, int]:
    """
    Cells [lo, hi) for fractional grid edges lo < hi.

    The excluded edge moves one float toward the interior, so an edge sitting
    exactly on a cell boundary stops short of the next cell.
    """
    lo = _snap(lo, z)
    hi = math.nextafter(_snap(hi, z), lo)
    first = clamp_cell(lo, z)
    last = clamp_cell(hi, z)
    return first, max(first, last)
