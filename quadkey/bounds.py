from __future__ import annotations

from quadkey.codec import decode, is_valid
from quadkey.mercator import transformer_4326_to_3857, unproject_bound
from quadkey.types import Bound


def bound(key: str) -> Bound:
    """
    Lon/lat footprint of a tile.

    Fails closed: an invalid key yields `Bound.empty()`. Call `validate()`
    first when the reason matters.
    """
    if not is_valid(key):
        return Bound.empty()
    x, y, z = decode(key)
    return unproject_bound(x, y, z)


def xy_bound(key: str) -> Bound:
    """
    Tile footprint in EPSG:3857 meters (same field names, projected units).
    """
    b = bound(key)
    if b.is_empty():
        return b
    t = transformer_4326_to_3857()
    west, south = t.transform(b.west, b.south)
    east, north = t.transform(b.east, b.north)
    return Bound(west=float(west), south=float(south), east=float(east), north=float(north))
