"""
Quadkey tile addressing.

Converts between lon/lat points, Web Mercator tile grid coordinates (x, y, z),
base-4 quadkey strings and tile bounds, and enumerates the tiles covering a bbox.
"""
from quadkey.bounds import bound, xy_bound
from quadkey.codec import decode, encode, is_valid, validate
from quadkey.errors import InvalidKeyError, QuadKeyError, RootKeyError, TooManyTilesError
from quadkey.features import (
    TileFeature,
    TileFeatureCollection,
    to_feature,
    to_feature_collection,
    to_polygon,
)
from quadkey.hierarchy import children, parent
from quadkey.key import QuadKey, from_key, from_lon_lat, from_point, from_xyz
from quadkey.mercator import lat_to_y, lon_to_x, normalize, project, unproject_bound
from quadkey.region import keys_in_bound
from quadkey.types import MERCATOR_MAX_LAT, Bound, Tile

__all__ = [
    "MERCATOR_MAX_LAT",
    "Bound",
    "InvalidKeyError",
    "QuadKey",
    "QuadKeyError",
    "RootKeyError",
    "Tile",
    "TileFeature",
    "TileFeatureCollection",
    "TooManyTilesError",
    "bound",
    "children",
    "decode",
    "encode",
    "from_key",
    "from_lon_lat",
    "from_point",
    "from_xyz",
    "is_valid",
    "keys_in_bound",
    "lat_to_y",
    "lon_to_x",
    "normalize",
    "parent",
    "project",
    "to_feature",
    "to_feature_collection",
    "to_polygon",
    "unproject_bound",
    "validate",
    "xy_bound",
]
