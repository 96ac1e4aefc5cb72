from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema
from shapely.geometry import Point

from quadkey.codec import decode, encode, is_valid, validate
from quadkey.mercator import project
from quadkey.types import Bound, Tile

if TYPE_CHECKING:
    from shapely.geometry import Polygon

    from quadkey.features import TileFeature


class QuadKey(str):
    """
    Base-4 tile address; its length is the zoom level.

    A QuadKey is a plain `str` on the wire: `json.dumps` writes it as a JSON
    string and pydantic models serialize it as one.

    Failure policy differs per operation:
    - `xyz()` and `parent()` raise `InvalidKeyError`
    - `children()`, `bound()` and `xy_bound()` return empty values instead
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"QuadKey({str(self)!r})"

    @property
    def zoom(self) -> int:
        return len(self)

    def validate(self) -> None:
        validate(self)

    def is_valid(self) -> bool:
        return is_valid(self)

    def xyz(self) -> Tile:
        return decode(self)

    def parent(self) -> "QuadKey":
        from quadkey.hierarchy import parent

        return parent(self)

    def children(self) -> list["QuadKey"]:
        from quadkey.hierarchy import children

        return children(self)

    def bound(self) -> Bound:
        from quadkey.bounds import bound

        return bound(self)

    def xy_bound(self) -> Bound:
        from quadkey.bounds import xy_bound

        return xy_bound(self)

    def to_polygon(self) -> "Polygon":
        from quadkey.features import to_polygon

        return to_polygon(self)

    def to_feature(self) -> "TileFeature":
        from quadkey.features import to_feature

        return to_feature(self)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_after_validator_function(
            from_key,
            core_schema.str_schema(),
            serialization=core_schema.plain_serializer_function_ser_schema(str),
        )


def from_xyz(x: int, y: int, z: int) -> QuadKey:
    return QuadKey(encode(int(x), int(y), int(z)))


def from_lon_lat(lon: float, lat: float, zoom: int) -> QuadKey:
    x, y = project(lon, lat, zoom)
    return from_xyz(x, y, zoom)


def from_point(point: Point, zoom: int) -> QuadKey:
    # shapely points are (x=lon, y=lat) in EPSG:4326
    return from_lon_lat(point.x, point.y, zoom)


def from_key(key: str) -> QuadKey:
    """
    Validating constructor; `QuadKey(...)` itself accepts any string.
    """
    validate(key)
    return QuadKey(key)
