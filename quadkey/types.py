from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

from shapely.geometry import Polygon
from shapely.geometry import box as shapely_box


MERCATOR_MAX_LAT = 85.05112878


class Tile(NamedTuple):
    """Grid cell address: column x, row y (0 = north) at zoom z."""

    x: int
    y: int
    z: int


@dataclass(frozen=True)
class Bound:
    """
    Lon/lat rectangle in degrees (WGS84).

    Field order follows the usual bbox convention:
    - west, south, east, north
    """

    west: float
    south: float
    east: float
    north: float

    @classmethod
    def empty(cls) -> "Bound":
        return cls(west=0.0, south=0.0, east=0.0, north=0.0)

    @classmethod
    def from_corners(cls, a: tuple[float, float], b: tuple[float, float]) -> "Bound":
        # Any two opposite corners, in any order.
        return cls(
            west=min(a[0], b[0]),
            south=min(a[1], b[1]),
            east=max(a[0], b[0]),
            north=max(a[1], b[1]),
        )

    def is_empty(self) -> bool:
        return self == Bound.empty()

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.west, self.south, self.east, self.north)

    def normalized(self) -> "Bound":
        return Bound.from_corners((self.west, self.south), (self.east, self.north))

    def contains(self, lon: float, lat: float) -> bool:
        return self.west <= lon <= self.east and self.south <= lat <= self.north

    def to_polygon(self) -> Polygon:
        return shapely_box(self.west, self.south, self.east, self.north)
