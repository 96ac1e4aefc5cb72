from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field
from shapely.geometry import Polygon, mapping

from quadkey.bounds import bound
from quadkey.key import QuadKey, from_key


class TileFeature(BaseModel):
    """
    GeoJSON Feature for one tile; `model_dump(mode="json")` is plain GeoJSON.
    """

    type: Literal["Feature"] = "Feature"
    id: QuadKey
    geometry: dict[str, Any]
    properties: dict[str, Any] = Field(default_factory=dict)


class TileFeatureCollection(BaseModel):
    type: Literal["FeatureCollection"] = "FeatureCollection"
    features: list[TileFeature] = Field(default_factory=list)


def to_polygon(key: str) -> Polygon:
    # Invalid keys map to the empty bound, i.e. a degenerate polygon at (0, 0).
    return bound(key).to_polygon()


def to_feature(key: str) -> TileFeature:
    """
    Raises `InvalidKeyError` for invalid keys; a feature needs a real tile id.
    """
    qk = from_key(key)
    geom = mapping(to_polygon(qk))
    return TileFeature(
        id=qk,
        geometry={
            "type": geom["type"],
            "coordinates": [[list(pt) for pt in ring] for ring in geom["coordinates"]],
        },
        properties={"zoom": qk.zoom},
    )


def to_feature_collection(*keys: str) -> TileFeatureCollection:
    return TileFeatureCollection(features=[to_feature(k) for k in keys])
