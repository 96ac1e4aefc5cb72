from __future__ import annotations

import json

import pytest

from quadkey.errors import InvalidKeyError
from quadkey.features import to_feature, to_feature_collection, to_polygon
from quadkey.key import QuadKey


def test_to_polygon_matches_bound():
    poly = to_polygon("3")
    west, south, east, north = poly.bounds
    assert west == 0.0
    assert east == 180.0
    assert north == pytest.approx(0.0, abs=1e-12)
    assert south == pytest.approx(-85.0511287798066, abs=1e-9)
    assert QuadKey("3").to_polygon().area > 0.0


def test_to_feature_is_geojson():
    feature = to_feature("0").model_dump(mode="json")
    assert feature["type"] == "Feature"
    assert feature["id"] == "0"
    assert feature["properties"] == {"zoom": 1}

    geom = feature["geometry"]
    assert geom["type"] == "Polygon"
    ring = geom["coordinates"][0]
    assert len(ring) == 5
    assert ring[0] == ring[-1]
    lons = [pt[0] for pt in ring]
    assert min(lons) == -180.0
    assert max(lons) == 0.0

    # Serializes with the stdlib encoder as-is.
    assert json.loads(json.dumps(feature)) == feature


def test_to_feature_rejects_invalid_key():
    with pytest.raises(InvalidKeyError):
        to_feature("01a3")


def test_to_feature_collection():
    fc = to_feature_collection(QuadKey("0"), "1")
    assert fc.type == "FeatureCollection"
    assert len(fc.features) == 2
    assert fc.features[0].id == "0"
    assert fc.features[1].id == "1"
    assert isinstance(fc.features[1].id, QuadKey)

    payload = json.loads(fc.model_dump_json())
    assert [f["id"] for f in payload["features"]] == ["0", "1"]


def test_empty_feature_collection():
    assert to_feature_collection().model_dump(mode="json") == {
        "type": "FeatureCollection",
        "features": [],
    }
