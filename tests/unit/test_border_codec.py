from __future__ import annotations

import json

import pytest

from src.adapters.persistence.border_codec import (
    dumps_segments,
    loads_border,
    segment_from_dict,
    segments_from_geojson,
)
from src.domain.exceptions import InvalidGeometry
from src.domain.models import GeoPoint

SQUARE = [[0.0, 0.0], [1.0, 0.0], [1.0, 1.0], [0.0, 1.0], [0.0, 0.0]]
HOLE = [[0.4, 0.4], [0.6, 0.4], [0.6, 0.6], [0.4, 0.4]]


def _feature(geometry: dict) -> dict:
    return {"type": "Feature", "properties": {}, "geometry": geometry}


def test_feature_collection_flattens_polygons_holes_and_multipolygons(
    geodesic,
) -> None:
    doc = {
        "type": "FeatureCollection",
        "features": [
            _feature({"type": "Polygon", "coordinates": [SQUARE, HOLE]}),
            _feature(
                {
                    "type": "MultiPolygon",
                    "coordinates": [[SQUARE], [HOLE]],
                }
            ),
        ],
    }

    segments = segments_from_geojson(doc, geodesic)

    assert len(segments) == 2 * (4 + 3)


def test_line_strings_are_open_polylines(geodesic) -> None:
    doc = _feature({"type": "LineString", "coordinates": SQUARE[:3]})

    segments = segments_from_geojson(doc, geodesic)

    assert len(segments) == 2
    assert segments[-1].end == GeoPoint(lat=1.0, lon=1.0)


def test_unclosed_polygon_ring_is_rejected(geodesic) -> None:
    doc = {"type": "Polygon", "coordinates": [SQUARE[:-1]]}
    with pytest.raises(InvalidGeometry):
        segments_from_geojson(doc, geodesic)


def test_unsupported_geometry_is_rejected(geodesic) -> None:
    with pytest.raises(InvalidGeometry):
        segments_from_geojson({"type": "Point", "coordinates": [0.0, 0.0]}, geodesic)


def test_segment_json_keeps_cached_distance(geodesic) -> None:
    # Decoding must trust the stored length instead of recomputing it.
    raw = [
        {
            "start": {"lat": 46.55001, "lon": -63.6645},
            "end": {"lat": 46.41587, "lon": -62.9393},
            "distance": 57647.23526274624,
        }
    ]

    segments = loads_border(json.dumps(raw), geodesic)

    assert segments[0].distance_m == 57647.23526274624
    assert json.loads(dumps_segments(segments)) == raw


def test_loads_border_accepts_geojson_documents(geodesic) -> None:
    payload = json.dumps({"type": "Polygon", "coordinates": [SQUARE]}).encode()
    assert len(loads_border(payload, geodesic)) == 4


@pytest.mark.parametrize(
    "raw",
    [
        {"start": {"lat": 0.0, "lon": 0.0}, "end": {"lat": 0.0, "lon": 1.0}},
        {
            "start": {"lat": 0.0, "lon": 0.0},
            "end": {"lat": 0.0, "lon": 1.0},
            "distance": -1.0,
        },
        {"start": {"lat": 91.0, "lon": 0.0}, "end": {"lat": 0.0}, "distance": 1.0},
        {
            "start": {"lat": 0.0, "lon": 0.0},
            "end": {"lat": 0.0, "lon": 1.0},
            "distance": float("nan"),
        },
        {
            "start": {"lat": 0.0, "lon": 0.0},
            "end": {"lat": 0.0, "lon": 1.0},
            "distance": float("inf"),
        },
    ],
)
def test_segment_from_dict_rejects_bad_segments(raw: dict) -> None:
    with pytest.raises(InvalidGeometry):
        segment_from_dict(raw, index=3)


def test_loads_border_rejects_scalars(geodesic) -> None:
    with pytest.raises(InvalidGeometry):
        loads_border("42", geodesic)


@pytest.mark.parametrize("literal", ["NaN", "Infinity"])
def test_loads_border_rejects_non_finite_distances(geodesic, literal: str) -> None:
    # json.loads accepts these literals; a NaN bound would break the pruned scan.
    payload = (
        '[{"start": {"lat": 0.0, "lon": 0.0}, "end": {"lat": 0.0, "lon": 1.0},'
        f' "distance": {literal}}}]'
    )
    with pytest.raises(InvalidGeometry):
        loads_border(payload, geodesic)


@pytest.mark.parametrize(
    "doc",
    [
        {"type": "Polygon", "coordinates": [5]},
        {"type": "Polygon"},
        {"type": "LineString", "coordinates": None},
        {"type": "MultiPolygon", "coordinates": [7]},
        {"type": "MultiLineString", "coordinates": [[1.0, 2.0]]},
        {"type": "FeatureCollection", "features": [1]},
        {"type": "FeatureCollection", "features": {"type": "Feature"}},
        {"type": "GeometryCollection", "geometries": ["Polygon"]},
        {"type": "Feature", "geometry": [SQUARE]},
    ],
)
def test_malformed_geojson_is_invalid_geometry(geodesic, doc: dict) -> None:
    with pytest.raises(InvalidGeometry):
        segments_from_geojson(doc, geodesic)
