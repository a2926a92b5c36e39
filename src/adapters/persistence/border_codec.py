from __future__ import annotations

import json
from typing import Any, Iterable, Mapping

from src.domain.algorithms.segments import build_segments
from src.domain.exceptions import InvalidGeometry
from src.domain.models import GeoPoint, Geodesic, Segment

_POLYGON_TYPES = {"Polygon", "MultiPolygon"}
_LINE_TYPES = {"LineString", "MultiLineString"}


def _members(doc: Mapping[str, Any], key: str) -> list[Any]:
    members = doc.get(key) or []
    if not isinstance(members, list):
        raise InvalidGeometry(f"{doc.get('type')} {key} must be an array")
    return members


def _geometries(doc: Any) -> Iterable[Mapping[str, Any]]:
    if not isinstance(doc, Mapping):
        raise InvalidGeometry(f"Expected a GeoJSON object, got {type(doc).__name__}")

    kind = doc.get("type")
    if kind == "FeatureCollection":
        for feature in _members(doc, "features"):
            yield from _geometries(feature)
    elif kind == "Feature":
        geometry = doc.get("geometry")
        if geometry:
            yield from _geometries(geometry)
    elif kind == "GeometryCollection":
        for geometry in _members(doc, "geometries"):
            yield from _geometries(geometry)
    elif kind in _POLYGON_TYPES or kind in _LINE_TYPES:
        yield doc
    else:
        raise InvalidGeometry(f"Unsupported GeoJSON type: {kind!r}")


def segments_from_geojson(
    doc: Mapping[str, Any], geodesic: Geodesic
) -> tuple[Segment, ...]:
    """Flatten every ring/line of a GeoJSON document into one segment list.

    Polygon rings (exterior and holes) must be closed; LineStrings are open
    polylines. Feature boundaries are not preserved.
    """

    closed_rings: list[Any] = []
    open_lines: list[Any] = []
    for geometry in _geometries(doc):
        kind = geometry["type"]
        coords = geometry.get("coordinates")
        if not isinstance(coords, list):
            raise InvalidGeometry(f"{kind} has no coordinate array")

        if kind == "Polygon":
            closed_rings.extend(coords)
        elif kind == "MultiPolygon":
            for polygon in coords:
                if not isinstance(polygon, list):
                    raise InvalidGeometry("MultiPolygon member is not a ring list")
                closed_rings.extend(polygon)
        elif kind == "LineString":
            open_lines.append(coords)
        else:
            open_lines.extend(coords)

    return build_segments(closed_rings, geodesic) + build_segments(
        open_lines, geodesic, closed=False
    )


def segment_to_dict(segment: Segment) -> dict[str, Any]:
    return {
        "start": segment.start.to_dict(),
        "end": segment.end.to_dict(),
        "distance": segment.distance_m,
    }


def segment_from_dict(raw: Mapping[str, Any], *, index: int | None = None) -> Segment:
    where = f"segment {index}: " if index is not None else ""
    try:
        start = raw["start"]
        end = raw["end"]
        return Segment(
            start=GeoPoint(lat=float(start["lat"]), lon=float(start["lon"])),
            end=GeoPoint(lat=float(end["lat"]), lon=float(end["lon"])),
            distance_m=float(raw["distance"]),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidGeometry(f"{where}{exc}") from exc


def segments_from_json_list(raw: Iterable[Mapping[str, Any]]) -> tuple[Segment, ...]:
    return tuple(segment_from_dict(item, index=i) for i, item in enumerate(raw))


def dumps_segments(segments: Iterable[Segment], *, indent: int | None = 2) -> str:
    return json.dumps([segment_to_dict(s) for s in segments], indent=indent)


def loads_border(payload: str | bytes, geodesic: Geodesic) -> tuple[Segment, ...]:
    """Decode either a pre-built segment list or a GeoJSON document."""

    data = json.loads(payload)
    if isinstance(data, list):
        return segments_from_json_list(data)
    if isinstance(data, dict):
        return segments_from_geojson(data, geodesic)
    raise InvalidGeometry(f"Unsupported border document: {type(data).__name__}")
