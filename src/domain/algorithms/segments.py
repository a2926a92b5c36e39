from __future__ import annotations

from typing import Iterable, Sequence

from src.domain.exceptions import InvalidGeometry
from src.domain.models import GeoPoint, Geodesic, Segment

Ring = Sequence[Sequence[float]]


def _ring_points(ring: Ring, *, ring_index: int, closed: bool) -> list[GeoPoint]:
    try:
        points = [GeoPoint.from_lon_lat(coord) for coord in ring]
    except (TypeError, ValueError) as exc:
        raise InvalidGeometry(str(exc), ring_index=ring_index) from exc

    if len(points) < 2:
        raise InvalidGeometry(
            f"needs at least 2 coordinates, got {len(points)}", ring_index=ring_index
        )

    if closed and points[0] != points[-1]:
        raise InvalidGeometry(
            "first and last coordinates differ (ring is not closed)",
            ring_index=ring_index,
        )
    return points


def build_segments(
    rings: Iterable[Ring], geodesic: Geodesic, *, closed: bool = True
) -> tuple[Segment, ...]:
    """Flatten coordinate rings into directed geodesic segments.

    Each ring is a sequence of ``[lon, lat]`` positions (GeoJSON order). A ring
    of ``n`` points yields ``n - 1`` segments. With ``closed=True`` (polygon
    rings, including holes) the first and last positions must be equal; with
    ``closed=False`` the ring is treated as an open polyline.
    """

    out: list[Segment] = []
    for ring_index, ring in enumerate(rings):
        points = _ring_points(ring, ring_index=ring_index, closed=closed)
        for start, end in zip(points, points[1:]):
            out.append(
                Segment(
                    start=start,
                    end=end,
                    distance_m=geodesic.distance(start, end),
                )
            )
    return tuple(out)
