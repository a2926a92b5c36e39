from __future__ import annotations

from src.domain.models import GeoPoint, Geodesic, NearestResult, Segment

from .newton import minimize

INITIAL_GUESS = 0.5


def closest_on_segment(
    geodesic: Geodesic, query: GeoPoint, segment: Segment
) -> NearestResult:
    """Closest point on one geodesic segment to ``query``.

    Newton's method refines the fractional position from the midpoint. The
    endpoints always stay in the candidate set since the iteration may diverge,
    leave ``(0, 1)`` or settle on a non-global critical point.
    """

    path = geodesic.inverse(segment.start, segment.end)

    def position(alpha: float) -> GeoPoint:
        return geodesic.direct(segment.start, path.azimuth_deg, path.distance_m * alpha)

    def distance_at(alpha: float) -> float:
        return geodesic.distance(position(alpha), query)

    candidates = [segment.start, segment.end]
    alpha = minimize(distance_at, INITIAL_GUESS)
    if alpha is not None and 0.0 < alpha < 1.0:
        candidates.append(position(alpha))

    scored = [(geodesic.distance(point, query), point) for point in candidates]
    distance_m, point = min(scored, key=lambda item: item[0])
    return NearestResult(point=point, distance_m=distance_m)


def sample_path(
    geodesic: Geodesic, a: GeoPoint, b: GeoPoint, *, step_m: float = 5000.0
) -> list[GeoPoint]:
    """Points every ``step_m`` metres along the geodesic from ``a``, ending at ``b``."""

    if step_m <= 0:
        raise ValueError(f"step_m must be > 0, got {step_m}")

    path = geodesic.inverse(a, b)
    points = [a]
    travelled = step_m
    while travelled < path.distance_m:
        points.append(geodesic.direct(a, path.azimuth_deg, travelled))
        travelled += step_m
    if b != a:
        points.append(b)
    return points
