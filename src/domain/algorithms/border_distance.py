from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Sequence

from src.domain.exceptions import EmptyBorder
from src.domain.models import GeoPoint, Geodesic, NearestResult, Segment

from .nearest_point import closest_on_segment

logger = logging.getLogger(__name__)

SegmentSolver = Callable[[Geodesic, GeoPoint, Segment], NearestResult]


def lower_bounds(
    geodesic: Geodesic, segments: Sequence[Segment], query: GeoPoint
) -> list[tuple[float, int]]:
    """``(bound, index)`` pairs sorted ascending by bound, ties kept in border order.

    ``d(query, end) - length`` never exceeds the distance from ``query`` to any
    point of the segment (triangle inequality). The pairs live only for one
    query; segments are never annotated.
    """

    bounds = [
        (geodesic.distance(segment.end, query) - segment.distance_m, index)
        for index, segment in enumerate(segments)
    ]
    bounds.sort(key=lambda item: item[0])
    return bounds


def distance_to_border(
    geodesic: Geodesic,
    segments: Sequence[Segment],
    query: GeoPoint,
    *,
    solver: SegmentSolver = closest_on_segment,
) -> NearestResult:
    """Closest point on the whole border to ``query``.

    Segments are visited in ascending lower-bound order and the scan stops at
    the first segment whose bound exceeds the best distance found so far, so
    the answer is identical to an exhaustive scan.
    """

    if not segments:
        raise EmptyBorder()

    ordered = lower_bounds(geodesic, segments, query)

    _, first = ordered[0]
    best = replace(solver(geodesic, query, segments[first]), segment=segments[first])
    evaluated = 1

    for bound, index in ordered[1:]:
        if bound > best.distance_m:
            break

        segment = segments[index]
        result = solver(geodesic, query, segment)
        evaluated += 1
        if result.distance_m < best.distance_m:
            best = replace(result, segment=segment)

    logger.debug(
        "Border scan evaluated %d of %d segments", evaluated, len(segments)
    )
    return best


def distance_to_border_exhaustive(
    geodesic: Geodesic,
    segments: Sequence[Segment],
    query: GeoPoint,
    *,
    solver: SegmentSolver = closest_on_segment,
) -> NearestResult:
    """Reference scan that evaluates every segment without pruning."""

    if not segments:
        raise EmptyBorder()

    return min(
        (replace(solver(geodesic, query, s), segment=s) for s in segments),
        key=lambda result: result.distance_m,
    )
