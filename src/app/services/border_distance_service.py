from __future__ import annotations

import logging
from dataclasses import dataclass, field

from src.app.ports.output import IBorderRepository
from src.domain.algorithms.border_distance import distance_to_border
from src.domain.algorithms.nearest_point import closest_on_segment, sample_path
from src.domain.models import GeoPoint, Geodesic, NearestResult, Segment

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BorderSummary:
    segment_count: int
    total_length_m: float


@dataclass(slots=True)
class BorderDistanceService:
    """Application service (use case) for nearest-border queries.

    The border is loaded once and shared read-only between queries; each query
    keeps its pruning state local, so concurrent calls need no locking.
    """

    border_repository: IBorderRepository
    geodesic: Geodesic

    # Tuning knobs
    path_step_m: float = 5000.0

    _segments: tuple[Segment, ...] | None = field(default=None, repr=False)

    def segments(self) -> tuple[Segment, ...]:
        if self._segments is None:
            segments = self.border_repository.load_segments()
            logger.info(
                "Loaded border with %d segments from %s",
                len(segments),
                self.border_repository.describe(),
            )
            self._segments = segments
        return self._segments

    def summary(self) -> BorderSummary:
        segments = self.segments()
        return BorderSummary(
            segment_count=len(segments),
            total_length_m=float(sum(s.distance_m for s in segments)),
        )

    def distance_to_border(self, *, query: GeoPoint) -> NearestResult:
        segments = self.segments()
        evaluated = 0

        def solver(geodesic: Geodesic, q: GeoPoint, segment: Segment) -> NearestResult:
            nonlocal evaluated
            evaluated += 1
            return closest_on_segment(geodesic, q, segment)

        result = distance_to_border(self.geodesic, segments, query, solver=solver)
        logger.debug(
            "Query (%s, %s): solver evaluated %d of %d segments, nearest (%s, %s)"
            " at %.1f m",
            query.lat,
            query.lon,
            evaluated,
            len(segments),
            result.point.lat,
            result.point.lon,
            result.distance_m,
        )
        return result

    def path_to(self, *, query: GeoPoint, point: GeoPoint) -> list[GeoPoint]:
        return sample_path(self.geodesic, query, point, step_m=self.path_step_m)
