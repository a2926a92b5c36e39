from __future__ import annotations

import math
from dataclasses import dataclass

from .geo import GeoPoint


@dataclass(frozen=True, slots=True)
class Segment:
    """Directed geodesic between two border vertices.

    ``distance_m`` is the geodesic length computed once at build time and never
    recomputed afterwards.
    """

    start: GeoPoint
    end: GeoPoint
    distance_m: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.distance_m) or self.distance_m < 0.0:
            raise ValueError(
                f"Segment distance must be finite and >= 0, got {self.distance_m}"
            )


@dataclass(frozen=True, slots=True)
class NearestResult:
    point: GeoPoint
    distance_m: float
    segment: Segment | None = None
