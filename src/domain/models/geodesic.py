from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .geo import GeoPoint


@dataclass(frozen=True, slots=True)
class GeodesicInverse:
    distance_m: float
    azimuth_deg: float  # initial azimuth at the first point, clockwise from north


class Geodesic(Protocol):
    """Solver for the direct and inverse geodesic problems on an ellipsoid."""

    def inverse(self, a: GeoPoint, b: GeoPoint) -> GeodesicInverse: ...

    def direct(
        self, origin: GeoPoint, azimuth_deg: float, distance_m: float
    ) -> GeoPoint: ...

    def distance(self, a: GeoPoint, b: GeoPoint) -> float: ...
