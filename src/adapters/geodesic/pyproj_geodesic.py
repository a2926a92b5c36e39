from __future__ import annotations

from dataclasses import dataclass, field

from pyproj import Geod

from src.domain.models import GeoPoint, GeodesicInverse


def _normalize_lon(lon: float) -> float:
    if -180.0 <= lon <= 180.0:
        return lon
    return (lon + 180.0) % 360.0 - 180.0


@dataclass(frozen=True, slots=True)
class PyprojGeodesic:
    """WGS84 geodesics via pyproj (Karney's GeographicLib algorithms).

    ``pyproj.Geod`` is stateless after construction, so one instance can be
    shared between concurrent queries.
    """

    ellps: str = "WGS84"
    _geod: Geod = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_geod", Geod(ellps=self.ellps))

    def inverse(self, a: GeoPoint, b: GeoPoint) -> GeodesicInverse:
        az12, _, dist = self._geod.inv(a.lon, a.lat, b.lon, b.lat)
        return GeodesicInverse(distance_m=float(dist), azimuth_deg=float(az12))

    def direct(
        self, origin: GeoPoint, azimuth_deg: float, distance_m: float
    ) -> GeoPoint:
        lon, lat, _ = self._geod.fwd(origin.lon, origin.lat, azimuth_deg, distance_m)
        return GeoPoint(
            lat=max(-90.0, min(90.0, float(lat))), lon=_normalize_lon(float(lon))
        )

    def distance(self, a: GeoPoint, b: GeoPoint) -> float:
        return self.inverse(a, b).distance_m
