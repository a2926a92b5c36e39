from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True, slots=True)
class GeoPoint:
    lat: float
    lon: float

    def __post_init__(self) -> None:
        if not (-90.0 <= self.lat <= 90.0):
            raise ValueError(f"Invalid latitude: {self.lat}")
        if not (-180.0 <= self.lon <= 180.0):
            raise ValueError(f"Invalid longitude: {self.lon}")

    @classmethod
    def from_lon_lat(cls, coord: Sequence[float]) -> "GeoPoint":
        """Build from a GeoJSON ``[lon, lat]`` position (extra elements ignored)."""

        if len(coord) < 2:
            raise ValueError(f"Position needs at least 2 values, got {list(coord)}")
        return cls(lat=float(coord[1]), lon=float(coord[0]))

    def to_dict(self) -> dict[str, float]:
        return {"lat": self.lat, "lon": self.lon}
