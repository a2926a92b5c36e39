from __future__ import annotations

import pytest

from src.adapters.geodesic import PyprojGeodesic
from src.domain.models import GeoPoint, Segment


@pytest.fixture(scope="session")
def geodesic() -> PyprojGeodesic:
    return PyprojGeodesic()


@pytest.fixture()
def pei_segment(geodesic: PyprojGeodesic) -> Segment:
    """A ~57.6 km stretch of coastline in Prince Edward Island."""

    start = GeoPoint(lat=46.55001, lon=-63.6645)
    end = GeoPoint(lat=46.41587, lon=-62.9393)
    return Segment(start=start, end=end, distance_m=geodesic.distance(start, end))
