from .geo import GeoPoint
from .geodesic import Geodesic, GeodesicInverse
from .segment import NearestResult, Segment

__all__ = [
    "GeoPoint",
    "Geodesic",
    "GeodesicInverse",
    "NearestResult",
    "Segment",
]
