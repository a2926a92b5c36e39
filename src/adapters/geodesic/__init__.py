from .pyproj_geodesic import PyprojGeodesic

__all__ = ["PyprojGeodesic"]
