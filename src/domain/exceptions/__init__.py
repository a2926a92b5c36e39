from .border import BorderGeometryError, EmptyBorder, InvalidGeometry

__all__ = [
    "BorderGeometryError",
    "EmptyBorder",
    "InvalidGeometry",
]
