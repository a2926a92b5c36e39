from __future__ import annotations


class BorderGeometryError(Exception):
    """Base exception for unusable border input."""


class InvalidGeometry(BorderGeometryError, ValueError):
    """Raised when a ring or segment cannot form part of a border."""

    def __init__(self, message: str, *, ring_index: int | None = None) -> None:
        if ring_index is not None:
            message = f"ring {ring_index}: {message}"
        super().__init__(message)
        self.ring_index = ring_index


class EmptyBorder(BorderGeometryError, ValueError):
    """Raised when a distance query is made against a border with no segments."""

    def __init__(self, message: str = "Border has no segments") -> None:
        super().__init__(message)
