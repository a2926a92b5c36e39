from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import Segment


class IBorderRepository(ABC):
    """Persistence port for the preprocessed border."""

    @abstractmethod
    def load_segments(self) -> tuple[Segment, ...]:
        """Return the border as an immutable, flat segment list."""

    @abstractmethod
    def describe(self) -> str:
        """Human-readable source of the border (for logs)."""
