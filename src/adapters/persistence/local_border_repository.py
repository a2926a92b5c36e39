from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from src.adapters.persistence.border_codec import loads_border
from src.app.ports.output import IBorderRepository
from src.domain.models import Geodesic, Segment


@dataclass(slots=True)
class LocalBorderRepository(IBorderRepository):
    """Loads a border from a local JSON file.

    The file is either a pre-built segment list or a GeoJSON document, which
    is converted to segments on load.

    Env vars:
      - BORDER_PATH: path to the border file (default: data/border.json)
    """

    geodesic: Geodesic
    path: str | Path | None = None

    _segments: tuple[Segment, ...] | None = field(default=None, repr=False)

    def _path(self) -> Path:
        value = self.path or os.getenv("BORDER_PATH") or "data/border.json"
        return Path(value)

    def describe(self) -> str:
        return str(self._path())

    def load_segments(self) -> tuple[Segment, ...]:
        if self._segments is not None:
            return self._segments

        path = self._path()
        if not path.exists():
            raise FileNotFoundError(f"Border file not found: {path}")

        self._segments = loads_border(path.read_bytes(), self.geodesic)
        return self._segments
