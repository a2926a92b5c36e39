from __future__ import annotations

import os
from functools import lru_cache

from src.adapters.geodesic import PyprojGeodesic
from src.adapters.persistence import LocalBorderRepository, S3BorderRepository
from src.app.ports.output import IBorderRepository
from src.app.services.border_distance_service import BorderDistanceService


@lru_cache(maxsize=1)
def get_border_distance_service() -> BorderDistanceService:
    # The border is immutable once loaded, so one service serves every request.
    geodesic = PyprojGeodesic()

    repository: IBorderRepository = LocalBorderRepository(geodesic=geodesic)
    if os.getenv("BORDER_BUCKET"):
        repository = S3BorderRepository(geodesic=geodesic)

    service = BorderDistanceService(border_repository=repository, geodesic=geodesic)

    # Allow tuning via env without changing code.
    if os.getenv("BORDER_PATH_STEP_M"):
        service.path_step_m = float(os.environ["BORDER_PATH_STEP_M"])

    return service
