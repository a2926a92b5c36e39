from __future__ import annotations

from fastapi import APIRouter, Depends

from src.adapters.api.dependencies import get_border_distance_service
from src.adapters.api.schemas.border import (
    BorderSummarySchema,
    DistanceRequestSchema,
    DistanceSchema,
    GeoPointSchema,
    SegmentSchema,
)
from src.app.services.border_distance_service import BorderDistanceService
from src.domain.models import GeoPoint

router = APIRouter(tags=["border"])


def _point(p: GeoPoint) -> GeoPointSchema:
    return GeoPointSchema(lat=p.lat, lon=p.lon)


@router.post("/distance", response_model=DistanceSchema)
def distance_to_border(
    req: DistanceRequestSchema,
    service: BorderDistanceService = Depends(get_border_distance_service),
) -> DistanceSchema:
    query = GeoPoint(lat=req.lat, lon=req.lon)
    result = service.distance_to_border(query=query)

    segment = result.segment
    return DistanceSchema(
        query=_point(query),
        point=_point(result.point),
        distance_m=result.distance_m,
        segment=(
            SegmentSchema(
                start=_point(segment.start),
                end=_point(segment.end),
                distance_m=segment.distance_m,
            )
            if segment is not None
            else None
        ),
        path=(
            [_point(p) for p in service.path_to(query=query, point=result.point)]
            if req.include_path
            else None
        ),
    )


@router.get("/border", response_model=BorderSummarySchema)
def border_summary(
    service: BorderDistanceService = Depends(get_border_distance_service),
) -> BorderSummarySchema:
    summary = service.summary()
    return BorderSummarySchema(
        segment_count=summary.segment_count, total_length_m=summary.total_length_m
    )
