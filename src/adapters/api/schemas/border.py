from __future__ import annotations

from pydantic import BaseModel, Field


class GeoPointSchema(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lon: float = Field(..., ge=-180.0, le=180.0)


class DistanceRequestSchema(GeoPointSchema):
    include_path: bool = False


class SegmentSchema(BaseModel):
    start: GeoPointSchema
    end: GeoPointSchema
    distance_m: float


class DistanceSchema(BaseModel):
    query: GeoPointSchema
    point: GeoPointSchema
    distance_m: float
    segment: SegmentSchema | None = None
    path: list[GeoPointSchema] | None = None


class BorderSummarySchema(BaseModel):
    segment_count: int
    total_length_m: float
