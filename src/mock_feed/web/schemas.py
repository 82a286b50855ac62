"""Pydantic request/response schemas for the feed API."""

from __future__ import annotations

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    version: str


class FeedConfigOverrides(BaseModel):
    trackedAssets: int | None = None
    pageSize: int | None = None
    distStep: float | None = None


class PolylineGeometryModel(BaseModel):
    paths: list[list[list[float]]]


class PolylineFeatureModel(BaseModel):
    attributes: dict[str, str | float] = {}
    geometry: PolylineGeometryModel


class InitializeRequest(BaseModel):
    features: list[PolylineFeatureModel]
    config: FeedConfigOverrides | None = None
    seed: int | None = None


class InitializeResponse(BaseModel):
    track_count: int
    page_size: int


class PointGeometryModel(BaseModel):
    x: float
    y: float


class PointFeatureModel(BaseModel):
    attributes: dict[str, int | float]
    geometry: PointGeometryModel


class FeatureResultResponse(BaseModel):
    type: str
    features: list[PointFeatureModel]


class StatusResponse(BaseModel):
    initialized: bool
    track_count: int
    page_size: int
    tick_count: int
