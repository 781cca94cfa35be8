"""Pydantic models for API request/response schemas."""

from typing import List, Optional

from pydantic import BaseModel, Field


class DataPoint(BaseModel):
    """Single (x, y) point."""

    x: float
    y: float


class SampleRequest(BaseModel):
    """Downsampling request for a list of points."""

    points: List[DataPoint]
    max_points: Optional[int] = None  # Defaults to settings.default_max_points
    sort: bool = False  # Sort by x before sampling


class InterleavedSampleRequest(BaseModel):
    """Downsampling request for a flat [x0, y0, x1, y1, ...] buffer."""

    data: List[float]
    max_points: Optional[int] = None


class SampleStats(BaseModel):
    """Downsampling statistics."""

    input_points: int
    output_points: int
    target_points: int
    passthrough: bool
    duration_ms: float = Field(..., ge=0)


class SampleResponse(BaseModel):
    """Downsampled points."""

    points: List[DataPoint]
    stats: SampleStats


class InterleavedSampleResponse(BaseModel):
    """Downsampled flat buffer."""

    data: List[float]
    stats: SampleStats


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    default_max_points: int
