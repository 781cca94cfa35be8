"""Downsampling router."""

import logging
import time
from array import array
from typing import Optional

from fastapi import APIRouter, HTTPException

from ..config import settings
from ..exceptions import DownsamplerError
from ..models import (
    InterleavedSampleRequest,
    InterleavedSampleResponse,
    SampleRequest,
    SampleResponse,
    SampleStats,
)
from ..sampling import sample

logger = logging.getLogger(__name__)

router = APIRouter()


def _resolve_budget(max_points: Optional[int]) -> int:
    """Apply the configured default and bounds to a requested budget."""
    if max_points is None:
        return settings.default_max_points
    if not settings.min_max_points <= max_points <= settings.max_max_points:
        raise HTTPException(
            status_code=422,
            detail=(
                f"max_points must be between {settings.min_max_points} "
                f"and {settings.max_max_points}"
            ),
        )
    return max_points


@router.post("", response_model=SampleResponse)
def sample_points(request: SampleRequest):
    """Downsample a list of {x, y} points with LTTB."""
    target = _resolve_budget(request.max_points)
    start_time = time.time()

    points = request.points
    if request.sort:
        points = sorted(points, key=lambda p: p.x)

    try:
        reduced = sample(points, target)
    except DownsamplerError as e:
        raise HTTPException(status_code=400, detail=str(e))

    duration_ms = (time.time() - start_time) * 1000
    logger.info("Sampled %d -> %d points in %.1f ms", len(points), len(reduced), duration_ms)

    return SampleResponse(
        points=reduced,
        stats=SampleStats(
            input_points=len(points),
            output_points=len(reduced),
            target_points=target,
            passthrough=reduced is points,
            duration_ms=duration_ms,
        ),
    )


@router.post("/interleaved", response_model=InterleavedSampleResponse)
def sample_interleaved(request: InterleavedSampleRequest):
    """
    Downsample a flat [x0, y0, x1, y1, ...] buffer with LTTB.

    Odd-length buffers are rejected with 400. The library ignores an unpaired
    trailing value, but over HTTP it usually means a truncated payload.
    """
    target = _resolve_budget(request.max_points)
    start_time = time.time()

    if len(request.data) % 2:
        raise HTTPException(
            status_code=400, detail="data must hold an even number of values"
        )

    buf = array("d", request.data)
    try:
        reduced = sample(buf, target)
    except DownsamplerError as e:
        raise HTTPException(status_code=400, detail=str(e))

    duration_ms = (time.time() - start_time) * 1000
    logger.info(
        "Sampled %d -> %d interleaved points in %.1f ms",
        len(buf) // 2,
        len(reduced) // 2,
        duration_ms,
    )

    return InterleavedSampleResponse(
        data=reduced.tolist(),
        stats=SampleStats(
            input_points=len(buf) // 2,
            output_points=len(reduced) // 2,
            target_points=target,
            passthrough=reduced is buf,
            duration_ms=duration_ms,
        ),
    )
