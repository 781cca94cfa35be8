"""LTTB (Largest Triangle Three Buckets) index selection."""

import logging
from typing import Any, List, Tuple

from .accessors import PointAccessor, resolve_accessor
from .buckets import BucketPlanner
from .policy import Target, degenerate_indices, normalize_target

logger = logging.getLogger(__name__)


def select_largest_triangle(
    accessor: PointAccessor,
    candidates: range,
    anchor: Tuple[float, float],
    average: Tuple[float, float],
) -> int:
    """
    Pick the candidate forming the largest triangle with anchor and average.

    The area is compared as twice the absolute signed area. A later candidate
    only wins on a strictly larger area, so ties keep the lowest index. NaN
    areas never beat the running maximum, leaving ``candidates.start`` as the
    default when every area is NaN.

    Args:
        accessor: Coordinate access for the input
        candidates: Non-empty index range of the current bucket
        anchor: Previously selected point
        average: Mean point of the next bucket

    Returns:
        Index of the selected point
    """
    ax, ay = anchor
    avg_x, avg_y = average

    max_area = -1.0
    max_index = candidates.start
    for i in candidates:
        bx, by = accessor.point(i)
        area = abs((ax - avg_x) * (by - ay) - (ax - bx) * (avg_y - ay))
        if area > max_area:
            max_area = area
            max_index = i
    return max_index


def sample_indices(accessor: PointAccessor, target: Target) -> List[int]:
    """
    Select output indices for an already resolved accessor.

    Args:
        accessor: Coordinate access for the input
        target: Normalised point budget

    Returns:
        Strictly increasing input indices
    """
    n = len(accessor)
    indices = degenerate_indices(n, target)
    if indices is not None:
        return indices

    planner = BucketPlanner(n, int(target))
    sampled = [0]
    anchor = accessor.point(0)

    for b in range(planner.bucket_count):
        average = planner.lookahead_average(accessor, b)
        selected = select_largest_triangle(
            accessor, planner.current_range(b), anchor, average
        )
        sampled.append(selected)
        anchor = accessor.point(selected)

    # Always include last point
    sampled.append(n - 1)

    logger.debug(
        "LTTB selected %d of %d points (bucket_size=%.3f)",
        len(sampled),
        n,
        planner.bucket_size,
    )
    return sampled


def lttb_indices(data: Any, target: Target) -> List[int]:
    """
    Downsample to a list of input indices instead of points.

    Useful for applying one selection to several parallel columns.

    Args:
        data: Any input accepted by ``sample``
        target: Requested number of output points; fractions are floored

    Returns:
        Strictly increasing input indices, first 0 and last N - 1 whenever
        at least two points are selected
    """
    return sample_indices(resolve_accessor(data), normalize_target(target))
