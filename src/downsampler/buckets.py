"""Bucket boundaries over the interior index range ``[1, n - 2]``."""

import math
from typing import Tuple

from .accessors import PointAccessor


class BucketPlanner:
    """
    Fractional-width bucket layout for one LTTB pass.

    Only valid for ``target >= 3`` and ``n > target``; smaller sizes are
    resolved by ``degenerate_indices`` before a planner is built.
    """

    def __init__(self, n: int, target: int):
        """
        Initialize planner.

        Args:
            n: Number of input points
            target: Number of output points, endpoints included
        """
        self.n = n
        self.target = target
        self.last_index = n - 1
        self.bucket_size = (n - 2) / (target - 2)

    @property
    def bucket_count(self) -> int:
        """Number of interior buckets (one output point each)."""
        return self.target - 2

    def _edge(self, b: int) -> int:
        return math.floor(self.bucket_size * b) + 1

    def current_range(self, b: int) -> range:
        """
        Candidate indices for bucket ``b``; never includes the last index.

        An empty range is clamped to a single candidate.
        """
        start = self._edge(b)
        end = min(self._edge(b + 1), self.last_index)
        if start >= end:
            start = min(start, self.last_index - 1)
            end = min(start + 1, self.last_index)
        return range(start, end)

    def next_range(self, b: int) -> range:
        """Indices averaged as the lookahead vertex while selecting bucket ``b``."""
        return range(self._edge(b + 1), min(self._edge(b + 2), self.last_index))

    def lookahead_average(self, accessor: PointAccessor, b: int) -> Tuple[float, float]:
        """
        Mean (x, y) of the next bucket.

        Falls back to the last input point when the next range is empty,
        as it normally is for the final bucket.
        """
        indices = self.next_range(b)
        if not indices:
            return accessor.point(self.last_index)

        sum_x = 0.0
        sum_y = 0.0
        for i in indices:
            x, y = accessor.point(i)
            sum_x += x
            sum_y += y
        count = len(indices)
        return sum_x / count, sum_y / count
