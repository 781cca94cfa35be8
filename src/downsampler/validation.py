"""Synthetic signals and acceptance checks for LTTB shape preservation.

The acceptance check downsamples a large spiky signal and verifies that the
endpoints survive, that x stays non-decreasing and that most of the strongest
peaks and valleys keep a sampled point within half a bucket of them.
"""

import bisect
import heapq
import logging
import math
import random
import time
from array import array
from dataclasses import dataclass
from typing import List, Sequence

from .accessors import resolve_accessor
from .sampling import sample

logger = logging.getLogger(__name__)


def generate_synthetic_signal(n: int, seed: int = 1337) -> array:
    """
    Generate a spiky multi-frequency signal as an interleaved float32 buffer.

    Args:
        n: Number of points
        seed: Seed for the noise generator

    Returns:
        ``array('f')`` of length ``2 * n`` with x = index
    """
    rng = random.Random(seed)
    out = array("f", bytes(8 * n))

    for i in range(n):
        # Multi-frequency baseline + small noise so the shape is non-trivial
        baseline = (
            math.sin(i * 0.01)
            + 0.6 * math.sin(i * 0.0017)
            + 0.25 * math.sin(i * 0.00023)
        )
        y = baseline + (rng.random() - 0.5) * 0.15

        # Deterministic spikes and dips
        if i % 1973 == 0:
            y += 8
        if i % 2467 == 0:
            y -= 8
        if i % 7919 == 0:
            y += 12
        if i % 10427 == 0:
            y -= 12

        out[2 * i] = i
        out[2 * i + 1] = y

    return out


def top_k_extrema(data, k: int, mode: str = "max") -> List[int]:
    """
    Indices of the ``k`` largest (or smallest) finite y values.

    Ties keep the lower index first.

    Args:
        data: Any input accepted by ``sample``
        k: Number of extrema
        mode: "max" or "min"

    Returns:
        Indices ordered from most to least extreme
    """
    if mode not in ("max", "min"):
        raise ValueError(f"mode must be 'max' or 'min', got {mode!r}")

    accessor = resolve_accessor(data)
    if k <= 0 or len(accessor) == 0:
        return []

    finite = [
        (i, y)
        for i, y in ((i, accessor.y(i)) for i in range(len(accessor)))
        if math.isfinite(y)
    ]
    pick = heapq.nlargest if mode == "max" else heapq.nsmallest
    return [i for i, _ in pick(k, finite, key=lambda item: item[1])]


def count_retained(
    extrema: Sequence[int], sampled: Sequence[int], half_width: int
) -> int:
    """
    Count extrema with a sampled index within ``half_width`` of them.

    Args:
        extrema: Indices of the extrema in the original series
        sampled: Sorted indices kept by the downsampler
        half_width: Allowed distance in indices

    Returns:
        Number of retained extrema
    """
    retained = 0
    for idx in extrema:
        pos = bisect.bisect_left(sampled, idx - half_width)
        if pos < len(sampled) and sampled[pos] <= idx + half_width:
            retained += 1
    return retained


@dataclass
class AcceptanceReport:
    """Outcome of one acceptance run."""

    points: int
    target: int
    output_points: int
    bucket_size: float
    window_half_width: int
    top_k: int
    maxima_retained: int
    minima_retained: int
    maxima_count: int
    minima_count: int
    endpoints_match: bool
    x_non_decreasing: bool
    threshold: float
    duration_ms: float

    @property
    def maxima_retention(self) -> float:
        return self.maxima_retained / self.maxima_count if self.maxima_count else 1.0

    @property
    def minima_retention(self) -> float:
        return self.minima_retained / self.minima_count if self.minima_count else 1.0

    @property
    def passed(self) -> bool:
        """True when size, endpoints, ordering and retention all hold."""
        return (
            self.output_points == min(self.target, self.points)
            and self.endpoints_match
            and self.x_non_decreasing
            and self.maxima_retention >= self.threshold
            and self.minima_retention >= self.threshold
        )


def check_acceptance(
    n: int = 100_000,
    target: int = 1_000,
    k: int = 50,
    threshold: float = 0.7,
    seed: int = 1337,
) -> AcceptanceReport:
    """
    Downsample a synthetic signal and measure shape preservation.

    Args:
        n: Number of input points (must be > target >= 3)
        target: Number of output points
        k: Number of maxima and minima to track
        threshold: Minimum retention ratio for both maxima and minima
        seed: Seed for the synthetic signal

    Returns:
        AcceptanceReport; check ``passed`` for the verdict
    """
    if target < 3 or n <= target:
        raise ValueError(f"Acceptance needs n > target >= 3, got n={n} target={target}")

    data = generate_synthetic_signal(n, seed)

    start = time.perf_counter()
    sampled = sample(data, target)
    duration_ms = (time.perf_counter() - start) * 1000

    out_n = len(sampled) // 2
    endpoints_match = (
        out_n > 0
        and sampled[0] == data[0]
        and sampled[1] == data[1]
        and sampled[-2] == data[-2]
        and sampled[-1] == data[-1]
    )
    x_non_decreasing = all(
        sampled[2 * i] >= sampled[2 * (i - 1)] for i in range(1, out_n)
    )

    bucket_size = (n - 2) / (target - 2)
    half_width = max(1, math.floor(bucket_size / 2))

    # x was generated as the point index, exact in float32 for n < 2**24
    sampled_indices = [round(sampled[2 * i]) for i in range(out_n)]

    maxima = top_k_extrema(data, k, "max")
    minima = top_k_extrema(data, k, "min")

    report = AcceptanceReport(
        points=n,
        target=target,
        output_points=out_n,
        bucket_size=bucket_size,
        window_half_width=half_width,
        top_k=k,
        maxima_retained=count_retained(maxima, sampled_indices, half_width),
        minima_retained=count_retained(minima, sampled_indices, half_width),
        maxima_count=len(maxima),
        minima_count=len(minima),
        endpoints_match=endpoints_match,
        x_non_decreasing=x_non_decreasing,
        threshold=threshold,
        duration_ms=duration_ms,
    )
    logger.debug("Acceptance report: %s", report)
    return report
