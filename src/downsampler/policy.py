"""Point-budget normalisation and the degenerate-size short circuits."""

import math
from numbers import Real
from typing import List, Optional, Union

from .exceptions import InvalidTargetError

Target = Union[int, float]


def normalize_target(target: Target) -> Union[int, float]:
    """
    Floor a requested point budget to an integer.

    ``+inf`` is kept as-is (no limit) and ``-inf`` as-is (empty budget); both
    compare correctly against the point count without flooring.

    Raises:
        InvalidTargetError: If ``target`` is NaN or not a real number
    """
    if isinstance(target, bool) or not isinstance(target, Real):
        raise InvalidTargetError(f"Point budget must be a number, got {target!r}")
    if isinstance(target, int):
        return target
    if math.isnan(target):
        raise InvalidTargetError("Point budget must not be NaN")
    if math.isinf(target):
        return target
    return math.floor(target)


def degenerate_indices(n: int, target: Union[int, float]) -> Optional[List[int]]:
    """
    Resolve the sizes the bucket algorithm cannot handle.

    Bucket math divides by ``target - 2``, so every combination other than
    ``target >= 3 and n > target`` is answered here.

    Args:
        n: Number of input points
        target: Normalised point budget

    Returns:
        Selected indices, or None when the bucket algorithm must run
    """
    if target <= 0 or n == 0:
        return []
    if target == 1:
        return [0]
    if target == 2:
        return [0, n - 1] if n >= 2 else [0]
    if n <= target:
        return list(range(n))
    return None
