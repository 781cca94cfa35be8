"""Uniform (x, y) read access over the supported point encodings.

The encoding is resolved once per call by ``resolve_accessor``; the sampling
loop then reads coordinates through the returned accessor without branching
on the element shape.
"""

from array import array
from collections.abc import Mapping
from typing import Any, Protocol, Sequence, Tuple

import numpy as np

from .exceptions import UnsupportedInputError

# Element kinds (also the values logged per call)
INTERLEAVED = "interleaved"
POSITIONAL = "positional"
ATTRIBUTE = "attribute"
MAPPING = "mapping"


class PointAccessor(Protocol):
    """Protocol for read-only coordinate access by point index."""

    kind: str

    def __len__(self) -> int:
        """Number of points N."""
        ...

    def x(self, i: int) -> float:
        """X coordinate of point ``i``."""
        ...

    def y(self, i: int) -> float:
        """Y coordinate of point ``i``."""
        ...

    def point(self, i: int) -> Tuple[float, float]:
        """Both coordinates of point ``i``."""
        ...


class InterleavedAccessor:
    """Flat buffer where point ``i`` occupies slots ``2i`` and ``2i + 1``."""

    kind = INTERLEAVED

    def __init__(self, buf: Any):
        self._buf = buf
        self._n = len(buf) // 2  # trailing odd slot is ignored

    def __len__(self) -> int:
        return self._n

    def x(self, i: int) -> float:
        return float(self._buf[2 * i])

    def y(self, i: int) -> float:
        return float(self._buf[2 * i + 1])

    def point(self, i: int) -> Tuple[float, float]:
        buf = self._buf
        return float(buf[2 * i]), float(buf[2 * i + 1])


class PositionalAccessor:
    """Sequence of ``(x, y)`` pairs (tuples, lists or ndarray rows)."""

    kind = POSITIONAL

    def __init__(self, points: Sequence[Any]):
        self._points = points

    def __len__(self) -> int:
        return len(self._points)

    def x(self, i: int) -> float:
        return float(self._points[i][0])

    def y(self, i: int) -> float:
        return float(self._points[i][1])

    def point(self, i: int) -> Tuple[float, float]:
        p = self._points[i]
        return float(p[0]), float(p[1])


class AttributeAccessor:
    """Sequence of records exposing ``.x`` and ``.y``."""

    kind = ATTRIBUTE

    def __init__(self, points: Sequence[Any]):
        self._points = points

    def __len__(self) -> int:
        return len(self._points)

    def x(self, i: int) -> float:
        return float(self._points[i].x)

    def y(self, i: int) -> float:
        return float(self._points[i].y)

    def point(self, i: int) -> Tuple[float, float]:
        p = self._points[i]
        return float(p.x), float(p.y)


class MappingAccessor:
    """Sequence of mappings with ``"x"`` and ``"y"`` keys (decoded JSON)."""

    kind = MAPPING

    def __init__(self, points: Sequence[Any]):
        self._points = points

    def __len__(self) -> int:
        return len(self._points)

    def x(self, i: int) -> float:
        return float(self._points[i]["x"])

    def y(self, i: int) -> float:
        return float(self._points[i]["y"])

    def point(self, i: int) -> Tuple[float, float]:
        p = self._points[i]
        return float(p["x"]), float(p["y"])


def is_interleaved(data: Any) -> bool:
    """Return True if ``data`` is a flat interleaved x/y buffer."""
    if isinstance(data, array):
        return True
    return isinstance(data, np.ndarray) and data.ndim == 1


def resolve_accessor(data: Any) -> PointAccessor:
    """
    Pick the accessor for ``data`` from its type and first element.

    Args:
        data: Interleaved buffer (``array.array`` or 1-D ndarray), an
            ``(N, 2)`` ndarray, or a sequence of pairs, records or mappings

    Returns:
        Accessor bound to ``data``

    Raises:
        UnsupportedInputError: If ``data`` matches none of the encodings
    """
    if is_interleaved(data):
        return InterleavedAccessor(data)

    if isinstance(data, np.ndarray):
        if data.ndim == 2 and data.shape[1] >= 2:
            return PositionalAccessor(data)
        raise UnsupportedInputError(
            f"Expected a 1-D interleaved or (N, 2) point array, got shape {data.shape}"
        )

    if isinstance(data, (str, bytes, bytearray, memoryview, Mapping)) or not (
        hasattr(data, "__len__") and hasattr(data, "__getitem__")
    ):
        raise UnsupportedInputError(
            f"Unsupported input type for downsampling: {type(data).__name__}"
        )

    if len(data) == 0:
        return PositionalAccessor(data)

    first = data[0]
    if isinstance(first, Mapping):
        return MappingAccessor(data)
    if hasattr(first, "x") and hasattr(first, "y"):
        return AttributeAccessor(data)
    if hasattr(first, "__getitem__") and not isinstance(first, (str, bytes)):
        return PositionalAccessor(data)

    raise UnsupportedInputError(
        f"Unsupported point element type: {type(first).__name__}"
    )
