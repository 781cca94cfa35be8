"""Public downsampling entry point and output materialisation."""

import logging
from array import array
from typing import Any, List, Sequence

import numpy as np

from .accessors import resolve_accessor
from .lttb import sample_indices
from .policy import Target, normalize_target

logger = logging.getLogger(__name__)


def materialize(data: Any, indices: Sequence[int]) -> Any:
    """
    Build the output in the same representation family as ``data``.

    Interleaved buffers get a new buffer of the same typecode/dtype holding
    the selected (x, y) pairs. Point sequences get a new list referencing the
    original elements; ``(N, 2)`` ndarrays get a new array of selected rows.

    Args:
        data: Original input
        indices: Selected input indices

    Returns:
        Newly allocated output
    """
    if isinstance(data, array):
        out = array(data.typecode)
        for i in indices:
            out.append(data[2 * i])
            out.append(data[2 * i + 1])
        return out

    if isinstance(data, np.ndarray):
        idx = np.asarray(indices, dtype=np.intp)
        if data.ndim == 1:
            pairs = np.empty(2 * len(idx), dtype=np.intp)
            pairs[0::2] = 2 * idx
            pairs[1::2] = 2 * idx + 1
            return data[pairs]
        return data[idx]

    return [data[i] for i in indices]


def sample(data: Any, target: Target) -> Any:
    """
    Downsample a point series with LTTB, preserving its visual shape.

    The output mirrors the input encoding: an interleaved buffer in gives an
    interleaved buffer out, a point sequence in gives a list of the same
    point objects out. When the series already fits in ``target`` the input
    object itself is returned.

    Args:
        data: ``array.array`` or 1-D ndarray of interleaved x/y values, an
            ``(N, 2)`` ndarray, or a sequence of (x, y) pairs, records with
            ``.x``/``.y`` or mappings with ``"x"``/``"y"``
        target: Requested number of output points; fractions are floored

    Returns:
        Downsampled series with at most ``target`` points

    Raises:
        UnsupportedInputError: If ``data`` matches none of the encodings
        InvalidTargetError: If ``target`` is NaN or not a number
    """
    accessor = resolve_accessor(data)
    threshold = normalize_target(target)
    n = len(accessor)

    if 0 < n <= threshold:
        logger.debug("Passthrough: %d %s points within budget %s", n, accessor.kind, threshold)
        return data

    indices: List[int] = sample_indices(accessor, threshold)
    logger.debug(
        "Downsampled %d %s points to %d (target=%s)",
        n,
        accessor.kind,
        len(indices),
        threshold,
    )
    return materialize(data, indices)
