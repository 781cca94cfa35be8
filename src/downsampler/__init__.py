"""LTTB downsampling for large ordered point series."""

from .exceptions import (
    DownsamplerError,
    InvalidTargetError,
    SeriesFormatError,
    UnsupportedInputError,
)
from .lttb import lttb_indices
from .sampling import sample

__version__ = "1.0.0"

__all__ = [
    "DownsamplerError",
    "InvalidTargetError",
    "SeriesFormatError",
    "UnsupportedInputError",
    "lttb_indices",
    "sample",
]
