"""Exception types raised at the downsampler's input boundaries."""


class DownsamplerError(Exception):
    """Base class for all downsampler errors."""


class UnsupportedInputError(DownsamplerError, TypeError):
    """Input is neither an interleaved buffer nor a sequence of points."""


class InvalidTargetError(DownsamplerError, ValueError):
    """Requested point budget is NaN or not a number."""


class SeriesFormatError(DownsamplerError, ValueError):
    """Stored series is missing the requested x/y columns."""
