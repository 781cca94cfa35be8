"""Read and downsample x/y series stored as Parquet."""

import logging
from pathlib import Path
from typing import Tuple, Union

import numpy as np
import pyarrow as pa
import pyarrow.compute as pc
import pyarrow.parquet as pq

from .exceptions import SeriesFormatError
from .lttb import lttb_indices

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def _read_table(path: PathLike, x_column: str, y_column: str) -> pa.Table:
    """Read the x and y columns, checking the file and schema first."""
    if not Path(path).exists():
        raise FileNotFoundError(path)

    schema = pq.read_schema(path)
    missing = [c for c in (x_column, y_column) if c not in schema.names]
    if missing:
        raise SeriesFormatError(
            f"{path}: missing column(s) {', '.join(missing)}; found {schema.names}"
        )

    return pq.read_table(path, columns=[x_column, y_column])


def _column_as_float(table: pa.Table, name: str) -> np.ndarray:
    """Return a column as float64, timestamps as nanoseconds since epoch."""
    col = table.column(name)
    if pa.types.is_timestamp(col.type):
        col = pc.cast(col, pa.timestamp("ns", tz=col.type.tz))
        col = pc.cast(col, pa.int64())
    return col.to_numpy().astype(np.float64)


def _table_points(table: pa.Table, x_column: str, y_column: str) -> np.ndarray:
    points = np.column_stack(
        [_column_as_float(table, x_column), _column_as_float(table, y_column)]
    )
    return points.reshape(-1, 2)


def read_series(
    path: PathLike, x_column: str = "timestamp", y_column: str = "value"
) -> np.ndarray:
    """
    Load two columns of a Parquet file as an ``(N, 2)`` float64 array.

    Timestamps of any unit are converted to nanoseconds since epoch. Values
    beyond 2**53 lose precision in float64; use ``downsample_file`` to keep
    the stored values exact.

    Args:
        path: Parquet file path
        x_column: Column holding x
        y_column: Column holding y

    Returns:
        Array of (x, y) rows in file order

    Raises:
        FileNotFoundError: If ``path`` does not exist
        SeriesFormatError: If either column is missing
    """
    table = _read_table(path, x_column, y_column)
    return _table_points(table, x_column, y_column)


def downsample_file(
    src: PathLike,
    dst: PathLike,
    target: int,
    x_column: str = "timestamp",
    y_column: str = "value",
    sort: bool = True,
) -> Tuple[int, int]:
    """
    Downsample the series in ``src`` and write it to ``dst``.

    The float view of the columns only drives point selection; the selected
    rows are taken from the original table, so the output keeps the source
    column types and exact values.

    Args:
        src: Input Parquet file
        dst: Output Parquet file
        target: Number of output points
        x_column: Column holding x
        y_column: Column holding y
        sort: Sort rows by x before sampling

    Returns:
        (input point count, output point count)
    """
    table = _read_table(src, x_column, y_column)
    if sort and table.num_rows > 1:
        order = pc.sort_indices(table, sort_keys=[(x_column, "ascending")])
        table = table.take(order)

    indices = lttb_indices(_table_points(table, x_column, y_column), target)
    reduced = table.take(pa.array(indices, type=pa.int64()))

    output_path = Path(dst)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    pq.write_table(reduced, output_path)

    logger.info(
        "Downsampled %s: %d -> %d points, written to %s",
        src,
        table.num_rows,
        reduced.num_rows,
        dst,
    )
    return table.num_rows, reduced.num_rows
