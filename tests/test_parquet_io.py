"""Tests for Parquet series I/O."""

import numpy as np
import pyarrow as pa
import pyarrow.compute as pc
import pyarrow.parquet as pq
import pytest

from downsampler.exceptions import SeriesFormatError
from downsampler.parquet_io import downsample_file, read_series


@pytest.fixture
def decoded_parquet(tmp_path):
    """Parquet file shaped like a decoded signal: ns timestamps + float values."""
    n = 1000
    base_ns = 1_700_000_000_000_000_000
    table = pa.table({
        "timestamp": pa.array([base_ns + i * 10_240_000 for i in range(n)], type=pa.timestamp("ns")),
        "signal_name": pa.array(["MotorRPM"] * n, type=pa.string()),
        "value": pa.array([float((i * 37) % 101) for i in range(n)], type=pa.float64()),
    })
    path = tmp_path / "decoded.parquet"
    pq.write_table(table, path)
    return path


def test_read_series(decoded_parquet):
    """Test two columns load as float64 (x, y) rows."""
    points = read_series(decoded_parquet)

    assert points.shape == (1000, 2)
    assert points.dtype == np.float64
    assert points[1, 0] - points[0, 0] == 10_240_000
    assert points[3, 1] == 10.0


def test_read_series_missing_column(decoded_parquet):
    """Test a missing column raises SeriesFormatError."""
    with pytest.raises(SeriesFormatError, match="speed"):
        read_series(decoded_parquet, y_column="speed")


def test_read_series_missing_file(tmp_path):
    """Test a missing file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        read_series(tmp_path / "absent.parquet")


def test_downsample_file(decoded_parquet, tmp_path):
    """Test a file is reduced to the target and keeps its endpoints."""
    dst = tmp_path / "preview.parquet"

    counts = downsample_file(decoded_parquet, dst, 100)

    assert counts == (1000, 100)
    original = read_series(decoded_parquet)
    reduced = read_series(dst)
    assert reduced.shape == (100, 2)
    np.testing.assert_array_equal(reduced[0], original[0])
    np.testing.assert_array_equal(reduced[-1], original[-1])


def test_downsample_file_sorts_by_x(tmp_path):
    """Test unsorted rows are ordered by x before sampling."""
    src = tmp_path / "unsorted.parquet"
    xs = list(range(200))[::-1]
    pq.write_table(pa.table({"x": xs, "y": [float(x % 5) for x in xs]}), src)
    dst = tmp_path / "sorted.parquet"

    downsample_file(src, dst, 20, x_column="x", y_column="y")

    reduced = read_series(dst, "x", "y")
    assert reduced[0, 0] == 0.0
    assert reduced[-1, 0] == 199.0
    assert np.all(np.diff(reduced[:, 0]) > 0)


def test_downsample_file_keeps_exact_timestamps(tmp_path):
    """Test output rows are copied from the input, not rebuilt from floats."""
    n = 1000
    # Odd offsets are not representable in float64 at this magnitude
    timestamps = [1_700_000_000_000_000_007 + i * 1000 for i in range(n)]
    src = tmp_path / "precise.parquet"
    pq.write_table(
        pa.table({
            "timestamp": pa.array(timestamps, type=pa.timestamp("ns")),
            "value": pa.array([float(i % 17) for i in range(n)], type=pa.float32()),
        }),
        src,
    )
    dst = tmp_path / "precise_preview.parquet"

    downsample_file(src, dst, 50)

    reduced = pq.read_table(dst)
    assert reduced.num_rows == 50
    assert reduced.schema.field("timestamp").type == pa.timestamp("ns")
    assert reduced.schema.field("value").type == pa.float32()
    out_ts = pc.cast(reduced.column("timestamp"), pa.int64()).to_pylist()
    assert out_ts[0] == timestamps[0]
    assert out_ts[-1] == timestamps[-1]
    assert set(out_ts) <= set(timestamps)


@pytest.mark.parametrize("unit, step_ns", [("s", 1_000_000_000), ("ms", 1_000_000), ("us", 1_000)])
def test_read_series_timestamps_in_nanoseconds(tmp_path, unit, step_ns):
    """Test timestamps of any unit are read as nanoseconds."""
    path = tmp_path / f"series_{unit}.parquet"
    pq.write_table(
        pa.table({
            "timestamp": pa.array(list(range(10)), type=pa.timestamp(unit)),
            "value": pa.array([float(i) for i in range(10)]),
        }),
        path,
    )

    points = read_series(path)

    assert points[0, 0] == 0.0
    assert points[1, 0] - points[0, 0] == step_ns
    assert points[9, 0] == 9 * step_ns
