"""Command-line entry point: acceptance benchmark and Parquet downsampling."""

import argparse
import logging
import sys
from typing import List, Optional

from .config import settings
from .exceptions import DownsamplerError
from .parquet_io import downsample_file
from .validation import check_acceptance

# Module-level logger (configured later by setup_logging)
logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def setup_logging(level_name: str, fmt: Optional[str] = None) -> None:
    """
    Configure the root logger with a stdout handler.

    Args:
        level_name: Level name such as "INFO" or "DEBUG"
        fmt: Log format; defaults to settings.log_format
    """
    level = getattr(logging, level_name.upper(), logging.INFO)
    formatter = logging.Formatter(fmt or settings.log_format)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    ch = logging.StreamHandler(sys.stdout)
    ch.setFormatter(formatter)
    root.addHandler(ch)


# ---------------------------------------------------------------------------
# Subcommands
# ---------------------------------------------------------------------------


def run_bench(args: argparse.Namespace) -> int:
    """
    Run the shape-preservation acceptance check.

    Returns:
        Exit code: 0 when the report passes, 1 otherwise
    """
    try:
        report = check_acceptance(
            n=args.points,
            target=args.target,
            k=args.top_k,
            threshold=args.threshold,
            seed=args.seed,
        )
    except ValueError as exc:
        logger.error("Invalid benchmark parameters: %s", exc)
        return 2

    logger.info(
        "N=%d -> TARGET=%d (bucket_size=%.2f, window_half_width=%d, K=%d)",
        report.points,
        report.target,
        report.bucket_size,
        report.window_half_width,
        report.top_k,
    )
    logger.info(
        "maxima retention %.1f%% (%d/%d), minima retention %.1f%% (%d/%d)",
        report.maxima_retention * 100,
        report.maxima_retained,
        report.maxima_count,
        report.minima_retention * 100,
        report.minima_retained,
        report.minima_count,
    )
    logger.info("downsample time %.2f ms", report.duration_ms)

    if not report.endpoints_match:
        logger.error("First/last output points do not match the input")
    if not report.x_non_decreasing:
        logger.error("Output x is not non-decreasing")

    if report.passed:
        logger.info("Acceptance OK")
        return 0

    logger.error("Acceptance FAILED (threshold %.0f%%)", report.threshold * 100)
    return 1


def run_file(args: argparse.Namespace) -> int:
    """
    Downsample a Parquet series file.

    Returns:
        Exit code: 0 on success, 1 on a missing file or bad columns
    """
    try:
        input_count, output_count = downsample_file(
            args.src,
            args.dst,
            args.target,
            x_column=args.x_column,
            y_column=args.y_column,
            sort=not args.no_sort,
        )
    except FileNotFoundError:
        logger.error("Input file not found: %s", args.src)
        return 1
    except DownsamplerError as exc:
        logger.error("Cannot downsample %s: %s", args.src, exc)
        return 1

    print(f"{input_count} -> {output_count} points written to {args.dst}")
    return 0


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="downsampler",
        description="LTTB downsampling tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # 100K -> 1K acceptance check on a synthetic spiky signal
  downsampler bench

  # Downsample a Parquet series to 2000 points
  downsampler file decoded.parquet preview.parquet --target 2000
        """,
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=settings.log_level,
        help="Logging level (default: %(default)s)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    bench = subparsers.add_parser("bench", help="Run the shape-preservation check")
    bench.add_argument("--points", type=int, default=settings.bench_points)
    bench.add_argument("--target", type=int, default=settings.bench_target)
    bench.add_argument("--top-k", type=int, default=settings.bench_top_k)
    bench.add_argument("--threshold", type=float, default=settings.bench_threshold)
    bench.add_argument("--seed", type=int, default=settings.bench_seed)
    bench.set_defaults(func=run_bench)

    file_cmd = subparsers.add_parser("file", help="Downsample a Parquet series")
    file_cmd.add_argument("src", type=str, help="Input Parquet file")
    file_cmd.add_argument("dst", type=str, help="Output Parquet file")
    file_cmd.add_argument("--target", type=int, default=settings.default_max_points)
    file_cmd.add_argument("--x-column", type=str, default="timestamp")
    file_cmd.add_argument("--y-column", type=str, default="value")
    file_cmd.add_argument(
        "--no-sort",
        action="store_true",
        help="Keep file row order instead of sorting by x",
    )
    file_cmd.set_defaults(func=run_file)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and dispatch to the selected subcommand."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
