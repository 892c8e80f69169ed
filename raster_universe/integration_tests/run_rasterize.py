#!/usr/bin/env python3
"""
Rasterize one primitive from the command line and log its trace.

Takes the same four integers the drawing form takes (x0, y0, x1, y1) and
one algorithm. For "bresenham_circle", (x0, y0) is the center and
(x1, y1) a point on the rim.

Usage:
    python run_rasterize.py --algorithm bresenham --x0 0 --y0 0 --x1 5 --y1 4
    python run_rasterize.py --algorithm bresenham_circle --x1 3 --y1 4 --receipt-dir receipts
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from raster_core.types import GridPoint
from raster_engine.engine import ALGORITHMS, STEP, rasterize

from utils import build_receipt, save_receipt, setup_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Rasterize a line or circle and log every emitted cell"
    )
    parser.add_argument(
        "--algorithm",
        type=str,
        default=STEP,
        choices=list(ALGORITHMS),
        help=f"Algorithm to run (default: {STEP})",
    )
    parser.add_argument("--x0", type=int, default=0, help="Start / center x (default: 0)")
    parser.add_argument("--y0", type=int, default=0, help="Start / center y (default: 0)")
    parser.add_argument("--x1", type=int, default=5, help="End / rim x (default: 5)")
    parser.add_argument("--y1", type=int, default=4, help="End / rim y (default: 4)")
    parser.add_argument(
        "--receipt-dir",
        type=Path,
        default=None,
        help="Write a JSON receipt of the run into this directory",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=Path(__file__).parent / "logs" / "rasterize.log",
        help="Log file path (default: integration_tests/logs/rasterize.log)",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logger = setup_logger("rasterize", args.log_file)

    inputs = {"x0": args.x0, "y0": args.y0, "x1": args.x1, "y1": args.y1}
    start = GridPoint(args.x0, args.y0)
    end = GridPoint(args.x1, args.y1)

    trace = rasterize(args.algorithm, start, end)

    for line in trace.log_lines():
        logger.info(line)

    logger.info(f"Points: {len(trace)}, bounding box: {trace.bounding_box()}")

    if args.receipt_dir is not None:
        receipt_file = save_receipt(
            build_receipt(trace, inputs, args.algorithm), args.receipt_dir
        )
        logger.info(f"Receipt saved to: {receipt_file}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
