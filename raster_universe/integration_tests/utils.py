"""
Utility functions for the rasterization runner.

Provides:
- Logging setup
- Receipt generation from a RasterTrace
- Receipt persistence
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict

from raster_core.types import RasterTrace


LOG_FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(name: str, log_file: Path, level=logging.INFO) -> logging.Logger:
    """
    Configure the logger a rasterize run writes its trace through.

    Each call starts a fresh trace log: log_file is truncated and any
    handlers left by an earlier run under the same name are dropped, so
    one run never appends to another's trace.

    Args:
        name: Logger name (one per runner script)
        log_file: Trace log path; parent directories are created
        level: Threshold for the trace log file

    Returns:
        Logger writing to log_file and echoing INFO and above to stderr
    """
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers = []

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    trace_handler = logging.FileHandler(log_file, mode="w")
    trace_handler.setLevel(level)
    trace_handler.setFormatter(formatter)

    # stderr echo stays at INFO even when the trace file is more verbose
    echo_handler = logging.StreamHandler()
    echo_handler.setLevel(logging.INFO)
    echo_handler.setFormatter(formatter)

    logger.addHandler(trace_handler)
    logger.addHandler(echo_handler)

    return logger


def build_receipt(trace: RasterTrace, inputs: Dict[str, int], algorithm: str) -> Dict[str, Any]:
    """
    Build a receipt dictionary for one run.

    Args:
        trace: Trace produced by the run
        inputs: Raw integer inputs (x0, y0, x1, y1)
        algorithm: Algorithm key

    Returns:
        Receipt dictionary
    """
    return {
        "algorithm": algorithm,
        "inputs": dict(inputs),
        "timestamp": datetime.now().isoformat(),
        "trace": {
            "num_points": len(trace),
            "points": [[p.x, p.y] for p in trace.points],
            "bounding_box": list(trace.bounding_box()),
            "elapsed_ns": trace.elapsed_ns,
        },
    }


def save_receipt(receipt: Dict[str, Any], output_dir: Path) -> Path:
    """
    Save receipt to JSON file.

    Args:
        receipt: Receipt dictionary
        output_dir: Directory to save receipt (e.g., receipts/)

    Returns:
        Path of the written file
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    inputs = receipt["inputs"]
    stem = "_".join(str(inputs[k]) for k in ("x0", "y0", "x1", "y1"))
    receipt_file = output_dir / f"{receipt['algorithm']}_{stem}.json"

    with open(receipt_file, "w") as f:
        json.dump(receipt, f, indent=2)

    return receipt_file
