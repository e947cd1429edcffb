#!/usr/bin/env python3
"""Decode saved segmentation tensors and report class coverage.

Loads each ``.npy`` file, decodes it into a class grid, prints a Rich
coverage table and optionally writes one JSON summary per tensor.

Usage::

    python scripts/decode_tensors.py --inputs outputs/frame_000.npy

    # Reinterpret a flat buffer as 448x448 and save summaries
    python scripts/decode_tensors.py \\
        --inputs outputs/*.npy \\
        --shape 448 448 \\
        --output-dir outputs/summaries
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np
from loguru import logger
from rich.console import Console
from rich.table import Table
from tqdm import tqdm

# Add project root to path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from segmentation_decoding.config import DecoderConfig  # noqa: E402
from segmentation_decoding.errors import DecodingError  # noqa: E402
from segmentation_decoding.io.summary import SegmentationSummaryWriter  # noqa: E402
from segmentation_decoding.postprocess.grid_decoder import GridDecoder  # noqa: E402
from segmentation_decoding.postprocess.statistics import (  # noqa: E402
    compute_grid_statistics,
    coverage_distribution,
)
from segmentation_decoding.schemas.summary import (  # noqa: E402
    SegmentationSummary,
    SummaryInfo,
)
from segmentation_decoding.schemas.tensor import RawTensor  # noqa: E402
from segmentation_decoding.taxonomy import class_name  # noqa: E402

PRODUCER = "decode_tensors"


def load_tensor(path: Path, shape: tuple[int, ...] | None = None) -> RawTensor:
    """Load a ``.npy`` file, optionally overriding its declared shape."""
    array = np.load(path)
    if shape is None:
        return RawTensor.from_array(array)
    return RawTensor(shape=shape, data=array)


def summarize_tensor(
    path: Path, decoder: GridDecoder, shape: tuple[int, ...] | None = None
) -> SegmentationSummary:
    """Decode one tensor file into a summary.

    Load and decoding errors propagate to the caller.
    """
    tensor = load_tensor(path, shape)
    grid = decoder.decode(tensor)
    statistics = compute_grid_statistics(grid)
    return SegmentationSummary(
        source=path.name,
        info=SummaryInfo(
            producer=PRODUCER,
            tensor_shape=tensor.shape,
            num_classes=decoder.num_classes,
        ),
        statistics=statistics,
        distribution=coverage_distribution(statistics),
    )


def print_summary(summary: SegmentationSummary, console: Console) -> None:
    """Print a Rich table of per-class coverage for one summary."""
    stats = summary.statistics
    table = Table(
        title=f"{summary.source}: {stats.rows}x{stats.cols}, "
        f"values {stats.min_value} to {stats.max_value}"
    )
    table.add_column("Index", justify="right")
    table.add_column("Class", style="cyan")
    table.add_column("Cells", justify="right")
    table.add_column("Coverage", justify="right", style="green")

    for idx, entry in zip(stats.unique_classes, summary.distribution, strict=True):
        table.add_row(
            str(idx),
            class_name(idx),
            str(stats.class_counts[idx]),
            f"{entry.percentage}%",
        )

    console.print(table)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Decode segmentation tensors into class grids"
    )
    parser.add_argument(
        "--inputs", type=Path, nargs="+", required=True, help="Tensor .npy files"
    )
    parser.add_argument(
        "--shape",
        type=int,
        nargs="+",
        default=None,
        help="Declared tensor shape (default: shape stored in the file)",
    )
    parser.add_argument(
        "--num-classes",
        type=int,
        default=DecoderConfig().num_classes,
        help="Size of the class taxonomy (default: 29)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Write one JSON summary per tensor into this directory",
    )
    parser.add_argument("--log-level", type=str, default="INFO")
    args = parser.parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level=args.log_level)

    decoder = GridDecoder(DecoderConfig(num_classes=args.num_classes))
    shape = tuple(args.shape) if args.shape else None
    writer = (
        SegmentationSummaryWriter(args.output_dir) if args.output_dir else None
    )
    console = Console()

    failed = 0
    for path in tqdm(args.inputs, desc="decode"):
        try:
            summary = summarize_tensor(path, decoder, shape)
        except (OSError, ValueError) as e:
            # Missing, truncated or pickled .npy files
            logger.error(f"Failed to load {path}: {e}")
            failed += 1
            continue
        except DecodingError as e:
            logger.error(f"Failed to decode {path}: {e}")
            failed += 1
            continue

        print_summary(summary, console)
        if writer is not None:
            out_path = writer.write(summary)
            logger.info(f"Summary saved to {out_path}")

    logger.info(f"Decoded {len(args.inputs) - failed}/{len(args.inputs)} tensors")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
