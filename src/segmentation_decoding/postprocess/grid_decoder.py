"""Decode a raw class-id tensor into a bounded 2-D class grid."""

from __future__ import annotations

import numpy as np
from loguru import logger

from segmentation_decoding.config import DecoderConfig
from segmentation_decoding.errors import (
    BufferUnderrunError,
    ModelOutputMismatchError,
    ShapeError,
)
from segmentation_decoding.schemas.tensor import RawTensor
from segmentation_decoding.types import ClassGrid


def _spatial_dims(shape: tuple[int, ...]) -> tuple[int, int]:
    """Leading (rows, cols) of a tensor shape. Trailing dims are ignored."""
    if len(shape) < 2:
        raise ShapeError(f"Expected tensor rank >= 2, got shape {list(shape)}")
    if any(dim <= 0 for dim in shape):
        raise ShapeError(f"Tensor dimensions must be positive, got {list(shape)}")
    return shape[0], shape[1]


class GridDecoder:
    """Turn a single-channel class-id tensor into a ``rows x cols`` grid.

    Every raw value is reduced with non-negative modulo ``num_classes`` so
    out-of-range or sentinel outputs still land on a valid class instead of
    failing the frame.  Only the first ``rows * cols`` elements of the
    buffer are read, in row-major order.

    Args:
        config: Decoder configuration.  Defaults to the 29-class taxonomy.
    """

    def __init__(self, config: DecoderConfig | None = None) -> None:
        self.config = config or DecoderConfig()

    @property
    def num_classes(self) -> int:
        return self.config.num_classes

    def decode(self, tensor: RawTensor) -> ClassGrid:
        """Decode ``tensor`` into a fresh integer grid.

        Raises:
            ShapeError: Rank below 2 or a non-positive dimension.
            ModelOutputMismatchError: Buffer does not hold integers.
            BufferUnderrunError: Buffer shorter than ``rows * cols``.
        """
        rows, cols = _spatial_dims(tensor.shape)
        data = tensor.data
        if not np.issubdtype(data.dtype, np.integer):
            raise ModelOutputMismatchError(
                f"Expected integer class ids, got dtype {data.dtype}"
            )

        required = rows * cols
        if required > data.size:
            raise BufferUnderrunError(required=required, available=int(data.size))

        # Reduce in the source dtype; widening first would wrap uint64 values
        reduced = np.mod(data[:required], self.num_classes)
        grid = reduced.astype(np.int64).reshape(rows, cols)

        logger.debug(
            f"Decoded {rows}x{cols} grid from {data.size} elements, "
            f"values {int(grid.min())} to {int(grid.max())}, "
            f"{len(np.unique(grid))} unique classes"
        )
        return grid


def decode_grid(tensor: RawTensor, num_classes: int | None = None) -> ClassGrid:
    """Functional shortcut for ``GridDecoder(...).decode(tensor)``."""
    if num_classes is None:
        return GridDecoder().decode(tensor)
    return GridDecoder(DecoderConfig(num_classes=num_classes)).decode(tensor)
