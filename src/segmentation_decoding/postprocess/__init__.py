"""Tensor decoding and confidence aggregation."""

from segmentation_decoding.postprocess.confidence import (
    ConfidenceNormalizer,
    normalize_percentages,
)
from segmentation_decoding.postprocess.grid_decoder import GridDecoder, decode_grid
from segmentation_decoding.postprocess.statistics import (
    compute_grid_statistics,
    coverage_distribution,
)

__all__ = [
    "ConfidenceNormalizer",
    "GridDecoder",
    "compute_grid_statistics",
    "coverage_distribution",
    "decode_grid",
    "normalize_percentages",
]
