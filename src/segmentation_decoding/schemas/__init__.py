"""Schemas for tensors, observations and frame summaries."""

from segmentation_decoding.schemas.observation import (
    ClassObservation,
    ClassPercentage,
)
from segmentation_decoding.schemas.summary import (
    GridStatistics,
    SegmentationSummary,
    SummaryInfo,
)
from segmentation_decoding.schemas.tensor import RawTensor

__all__ = [
    "ClassObservation",
    "ClassPercentage",
    "GridStatistics",
    "RawTensor",
    "SegmentationSummary",
    "SummaryInfo",
]
