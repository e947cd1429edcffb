"""Inference black-box interfaces."""

from segmentation_decoding.inference.base import (
    BaseClassificationInferencer,
    BaseSegmentationInferencer,
)

__all__ = [
    "BaseClassificationInferencer",
    "BaseSegmentationInferencer",
]
