"""Post-processing for on-device semantic segmentation models."""

from segmentation_decoding.errors import (
    BufferUnderrunError,
    DecodingError,
    ModelOutputMismatchError,
    ShapeError,
)
from segmentation_decoding.postprocess.confidence import ConfidenceNormalizer
from segmentation_decoding.postprocess.grid_decoder import GridDecoder
from segmentation_decoding.schemas.observation import (
    ClassObservation,
    ClassPercentage,
)
from segmentation_decoding.schemas.tensor import RawTensor

__version__ = "0.0.1"

__all__ = [
    "BufferUnderrunError",
    "ClassObservation",
    "ClassPercentage",
    "ConfidenceNormalizer",
    "DecodingError",
    "GridDecoder",
    "ModelOutputMismatchError",
    "RawTensor",
    "ShapeError",
    "__version__",
]
