"""Abstract base classes for the model inference black box."""

from __future__ import annotations

from abc import ABC, abstractmethod

from PIL import Image

from segmentation_decoding.schemas.observation import ClassObservation
from segmentation_decoding.schemas.tensor import RawTensor


class BaseSegmentationInferencer(ABC):
    """Runs a segmentation model and returns its raw class-id tensor.

    The tensor is handed to :class:`GridDecoder` untouched; implementations
    must not decode or reduce values themselves.
    """

    @abstractmethod
    def predict(self, image: Image.Image) -> RawTensor:
        """Run inference on a single image."""


class BaseClassificationInferencer(ABC):
    """Runs a model that emits one confidence per candidate class."""

    @abstractmethod
    def classify(self, image: Image.Image) -> list[ClassObservation]:
        """Run inference on a single frame.

        Returns observations in model order; no sorting is implied.
        """
