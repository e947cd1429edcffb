"""Glue between the inference black box and the post-processing core.

Results are returned to the caller; nothing here publishes shared state.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable, Sequence

from loguru import logger
from PIL import Image
from pydantic import BaseModel, ConfigDict

from segmentation_decoding.config import LiveAnalysisConfig
from segmentation_decoding.errors import ModelOutputMismatchError
from segmentation_decoding.inference.base import (
    BaseClassificationInferencer,
    BaseSegmentationInferencer,
)
from segmentation_decoding.postprocess.confidence import ConfidenceNormalizer
from segmentation_decoding.postprocess.grid_decoder import GridDecoder
from segmentation_decoding.postprocess.statistics import compute_grid_statistics
from segmentation_decoding.schemas.observation import (
    ClassObservation,
    ClassPercentage,
)
from segmentation_decoding.schemas.summary import GridStatistics
from segmentation_decoding.schemas.tensor import RawTensor
from segmentation_decoding.types import ClassGrid, PercentageDistribution


class SegmentationResult(BaseModel):
    """Decoded grid of one still image together with its statistics."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    grid: ClassGrid
    statistics: GridStatistics


class SegmentationProcessor:
    """Run segmentation on a still image and decode the output.

    Args:
        inferencer: Black box producing a :class:`RawTensor` per image.
        decoder: Grid decoder.  A default 29-class decoder if *None*.
    """

    def __init__(
        self,
        inferencer: BaseSegmentationInferencer,
        decoder: GridDecoder | None = None,
    ) -> None:
        self.inferencer = inferencer
        self.decoder = decoder or GridDecoder()

    def process(self, image: Image.Image) -> SegmentationResult:
        """Infer, decode and summarise ``image``.

        Decoding errors propagate to the caller unchanged.
        """
        output = self.inferencer.predict(image)
        if not isinstance(output, RawTensor):
            raise ModelOutputMismatchError(
                f"Segmentation model returned {type(output).__name__}, "
                "expected RawTensor"
            )
        grid = self.decoder.decode(output)
        statistics = compute_grid_statistics(grid)
        logger.debug(
            f"Segmented {image.width}x{image.height} image into "
            f"{statistics.rows}x{statistics.cols} grid with classes "
            f"{statistics.unique_classes}"
        )
        return SegmentationResult(grid=grid, statistics=statistics)


def _check_observations(output: object) -> list[ClassObservation]:
    if not isinstance(output, list) or not all(
        isinstance(obs, ClassObservation) for obs in output
    ):
        raise ModelOutputMismatchError(
            f"Classification model returned {type(output).__name__}, "
            "expected list[ClassObservation]"
        )
    return output


class LiveClassifier:
    """Classify frames from a live stream with throttling and frame dropping.

    A frame is analysed only when strictly more than
    ``min_analysis_interval`` seconds have passed since the last accepted
    frame and no other frame is in flight.  Rejected frames are dropped,
    never queued.

    Args:
        inferencer: Black box producing class observations per frame.
        normalizer: Percentage normalizer.  Default rounding if *None*.
        config: Throttling configuration.
        clock: Monotonic time source in seconds.
    """

    def __init__(
        self,
        inferencer: BaseClassificationInferencer,
        normalizer: ConfidenceNormalizer | None = None,
        config: LiveAnalysisConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.inferencer = inferencer
        self.normalizer = normalizer or ConfidenceNormalizer()
        self.config = config or LiveAnalysisConfig()
        self._clock = clock
        self._last_analysis: float | None = None
        self._in_flight = threading.Lock()
        self._state_lock = threading.Lock()

    def _accept(self) -> bool:
        with self._state_lock:
            now = self._clock()
            if (
                self._last_analysis is not None
                and now - self._last_analysis <= self.config.min_analysis_interval
            ):
                return False
            self._last_analysis = now
            return True

    def submit(self, frame: Image.Image) -> PercentageDistribution | None:
        """Analyse ``frame`` or drop it.

        Returns the normalized distribution, or *None* if the frame was
        dropped because of throttling or an analysis already in flight.
        """
        if not self._in_flight.acquire(blocking=False):
            logger.debug("Dropping frame: analysis already in flight")
            return None
        try:
            if not self._accept():
                logger.debug("Dropping frame: minimum analysis interval not elapsed")
                return None
            observations = _check_observations(self.inferencer.classify(frame))
            return self.normalizer.normalize(observations)
        finally:
            self._in_flight.release()


def format_distribution(distribution: Sequence[ClassPercentage]) -> str:
    """Render one ``"label (N%)"`` line per entry."""
    return "\n".join(
        f"{entry.identifier} ({entry.percentage}%)" for entry in distribution
    )
