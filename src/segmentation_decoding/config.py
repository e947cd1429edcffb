"""Pydantic frozen configuration models for segmentation_decoding."""

from enum import Enum

from pydantic import BaseModel, Field

from segmentation_decoding.taxonomy import NUM_CLASSES


class RoundingMode(str, Enum):
    """Tie-break policy when converting a confidence to a whole percentage."""

    HALF_AWAY_FROM_ZERO = "half_away_from_zero"
    HALF_EVEN = "half_even"


class DecoderConfig(BaseModel, frozen=True):
    """Configuration for GridDecoder.

    All fields are validated at construction time and frozen afterwards.
    """

    num_classes: int = Field(default=NUM_CLASSES, ge=1)


class NormalizerConfig(BaseModel, frozen=True):
    """Configuration for ConfidenceNormalizer."""

    rounding: RoundingMode = RoundingMode.HALF_AWAY_FROM_ZERO


class LiveAnalysisConfig(BaseModel, frozen=True):
    """Configuration for LiveClassifier.

    ``min_analysis_interval`` is in seconds. A frame is only analysed when
    strictly more than this much time has passed since the last accepted one.
    """

    min_analysis_interval: float = Field(default=0.5, ge=0.0)
