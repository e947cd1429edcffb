"""Unit tests for segmentation_decoding.config."""

import pytest
from pydantic import ValidationError

from segmentation_decoding.config import (
    DecoderConfig,
    LiveAnalysisConfig,
    NormalizerConfig,
    RoundingMode,
)
from segmentation_decoding.taxonomy import CLASS_NAMES, NUM_CLASSES, class_name


class TestDecoderConfig:
    def test_defaults(self) -> None:
        assert DecoderConfig().num_classes == 29

    def test_frozen_raises_on_mutation(self) -> None:
        cfg = DecoderConfig()
        with pytest.raises(ValidationError):
            cfg.num_classes = 10  # type: ignore[misc]

    @pytest.mark.parametrize("value", [0, -3])
    def test_num_classes_must_be_positive(self, value: int) -> None:
        with pytest.raises(ValidationError):
            DecoderConfig(num_classes=value)


class TestNormalizerConfig:
    def test_defaults(self) -> None:
        assert NormalizerConfig().rounding is RoundingMode.HALF_AWAY_FROM_ZERO

    def test_rounding_from_string(self) -> None:
        assert NormalizerConfig(rounding="half_even").rounding is RoundingMode.HALF_EVEN  # type: ignore[arg-type]

    def test_unknown_rounding(self) -> None:
        with pytest.raises(ValidationError):
            NormalizerConfig(rounding="half_up")  # type: ignore[arg-type]


class TestLiveAnalysisConfig:
    def test_defaults(self) -> None:
        assert LiveAnalysisConfig().min_analysis_interval == 0.5

    def test_negative_interval(self) -> None:
        with pytest.raises(ValidationError):
            LiveAnalysisConfig(min_analysis_interval=-1.0)


class TestTaxonomy:
    def test_class_count(self) -> None:
        assert len(CLASS_NAMES) == NUM_CLASSES == 29

    def test_class_name(self) -> None:
        assert class_name(1) == "person"
        assert class_name(28) == "umbrella"
        assert class_name(29) == "unknown_29"
        assert class_name(-1) == "unknown_-1"

    def test_class_name_custom_table(self) -> None:
        assert class_name(1, ("a", "b")) == "b"
        assert class_name(2, ("a", "b")) == "unknown_2"
