"""Tests for grid statistics and coverage distribution."""

from __future__ import annotations

import numpy as np
import pytest

from segmentation_decoding.config import NormalizerConfig, RoundingMode
from segmentation_decoding.errors import ShapeError
from segmentation_decoding.postprocess.confidence import ConfidenceNormalizer
from segmentation_decoding.postprocess.statistics import (
    compute_grid_statistics,
    coverage_distribution,
)


class TestComputeGridStatistics:
    def test_basic(self) -> None:
        stats = compute_grid_statistics(np.array([[0, 0], [28, 0]]))
        assert stats.rows == 2
        assert stats.cols == 2
        assert stats.min_value == 0
        assert stats.max_value == 28
        assert stats.unique_classes == [0, 28]
        assert stats.class_counts == {0: 3, 28: 1}
        assert stats.total == 4
        assert stats.coverage() == {0: 0.75, 28: 0.25}

    def test_single_class(self) -> None:
        stats = compute_grid_statistics(np.full((3, 5), 17))
        assert stats.unique_classes == [17]
        assert stats.class_counts == {17: 15}

    @pytest.mark.parametrize("shape", [(4,), (2, 0), (2, 2, 2)])
    def test_rejects_non_grid(self, shape: tuple[int, ...]) -> None:
        with pytest.raises(ShapeError):
            compute_grid_statistics(np.zeros(shape, dtype=np.int64))


class TestCoverageDistribution:
    def test_labels_by_class_name(self) -> None:
        stats = compute_grid_statistics(np.array([[0, 0], [28, 0]]))
        result = coverage_distribution(stats)
        assert [(p.identifier, p.percentage) for p in result] == [
            ("--", 75),
            ("umbrella", 25),
        ]

    def test_equal_thirds_sum_to_100(self) -> None:
        stats = compute_grid_statistics(np.array([[1, 2, 3]]))
        result = coverage_distribution(stats)
        assert [(p.identifier, p.percentage) for p in result] == [
            ("person", 34),
            ("bicycle", 33),
            ("car", 33),
        ]

    def test_unknown_class_name(self) -> None:
        stats = compute_grid_statistics(np.array([[0, 5]]))
        result = coverage_distribution(stats, class_names=("a", "b"))
        assert [p.identifier for p in result] == ["a", "unknown_5"]

    def test_custom_normalizer(self) -> None:
        # 1/8 and 7/8 of the grid
        stats = compute_grid_statistics(np.array([[1, 2, 2, 2, 2, 2, 2, 2]]))
        normalizer = ConfidenceNormalizer(
            NormalizerConfig(rounding=RoundingMode.HALF_EVEN)
        )
        result = coverage_distribution(stats, normalizer=normalizer)
        assert [p.percentage for p in result] == [12, 88]
