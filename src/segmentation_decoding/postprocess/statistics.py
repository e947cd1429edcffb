"""Summary statistics over a decoded class grid."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from segmentation_decoding.errors import ShapeError
from segmentation_decoding.postprocess.confidence import ConfidenceNormalizer
from segmentation_decoding.schemas.observation import ClassObservation
from segmentation_decoding.schemas.summary import GridStatistics
from segmentation_decoding.taxonomy import CLASS_NAMES, class_name
from segmentation_decoding.types import ClassGrid, PercentageDistribution


def compute_grid_statistics(grid: ClassGrid) -> GridStatistics:
    """Value range, unique classes and per-class cell counts of ``grid``."""
    if grid.ndim != 2 or grid.size == 0:
        raise ShapeError(f"Expected a non-empty 2-D grid, got shape {grid.shape}")

    values, counts = np.unique(grid, return_counts=True)
    rows, cols = grid.shape
    return GridStatistics(
        rows=int(rows),
        cols=int(cols),
        min_value=int(values[0]),
        max_value=int(values[-1]),
        unique_classes=[int(v) for v in values],
        class_counts={int(v): int(c) for v, c in zip(values, counts)},
    )


def coverage_distribution(
    statistics: GridStatistics,
    normalizer: ConfidenceNormalizer | None = None,
    class_names: Sequence[str] = CLASS_NAMES,
) -> PercentageDistribution:
    """Per-class share of the grid as whole percentages summing to 100.

    Entries are ordered by class index and labeled with ``class_names``.
    """
    normalizer = normalizer or ConfidenceNormalizer()
    observations = [
        ClassObservation(
            identifier=class_name(idx, class_names),
            confidence=fraction,
        )
        for idx, fraction in sorted(statistics.coverage().items())
    ]
    return normalizer.normalize(observations)
