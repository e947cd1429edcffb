"""Type aliases for segmentation_decoding inter-module contracts."""

from typing import TypeAlias

import numpy as np

from segmentation_decoding.schemas.observation import ClassPercentage

# 2-D int array of shape (rows, cols), every cell in [0, num_classes - 1].
ClassGrid: TypeAlias = np.ndarray  # type: ignore[type-arg]

PercentageDistribution: TypeAlias = list[ClassPercentage]
