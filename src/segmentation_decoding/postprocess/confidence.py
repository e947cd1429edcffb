"""Normalize per-class confidences into whole percentages summing to 100."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from segmentation_decoding.config import NormalizerConfig, RoundingMode
from segmentation_decoding.errors import ModelOutputMismatchError
from segmentation_decoding.schemas.observation import (
    ClassObservation,
    ClassPercentage,
)
from segmentation_decoding.types import PercentageDistribution

TOTAL_PERCENT = 100


def _round_half_away_from_zero(values: np.ndarray) -> np.ndarray:  # type: ignore[type-arg]
    return np.sign(values) * np.floor(np.abs(values) + 0.5)


_ROUNDERS = {
    RoundingMode.HALF_AWAY_FROM_ZERO: _round_half_away_from_zero,
    RoundingMode.HALF_EVEN: np.rint,
}


class ConfidenceNormalizer:
    """Convert classifier confidences into an integer percentage distribution.

    Each confidence is scaled to a percentage and rounded on its own
    (half away from zero unless configured otherwise).  The rounding
    residue ``100 - sum`` is then added to the largest bucket so the
    result sums to exactly 100.  Ties on the largest bucket go to the
    higher underlying confidence, then to the earliest entry.

    Corrected values are not clamped; malformed confidences can push a
    bucket above 100 or below 0.
    """

    def __init__(self, config: NormalizerConfig | None = None) -> None:
        self.config = config or NormalizerConfig()
        self._round = _ROUNDERS[self.config.rounding]

    def to_percentages(self, confidences: Sequence[float]) -> list[int]:
        """Round each confidence to a whole percentage, without sum correction.

        Python ints are returned so huge malformed confidences cannot overflow.
        """
        scaled = np.asarray(confidences, dtype=np.float64) * TOTAL_PERCENT
        if not np.all(np.isfinite(scaled)):
            raise ModelOutputMismatchError(
                f"Confidences must be finite, got {list(confidences)}"
            )
        return [int(v) for v in self._round(scaled)]

    def normalize(
        self, observations: Sequence[ClassObservation]
    ) -> PercentageDistribution:
        """Return ``(identifier, percentage)`` pairs in input order."""
        if not observations:
            return []

        confidences = [obs.confidence for obs in observations]
        percentages = self.to_percentages(confidences)

        diff = TOTAL_PERCENT - sum(percentages)
        if diff != 0:
            # max() keeps the first of equal keys
            target = max(
                range(len(percentages)),
                key=lambda i: (percentages[i], confidences[i]),
            )
            percentages[target] += diff

        return [
            ClassPercentage(identifier=obs.identifier, percentage=pct)
            for obs, pct in zip(observations, percentages)
        ]


def normalize_percentages(
    observations: Sequence[ClassObservation],
) -> PercentageDistribution:
    """Normalize with the default half-away-from-zero rounding."""
    return ConfidenceNormalizer().normalize(observations)
