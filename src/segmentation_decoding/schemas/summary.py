"""Per-frame segmentation summary schema."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, Field, field_serializer

from segmentation_decoding.schemas.observation import ClassPercentage
from segmentation_decoding.taxonomy import NUM_CLASSES


class SummaryInfo(BaseModel):
    """How a grid was decoded: tool, declared tensor shape and class count."""

    producer: str
    tensor_shape: tuple[int, ...]
    num_classes: int = NUM_CLASSES
    decoded_at: str = Field(default_factory=lambda: datetime.now(tz=UTC).isoformat())


class GridStatistics(BaseModel, frozen=True):
    """Value range and per-class cell counts of a decoded class grid."""

    rows: int
    cols: int
    min_value: int
    max_value: int
    unique_classes: list[int]
    class_counts: dict[int, int]

    @field_serializer("class_counts", when_used="json")
    def _class_counts_json(self, counts: dict[int, int]) -> dict[str, int]:
        # JSON object keys must be strings
        return {str(idx): count for idx, count in counts.items()}

    @property
    def total(self) -> int:
        return self.rows * self.cols

    def coverage(self) -> dict[int, float]:
        """Fraction of cells assigned to each present class, keyed by index."""
        total = self.total
        return {idx: count / total for idx, count in self.class_counts.items()}


class SegmentationSummary(BaseModel):
    """Decoded-frame record: grid statistics plus normalized class coverage.

    ``distribution`` lists the classes of ``statistics.unique_classes`` in
    the same order.
    """

    source: str
    info: SummaryInfo
    statistics: GridStatistics
    distribution: list[ClassPercentage]
