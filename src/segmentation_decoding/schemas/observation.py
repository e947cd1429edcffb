"""Per-class confidence observation and normalized percentage schemas."""

from __future__ import annotations

from pydantic import BaseModel


class ClassObservation(BaseModel, frozen=True):
    """A (label, confidence) pair emitted by the classifier for one class."""

    identifier: str
    confidence: float


class ClassPercentage(BaseModel, frozen=True):
    """A class label with its whole-number share of the distribution.

    ``percentage`` can fall outside [0, 100] after sum correction when the
    source confidences were malformed.
    """

    identifier: str
    percentage: int
