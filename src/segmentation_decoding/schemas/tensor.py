"""Raw model output tensor schema."""

from __future__ import annotations

import numpy as np
from pydantic import BaseModel, ConfigDict, field_validator


class RawTensor(BaseModel):
    """Flat row-major buffer plus the shape the model declared for it.

    The declared ``shape`` is not checked against ``data`` here; the
    decoder does that so a short buffer surfaces as a decoding error
    instead of a construction failure.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    shape: tuple[int, ...]
    data: np.ndarray  # type: ignore[type-arg]

    @field_validator("data", mode="before")
    @classmethod
    def _flatten(cls, value: object) -> np.ndarray:  # type: ignore[type-arg]
        """Accept any array-like and store it as a 1-D view."""
        return np.ravel(np.asarray(value))

    @classmethod
    def from_array(cls, array: np.ndarray) -> RawTensor:  # type: ignore[type-arg]
        """Build a tensor whose declared shape is the array's own shape."""
        return cls(shape=tuple(int(d) for d in array.shape), data=array)

    @property
    def rank(self) -> int:
        return len(self.shape)

    @property
    def size(self) -> int:
        """Number of elements actually present in the buffer."""
        return int(self.data.size)
