"""Exceptions raised while decoding model output."""


class DecodingError(Exception):
    """Base class for all post-processing failures."""


class ShapeError(DecodingError):
    """Tensor rank is below 2 or a spatial dimension is not positive."""


class BufferUnderrunError(DecodingError):
    """Declared tensor shape needs more elements than the buffer holds."""

    def __init__(self, required: int, available: int) -> None:
        super().__init__(
            f"Tensor shape requires {required} elements "
            f"but buffer holds only {available}"
        )
        self.required = required
        self.available = available


class ModelOutputMismatchError(DecodingError):
    """Model produced output of an unexpected type or element kind."""
