"""Class taxonomy of the DETR ResNet-50 semantic segmentation model."""

from collections.abc import Sequence

NUM_CLASSES = 29

# "--" entries are unused slots in the model's label space.
CLASS_NAMES: tuple[str, ...] = (
    "--",
    "person",
    "bicycle",
    "car",
    "motorcycle",
    "airplane",
    "bus",
    "train",
    "truck",
    "boat",
    "traffic light",
    "fire hydrant",
    "--",
    "stop sign",
    "parking meter",
    "bench",
    "bird",
    "cat",
    "dog",
    "horse",
    "sheep",
    "cow",
    "elephant",
    "bear",
    "zebra",
    "giraffe",
    "--",
    "backpack",
    "umbrella",
)



def class_name(index: int, names: Sequence[str] = CLASS_NAMES) -> str:
    """Display name for a class index, ``unknown_{index}`` when out of range."""
    if 0 <= index < len(names):
        return names[index]
    return f"unknown_{index}"
