"""Shared pytest fixtures for segmentation_decoding tests."""

import numpy as np
import pytest
from PIL import Image

from segmentation_decoding.schemas.observation import ClassObservation
from segmentation_decoding.schemas.tensor import RawTensor


@pytest.fixture()
def scenario_tensor() -> RawTensor:
    """2x2 int32 tensor mixing in-range, wrapped and negative class ids."""
    return RawTensor(shape=(2, 2), data=np.array([0, 29, -1, 58], dtype=np.int32))


@pytest.fixture()
def random_tensor() -> RawTensor:
    """16x16 int32 tensor spanning the full signed 32-bit range."""
    rng = np.random.default_rng(0)
    values = rng.integers(-(2**31), 2**31 - 1, size=(16, 16), dtype=np.int32)
    return RawTensor.from_array(values)


@pytest.fixture()
def pet_observations() -> list[ClassObservation]:
    return [
        ClassObservation(identifier="cat", confidence=0.333),
        ClassObservation(identifier="dog", confidence=0.333),
        ClassObservation(identifier="bird", confidence=0.334),
    ]


@pytest.fixture()
def frame() -> Image.Image:
    return Image.new("RGB", (8, 6), color=(40, 90, 160))
