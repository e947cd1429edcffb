"""Smoke test: verify the segmentation_decoding package is importable."""

import segmentation_decoding


def test_package_version() -> None:
    """Package must declare a __version__ string."""
    assert isinstance(segmentation_decoding.__version__, str)
    assert segmentation_decoding.__version__ == "0.0.1"


def test_public_exports() -> None:
    for name in segmentation_decoding.__all__:
        assert hasattr(segmentation_decoding, name), name
