"""Shared fixtures for sinusoid shading tests."""

import numpy as np
import pytest
from PIL import Image

from models import ShadingConfig


@pytest.fixture
def gray_image():
    """4x4 image with every pixel at 128."""
    return Image.new("L", (4, 4), 128)


@pytest.fixture
def gradient_image():
    """64x32 horizontal gradient, black on the left to white on the right."""
    row = np.linspace(0, 255, 64).astype(np.uint8)
    return Image.fromarray(np.tile(row, (32, 1)))


@pytest.fixture
def small_config():
    return ShadingConfig(
        lines=8,
        width=128,
        height=64,
        sample_freq=2.0,
        min_freq=0.05,
        max_freq=1.5,
        amplitude=0.4,
    )


@pytest.fixture
def png_file(tmp_path, gradient_image):
    path = tmp_path / "gradient.png"
    gradient_image.save(path)
    return path
