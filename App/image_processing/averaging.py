"""Row averaging: collapse the source image into horizontal bands.

AIDEV-NOTE: Each output row is the vertical mean of a contiguous strip of
source rows. Band edges use rounding (not floor/ceil) so non-integer row
heights do not leave uncovered rows at the image edges.
"""

from typing import TYPE_CHECKING

import numpy as np
from PIL import Image

from .utils import round_half_up, to_grayscale

if TYPE_CHECKING:
    from models import ShadingConfig


def band_bounds(height: int, lines: int) -> "list[tuple[int, int]]":
    """Compute the source row range covered by each band.

    Args:
        height: Source image height in pixels
        lines: Number of bands (already clamped to height)

    Returns:
        List of (start, end) tuples, end exclusive and clamped to height
    """
    row_height = height / lines
    bounds = []
    for n in range(lines):
        start = min(round_half_up(n * row_height), height)
        end = min(round_half_up((n + 1) * row_height), height)
        bounds.append((start, end))
    return bounds


def average_rows(
    image: "Image.Image | np.ndarray",
    config: "ShadingConfig",
) -> np.ndarray:
    """Reduce the image to config.lines horizontal bands.

    Args:
        image: Decoded image (any PIL mode) or intensity array
        config: Shading configuration, only ``lines`` is used

    Returns:
        uint8 array of shape (min(lines, height), width)
    """
    gray = to_grayscale(image)
    height, width = gray.shape

    # Requesting more lines than the image has rows is not an error
    lines = min(config.lines, height)

    # Must widen before summing or the accumulation overflows uint8
    pixels = gray.astype(np.uint32)
    result = np.zeros((lines, width), dtype=np.uint8)

    for n, (start, end) in enumerate(band_bounds(height, lines)):
        count = end - start
        if count <= 0:
            # Degenerate band stays black
            continue
        band_sum = pixels[start:end, :].sum(axis=0, dtype=np.uint64)
        # Integer round-half-up of band_sum / count
        mean = (2 * band_sum + count) // (2 * count)
        result[n, :] = np.minimum(mean, 255).astype(np.uint8)

    return result
