"""Utility functions for image conversion and path statistics.

AIDEV-NOTE: This module contains helper functions for grayscale conversion,
input scaling, and path calculations used throughout the pipeline.
"""

import math
from typing import TYPE_CHECKING

import numpy as np
from PIL import Image

from errors import ValidationError

if TYPE_CHECKING:
    from models import StrokePath


# Pillow modes whose samples are wider than 8 bits
HIGH_DEPTH_MODES = ("I", "F", "I;16", "I;16L", "I;16B", "I;16N")


def scale_to_uint8(values: np.ndarray) -> np.ndarray:
    """Bring sample values of any depth into the 0-255 range.

    uint8 passes through. uint16 (and wider integers holding values above
    255) are treated as 16-bit and divided by 257. Floats in [0, 1] are
    stretched to 255, other floats are clipped.
    """
    if values.dtype == np.uint8:
        return values
    if values.size == 0:
        return values.astype(np.uint8)

    if np.issubdtype(values.dtype, np.floating):
        if np.nanmax(values) <= 1.0:
            values = values * 255.0
        return np.clip(np.rint(np.nan_to_num(values)), 0, 255).astype(np.uint8)

    is_16_bit = values.dtype.kind == "u" and values.dtype.itemsize == 2
    if is_16_bit or values.max() > 255:
        values = np.rint(np.clip(values, 0, 65535) / 257.0)
    return np.clip(values, 0, 255).astype(np.uint8)


def to_grayscale(image: "Image.Image | np.ndarray") -> np.ndarray:
    """Reduce a decoded image to an 8-bit intensity matrix.

    Args:
        image: PIL image in any mode, or a numpy array that is either
            grayscale (H, W) or RGB/RGBA (H, W, 3|4), of any integer or
            float dtype

    Returns:
        uint8 array of shape (height, width)

    Raises:
        ValidationError: If the image is empty or has an unusable shape

    AIDEV-NOTE: Uses Pillow's "L" conversion (ITU-R 601-2 luma) so arrays
    and PIL images produce identical intensities. 16-bit and float data is
    rescaled first so it keeps its tones instead of clipping to white.
    """
    if isinstance(image, np.ndarray):
        if image.ndim == 3 and image.shape[2] in (3, 4):
            image = Image.fromarray(scale_to_uint8(image[:, :, :3]))
        elif image.ndim == 2:
            if image.size == 0:
                raise ValidationError(f"Image must not be empty, got shape {image.shape}")
            return scale_to_uint8(image)
        else:
            raise ValidationError(f"Unsupported image array shape {image.shape}")

    width, height = image.size
    if width == 0 or height == 0:
        raise ValidationError(f"Image must not be empty, got {width}x{height}")

    if image.mode in HIGH_DEPTH_MODES:
        return scale_to_uint8(np.asarray(image))

    if image.mode != "L":
        # Flatten transparency onto white so clear pixels read as paper
        if image.mode in ("RGBA", "LA", "PA") or (
            image.mode == "P" and "transparency" in image.info
        ):
            rgba = image.convert("RGBA")
            background = Image.new("RGBA", rgba.size, (255, 255, 255, 255))
            image = Image.alpha_composite(background, rgba)
        image = image.convert("L")

    return np.asarray(image, dtype=np.uint8)


def resize_to_max_dimension(image: Image.Image, max_dimension: int) -> Image.Image:
    """Shrink an image so neither edge exceeds max_dimension.

    Aspect ratio is preserved and images that already fit are returned
    unchanged. Never upscales.
    """
    width, height = image.size
    if max_dimension <= 0 or (width <= max_dimension and height <= max_dimension):
        return image

    scale = min(max_dimension / width, max_dimension / height)
    new_width = max(1, int(width * scale))
    new_height = max(1, int(height * scale))
    return image.resize((new_width, new_height), Image.Resampling.BILINEAR)


def round_half_up(value: float) -> int:
    """Round to nearest integer with halves going up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def calculate_total_length(paths: "list[StrokePath]") -> float:
    """Calculate total polyline length in document units."""
    total = 0.0
    for path in paths:
        for i in range(1, len(path.points)):
            x1, y1 = path.points[i - 1]
            x2, y2 = path.points[i]
            total += math.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2)
    return total


def count_points(paths: "list[StrokePath]") -> int:
    """Count total number of points across all paths."""
    return sum(len(path.points) for path in paths)
