"""Main processor orchestrating the complete sinusoid shading pipeline.

AIDEV-NOTE: transform() is the pure core: image + config in, document out,
no I/O and no printing. SinusoidProcessor wraps it with file loading,
saving, and progress output for the CLI and the preview window.
"""

from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from errors import DecodeError
from models import ProcessedImage, ShadingConfig, SinusoidDocument

from .averaging import average_rows
from .modulation import integrate_phase, map_frequencies
from .rendering import render
from .svg_writer import save_svg
from .utils import resize_to_max_dimension, to_grayscale


def transform(
    image: "Image.Image | np.ndarray",
    config: ShadingConfig,
) -> SinusoidDocument:
    """Convert a decoded image into frequency-modulated line art.

    Args:
        image: Decoded image (any PIL mode) or intensity/RGB array
        config: Shading configuration

    Returns:
        SinusoidDocument with one polyline per band

    Raises:
        ValidationError: If the config or image cannot be used
    """
    # Reject bad input before any numeric stage runs
    config.validate()
    gray = to_grayscale(image)

    bands = average_rows(gray, config)
    freqs = map_frequencies(bands, config)
    phase = integrate_phase(freqs, config)
    return render(phase, config)


def load_image(file_path: "str | Path") -> Image.Image:
    """Load and decode an image file.

    Args:
        file_path: Path to image file (PNG, JPEG, GIF, TIFF, ...)

    Returns:
        Decoded PIL Image

    Raises:
        DecodeError: If the file is missing or cannot be decoded
    """
    try:
        with Image.open(file_path) as image:
            image.load()
            return image.copy()
    except (OSError, UnidentifiedImageError, Image.DecompressionBombError) as e:
        raise DecodeError(f"Failed to load image: {e}") from e


class SinusoidProcessor:
    """Processes image files into sinusoid shaded SVG documents."""

    def __init__(
        self,
        config: ShadingConfig | None = None,
        max_dimension: int | None = None,
    ):
        self.config = config or ShadingConfig()
        self.max_dimension = max_dimension

    def load_image(self, file_path: "str | Path") -> Image.Image:
        """Load an image, shrinking it to max_dimension when set."""
        image = load_image(file_path)
        if self.max_dimension:
            image = resize_to_max_dimension(image, self.max_dimension)
        return image

    def process_image(self, image: Image.Image) -> ProcessedImage:
        """Run the transform on an already decoded image."""
        document = transform(image, self.config)

        orig_width, orig_height = image.size
        samples = len(document.paths[0].points) if document.paths else 0

        return ProcessedImage(
            document=document,
            config=self.config,
            original_width=orig_width,
            original_height=orig_height,
            line_count=len(document.paths),
            samples_per_row=samples,
            total_path_length=document.total_length(),
            point_count=document.point_count(),
        )

    def process(self, file_path: "str | Path") -> ProcessedImage:
        """Execute complete pipeline for an image file.

        Args:
            file_path: Path to input image

        Returns:
            ProcessedImage with the rendered document and statistics
        """
        print("Starting sinusoid shading pipeline...")

        print("Loading image...")
        image = self.load_image(file_path)
        print(f"Loaded image with size: {image.size[0]}x{image.size[1]} pixels.")

        print("Rendering sinusoids...")
        result = self.process_image(image)

        print("Image processing complete.")
        print(f"Total lines rendered: {result.line_count}")
        print(f"Points per line: {result.samples_per_row}")
        print(f"Total path length: {result.total_path_length:.2f}")

        return result

    def save(self, result: ProcessedImage, output_path: "str | Path") -> Path:
        """Write a processed result to an SVG file."""
        return save_svg(result.document, output_path)
