"""Data models and constants for the sinusoid shading pipeline."""

import dataclasses
import math
from dataclasses import dataclass, field
from pathlib import Path

from errors import ValidationError

# AIDEV-NOTE: Defaults mirror the command line flags - keep in sync with cli.py
DEFAULT_LINES = 64
DEFAULT_WIDTH = 512
DEFAULT_HEIGHT = 512
DEFAULT_SAMPLE_FREQ = 5.0
DEFAULT_MIN_FREQ = 0.001
DEFAULT_MAX_FREQ = 2.0
DEFAULT_AMPLITUDE = 0.4

# Largest input edge the preview window works with (pixels)
MAX_INPUT_DIMENSION = 1024

# Configuration file path
CONFIG_FILE = Path.home() / ".sinusoid_shading_config.json"


@dataclass(frozen=True)
class ShadingConfig:
    """Parameters for one sinusoid shading transform.

    AIDEV-NOTE: Immutable. UI code must build a new config with the
    with_* builders instead of mutating fields in place.
    """

    lines: int = DEFAULT_LINES  # Number of sinusoids (rows)
    width: int = DEFAULT_WIDTH  # Output document width
    height: int = DEFAULT_HEIGHT  # Output document height
    sample_freq: float = DEFAULT_SAMPLE_FREQ  # Samples per source column
    min_freq: float = DEFAULT_MIN_FREQ  # Frequency used for the lightest band
    max_freq: float = DEFAULT_MAX_FREQ  # Frequency used for the darkest band
    amplitude: float = DEFAULT_AMPLITUDE  # Ratio of row height (>0.5 overlaps)

    def validate(self) -> "ShadingConfig":
        """Check that the config is safe to use numerically.

        Returns:
            The same config, to allow chaining

        Raises:
            ValidationError: If any field would break the transform
        """
        for name in ("sample_freq", "min_freq", "max_freq", "amplitude"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValidationError(f"{name} must be a finite number, got {value}")

        if self.lines <= 0:
            raise ValidationError(f"lines must be positive, got {self.lines}")
        if self.width <= 0:
            raise ValidationError(f"width must be positive, got {self.width}")
        if self.height <= 0:
            raise ValidationError(f"height must be positive, got {self.height}")
        if self.sample_freq <= 0:
            raise ValidationError(
                f"sample_freq must be positive, got {self.sample_freq}"
            )
        if self.min_freq <= 0:
            raise ValidationError(f"min_freq must be positive, got {self.min_freq}")
        if self.min_freq > self.max_freq:
            raise ValidationError(
                f"min_freq ({self.min_freq}) must not exceed max_freq ({self.max_freq})"
            )
        if self.amplitude < 0:
            raise ValidationError(
                f"amplitude must not be negative, got {self.amplitude}"
            )
        return self

    # --- Typed builders ---

    def with_lines(self, lines: int) -> "ShadingConfig":
        return dataclasses.replace(self, lines=int(lines))

    def with_size(self, width: int, height: int) -> "ShadingConfig":
        return dataclasses.replace(self, width=int(width), height=int(height))

    def with_sample_freq(self, sample_freq: float) -> "ShadingConfig":
        return dataclasses.replace(self, sample_freq=float(sample_freq))

    def with_frequency_range(
        self, min_freq: float, max_freq: float
    ) -> "ShadingConfig":
        return dataclasses.replace(
            self, min_freq=float(min_freq), max_freq=float(max_freq)
        )

    def with_amplitude(self, amplitude: float) -> "ShadingConfig":
        return dataclasses.replace(self, amplitude=float(amplitude))


# --- Vector output models ---


@dataclass
class StrokePath:
    """A single row polyline.

    AIDEV-NOTE: Points are in document coordinates, ordered by increasing
    sample index. The first point is the move-to, the rest are line-to.
    """

    points: "list[tuple[float, float]]"


@dataclass
class SinusoidDocument:
    """Vector path document holding one polyline per row."""

    width: int
    height: int
    paths: "list[StrokePath]" = field(default_factory=list)

    # Static stroke styling
    stroke: str = "black"
    stroke_width: float = 1
    fill: str = "none"

    def to_svg(self) -> str:
        """Serialize to an SVG string."""
        from image_processing.svg_writer import document_to_svg

        return document_to_svg(self)

    def total_length(self) -> float:
        """Total stroke length in document units."""
        from image_processing.utils import calculate_total_length

        return calculate_total_length(self.paths)

    def point_count(self) -> int:
        """Total number of emitted points."""
        from image_processing.utils import count_points

        return count_points(self.paths)


@dataclass
class ProcessedImage:
    """Result of the file based processing pipeline."""

    document: SinusoidDocument
    config: ShadingConfig

    # Source image dimensions (pixels)
    original_width: int = 0
    original_height: int = 0

    # Effective rows and points per row actually rendered
    line_count: int = 0
    samples_per_row: int = 0

    # Statistics
    total_path_length: float = 0.0
    point_count: int = 0
