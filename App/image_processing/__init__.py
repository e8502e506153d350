"""Image processing pipeline for sinusoid shading.

AIDEV-NOTE: This package turns a raster image into frequency-modulated
line art. Organized into modular components:
- averaging: Collapse source rows into horizontal bands
- modulation: Band intensity to frequency, frequency to phase
- rendering: Phase to row polylines
- svg_writer: Document serialization
- processor: transform() core and the file based SinusoidProcessor
- utils: Grayscale conversion, scaling, and path statistics
"""

from .averaging import average_rows
from .modulation import integrate_phase, map_frequencies, sine_field
from .processor import SinusoidProcessor, load_image, transform
from .rendering import render
from .svg_writer import document_to_svg, save_svg

__all__ = [
    "SinusoidProcessor",
    "average_rows",
    "document_to_svg",
    "integrate_phase",
    "load_image",
    "map_frequencies",
    "render",
    "save_svg",
    "sine_field",
    "transform",
]
