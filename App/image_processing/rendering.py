"""Sine rendering: turn a phase field into row polylines.

AIDEV-NOTE: Each row becomes one polyline (move-to then line-to segments).
Smoothness depends only on sample density; there is no curve fitting.
Amplitude ratios above 0.5 make neighbouring rows overlap and that is
left as is.
"""

from typing import TYPE_CHECKING

import numpy as np

from .modulation import sine_field

if TYPE_CHECKING:
    from models import ShadingConfig, SinusoidDocument


def render(phase: np.ndarray, config: "ShadingConfig") -> "SinusoidDocument":
    """Render a phase field into a vector path document.

    Args:
        phase: float array (rows, samples_per_row) from integrate_phase
        config: Shading configuration (width, height, sample_freq, amplitude)

    Returns:
        SinusoidDocument sized config.width x config.height with one
        StrokePath per row
    """
    from models import SinusoidDocument, StrokePath

    fs = config.sample_freq
    rows, samples = phase.shape

    # AIDEV-NOTE: Row height comes from the requested line count. When the
    # source image is shorter than config.lines only the top `rows` bands
    # are drawn and the bottom of the document stays empty.
    row_height = config.height / config.lines
    amplitude_px = config.amplitude * row_height

    # x positions are identical for every row
    x_max = samples / fs
    x_scale = config.width / x_max
    xs = x_scale * (np.arange(samples) / fs)

    # Shift by half a row so the first sinusoid doesn't clip the top edge
    y_offsets = (np.arange(rows) + 0.5) * row_height
    ys = amplitude_px * sine_field(phase) + y_offsets[:, np.newaxis]

    x_list = xs.tolist()
    paths = [StrokePath(points=list(zip(x_list, row.tolist()))) for row in ys]

    return SinusoidDocument(width=config.width, height=config.height, paths=paths)
