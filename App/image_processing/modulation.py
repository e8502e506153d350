"""Frequency mapping and phase integration.

AIDEV-NOTE: Darker bands oscillate faster. Frequencies are rescaled using
the GLOBAL min/max over every band so relative brightness between rows is
preserved. Do not switch to per-row normalization, it changes the output.
"""

import math
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from models import ShadingConfig


def samples_per_row(width: int, sample_freq: float) -> int:
    """Number of points in the sample grid 0, 1/fs, 2/fs, ... < width."""
    # Tolerance keeps exact products like 4 * 0.1 * 10 from rounding up
    return max(1, int(math.ceil(width * sample_freq - 1e-9)))


def map_frequencies(bands: np.ndarray, config: "ShadingConfig") -> np.ndarray:
    """Convert averaged intensities into per-sample instantaneous frequency.

    Args:
        bands: uint8 array (rows, width) from average_rows
        config: Shading configuration (sample_freq, min_freq, max_freq)

    Returns:
        float64 array (rows, samples_per_row) with values in
        [min_freq, max_freq]

    AIDEV-NOTE: Upsampling is step/hold (nearest column to the left), which
    gives blocky frequency changes unless sample_freq is large. Keep it.
    """
    fs = config.sample_freq
    rows, width = bands.shape

    # Invert so darker pixels produce larger values
    raw = (255.0 - bands.astype(np.float64)) / 255.0

    # Reduce over the whole matrix before touching any row
    raw_min = float(raw.min())
    raw_max = float(raw.max())

    if raw_max != raw_min:
        scale = (config.max_freq - config.min_freq) / (raw_max - raw_min)
    else:
        scale = 1.0

    freqs = config.min_freq + scale * (raw - raw_min)

    # Step/hold: sample n reads column floor(n / fs)
    n = np.arange(samples_per_row(width, fs))
    columns = np.clip(np.floor(n / fs).astype(np.int64), 0, width - 1)
    return freqs[:, columns]


def integrate_phase(freqs: np.ndarray, config: "ShadingConfig") -> np.ndarray:
    """Integrate frequency along each row into a continuous phase.

    phase[r, n] = sum(freqs[r, :n + 1]) / fs. Every row restarts at its own
    left edge; there is no coupling between rows.
    """
    return np.cumsum(freqs, axis=1) / config.sample_freq


def sine_field(phase: np.ndarray) -> np.ndarray:
    """Evaluate the unit sinusoid for a phase field."""
    return np.sin(phase)
