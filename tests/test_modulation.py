import numpy as np
import pytest

from image_processing.averaging import average_rows
from image_processing.modulation import (
    integrate_phase,
    map_frequencies,
    samples_per_row,
    sine_field,
)
from models import ShadingConfig


@pytest.mark.parametrize(
    "width, fs, expected",
    [(4, 1.0, 4), (512, 5.0, 2560), (3, 0.5, 2), (4, 2.5, 10), (1, 0.1, 1)],
)
def test_samples_per_row(width, fs, expected):
    assert samples_per_row(width, fs) == expected


def test_solid_image_maps_to_min_freq_exactly():
    bands = np.full((3, 6), 128, dtype=np.uint8)
    config = ShadingConfig(sample_freq=2.0, min_freq=0.25, max_freq=1.0)
    freqs = map_frequencies(bands, config)
    assert freqs.shape == (3, 12)
    assert np.all(freqs == 0.25)


def test_frequencies_stay_within_range(gradient_image, small_config):
    bands = average_rows(gradient_image, small_config)
    freqs = map_frequencies(bands, small_config)
    assert freqs.min() >= small_config.min_freq - 1e-12
    assert freqs.max() <= small_config.max_freq + 1e-12
    assert freqs.min() == pytest.approx(small_config.min_freq)
    assert freqs.max() == pytest.approx(small_config.max_freq)


def test_darker_pixels_get_higher_frequency():
    bands = np.array([[0, 128, 255]], dtype=np.uint8)
    config = ShadingConfig(sample_freq=1.0, min_freq=0.1, max_freq=2.0)
    freqs = map_frequencies(bands, config)[0]
    assert freqs[0] > freqs[1] > freqs[2]


def test_rescaling_is_global_not_per_row():
    # Each row is uniform, so per-row scaling would give min_freq everywhere
    bands = np.array([[0, 0], [255, 255]], dtype=np.uint8)
    config = ShadingConfig(sample_freq=1.0, min_freq=0.1, max_freq=2.0)
    freqs = map_frequencies(bands, config)
    np.testing.assert_allclose(freqs[0], [2.0, 2.0])
    np.testing.assert_allclose(freqs[1], [0.1, 0.1])


def test_upsampling_holds_each_column():
    bands = np.array([[0, 128, 255]], dtype=np.uint8)
    config = ShadingConfig(sample_freq=2.0, min_freq=0.1, max_freq=2.0)
    freqs = map_frequencies(bands, config)[0]
    assert freqs.shape == (6,)
    assert freqs[0] == freqs[1]
    assert freqs[2] == freqs[3]
    assert freqs[4] == freqs[5]
    assert freqs[1] != freqs[2]


def test_upsampling_below_one_sample_per_column_skips_columns():
    bands = np.array([[0, 128, 255]], dtype=np.uint8)
    config = ShadingConfig(sample_freq=0.5, min_freq=0.1, max_freq=2.0)
    freqs = map_frequencies(bands, config)[0]
    # samples read columns floor(0 / 0.5) = 0 and floor(1 / 0.5) = 2
    np.testing.assert_allclose(freqs, [2.0, 0.1])


def test_phase_is_cumulative_sum_over_sample_rate():
    freqs = np.array([[1.0, 2.0, 3.0], [0.5, 0.5, 0.5]])
    phase = integrate_phase(freqs, ShadingConfig(sample_freq=2.0))
    np.testing.assert_allclose(phase, [[0.5, 1.5, 3.0], [0.25, 0.5, 0.75]])


def test_each_row_starts_its_own_phase():
    freqs = np.array([[1.0, 1.0], [3.0, 3.0]])
    phase = integrate_phase(freqs, ShadingConfig(sample_freq=1.0))
    np.testing.assert_allclose(phase[:, 0], freqs[:, 0])


def test_phase_is_monotonic(gradient_image, small_config):
    bands = average_rows(gradient_image, small_config)
    phase = integrate_phase(map_frequencies(bands, small_config), small_config)
    assert np.all(np.diff(phase, axis=1) >= 0)


def test_sine_field_is_bounded():
    phase = np.linspace(0, 50, 200).reshape(4, 50)
    values = sine_field(phase)
    assert values.min() >= -1.0
    assert values.max() <= 1.0
