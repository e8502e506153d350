import dataclasses
import math
import re
import xml.etree.ElementTree as ET

import numpy as np
import pytest
from PIL import Image

from errors import DecodeError, ValidationError, WriteError
from image_processing import SinusoidProcessor, load_image, save_svg, transform
from image_processing.svg_writer import XML_PREFACE
from models import ShadingConfig

SVG_NS = "{http://www.w3.org/2000/svg}"


@pytest.mark.parametrize(
    "changes",
    [
        {"lines": 0},
        {"width": 0},
        {"height": 0},
        {"sample_freq": 0.0},
        {"sample_freq": -1.0},
        {"min_freq": 0.0},
        {"min_freq": 2.0, "max_freq": 1.0},
        {"amplitude": -0.1},
        {"max_freq": math.inf},
        {"sample_freq": math.nan},
    ],
)
def test_invalid_config_is_rejected(gray_image, changes):
    config = dataclasses.replace(ShadingConfig(), **changes)
    with pytest.raises(ValidationError):
        transform(gray_image, config)


def test_empty_image_is_rejected():
    with pytest.raises(ValidationError):
        transform(np.zeros((0, 5), dtype=np.uint8), ShadingConfig())


def test_config_is_immutable():
    config = ShadingConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.lines = 10  # type: ignore[misc]


def test_builders_return_new_configs():
    config = ShadingConfig()
    changed = config.with_lines(10).with_frequency_range(0.2, 0.4).with_amplitude(0.6)
    assert config.lines == 64
    assert (changed.lines, changed.min_freq, changed.max_freq, changed.amplitude) == (
        10,
        0.2,
        0.4,
        0.6,
    )
    assert changed.with_size(20, 30).width == 20


def test_defaults():
    config = ShadingConfig()
    assert (config.lines, config.width, config.height) == (64, 512, 512)
    assert config.sample_freq == 5.0
    assert (config.min_freq, config.max_freq, config.amplitude) == (0.001, 2.0, 0.4)


def test_transform_is_deterministic(gradient_image, small_config):
    first = transform(gradient_image, small_config).to_svg()
    second = transform(gradient_image.copy(), small_config).to_svg()
    assert first == second


def test_svg_has_one_path_with_a_subpath_per_row(gradient_image, small_config):
    document = transform(gradient_image, small_config)
    root = ET.fromstring(document.to_svg())

    assert root.attrib["width"] == str(small_config.width)
    assert root.attrib["height"] == str(small_config.height)
    assert [float(v) for v in root.attrib["viewBox"].split()] == [
        0,
        0,
        small_config.width,
        small_config.height,
    ]

    paths = root.findall(f"{SVG_NS}path")
    assert len(paths) == 1
    assert paths[0].attrib["fill"] == "none"
    assert paths[0].attrib["stroke"] == "black"

    d = paths[0].attrib["d"]
    samples = len(document.paths[0].points)
    assert len(re.findall("M", d)) == small_config.lines
    assert len(re.findall("L", d)) == small_config.lines * (samples - 1)


def test_load_image_rejects_garbage(tmp_path):
    bad = tmp_path / "not_an_image.png"
    bad.write_bytes(b"definitely not a png")
    with pytest.raises(DecodeError):
        load_image(bad)


def test_load_image_rejects_missing_file(tmp_path):
    with pytest.raises(DecodeError):
        load_image(tmp_path / "missing.png")


def test_processor_reports_statistics(png_file, small_config):
    result = SinusoidProcessor(small_config).process(png_file)

    assert (result.original_width, result.original_height) == (64, 32)
    assert result.line_count == small_config.lines
    assert result.samples_per_row == 128
    assert result.point_count == small_config.lines * 128
    assert result.total_path_length >= small_config.lines * small_config.width * 0.99


def test_processor_shrinks_large_inputs(tmp_path):
    path = tmp_path / "big.png"
    Image.new("L", (400, 200), 50).save(path)
    processor = SinusoidProcessor(ShadingConfig(lines=4), max_dimension=100)
    image = processor.load_image(path)
    assert image.size == (100, 50)


def test_save_writes_standalone_svg(tmp_path, gray_image):
    document = transform(gray_image, ShadingConfig(lines=2, width=4, height=4))
    written = save_svg(document, tmp_path / "out.svg")

    content = written.read_text(encoding="utf-8")
    assert content.startswith(XML_PREFACE)
    assert ET.fromstring(content[len(XML_PREFACE):]).tag == f"{SVG_NS}svg"


def test_save_failure_raises_write_error(tmp_path, gray_image):
    document = transform(gray_image, ShadingConfig(lines=2, width=4, height=4))
    with pytest.raises(WriteError):
        save_svg(document, tmp_path / "missing_dir" / "out.svg")
