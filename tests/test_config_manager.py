import json

from config_manager import ConfigManager
from models import ShadingConfig


def test_missing_file_returns_defaults(tmp_path):
    manager = ConfigManager(tmp_path / "missing.json")
    assert manager.load() == ShadingConfig()


def test_save_then_load(tmp_path):
    manager = ConfigManager(tmp_path / "config.json")
    config = ShadingConfig(lines=20, width=640, sample_freq=8.0, amplitude=0.7)

    success, error = manager.save(config)

    assert success and error is None
    assert manager.load() == config


def test_partial_file_falls_back_per_field(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"lines": 12, "max_freq": 1}))

    config = ConfigManager(path).load()

    assert config.lines == 12
    assert config.max_freq == 1.0
    assert isinstance(config.max_freq, float)
    assert config.width == ShadingConfig().width


def test_corrupt_file_warns_and_returns_defaults(tmp_path, capsys):
    path = tmp_path / "config.json"
    path.write_text("{not json")

    assert ConfigManager(path).load() == ShadingConfig()
    assert "Warning" in capsys.readouterr().out


def test_save_failure_is_reported(tmp_path):
    manager = ConfigManager(tmp_path / "no_dir" / "config.json")
    success, error = manager.save(ShadingConfig())
    assert not success
    assert error
