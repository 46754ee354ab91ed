import json
import logging
import os

import pytest

from mandelview.config import SETTINGS_PATH, RenderConfig, default_workers, load_config, load_settings
from mandelview.coords import View
from mandelview.errors import ConfigError


def write_settings(tmp_path, data):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps(data))
    return str(path)


def test_defaults():
    config = RenderConfig().validate()
    assert (config.width, config.height) == (960, 720)
    assert config.max_iterations == 500
    assert config.bailout == 10.0
    assert config.initial_view() == View(center=complex(-0.3, 0.0), scale=275.0)
    assert config.workers == default_workers()
    assert config.redraw_interval_ms == 15


def test_default_workers_follows_cpu_count():
    assert default_workers() == (os.cpu_count() or 1)


def test_bundled_settings_file_loads():
    assert load_settings(SETTINGS_PATH) is not None
    config = load_config()
    assert config.width == 960
    assert config.palette == 'Classic'
    assert config.workers == default_workers()


def test_settings_file_values_are_used(tmp_path):
    path = write_settings(tmp_path, {"width": 320, "height": 200, "workers": 256})
    config = load_config(path)
    assert (config.width, config.height, config.workers) == (320, 200, 256)
    assert config.scale == 275.0


def test_overrides_win_and_none_is_ignored(tmp_path):
    path = write_settings(tmp_path, {"width": 320})
    config = load_config(path, width=64, height=None)
    assert config.width == 64
    assert config.height == 720


def test_missing_file_falls_back_to_defaults(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="mandelview.config"):
        config = load_config(str(tmp_path / "nope.json"))
    assert config.width == 960
    assert "Could not load" in caplog.text


def test_malformed_file_falls_back_to_defaults(tmp_path, caplog):
    path = tmp_path / "settings.json"
    path.write_text("{not json")
    with caplog.at_level(logging.WARNING, logger="mandelview.config"):
        config = load_config(str(path))
    assert config == RenderConfig()
    assert "Could not load" in caplog.text


def test_undecodable_file_falls_back_to_defaults(tmp_path, caplog):
    path = tmp_path / "settings.json"
    path.write_bytes(b'{"width": "\xff\xfe"}')
    with caplog.at_level(logging.WARNING, logger="mandelview.config"):
        config = load_config(str(path))
    assert config == RenderConfig()
    assert "Could not load" in caplog.text


def test_directory_as_settings_path_falls_back_to_defaults(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="mandelview.config"):
        config = load_config(str(tmp_path))
    assert config == RenderConfig()
    assert "Could not load" in caplog.text


def test_unknown_setting_in_file(tmp_path):
    path = write_settings(tmp_path, {"zoom": 3})
    with pytest.raises(ConfigError, match="zoom"):
        load_config(path)


def test_unknown_override():
    with pytest.raises(ConfigError, match="zoom"):
        load_config(zoom=3)


def test_file_must_hold_an_object(tmp_path):
    path = write_settings(tmp_path, [1, 2])
    with pytest.raises(ConfigError):
        load_config(path)


@pytest.mark.parametrize("field, value", [
    ("width", 0),
    ("height", -5),
    ("max_iterations", 0),
    ("workers", 0),
    ("redraw_interval_ms", 0),
    ("width", 9.5),
    ("workers", True),
    ("scale", 0),
    ("scale", -275.0),
    ("scale", float("inf")),
    ("bailout", 0.0),
    ("center_re", float("nan")),
    ("center_im", "0"),
    ("palette", "Neon"),
])
def test_invalid_values_fail_fast(field, value):
    with pytest.raises(ConfigError, match=field):
        RenderConfig(**{field: value}).validate()


def test_reference_parallelism_is_accepted():
    assert RenderConfig(workers=256).validate().workers == 256
