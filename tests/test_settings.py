import json
import logging

import pytest

from mandelview.settings import (
    DEFAULT_SETTINGS,
    SETTINGS_PATH,
    SettingsError,
    load_settings,
)


def write(tmp_path, payload):
    path = tmp_path / "settings.json"
    path.write_text(payload if isinstance(payload, str) else json.dumps(payload))
    return str(path)


def test_bundled_settings_match_defaults():
    assert load_settings(SETTINGS_PATH) == DEFAULT_SETTINGS


def test_missing_file_falls_back_to_defaults(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="mandelview.settings"):
        settings = load_settings(str(tmp_path / "missing.json"))
    assert settings == DEFAULT_SETTINGS
    assert "Could not load" in caplog.text


def test_malformed_file_falls_back_to_defaults(tmp_path):
    assert load_settings(write(tmp_path, "{not json")) == DEFAULT_SETTINGS


def test_partial_override_is_merged(tmp_path):
    settings = load_settings(write(tmp_path, {
        "fps": 30,
        "key_bindings": {"zoom_in": ["=", "up"]},
    }))
    assert settings["fps"] == 30
    assert settings["key_bindings"]["zoom_in"] == ["=", "up"]
    assert settings["key_bindings"]["zoom_out"] == ["-"]


def test_defaults_are_not_mutated(tmp_path):
    load_settings(write(tmp_path, {"key_bindings": {"zoom_in": ["up"]}}))
    assert DEFAULT_SETTINGS["key_bindings"]["zoom_in"] == ["="]


@pytest.mark.parametrize("payload", [
    [1, 2, 3],
    {"key_bindings": 5},
    {"fps": 0},
    {"log_level": "LOUD"},
    {"color_scheme": "Nope"},
    {"key_bindings": {"teleport": ["t"]}},
    {"key_bindings": {"zoom_in": "="}},
])
def test_invalid_settings(tmp_path, payload):
    with pytest.raises(SettingsError):
        load_settings(write(tmp_path, payload))


def test_raster_size_is_not_configurable(tmp_path):
    with pytest.raises(SettingsError):
        load_settings(write(tmp_path, {"image": {"width": 7, "height": 3}}))
    assert "image" not in DEFAULT_SETTINGS
