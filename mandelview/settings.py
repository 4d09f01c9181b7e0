"""
Settings loading for the Mandelbrot visualizer.

Settings live in settings.json next to this module. A missing or unreadable
file is not fatal: a warning is logged and the built-in defaults are used.
Values that are present but make no sense raise SettingsError.
"""

import copy
import json
import logging
import os

from .colormaps import list_color_schemes
from .controls import Action


logger = logging.getLogger(__name__)

SETTINGS_PATH = os.path.join(os.path.dirname(__file__), "settings.json")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

DEFAULT_SETTINGS = {
    "title": "Mandelbrot Generator",
    "fps": 60,
    "log_level": "INFO",
    "color_scheme": "Banded",
    "key_bindings": {
        "zoom_in": ["="],
        "zoom_out": ["-"],
        "pan_up": ["w"],
        "pan_down": ["s"],
        "pan_left": ["a"],
        "pan_right": ["d"],
        "more_detail": ["right"],
        "less_detail": ["left"],
        "coarser": ["]"],
        "finer": ["["],
        "cycle_colors": ["c"],
        "reset": ["r"],
        "quit": ["escape"],
    },
}


class SettingsError(ValueError):
    """Raised when settings.json holds an invalid value."""


def _merge(base, override):
    """Recursively merge override into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_settings(path=None):
    """
    Load settings from a JSON file, merged over DEFAULT_SETTINGS.

    Args:
        path: JSON file to read (default: the bundled settings.json)

    Returns:
        Validated settings dict

    Raises:
        SettingsError if the file parses but holds invalid values
    """
    path = path or SETTINGS_PATH
    try:
        with open(path, "r") as f:
            loaded = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        logger.warning("Could not load %s: %s; using defaults", path, e)
        loaded = {}
    if not isinstance(loaded, dict):
        raise SettingsError(f"{path}: top level must be a JSON object")
    settings = _merge(DEFAULT_SETTINGS, loaded)
    validate_settings(settings)
    return settings


def validate_settings(settings):
    """Check value ranges and names; raise SettingsError on the first problem."""
    unknown = set(settings) - set(DEFAULT_SETTINGS)
    if unknown:
        # the raster size is fixed, so there is no "image" section
        raise SettingsError(f"Unknown settings: {sorted(unknown)}")

    if not isinstance(settings["key_bindings"], dict):
        raise SettingsError("key_bindings must be a JSON object")

    fps = settings["fps"]
    if not isinstance(fps, int) or isinstance(fps, bool) or fps < 1:
        raise SettingsError(f"fps must be a positive integer, got {fps!r}")

    if settings["log_level"] not in LOG_LEVELS:
        raise SettingsError(f"log_level must be one of {LOG_LEVELS}, got {settings['log_level']!r}")

    if settings["color_scheme"] not in list_color_schemes():
        raise SettingsError(f"Unknown color_scheme {settings['color_scheme']!r}")

    known = {action.value for action in Action}
    for name, keys in settings["key_bindings"].items():
        if name not in known:
            raise SettingsError(f"Unknown action in key_bindings: {name!r}")
        if not isinstance(keys, list) or not all(isinstance(k, str) for k in keys):
            raise SettingsError(f"key_bindings.{name} must be a list of key names")
