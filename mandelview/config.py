"""
Startup configuration for the renderer.

Defaults live in settings.json next to this file. The file is optional:
when it is missing or unreadable the built-in defaults are used. Values
can be overridden per call with keyword arguments to load_config().
Every RenderConfig is validated before use so that bad numbers fail at
startup instead of inside a render worker.
"""

import dataclasses
import json
import logging
import math
import os
from dataclasses import dataclass

from .coords import View
from .errors import ConfigError
from .palette import PALETTES


logger = logging.getLogger(__name__)

SETTINGS_PATH = os.path.join(os.path.dirname(__file__), 'settings.json')


def default_workers():
    """Parallelism matching the available CPUs."""
    return os.cpu_count() or 1


@dataclass(frozen=True)
class RenderConfig:
    """Viewport, iteration and parallelism settings."""

    width: int = 960
    height: int = 720
    max_iterations: int = 500
    bailout: float = 10.0
    scale: float = 275.0
    center_re: float = -0.3
    center_im: float = 0.0
    workers: int = dataclasses.field(default_factory=default_workers)
    palette: str = 'Classic'
    redraw_interval_ms: int = 15

    def validate(self):
        """
        Check every field, raising ConfigError on the first bad one.

        Returns:
            self, so calls can be chained
        """
        for name in ('width', 'height', 'max_iterations', 'workers', 'redraw_interval_ms'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
            if value <= 0:
                raise ConfigError(f"{name} must be positive, got {value}")

        for name in ('bailout', 'scale', 'center_re', 'center_im'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"{name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ConfigError(f"{name} must be finite, got {value}")

        if self.bailout <= 0:
            raise ConfigError(f"bailout must be positive, got {self.bailout}")
        if self.scale <= 0:
            raise ConfigError(f"scale must be positive, got {self.scale}")
        if self.palette not in PALETTES:
            raise ConfigError(
                f"unknown palette {self.palette!r}, expected one of {sorted(PALETTES)}"
            )
        return self

    def initial_view(self):
        return View(center=complex(self.center_re, self.center_im), scale=self.scale)


def load_settings(path=SETTINGS_PATH):
    """
    Load settings from a JSON file.

    Returns:
        dict of settings, or None if the file is missing, unreadable
        or not valid UTF-8 JSON
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    # JSONDecodeError and UnicodeDecodeError are both ValueErrors
    except (OSError, ValueError) as e:
        logger.warning("Could not load %s: %s", path, e)
        return None


def load_config(path=SETTINGS_PATH, **overrides):
    """
    Build a validated RenderConfig from settings.json plus overrides.

    Overrides whose value is None are ignored, so command line flags can
    be passed straight through.

    Raises:
        ConfigError on unknown keys or invalid values
    """
    known = {f.name for f in dataclasses.fields(RenderConfig)}
    values = {}

    settings = load_settings(path)
    if settings is not None:
        if not isinstance(settings, dict):
            raise ConfigError(f"{path} must contain a JSON object")
        unknown = sorted(set(settings) - known)
        if unknown:
            raise ConfigError(f"unknown settings in {path}: {', '.join(unknown)}")
        values.update(settings)

    for key, value in overrides.items():
        if key not in known:
            raise ConfigError(f"unknown setting {key!r}")
        if value is not None:
            values[key] = value

    # null workers in settings.json means one per CPU
    if values.get('workers') is None:
        values.pop('workers', None)

    return RenderConfig(**values).validate()
