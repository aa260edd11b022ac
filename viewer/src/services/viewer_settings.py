"""Viewer settings - user overrides for the viewport defaults.

Settings live in ~/.catalogviewer/config.json as a flat JSON object. Any key
that is missing falls back to the value in constants.py.
"""
import os
import json
import math
import logging
from dataclasses import dataclass, asdict, fields

from constants import (
    REFERENCE_WIDTH, REFERENCE_HEIGHT,
    MIN_SCALE, MAX_SCALE, ZOOM_STEP_FACTOR,
    WHEEL_ZOOM_IN_FACTOR, WHEEL_ZOOM_OUT_FACTOR,
    DRAG_THRESHOLD, PAN_REQUIRES_ZOOM, HIT_RADIUS,
    CONFIG_DIR_NAME, CONFIG_FILE_NAME
)
from models.transform import ReferenceFrame

logger = logging.getLogger(__name__)


class ViewerSettingsError(ValueError):
    """Raised when a config file holds values the viewer cannot use."""


@dataclass
class ViewerSettings:
    """Tunable viewport behaviour. Defaults come from constants.py."""
    reference_width: float = REFERENCE_WIDTH
    reference_height: float = REFERENCE_HEIGHT
    min_scale: float = MIN_SCALE
    max_scale: float = MAX_SCALE
    zoom_step_factor: float = ZOOM_STEP_FACTOR
    wheel_zoom_in_factor: float = WHEEL_ZOOM_IN_FACTOR
    wheel_zoom_out_factor: float = WHEEL_ZOOM_OUT_FACTOR
    drag_threshold: float = DRAG_THRESHOLD
    pan_requires_zoom: bool = PAN_REQUIRES_ZOOM
    hit_radius: float = HIT_RADIUS

    @property
    def reference_frame(self):
        return ReferenceFrame(self.reference_width, self.reference_height)

    def validate(self):
        """Check value ranges.

        Raises:
            ViewerSettingsError: If any value is out of range
        """
        for f in fields(self):
            value = getattr(self, f.name)
            if f.type is not bool and not math.isfinite(value):
                raise ViewerSettingsError(f"{f.name} must be a finite number, got {value!r}")
        if self.reference_width <= 0 or self.reference_height <= 0:
            raise ViewerSettingsError(
                f"Reference frame must have positive size, got "
                f"{self.reference_width}x{self.reference_height}")
        if self.min_scale <= 0:
            raise ViewerSettingsError(f"min_scale must be positive, got {self.min_scale}")
        if self.min_scale > self.max_scale:
            raise ViewerSettingsError(
                f"min_scale ({self.min_scale}) is greater than max_scale ({self.max_scale})")
        if not self.min_scale <= 1.0 <= self.max_scale:
            raise ViewerSettingsError(
                f"Scale range [{self.min_scale}, {self.max_scale}] must include 1.0")
        for name in ('zoom_step_factor', 'wheel_zoom_in_factor', 'wheel_zoom_out_factor'):
            if getattr(self, name) <= 0:
                raise ViewerSettingsError(f"{name} must be positive, got {getattr(self, name)}")
        if self.drag_threshold < 0:
            raise ViewerSettingsError(f"drag_threshold cannot be negative, got {self.drag_threshold}")
        if self.hit_radius < 0:
            raise ViewerSettingsError(f"hit_radius cannot be negative, got {self.hit_radius}")
        return self

    @classmethod
    def from_dict(cls, data):
        """Build settings from a dict, ignoring (and logging) unknown keys."""
        known = {f.name: f for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            if key not in known:
                logger.warning("Ignoring unknown viewer setting '%s'", key)
                continue
            if known[key].type is bool:
                if not isinstance(value, bool):
                    raise ViewerSettingsError(f"{key} must be true or false, got {value!r}")
                kwargs[key] = value
            else:
                if isinstance(value, bool) or not isinstance(value, (int, float)):
                    raise ViewerSettingsError(f"{key} must be a number, got {value!r}")
                kwargs[key] = float(value)
        return cls(**kwargs).validate()

    def to_dict(self):
        return asdict(self)


def default_config_path():
    return os.path.join(os.path.expanduser("~"), CONFIG_DIR_NAME, CONFIG_FILE_NAME)


def load_viewer_settings(path=None):
    """Load settings from the config file.

    Args:
        path: Config file path (default: ~/.catalogviewer/config.json)

    Returns:
        ViewerSettings (defaults if the file does not exist)

    Raises:
        ViewerSettingsError: If the file is not a JSON object or holds bad values
    """
    path = path or default_config_path()
    if not os.path.exists(path):
        logger.debug("No config at %s, using defaults", path)
        return ViewerSettings()

    with open(path, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ViewerSettingsError(f"Config file {path} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ViewerSettingsError(f"Config file {path} must contain a JSON object")

    settings = ViewerSettings.from_dict(data)
    logger.debug("Loaded viewer settings from %s", path)
    return settings


def save_viewer_settings(settings, path=None):
    """Write settings to the config file, creating its directory if needed."""
    path = path or default_config_path()
    os.makedirs(os.path.dirname(path) or '.', exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(settings.to_dict(), f, indent=2)
    return path
