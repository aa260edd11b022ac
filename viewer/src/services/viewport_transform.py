"""Viewport transform - zoom and pan state for one map view.

Provides viewport navigation including:
- Zoom in/out/reset
- Zoom anchored to the cursor
- Absolute pan from a gesture origin

Scale is always clamped to [min_scale, max_scale]. Out-of-range requests are
absorbed silently, never raised.
"""
import math
import logging

from constants import MIN_SCALE, MAX_SCALE, DEFAULT_SCALE, ZOOM_STEP_FACTOR
from models.transform import ViewTransform
from utils.coordinate_transforms import remove_view_transform

logger = logging.getLogger(__name__)


class ViewportTransform:
    """Owns {scale, translate_x, translate_y} for a single viewport instance."""

    def __init__(self, min_scale=MIN_SCALE, max_scale=MAX_SCALE, zoom_step_factor=ZOOM_STEP_FACTOR):
        self.min_scale = min_scale
        self.max_scale = max_scale
        self.zoom_step_factor = zoom_step_factor
        self.scale = DEFAULT_SCALE
        self.translate_x = 0.0
        self.translate_y = 0.0

    @classmethod
    def from_settings(cls, settings):
        return cls(settings.min_scale, settings.max_scale, settings.zoom_step_factor)

    @property
    def transform(self):
        """Immutable snapshot of the current transform."""
        return ViewTransform(self.scale, self.translate_x, self.translate_y)

    def clamp_scale(self, scale):
        return max(self.min_scale, min(self.max_scale, scale))

    # ========================================
    # Zoom
    # ========================================

    def zoom_in(self):
        """Zoom in by one step, anchored at the surface origin."""
        self._set_scale(self.scale * self.zoom_step_factor)

    def zoom_out(self):
        """Zoom out by one step, anchored at the surface origin."""
        self._set_scale(self.scale / self.zoom_step_factor)

    def set_scale(self, scale):
        """Set zoom to a specific scale (clamped)."""
        self._set_scale(scale)

    def _set_scale(self, scale):
        new_scale = self.clamp_scale(scale)
        if new_scale != scale:
            logger.debug("Scale %.4f clamped to %.4f", scale, new_scale)
        self.scale = new_scale

    def zoom_to_point(self, screen_point, screen_rect, zoom_factor):
        """Zoom by a factor while keeping the content under screen_point fixed.

        Uses the current scale and translation, so repeated small steps from a
        continuous wheel gesture compose without drift.

        Args:
            screen_point: ScreenPoint to anchor on
            screen_rect: ScreenRect of the rendered surface
            zoom_factor: Multiplier applied to the current scale

        Returns:
            bool: True if the transform changed
        """
        if not math.isfinite(zoom_factor) or zoom_factor <= 0:
            logger.debug("Ignoring zoom factor %r", zoom_factor)
            return False

        new_scale = self.clamp_scale(self.scale * zoom_factor)
        if new_scale == self.scale:
            return False

        # Surface point under the cursor before rescaling
        anchor = remove_view_transform(screen_point, screen_rect, self.transform)

        # Choose translation so the same surface point maps back to screen_point
        self.translate_x = screen_point.x - screen_rect.x - anchor.x * new_scale
        self.translate_y = screen_point.y - screen_rect.y - anchor.y * new_scale
        self.scale = new_scale
        return True

    # ========================================
    # Pan / reset
    # ========================================

    def pan(self, translate_x, translate_y):
        """Set the translation (absolute, not incremental)."""
        self.translate_x = translate_x
        self.translate_y = translate_y

    def reset(self):
        """Reset zoom to 100% and remove pan."""
        self.scale = DEFAULT_SCALE
        self.translate_x = 0.0
        self.translate_y = 0.0

    # ========================================
    # Queries
    # ========================================

    @property
    def zoom_percent(self):
        """Current zoom as a rounded integer percentage."""
        return int(round(self.scale * 100))

    @property
    def can_zoom_in(self):
        return self.scale < self.max_scale

    @property
    def can_zoom_out(self):
        return self.scale > self.min_scale
