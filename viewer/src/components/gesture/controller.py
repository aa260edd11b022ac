"""Gesture controller - turns raw pointer events into pans, zooms and clicks.

State machine:
    IDLE --pointer_down--> DRAGGING
    DRAGGING --pointer_move--> DRAGGING   (pans the view)
    DRAGGING --pointer_up--> IDLE         (click if the pointer barely moved)
    DRAGGING --pointer_leave--> IDLE      (gesture aborted, no click)

Wheel events zoom around the pointer and do not touch the drag state.

No Qt in here: the widget converts QMouseEvent/QWheelEvent into ScreenPoints
and the surface ScreenRect, then calls these methods.
"""
import math
import logging

from models.interaction import InteractionResult
from services.hit_tester import find_nearest
from services.viewer_settings import ViewerSettings
from services.viewport_transform import ViewportTransform
from utils.coordinate_transforms import screen_to_content
from .drag_context import IDLE, DraggingState

logger = logging.getLogger(__name__)


class GestureController:
    """Drag/click disambiguation and zoom handling for one viewport."""

    def __init__(self, viewport=None, settings=None):
        """
        Args:
            viewport: ViewportTransform to drive (a new one is created if None)
            settings: ViewerSettings (defaults if None)
        """
        self.settings = settings or ViewerSettings()
        self.viewport = viewport or ViewportTransform.from_settings(self.settings)
        self.reference_frame = self.settings.reference_frame
        self.placement_mode = False
        self.state = IDLE

    @property
    def is_dragging(self):
        return isinstance(self.state, DraggingState)

    @property
    def can_pan(self):
        """Whether a drag moves the view at the current zoom."""
        return not self.settings.pan_requires_zoom or self.viewport.scale > 1.0

    # ========================================
    # Pointer events
    # ========================================

    def pointer_down(self, point):
        """Start a gesture at point (restarts any gesture in progress)."""
        self.state = DraggingState(
            origin=point,
            drag_origin_translate=self.viewport.transform.translate,
        )

    def pointer_move(self, point):
        """Track the pointer during a gesture.

        Returns:
            bool: True if the view was panned
        """
        if not self.is_dragging:
            return False

        state = self.state
        offset = state.displacement(point)
        if not state.dragged_significantly and math.hypot(offset.x, offset.y) > self.settings.drag_threshold:
            state.dragged_significantly = True
            logger.debug("Gesture from %s became a pan", state.origin)

        if not self.can_pan:
            return False

        self.viewport.pan(
            state.drag_origin_translate.x + offset.x,
            state.drag_origin_translate.y + offset.y,
        )
        return True

    def pointer_up(self, point, screen_rect, markers=()):
        """Finish a gesture and resolve it.

        Args:
            point: ScreenPoint where the pointer was released
            screen_rect: ScreenRect of the rendered surface right now
            markers: Ordered marker collection to hit-test against

        Returns:
            InteractionResult
        """
        if not self.is_dragging:
            return InteractionResult.none()

        state = self.state
        self.state = IDLE

        if state.dragged_significantly:
            # The gesture was a pan; its release is not a click
            return InteractionResult.none()

        if screen_rect.is_empty():
            logger.warning("Click ignored: surface rect %s has no area", screen_rect)
            return InteractionResult.none()

        content_point = screen_to_content(point, screen_rect, self.viewport.transform, self.reference_frame)

        if self.placement_mode:
            logger.debug("Placement click at %s", content_point)
            return InteractionResult.place(content_point)

        marker = find_nearest(content_point, markers, self.settings.hit_radius)
        if marker is None:
            return InteractionResult.none()
        logger.debug("Selected marker %s at %s", marker.id, content_point)
        return InteractionResult.select(marker)

    def pointer_leave(self):
        """Abort the gesture in progress without emitting a click."""
        if self.is_dragging:
            logger.debug("Gesture aborted by pointer leave")
        self.state = IDLE

    def hover(self, point, screen_rect, markers=()):
        """Marker under an idle pointer, for tooltips.

        Returns:
            Marker, or None while dragging or when nothing is close enough
        """
        if self.is_dragging or screen_rect.is_empty():
            return None
        content_point = screen_to_content(point, screen_rect, self.viewport.transform, self.reference_frame)
        return find_nearest(content_point, markers, self.settings.hit_radius)

    # ========================================
    # Wheel
    # ========================================

    def wheel(self, point, screen_rect, delta):
        """Zoom one wheel tick around the pointer.

        Args:
            point: ScreenPoint under the cursor
            screen_rect: ScreenRect of the rendered surface
            delta: Wheel delta; positive (scroll up) zooms in, negative zooms out

        Returns:
            bool: True if the transform changed
        """
        if delta > 0:
            factor = self.settings.wheel_zoom_in_factor
        elif delta < 0:
            factor = self.settings.wheel_zoom_out_factor
        else:
            return False
        return self.viewport.zoom_to_point(point, screen_rect, factor)

    # ========================================
    # Imperative control
    # ========================================

    def zoom_in(self):
        self.viewport.zoom_in()

    def zoom_out(self):
        self.viewport.zoom_out()

    def reset_view(self):
        """Back to 100% with no pan; also drops any gesture in progress."""
        self.state = IDLE
        self.viewport.reset()
