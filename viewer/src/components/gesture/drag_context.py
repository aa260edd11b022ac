"""Gesture state for the map viewport.

A single tagged value instead of several flags that must agree:
either IdleState or DraggingState, never both.
"""

from dataclasses import dataclass, field
import time

from models.transform import ScreenPoint, Vec2


@dataclass(frozen=True)
class IdleState:
    """No pointer is held down."""
    name: str = 'idle'


@dataclass
class DraggingState:
    """Pointer is held down; the gesture is not yet classified.

    origin and drag_origin_translate are fixed for the life of the gesture.
    Pan targets are always computed from them, never accumulated per move.
    """
    origin: ScreenPoint
    drag_origin_translate: Vec2
    started_at: float = field(default_factory=time.monotonic)
    dragged_significantly: bool = False
    name: str = 'dragging'

    def displacement(self, point):
        """Screen offset of point from the gesture origin."""
        return Vec2(point.x - self.origin.x, point.y - self.origin.y)


IDLE = IdleState()
