"""
Catalog Map Viewer - Gesture Handling

Qt-free interaction core for the map widgets:
- controller.py: GestureController state machine (pan / click / wheel zoom)
- drag_context.py: IdleState / DraggingState gesture state
"""

from .drag_context import IdleState, DraggingState, IDLE
from .controller import GestureController

__all__ = ['IdleState', 'DraggingState', 'IDLE', 'GestureController']
