"""
Catalog Map Viewer - Data Models

Plain value types shared by the viewport engine and the Qt widgets:
- transform.py: points, rects, reference frame, view transform
- marker.py: catalog markers pinned to the map
- interaction.py: what a finished gesture resolved to
"""

from .transform import Vec2, ScreenPoint, ContentPoint, ReferenceFrame, ScreenRect, ViewTransform
from .marker import Marker, marker_color
from .interaction import InteractionResult

__all__ = [
    'Vec2', 'ScreenPoint', 'ContentPoint', 'ReferenceFrame', 'ScreenRect', 'ViewTransform',
    'Marker', 'marker_color',
    'InteractionResult',
]
