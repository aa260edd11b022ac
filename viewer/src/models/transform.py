"""Geometry data structures for the map viewport.

Screen and content coordinates are separate types so a value from one space
is never silently used in the other. Dataclass equality includes the class,
so ScreenPoint(1, 2) != ContentPoint(1, 2).
"""
from dataclasses import dataclass


@dataclass
class Vec2:
    """2D vector for coordinate pairs that belong to no particular space.

    Used for translation offsets and deltas.
    """
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = vec2"""
        return iter((self.x, self.y))


@dataclass
class ScreenPoint(Vec2):
    """Pointer position in widget pixels (top-left origin, Y-down)."""


@dataclass
class ContentPoint(Vec2):
    """Position on the map in reference frame units (top-left origin, Y-down)."""


@dataclass(frozen=True)
class ReferenceFrame:
    """Logical size of the map surface that content coordinates are expressed in."""
    width: float
    height: float


@dataclass(frozen=True)
class ScreenRect:
    """On-screen rectangle of the rendered surface before pan/zoom is applied.

    Read fresh for every event; layout can change between events.
    """
    x: float
    y: float
    width: float
    height: float

    @property
    def origin(self):
        return ScreenPoint(self.x, self.y)

    def is_empty(self):
        return self.width <= 0 or self.height <= 0


@dataclass(frozen=True)
class ViewTransform:
    """Uniform scale plus translation applied to the whole surface.

    The transform origin is the surface's top-left corner:
        screen = rect.origin + translate + scale * local
    """
    scale: float = 1.0
    translate_x: float = 0.0
    translate_y: float = 0.0

    @property
    def translate(self):
        return Vec2(self.translate_x, self.translate_y)

    @classmethod
    def identity(cls):
        return cls(1.0, 0.0, 0.0)
