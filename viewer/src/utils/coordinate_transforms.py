"""Coordinate transformation utilities for the map viewport.

Provides conversion between coordinate systems:
- Screen space (widget pixels, Y-down)
- Surface space (pixels relative to the unscaled surface top-left)
- Normalized space (0-1 fraction of the rendered surface)
- Content space (reference frame units, e.g. 800x600)

All functions are pure: same inputs, same outputs, no state.
"""
import logging

from models.transform import ContentPoint, ScreenPoint, Vec2

logger = logging.getLogger(__name__)


def remove_view_transform(screen_point, screen_rect, transform):
	"""Undo pan and zoom, giving a point relative to the unscaled surface top-left.

	Args:
		screen_point: ScreenPoint in widget pixels
		screen_rect: ScreenRect of the rendered surface
		transform: ViewTransform currently applied to the surface

	Returns:
		Vec2 in surface pixels at zoom=1.0
	"""
	local_x = (screen_point.x - screen_rect.x - transform.translate_x) / transform.scale
	local_y = (screen_point.y - screen_rect.y - transform.translate_y) / transform.scale
	return Vec2(local_x, local_y)


def apply_view_transform(surface_pos, screen_rect, transform):
	"""Apply zoom then pan to a surface-relative point (inverse of remove_view_transform).

	Returns:
		ScreenPoint in widget pixels
	"""
	screen_x = screen_rect.x + transform.translate_x + surface_pos.x * transform.scale
	screen_y = screen_rect.y + transform.translate_y + surface_pos.y * transform.scale
	return ScreenPoint(screen_x, screen_y)


def screen_to_content(screen_point, screen_rect, transform, reference_frame):
	"""Convert a pointer position to content (reference frame) coordinates.

	The surface may be drawn at any size (responsive layout), so the point is
	first normalized by the rendered size and then rescaled to the reference
	frame.

	Args:
		screen_point: ScreenPoint in widget pixels
		screen_rect: ScreenRect of the rendered surface at event time
		transform: ViewTransform currently applied
		reference_frame: ReferenceFrame content coordinates are expressed in

	Returns:
		ContentPoint, or ContentPoint(0, 0) if the rect has no area
	"""
	if screen_rect.is_empty():
		logger.warning("screen_to_content called with empty surface rect %s", screen_rect)
		return ContentPoint(0.0, 0.0)

	surface_pos = remove_view_transform(screen_point, screen_rect, transform)

	# Surface pixels -> 0-1 fraction of the rendered size
	frac_x = surface_pos.x / screen_rect.width
	frac_y = surface_pos.y / screen_rect.height

	# 0-1 fraction -> reference frame units
	return ContentPoint(frac_x * reference_frame.width, frac_y * reference_frame.height)


def content_to_screen_fraction(content_point, reference_frame):
	"""Convert content coordinates to a 0-1 fraction of the surface.

	Used to position markers relative to the surface. The view transform is
	applied to the whole surface by the caller, so it is not involved here.

	Returns:
		(x_frac, y_frac) tuple
	"""
	return (content_point.x / reference_frame.width,
			content_point.y / reference_frame.height)


def content_to_screen(content_point, screen_rect, transform, reference_frame):
	"""Convert content coordinates to widget pixels (inverse of screen_to_content).

	Returns:
		ScreenPoint in widget pixels
	"""
	frac_x, frac_y = content_to_screen_fraction(content_point, reference_frame)
	surface_pos = Vec2(frac_x * screen_rect.width, frac_y * screen_rect.height)
	return apply_view_transform(surface_pos, screen_rect, transform)


def fit_rect(container_width, container_height, reference_frame, offset_x=0, offset_y=0):
	"""Largest rect with the reference frame's aspect ratio centered in a container.

	Args:
		container_width, container_height: Available space in pixels
		reference_frame: ReferenceFrame to fit
		offset_x, offset_y: Container position within the widget

	Returns:
		(x, y, width, height) tuple in widget pixels
	"""
	if container_width <= 0 or container_height <= 0:
		return (offset_x, offset_y, 0.0, 0.0)

	scale = min(container_width / reference_frame.width, container_height / reference_frame.height)
	width = reference_frame.width * scale
	height = reference_frame.height * scale

	x = offset_x + (container_width - width) / 2
	y = offset_y + (container_height - height) / 2
	return (x, y, width, height)
