# PyQt5 imports
from PyQt5.QtWidgets import QWidget, QSizePolicy, QToolTip
from PyQt5.QtCore import Qt, QRectF, QPointF, QSize, pyqtSignal
from PyQt5.QtGui import QPainter, QPixmap, QColor, QPen, QBrush

import logging

from constants import MARKER_DRAW_RADIUS
from components.gesture.controller import GestureController
from models.interaction import InteractionResult
from models.marker import marker_color
from models.transform import ScreenPoint, ScreenRect
from utils.coordinate_transforms import content_to_screen, fit_rect
from utils.logger import loggerRaise

logger = logging.getLogger(__name__)


class MapCanvas(QWidget):
	"""Map surface with markers; hosts one independent viewport.

	Qt events are converted to ScreenPoints and handed to the GestureController.
	Resolved clicks come back out as signals.
	"""

	markerSelected = pyqtSignal(object)  # Marker
	placementRequested = pyqtSignal(object)  # ContentPoint
	viewChanged = pyqtSignal()

	def __init__(self, parent=None, settings=None, image_path=None):
		super().__init__(parent)
		self.setMouseTracking(True)
		self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
		self.setMinimumSize(200, 150)

		self.controller = GestureController(settings=settings)
		self.markers = []  # Owned by the host; read-only here
		self.selected_marker_id = None
		self.hovered_marker = None
		self.pixmap = None
		if image_path:
			self.load_image(image_path)
		self._update_cursor()

	def sizeHint(self):
		frame = self.controller.reference_frame
		return QSize(int(frame.width), int(frame.height))

	# ========================================
	# Host API
	# ========================================

	def load_image(self, image_path):
		"""Load the reference map image"""
		pixmap = QPixmap(image_path)
		if pixmap.isNull():
			loggerRaise(FileNotFoundError(f"Could not load map image: {image_path}"),
						f"Could not load map image:\n{image_path}", "Map Image")
		self.pixmap = pixmap
		self.update()

	def set_markers(self, markers):
		self.markers = markers
		self.hovered_marker = None
		self.update()

	def set_selected_marker(self, marker):
		self.selected_marker_id = marker.id if marker is not None else None
		self.update()

	def set_placement_mode(self, enabled):
		self.controller.placement_mode = bool(enabled)
		self._update_cursor()
		self.update()

	@property
	def placement_mode(self):
		return self.controller.placement_mode

	@property
	def viewport(self):
		return self.controller.viewport

	def surface_rect(self):
		"""Rect the map occupies at zoom 1.0, recomputed from the current widget size"""
		return ScreenRect(*fit_rect(self.width(), self.height(), self.controller.reference_frame))

	def zoom_state(self):
		"""(percent, can_zoom_in, can_zoom_out) for toolbars"""
		viewport = self.controller.viewport
		return viewport.zoom_percent, viewport.can_zoom_in, viewport.can_zoom_out

	def zoom_in(self):
		self.controller.zoom_in()
		self._view_changed()

	def zoom_out(self):
		self.controller.zoom_out()
		self._view_changed()

	def reset_view(self):
		self.controller.reset_view()
		self._view_changed()

	def set_zoom_percent(self, percent):
		self.controller.viewport.set_scale(percent / 100.0)
		self._view_changed()

	def _view_changed(self):
		self._update_cursor()
		self.update()
		self.viewChanged.emit()

	# ========================================
	# Painting
	# ========================================

	def paintEvent(self, event):
		painter = QPainter(self)
		painter.setRenderHint(QPainter.Antialiasing)
		painter.fillRect(self.rect(), QColor(20, 20, 20))

		rect = self.surface_rect()
		if rect.is_empty():
			return
		transform = self.controller.viewport.transform

		# Map surface: pan then zoom around the surface top-left
		painter.save()
		painter.translate(rect.x + transform.translate_x, rect.y + transform.translate_y)
		painter.scale(transform.scale, transform.scale)
		surface = QRectF(0, 0, rect.width, rect.height)
		if self.pixmap is not None:
			painter.drawPixmap(surface, self.pixmap, QRectF(self.pixmap.rect()))
		else:
			painter.fillRect(surface, QColor(255, 255, 255))
		if self.placement_mode:
			painter.setPen(QPen(QColor(59, 130, 246), 2 / transform.scale))
			painter.setBrush(Qt.NoBrush)
			painter.drawRect(surface)
		painter.restore()

		# Markers keep a constant on-screen size
		frame = self.controller.reference_frame
		for marker in self.markers:
			pos = content_to_screen(marker.position, rect, transform, frame)
			selected = marker.id == self.selected_marker_id
			radius = MARKER_DRAW_RADIUS * (1.5 if selected or marker is self.hovered_marker else 1.0)
			painter.setPen(QPen(QColor(255, 255, 255), 1))
			painter.setBrush(QBrush(QColor(marker_color(marker, selected))))
			painter.drawEllipse(QPointF(pos.x, pos.y), radius, radius)

	# ========================================
	# Mouse Event Handlers
	# ========================================

	@staticmethod
	def _event_point(event):
		pos = event.pos()
		return ScreenPoint(float(pos.x()), float(pos.y()))

	def mousePressEvent(self, event):
		if event.button() == Qt.LeftButton:
			self.controller.pointer_down(self._event_point(event))
			QToolTip.hideText()
			self._update_cursor()
			event.accept()
		else:
			super().mousePressEvent(event)

	def mouseMoveEvent(self, event):
		point = self._event_point(event)
		if self.controller.is_dragging:
			if self.controller.pointer_move(point):
				self._view_changed()
			event.accept()
			return

		marker = self.controller.hover(point, self.surface_rect(), self.markers)
		if marker is not self.hovered_marker:
			self.hovered_marker = marker
			if marker is not None:
				QToolTip.showText(event.globalPos(), marker.tooltip_text(), self)
			else:
				QToolTip.hideText()
			self._update_cursor()
			self.update()
		super().mouseMoveEvent(event)

	def mouseReleaseEvent(self, event):
		if event.button() != Qt.LeftButton:
			super().mouseReleaseEvent(event)
			return

		result = self.controller.pointer_up(self._event_point(event), self.surface_rect(), self.markers)
		self._update_cursor()
		self._dispatch(result)
		event.accept()

	def leaveEvent(self, event):
		self.controller.pointer_leave()
		self.hovered_marker = None
		QToolTip.hideText()
		self._update_cursor()
		self.update()
		super().leaveEvent(event)

	def wheelEvent(self, event):
		"""Zoom around the cursor; scrolling up zooms in"""
		delta = event.angleDelta().y()
		if self.controller.wheel(self._event_point(event), self.surface_rect(), delta):
			self._view_changed()
		event.accept()

	def _dispatch(self, result):
		if result.kind == InteractionResult.SELECT:
			self.selected_marker_id = result.marker.id
			self.update()
			self.markerSelected.emit(result.marker)
		elif result.kind == InteractionResult.PLACE:
			self.placementRequested.emit(result.content_point)

	def _update_cursor(self):
		if self.controller.placement_mode:
			self.setCursor(Qt.CrossCursor)
		elif self.controller.is_dragging and self.controller.can_pan:
			self.setCursor(Qt.ClosedHandCursor)
		elif self.hovered_marker is not None:
			self.setCursor(Qt.PointingHandCursor)
		elif self.controller.can_pan:
			self.setCursor(Qt.OpenHandCursor)
		else:
			self.setCursor(Qt.ArrowCursor)
