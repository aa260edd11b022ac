"""Full-size map view in its own dialog."""

from PyQt5.QtWidgets import QDialog, QVBoxLayout, QHBoxLayout, QLabel
from PyQt5.QtCore import pyqtSignal

from .map_canvas import MapCanvas
from .zoom_toolbar import ZoomToolbar


class FullMapDialog(QDialog):
	"""Large map window with its own viewport.

	The dialog's canvas never shares zoom/pan with the inline map; its view is
	reset whenever the dialog closes.
	"""

	markerSelected = pyqtSignal(object)
	placementRequested = pyqtSignal(object)

	def __init__(self, parent=None, settings=None, image_path=None):
		super().__init__(parent)
		self.setWindowTitle("Property Map - Full View")
		self.resize(1200, 900)

		layout = QVBoxLayout(self)
		header = QHBoxLayout()
		self.hint_label = QLabel()
		header.addWidget(self.hint_label, stretch=1)
		self.zoom_toolbar = ZoomToolbar(self)
		header.addWidget(self.zoom_toolbar)
		layout.addLayout(header)

		self.canvas = MapCanvas(self, settings=settings, image_path=image_path)
		layout.addWidget(self.canvas, stretch=1)
		self.zoom_toolbar.connect_canvas(self.canvas)

		self.canvas.markerSelected.connect(self.markerSelected)
		self.canvas.placementRequested.connect(self._on_placement_requested)
		self._update_hint()

	def set_markers(self, markers):
		self.canvas.set_markers(markers)

	def set_selected_marker(self, marker):
		self.canvas.set_selected_marker(marker)

	def set_placement_mode(self, enabled):
		self.canvas.set_placement_mode(enabled)
		self._update_hint()

	def _on_placement_requested(self, content_point):
		self.placementRequested.emit(content_point)
		self.accept()

	def _update_hint(self):
		if self.canvas.placement_mode:
			self.hint_label.setText("Click anywhere to place new property")
		else:
			self.hint_label.setText("Drag to pan, scroll to zoom, click a property to select it")

	def done(self, result):
		"""Reset zoom/pan on every close path (accept, reject, window close)"""
		self.canvas.reset_view()
		super().done(result)
