"""Zoom toolbar widget with zoom controls."""

from PyQt5.QtWidgets import QWidget, QHBoxLayout, QToolButton, QComboBox
from PyQt5.QtCore import pyqtSignal

from constants import ZOOM_PRESETS


class ZoomToolbar(QWidget):
	"""Toolbar with zoom out / zoom level dropdown / zoom in / reset"""

	zoomInRequested = pyqtSignal()
	zoomOutRequested = pyqtSignal()
	resetRequested = pyqtSignal()
	zoomPresetSelected = pyqtSignal(int)  # Emits zoom percentage

	def __init__(self, parent=None, presets=None):
		super().__init__(parent)
		self.presets = list(presets or ZOOM_PRESETS)

		layout = QHBoxLayout()
		layout.setContentsMargins(0, 0, 0, 0)
		layout.setSpacing(4)

		self.zoom_out_btn = QToolButton()
		self.zoom_out_btn.setText("−")
		self.zoom_out_btn.setToolTip("Zoom Out (Ctrl+-)")
		self.zoom_out_btn.clicked.connect(lambda: self.zoomOutRequested.emit())
		layout.addWidget(self.zoom_out_btn)

		# Shows the live zoom percent as its first entry, presets below
		self.zoom_combo = QComboBox()
		self.zoom_combo.setEditable(False)
		self.zoom_combo.setMinimumWidth(80)
		self.zoom_combo.addItem("100%", None)
		for preset in self.presets:
			self.zoom_combo.addItem(f"{preset}%", preset)
		self.zoom_combo.activated.connect(self._on_combo_activated)
		layout.addWidget(self.zoom_combo)

		self.zoom_in_btn = QToolButton()
		self.zoom_in_btn.setText("+")
		self.zoom_in_btn.setToolTip("Zoom In (Ctrl++)")
		self.zoom_in_btn.clicked.connect(lambda: self.zoomInRequested.emit())
		layout.addWidget(self.zoom_in_btn)

		self.reset_btn = QToolButton()
		self.reset_btn.setText("⟲")
		self.reset_btn.setToolTip("Reset View (Ctrl+0)")
		self.reset_btn.clicked.connect(lambda: self.resetRequested.emit())
		layout.addWidget(self.reset_btn)

		self.setLayout(layout)

	def _on_combo_activated(self, index):
		"""Handle user picking a preset"""
		percent = self.zoom_combo.itemData(index)
		if percent is not None:
			self.zoomPresetSelected.emit(percent)

	def set_zoom_state(self, percent, can_zoom_in=True, can_zoom_out=True):
		"""Show the current zoom level and enable/disable buttons at the limits"""
		# Block signals to prevent recursive updates
		self.zoom_combo.blockSignals(True)
		self.zoom_combo.setItemText(0, f"{percent}%")
		self.zoom_combo.setCurrentIndex(0)
		self.zoom_combo.blockSignals(False)

		self.zoom_in_btn.setEnabled(can_zoom_in)
		self.zoom_out_btn.setEnabled(can_zoom_out)

	def get_zoom_text(self):
		"""Get the zoom readout currently shown"""
		return self.zoom_combo.itemText(0)

	def connect_canvas(self, canvas):
		"""Wire this toolbar to a MapCanvas in both directions"""
		self.zoomInRequested.connect(canvas.zoom_in)
		self.zoomOutRequested.connect(canvas.zoom_out)
		self.resetRequested.connect(canvas.reset_view)
		self.zoomPresetSelected.connect(canvas.set_zoom_percent)
		canvas.viewChanged.connect(lambda: self.set_zoom_state(*canvas.zoom_state()))
		self.set_zoom_state(*canvas.zoom_state())
