import sys
import os
import json
import logging
import argparse

# Add viewer/src to path so imports work when running directly
if __name__ == "__main__":
    current_dir = os.path.dirname(os.path.abspath(__file__))
    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

# PyQt5 imports
from PyQt5.QtWidgets import (QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QApplication,
                             QPushButton, QLabel, QStatusBar)

# Component imports
from components.map_canvas import MapCanvas
from components.zoom_toolbar import ZoomToolbar
from components.full_map_dialog import FullMapDialog

# Model / service imports
from constants import MARKER_COLORS
from models.marker import Marker
from models.transform import ContentPoint
from services.viewer_settings import load_viewer_settings, ViewerSettingsError
from utils.logger import loggerRaise, set_main_window

logger = logging.getLogger(__name__)


# Demo catalog used when no --markers file is given
SAMPLE_MARKERS = [
    {'id': '1', 'name': 'Luxury Villa A-Block', 'kind': 'Villa', 'listing_type': 'Buy',
     'size': '250 sq.m', 'area': '2691 sq.ft', 'price': '₹2.5 Cr', 'sector': 'A', 'coordinates': {'x': 150, 'y': 400}},
    {'id': '2', 'name': 'Modern Apartment B-Block', 'kind': 'Apartment', 'listing_type': 'Rent',
     'size': '180 sq.m', 'area': '1938 sq.ft', 'price': '₹45,000/month', 'sector': 'B', 'coordinates': {'x': 400, 'y': 400}},
    {'id': '3', 'name': 'Premium Plot C1-Block', 'kind': 'Plot', 'listing_type': 'Buy',
     'size': '200 sq.m', 'area': '2153 sq.ft', 'price': '₹1.2 Cr', 'sector': 'C1', 'coordinates': {'x': 600, 'y': 250}},
    {'id': '4', 'name': 'Commercial Space D-Block', 'kind': 'Commercial', 'listing_type': 'Lease',
     'size': '300 sq.m', 'area': '3229 sq.ft', 'price': '₹80,000/month', 'sector': 'D', 'coordinates': {'x': 500, 'y': 400}},
]


def load_markers(path=None):
    """Load the marker catalog from a JSON list, or the built-in sample"""
    if path is None:
        return [Marker.from_dict(entry) for entry in SAMPLE_MARKERS]
    with open(path, 'r', encoding='utf-8') as f:
        entries = json.load(f)
    if not isinstance(entries, list):
        raise ValueError(f"Marker file {path} must contain a JSON list")
    return [Marker.from_dict(entry) for entry in entries]


class CatalogViewerWindow(QMainWindow):
    """Main window: inline map, zoom controls, add/full-view actions"""

    def __init__(self, settings, markers, image_path=None):
        super().__init__()
        self.setWindowTitle("Property Catalog Map")
        self.resize(1024, 820)

        self.settings = settings
        self.image_path = image_path
        self.markers = markers
        self.selected_marker = None
        self.full_map_dialog = None

        set_main_window(self)
        self.setup_ui()

    def setup_ui(self):
        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        layout = QVBoxLayout(central_widget)

        layout.addLayout(self._build_legend())

        header = QHBoxLayout()
        self.add_btn = QPushButton("Add Property")
        self.add_btn.setCheckable(True)
        self.add_btn.toggled.connect(self.set_placement_mode)
        header.addWidget(self.add_btn)

        self.full_map_btn = QPushButton("View Full Map")
        self.full_map_btn.clicked.connect(self.open_full_map)
        header.addWidget(self.full_map_btn)

        header.addStretch(1)
        self.zoom_toolbar = ZoomToolbar(self)
        header.addWidget(self.zoom_toolbar)
        layout.addLayout(header)

        self.canvas = MapCanvas(self, settings=self.settings, image_path=self.image_path)
        self.canvas.set_markers(self.markers)
        self.canvas.markerSelected.connect(self.on_marker_selected)
        self.canvas.placementRequested.connect(self.on_placement_requested)
        layout.addWidget(self.canvas, stretch=1)
        self.zoom_toolbar.connect_canvas(self.canvas)

        self.selection_label = QLabel("No property selected")
        layout.addWidget(self.selection_label)

        self.setStatusBar(QStatusBar())

    def _build_legend(self):
        """Row of colored dots naming each property type"""
        legend = QHBoxLayout()
        self.legend_labels = {}
        for kind, color in MARKER_COLORS.items():
            label = QLabel(f"<span style=\"color:{color}\">&#9679;</span> {kind.capitalize()}")
            legend.addWidget(label)
            self.legend_labels[kind] = label
        legend.addStretch(1)
        return legend

    # ============= Placement / selection =============

    def set_placement_mode(self, enabled):
        self.canvas.set_placement_mode(enabled)
        if self.add_btn.isChecked() != enabled:
            self.add_btn.setChecked(enabled)
        if enabled:
            self.statusBar().showMessage("Click anywhere on the map to place your property")
        else:
            self.statusBar().clearMessage()

    def on_marker_selected(self, marker):
        self.selected_marker = marker
        self.canvas.set_selected_marker(marker)
        if self.full_map_dialog is not None:
            self.full_map_dialog.set_selected_marker(marker)
        self.selection_label.setText(
            f"{marker.name} | {marker.kind} | {marker.listing_type} | {marker.size} ({marker.area}) | "
            f"{marker.price} | Sector {marker.sector}")

    def on_placement_requested(self, content_point):
        """Placement is one-shot: add a marker, then leave placement mode"""
        marker = Marker.create(
            ContentPoint(content_point.x, content_point.y),
            name=f"New Property {len(self.markers) + 1}",
        )
        self.markers.append(marker)
        self.set_placement_mode(False)
        self.canvas.update()
        self.on_marker_selected(marker)
        self.statusBar().showMessage(
            f"Property placed at: ({round(content_point.x)}, {round(content_point.y)})", 5000)

    # ============= Full view =============

    def open_full_map(self):
        if self.full_map_dialog is None:
            self.full_map_dialog = FullMapDialog(self, settings=self.settings, image_path=self.image_path)
            self.full_map_dialog.markerSelected.connect(self.on_marker_selected)
            self.full_map_dialog.placementRequested.connect(self.on_placement_requested)
        self.full_map_dialog.set_markers(self.markers)
        self.full_map_dialog.set_selected_marker(self.selected_marker)
        self.full_map_dialog.set_placement_mode(self.canvas.placement_mode)
        self.full_map_dialog.exec_()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='Browse a property catalog pinned on a map image.',
    )
    parser.add_argument(
        '-i', '--image',
        help='Map image to display (PNG/JPG). A blank frame is shown if omitted.',
    )
    parser.add_argument(
        '-m', '--markers',
        help='JSON list of markers to show (default: built-in sample catalog).',
    )
    parser.add_argument(
        '-c', '--config',
        help='Viewer settings JSON (default: ~/.catalogviewer/config.json).',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging.',
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    app = QApplication(sys.argv[:1])

    try:
        settings = load_viewer_settings(args.config)
    except (ViewerSettingsError, OSError) as e:
        loggerRaise(e, "Failed to load viewer settings", "Configuration")

    try:
        markers = load_markers(args.markers)
    except (ValueError, KeyError, OSError) as e:
        loggerRaise(e, "Failed to load marker catalog", "Markers")

    window = CatalogViewerWindow(settings, markers, image_path=args.image)
    window.show()
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
