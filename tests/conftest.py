"""
Shared fixtures for Catalog Map Viewer tests.

Provides reference frames, surface rects, sample markers and controllers.
"""
import sys
import os
import pytest

# Ensure viewer/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'viewer', 'src'))

# Widget tests run without a display
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')


# ── Sample catalog ───────────────────────────────────────────────────────

SAMPLE_CATALOG = [
    {'id': '1', 'name': 'Luxury Villa A-Block', 'type': 'Villa', 'listingType': 'Buy',
     'size': '250 sq.m', 'area': '2691 sq.ft', 'price': '2.5 Cr', 'sector': 'A', 'coordinates': {'x': 150, 'y': 400}},
    {'id': '2', 'name': 'Modern Apartment B-Block', 'type': 'Apartment', 'listingType': 'Rent',
     'size': '180 sq.m', 'area': '1938 sq.ft', 'price': '45,000/month', 'sector': 'B', 'coordinates': {'x': 400, 'y': 400}},
    {'id': '3', 'name': 'Premium Plot C1-Block', 'type': 'Plot', 'listingType': 'Buy',
     'size': '200 sq.m', 'area': '2153 sq.ft', 'price': '1.2 Cr', 'sector': 'C1', 'coordinates': {'x': 600, 'y': 250}},
    {'id': '4', 'name': 'Commercial Space D-Block', 'type': 'Commercial', 'listingType': 'Lease',
     'size': '300 sq.m', 'area': '3229 sq.ft', 'price': '80,000/month', 'sector': 'D', 'coordinates': {'x': 500, 'y': 400}},
]


@pytest.fixture
def reference_frame():
    """Standard 800x600 reference frame"""
    from models.transform import ReferenceFrame
    return ReferenceFrame(800.0, 600.0)


@pytest.fixture
def full_rect():
    """Surface drawn at exactly its reference size"""
    from models.transform import ScreenRect
    return ScreenRect(0.0, 0.0, 800.0, 600.0)


@pytest.fixture
def half_rect():
    """Surface drawn at half its reference size"""
    from models.transform import ScreenRect
    return ScreenRect(0.0, 0.0, 400.0, 300.0)


@pytest.fixture
def offset_rect():
    """Surface offset inside its widget and drawn at 1.5x"""
    from models.transform import ScreenRect
    return ScreenRect(37.0, 21.0, 1200.0, 900.0)


@pytest.fixture
def sample_markers():
    """The four-property sample catalog"""
    from models.marker import Marker
    return [Marker.from_dict(entry) for entry in SAMPLE_CATALOG]


@pytest.fixture
def controller():
    """Gesture controller with default settings"""
    from components.gesture.controller import GestureController
    return GestureController()
