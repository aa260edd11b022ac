"""
Catalog Map Viewer - Constants and Configuration

This module contains all constant values used throughout the application:
- Reference frame (logical map size)
- Zoom limits and step factors
- Gesture and hit-testing tolerances
- Marker palette
- Config file locations

Every value here is a default; services/viewer_settings.py can override the
tunable ones from the user's config file.
"""

# ======================================================================
# REFERENCE FRAME
# ======================================================================
# Logical size of the map image. All marker coordinates are stored in these
# units regardless of how large the map is drawn on screen.

REFERENCE_WIDTH = 800.0
REFERENCE_HEIGHT = 600.0

# ======================================================================
# ZOOM
# ======================================================================

MIN_SCALE = 0.5
MAX_SCALE = 4.0
DEFAULT_SCALE = 1.0

# Toolbar / keyboard zoom step (multiplicative)
ZOOM_STEP_FACTOR = 1.2

# Mouse wheel zoom per tick. Small steps so a continuous scroll feels smooth.
WHEEL_ZOOM_IN_FACTOR = 1.05
WHEEL_ZOOM_OUT_FACTOR = 0.95

# Preset entries for the zoom toolbar dropdown (percent)
ZOOM_PRESETS = [50, 75, 100, 150, 200, 300, 400]

# ======================================================================
# GESTURES
# ======================================================================

# Screen units the pointer may travel before a press becomes a pan
DRAG_THRESHOLD = 5.0

# When True, drag-panning is only possible while zoomed in past 100%
PAN_REQUIRES_ZOOM = False

# ======================================================================
# HIT TESTING
# ======================================================================

# Click tolerance around a marker, in reference frame units (zoom independent)
HIT_RADIUS = 20.0

# ======================================================================
# MARKERS
# ======================================================================

# Fill colors by property type (lower-case key)
MARKER_COLORS = {
    'villa':      '#22c55e',
    'apartment':  '#3b82f6',
    'plot':       '#eab308',
    'commercial': '#a855f7',
}
MARKER_COLOR_DEFAULT = '#6b7280'
MARKER_COLOR_SELECTED = '#ef4444'

# Drawn marker radius in screen pixels (does not scale with zoom)
MARKER_DRAW_RADIUS = 6

# ======================================================================
# CONFIG
# ======================================================================

CONFIG_DIR_NAME = '.catalogviewer'
CONFIG_FILE_NAME = 'config.json'
