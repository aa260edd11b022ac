"""UI components for the Catalog Map Viewer

- gesture: Qt-free pointer/wheel interaction core
- map_canvas: MapCanvas widget drawing the map and markers
- zoom_toolbar: zoom in/out/reset controls
- full_map_dialog: full-size map view in its own dialog

Widgets are imported from their modules directly so the gesture package can
be used without a QApplication.
"""
